"""Array puzzles: searching, rotating, counting and rearranging integer lists."""

from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, pairwise
from operator import xor

_VALUE_LIMIT = 1_000_000


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` with ``i != j`` and ``nums[i] + nums[j] == target``.

    The largest such ``i`` wins, paired with the smallest matching ``j``.
    ``[0, 0]`` is returned when no pair exists.
    """
    positions: dict[int, list[int]] = {}
    for index, value in enumerate(nums):
        slots = positions.setdefault(value, [])
        if len(slots) < 2:
            slots.append(index)
    for i, value in reversed(list(enumerate(nums))):
        for j in positions.get(target - value, ()):
            if j != i:
                return [i, j]
    return [0, 0]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average over all contiguous windows of length ``k``."""
    if not 1 <= k <= len(nums):
        raise ValueError("window length must be between 1 and the list length")
    window = best = sum(nums[:k])
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1 if it is absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def count_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Number of non-empty contiguous subarrays whose elements sum to ``goal``."""
    seen = Counter({0: 1})
    total = 0
    for prefix in accumulate(nums):
        total += seen[prefix - goal]
        seen[prefix] += 1
    return total


def _is_odd(value: int) -> bool:
    # A truncating remainder never equals 1 for negatives, so they stay with the evens.
    return value > 0 and value % 2 == 1


def sort_by_parity(nums: Sequence[int]) -> list[int]:
    """Evens in their original order, followed by the odds in reverse order."""
    evens = [value for value in nums if not _is_odd(value)]
    odds = [value for value in nums if _is_odd(value)]
    return evens + odds[::-1]


def lucky_numbers(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values that are the minimum of their row and the maximum of their column."""
    columns = list(zip(*matrix))
    lucky = []
    for row in matrix:
        position = min(range(len(row)), key=row.__getitem__)
        value = row[position]
        if max(columns[position]) <= value:
            lucky.append(value)
    return lucky


def special_array(nums: Sequence[int]) -> int:
    """The ``x`` such that exactly ``x`` elements are at least ``x``, or -1."""
    ordered = sorted(nums)
    size = len(ordered)
    return next(
        (x for x in range(1, size + 1) if size - bisect_left(ordered, x) == x),
        -1,
    )


def count_identical_pairs(nums: Sequence[int]) -> int:
    """Number of index pairs ``i < j`` with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a non-decreasing list rotated by some amount."""
    if not nums:
        raise ValueError("the list must not be empty")
    descents = sum(left > right for left, right in pairwise(nums))
    if nums[0] < nums[-1]:
        return descents == 0
    return descents <= 1


def maximum_happiness_sum(happiness: Sequence[int], k: int) -> int:
    """Total happiness from picking ``k`` children, each pick lowering the rest by one."""
    if not 0 <= k <= len(happiness):
        raise ValueError("k must be between 0 and the number of children")
    ordered = sorted(happiness, reverse=True)
    return sum(max(value - turn, 0) for turn, value in enumerate(ordered[:k]))


def min_operations_to_empty(nums: Sequence[int]) -> int:
    """Fewest removals of two or three equal elements that empty ``nums``, or -1."""
    counts = Counter(nums)
    if any(not 0 <= value < _VALUE_LIMIT for value in counts):
        raise ValueError(f"values must lie in [0, {_VALUE_LIMIT})")
    if 1 in counts.values():
        return -1
    return sum(-(-count // 3) for count in counts.values())


def min_operations_to_xor(nums: Sequence[int], k: int) -> int:
    """Fewest single-bit flips so that the XOR of ``nums`` equals ``k``."""
    if k < 0 or any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    return bin(reduce(xor, nums, 0) ^ k).count("1")