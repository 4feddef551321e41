"""Subset counting and connectivity through shared prime factors."""

from collections import Counter
from collections.abc import Sequence


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, a: int) -> int:
        """Representative of the set holding ``a``."""
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already one."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


def smallest_prime_factors(n: int) -> list[int]:
    """Table of length ``n + 2`` mapping each ``i`` to its smallest prime factor.

    Entries 0 and 1, and ``n + 1``, map to themselves.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    factors = list(range(n + 2))
    for candidate in range(2, n + 1):
        if factors[candidate] != candidate:
            continue
        for multiple in range(2 * candidate, n + 1, candidate):
            if factors[multiple] == multiple:
                factors[multiple] = candidate
    return factors


def beautiful_subsets(nums: Sequence[int], k: int) -> int:
    """Count non-empty subsets with no two elements differing by exactly ``k``."""
    chosen: Counter[int] = Counter()

    def count_from(index: int) -> int:
        if index == len(nums):
            return 1
        total = count_from(index + 1)
        value = nums[index]
        if not (k >= 0 and (chosen[value - k] or chosen[value + k])):
            chosen[value] += 1
            total += count_from(index + 1)
            chosen[value] -= 1
        return total

    return count_from(0) - 1


def can_traverse_all_pairs(nums: Sequence[int]) -> bool:
    """Whether every pair of values is linked by a chain of shared prime factors."""
    if not nums:
        raise ValueError("the list must not be empty")
    if len(nums) == 1:
        return True
    smallest = min(nums)
    if smallest < 0:
        raise ValueError("values must not be negative")
    if smallest == 1:
        return False
    largest = max(nums)
    factors = smallest_prime_factors(largest)
    groups = DisjointSet(largest + 1)
    for value in nums:
        remaining = value
        while remaining > 1:
            prime = factors[remaining]
            groups.union(prime, value)
            while remaining % prime == 0:
                remaining //= prime
    root = groups.find(nums[0])
    return all(groups.find(value) == root for value in nums[1:])