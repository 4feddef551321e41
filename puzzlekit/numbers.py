"""Integer puzzles: digit reversal, palindromes, attendance records and pivots."""

from math import isqrt

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MOD = 1_000_000_007


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if reversed_value < INT_MIN or reversed_value > INT_MAX:
        return 0
    return reversed_value


def is_palindrome(x: int) -> bool:
    """Return True if ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def check_record(n: int) -> int:
    """Count attendance records of length ``n`` eligible for an award.

    A record is a string over 'P', 'A' and 'L' with fewer than two 'A'
    and never three consecutive 'L'. The count is taken modulo 10**9 + 7.
    """
    if n < 0:
        raise ValueError("record length must not be negative")
    # State: (absences so far, trailing consecutive lates) -> count.
    counts = {(absences, lates): 0 for absences in range(2) for lates in range(3)}
    counts[0, 0] = 1
    for _ in range(n):
        following = dict.fromkeys(counts, 0)
        for (absences, lates), count in counts.items():
            if not count:
                continue
            following[absences, 0] += count
            if absences == 0:
                following[1, 0] += count
            if lates < 2:
                following[absences, lates + 1] += count
        counts = {state: value % MOD for state, value in following.items()}
    return sum(counts.values()) % MOD


def pivot_integer(n: int) -> int:
    """Return ``x`` with ``1 + ... + x == x + ... + n``, or -1 if none exists."""
    if n < 1:
        return -1
    total = n * (n + 1) // 2
    root = isqrt(total)
    return root if root * root == total else -1