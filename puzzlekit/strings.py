"""String puzzles."""

import re
from fractions import Fraction
from itertools import pairwise

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_EXPRESSION = re.compile(r"(?:[+-]?\d+/\d+)+")
_TERM = re.compile(r"[+-]?\d+/\d+")


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as 0."""
    values = [_ROMAN.get(char, 0) for char in s]
    return sum(
        -value if value < following else value
        for value, following in zip(values, values[1:] + [0])
    )


def find_lus_length(a: str, b: str) -> int:
    """Length of the longest uncommon subsequence of two strings, or -1."""
    if a == b:
        return -1
    return max(len(a), len(b))


def reverse_str(s: str, k: int) -> str:
    """Reverse the first ``k`` characters of every ``2k`` block of ``s``."""
    if k <= 0:
        raise ValueError("k must be positive")
    return "".join(
        s[start : start + k][::-1] + s[start + k : start + 2 * k]
        for start in range(0, len(s), 2 * k)
    )


def fraction_addition(expression: str) -> str:
    """Evaluate a sum of fractions such as ``"-1/2+1/3"`` as ``"p/q"`` in lowest terms."""
    if not _EXPRESSION.fullmatch(expression):
        raise ValueError(f"malformed fraction expression: {expression!r}")
    total = sum((Fraction(term) for term in _TERM.findall(expression)), Fraction(0))
    return f"{total.numerator}/{total.denominator}"


def check_valid_string(s: str) -> bool:
    """Check balance of '(' and ')' where '*' may stand for either or nothing.

    Any character other than '(' and '*' is treated as ')'.
    """
    lowest = highest = 0
    for char in s:
        if char == "(":
            lowest += 1
            highest += 1
        elif char == "*":
            lowest -= 1
            highest += 1
        else:
            lowest -= 1
            highest -= 1
        if highest < 0:
            return False
        lowest = max(lowest, 0)
    return lowest == 0


def custom_sort_string(order: str, s: str) -> str:
    """Sort ``s`` by the position of each character in ``order``.

    Characters absent from ``order`` come last.
    """
    rank = {char: position for position, char in reversed(list(enumerate(order)))}
    return "".join(sorted(s, key=lambda char: rank.get(char, len(order))))


def max_unique_concat_length(arr: list[str]) -> int:
    """Longest concatenation of a subsequence of ``arr`` with all characters distinct."""
    masks = [0]
    best = 0
    for word in arr:
        if len(set(word)) != len(word):
            continue
        word_mask = 0
        for char in word:
            word_mask |= 1 << ord(char)
        for mask in list(reversed(masks)):
            if mask & word_mask:
                continue
            combined = mask | word_mask
            masks.append(combined)
            best = max(best, bin(combined).count("1"))
    return best


def reverse_prefix(word: str, ch: str) -> str:
    """Reverse ``word`` up to and including the first ``ch``; unchanged if absent."""
    end = word.find(ch) + 1
    return word[:end][::-1] + word[end:]


def score_of_string(s: str) -> int:
    """Sum of absolute differences between code points of adjacent characters."""
    return sum(abs(ord(left) - ord(right)) for left, right in pairwise(s))