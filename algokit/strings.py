"""String algorithms: palindromes, keypad combinations, decodings and ranges."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby, product

KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DIGITS = "0123456789"


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s`` (the first one on ties)."""
    if len(s) <= 1:
        return s

    # Interleave separators so that even-length palindromes also have a centre.
    spread: list[str | None] = [None]
    for ch in s:
        spread.extend((ch, None))

    size = len(spread)
    radii = [0] * size
    center = right = 0
    best_start, best_len = 0, 1

    for i in range(size):
        radius = min(right - i, radii[2 * center - i]) if i < right else 0
        while (
            i - radius - 1 >= 0
            and i + radius + 1 < size
            and spread[i - radius - 1] == spread[i + radius + 1]
        ):
            radius += 1
        radii[i] = radius

        if i + radius > right:
            center, right = i, i + radius

        if radius > best_len:
            best_len = radius
            best_start = (i - radius) // 2

    return s[best_start:best_start + best_len]


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone-keypad digits can spell, in keypad order."""
    if not digits:
        return []
    pools = []
    for digit in digits:
        if digit not in _DIGITS:
            raise ValueError(f"not a keypad digit: {digit!r}")
        pools.append(KEYPAD[_DIGITS.index(digit)])
    return ["".join(letters) for letters in product(*pools)]


def num_decodings(s: str) -> int:
    """Count the ways a digit string decodes with 'A'=1 ... 'Z'=26."""
    if not s or s[0] == "0":
        return 0
    before_previous, previous = 1, 1
    for first, second in zip(s, s[1:]):
        if first == "0" and second == "0":
            return 0
        current = 0
        if second != "0":
            current += previous
        if first == "1" or (first == "2" and second < "7"):
            current += before_previous
        before_previous, previous = previous, current
    return previous


def summary_ranges(nums: Iterable[int]) -> list[str]:
    """Describe runs of consecutive integers as "a->b", or "a" for a single value."""
    ranges = []
    for _, run in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        values = [value for _, value in run]
        if len(values) == 1:
            ranges.append(str(values[0]))
        else:
            ranges.append(f"{values[0]}->{values[-1]}")
    return ranges