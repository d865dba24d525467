"""Array algorithms: compaction, searching, sums, digits and bit counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import groupby
from operator import xor


def remove_duplicates(nums: list[int]) -> int:
    """Keep one of each run of equal values in ``nums``, in place; return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def max_sub_array(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    values = iter(nums)
    try:
        best = running = next(values)
    except StopIteration:
        raise ValueError("max_sub_array() needs at least one number") from None
    for value in values:
        running = max(value, running + value)
        best = max(best, running)
    return best


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits``."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] != 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    bits = [0] * (n + 1)
    power = 1
    while power <= n:
        for offset in range(min(power, n - power + 1)):
            bits[power + offset] = bits[offset] + 1
        power *= 2
    return bits


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counting from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = [left + right for left, right in zip([0, *row], [*row, 0])]
    return row