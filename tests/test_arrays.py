import bisect
import math

import pytest

from algokit.arrays import (
    count_bits,
    max_sub_array,
    pascal_row,
    plus_one,
    remove_duplicates,
    remove_element,
    search_insert,
    single_number,
)


def test_remove_duplicates_sorted():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    expected = sorted(set(nums))
    count = remove_duplicates(nums)
    assert nums == expected
    assert count == len(expected)


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0
    assert nums == []


def test_remove_duplicates_already_unique():
    nums = [1, 2, 3]
    assert remove_duplicates(nums) == 3
    assert nums == [1, 2, 3]


def test_remove_element_keeps_order():
    original = [0, 1, 2, 2, 3, 0, 4, 2]
    nums = list(original)
    count = remove_element(nums, 2)
    assert nums == [v for v in original if v != 2]
    assert count == len(nums)


def test_remove_element_all_removed():
    nums = [3, 3, 3]
    assert remove_element(nums, 3) == 0
    assert nums == []


@pytest.mark.parametrize("target", [-5, 0, 1, 2, 3, 4, 5, 6, 7, 100])
def test_search_insert_matches_bisect(target):
    nums = [1, 3, 5, 6]
    assert search_insert(nums, target) == bisect.bisect_left(nums, target)


def test_search_insert_empty():
    assert search_insert([], 7) == 0


def test_search_insert_found_value():
    nums = list(range(0, 40, 3))
    for index, value in enumerate(nums):
        assert search_insert(nums, value) == index


def test_max_sub_array_worked_example():
    assert max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_sub_array_all_negative():
    nums = [-8, -3, -6, -2, -5]
    assert max_sub_array(nums) == max(nums)


def test_max_sub_array_all_positive():
    nums = [5, 4, 1, 7, 8]
    assert max_sub_array(nums) == sum(nums)


def test_max_sub_array_empty():
    with pytest.raises(ValueError):
        max_sub_array([])


def _as_int(digits):
    return int("".join(map(str, digits)))


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [0], [9], [1, 9, 9], [9, 9, 9, 9]])
def test_plus_one_round_trip(digits):
    result = plus_one(digits)
    assert _as_int(result) == _as_int(digits) + 1
    assert all(0 <= d <= 9 for d in result)


def test_plus_one_does_not_mutate():
    digits = [9, 9]
    plus_one(digits)
    assert digits == [9, 9]


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4


def test_single_number_negative():
    nums = [-7, 3, 3, 11, 11]
    assert single_number(nums) == -7


@pytest.mark.parametrize("n", [0, 1, 2, 5, 16, 33, 100])
def test_count_bits_matches_popcount(n):
    assert count_bits(n) == [bin(i).count("1") for i in range(n + 1)]


def test_count_bits_negative():
    with pytest.raises(ValueError):
        count_bits(-1)


@pytest.mark.parametrize("row_index", [0, 1, 2, 3, 10, 30])
def test_pascal_row_matches_binomials(row_index):
    assert pascal_row(row_index) == [math.comb(row_index, k) for k in range(row_index + 1)]


def test_pascal_row_negative():
    with pytest.raises(ValueError):
        pascal_row(-2)