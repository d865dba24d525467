from itertools import product

import pytest

from algokit.strings import (
    KEYPAD,
    letter_combinations,
    longest_palindrome,
    num_decodings,
    summary_ranges,
)


def _is_palindrome(text):
    return text == text[::-1]


@pytest.mark.parametrize("text", ["", "a", "z"])
def test_longest_palindrome_short_input_returned_as_is(text):
    assert longest_palindrome(text) == text


@pytest.mark.parametrize("text", ["racecar", "abba", "aa", "noon"])
def test_longest_palindrome_whole_string(text):
    assert longest_palindrome(text) == text


@pytest.mark.parametrize("pal", ["racecar", "abccba", "xyzyx"])
def test_longest_palindrome_embedded(pal):
    assert longest_palindrome("qw" + pal + "e") == pal


def test_longest_palindrome_no_repeat_gives_first_char():
    text = "abcdef"
    assert longest_palindrome(text) == text[0]


@pytest.mark.parametrize("text", ["babad", "cbbd", "forgeeksskeegfor", "abacdfgdcaba"])
def test_longest_palindrome_invariants(text):
    result = longest_palindrome(text)
    assert result in text
    assert _is_palindrome(result)
    assert len(result) >= 1


def test_longest_palindrome_even_beats_odd():
    result = longest_palindrome("abaxyyyyx")
    assert result == "xyyyyx"[0:6]
    assert len(result) == 6


def test_letter_combinations_empty():
    assert letter_combinations("") == []


def test_letter_combinations_two_digits_order():
    assert letter_combinations("23") == ["".join(p) for p in product(KEYPAD[2], KEYPAD[3])]


def test_letter_combinations_single_digit():
    assert letter_combinations("7") == list(KEYPAD[7])


def test_letter_combinations_count_and_uniqueness():
    result = letter_combinations("79")
    assert len(result) == len(KEYPAD[7]) * len(KEYPAD[9])
    assert len(set(result)) == len(result)


@pytest.mark.parametrize("digits", ["1", "0", "21"])
def test_letter_combinations_letterless_digit(digits):
    assert letter_combinations(digits) == []


def test_letter_combinations_rejects_non_digit():
    with pytest.raises(ValueError):
        letter_combinations("2a")


def test_num_decodings_worked_example():
    assert num_decodings("12") == 2


@pytest.mark.parametrize("text", ["", "0", "06", "100", "1001"])
def test_num_decodings_undecodable(text):
    assert num_decodings(text) == 0


@pytest.mark.parametrize("prefix", ["3", "12", "2213", "1111"])
def test_num_decodings_trailing_nine_adds_nothing_after_high_digit(prefix):
    text = prefix + "5"
    assert num_decodings(text + "9") == num_decodings(text)


def test_num_decodings_ones_follow_recurrence():
    for length in range(3, 12):
        assert num_decodings("1" * length) == (
            num_decodings("1" * (length - 1)) + num_decodings("1" * (length - 2))
        )


def test_summary_ranges_worked_example():
    assert summary_ranges([0, 1, 2, 4, 5, 7]) == ["0->2", "4->5", "7"]


def test_summary_ranges_empty():
    assert summary_ranges([]) == []


def test_summary_ranges_single_run():
    values = list(range(3, 8))
    assert summary_ranges(values) == [f"{values[0]}->{values[-1]}"]


def test_summary_ranges_singletons():
    values = [1, 3, 5, -2]
    assert summary_ranges(values) == [str(v) for v in values]