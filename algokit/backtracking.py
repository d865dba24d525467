"""Backtracking searches: combination sums, permutations and subsets."""

from __future__ import annotations

from collections.abc import Iterable


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct combination of positive ``candidates`` summing to ``target``.

    Each candidate is used at most once; combinations come out sorted, in
    lexicographic order.
    """
    pool = sorted(candidates)
    found: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if index > start and value == pool[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            explore(index + 1, remaining - value)
            chosen.pop()

    explore(0, target)
    return found


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by successive swaps."""
    items = list(nums)
    if not items:
        return []
    result: list[list[int]] = []

    def explore(start: int) -> None:
        if start == len(items) - 1:
            result.append(list(items))
            return
        for index in range(start, len(items)):
            items[index], items[start] = items[start], items[index]
            explore(start + 1)
            items[index], items[start] = items[start], items[index]

    explore(0)
    return result


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ordering of ``nums``, which may hold repeated values."""
    items = list(nums)
    result: list[list[int]] = []

    def explore(start: int) -> None:
        if start == len(items):
            result.append(list(items))
            return
        used = set()
        for index in range(start, len(items)):
            if items[index] in used:
                continue
            used.add(items[index])
            items[start], items[index] = items[index], items[start]
            explore(start + 1)
            items[start], items[index] = items[index], items[start]

    explore(0)
    return result


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Return all 2**n subsets of ``nums``, those holding each earlier element first."""
    items = list(nums)

    def explore(index: int) -> list[list[int]]:
        if index == len(items):
            return [[]]
        rest = explore(index + 1)
        head = items[index]
        return [[head, *tail] for tail in rest] + rest

    return explore(0)