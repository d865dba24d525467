"""Heap-based selections: k-th largest, ranks, task scheduling, closest points, stones."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence

MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``, counting duplicates."""
    values = list(nums)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    return heapq.nlargest(k, values)[-1]


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Return each athlete's place: a medal name for the top three, else the number."""
    order = sorted(range(len(score)), key=score.__getitem__, reverse=True)
    ranks = [""] * len(score)
    for place, athlete in enumerate(order, start=1):
        ranks[athlete] = MEDALS[place - 1] if place <= len(MEDALS) else str(place)
    return ranks


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Return the fewest time slots to run ``tasks`` with ``n`` idle slots between repeats.

    Tasks are single upper-case letters.
    """
    task_list = list(tasks)
    for task in task_list:
        if len(task) != 1 or not "A" <= task <= "Z":
            raise ValueError(f"not a task letter: {task!r}")
    if not task_list:
        return 0
    frequencies = Counter(task_list)
    most = max(frequencies.values())
    tied = sum(1 for count in frequencies.values() if count == most)
    return max((most - 1) * (n + 1) + tied, len(task_list))


def k_closest(points: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin, nearest first, earlier first on ties."""
    if not 0 <= k <= len(points):
        raise ValueError(f"k must be between 0 and {len(points)}, got {k}")
    nearest = heapq.nsmallest(
        k,
        range(len(points)),
        key=lambda i: points[i][0] * points[i][0] + points[i][1] * points[i][1],
    )
    return [list(points[i]) for i in nearest]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones until at most one is left; return its weight or 0."""
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
    return -heap[0] if heap else 0