"""Linked nodes: balanced trees from sorted values and singly linked list queries."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; iterating it yields the values from here on."""

    val: Any = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def sorted_array_to_bst(nums: Sequence[Any]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted ``nums``."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        middle = (start + end) // 2
        return TreeNode(nums[middle], build(start, middle - 1), build(middle + 1, end))

    return build(0, len(nums) - 1)


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def nodes_between_critical_points(head: ListNode | None) -> tuple[int, int]:
    """Return the least and greatest distance between local extrema, or (-1, -1)."""
    values = list(head) if head is not None else []
    critical = [
        position
        for position, (before, here, after) in enumerate(
            zip(values, values[1:], values[2:]), start=1
        )
        if (here > before and here > after) or (here < before and here < after)
    ]
    if len(critical) < 2:
        return -1, -1
    closest = min(b - a for a, b in zip(critical, critical[1:]))
    return closest, critical[-1] - critical[0]