"""Graph algorithms: course ordering, components, cycles, safe nodes and spanning trees."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from math import inf


class _Mark(Enum):
    UNSEEN = 0
    ACTIVE = 1
    DONE = 2


def _adjacency(count: int, prerequisites: Iterable[Sequence[int]]) -> list[list[int]]:
    """Build edges prerequisite -> course for ``count`` courses."""
    adjacency: list[list[int]] = [[] for _ in range(count)]
    for course, required in prerequisites:
        adjacency[required].append(course)
    return adjacency


def _postorder(adjacency: Sequence[Sequence[int]]) -> list[int] | None:
    """Return the depth-first finishing order of all nodes, or None on a cycle."""
    marks = [_Mark.UNSEEN] * len(adjacency)
    finished: list[int] = []
    for start in range(len(adjacency)):
        if marks[start] is not _Mark.UNSEEN:
            continue
        marks[start] = _Mark.ACTIVE
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if marks[neighbour] is _Mark.ACTIVE:
                    return None
                if marks[neighbour] is _Mark.UNSEEN:
                    marks[neighbour] = _Mark.ACTIVE
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                marks[node] = _Mark.DONE
                finished.append(node)
    return finished


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return whether every course can be taken given [course, prerequisite] pairs."""
    return _postorder(_adjacency(num_courses, prerequisites)) is not None


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which all courses can be taken, or [] if there is none."""
    finished = _postorder(_adjacency(num_courses, prerequisites))
    if finished is None:
        return []
    return finished[::-1]


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the connected groups in a square adjacency matrix of 0 and 1."""
    size = len(is_connected)
    seen = [False] * size
    groups = 0
    for start in range(size):
        if seen[start]:
            continue
        groups += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for other, linked in enumerate(is_connected[node]):
                if linked == 1 and not seen[other]:
                    seen[other] = True
                    stack.append(other)
    return groups


def _reachable(graph: dict[int, list[int]], source: int, target: int) -> bool:
    if source == target:
        return True
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in graph.get(node, ()):
            if neighbour == target:
                return True
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return False


def find_redundant_connection(edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle in an undirected graph, or []."""
    graph: dict[int, list[int]] = {}
    for edge in edges:
        u, v = edge
        if _reachable(graph, u, v):
            return [u, v]
        graph.setdefault(u, []).append(v)
        graph.setdefault(v, []).append(u)
    return []


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a sink."""
    marks = [_Mark.UNSEEN] * len(graph)
    for start in range(len(graph)):
        if marks[start] is not _Mark.UNSEEN:
            continue
        marks[start] = _Mark.ACTIVE
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if marks[neighbour] is _Mark.ACTIVE:
                    # Every node on the current path can reach a cycle; they stay
                    # marked active, which also records them as unsafe.
                    stack.clear()
                    break
                if marks[neighbour] is _Mark.UNSEEN:
                    marks[neighbour] = _Mark.ACTIVE
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                stack.pop()
                marks[node] = _Mark.DONE
    return [node for node, mark in enumerate(marks) if mark is _Mark.DONE]


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the person trusted by all others who trusts no one, or -1."""
    if len(trust) < n - 1:
        return -1
    trusts_someone = {truster for truster, _ in trust}
    trusted_by = Counter(trusted for _, trusted in trust)
    judge = -1
    for person in range(1, n + 1):
        if person in trusts_someone:
            continue
        if judge != -1:
            return -1
        if trusted_by[person] == n - 1:
            judge = person
    return judge


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Return the total Manhattan length of a minimum spanning tree over ``points``."""
    count = len(points)
    if count == 0:
        return 0
    distance: list[float] = [inf] * count
    distance[0] = 0
    in_tree = [False] * count
    total = 0
    for _ in range(count):
        current = min(
            (node for node in range(count) if not in_tree[node]),
            key=distance.__getitem__,
        )
        in_tree[current] = True
        total += int(distance[current])
        cx, cy = points[current]
        for node, (x, y) in enumerate(points):
            if not in_tree[node]:
                distance[node] = min(distance[node], abs(cx - x) + abs(cy - y))
    return total