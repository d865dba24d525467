"""Grid searches: islands, areas, flood fill and sub-islands."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
Cell = tuple[int, int]


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _regions(
    grid: Sequence[Sequence[T]], is_land: Callable[[T], bool]
) -> Iterator[list[Cell]]:
    """Yield each four-connected region of land cells as a list of cells."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[Cell] = set()
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if (r, c) in seen or not is_land(value):
                continue
            seen.add((r, c))
            stack = [(r, c)]
            region = []
            while stack:
                cell = stack.pop()
                region.append(cell)
                for nr, nc in _neighbours(*cell, rows, cols):
                    if (nr, nc) not in seen and is_land(grid[nr][nc]):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
            yield region


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the islands of "1" cells in a grid of "1" and "0"."""
    return sum(1 for _ in _regions(grid, lambda value: value == "1"))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest island of 1 cells, or 0 if there is none."""
    return max((len(region) for region in _regions(grid, lambda v: v == 1)), default=0)


def flood_fill(
    image: Sequence[Sequence[Any]], sr: int, sc: int, color: Any
) -> list[list[Any]]:
    """Return a copy of ``image`` with the region around (sr, sc) painted ``color``."""
    rows = len(image)
    cols = len(image[0]) if rows else 0
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError(f"start cell ({sr}, {sc}) is outside the image")
    painted = [list(line) for line in image]
    original = painted[sr][sc]
    if original == color:
        return painted
    queue = deque([(sr, sc)])
    painted[sr][sc] = color
    while queue:
        cell = queue.popleft()
        for r, c in _neighbours(*cell, rows, cols):
            if painted[r][c] == original:
                painted[r][c] = color
                queue.append((r, c))
    return painted


def count_sub_islands(
    grid1: Sequence[Sequence[int]], grid2: Sequence[Sequence[int]]
) -> int:
    """Count the islands of ``grid2`` whose every cell is land in ``grid1``."""
    return sum(
        1
        for region in _regions(grid2, lambda v: v == 1)
        if all(grid1[r][c] != 0 for r, c in region)
    )