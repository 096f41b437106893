from __future__ import annotations

"""Helpers built on top of :class:`Grid`."""

from collections import Counter, deque
from typing import Dict, List, Tuple

from .grid import FILL_OFFSETS, Grid


def connected_regions(grid: Grid) -> Dict[int, List[Tuple[int, int]]]:
    """Label 4-connected regions of equal characters.

    Regions are discovered with a breadth-first flood from the first unvisited
    cell in row-major order, so ids follow the position of each region's
    top-left-most cell.
    """

    width, height = grid.width, grid.height
    visited = [[False for _ in range(width)] for _ in range(height)]
    regions: Dict[int, List[Tuple[int, int]]] = {}
    region_id = 0

    for y in range(height):
        for x in range(width):
            if visited[y][x]:
                continue
            char = grid.get(x, y)
            queue: deque[Tuple[int, int]] = deque([(x, y)])
            visited[y][x] = True
            cells: List[Tuple[int, int]] = []

            while queue:
                cx, cy = queue.popleft()
                cells.append((cx, cy))
                for dx, dy in FILL_OFFSETS:
                    nx, ny = cx + dx, cy + dy
                    if grid.in_bounds(nx, ny) and not visited[ny][nx] and grid.get(nx, ny) == char:
                        visited[ny][nx] = True
                        queue.append((nx, ny))

            regions[region_id] = cells
            region_id += 1

    return regions


def diff_cells(before: Grid, after: Grid) -> List[Tuple[int, int]]:
    """Return coordinates whose characters differ between ``before`` and ``after``."""
    width = max(before.width, after.width)
    height = max(before.height, after.height)
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if before.get(x, y) != after.get(x, y)
    ]


def char_histogram(grid: Grid) -> Dict[str, int]:
    """Return a mapping from character to number of occurrences."""
    return dict(Counter(str(c) for c in grid.cells))


__all__ = ["connected_regions", "diff_cells", "char_histogram"]
