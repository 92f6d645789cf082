"""Peak finding in sequences and grids."""

from __future__ import annotations

import math
from collections.abc import Sequence


def peak_1d(values: Sequence[float]) -> int:
    """Return the index of a peak (no smaller than its neighbours) by binary search."""
    if not values:
        raise ValueError("cannot find a peak in an empty sequence")
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if values[mid + 1] < values[mid]:
            high = mid
        else:
            low = mid + 1
    return low


def peaks_2d(grid: Sequence[Sequence[float]]) -> list[tuple[int, int]]:
    """Return the first strict peak of each row as (row, column) positions.

    A cell is a peak when it is greater than each of its up to four
    orthogonal neighbours; cells outside the grid do not count.
    """
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows must all have the same length")
    rows = len(grid)
    columns = len(grid[0]) if rows else 0

    def neighbour(r: int, c: int) -> float:
        if 0 <= r < rows and 0 <= c < columns:
            return grid[r][c]
        return -math.inf

    found = []
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if all(
                value > neighbour(r + dr, c + dc)
                for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
            ):
                found.append((r, c))
                break
    return found