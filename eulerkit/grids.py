"""Products along grid lines and maximum paths through triangles."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

_RUN = 4


def _runs(grid: Sequence[Sequence[int]]) -> Iterator[list[int]]:
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    if any(len(row) != columns for row in grid):
        raise ValueError("grid rows must all have the same length")
    steps = range(_RUN)
    for y in range(rows):
        for x in range(columns):
            fits_right = x < columns - (_RUN - 1)
            fits_down = y < rows - (_RUN - 1)
            if fits_right:
                yield [grid[y][x + i] for i in steps]
            if fits_down:
                yield [grid[y + i][x] for i in steps]
            if fits_right and fits_down:
                yield [grid[y + i][x + i] for i in steps]
                yield [grid[y + _RUN - 1 - i][x + i] for i in steps]


def largest_grid_product(grid: Sequence[Sequence[int]]) -> int:
    """Greatest product of four adjacent cells in a line; never below 0."""
    return max((math.prod(run) for run in _runs(grid)), default=0) if grid else 0


def maximum_path_sum_1(triangle: Sequence[Sequence[int]]) -> int:
    """Maximum top-to-bottom path total through a number triangle.

    The triangle must have at least two rows.
    """
    if len(triangle) < 2:
        raise ValueError("triangle must have at least two rows")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        if len(best) < len(row) + 1:
            raise ValueError("each triangle row must be one longer than the row above")
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]