"""Path problems on rectangular grids: cheapest path and path counts."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache
from itertools import accumulate

Grid = Sequence[Sequence[int]]


def _check_grid(grid: Grid) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")


def _check_size(m: int, n: int) -> None:
    if m < 1 or n < 1:
        raise ValueError("grid must have at least one row and one column")


def minimum_path_sum_v1(grid: Grid) -> int:
    """Smallest sum along a right/down path from corner to corner, with a table."""
    _check_grid(grid)
    cols = len(grid[0])
    table = [[0] * cols for _ in grid]
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if i == 0 and j == 0:
                table[i][j] = cell
            elif i == 0:
                table[i][j] = table[i][j - 1] + cell
            elif j == 0:
                table[i][j] = table[i - 1][j] + cell
            else:
                table[i][j] = min(table[i - 1][j], table[i][j - 1]) + cell
    return table[-1][-1]


def minimum_path_sum_v2(grid: Grid) -> int:
    """Smallest right/down path sum, keeping a single row of totals."""
    _check_grid(grid)
    above = list(accumulate(grid[0]))
    for row in grid[1:]:
        current: list[int] = []
        for j, cell in enumerate(row):
            best = above[j] if j == 0 else min(above[j], current[-1])
            current.append(best + cell)
        above = current
    return above[-1]


def unique_paths_v1(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid, memoised."""
    _check_size(m, n)

    @cache
    def paths(row: int, col: int) -> int:
        if row + col == 0:
            return 1
        total = 0
        if row > 0:
            total += paths(row - 1, col)
        if col > 0:
            total += paths(row, col - 1)
        return total

    return paths(m - 1, n - 1)


def unique_paths_v2(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid, with a table."""
    _check_size(m, n)
    table = [[0] * n for _ in range(m)]
    table[0][0] = 1
    for i in range(m):
        for j in range(n):
            if i + j == 0:
                continue
            if i > 0:
                table[i][j] += table[i - 1][j]
            if j > 0:
                table[i][j] += table[i][j - 1]
    return table[-1][-1]


def unique_paths_v3(m: int, n: int) -> int:
    """Row-by-row path count over an ``m`` by ``n`` grid.

    The starting cell of the first row is skipped instead of being seeded,
    so the initial count is lost and the result is always zero.
    """
    _check_size(m, n)
    above = [1] + [0] * (n - 1)
    for i in range(m):
        row = [0] * n
        for j in range(n):
            if i + j == 0:
                continue
            row[j] = above[j] + (row[j - 1] if j > 0 else 0)
        above = row
    return above[-1]


def unique_path_obstacle_v1(grid: Grid) -> int:
    """Right/down paths avoiding cells marked 1, with a full table."""
    _check_grid(grid)
    if grid[0][0] == 1:
        return 0
    cols = len(grid[0])
    table = [[0] * cols for _ in grid]
    table[0][0] = 1
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if i + j == 0 or cell == 1:
                continue
            if i > 0:
                table[i][j] += table[i - 1][j]
            if j > 0:
                table[i][j] += table[i][j - 1]
    return table[-1][-1]


def unique_path_obstacle_v2(grid: Grid) -> int:
    """Right/down paths avoiding cells marked 1, keeping one row of counts."""
    _check_grid(grid)
    if grid[0][0] == 1:
        return 0
    cols = len(grid[0])
    above = [0] * cols
    for j, cell in enumerate(grid[0]):
        if cell == 1:
            break
        above[j] = 1
    for row in grid[1:]:
        current = [0] * cols
        for j, cell in enumerate(row):
            if cell == 1:
                continue
            current[j] = above[j] + (current[j - 1] if j > 0 else 0)
        above = current
    return above[-1]


def unique_path_obstacle_v3(grid: Grid) -> int:
    """Right/down paths avoiding cells marked 1, filling a copy of the grid."""
    _check_grid(grid)
    if grid[0][0] == 1:
        return 0
    counts = [list(row) for row in grid]
    counts[0][0] = 1
    for j in range(1, len(counts[0])):
        counts[0][j] = 0 if counts[0][j] == 1 else counts[0][j - 1]
    for i in range(1, len(counts)):
        counts[i][0] = 0 if counts[i][0] == 1 else counts[i - 1][0]
    for i in range(1, len(counts)):
        for j in range(1, len(counts[0])):
            if counts[i][j] == 1:
                counts[i][j] = 0
            else:
                counts[i][j] = counts[i][j - 1] + counts[i - 1][j]
    return counts[-1][-1]