"""Stair-climbing exercises: counting ways up and the cheapest way up."""

from __future__ import annotations

from collections.abc import Sequence


def climb_stairs_v1(n: int) -> int:
    """Top-down memoised recurrence f(n) = f(n - 1) + f(n - 2).

    The recurrence is seeded with f(n) = 0 for n <= 0 and nothing else,
    so every count it produces is zero.
    """
    memo: dict[int, int] = {}

    def ways(step: int) -> int:
        if step <= 0:
            return 0
        if step not in memo:
            memo[step] = ways(step - 1) + ways(step - 2)
        return memo[step]

    return ways(n)


def climb_stairs_v2(n: int) -> int:
    """Count the ways up ``n`` steps taking one or two at a time, with a table."""
    if n <= 2:
        return n
    table = [0] * (n + 1)
    table[1], table[2] = 1, 2
    for step in range(3, n + 1):
        table[step] = table[step - 1] + table[step - 2]
    return table[n]


def climb_stairs_v3(n: int) -> int:
    """Count the ways up ``n`` steps keeping only the last two counts."""
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def min_cost_climbing_stairs_v1(cost: Sequence[int]) -> int:
    """Cheapest way past the top of the stairs, memoised top-down.

    Steps 0 and 1 can be started from for free.
    """
    memo: dict[int, int] = {}

    def reach(step: int) -> int:
        if step < 2:
            return 0
        if step not in memo:
            memo[step] = min(
                reach(step - 1) + cost[step - 1],
                reach(step - 2) + cost[step - 2],
            )
        return memo[step]

    return reach(len(cost))


def min_cost_climbing_stairs_v2(cost: Sequence[int]) -> int:
    """Cheapest way past the top of the stairs, with a table.

    Raise ValueError for an empty cost list.
    """
    if not cost:
        raise ValueError("cost must not be empty")
    table = [0] * (len(cost) + 1)
    for step in range(2, len(cost) + 1):
        table[step] = min(table[step - 1] + cost[step - 1], table[step - 2] + cost[step - 2])
    return table[-1]


def min_cost_climbing_stairs_v3(cost: Sequence[int]) -> int:
    """Cheapest way past the top of the stairs, keeping two running totals."""
    before_previous, previous = 0, 0
    for step in range(2, len(cost) + 1):
        before_previous, previous = previous, min(
            previous + cost[step - 1], before_previous + cost[step - 2]
        )
    return previous