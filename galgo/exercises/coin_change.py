"""Fewest coins needed to make an amount."""

from __future__ import annotations

from collections.abc import Sequence


def coin_change_v1(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, memoised top-down; -1 if impossible."""
    memo: dict[int, int] = {}

    def fewest(remaining: int) -> int:
        if remaining < 0:
            return -1
        if remaining == 0:
            return 0
        if remaining in memo:
            return memo[remaining]
        best = -1
        for coin in coins:
            used = fewest(remaining - coin)
            if used == -1:
                continue
            if best == -1 or used < best:
                best = used + 1
        memo[remaining] = best
        return best

    return fewest(amount)


def coin_change_v2(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount`` with a table; -1 if impossible.

    Raise ValueError for a negative amount.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    table = [0] + [unreachable] * amount
    for value in range(1, amount + 1):
        table[value] = min(
            (table[value - coin] + 1 for coin in coins if coin <= value),
            default=unreachable,
        )
        table[value] = min(table[value], unreachable)
    return -1 if table[amount] > amount else table[amount]