"""Most valuable ``k`` coins taken from the tops of stacked piles."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def _check_picks(k: int) -> None:
    if k < 0:
        raise ValueError("number of coins must not be negative")


def max_value_of_coins_v1(piles: Sequence[Sequence[int]], k: int) -> int:
    """Best total of ``k`` coins taken from the tops of the piles, memoised."""
    _check_picks(k)

    @cache
    def best(pile: int, remaining: int) -> int:
        if pile == len(piles) or remaining == 0:
            return 0
        result = best(pile + 1, remaining)
        taken = 0
        for count, coin in enumerate(piles[pile][:remaining], start=1):
            taken += coin
            result = max(result, taken + best(pile + 1, remaining - count))
        return result

    return best(0, k)


def max_value_of_coins_v2(piles: Sequence[Sequence[int]], k: int) -> int:
    """Bottom-up table over the piles for fewer than ``k`` picks.

    The answer is read from the column for exactly ``k`` picks, which the
    fill never writes, so the result is always zero.
    """
    _check_picks(k)
    table = [[0] * (k + 1) for _ in range(len(piles) + 1)]
    for i in reversed(range(len(piles))):
        pile = piles[i]
        taken = 0
        for remain in range(k):
            table[i][remain] = table[i + 1][remain]
            for j in range(min(remain, len(pile))):
                taken += pile[j]
                table[i][remain] = max(table[i][remain], taken + table[i + 1][k - j - 1])
    return table[0][k]