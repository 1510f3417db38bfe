"""Best profit from trading a stock under different rules."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def _check_transactions(k: int) -> None:
    if k < 0:
        raise ValueError("number of transactions must not be negative")


def _check_prices(prices: Sequence[int]) -> None:
    if not prices:
        raise ValueError("prices must not be empty")


def max_profit_v1(k: int, prices: Sequence[int]) -> int:
    """Best profit from at most ``k`` buy-sell transactions, memoised top-down."""
    _check_transactions(k)
    days = len(prices)

    @cache
    def best(remaining: int, day: int, holding: bool) -> int:
        if day == days or remaining == 0:
            return 0
        skip = best(remaining, day + 1, holding)
        if holding:
            return max(prices[day] + best(remaining - 1, day + 1, False), skip)
        return max(-prices[day] + best(remaining, day + 1, True), skip)

    return best(k, 0, False)


def max_profit_v2(k: int, prices: Sequence[int]) -> int:
    """Best profit from at most ``k`` transactions, bottom-up from the last day."""
    _check_transactions(k)
    free = [0] * (k + 1)
    hold = [0] * (k + 1)
    for price in reversed(prices):
        next_free, next_hold = free, hold
        free = [0] * (k + 1)
        hold = [0] * (k + 1)
        for remaining in range(1, k + 1):
            free[remaining] = max(next_free[remaining], -price + next_hold[remaining])
            hold[remaining] = max(next_hold[remaining], price + next_free[remaining - 1])
    return free[k]


def max_profit_v3(k: int, prices: Sequence[int]) -> int:
    """Best profit from at most ``k`` transactions, forward over the days.

    ``free[r]`` and ``hold[r]`` are the best cash with at most ``r`` sales
    made, without and with a share in hand. Raise ValueError for no prices.
    """
    _check_transactions(k)
    _check_prices(prices)
    free = [0] * (k + 1)
    hold = [-prices[0]] * (k + 1)
    for price in prices[1:]:
        free, hold = (
            [0] + [max(free[r], price + hold[r - 1]) for r in range(1, k + 1)],
            [max(hold[r], free[r] - price) for r in range(k + 1)],
        )
    return free[k]


def max_profit_with_cooldown_v1(prices: Sequence[int]) -> int:
    """Best profit with unlimited trades and a day's rest after each sale, tabulated."""
    _check_prices(prices)
    days = len(prices)
    hold, sold, reset = [0] * days, [0] * days, [0] * days
    hold[0] = -prices[0]
    for day in range(1, days):
        sold[day] = hold[day - 1] + prices[day]
        hold[day] = max(hold[day - 1], reset[day - 1] - prices[day])
        reset[day] = max(reset[day - 1], sold[day - 1])
    return max(sold[-1], reset[-1])


def max_profit_with_cooldown_v2(prices: Sequence[int]) -> int:
    """Best profit with unlimited trades and a cooldown, in constant space."""
    _check_prices(prices)
    hold, sold, reset = -prices[0], 0, 0
    for price in prices:
        hold, sold, reset = max(hold, reset - price), hold + price, max(reset, sold)
    return max(sold, reset)


def max_profit_with_fee_v1(prices: Sequence[int], fee: int) -> int:
    """Best profit with unlimited trades, each sale paying ``fee``, tabulated."""
    _check_prices(prices)
    free, hold = [0] * len(prices), [0] * len(prices)
    hold[0] = -prices[0]
    for day in range(1, len(prices)):
        hold[day] = max(hold[day - 1], free[day - 1] - prices[day])
        free[day] = max(free[day - 1], hold[day - 1] + prices[day] - fee)
    return free[-1]


def max_profit_with_fee_v2(prices: Sequence[int], fee: int) -> int:
    """Best profit with unlimited trades and a fee per sale, in constant space."""
    _check_prices(prices)
    free, hold = 0, -prices[0]
    for price in prices[1:]:
        free, hold = max(free, hold + price - fee), max(hold, free - price)
    return free