"""Largest loot from a row of houses without robbing two neighbours."""

from __future__ import annotations

from collections.abc import Sequence


def house_robber_v1(nums: Sequence[int]) -> int:
    """Best loot, memoised top-down; raise ValueError for no houses."""
    if not nums:
        raise ValueError("nums must not be empty")
    memo: dict[int, int] = {}

    def best(i: int) -> int:
        if i == 0:
            return nums[0]
        if i == 1:
            return max(nums[0], nums[1])
        if i not in memo:
            memo[i] = max(best(i - 1), best(i - 2) + nums[i])
        return memo[i]

    return best(len(nums) - 1)


def house_robber_v2(nums: Sequence[int]) -> int:
    """Best loot with a table; zero for no houses."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    table = [0] * len(nums)
    table[0] = nums[0]
    table[1] = max(nums[0], nums[1])
    for i in range(2, len(nums)):
        table[i] = max(table[i - 1], table[i - 2] + nums[i])
    return table[-1]


def house_robber_v3(nums: Sequence[int]) -> int:
    """Best loot keeping only the last two totals; zero for no houses."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before_previous, previous = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before_previous, previous = previous, max(previous, before_previous + value)
    return previous