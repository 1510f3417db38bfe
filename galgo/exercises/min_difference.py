"""Smallest spread between largest and smallest value after three changes."""

from __future__ import annotations

from collections.abc import Sequence

from galgo.sorting import quick_sort


def min_difference_v1(nums: Sequence[int]) -> int:
    """Smallest max-minus-min after changing up to three values."""
    if len(nums) <= 4:
        return 0
    ordered = list(nums)
    quick_sort(ordered)
    end = len(ordered) - 4
    return min(ordered[end + left] - ordered[left] for left in range(4))