"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search_range(
    arr: Sequence[Any], target: Any, low: int, high: int, return_low: bool
) -> int:
    """Binary search ``arr[low:high + 1]`` for ``target``.

    Return the index of a match. When there is none, return the insertion
    point if ``return_low`` is true, otherwise -1.
    """
    while low <= high:
        mid = low + (high - low) // 2
        value = arr[mid]
        if target == value:
            return mid
        if target > value:
            low = mid + 1
        else:
            high = mid - 1
    return low if return_low else -1


def binary_search(arr: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in sorted ``arr``, or -1."""
    return binary_search_range(arr, target, 0, len(arr) - 1, False)


def linear_search(arr: Sequence[Any], target: Any) -> int:
    """Return the index of the first ``target`` in ``arr``, or -1."""
    return next((i for i, value in enumerate(arr) if value == target), -1)