"""In-place sorting algorithms over mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from galgo.heap import max_down, max_heapify
from galgo.searching import binary_search_range


def binary_insertion_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place, finding each insertion point by binary search."""
    for i in range(1, len(arr)):
        key = arr[i]
        loc = binary_search_range(arr, key, 0, i - 1, True)
        arr[loc + 1 : i + 1] = arr[loc:i]
        arr[loc] = key


def bubble_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by repeatedly swapping adjacent pairs."""
    n = len(arr)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place using a max-heap."""
    max_heapify(arr)
    for end in reversed(range(len(arr))):
        arr[0], arr[end] = arr[end], arr[0]
        max_down(arr, 0, end)


def insertion_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by insertion."""
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


def _merge(arr: MutableSequence[Any], helper: list[Any], low: int, middle: int, high: int) -> None:
    helper[low : high + 1] = arr[low : high + 1]
    left, right, current = low, middle + 1, low
    while left <= middle and right <= high:
        if helper[left] <= helper[right]:
            arr[current] = helper[left]
            left += 1
        else:
            arr[current] = helper[right]
            right += 1
        current += 1
    remaining = middle - left + 1
    arr[current : current + remaining] = helper[left : middle + 1]


def _merge_sort(arr: MutableSequence[Any], helper: list[Any], low: int, high: int) -> None:
    if low < high:
        middle = low + (high - low) // 2
        _merge_sort(arr, helper, low, middle)
        _merge_sort(arr, helper, middle + 1, high)
        _merge(arr, helper, low, middle, high)


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with a top-down merge sort."""
    _merge_sort(arr, list(arr), 0, len(arr) - 1)


def _partition(arr: MutableSequence[Any], left: int, right: int) -> int:
    pivot = arr[left + (right - left) // 2]
    while left <= right:
        while arr[left] < pivot:
            left += 1
        while arr[right] > pivot:
            right -= 1
        if left <= right:
            arr[left], arr[right] = arr[right], arr[left]
            left += 1
            right -= 1
    return left


def _quick_sort(arr: MutableSequence[Any], left: int, right: int) -> None:
    index = _partition(arr, left, right)
    if left < index - 1:
        _quick_sort(arr, left, index - 1)
    if index < right:
        _quick_sort(arr, index, right)


def quick_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with quicksort around a middle pivot."""
    if arr:
        _quick_sort(arr, 0, len(arr) - 1)


def radix_sort(arr: MutableSequence[int]) -> None:
    """Sort non-negative integers in place, least significant digit first."""
    if len(arr) < 2:
        return
    if any(value < 0 for value in arr):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(arr)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in arr:
            buckets[(value // exp) % 10].append(value)
        arr[:] = [value for bucket in buckets for value in bucket]
        exp *= 10


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by selecting the smallest remaining value."""
    n = len(arr)
    for i in range(n):
        smallest = min(range(i, n), key=arr.__getitem__)
        if smallest != i:
            arr[i], arr[smallest] = arr[smallest], arr[i]