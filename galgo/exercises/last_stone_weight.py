"""Smash the two heaviest stones until at most one is left."""

from __future__ import annotations

from collections.abc import Iterable

from galgo.heap import MaxHeap


def last_stone_weight_v1(stones: Iterable[int]) -> int:
    """Return the weight of the last stone left, or 0 if none is."""
    heap = MaxHeap(stones)
    while not heap.is_empty():
        heaviest = heap.pop()
        if heap.is_empty():
            return heaviest
        second = heap.pop()
        if heaviest != second:
            heap.push(heaviest - second)
    return 0