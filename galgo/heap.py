"""Binary heaps over lists, plus the sift helpers they are built on."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

_Before = Callable[[Any, Any], bool]


def parent(i: int) -> int:
    """Index of the parent of node ``i``."""
    return (i - 1) >> 1


def left_child(i: int) -> int:
    """Index of the left child of node ``i``."""
    return 2 * i + 1


def right_child(i: int) -> int:
    """Index of the right child of node ``i``."""
    return 2 * i + 2


def _sift_down(arr: MutableSequence[Any], root: int, end: int, before: _Before) -> None:
    while True:
        best = root
        for child in (left_child(root), right_child(root)):
            if child < end and before(arr[child], arr[best]):
                best = child
        if best == root:
            return
        arr[root], arr[best] = arr[best], arr[root]
        root = best


def _sift_up(arr: MutableSequence[Any], start: int, root: int, before: _Before) -> None:
    while start > root and before(arr[start], arr[parent(start)]):
        up = parent(start)
        arr[start], arr[up] = arr[up], arr[start]
        start = up


def _heapify(arr: MutableSequence[Any], before: _Before) -> None:
    for i in reversed(range(len(arr) // 2)):
        _sift_down(arr, i, len(arr), before)


def max_heapify(arr: MutableSequence[Any]) -> None:
    """Arrange ``arr`` in place as a max-heap."""
    _heapify(arr, operator.gt)


def max_down(arr: MutableSequence[Any], root: int, end: int) -> None:
    """Sift ``arr[root]`` down a max-heap occupying ``arr[:end]``."""
    _sift_down(arr, root, end, operator.gt)


def max_up(arr: MutableSequence[Any], start: int, root: int) -> None:
    """Sift ``arr[start]`` up a max-heap, no higher than index ``root``."""
    _sift_up(arr, start, root, operator.gt)


def min_heapify(arr: MutableSequence[Any]) -> None:
    """Arrange ``arr`` in place as a min-heap."""
    _heapify(arr, operator.lt)


def min_down(arr: MutableSequence[Any], root: int, end: int) -> None:
    """Sift ``arr[root]`` down a min-heap occupying ``arr[:end]``."""
    _sift_down(arr, root, end, operator.lt)


def min_up(arr: MutableSequence[Any], start: int, root: int) -> None:
    """Sift ``arr[start]`` up a min-heap, no higher than index ``root``."""
    _sift_up(arr, start, root, operator.lt)


class Heap(ABC):
    """A binary heap; MaxHeap and MinHeap fix the ordering."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)
        if self._items:
            self._heapify(self._items)

    @staticmethod
    @abstractmethod
    def _before(a: Any, b: Any) -> bool:
        """Tell whether ``a`` belongs above ``b``."""

    @staticmethod
    @abstractmethod
    def _heapify(arr: MutableSequence[Any]) -> None:
        """Arrange ``arr`` as a heap."""

    @staticmethod
    @abstractmethod
    def _down(arr: MutableSequence[Any], root: int, end: int) -> None:
        """Sift an element down."""

    @staticmethod
    @abstractmethod
    def _up(arr: MutableSequence[Any], start: int, root: int) -> None:
        """Sift an element up."""

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def is_empty(self) -> bool:
        """Tell whether the heap holds no values."""
        return not self._items

    def push(self, value: Any) -> None:
        """Add a value to the heap."""
        self._items.append(value)
        self._up(self._items, len(self._items) - 1, 0)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._down(self._items, 0, len(self._items))
        return root

    def peek(self) -> Any:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index`` and restore the heap order.

        An index past the end is ignored.
        """
        if index < 0:
            raise IndexError("heap index must not be negative")
        if index >= len(self._items) or self._items[index] == value:
            return
        old = self._items[index]
        self._items[index] = value
        if self._before(old, value):
            self._down(self._items, index, len(self._items))
        else:
            self._up(self._items, index, 0)


class MaxHeap(Heap):
    """A heap whose top is its largest value."""

    _before = staticmethod(operator.gt)
    _heapify = staticmethod(max_heapify)
    _down = staticmethod(max_down)
    _up = staticmethod(max_up)


class MinHeap(Heap):
    """A heap whose top is its smallest value."""

    _before = staticmethod(operator.lt)
    _heapify = staticmethod(min_heapify)
    _down = staticmethod(min_down)
    _up = staticmethod(min_up)