"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def push(self, value: T) -> None:
        """Add a value at the back of the queue."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return not self._items