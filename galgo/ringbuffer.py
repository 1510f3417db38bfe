"""A fixed-size ring buffer that overwrites its oldest items."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """A circular buffer of fixed capacity.

    Writing never fails: once the writer catches up with the reader, the
    oldest unread items are dropped.
    """

    def __init__(self, capacity: int, fill: Any = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._buffer: list[Any] = [fill] * capacity
        self._read = 0
        self._write = 0

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={len(self._buffer)})"

    def is_empty(self) -> bool:
        """Tell whether there is nothing left to read."""
        return self._read == self._write

    def capacity(self) -> int:
        """Return the number of slots in the buffer."""
        return len(self._buffer)

    def write(self, data: Iterable[T]) -> int:
        """Write all items of ``data`` and return how many were written."""
        size = len(self._buffer)
        count = 0
        for item in data:
            self._buffer[self._write] = item
            self._write = (self._write + 1) % size
            if self._write == self._read:
                self._read = (self._read + 1) % size
            count += 1
        return count

    def read(self, size: int) -> list[T]:
        """Read up to ``size`` items.

        Raise EOFError if the buffer is empty; a shorter list means the
        buffer ran out before ``size`` items were read.
        """
        if self.is_empty():
            raise EOFError("ring buffer is empty")
        length = len(self._buffer)
        items: list[T] = []
        for i in range(size):
            if self._read == self._write and i < size - 1:
                break
            items.append(self._buffer[self._read])
            self._read = (self._read + 1) % length
        return items