"""A separate-chaining hash map and a few hash functions."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

ALPHABET_SIZE = 1 << 7
_MASK = (1 << 64) - 1


def rabin_fingerprint(s: str) -> int:
    """Return a 64-bit positional fingerprint of the bytes of ``s``."""
    data = s.encode()
    return sum(byte * (ALPHABET_SIZE << i) for i, byte in enumerate(reversed(data))) & _MASK


def object_hash(value: Hashable) -> int:
    """Return a 64-bit hash of any hashable value."""
    return hash(value) & _MASK


def int_hash(n: int) -> int:
    """Return an integer reinterpreted as an unsigned 64-bit value."""
    return n & _MASK


def djb2(data: bytes) -> int:
    """Return a 64-bit DJB-style hash of ``data``."""
    value = 5381
    for byte in data:
        value = (value + byte + value + (value << 5)) & _MASK
    return value


class HashMap(Generic[K, V]):
    """A hash map with a fixed number of buckets and a chosen hash function."""

    def __init__(self, size: int, hash_fn: Callable[[K], int]) -> None:
        if size < 1:
            raise ValueError("a hash map needs at least one bucket")
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._hash_fn = hash_fn

    def _bucket(self, key: K) -> list[list[Any]]:
        return self._buckets[self._hash_fn(key) % len(self._buckets)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        return any(entry[0] == key for entry in self._bucket(key))  # type: ignore[arg-type]

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: K) -> V:
        """Return the value stored under ``key``; raise KeyError if absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def delete(self, key: K) -> None:
        """Remove ``key`` if present."""
        bucket = self._bucket(key)
        for i, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[i]
                return