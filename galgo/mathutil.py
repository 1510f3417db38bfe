"""Integer helpers: parsing, primes, integer square roots and sums."""

from __future__ import annotations

from collections.abc import Iterable

INT_SIZE = 64
MAX_INT = (1 << (INT_SIZE - 1)) - 1
MIN_INT = -(1 << (INT_SIZE - 1))
MIN_INT64 = -(1 << 63)
MAX_INT64 = (1 << 63) - 1
MIN_INT32 = -(1 << 31)
MAX_INT32 = (1 << 31) - 1
MIN_INT16 = -(1 << 15)
MAX_INT16 = (1 << 15) - 1
MIN_INT8 = -(1 << 7)
MAX_INT8 = (1 << 7) - 1

_ZERO = ord("0")
_MINUS = ord("-")


def from_string(s: str) -> int:
    """Parse a decimal integer, reading bytes from the last to the first.

    A minus sign negates everything accumulated to its right.
    """
    result = 0
    for place, byte in enumerate(reversed(s.encode())):
        if byte == _MINUS:
            result = -result
        else:
            result += ((byte - _ZERO) & 0xFF) * 10**place
    return result


def is_digit(char: str | int) -> bool:
    """Tell whether a single character (or byte value) is an ASCII digit."""
    if isinstance(char, int):
        return _ZERO <= char <= _ZERO + 9
    return len(char) == 1 and char in "0123456789"


def absolute(x: int) -> int:
    """Return the absolute value of an integer."""
    return abs(x)


def sqrt(n: int) -> int:
    """Return the integer square root of ``n`` by Newton's method."""
    if n < 0:
        raise ValueError("square root of a negative number")
    if n == 0:
        return 0
    x = n
    while True:
        y = (x + n // x) // 2
        if y >= x:
            return x
        x = y


def sieve_of_eratosthenes(limit: int) -> list[bool]:
    """Return flags for 0..limit where a flag is True if its index is prime."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    flags = [True] * (limit + 1)
    flags[0] = flags[1] = False
    size = len(flags)
    root = sqrt(limit)
    prime = 2
    while prime <= root:
        start = prime * prime
        flags[start::prime] = [False] * len(range(start, size, prime))
        prime = next((i for i in range(prime + 1, size) if flags[i]), size)
    return flags


def generate_primes(limit: int) -> list[int]:
    """Return all primes up to and including ``limit``."""
    return [number for number, is_prime in enumerate(sieve_of_eratosthenes(limit)) if is_prime]


def sum_of(nums: Iterable[int | float]) -> int | float:
    """Return the sum of the numbers."""
    return sum(nums)