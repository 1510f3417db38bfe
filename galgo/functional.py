"""Function composition and string conversion helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def pipe(*args: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: ``pipe(f, g)(x) == g(f(x))``."""
    if not args:
        raise ValueError("pipe needs at least one function")

    def piped(value: Any) -> Any:
        for func in args:
            value = func(value)
        return value

    return piped


def to_chars(s: str) -> list[str]:
    """Split a string into its characters."""
    return list(s)


def from_chars(chars: Iterable[str]) -> str:
    """Join characters back into a string."""
    return "".join(chars)


def to_bytes(s: str) -> bytes:
    """Encode a string as UTF-8 bytes."""
    return s.encode()