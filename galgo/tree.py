"""A tree node with any number of ordered children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A tree node holding a value and a list of children."""

    value: T
    children: list[Node[T]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.children)

    def child(self, index: int) -> Optional[Node[T]]:
        """Return the child at ``index``, or None past the end."""
        if index < 0:
            raise IndexError("child index must not be negative")
        if index >= len(self.children):
            return None
        return self.children[index]

    def append(self, value: T) -> Node[T]:
        """Add a new child holding ``value`` and return it."""
        node = Node(value)
        self.children.append(node)
        return node

    def append_node(self, node: Node[T]) -> None:
        """Add ``node`` as the last child."""
        self.children.append(node)

    def remove(self, node: Node[T]) -> Optional[Node[T]]:
        """Remove ``node`` (by identity) from the children.

        Return the removed node, or None if it was not a child.
        """
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                return node
        return None