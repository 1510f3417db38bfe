"""A singly linked list built from nodes."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A node of a singly linked list; a node also stands for the list it heads."""

    value: T
    next: Optional[Node[T]] = None

    def _nodes(self) -> Iterator[Node[T]]:
        node: Optional[Node[T]] = self
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def to_list(self) -> list[T]:
        """Return the values from this node to the end."""
        return list(self)

    def detach(self) -> tuple[Node[T], Optional[Node[T]]]:
        """Cut this node off from the rest; return the node and the rest."""
        rest = self.next
        self.next = None
        return self, rest

    def has_next(self) -> bool:
        """Tell whether another node follows."""
        return self.next is not None

    def append(self, value: T) -> Node[T]:
        """Append a new node holding ``value`` at the end and return it."""
        return self.append_node(Node(value))

    def append_node(self, node: Optional[Node[T]]) -> Optional[Node[T]]:
        """Link ``node`` after the last node and return it."""
        tail = self
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def skip_next(self) -> Optional[Node[T]]:
        """Unlink the following node and return it, or None if there is none."""
        removed = self.next
        if removed is None:
            return None
        self.next = removed.next
        return removed

    def replace_next_node(self, node: Node[T]) -> None:
        """Put ``node`` in place of the following node, or append it."""
        if self.next is None:
            self.append_node(node)
            return
        node.next = self.next.next
        self.next = node

    def replace_next(self, value: T) -> None:
        """Put a new node holding ``value`` in place of the following node."""
        self.replace_next_node(Node(value))

    def insert(self, node: Node[T]) -> None:
        """Link ``node`` directly after this node."""
        node.next = self.next
        self.next = node


def from_list(values: Sequence[T]) -> Node[T]:
    """Build a list of nodes from a non-empty sequence and return its head."""
    if not values:
        raise ValueError("cannot build a linked list from no values")
    head = Node(values[0])
    tail = head
    for value in values[1:]:
        tail.next = Node(value)
        tail = tail.next
    return head