"""Exercises on singly linked lists."""

from __future__ import annotations

from typing import Any, Optional

from galgo.linkedlist import Node


def remove_duplicates(head: Node[Any]) -> Node[Any]:
    """Drop repeated values in place, keeping first occurrences; return the head."""
    current: Optional[Node[Any]] = head
    while current is not None:
        runner = current
        while runner.next is not None:
            if runner.next.value == current.value:
                runner.skip_next()
            else:
                runner = runner.next
        current = current.next
    return head


def kth_to_last(head: Node[Any], k: int) -> Node[Any]:
    """Advance ``k`` nodes from ``head``, stopping at the last node."""
    node = head
    for _ in range(k):
        if node.next is None:
            break
        node = node.next
    return node


def delete_middle(head: Node[Any], middle: Node[Any]) -> Node[Any]:
    """Unlink ``middle`` from the list starting at ``head``; return the head."""
    node: Optional[Node[Any]] = head
    while node is not None and node.next is not middle:
        node = node.next
    if node is None:
        raise ValueError("node is not in the list after its head")
    node.skip_next()
    return head


def partition(head: Optional[Node[Any]], x: Any) -> Optional[Node[Any]]:
    """Relink the list so values below ``x`` come first, each side in order."""
    low_head = low_tail = high_head = high_tail = None
    node = head
    while node is not None:
        current, node = node.detach()
        if current.value < x:
            if low_tail is None:
                low_head = current
            else:
                low_tail.next = current
            low_tail = current
        else:
            if high_tail is None:
                high_head = current
            else:
                high_tail.next = current
            high_tail = current
    if low_tail is None:
        return high_head
    low_tail.next = high_head
    return low_head