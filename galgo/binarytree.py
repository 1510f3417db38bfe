"""Binary tree nodes, building from heap-ordered lists, and in-order walks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from galgo.heap import left_child, right_child

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node of a binary tree."""

    value: T
    left: Optional[TreeNode[T]] = None
    right: Optional[TreeNode[T]] = None


def from_heap_list(values: Sequence[Any]) -> Optional[TreeNode[Any]]:
    """Build a tree from values laid out in heap order; None marks a gap.

    Children listed under a gap are dropped. An empty sequence gives None.
    """
    if not values:
        return None
    size = len(values)
    nodes: list[Optional[TreeNode[Any]]] = [None] * size
    root = nodes[0] = TreeNode(values[0])
    for i in range(size // 2):
        node = nodes[i]
        if node is None:
            continue
        left = left_child(i)
        if left < size and values[left] is not None:
            node.left = nodes[left] = TreeNode(values[left])
        right = right_child(i)
        if right < size and values[right] is not None:
            node.right = nodes[right] = TreeNode(values[right])
    return root


def inorder(tree: Optional[TreeNode[T]]) -> Iterator[TreeNode[T]]:
    """Yield the nodes of ``tree`` in in-order sequence."""
    stack: list[TreeNode[T]] = []
    node = tree
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node
            node = node.right