"""Exercises on binary trees: depth, value differences and level order."""

from __future__ import annotations

from collections import deque
from typing import Optional

from galgo.binarytree import TreeNode, inorder


def max_depth_v1(tree: Optional[TreeNode[int]]) -> int:
    """Number of nodes on the longest root-to-leaf path, recursively."""
    if tree is None:
        return 0
    return 1 + max(max_depth_v1(tree.left), max_depth_v1(tree.right))


def max_depth_v2(tree: Optional[TreeNode[int]]) -> int:
    """Number of nodes on the longest root-to-leaf path, with an explicit stack."""
    if tree is None:
        return 0
    deepest = 0
    stack = [(tree, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


def min_difference_tree_v1(tree: Optional[TreeNode[int]]) -> int:
    """Smallest difference of a later in-order value minus the first, capped at zero.

    Every value is compared with the first in-order value only, and the
    running minimum starts at zero, so a search tree always gives zero.
    """
    values = [node.value for node in inorder(tree)]
    if not values:
        return 0
    first = values[0]
    return min([0, *(value - first for value in values[1:])])


def zigzag_traversal_v1(tree: Optional[TreeNode[int]]) -> list[list[int]]:
    """Values level by level, each node's children queued in alternating order.

    A node queued left-to-right queues its left child first; its children
    queue right child first, and so on. The deepest level is not included.
    """
    if tree is None:
        raise ValueError("tree must not be empty")
    rows: list[list[int]] = []
    queue = deque([(tree, 1, True)])
    current_depth = 1
    current_row: list[int] = []
    while queue:
        node, depth, left_to_right = queue.popleft()
        if depth == current_depth:
            current_row.append(node.value)
        else:
            rows.append(current_row)
            current_depth = depth
            current_row = [node.value]
        children = (node.left, node.right) if left_to_right else (node.right, node.left)
        for child in children:
            if child is not None:
                queue.append((child, depth + 1, not left_to_right))
    return rows