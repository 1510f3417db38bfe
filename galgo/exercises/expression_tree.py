"""Expression trees built from postfix tokens and evaluated on integers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from galgo.mathutil import from_string


class ExprNode(ABC):
    """A node of an arithmetic expression tree."""

    @abstractmethod
    def evaluate(self) -> int:
        """Compute the integer value of the subtree."""


@dataclass
class ValueNode(ExprNode):
    """A leaf holding an integer."""

    value: int

    def evaluate(self) -> int:
        return self.value


@dataclass
class _OperationNode(ExprNode):
    left: ExprNode
    right: ExprNode

    @staticmethod
    @abstractmethod
    def _apply(a: int, b: int) -> int:
        """Combine the two operand values."""

    def evaluate(self) -> int:
        return self._apply(self.left.evaluate(), self.right.evaluate())


class AddNode(_OperationNode):
    """Sum of two subtrees."""

    @staticmethod
    def _apply(a: int, b: int) -> int:
        return a + b


class SubtractNode(_OperationNode):
    """Difference of two subtrees."""

    @staticmethod
    def _apply(a: int, b: int) -> int:
        return a - b


class MultiplyNode(_OperationNode):
    """Product of two subtrees."""

    @staticmethod
    def _apply(a: int, b: int) -> int:
        return a * b


class DivideNode(_OperationNode):
    """Integer quotient of two subtrees, truncated toward zero."""

    @staticmethod
    def _apply(a: int, b: int) -> int:
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient


OPERATIONS: dict[str, type[_OperationNode]] = {
    "+": AddNode,
    "-": SubtractNode,
    "*": MultiplyNode,
    "/": DivideNode,
}


def make_operation(symbol: str, left: ExprNode, right: ExprNode) -> ExprNode:
    """Build the operation node for ``symbol``; raise ValueError if unknown."""
    try:
        return OPERATIONS[symbol](left, right)
    except KeyError:
        raise ValueError(f"unknown operation: {symbol!r}") from None


def build_tree(postfix: Sequence[str]) -> ExprNode:
    """Build an expression tree from postfix tokens and return its root."""
    stack: list[ExprNode] = []
    for token in postfix:
        if token in OPERATIONS:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(make_operation(token, left, right))
        else:
            stack.append(ValueNode(from_string(token)))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def expression_tree_solution(
    builder: Callable[[Sequence[str]], ExprNode],
) -> Callable[[Sequence[str]], int]:
    """Return a function that builds a tree with ``builder`` and evaluates it."""

    def solve(postfix: Sequence[str]) -> int:
        return builder(postfix).evaluate()

    return solve