"""Binary trees: traversals and arithmetic expression trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_OPERATORS = frozenset("+-*/")
_DIGITS = frozenset("0123456789")
_CLOSERS = frozenset(")]}")


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding *data* and up to two children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def add_left(self, data: Any) -> TreeNode:
        """Attach a new left child holding *data* and return it."""
        self.left = TreeNode(data)
        return self.left

    def add_right(self, data: Any) -> TreeNode:
        """Attach a new right child holding *data* and return it."""
        self.right = TreeNode(data)
        return self.right


def _pre(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.data
    yield from _pre(node.left)
    yield from _pre(node.right)


def _in(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _in(node.left)
    yield node.data
    yield from _in(node.right)


def _post(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _post(node.left)
    yield from _post(node.right)
    yield node.data


def pre_order(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order."""
    return list(_pre(root))


def in_order(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_in(root))


def post_order(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order."""
    return list(_post(root))


def breadth_first(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, left to right."""
    if root is None:
        return []
    values: list[Any] = []
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        values.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return values


def _combine(stack: list[TreeNode]) -> None:
    if len(stack) < 3:
        raise ValueError("malformed expression: an operator needs two operands")
    right = stack.pop()
    operator = stack.pop()
    left = stack.pop()
    operator.left = left
    operator.right = right
    stack.append(operator)


def build_expression_tree(text: str) -> TreeNode:
    """Build a tree from a bracketed expression of single-digit operands.

    Each digit and each of ``+ - * /`` becomes a node; a closing bracket
    joins the last operand, operator and operand into one subtree, and
    whatever remains at the end is joined the same way. Other characters
    are ignored. Raises ValueError when the expression does not reduce to
    a single tree.
    """
    stack: list[TreeNode] = []
    for char in text:
        if char in _DIGITS or char in _OPERATORS:
            stack.append(TreeNode(char))
        elif char in _CLOSERS:
            _combine(stack)
    if len(stack) > 1:
        _combine(stack)
    if len(stack) != 1:
        raise ValueError("malformed expression: it does not reduce to one tree")
    return stack[0]


def _tokens(node: TreeNode | None) -> Iterator[str]:
    if node is None:
        return
    if node.left is not None:
        yield "("
    yield from _tokens(node.left)
    yield str(node.data)
    yield from _tokens(node.right)
    if node.right is not None:
        yield ")"


def format_expression(root: TreeNode | None) -> str:
    """Write the tree in infix form, bracketing every subtree with children."""
    return " ".join(_tokens(root))