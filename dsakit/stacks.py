"""Stacks, bracket matching and stack-based reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.singly import _Node, _ValuesRepr, _walk


class StackFullError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(Exception):
    """Raised when popping or peeking an empty stack."""


class _Stack(_ValuesRepr):
    def _check_not_empty(self, action: str) -> None:
        if self.is_empty():  # type: ignore[attr-defined]
            raise StackEmptyError(f"{action} on an empty stack")


class ArrayStack(_Stack):
    """A stack holding at most *capacity* items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def _values(self) -> Iterator[Any]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put *value* on top."""
        if self.is_full():
            raise StackFullError(f"stack is full ({self.capacity} items)")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        self._check_not_empty("pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        self._check_not_empty("peek")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack(_Stack):
    """An unbounded stack of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def _values(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._top))

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        """Put *value* on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        value = self.peek()
        assert self._top is not None
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        self._check_not_empty("peek")
        assert self._top is not None
        return self._top.data

    def __len__(self) -> int:
        return self._size


_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Tell whether the (), [] and {} brackets in *expression* nest correctly."""
    stack = LinkedStack()
    for char in expression:
        if char in _OPENERS:
            stack.push(char)
        elif char in _PAIRS:
            if stack.is_empty() or stack.pop() != _PAIRS[char]:
                return False
    return stack.is_empty()


def reverse_with_stack(values: Iterable[Any]) -> list[Any]:
    """Return *values* in reverse order, by pushing all and popping all."""
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    return [stack.pop() for _ in range(len(stack))]