"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from dsakit.singly import _empty_list, _not_found, _ValuesRepr


@dataclass(eq=False)
class _Node:
    data: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList(_ValuesRepr):
    """A list of values linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.add_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def _find(self, value: Any) -> _Node:
        found = next((node for node in self._nodes() if node.data == value), None)
        if found is None:
            raise _not_found(value)
        return found

    def _link_before(self, data: Any, target: _Node | None) -> None:
        """Insert *data* before *target*, or at the end when *target* is None."""
        previous = self._tail if target is None else target.prev
        node = _Node(data, previous, target)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        if target is None:
            self._tail = node
        else:
            target.prev = node
        self._size += 1

    def _unlink(self, node: _Node | None, missing: Exception) -> Any:
        if node is None:
            raise missing
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.data

    def add_at_beginning(self, data: Any) -> None:
        """Put *data* in front of the first node."""
        self._link_before(data, self._head)

    def add_at_end(self, data: Any) -> None:
        """Put *data* after the last node."""
        self._link_before(data, None)

    def add_before(self, data: Any, value: Any) -> None:
        """Put *data* before the first node holding *value*; ValueError if absent."""
        self._link_before(data, self._find(value))

    def add_after(self, data: Any, value: Any) -> None:
        """Put *data* after the first node holding *value*; ValueError if absent."""
        self._link_before(data, self._find(value).next)

    def delete_at_beginning(self) -> Any:
        """Remove the first node and return its value."""
        return self._unlink(self._head, _empty_list())

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        return self._unlink(self._tail, _empty_list())

    def delete_before(self, value: Any) -> Any:
        """Remove the node before the first one holding *value* and return its value.

        Raises ValueError when *value* is absent and IndexError when it is first.
        """
        target = self._find(value)
        return self._unlink(target.prev, IndexError(f"no node before {value!r}"))

    def delete_after(self, value: Any) -> Any:
        """Remove the node after the first one holding *value* and return its value.

        Raises ValueError when *value* is absent and IndexError when it is last.
        """
        target = self._find(value)
        return self._unlink(target.next, IndexError(f"no node after {value!r}"))