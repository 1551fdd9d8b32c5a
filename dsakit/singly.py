"""A singly linked list of values, and the node pieces shared by the linked containers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


def _walk(node: _Node | None) -> Iterator[_Node]:
    """Yield *node* and every node reachable from it through ``next``."""
    while node is not None:
        yield node
        node = node.next


def _not_found(value: Any) -> ValueError:
    return ValueError(f"{value!r} not found")


def _empty_list() -> IndexError:
    return IndexError("the list is empty")


class _ValuesRepr:
    """Gives a container a repr that lists its values."""

    def _values(self) -> Iterator[Any]:
        return iter(self)  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r})"


class SinglyLinkedList(_ValuesRepr):
    """A list of values linked in one direction, from head to tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._head))

    def __len__(self) -> int:
        return self._size

    def _previous(self, value: Any) -> _Node:
        """Return the node just before the first non-head node holding *value*."""
        for node in _walk(self._head):
            if node.next is not None and node.next.data == value:
                return node
        raise _not_found(value)

    def _link_after(self, node: _Node, data: Any) -> None:
        node.next = _Node(data, node.next)
        if node is self._tail:
            self._tail = node.next
        self._size += 1

    def _unlink_after(self, node: _Node) -> Any:
        removed = node.next
        assert removed is not None
        node.next = removed.next
        if removed is self._tail:
            self._tail = node
        self._size -= 1
        return removed.data

    def insert_at_beginning(self, data: Any) -> None:
        """Put *data* in front of the first node."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at_end(self, data: Any) -> None:
        """Put *data* after the last node."""
        if self._tail is None:
            self.insert_at_beginning(data)
        else:
            self._link_after(self._tail, data)

    def insert_before(self, data: Any, value: Any) -> None:
        """Put *data* before the first node holding *value*.

        On an empty list *data* becomes the only node. Raises ValueError
        when a non-empty list holds no *value*.
        """
        if self._head is None or self._head.data == value:
            self.insert_at_beginning(data)
        else:
            self._link_after(self._previous(value), data)

    def insert_after(self, data: Any, value: Any) -> None:
        """Put *data* after the first node holding *value*.

        On an empty list *data* becomes the only node. Raises ValueError
        when a non-empty list holds no *value*.
        """
        if self._head is None:
            self.insert_at_beginning(data)
            return
        target = next((node for node in _walk(self._head) if node.data == value), None)
        if target is None:
            raise _not_found(value)
        self._link_after(target, data)

    def delete_at_beginning(self) -> Any:
        """Remove the first node and return its value."""
        removed = self._head
        if removed is None:
            raise _empty_list()
        self._head = removed.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return removed.data

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._head is None:
            raise _empty_list()
        if self._head is self._tail:
            return self.delete_at_beginning()
        previous = next(node for node in _walk(self._head) if node.next is self._tail)
        return self._unlink_after(previous)

    def delete_value(self, value: Any) -> None:
        """Remove the first node holding *value*.

        Raises IndexError on an empty list and ValueError when *value* is absent.
        """
        if self._head is None:
            raise _empty_list()
        if self._head.data == value:
            self.delete_at_beginning()
        else:
            self._unlink_after(self._previous(value))

    def sort(self) -> None:
        """Order the values ascending in place, by exchanging node data."""
        for node in _walk(self._head):
            for other in _walk(node.next):
                if node.data > other.data:
                    node.data, other.data = other.data, node.data

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous