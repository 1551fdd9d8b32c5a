"""A circular singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any

from dsakit.singly import _empty_list, _Node, _ValuesRepr, _walk


class CircularLinkedList(_ValuesRepr):
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator[Any]:
        """Walk once around the ring, starting at the head."""
        head = None if self._tail is None else self._tail.next
        return (node.data for node in islice(_walk(head), self._size))

    def __len__(self) -> int:
        return self._size

    def _link_after_tail(self, data: Any) -> _Node:
        node = _Node(data)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def _unlink_after(self, previous: _Node) -> Any:
        removed = previous.next
        assert removed is not None
        if removed is previous:
            self._tail = None
        else:
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.data

    def insert_at_beginning(self, data: Any) -> None:
        """Make *data* the new head."""
        self._link_after_tail(data)

    def insert_at_end(self, data: Any) -> None:
        """Make *data* the new last node, just before the head."""
        self._tail = self._link_after_tail(data)

    def delete_at_beginning(self) -> Any:
        """Remove the head and return its value."""
        if self._tail is None:
            raise _empty_list()
        return self._unlink_after(self._tail)

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        tail = self._tail
        if tail is None:
            raise _empty_list()
        previous = next(node for node in _walk(tail) if node.next is tail)
        return self._unlink_after(previous)