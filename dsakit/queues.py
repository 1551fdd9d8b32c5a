"""Queues: bounded array queues, a linked queue and a priority queue."""

from __future__ import annotations

import bisect
import itertools
from collections.abc import Iterator
from typing import Any

from dsakit.singly import _Node, _ValuesRepr, _walk


class QueueOverflowError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueUnderflowError(Exception):
    """Raised when taking from or looking into an empty queue."""


class _Queue(_ValuesRepr):
    def is_empty(self) -> bool:
        return len(self) == 0  # type: ignore[arg-type]

    def _check_not_empty(self, action: str) -> None:
        if self.is_empty():
            raise QueueUnderflowError(f"{action} on an empty queue")


def _check_capacity(capacity: int, minimum: int) -> int:
    if capacity < minimum:
        raise ValueError(f"capacity must be at least {minimum}")
    return capacity


def _full(capacity: int) -> QueueOverflowError:
    return QueueOverflowError(f"queue is full ({capacity} slots)")


class ArrayQueue(_Queue):
    """A queue in a fixed array whose slots are not reused until it empties.

    Once the last slot has been filled the queue reports itself full, even
    if items have since been taken from the front; it starts again from the
    first slot only after it has been emptied completely.
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = _check_capacity(capacity, 0)
        self._slots: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add *value* at the rear."""
        if self.is_full():
            raise _full(self.capacity)
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        self._check_not_empty("peek")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue(_Queue):
    """A bounded queue in a ring of slots, reusing slots freed at the front."""

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity, 1)
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, value: Any) -> None:
        """Add *value* at the rear, wrapping round to the first slot."""
        if self._count == self.capacity:
            raise _full(self.capacity)
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        self._slots[self._front] = None
        self._count -= 1
        self._front = 0 if self._count == 0 else (self._front + 1) % self.capacity
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        self._check_not_empty("peek")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        positions = ((self._front + offset) % self.capacity for offset in range(self._count))
        return iter([self._slots[position] for position in positions])

    def __len__(self) -> int:
        return self._count


class LinkedQueue(_Queue):
    """An unbounded queue of linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add *value* at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        assert self._front is not None
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        self._check_not_empty("peek")
        assert self._front is not None
        return self._front.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._front))

    def __len__(self) -> int:
        return self._size


class PriorityQueue(_Queue):
    """A queue served lowest priority number first.

    Values of equal priority leave in the order they arrived.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[Any, int, Any]] = []
        self._counter = itertools.count()

    def is_empty(self) -> bool:
        return not self._entries

    def enqueue(self, value: Any, priority: Any) -> None:
        """Add *value*, behind every entry whose priority is not greater."""
        bisect.insort(self._entries, (priority, next(self._counter), value))

    def dequeue(self) -> Any:
        """Remove and return the value with the lowest priority number."""
        value = self.peek()
        del self._entries[0]
        return value

    def peek(self) -> Any:
        """Return the next value to leave without removing it."""
        self._check_not_empty("peek")
        return self._entries[0][2]

    def __iter__(self) -> Iterator[Any]:
        return iter([value for _, _, value in self._entries])

    def __len__(self) -> int:
        return len(self._entries)