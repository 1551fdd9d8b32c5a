"""A bounded binary min-heap."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class HeapOverflowError(Exception):
    """Raised when pushing onto a heap that is already at capacity."""


class MinHeap:
    """A min-heap stored in an array, holding at most *capacity* items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Add *value*, keeping the smallest item at the root."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError(f"heap is full ({self.capacity} items)")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> Any:
        """Remove and return the smallest item."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[smallest], items[index] = items[index], items[smallest]
            index = smallest

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the items in their array order."""
        return iter(list(self._items))