"""Sorting and searching over sequences of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding *values* in ascending order, sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Find *target* in the ascending sequence *values*.

    Returns the index of a matching item, or None when there is none.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        candidate = values[mid]
        if candidate == target:
            return mid
        if candidate < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to *target*, or None."""
    return next((index for index, item in enumerate(values) if item == target), None)