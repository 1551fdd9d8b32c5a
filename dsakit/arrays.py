"""Operations on lists and tables of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def insert_sorted(values: Iterable[Any], item: Any) -> list[Any]:
    """Return a copy of *values* with *item* placed before the first larger element."""
    items = list(values)
    position = next(
        (index for index, current in enumerate(items) if item < current), len(items)
    )
    items.insert(position, item)
    return items


def insert_at(values: Iterable[Any], item: Any, position: int) -> list[Any]:
    """Return a copy of *values* with *item* inserted at index *position*."""
    items = list(values)
    if not 0 <= position <= len(items):
        raise IndexError(f"position {position} outside 0..{len(items)}")
    items.insert(position, item)
    return items


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the item from *second* is taken first.
    """
    merged: list[Any] = []
    left = iter(first)
    right = iter(second)
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            merged.append(a)
            a = next(left, sentinel)
        else:
            merged.append(b)
            b = next(right, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right)
    return merged


def multiply_matrices(
    a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]]
) -> list[list[Any]]:
    """Return the matrix product of *a* and *b*."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must equal rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def swap_min_max(values: Iterable[Any]) -> list[Any]:
    """Return a copy of *values* with its first minimum and first maximum swapped."""
    items = list(values)
    if not items:
        raise ValueError("cannot swap extremes of an empty sequence")
    low = min(range(len(items)), key=items.__getitem__)
    high = max(range(len(items)), key=lambda index: (items[index], -index))
    items[low], items[high] = items[high], items[low]
    return items


def remove_value(values: Iterable[Any], item: Any) -> list[Any]:
    """Return a copy of *values* without any element equal to *item*."""
    return [current for current in values if current != item]


def remove_at(values: Iterable[Any], position: int) -> list[Any]:
    """Return a copy of *values* without the element at index *position*."""
    items = list(values)
    if not 0 <= position < len(items):
        raise IndexError(f"position {position} outside 0..{len(items) - 1}")
    del items[position]
    return items


def row_totals(table: Iterable[Iterable[Any]]) -> list[Any]:
    """Return the sum of each row of *table*."""
    return [sum(row) for row in table]


def column_totals(table: Iterable[Iterable[Any]]) -> list[Any]:
    """Return the sum of each column of *table*."""
    return [sum(column) for column in zip(*table)]