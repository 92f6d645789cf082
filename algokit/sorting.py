"""Comparison sorts. Each function returns a new sorted list and leaves its input alone."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent items, stopping once a pass swaps nothing."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front of the unsorted part."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[T], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its first item; return the pivot's place."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort_range(items: list[T], low: int, high: int) -> None:
    # Recurse into the smaller part and loop over the larger to bound the depth.
    while low < high:
        p = _partition(items, low, high)
        if p - low < high - p:
            _quick_sort_range(items, low, p - 1)
            low = p + 1
        else:
            _quick_sort_range(items, p + 1, high)
            high = p - 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort recursively by partitioning around the first item of each range."""
    items = list(values)
    _quick_sort_range(items, 0, len(items) - 1)
    return items


def quick_sort_iterative(values: Iterable[T]) -> list[T]:
    """Sort by partitioning, keeping the ranges still to sort on an explicit stack."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = _partition(items, low, high)
            pending.append((low, p - 1))
            pending.append((p + 1, high))
    return items