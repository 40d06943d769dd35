"""Classic comparison sorts.

Every sort returns a new ascending list and leaves its input untouched.
``partition`` is the exception: it rearranges a list in place, as quick sort needs.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
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


def bubble_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Bubble sort where each pass is followed by a recursive call on a shorter prefix."""
    items = list(values)

    def sort_prefix(n: int) -> None:
        if n <= 1:
            return
        for i in range(n - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
        sort_prefix(n - 1)

    sort_prefix(len(items))
    return items


def _sink_into_place(items: MutableSequence[Any], j: int) -> None:
    while j > 0 and items[j] < items[j - 1]:
        items[j], items[j - 1] = items[j - 1], items[j]
        j -= 1


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving each element left until its predecessor is not larger."""
    items = list(values)
    for i in range(len(items)):
        _sink_into_place(items, i)
    return items


def insertion_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Insertion sort driven by recursion over the position being inserted."""
    items = list(values)

    def insert_from(i: int) -> None:
        if i >= len(items):
            return
        _sink_into_place(items, i)
        insert_from(i + 1)

    insert_from(0)
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping the smallest remaining element to the front each round."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one; ties take the left element first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around ``values[low]`` in place.

    Afterwards everything left of the returned index is not larger than the
    pivot, everything right of it is larger, and the pivot sits at the index.
    """
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i < high:
            i += 1
        while values[j] > pivot and j > low:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = partition(items, low, high)
            pending.append((low, p - 1))
            pending.append((p + 1, high))
    return items