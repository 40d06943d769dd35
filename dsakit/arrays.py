"""Searching, rotating and reshaping plain sequences of integers."""

from __future__ import annotations

from collections.abc import Sequence


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly smaller than the maximum."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    largest: int | None = None
    second: int | None = None
    for value in values:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value != largest and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("all values are equal; there is no second largest")
    return second


def second_smallest(values: Sequence[int]) -> int:
    """Return the smallest value strictly larger than the minimum."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    smallest: int | None = None
    second: int | None = None
    for value in values:
        if smallest is None or value < smallest:
            second, smallest = smallest, value
        elif value != smallest and (second is None or value < second):
            second = value
    if second is None:
        raise ValueError("all values are equal; there is no second smallest")
    return second


def second_order_elements(values: Sequence[int]) -> tuple[int, int]:
    """Return ``(second_largest, second_smallest)`` for the values."""
    return second_largest(values), second_smallest(values)


def binary_search(values: Sequence[int], target: int) -> bool:
    """Report whether ``target`` occurs in the ascending sequence."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def binary_search_recursive(values: Sequence[int], target: int) -> bool:
    """Report whether ``target`` occurs in the ascending sequence, recursively."""

    def search(low: int, high: int) -> bool:
        if low > high:
            return False
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if target < values[mid]:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(values) - 1)


def linear_search(values: Sequence[int], target: int) -> bool:
    """Report whether ``target`` occurs anywhere in the values."""
    return any(value == target for value in values)


def left_rotate(values: Sequence[int]) -> list[int]:
    """Return the values rotated left by one position."""
    items = list(values)
    if not items:
        return items
    return items[1:] + items[:1]


def rotate_left(values: Sequence[int], k: int) -> list[int]:
    """Return the values rotated left by ``k`` positions (modulo the length)."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[k:] + items[:k]


def move_zeros_to_end(values: Sequence[int]) -> list[int]:
    """Return the values with every zero moved to the end, order otherwise kept."""
    nonzero = [value for value in values if value != 0]
    return nonzero + [0] * (len(values) - len(nonzero))


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Collapse runs of equal neighbours; on sorted input this leaves unique values."""
    result: list[int] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result