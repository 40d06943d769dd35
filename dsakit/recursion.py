"""Small recursive routines."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n up to 1 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse the sequence in place by swapping ends inward."""

    def swap(i: int, j: int) -> None:
        if i < j:
            values[i], values[j] = values[j], values[i]
            swap(i + 1, j - 1)

    swap(0, len(values) - 1)


def is_palindrome(text: str) -> bool:
    """Report whether the text reads the same forwards and backwards (case-sensitive)."""

    def check(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[-i - 1]:
            return False
        return check(i + 1)

    return check(0)