"""Frequency counting over sequences of values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def frequencies(values: Iterable[Hashable]) -> dict[Hashable, int]:
    """Map each distinct value to its count, in order of first appearance."""
    return dict(Counter(values))


def frequency_lookup(
    values: Iterable[Hashable], queries: Iterable[Hashable]
) -> list[int]:
    """Return how often each query occurs in ``values`` (0 when absent)."""
    counts = Counter(values)
    return [counts[query] for query in queries]


def frequency_extremes(values: Sequence[Hashable]) -> tuple[Hashable, Hashable]:
    """Return ``(most_frequent, least_frequent)``; ties go to the earliest value."""
    counts = frequencies(values)
    if not counts:
        raise ValueError("no values to count")
    most = max(counts, key=counts.__getitem__)
    least = min(counts, key=counts.__getitem__)
    return most, least