import pytest

from dsakit.hashing import frequencies, frequency_extremes, frequency_lookup

SAMPLE = [10, 5, 10, 15, 10, 5, 1, 2, 6, 9, 9, 1, 5, 6, 11]


def test_frequencies_counts_and_order():
    counts = frequencies(SAMPLE)
    assert list(counts) == list(dict.fromkeys(SAMPLE))
    assert sum(counts.values()) == len(SAMPLE)
    assert all(counts[value] == SAMPLE.count(value) for value in counts)


def test_frequencies_empty():
    assert frequencies([]) == {}


def test_frequency_lookup():
    queries = [10, 5, 99, 11]
    counts = frequencies(SAMPLE)
    assert frequency_lookup(SAMPLE, queries) == [counts.get(q, 0) for q in queries]


def test_frequency_lookup_absent_is_zero():
    assert frequency_lookup([1, 2, 3], [4]) == [0]


def test_frequency_extremes_on_sample():
    most, least = frequency_extremes(SAMPLE)
    counts = frequencies(SAMPLE)
    assert counts[most] == max(counts.values())
    assert counts[least] == min(counts.values())
    assert (most, least) == (10, 15)


def test_frequency_extremes_single_value():
    assert frequency_extremes([7, 7, 7]) == (7, 7)


def test_frequency_extremes_empty():
    with pytest.raises(ValueError):
        frequency_extremes([])