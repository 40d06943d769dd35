import pytest

from dsakit.arrays import (
    binary_search,
    binary_search_recursive,
    left_rotate,
    linear_search,
    move_zeros_to_end,
    remove_duplicates,
    rotate_left,
    second_largest,
    second_order_elements,
    second_smallest,
)

SORTED = [3, 4, 6, 7, 9, 12, 16, 17]
MIXED = [1, 0, 2, 3, 2, 0, 0, 4, 5, 1]


def test_second_order_on_source_example():
    values = [3, 4, 5, 2]
    assert second_largest(values) == 4
    assert second_smallest(values) == 3


@pytest.mark.parametrize("values", [[3, 4, 5, 2], [9, 9, 1, 7, 7], [-4, -1, -9, 0]])
def test_second_order_matches_distinct_sorted(values):
    distinct = sorted(set(values))
    assert second_largest(values) == distinct[-2]
    assert second_smallest(values) == distinct[1]


def test_second_order_elements_pairs_both():
    values = [10, 20, 30, 40]
    assert second_order_elements(values) == (
        second_largest(values),
        second_smallest(values),
    )


@pytest.mark.parametrize("values", [[], [1], [5, 5, 5]])
def test_second_order_errors(values):
    with pytest.raises(ValueError):
        second_largest(values)
    with pytest.raises(ValueError):
        second_smallest(values)


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_binary_search_finds_every_member(search):
    assert all(search(SORTED, value) for value in SORTED)


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
@pytest.mark.parametrize("target", [10, 89, 0, 5])
def test_binary_search_missing(search, target):
    assert search(SORTED, target) is False


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_binary_search_empty(search):
    assert search([], 1) is False


def test_linear_search():
    assert linear_search(MIXED, 2) is True
    assert linear_search(MIXED, 7) is False
    assert linear_search([], 0) is False


def test_left_rotate_moves_first_to_end():
    values = [1, 4, 4, 5, 6, 1, 7]
    rotated = left_rotate(values)
    assert rotated[-1] == values[0]
    assert rotated[:-1] == values[1:]
    assert values == [1, 4, 4, 5, 6, 1, 7]


def test_left_rotate_empty():
    assert left_rotate([]) == []


def test_rotate_left_equals_repeated_single_rotations():
    values = [1, 3, 4, 55, 15, 6, 67, 41, 59]
    expected = values
    for _ in range(3):
        expected = left_rotate(expected)
    assert rotate_left(values, 3) == expected


def test_rotate_left_wraps_modulo_length():
    values = [1, 3, 4, 55, 15, 6, 67, 41, 59]
    assert rotate_left(values, 3 + len(values)) == rotate_left(values, 3)
    assert rotate_left(values, len(values)) == values
    assert rotate_left([], 4) == []


def test_move_zeros_to_end():
    result = move_zeros_to_end(MIXED)
    zeros = MIXED.count(0)
    assert len(result) == len(MIXED)
    assert result[len(result) - zeros:] == [0] * zeros
    assert [v for v in result if v] == [v for v in MIXED if v]


def test_remove_duplicates_on_sorted_input():
    values = [1, 2, 2, 3, 3, 3, 4, 4, 5, 5]
    assert remove_duplicates(values) == sorted(set(values))


def test_remove_duplicates_only_collapses_neighbours():
    result = remove_duplicates([2, 2, 1, 1, 2])
    assert all(a != b for a, b in zip(result, result[1:]))
    assert result.count(2) == 2