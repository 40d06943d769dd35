import pytest

from dsakit.recursion import fibonacci, is_palindrome, reverse_in_place


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_fibonacci_recurrence():
    for n in range(2, 40):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_returned_unchanged():
    assert fibonacci(-3) == -3


def test_reverse_in_place():
    values = [1, 2, 3, 4, 5]
    original = list(values)
    reverse_in_place(values)
    assert values == original[::-1]
    reverse_in_place(values)
    assert values == original


@pytest.mark.parametrize("values", [[], [9], [4, 8]])
def test_reverse_small_sequences(values):
    expected = list(reversed(values))
    reverse_in_place(values)
    assert values == expected


@pytest.mark.parametrize("text", ["MADAM", "", "a", "abba", "racecar"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["MADAME", "Madam", "ab", "abca"])
def test_non_palindromes(text):
    assert is_palindrome(text) is False