"""Elementary number theory on non-negative integers."""

from __future__ import annotations

import math


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(n)]


def is_armstrong(n: int) -> bool:
    """Report whether ``n`` equals the sum of its digits raised to the digit count."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = _digits(n)
    return n == sum(d ** len(digits) for d in digits)


def count_nonzero_digits(n: int) -> int:
    """Count the non-zero decimal digits of a positive number (0 for n <= 0)."""
    if n <= 0:
        return 0
    return sum(1 for d in _digits(n) if d != 0)


def is_palindrome_number(n: int) -> bool:
    """Report whether the decimal digits of ``n`` read the same both ways."""
    if n < 0:
        return False
    text = str(n)
    return text == text[::-1]


def is_prime(n: int) -> bool:
    """Trial division up to the square root."""
    if n < 2:
        return False
    return all(n % i != 0 for i in range(2, math.isqrt(n) + 1))


def count_dividing_digits(n: int) -> int:
    """Count the non-zero digits of ``n`` that divide ``n`` exactly."""
    if n <= 0:
        return 0
    return sum(1 for d in _digits(n) if d > 0 and n % d == 0)


def sum_of_divisors(n: int) -> int:
    """Sum of all divisors of every integer from 1 to ``n``."""
    return sum((n // i) * i for i in range(1, n + 1))


def sum_of_divisors_naive(n: int) -> int:
    """Same total as :func:`sum_of_divisors`, enumerating divisor pairs of each i."""
    total = 0
    for i in range(1, n + 1):
        for j in range(1, math.isqrt(i) + 1):
            if i % j == 0:
                total += j
                if j != i // j:
                    total += i // j
    return total