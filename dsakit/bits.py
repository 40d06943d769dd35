"""Bit manipulation helpers and binary/decimal conversions."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from itertools import zip_longest


class Parity(str, Enum):
    """Whether an integer is odd or even; compares equal to its label."""

    ODD = "Odd"
    EVEN = "Even"


def _binary_digits(n: int) -> Iterator[int]:
    """Yield the digits of a decimal-written binary number, least significant first."""
    if n < 0:
        raise ValueError("binary number must be non-negative")
    while n:
        n, digit = divmod(n, 10)
        if digit > 1:
            raise ValueError(f"digit {digit} is not a binary digit")
        yield digit


def add_binary(a: int, b: int) -> int:
    """Add two binary numbers written with decimal digits, e.g. 111 + 1011."""
    result = 0
    place = 1
    carry = 0
    for bit1, bit2 in zip_longest(_binary_digits(a), _binary_digits(b), fillvalue=0):
        carry, bit = divmod(bit1 + bit2 + carry, 2)
        result += bit * place
        place *= 10
    return result + carry * place


def is_bit_set(n: int, k: int) -> bool:
    """Report whether bit ``k`` of ``n`` is one."""
    return (n >> k) & 1 == 1


def parity(n: int) -> Parity:
    """Return :attr:`Parity.ODD` or :attr:`Parity.EVEN` from the lowest bit of ``n``."""
    lowest_bit = n & 1
    if lowest_bit == 1:
        return Parity.ODD
    return Parity.EVEN


def is_power_of_two(n: int) -> bool:
    """Report whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def clear_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def set_bit(n: int, k: int) -> int:
    """Return ``n`` with bit ``k`` set."""
    return n | (1 << k)


def toggle_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` flipped."""
    return n ^ (1 << i)


def remove_last_set_bit(n: int) -> int:
    """Return ``n`` with its lowest set bit cleared."""
    return n & (n - 1)


def binary_to_decimal(text: str) -> int:
    """Convert a string of 0s and 1s into its integer value."""
    value = 0
    for ch in text:
        if ch not in "01":
            raise ValueError(f"{ch!r} is not a binary digit")
        value = value * 2 + (ch == "1")
    return value


def decimal_to_binary(n: int) -> str:
    """Convert a non-negative integer into a string of 0s and 1s."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits: list[str] = []
    while n:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits)) or "0"


def count_set_bits(n: int) -> int:
    """Count the one bits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with three exclusive-ors."""
    a ^= b
    b ^= a
    a ^= b
    return a, b