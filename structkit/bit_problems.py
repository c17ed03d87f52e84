"""Classic bit-manipulation puzzles on 32-bit values."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable, Sequence, Tuple

BITS = 32
MASK32 = (1 << BITS) - 1


def _unsigned(n: int) -> int:
    if not 0 <= n <= MASK32:
        raise ValueError("value must fit in 32 unsigned bits")
    return n


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def count_one_bits(n: int) -> int:
    """Count the set bits of ``n`` as a 32-bit two's-complement value."""
    n &= MASK32
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def find_unique(values: Iterable[int]) -> int:
    """Return the one value that appears an odd number of times."""
    return reduce(xor, values, 0)


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of ``n``."""
    n = _unsigned(n)
    result = 0
    for _ in range(BITS):
        result = (result << 1) | (n & 1)
        n >>= 1
    return result


def find_missing_number(values: Sequence[int]) -> int:
    """Return the number of ``0..len(values)`` absent from ``values``."""
    return reduce(xor, range(len(values) + 1), 0) ^ reduce(xor, values, 0)


def product_sign(a: int, b: int, c: int) -> int:
    """Sign of ``a * b * c``: -1 for an odd count of negatives, else 1."""
    negatives = sum(1 for value in (a, b, c) if value < 0)
    return -1 if negatives % 2 else 1


def find_two_unique(values: Sequence[int]) -> Tuple[int, int]:
    """Return the two values that appear an odd number of times.

    The first has the lowest bit in which the two differ set.
    """
    combined = reduce(xor, values, 0)
    lowest = combined & -combined
    first = reduce(xor, (v for v in values if v & lowest), 0)
    second = reduce(xor, (v for v in values if not v & lowest), 0)
    return first, second


def left_rotate(n: int, d: int) -> int:
    n = _unsigned(n)
    d %= BITS
    return ((n << d) | (n >> (BITS - d))) & MASK32


def right_rotate(n: int, d: int) -> int:
    n = _unsigned(n)
    d %= BITS
    return ((n >> d) | (n << (BITS - d))) & MASK32


def reverse_bits_no_loop(n: int) -> int:
    """Reverse the 32 bits of ``n`` by swapping ever larger groups."""
    n = _unsigned(n)
    n = ((n >> 1) & 0x55555555) | ((n & 0x55555555) << 1)
    n = ((n >> 2) & 0x33333333) | ((n & 0x33333333) << 2)
    n = ((n >> 4) & 0x0F0F0F0F) | ((n & 0x0F0F0F0F) << 4)
    n = ((n >> 8) & 0x00FF00FF) | ((n & 0x00FF00FF) << 8)
    return ((n >> 16) | (n << 16)) & MASK32


def swap_bits(n: int, idx1: int, idx2: int) -> int:
    """Exchange bits ``idx1`` and ``idx2`` of ``n``."""
    differ = ((n >> idx1) ^ (n >> idx2)) & 1
    return n ^ ((differ << idx1) | (differ << idx2))