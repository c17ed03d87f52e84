"""Operations on 64-bit bit arrays held in plain integers."""

from __future__ import annotations

SIZE = 64
MASK = (1 << SIZE) - 1

_NIBBLE_BITS = 4
_BIT_LUT = (0, 1, 1, 2, 1, 2, 2, 3, 1, 2, 2, 3, 2, 3, 3, 4)


def _check(arr: int) -> int:
    if not 0 <= arr <= MASK:
        raise ValueError("bit array must fit in 64 unsigned bits")
    return arr


def _check_index(index: int) -> None:
    if not 0 <= index < SIZE:
        raise IndexError("bit index out of range")


def get(arr: int, index: int) -> int:
    """Return bit ``index`` of ``arr`` as 0 or 1."""
    _check(arr)
    _check_index(index)
    return (arr >> index) & 1


def set_on(arr: int, index: int) -> int:
    _check(arr)
    _check_index(index)
    return arr | (1 << index)


def set_off(arr: int, index: int) -> int:
    _check(arr)
    _check_index(index)
    return arr & ~(1 << index) & MASK


def flip(arr: int, index: int) -> int:
    _check(arr)
    _check_index(index)
    return arr ^ (1 << index)


def count_on(arr: int) -> int:
    """Count set bits with parallel bit summation."""
    arr = _check(arr)
    arr = ((arr & 0xAAAAAAAAAAAAAAAA) >> 1) + (arr & 0x5555555555555555)
    arr = ((arr & 0xCCCCCCCCCCCCCCCC) >> 2) + (arr & 0x3333333333333333)
    arr = ((arr & 0xF0F0F0F0F0F0F0F0) >> 4) + (arr & 0x0F0F0F0F0F0F0F0F)
    arr = ((arr & 0xFF00FF00FF00FF00) >> 8) + (arr & 0x00FF00FF00FF00FF)
    arr = ((arr & 0xFFFF0000FFFF0000) >> 16) + (arr & 0x0000FFFF0000FFFF)
    return (arr >> 32) + (arr & 0x00000000FFFFFFFF)


def count_off(arr: int) -> int:
    return SIZE - count_on(arr)


def count_on_lut(arr: int) -> int:
    """Count set bits one nibble at a time from a lookup table."""
    arr = _check(arr)
    count = 0
    while arr:
        count += _BIT_LUT[arr & 0xF]
        arr >>= _NIBBLE_BITS
    return count


def reset_all(arr: int) -> int:
    _check(arr)
    return 0


def set_all(arr: int) -> int:
    _check(arr)
    return MASK


def rotate_right(arr: int, shift: int) -> int:
    arr = _check(arr)
    shift %= SIZE
    return ((arr >> shift) | (arr << (SIZE - shift))) & MASK


def rotate_left(arr: int, shift: int) -> int:
    arr = _check(arr)
    shift %= SIZE
    return ((arr << shift) | (arr >> (SIZE - shift))) & MASK


def mirror(arr: int) -> int:
    """Reverse the order of all 64 bits."""
    arr = _check(arr)
    arr = (arr & 0x00000000FFFFFFFF) << 32 | (arr & 0xFFFFFFFF00000000) >> 32
    arr = (arr & 0x0000FFFF0000FFFF) << 16 | (arr & 0xFFFF0000FFFF0000) >> 16
    arr = (arr & 0x00FF00FF00FF00FF) << 8 | (arr & 0xFF00FF00FF00FF00) >> 8
    arr = (arr & 0x0F0F0F0F0F0F0F0F) << 4 | (arr & 0xF0F0F0F0F0F0F0F0) >> 4
    arr = (arr & 0x3333333333333333) << 2 | (arr & 0xCCCCCCCCCCCCCCCC) >> 2
    arr = (arr & 0x5555555555555555) << 1 | (arr & 0xAAAAAAAAAAAAAAAA) >> 1
    return arr


def to_string(arr: int) -> str:
    """Render all 64 bits, most significant first."""
    return format(_check(arr), "064b")