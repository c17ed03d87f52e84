"""Stack sorting, a bounded producer/consumer buffer and small bit tricks."""

from __future__ import annotations

import threading
from typing import Any, List

from .stack import Stack

_MASK8 = 0xFF
_MASK32 = 0xFFFFFFFF


def sort_stack(stack: Stack) -> None:
    """Sort ``stack`` in place with an auxiliary stack; smallest ends on top."""
    ordered = Stack(stack.capacity)
    while not stack.is_empty():
        value = stack.pop()
        while not ordered.is_empty() and ordered.peek() > value:
            stack.push(ordered.pop())
        ordered.push(value)
    while not ordered.is_empty():
        stack.push(ordered.pop())


def insert_in_sorted_order(stack: Stack, value: Any) -> None:
    """Insert ``value`` into a stack kept with its largest value on top."""
    if stack.is_empty() or stack.peek() <= value:
        stack.push(value)
        return
    held = stack.pop()
    insert_in_sorted_order(stack, value)
    stack.push(held)


def sort_stack_recursive(stack: Stack) -> None:
    """Sort ``stack`` in place by recursion; largest ends on top."""
    if stack.is_empty():
        return
    held = stack.pop()
    sort_stack_recursive(stack)
    insert_in_sorted_order(stack, held)


class BoundedBuffer:
    """A fixed-size ring buffer shared by producer and consumer threads."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: List[Any] = [None] * size
        self._in = 0
        self._out = 0
        self._lock = threading.Lock()
        self._empty = threading.Semaphore(size)
        self._full = threading.Semaphore(0)

    def put(self, item: Any) -> None:
        """Store ``item``, waiting while the buffer is full."""
        self._empty.acquire()
        with self._lock:
            self._slots[self._in] = item
            self._in = (self._in + 1) % self.size
        self._full.release()

    def get(self) -> Any:
        """Take the oldest item, waiting while the buffer is empty."""
        self._full.acquire()
        with self._lock:
            item = self._slots[self._out]
            self._slots[self._out] = None
            self._out = (self._out + 1) % self.size
        self._empty.release()
        return item


def swap_bits(idx1: int, idx2: int, num: int) -> int:
    """Exchange bits ``idx1`` and ``idx2`` of ``num``."""
    differ = ((num >> idx1) & 1) ^ ((num >> idx2) & 1)
    return num ^ ((differ << idx1) | (differ << idx2))


def _byte(num: int) -> int:
    if not 0 <= num <= _MASK8:
        raise ValueError("value must fit in 8 unsigned bits")
    return num


def rotate_right(idx: int, num: int) -> int:
    """Rotate the 8-bit value ``num`` right by ``idx`` places."""
    num = _byte(num)
    idx %= 8
    return ((num >> idx) | (num << (8 - idx))) & _MASK8


def rotate_left(idx: int, num: int) -> int:
    """Rotate the 8-bit value ``num`` left by ``idx`` places."""
    num = _byte(num)
    idx %= 8
    return ((num << idx) | (num >> (8 - idx))) & _MASK8


def bit_mirror(num: int) -> int:
    """Reverse the 32 bits of ``num`` one bit at a time; result is unsigned."""
    num &= _MASK32
    result = 0
    for index in range(32):
        result |= ((num >> index) & 1) << (31 - index)
    return result


def byte_mirror(num: int) -> int:
    """Reverse the 32 bits of ``num`` by swapping ever smaller groups."""
    if not 0 <= num <= _MASK32:
        raise ValueError("value must fit in 32 unsigned bits")
    num = ((num & 0x0000FFFF) << 16) | ((num & 0xFFFF0000) >> 16)
    num = ((num & 0x00FF00FF) << 8) | ((num & 0xFF00FF00) >> 8)
    num = ((num & 0x0F0F0F0F) << 4) | ((num & 0xF0F0F0F0) >> 4)
    num = ((num & 0x33333333) << 2) | ((num & 0xCCCCCCCC) >> 2)
    num = ((num & 0x55555555) << 1) | ((num & 0xAAAAAAAA) >> 1)
    return num


def char_byte_mirror(num: int) -> int:
    """Reverse the 8 bits of ``num``."""
    num = _byte(num)
    num = ((num & 0x0F) << 4) | ((num & 0xF0) >> 4)
    num = ((num & 0x33) << 2) | ((num & 0xCC) >> 2)
    num = ((num & 0x55) << 1) | ((num & 0xAA) >> 1)
    return num


def count_set_bits(num: int) -> int:
    """Count the set bits of a non-negative integer."""
    if num < 0:
        raise ValueError("value must not be negative")
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count