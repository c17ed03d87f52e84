"""Fixed-size block allocator working inside a caller-supplied byte pool.

The pool starts with a word holding the offset of the first free block; each
free block holds the offset of the next one, and 0 ends the list.
"""

from __future__ import annotations

import struct
from typing import Union

WORD = 8
_WORD = struct.Struct("<Q")

Pool = Union[bytearray, memoryview]


def _align(size: int) -> int:
    return (size + WORD - 1) & ~(WORD - 1)


def min_pool_size(block_size: int, block_count: int) -> int:
    """Bytes a pool needs to hold ``block_count`` blocks of ``block_size``."""
    if block_size <= 0 or block_count <= 0:
        raise ValueError("block size and count must be positive")
    return _align(block_size) * block_count + WORD


class FixedSizeAllocator:
    """Hands out equal-sized blocks of ``pool`` by their byte offsets."""

    def __init__(self, pool: Pool, block_size: int, block_count: int) -> None:
        needed = min_pool_size(block_size, block_count)
        if memoryview(pool).readonly:
            raise TypeError("pool must be writable")
        if len(pool) < needed:
            raise ValueError(f"pool needs at least {needed} bytes")
        self.pool = pool
        self.block_size = _align(block_size)
        self.block_count = block_count
        offsets = [WORD + i * self.block_size for i in range(block_count)]
        for offset, following in zip(offsets, offsets[1:] + [0]):
            self._write(offset, following)
        self._write(0, WORD)

    def _read(self, offset: int) -> int:
        return _WORD.unpack_from(self.pool, offset)[0]

    def _write(self, offset: int, value: int) -> None:
        _WORD.pack_into(self.pool, offset, value)

    def _free_offsets(self):
        offset = self._read(0)
        while offset:
            yield offset
            offset = self._read(offset)

    def allocate(self) -> int:
        """Take a free block and return its offset in the pool."""
        head = self._read(0)
        if head == 0:
            raise MemoryError("no free blocks left")
        self._write(0, self._read(head))
        return head

    def free(self, offset: int) -> None:
        """Return the block at ``offset`` to the free list."""
        index, rest = divmod(offset - WORD, self.block_size)
        if rest or not 0 <= index < self.block_count:
            raise ValueError("offset is not the start of a block")
        if offset in set(self._free_offsets()):
            raise ValueError("block is already free")
        self._write(offset, self._read(0))
        self._write(0, offset)

    def count_free(self) -> int:
        return sum(1 for _ in self._free_offsets())