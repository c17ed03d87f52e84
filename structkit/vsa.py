"""Variable-size block allocator working inside a caller-supplied byte pool.

Every block starts with a header: a signed size (positive when free,
negative when in use, 0 marking the end of the pool) and a check word set
while the block is in use.
"""

from __future__ import annotations

import struct
from typing import Iterator, Tuple, Union

ALIGNMENT = 8
_HEADER = struct.Struct("<qQ")
HEADER_SIZE = _HEADER.size
_KEY = 123456789

Pool = Union[bytearray, memoryview]


def _align(size: int) -> int:
    return (size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)


class VariableSizeAllocator:
    """Hands out blocks of any size from ``pool`` by payload offset."""

    def __init__(self, pool: Pool) -> None:
        if memoryview(pool).readonly:
            raise TypeError("pool must be writable")
        usable = len(pool) - len(pool) % ALIGNMENT
        if usable < 2 * HEADER_SIZE + ALIGNMENT:
            raise ValueError("pool is too small")
        self.pool = pool
        count = usable - 2 * HEADER_SIZE
        self._write(0, count, 0)
        self._write(HEADER_SIZE + count, 0, 0)

    def _read(self, offset: int) -> Tuple[int, int]:
        return _HEADER.unpack_from(self.pool, offset)

    def _write(self, offset: int, count: int, magic: int) -> None:
        _HEADER.pack_into(self.pool, offset, count, magic)

    def _blocks(self) -> Iterator[Tuple[int, int]]:
        offset = 0
        while True:
            count, _ = self._read(offset)
            if count == 0:
                return
            yield offset, count
            offset += HEADER_SIZE + abs(count)

    def _coalesce(self) -> None:
        """Merge every run of adjacent free blocks into one."""
        offset = 0
        while True:
            count, _ = self._read(offset)
            if count == 0:
                return
            if count > 0:
                following, _ = self._read(offset + HEADER_SIZE + count)
                while following > 0:
                    count += following + HEADER_SIZE
                    self._write(offset, count, 0)
                    following, _ = self._read(offset + HEADER_SIZE + count)
            offset += HEADER_SIZE + abs(count)

    def allocate(self, size: int) -> int:
        """Reserve at least ``size`` bytes; return the offset of the payload."""
        if size <= 0:
            raise ValueError("size must be positive")
        size = _align(size)
        self._coalesce()
        for offset, count in self._blocks():
            if count >= size:
                if count - size > HEADER_SIZE:
                    self._write(offset + HEADER_SIZE + size, count - size - HEADER_SIZE, 0)
                    count = size
                self._write(offset, -count, _KEY)
                return offset + HEADER_SIZE
        raise MemoryError(f"no free block of {size} bytes")

    def free(self, offset: int) -> None:
        """Release the block whose payload starts at ``offset``."""
        header = offset - HEADER_SIZE
        if header < 0 or header % ALIGNMENT or offset > len(self.pool):
            raise ValueError("offset is not an allocated block")
        count, magic = self._read(header)
        if magic != _KEY or count >= 0:
            raise ValueError("offset is not an allocated block")
        self._write(header, -count, 0)

    def largest_free_block(self) -> int:
        """Size of the largest block that ``allocate`` could hand out now."""
        self._coalesce()
        return max((count for _, count in self._blocks() if count > 0), default=0)