"""Fixed-capacity circular byte buffer."""

from __future__ import annotations


class BufferFullError(Exception):
    """Raised when writing to a buffer with no free space."""


class BufferEmptyError(Exception):
    """Raised when reading from an empty buffer."""


class CircularBuffer:
    """A ring of ``capacity`` bytes with independent read and write positions."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._data = bytearray(capacity)
        self._read = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def free_space(self) -> int:
        return self.capacity - self._size

    def write(self, data: bytes) -> int:
        """Write as much of ``data`` as fits; return the number of bytes written."""
        free = self.free_space()
        if free == 0:
            raise BufferFullError("buffer is full")
        chunk = bytes(data[:free])
        start = (self._read + self._size) % self.capacity
        first = min(len(chunk), self.capacity - start)
        self._data[start:start + first] = chunk[:first]
        rest = chunk[first:]
        self._data[:len(rest)] = rest
        self._size += len(chunk)
        return len(chunk)

    def read(self, count: int) -> bytes:
        """Remove and return up to ``count`` bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        if self._size == 0:
            raise BufferEmptyError("buffer is empty")
        n = min(count, self._size)
        end = self._read + n
        if end <= self.capacity:
            out = bytes(self._data[self._read:end])
        else:
            out = bytes(self._data[self._read:]) + bytes(self._data[:end - self.capacity])
        self._read = end % self.capacity
        self._size -= n
        return out