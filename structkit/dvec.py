"""Growable vector with explicit capacity management."""

from __future__ import annotations

from typing import Any, Iterator

GROWTH_FACTOR = 1.5
MIN_CAPACITY = 2


class DynamicVector:
    """A vector that grows by 1.5x when full and shrinks when sparse."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = max(capacity, MIN_CAPACITY)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self._items):
            raise IndexError("vector index out of range")
        return self._items[index]

    def push_back(self, value: Any) -> None:
        if len(self._items) == self._capacity:
            self.reserve(int(self._capacity * GROWTH_FACTOR))
        self._items.append(value)

    def pop_back(self) -> Any:
        """Remove and return the last value, shrinking capacity if sparse."""
        if not self._items:
            raise IndexError("pop from an empty vector")
        value = self._items.pop()
        if (
            len(self._items) < self._capacity / GROWTH_FACTOR
            and self._capacity > MIN_CAPACITY
        ):
            self.shrink()
        return value

    def reserve(self, new_capacity: int) -> None:
        """Grow capacity to ``new_capacity``, which must exceed the current one."""
        if new_capacity <= self._capacity:
            raise ValueError("new capacity must exceed the current capacity")
        self._capacity = new_capacity

    def shrink(self) -> None:
        """Reduce capacity to 1.5x the size when the vector is sparse."""
        if len(self._items) < self._capacity / GROWTH_FACTOR:
            self._capacity = max(int(len(self._items) * GROWTH_FACTOR), MIN_CAPACITY)