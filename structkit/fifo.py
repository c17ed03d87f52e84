"""First-in first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class Queue:
    """An unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value that ``dequeue`` would remove next."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def append(self, other: "Queue") -> "Queue":
        """Move every value of ``other`` to the back of this queue."""
        if other is self:
            raise ValueError("cannot append a queue to itself")
        self._items.extend(other._items)
        other._items.clear()
        return self