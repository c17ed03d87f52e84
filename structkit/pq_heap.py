"""Priority queue backed by a binary heap."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .heap import Heap

Compare = Callable[[Any, Any], int]
IsMatch = Callable[[Any, Any], Any]


class HeapPriorityQueue:
    """A queue whose front is the element ``compare`` ranks greatest."""

    def __init__(self, compare: Compare) -> None:
        self._heap = Heap(compare)

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def enqueue(self, data: Any) -> None:
        self._heap.push(data)

    def dequeue(self) -> Any:
        if self._heap.is_empty():
            raise IndexError("dequeue from an empty priority queue")
        return self._heap.pop()

    def peek(self) -> Any:
        if self._heap.is_empty():
            raise IndexError("peek at an empty priority queue")
        return self._heap.peek()

    def clear(self) -> None:
        while not self._heap.is_empty():
            self._heap.pop()

    def erase(self, is_match: IsMatch, param: Any) -> Optional[Any]:
        """Remove the first element matching ``param``; return it, or None."""
        return self._heap.remove(is_match, param)