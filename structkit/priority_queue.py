"""Priority queue backed by a sorted list."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .sortedlist import SortedList

Compare = Callable[[Any, Any], int]
IsMatch = Callable[[Any, Any], Any]


class PriorityQueue:
    """A queue whose front is the element that ``compare`` orders first."""

    def __init__(self, compare: Compare) -> None:
        self._list = SortedList(compare)

    def __len__(self) -> int:
        return len(self._list)

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def enqueue(self, data: Any) -> None:
        self._list.insert(data)

    def dequeue(self) -> Any:
        if self._list.is_empty():
            raise IndexError("dequeue from an empty priority queue")
        return self._list.pop_front()

    def peek(self) -> Any:
        if self._list.is_empty():
            raise IndexError("peek at an empty priority queue")
        return self._list.begin().data

    def clear(self) -> None:
        while not self._list.is_empty():
            self._list.pop_front()

    def erase(self, is_match: IsMatch, param: Any) -> Optional[Any]:
        """Remove the first element matching ``param``; return it, or None."""
        node = self._list.find_custom(
            self._list.begin(), self._list.end(), is_match, param
        )
        if node is None:
            return None
        self._list.remove(node)
        return node.data