"""Binary heap ordered by a three-way comparison function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]
IsMatch = Callable[[Any, Any], Any]


class Heap:
    """A binary heap whose top is the element ``compare`` ranks greatest."""

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, data: Any) -> None:
        self._items.append(data)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def remove(self, is_match: IsMatch, param: Any) -> Optional[Any]:
        """Remove the first element matching ``param``; return it, or None."""
        for index, item in enumerate(self._items):
            if is_match(item, param):
                last = self._items.pop()
                if index < len(self._items):
                    self._items[index] = last
                    self._sift_down(index)
                    self._sift_up(index)
                return item
        return None

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(items[index], items[parent]) <= 0:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._compare(items[child], items[largest]) > 0:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest