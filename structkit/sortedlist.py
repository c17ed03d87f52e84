"""Sorted list kept in order by a three-way comparison function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from . import dll
from .dll import DoublyLinkedList, Node

Compare = Callable[[Any, Any], int]
IsMatch = Callable[[Any, Any], Any]
Action = Callable[[Any, Any], Any]


class SortedList:
    """A doubly linked list kept in ascending order according to ``compare``.

    ``compare(a, b)`` returns a negative number when ``a`` sorts before ``b``,
    zero when they are equal and a positive number otherwise.
    """

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._list = DoublyLinkedList()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def begin(self) -> Node:
        return self._list.begin()

    def end(self) -> Node:
        return self._list.end()

    def insert(self, data: Any) -> Node:
        """Insert ``data`` before the first element not smaller than it."""
        where = dll.find(
            self.begin(),
            self.end(),
            lambda item, _: self._compare(item, data) >= 0,
            None,
        )
        if where is None:
            where = self.end()
        return self._list.insert(where, data)

    def remove(self, where: Node) -> Node:
        """Remove the element at ``where`` and return the node after it."""
        return self._list.remove(where)

    def pop_front(self) -> Any:
        return self._list.pop_front()

    def pop_back(self) -> Any:
        return self._list.pop_back()

    def find(self, start: Node, stop: Node, param: Any) -> Node:
        """Return the first node in ``[start, stop)`` not smaller than ``param``.

        Returns ``stop`` when every element is smaller.
        """
        node: Optional[Node] = start
        while node is not stop:
            if node is None or node.next is None:
                raise ValueError("stop is not reachable from start")
            if self._compare(node.data, param) >= 0:
                return node
            node = node.next
        return stop

    def find_custom(
        self, start: Node, stop: Node, is_match: IsMatch, param: Any
    ) -> Optional[Node]:
        """Return the first node in ``[start, stop)`` matching, or None."""
        return dll.find(start, stop, is_match, param)

    def for_each(self, start: Node, stop: Node, action: Action, param: Any) -> int:
        """Apply ``action`` over ``[start, stop)``; count calls that returned 0."""
        return dll.for_each(start, stop, action, param)

    def merge(self, source: "SortedList") -> Node:
        """Move every element of ``source`` into this list, keeping order.

        ``source`` is left empty. Returns the first node of this list.
        """
        if source is self:
            raise ValueError("cannot merge a list into itself")
        dest = self.begin()
        end = self.end()
        while not source.is_empty() and dest is not end:
            src = source.begin()
            if self._compare(src.data, dest.data) <= 0:
                dll.splice(src, src.next, dest)
            else:
                dest = dest.next
        if not source.is_empty():
            dll.splice(source.begin(), source.end(), dest)
        return self.begin()