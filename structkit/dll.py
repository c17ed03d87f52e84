"""Doubly linked list with sentinel nodes and node-based positions."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

IsMatch = Callable[[Any, Any], Any]
Action = Callable[[Any, Any], Any]


class Node:
    """A position in a doubly linked list."""

    __slots__ = ("data", "next", "prev")

    def __init__(
        self,
        data: Any = None,
        prev: Optional["Node"] = None,
        next: Optional["Node"] = None,
    ) -> None:
        self.data = data
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _span(start: Node, stop: Node) -> Iterator[Node]:
    """Yield the nodes from ``start`` up to, but not including, ``stop``."""
    node: Optional[Node] = start
    while node is not stop:
        if node is None or node.next is None:
            raise ValueError("stop is not reachable from start")
        yield node
        node = node.next


class DoublyLinkedList:
    """A doubly linked list bounded by a head and a tail sentinel."""

    def __init__(self) -> None:
        self._head = Node()
        self._tail = Node()
        self._head.next = self._tail
        self._tail.prev = self._head

    def _nodes(self) -> Iterator[Node]:
        return _span(self.begin(), self._tail)

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def is_empty(self) -> bool:
        return self._head.next is self._tail

    def begin(self) -> Node:
        """First element, or the end node when the list is empty."""
        return self._head.next

    def end(self) -> Node:
        """The tail sentinel, one past the last element."""
        return self._tail

    def insert(self, where: Node, data: Any) -> Node:
        """Insert ``data`` before ``where`` and return the new node."""
        if where.prev is None:
            raise ValueError("cannot insert before the head sentinel")
        node = Node(data, where.prev, where)
        where.prev.next = node
        where.prev = node
        return node

    def remove(self, where: Node) -> Node:
        """Unlink ``where`` and return the node that followed it."""
        if where.next is None or where.prev is None:
            raise ValueError("cannot remove a sentinel node")
        following = where.next
        following.prev = where.prev
        where.prev.next = following
        where.next = where.prev = None
        return following

    def push_front(self, data: Any) -> Node:
        return self.insert(self.begin(), data)

    def push_back(self, data: Any) -> Node:
        return self.insert(self._tail, data)

    def pop_front(self) -> Any:
        """Remove the first element and return its data."""
        if self.is_empty():
            raise IndexError("pop from an empty list")
        node = self.begin()
        self.remove(node)
        return node.data

    def pop_back(self) -> Any:
        """Remove the last element and return its data."""
        if self.is_empty():
            raise IndexError("pop from an empty list")
        node = self._tail.prev
        self.remove(node)
        return node.data

    def multi_find(
        self,
        start: Node,
        stop: Node,
        is_match: IsMatch,
        param: Any,
        dest: "DoublyLinkedList",
    ) -> "DoublyLinkedList":
        """Append to ``dest`` the data of every match in ``[start, stop)``."""
        for node in _span(start, stop):
            if is_match(node.data, param):
                dest.push_back(node.data)
        return dest


def find(start: Node, stop: Node, is_match: IsMatch, param: Any) -> Optional[Node]:
    """Return the first node in ``[start, stop)`` whose data matches, or None."""
    for node in _span(start, stop):
        if is_match(node.data, param):
            return node
    return None


def for_each(start: Node, stop: Node, action: Action, param: Any) -> int:
    """Apply ``action`` to each element in ``[start, stop)``.

    Returns how many calls reported success by returning 0.
    """
    return sum(1 for node in _span(start, stop) if action(node.data, param) == 0)


def splice(start: Node, stop: Node, where: Node) -> Node:
    """Move the nodes ``[start, stop)`` before ``where``.

    Returns the last node moved, or the node before ``where`` if nothing moved.
    """
    if start is stop:
        return where.prev
    if start.prev is None or where.prev is None:
        raise ValueError("cannot splice around the head sentinel")
    last = stop.prev
    before = start.prev
    before.next = stop
    stop.prev = before

    target = where.prev
    target.next = start
    start.prev = target
    last.next = where
    where.prev = last
    return last