"""Singly linked list with a trailing sentinel node."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

IsMatch = Callable[[Any, Any], Any]
Action = Callable[[Any, Any], Any]


class Node:
    """A position in a singly linked list."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any = None, next: Optional["Node"] = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _span(start: Node, stop: Node) -> Iterator[Node]:
    node: Optional[Node] = start
    while node is not stop:
        if node is None:
            raise ValueError("stop is not reachable from start")
        yield node
        node = node.next


class SinglyLinkedList:
    """A singly linked list whose end is a sentinel node."""

    def __init__(self) -> None:
        self._head = Node()
        self._tail = self._head

    def __iter__(self) -> Iterator[Any]:
        for node in _span(self._head, self._tail):
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in _span(self._head, self._tail))

    def is_empty(self) -> bool:
        return self._head is self._tail

    def begin(self) -> Node:
        return self._head

    def end(self) -> Node:
        return self._tail

    def insert(self, where: Node, data: Any) -> Node:
        """Insert ``data`` at ``where``, shifting the old element forward.

        Returns the node after the inserted element.
        """
        moved = Node(where.data, where.next)
        where.data = data
        where.next = moved
        if where is self._tail:
            self._tail = moved
        return moved

    def remove(self, where: Node) -> Node:
        """Remove the element at ``where``; ``where`` then holds the next one."""
        following = where.next
        if following is None:
            raise ValueError("cannot remove the end node")
        where.data = following.data
        where.next = following.next
        if following is self._tail:
            self._tail = where
        return where

    def append(self, other: "SinglyLinkedList") -> "SinglyLinkedList":
        """Move every element of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot append a list to itself")
        if other.is_empty():
            return self
        self._tail.data = other._head.data
        self._tail.next = other._head.next
        self._tail = other._tail
        other._head.data = None
        other._head.next = None
        other._tail = other._head
        return self

    def flip(self) -> Node:
        """Reverse the list in place and return its new first node."""
        prev = self._tail
        node = self._head
        while node is not self._tail:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev
        return self._head


def find(start: Node, stop: Node, is_match: IsMatch, param: Any) -> Optional[Node]:
    """Return the first node in ``[start, stop)`` whose data matches, or None."""
    for node in _span(start, stop):
        if is_match(node.data, param):
            return node
    return None


def for_each(start: Node, stop: Node, action: Action, param: Any) -> int:
    """Apply ``action`` over ``[start, stop)``; count calls that returned 0."""
    return sum(1 for node in _span(start, stop) if action(node.data, param) == 0)


def has_loop(head: Optional[Node]) -> bool:
    """Tell whether following ``next`` from ``head`` ever cycles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _length(node: Optional[Node]) -> int:
    count = 0
    while node is not None:
        count += 1
        node = node.next
    return count


def find_intersection(head1: Optional[Node], head2: Optional[Node]) -> Optional[Node]:
    """Return the first node shared by two chains, or None."""
    len1, len2 = _length(head1), _length(head2)
    for _ in range(len1 - len2):
        head1 = head1.next
    for _ in range(len2 - len1):
        head2 = head2.next
    while head1 is not None:
        if head1 is head2:
            return head1
        head1 = head1.next
        head2 = head2.next
    return None