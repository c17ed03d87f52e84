"""Unbalanced binary search tree with node positions and an end sentinel."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]
Action = Callable[[Any, Any], Any]


class Node:
    """A position in a binary search tree."""

    __slots__ = ("data", "parent", "left", "right")

    def __init__(self, data: Any = None, parent: Optional["Node"] = None) -> None:
        self.data = data
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """A binary search tree; the real root hangs as the left child of a sentinel."""

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._sentinel = Node()

    def __iter__(self) -> Iterator[Any]:
        node = self.begin()
        while node is not self._sentinel:
            yield node.data
            node = self.next(node)

    def __len__(self) -> int:
        count = 0
        pending: list[Node] = []
        node = self._sentinel.left
        while node is not None or pending:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            count += 1
            node = node.right
        return count

    def is_empty(self) -> bool:
        return self._sentinel.left is None

    def insert(self, data: Any) -> Optional[Node]:
        """Insert ``data``; return its node, or None if an equal element exists."""
        if data is None:
            raise ValueError("cannot insert None")
        parent = self._sentinel
        node = self._sentinel.left
        go_left = True
        while node is not None:
            order = self._compare(data, node.data)
            if order == 0:
                return None
            parent = node
            go_left = order < 0
            node = node.left if go_left else node.right
        new = Node(data, parent)
        if go_left:
            parent.left = new
        else:
            parent.right = new
        return new

    def remove(self, node: Node) -> Any:
        """Remove the element at ``node`` and return its data.

        A node with two children takes its successor's data, so other
        positions may no longer hold the element they held before.
        """
        if node is self._sentinel:
            raise ValueError("cannot remove the end node")
        removed = node.data
        if node.left is not None and node.right is not None:
            successor = _leftmost(node.right)
            node.data = successor.data
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = node.left = node.right = None
        return removed

    def find(self, data: Any) -> Optional[Node]:
        """Return the node holding an element equal to ``data``, or None."""
        node = self._sentinel.left
        while node is not None:
            order = self._compare(data, node.data)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def begin(self) -> Node:
        """The smallest element, or the end node when the tree is empty."""
        return _leftmost(self._sentinel)

    def end(self) -> Node:
        return self._sentinel

    def next(self, node: Node) -> Node:
        """The in-order successor; the end node follows the largest element."""
        if node is self._sentinel:
            raise ValueError("no element follows the end node")
        if node.right is not None:
            return _leftmost(node.right)
        while node.parent is not None and node is node.parent.right:
            node = node.parent
        return node.parent

    def prev(self, node: Node) -> Optional[Node]:
        """The in-order predecessor, or None before the smallest element."""
        if node.left is not None:
            return _rightmost(node.left)
        while node.parent is not None and node is node.parent.left:
            node = node.parent
        return node.parent

    def for_each(self, start: Node, stop: Node, action: Action, param: Any) -> int:
        """Apply ``action`` over ``[start, stop)``; count calls that returned 0."""
        count = 0
        node = start
        while node is not stop and node is not self._sentinel:
            if action(node.data, param) == 0:
                count += 1
            node = self.next(node)
        return count