"""Self-balancing AVL tree ordered by a three-way comparison function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]
IsMatch = Callable[[Any, Any], Any]
Action = Callable[[Any, Any], Any]


class _AvlNode:
    __slots__ = ("data", "height", "left", "right")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.height = 1
        self.left: Optional[_AvlNode] = None
        self.right: Optional[_AvlNode] = None


def _height(node: Optional[_AvlNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: _AvlNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[_AvlNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _AvlNode) -> _AvlNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: _AvlNode) -> _AvlNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: _AvlNode) -> _AvlNode:
    balance = _balance_factor(node)
    if balance > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _preorder(node: Optional[_AvlNode]) -> Iterator[_AvlNode]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[_AvlNode]) -> Iterator[_AvlNode]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


class AVLTree:
    """A balanced binary search tree; equal elements are stored once."""

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._root: Optional[_AvlNode] = None

    def __len__(self) -> int:
        return sum(1 for _ in _preorder(self._root))

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in ascending order."""
        for node in _inorder(self._root):
            yield node.data

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of levels in the tree, 0 when empty."""
        return _height(self._root)

    def insert(self, data: Any) -> bool:
        """Insert ``data``; return False if an equal element was already present."""
        if data is None:
            raise ValueError("cannot insert None")
        added = False

        def insert_at(node: Optional[_AvlNode]) -> _AvlNode:
            nonlocal added
            if node is None:
                added = True
                return _AvlNode(data)
            order = self._compare(data, node.data)
            if order < 0:
                node.left = insert_at(node.left)
            elif order > 0:
                node.right = insert_at(node.right)
            else:
                return node
            _update_height(node)
            return _rebalance(node)

        self._root = insert_at(self._root)
        return added

    def _remove_at(self, node: Optional[_AvlNode], data: Any) -> Optional[_AvlNode]:
        if node is None:
            return None
        order = self._compare(data, node.data)
        if order < 0:
            node.left = self._remove_at(node.left, data)
        elif order > 0:
            node.right = self._remove_at(node.right, data)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            node.right = self._remove_at(node.right, successor.data)
        _update_height(node)
        return _rebalance(node)

    def remove(self, data: Any) -> None:
        """Remove the element equal to ``data`` if there is one."""
        self._root = self._remove_at(self._root, data)

    def find(self, data: Any) -> Optional[Any]:
        """Return the stored element equal to ``data``, or None."""
        node = self._root
        while node is not None:
            order = self._compare(data, node.data)
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                return node.data
        return None

    def for_each(self, action: Action, param: Any) -> int:
        """Apply ``action`` to every element in pre-order; return the sum of results."""
        return sum(action(node.data, param) for node in _preorder(self._root))

    def multi_find(self, param: Any, is_match: IsMatch) -> list[Any]:
        """Return every element matching ``param``, each placed before the ones found earlier."""
        matches = [node.data for node in _preorder(self._root) if is_match(node.data, param)]
        matches.reverse()
        return matches

    def multi_remove(self, param: Any, is_match: IsMatch) -> list[Any]:
        """Remove every element matching ``param`` and return them."""
        matches = self.multi_find(param, is_match)
        for data in matches:
            self.remove(data)
        return matches