"""Linked-list, tree, stack and string exercises."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence, Union

from .stack import Stack


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    data: Any
    left: Optional["TreeNode"] = field(default=None)
    right: Optional["TreeNode"] = field(default=None)


def flip_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def flip_list_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place by recursion and return its new head."""
    if head is None or head.next is None:
        return head
    new_head = flip_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty run of consecutive values."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def sort_stack(unsorted: Stack) -> Stack:
    """Move every value of ``unsorted`` into a new stack, largest on top.

    ``unsorted`` is used as scratch space and is left empty.
    """
    ordered = Stack(unsorted.capacity)
    while not unsorted.is_empty():
        value = unsorted.pop()
        while not ordered.is_empty() and ordered.peek() > value:
            unsorted.push(ordered.pop())
        ordered.push(value)
    return ordered


def sort_chars(path: Union[str, os.PathLike]) -> str:
    """Return the characters of a text file, lower-cased and sorted."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    return "".join(sorted(text.lower()))


def bst_insert(root: Optional[TreeNode], data: Any) -> Optional[TreeNode]:
    """Insert ``data`` below ``root`` without recursion.

    Returns the new node (the new root when ``root`` is None), or None when
    an equal value is already in the tree.
    """
    new = TreeNode(data)
    if root is None:
        return new
    node = root
    while True:
        if data == node.data:
            return None
        if data < node.data:
            if node.left is None:
                node.left = new
                return new
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return new
            node = node.right


def bst_insert_recursive(root: Optional[TreeNode], data: Any) -> TreeNode:
    """Insert ``data`` below ``root`` and return the root of the tree.

    Raises ValueError when an equal value is already in the tree.
    """
    if root is None:
        return TreeNode(data)
    if data < root.data:
        root.left = bst_insert_recursive(root.left, data)
    elif data > root.data:
        root.right = bst_insert_recursive(root.right, data)
    else:
        raise ValueError(f"{data!r} is already in the tree")
    return root


def reverse_string(text: str) -> str:
    return text[::-1]


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap order, starting with ``text``."""
    chars = list(text)

    def permute(start: int) -> Iterator[str]:
        if start == len(chars):
            yield "".join(chars)
            return
        for index in range(start, len(chars)):
            chars[start], chars[index] = chars[index], chars[start]
            yield from permute(start + 1)
            chars[start], chars[index] = chars[index], chars[start]

    return permute(0)


def stack_insert_sorted(stack: Stack, data: Any) -> None:
    """Insert ``data`` into a stack kept with its largest value on top."""
    if stack.is_empty() or stack.peek() < data:
        stack.push(data)
        return
    held = stack.pop()
    stack_insert_sorted(stack, data)
    stack.push(held)