import pytest

from structkit.stack import Stack


def test_push_pop_lifo():
    stack = Stack(4)
    for value in ("a", "b", "c"):
        stack.push(value)
    assert len(stack) == 3
    assert stack.peek() == "c"
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = Stack(2)
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1


def test_push_beyond_capacity_raises():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)
    assert len(stack) == stack.capacity


def test_empty_pop_and_peek_raise():
    stack = Stack(1)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(0)