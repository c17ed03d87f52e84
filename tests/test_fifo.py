import pytest

from structkit.fifo import Queue


def test_fifo_order():
    queue = Queue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert len(queue) == 3
    assert queue.peek() == 1
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_single_element_is_not_empty():
    queue = Queue()
    queue.enqueue("x")
    assert not queue.is_empty()
    assert list(queue) == ["x"]


def test_empty_errors():
    queue = Queue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_append_moves_items():
    first = Queue()
    second = Queue()
    first.enqueue(1)
    second.enqueue(2)
    second.enqueue(3)
    assert first.append(second) is first
    assert list(first) == [1, 2, 3]
    assert second.is_empty()


def test_append_self_raises():
    queue = Queue()
    with pytest.raises(ValueError):
        queue.append(queue)