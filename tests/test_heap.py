import pytest

from structkit.heap import Heap


def by_value(a, b):
    return a - b


def make(values):
    heap = Heap(by_value)
    for value in values:
        heap.push(value)
    return heap


def drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.pop())
    return out


def test_pop_order_descending():
    values = [5, 3, 8, 1, 9, 2, 7]
    heap = make(values)
    assert drain(heap) == sorted(values, reverse=True)


def test_peek_is_max():
    values = [5, 3, 8, 1]
    heap = make(values)
    assert heap.peek() == max(values)
    assert len(heap) == len(values)


def test_empty_raises():
    heap = Heap(by_value)
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_remove_keeps_heap_order():
    values = [10, 20, 30, 40, 50, 60, 5, 15]
    heap = make(values)
    removed = heap.remove(lambda item, p: item == p, 40)
    assert removed == 40
    remaining = [v for v in values if v != 40]
    assert drain(heap) == sorted(remaining, reverse=True)


def test_remove_last_element():
    heap = make([1])
    assert heap.remove(lambda item, p: item == p, 1) == 1
    assert heap.is_empty()


def test_remove_missing_returns_none():
    heap = make([1, 2, 3])
    assert heap.remove(lambda item, p: item == p, 99) is None
    assert len(heap) == 3


def test_custom_compare_min_heap():
    values = [4, 1, 3, 2]
    heap = Heap(lambda a, b: b - a)
    for value in values:
        heap.push(value)
    assert drain(heap) == sorted(values)