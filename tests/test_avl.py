import math

import pytest

from structkit.avl import AVLTree


def cmp(a, b):
    return (a > b) - (a < b)


@pytest.fixture
def tree():
    return AVLTree(cmp)


def test_empty_tree(tree):
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height() == 0
    assert tree.find(3) is None


def test_three_ascending_inserts_rotate(tree):
    for value in (1, 2, 3):
        tree.insert(value)
    assert tree.height() == 2
    assert list(tree) == [1, 2, 3]


def test_sequential_inserts_stay_balanced(tree):
    n = 200
    for value in range(n):
        tree.insert(value)
    assert len(tree) == n
    assert tree.height() <= 1.45 * math.log2(n + 2)
    assert list(tree) == list(range(n))


def test_duplicate_insert_ignored(tree):
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1


def test_insert_none_rejected(tree):
    with pytest.raises(ValueError):
        tree.insert(None)


def test_find_returns_stored(tree):
    for value in (10, 4, 17, 8):
        tree.insert(value)
    assert tree.find(8) == 8
    assert tree.find(9) is None


def test_remove_keeps_order_and_balance(tree):
    for value in range(50):
        tree.insert(value)
    for value in range(0, 50, 2):
        tree.remove(value)
    assert list(tree) == list(range(1, 50, 2))
    assert tree.height() <= 1.45 * math.log2(len(tree) + 2)
    tree.remove(1000)
    assert len(tree) == 25


def test_remove_all_empties(tree):
    for value in (3, 1, 2):
        tree.insert(value)
    for value in (1, 2, 3):
        tree.remove(value)
    assert tree.is_empty()


def test_for_each_sums_results(tree):
    for value in (1, 2, 3, 4):
        tree.insert(value)
    assert tree.for_each(lambda data, param: data * param, 2) == 20


def test_multi_find_and_remove(tree):
    for value in range(10):
        tree.insert(value)
    even = tree.multi_find(2, lambda data, param: data % param == 0)
    assert sorted(even) == [0, 2, 4, 6, 8]
    removed = tree.multi_remove(2, lambda data, param: data % param == 0)
    assert sorted(removed) == [0, 2, 4, 6, 8]
    assert list(tree) == [1, 3, 5, 7, 9]