import pytest

from structkit.bst import BinarySearchTree


def cmp(a, b):
    return (a > b) - (a < b)


@pytest.fixture
def tree():
    t = BinarySearchTree(cmp)
    for value in (50, 30, 70, 20, 40, 60, 80):
        t.insert(value)
    return t


def test_empty():
    t = BinarySearchTree(cmp)
    assert t.is_empty()
    assert len(t) == 0
    assert t.begin() is t.end()
    assert list(t) == []


def test_iteration_sorted(tree):
    assert list(tree) == [20, 30, 40, 50, 60, 70, 80]
    assert len(tree) == 7
    assert not tree.is_empty()


def test_duplicate_insert_returns_none(tree):
    assert tree.insert(40) is None
    assert len(tree) == 7


def test_insert_returns_node(tree):
    node = tree.insert(45)
    assert node.data == 45
    assert tree.find(45) is node


def test_find_missing(tree):
    assert tree.find(55) is None


def test_next_and_prev(tree):
    node = tree.find(40)
    assert tree.next(node).data == 50
    assert tree.prev(node).data == 30
    assert tree.next(tree.find(80)) is tree.end()
    assert tree.prev(tree.begin()) is None
    assert tree.prev(tree.end()).data == 80


def test_next_of_end_raises(tree):
    with pytest.raises(ValueError):
        tree.next(tree.end())


def test_remove_leaf_and_inner(tree):
    assert tree.remove(tree.find(20)) == 20
    assert tree.remove(tree.find(50)) == 50
    assert list(tree) == [30, 40, 60, 70, 80]
    assert tree.find(50) is None


def test_remove_until_empty(tree):
    while not tree.is_empty():
        tree.remove(tree.begin())
    assert len(tree) == 0


def test_remove_end_raises(tree):
    with pytest.raises(ValueError):
        tree.remove(tree.end())


def test_for_each_range(tree):
    count = tree.for_each(tree.find(30), tree.find(70), lambda d, p: d % p, 20)
    assert count == 2
    assert tree.for_each(tree.begin(), tree.end(), lambda d, p: 0, None) == 7