import pytest

from structkit.fsa import WORD, FixedSizeAllocator, min_pool_size


def make(block_size=12, count=4):
    pool = bytearray(min_pool_size(block_size, count))
    return FixedSizeAllocator(pool, block_size, count), pool


def test_min_pool_size_aligns_blocks():
    assert min_pool_size(5, 3) == min_pool_size(WORD, 3)
    assert min_pool_size(WORD + 1, 1) > min_pool_size(WORD, 1)


def test_min_pool_size_rejects_zero():
    with pytest.raises(ValueError):
        min_pool_size(0, 3)
    with pytest.raises(ValueError):
        min_pool_size(8, 0)


def test_all_blocks_free_at_start():
    fsa, _ = make(count=5)
    assert fsa.count_free() == 5


def test_allocate_distinct_until_exhausted():
    fsa, pool = make(count=4)
    offsets = [fsa.allocate() for _ in range(4)]
    assert len(set(offsets)) == 4
    assert all(0 < o and o + fsa.block_size <= len(pool) for o in offsets)
    assert fsa.count_free() == 0
    with pytest.raises(MemoryError):
        fsa.allocate()


def test_free_restores_block():
    fsa, _ = make(count=3)
    first = fsa.allocate()
    fsa.allocate()
    fsa.free(first)
    assert fsa.count_free() == 2
    assert fsa.allocate() == first


def test_block_contents_survive_other_operations():
    fsa, pool = make(block_size=16, count=3)
    a = fsa.allocate()
    pool[a:a + 16] = b"abcdefghijklmnop"
    b = fsa.allocate()
    fsa.free(b)
    fsa.allocate()
    assert pool[a:a + 16] == b"abcdefghijklmnop"


def test_free_bad_offset():
    fsa, _ = make()
    fsa.allocate()
    with pytest.raises(ValueError):
        fsa.free(3)
    with pytest.raises(ValueError):
        fsa.free(10_000)


def test_double_free():
    fsa, _ = make()
    offset = fsa.allocate()
    fsa.free(offset)
    with pytest.raises(ValueError):
        fsa.free(offset)


def test_pool_too_small():
    with pytest.raises(ValueError):
        FixedSizeAllocator(bytearray(min_pool_size(8, 4) - 1), 8, 4)


def test_read_only_pool():
    with pytest.raises(TypeError):
        FixedSizeAllocator(bytes(min_pool_size(8, 2)), 8, 2)