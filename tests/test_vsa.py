import pytest

from structkit.vsa import ALIGNMENT, HEADER_SIZE, VariableSizeAllocator


def make(size=256):
    pool = bytearray(size)
    return VariableSizeAllocator(pool), pool


def test_whole_pool_can_be_allocated_once():
    vsa, _ = make()
    largest = vsa.largest_free_block()
    assert largest > 0
    vsa.allocate(largest)
    assert vsa.largest_free_block() == 0
    with pytest.raises(MemoryError):
        vsa.allocate(ALIGNMENT)


def test_allocation_costs_aligned_size_and_header():
    vsa, _ = make()
    before = vsa.largest_free_block()
    vsa.allocate(1)
    assert vsa.largest_free_block() == before - ALIGNMENT - HEADER_SIZE


def test_freeing_restores_and_coalesces():
    vsa, _ = make()
    before = vsa.largest_free_block()
    a = vsa.allocate(24)
    b = vsa.allocate(40)
    c = vsa.allocate(8)
    vsa.free(a)
    vsa.free(b)
    vsa.free(c)
    assert vsa.largest_free_block() == before


def test_blocks_do_not_overlap():
    vsa, pool = make()
    a = vsa.allocate(20)
    b = vsa.allocate(20)
    assert b >= a + 20
    assert b + 20 <= len(pool)


def test_contents_survive_other_operations():
    vsa, pool = make()
    a = vsa.allocate(16)
    pool[a:a + 16] = b"0123456789abcdef"
    b = vsa.allocate(32)
    vsa.free(b)
    vsa.allocate(48)
    assert pool[a:a + 16] == b"0123456789abcdef"
    vsa.free(a)


def test_too_large_request():
    vsa, _ = make()
    with pytest.raises(MemoryError):
        vsa.allocate(vsa.largest_free_block() + ALIGNMENT)


def test_double_free():
    vsa, _ = make()
    a = vsa.allocate(16)
    vsa.free(a)
    with pytest.raises(ValueError):
        vsa.free(a)


def test_free_bad_offset():
    vsa, _ = make()
    vsa.allocate(16)
    with pytest.raises(ValueError):
        vsa.free(3)
    with pytest.raises(ValueError):
        vsa.free(0)


def test_zero_size_rejected():
    vsa, _ = make()
    with pytest.raises(ValueError):
        vsa.allocate(0)


def test_pool_too_small():
    with pytest.raises(ValueError):
        VariableSizeAllocator(bytearray(2 * HEADER_SIZE))