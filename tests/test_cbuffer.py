import pytest

from structkit.cbuffer import BufferEmptyError, BufferFullError, CircularBuffer


def test_new_buffer_empty():
    buf = CircularBuffer(8)
    assert buf.is_empty()
    assert buf.free_space() == buf.capacity


def test_write_read_round_trip():
    buf = CircularBuffer(8)
    written = buf.write(b"hello")
    assert written == len(b"hello")
    assert buf.free_space() == buf.capacity - written
    assert buf.read(len(b"hello")) == b"hello"
    assert buf.is_empty()


def test_write_truncates_to_free_space():
    buf = CircularBuffer(4)
    assert buf.write(b"abcdef") == buf.capacity
    assert buf.free_space() == 0
    with pytest.raises(BufferFullError):
        buf.write(b"z")
    assert buf.read(100) == b"abcd"


def test_wrap_around():
    buf = CircularBuffer(4)
    buf.write(b"abcd")
    assert buf.read(3) == b"abc"
    assert buf.write(b"efg") == len(b"efg")
    assert buf.read(10) == b"defg"
    assert buf.is_empty()


def test_read_empty_raises():
    buf = CircularBuffer(2)
    with pytest.raises(BufferEmptyError):
        buf.read(1)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        CircularBuffer(0)
    buf = CircularBuffer(2)
    buf.write(b"a")
    with pytest.raises(ValueError):
        buf.read(-1)