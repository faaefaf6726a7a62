import pytest

from rtskit.byte_ring import ByteRingBuffer
from rtskit.errors import InvariantError


def test_basic_write_read():
    ring = ByteRingBuffer(16)
    ring.write(b"hey\x00")
    out = ring.read(4)
    assert len(out) == 4
    assert out == b"hey\x00"


def test_wrapping_write_read():
    ring = ByteRingBuffer(8)
    ring.write(bytes([1, 2, 3, 4]))
    out = ring.read(8)
    assert out == bytes([1, 2, 3, 4])

    ring.write(bytes([10, 11, 12, 13, 14, 15]))
    out = ring.read(8)
    assert len(out) == 6
    assert out == bytes([10, 11, 12, 13, 14, 15])


def test_basic_calc_free():
    ring = ByteRingBuffer(8)
    ring.write(bytes(4))
    assert ring.free() == 3


def test_wrapping_calc_free():
    ring = ByteRingBuffer(8)
    ring.write(bytes(4))
    ring.read(4)
    ring.write(bytes(6))
    assert ring.free() == 1


def test_empty():
    ring = ByteRingBuffer(8)
    ring.write(bytes(4))
    assert len(ring.read(2)) == 2
    assert len(ring.read(2)) == 2
    assert len(ring.read(2)) == 0
    assert len(ring.read(2)) == 0


def test_peek():
    ring = ByteRingBuffer(8)
    ring.write(bytes([1, 2, 3, 4]))
    out = ring.peek(4)
    assert out == bytes([1, 2, 3, 4])
    assert ring.read_pos == 0
    assert ring.usage() == 4


def test_read_advance():
    ring = ByteRingBuffer(8)
    ring.write(bytes([1, 2, 3, 4]))
    assert ring.read_pos == 0
    ring.advance(2)
    assert ring.read_pos == 2
    assert ring.peek(8) == bytes([3, 4])


def test_reset():
    ring = ByteRingBuffer(8)
    ring.write(bytes([1, 2, 3, 4]))
    ring.read(2)
    ring.reset()
    assert ring.read_pos == 0
    assert ring.write_pos == 0
    assert ring.usage() == 0


def test_write_must_leave_room():
    ring = ByteRingBuffer(8)
    with pytest.raises(InvariantError):
        ring.write(bytes(7))


def test_advance_past_data_rejected():
    ring = ByteRingBuffer(8)
    ring.write(b"ab")
    with pytest.raises(InvariantError):
        ring.advance(3)


def test_free_plus_usage_is_constant():
    ring = ByteRingBuffer(8)
    for chunk in (b"abc", b"de", b"f"):
        ring.write(chunk)
        assert ring.free() + ring.usage() == ring.capacity - 1
        ring.read(1)
        assert ring.free() + ring.usage() == ring.capacity - 1