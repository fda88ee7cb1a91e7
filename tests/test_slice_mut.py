import pytest
from hypothesis import given
from hypothesis import strategies as st

from bytecursor.buf import SliceBuf
from bytecursor.slice_mut import SliceBufMut


def test_put_slice_writes_in_place():
    buf = bytearray(b"1" * 10)
    b = SliceBufMut(buf)
    assert b.remaining_mut() == 10
    b.put_slice(b"123")
    assert bytes(buf) == b"1231111111"
    assert b.remaining_mut() == 7


def test_put_slice_leaves_tail_untouched():
    dst = bytearray(6)
    b = SliceBufMut(dst)
    b.put_slice(b"hello")
    assert b.remaining_mut() == 1
    assert bytes(dst) == b"hello\0"


def test_has_remaining_mut():
    dst = bytearray(5)
    b = SliceBufMut(dst)
    assert b.has_remaining_mut() is True
    b.put("hello")
    assert b.has_remaining_mut() is False
    assert bytes(dst) == b"hello"


def test_remaining_decreases_after_put():
    b = SliceBufMut(bytearray(10))
    original = b.remaining_mut()
    b.put("hello")
    assert b.remaining_mut() == original - 5


def test_put_slice_overflow_raises():
    dst = bytearray(3)
    b = SliceBufMut(dst)
    with pytest.raises(IndexError):
        b.put_slice(b"abcd")
    assert bytes(dst) == b"\0\0\0"


def test_put_overflow_raises():
    b = SliceBufMut(bytearray(2))
    with pytest.raises(IndexError):
        b.put(b"abc")


def test_advance_mut_bounds():
    b = SliceBufMut(bytearray(4))
    b.advance_mut(3)
    assert b.remaining_mut() == 1
    with pytest.raises(IndexError):
        b.advance_mut(2)
    with pytest.raises(ValueError):
        b.advance_mut(-1)


def test_chunk_mut_covers_rest():
    dst = bytearray(b"abcdef")
    b = SliceBufMut(dst)
    b.advance_mut(2)
    chunk = b.chunk_mut()
    assert len(chunk) == 4
    chunk[0:2].copy_from_slice(b"XY")
    b.advance_mut(2)
    assert bytes(dst) == b"abXYef"
    assert b.position == 4


def test_readonly_target_rejected():
    with pytest.raises(TypeError):
        SliceBufMut(b"readonly")


def test_typed_writes():
    dst = bytearray(8)
    b = SliceBufMut(dst)
    b.put_u16(0x0809)
    b.put_u32_le(0x0809A0A1)
    b.put_u8(0x01)
    b.put_i8(-1)
    assert bytes(dst) == b"\x08\x09\xA1\xA0\x09\x08\x01\xff"
    assert b.remaining_mut() == 0


def test_writer_stops_at_capacity():
    dst = bytearray(4)
    w = SliceBufMut(dst).writer()
    assert w.write(b"hello") == 4
    assert bytes(dst) == b"hell"
    assert w.into_inner().remaining_mut() == 0


def test_memoryview_target():
    backing = bytearray(b"zzzzzz")
    b = SliceBufMut(memoryview(backing)[2:5])
    b.put_slice(b"abc")
    assert bytes(backing) == b"zzabcz"


@given(st.binary(max_size=64), st.integers(min_value=0, max_value=16))
def test_round_trip_with_slice_buf(data, extra):
    dst = bytearray(len(data) + extra)
    b = SliceBufMut(dst)
    b.put(SliceBuf(data))
    assert b.remaining_mut() == extra
    assert SliceBuf(bytes(dst)).to_bytes()[: len(data)] == data