import pytest
from hypothesis import given, strategies as st

from bytecursor.uninit_slice import UninitSlice


def test_write_byte():
    data = bytearray(b"foo")
    slice_ = UninitSlice(data)
    slice_.write_byte(0, ord("b"))
    assert data == b"boo"


def test_copy_from_slice():
    data = bytearray(b"foo")
    slice_ = UninitSlice(data)
    slice_.copy_from_slice(b"bar")
    assert data == b"bar"


def test_len():
    data = bytearray([0, 1, 2])
    assert len(UninitSlice(data)) == 3


def test_write_byte_out_of_range():
    slice_ = UninitSlice(bytearray(3))
    with pytest.raises(IndexError):
        slice_.write_byte(3, 1)


def test_write_byte_value_out_of_range():
    slice_ = UninitSlice(bytearray(3))
    with pytest.raises(ValueError):
        slice_.write_byte(0, 256)


def test_copy_from_slice_length_mismatch():
    data = bytearray(b"foo")
    slice_ = UninitSlice(data)
    with pytest.raises(ValueError):
        slice_.copy_from_slice(b"ab")
    assert data == b"foo"


def test_readonly_buffer_rejected():
    with pytest.raises(TypeError):
        UninitSlice(b"foo")


def test_subslice_writes_through():
    data = bytearray(b"hello world")
    slice_ = UninitSlice(data)
    sub = slice_[6:]
    assert len(sub) == 5
    sub.copy_from_slice(b"WORLD")
    assert data == b"hello WORLD"


def test_subslice_range_bounds():
    data = bytearray(10)
    slice_ = UninitSlice(data)
    assert len(slice_[2:5]) == 3
    assert len(slice_[:]) == 10
    with pytest.raises(IndexError):
        slice_[0:11]
    with pytest.raises(IndexError):
        slice_[5:2]


def test_integer_index_rejected():
    data = bytearray(b"abc")
    slice_ = UninitSlice(data)
    with pytest.raises(TypeError):
        slice_[0]
    assert len(slice_) == 3
    assert data == b"abc"


def test_stepped_range_rejected():
    slice_ = UninitSlice(bytearray(6))
    with pytest.raises(ValueError):
        slice_[::2]
    assert len(slice_[0:6]) == 6


@given(st.binary())
def test_copy_round_trip(src):
    data = bytearray(len(src))
    UninitSlice(data).copy_from_slice(src)
    assert bytes(data) == src


@given(st.binary(min_size=1), st.data())
def test_write_byte_only_touches_index(original, draw):
    index = draw.draw(st.integers(min_value=0, max_value=len(original) - 1))
    value = draw.draw(st.integers(min_value=0, max_value=255))
    data = bytearray(original)
    UninitSlice(data).write_byte(index, value)
    assert data[index] == value
    assert data[:index] == original[:index]
    assert data[index + 1:] == original[index + 1:]