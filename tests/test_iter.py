import operator

from hypothesis import given, strategies as st

from bytecursor.buf import SliceBuf
from bytecursor.iter import IntoIter


def test_yields_each_byte_then_stops():
    it = IntoIter(SliceBuf(b"abc"))
    assert next(it) == ord("a")
    assert next(it) == ord("b")
    assert next(it) == ord("c")
    assert next(it, None) is None


def test_into_inner_keeps_position():
    it = IntoIter(SliceBuf(b"abc"))
    assert next(it) == ord("a")
    buf = it.into_inner()
    assert buf.remaining() == 2


def test_advancing_inner_skips_bytes():
    it = IntoIter(SliceBuf(b"abc"))
    assert next(it) == ord("a")
    it.into_inner().advance(1)
    assert next(it) == ord("c")


def test_length_hint_tracks_remaining():
    it = IntoIter(SliceBuf(b"abc"))
    assert operator.length_hint(it) == 3
    next(it)
    assert operator.length_hint(it) == 2


def test_iter_returns_self():
    it = IntoIter(SliceBuf(b"xy"))
    assert iter(it) is it


@given(st.binary())
def test_iteration_round_trip(data):
    it = IntoIter(SliceBuf(data))
    assert bytes(it) == data
    assert not it.into_inner().has_remaining()