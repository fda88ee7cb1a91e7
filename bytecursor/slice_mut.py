"""A write cursor over a fixed-size mutable byte buffer."""

from __future__ import annotations

from bytecursor.buf_mut import BufMut
from bytecursor.uninit_slice import UninitSlice

__all__ = ["SliceBufMut"]


class SliceBufMut(BufMut):
    """A ``BufMut`` that writes into an existing writable buffer in place.

    The capacity is fixed: each write consumes the front of the region, and
    writing more than is left raises ``IndexError``.
    """

    def __init__(self, target) -> None:
        view = memoryview(target)
        if view.readonly:
            raise TypeError("SliceBufMut needs a writable buffer")
        self._target = target
        self._view = view.cast("B")
        self._pos = 0

    @property
    def target(self):
        """The object being written into."""
        return self._target

    @property
    def position(self) -> int:
        """Number of bytes written so far."""
        return self._pos

    def remaining_mut(self) -> int:
        return len(self._view) - self._pos

    def advance_mut(self, cnt: int) -> None:
        if cnt < 0:
            raise ValueError(f"cannot advance by a negative count: {cnt}")
        if cnt > self.remaining_mut():
            raise IndexError(
                f"cannot advance by {cnt}; only {self.remaining_mut()} bytes remain"
            )
        self._pos += cnt

    def chunk_mut(self) -> UninitSlice:
        return UninitSlice(self._view[self._pos:])

    def put_slice(self, src) -> None:
        data = memoryview(src).cast("B")
        size = len(data)
        if size > self.remaining_mut():
            raise IndexError(
                f"buffer overflow: need {size} bytes, room for {self.remaining_mut()}"
            )
        self._view[self._pos:self._pos + size] = data
        self._pos += size

    def __repr__(self) -> str:
        return f"SliceBufMut(position={self._pos}, length={len(self._view)})"