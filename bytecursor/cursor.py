"""A read cursor over a bytes-like object with an explicit position."""

from __future__ import annotations

from bytecursor.buf import Buf

__all__ = ["CursorBuf"]


class CursorBuf(Buf):
    """A ``Buf`` over a bytes-like object, starting at ``position``.

    The position may be set past the end of the data; the cursor then has
    nothing left to read.
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview | str,
        position: int = 0,
    ) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = data
        self._view = memoryview(data).cast("B")
        self.position = position

    @property
    def data(self) -> bytes | bytearray | memoryview:
        """The object the cursor reads from."""
        return self._data

    @property
    def position(self) -> int:
        """Current offset into the data."""
        return self._pos

    @position.setter
    def position(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"position cannot be negative: {value}")
        self._pos = value

    def remaining(self) -> int:
        return max(len(self._view) - self._pos, 0)

    def chunk(self) -> memoryview:
        if self._pos >= len(self._view):
            return self._view[0:0]
        return self._view[self._pos:]

    def advance(self, cnt: int) -> None:
        if cnt < 0:
            raise ValueError(f"cannot advance by a negative count: {cnt}")
        pos = self._pos + cnt
        if pos > len(self._view):
            raise IndexError(
                f"cannot advance to {pos}; data holds only {len(self._view)} bytes"
            )
        self._pos = pos

    def __repr__(self) -> str:
        return f"CursorBuf(position={self._pos}, length={len(self._view)})"