"""Byte-by-byte iteration over a buffer cursor."""

from __future__ import annotations

from bytecursor.buf import Buf

__all__ = ["IntoIter"]


class IntoIter:
    """Iterator that consumes a ``Buf`` one byte at a time."""

    def __init__(self, inner: Buf) -> None:
        self._inner = inner

    def __iter__(self) -> IntoIter:
        return self

    def __next__(self) -> int:
        if not self._inner.has_remaining():
            raise StopIteration
        byte = self._inner.chunk()[0]
        self._inner.advance(1)
        return byte

    def __length_hint__(self) -> int:
        return self._inner.remaining()

    def into_inner(self) -> Buf:
        """Return the underlying buffer, positioned after the bytes consumed."""
        return self._inner