"""A file-like adapter that writes into a ``BufMut``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bytecursor.buf_mut import BufMut

__all__ = ["Writer"]


class Writer:
    """Exposes ``write`` and ``flush`` on top of a ``BufMut``.

    Writes never fail: when the buffer has less room than the data offered,
    only what fits is written and the count written is returned.
    """

    def __init__(self, buf: BufMut) -> None:
        self._buf = buf

    def write(self, src) -> int:
        """Write as much of ``src`` as fits and return the number of bytes written."""
        data = memoryview(src).cast("B")
        n = min(self._buf.remaining_mut(), len(data))
        self._buf.put_slice(data[:n])
        return n

    def flush(self) -> None:
        """Nothing is held back, so there is nothing to flush."""

    def into_inner(self) -> BufMut:
        """Return the buffer being written to."""
        return self._buf

    def __repr__(self) -> str:
        return f"Writer({self._buf!r})"