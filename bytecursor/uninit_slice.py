"""A write-only window onto a region of a mutable byte buffer."""

from __future__ import annotations

__all__ = ["UninitSlice"]


class UninitSlice:
    """A writable byte region that offers no way to read its contents.

    Returned by ``BufMut.chunk_mut``; callers fill it and then advance the
    owning buffer past the bytes they wrote.
    """

    __slots__ = ("_view",)

    def __init__(self, view) -> None:
        mv = memoryview(view)
        if mv.readonly:
            raise TypeError("UninitSlice needs a writable buffer")
        self._view = mv.cast("B")

    def write_byte(self, index: int, byte: int) -> None:
        """Write ``byte`` at ``index``."""
        if not 0 <= index < len(self._view):
            raise IndexError(
                f"index {index} out of range for slice of length {len(self._view)}"
            )
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte must be in 0..=255, got {byte}")
        self._view[index] = byte

    def copy_from_slice(self, src) -> None:
        """Copy ``src`` into the region; the lengths must match."""
        data = memoryview(src).cast("B")
        if len(data) != len(self._view):
            raise ValueError(
                f"source length {len(data)} does not match slice length {len(self._view)}"
            )
        self._view[:] = data

    def __len__(self) -> int:
        return len(self._view)

    def __getitem__(self, index: slice) -> UninitSlice:
        if not isinstance(index, slice):
            raise TypeError("UninitSlice can only be indexed by a range")
        if index.step not in (None, 1):
            raise ValueError("UninitSlice ranges cannot have a step")
        start, stop, _ = index.indices(len(self._view))
        for bound in (index.start, index.stop):
            if bound is not None and not 0 <= bound <= len(self._view):
                raise IndexError(
                    f"range bound {bound} out of range for length {len(self._view)}"
                )
        if start > stop:
            raise IndexError(f"range start {start} is after its end {stop}")
        return UninitSlice(self._view[start:stop])

    def __repr__(self) -> str:
        return "UninitSlice[...]"