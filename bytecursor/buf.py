"""Read cursors over byte buffers."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod

__all__ = ["Buf", "SliceBuf"]

_MAX_UINT_BYTES = 8


class Buf(ABC):
    """A cursor over bytes; every read advances the position.

    Subclasses provide ``remaining``, ``chunk`` and ``advance``; the storage
    behind them need not be contiguous.
    """

    @abstractmethod
    def remaining(self) -> int:
        """Number of bytes between the current position and the end."""

    @abstractmethod
    def chunk(self) -> memoryview | bytes:
        """Bytes starting at the current position, possibly fewer than remaining."""

    @abstractmethod
    def advance(self, cnt: int) -> None:
        """Move the position forward by ``cnt`` bytes."""

    def has_remaining(self) -> bool:
        """True while there are bytes left to read."""
        return self.remaining() > 0

    def copy_to_slice(self, dst) -> None:
        """Fill the writable buffer ``dst`` from the cursor and advance past it."""
        target = memoryview(dst).cast("B")
        size = len(target)
        if self.remaining() < size:
            raise IndexError(
                f"need {size} bytes but only {self.remaining()} remain"
            )
        off = 0
        while off < size:
            src = self.chunk()
            cnt = min(len(src), size - off)
            if cnt == 0:
                raise IndexError("buffer returned an empty chunk before its end")
            target[off:off + cnt] = src[:cnt]
            off += cnt
            self.advance(cnt)

    def _take(self, size: int) -> bytes:
        data = bytearray(size)
        self.copy_to_slice(data)
        return bytes(data)

    def _int(self, size: int, order: str, signed: bool) -> int:
        return int.from_bytes(self._take(size), order, signed=signed)

    def get_u8(self) -> int:
        """Read an unsigned 8-bit integer."""
        return self._int(1, "big", False)

    def get_i8(self) -> int:
        """Read a signed 8-bit integer."""
        return self._int(1, "big", True)

    def get_u16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return self._int(2, "big", False)

    def get_u16_le(self) -> int:
        """Read a little-endian unsigned 16-bit integer."""
        return self._int(2, "little", False)

    def get_i16(self) -> int:
        """Read a big-endian signed 16-bit integer."""
        return self._int(2, "big", True)

    def get_i16_le(self) -> int:
        """Read a little-endian signed 16-bit integer."""
        return self._int(2, "little", True)

    def get_u32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return self._int(4, "big", False)

    def get_u32_le(self) -> int:
        """Read a little-endian unsigned 32-bit integer."""
        return self._int(4, "little", False)

    def get_i32(self) -> int:
        """Read a big-endian signed 32-bit integer."""
        return self._int(4, "big", True)

    def get_i32_le(self) -> int:
        """Read a little-endian signed 32-bit integer."""
        return self._int(4, "little", True)

    def get_u64(self) -> int:
        """Read a big-endian unsigned 64-bit integer."""
        return self._int(8, "big", False)

    def get_u64_le(self) -> int:
        """Read a little-endian unsigned 64-bit integer."""
        return self._int(8, "little", False)

    def get_i64(self) -> int:
        """Read a big-endian signed 64-bit integer."""
        return self._int(8, "big", True)

    def get_i64_le(self) -> int:
        """Read a little-endian signed 64-bit integer."""
        return self._int(8, "little", True)

    def get_u128(self) -> int:
        """Read a big-endian unsigned 128-bit integer."""
        return self._int(16, "big", False)

    def get_u128_le(self) -> int:
        """Read a little-endian unsigned 128-bit integer."""
        return self._int(16, "little", False)

    def get_i128(self) -> int:
        """Read a big-endian signed 128-bit integer."""
        return self._int(16, "big", True)

    def get_i128_le(self) -> int:
        """Read a little-endian signed 128-bit integer."""
        return self._int(16, "little", True)

    @staticmethod
    def _check_width(nbytes: int) -> None:
        if not 0 <= nbytes <= _MAX_UINT_BYTES:
            raise ValueError(f"nbytes must be between 0 and 8, got {nbytes}")

    def _padded(self, nbytes: int, order: str) -> bytes:
        self._check_width(nbytes)
        data = self._take(nbytes)
        pad = bytes(_MAX_UINT_BYTES - nbytes)
        return pad + data if order == "big" else data + pad

    def get_uint(self, nbytes: int) -> int:
        """Read an unsigned big-endian integer of ``nbytes`` bytes (at most 8)."""
        return int.from_bytes(self._padded(nbytes, "big"), "big", signed=False)

    def get_uint_le(self, nbytes: int) -> int:
        """Read an unsigned little-endian integer of ``nbytes`` bytes (at most 8)."""
        return int.from_bytes(self._padded(nbytes, "little"), "little", signed=False)

    def get_int(self, nbytes: int) -> int:
        """Read ``nbytes`` big-endian bytes into a zero-padded signed 64-bit value."""
        return int.from_bytes(self._padded(nbytes, "big"), "big", signed=True)

    def get_int_le(self, nbytes: int) -> int:
        """Read ``nbytes`` little-endian bytes into a zero-padded signed 64-bit value."""
        return int.from_bytes(self._padded(nbytes, "little"), "little", signed=True)

    def get_f32(self) -> float:
        """Read a big-endian IEEE 754 single-precision float."""
        return struct.unpack(">f", self._take(4))[0]

    def get_f32_le(self) -> float:
        """Read a little-endian IEEE 754 single-precision float."""
        return struct.unpack("<f", self._take(4))[0]

    def get_f64(self) -> float:
        """Read a big-endian IEEE 754 double-precision float."""
        return struct.unpack(">d", self._take(8))[0]

    def get_f64_le(self) -> float:
        """Read a little-endian IEEE 754 double-precision float."""
        return struct.unpack("<d", self._take(8))[0]

    def to_bytes(self) -> bytes:
        """Consume every remaining byte and return them."""
        return self._take(self.remaining())


class SliceBuf(Buf):
    """A cursor over a contiguous bytes-like object or a UTF-8 string."""

    def __init__(self, data: bytes | bytearray | memoryview | str) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._view = memoryview(data).cast("B")
        self._pos = 0

    def remaining(self) -> int:
        return len(self._view) - self._pos

    def chunk(self) -> memoryview:
        return self._view[self._pos:]

    def advance(self, cnt: int) -> None:
        if cnt < 0:
            raise ValueError(f"cannot advance by a negative count: {cnt}")
        if cnt > self.remaining():
            raise IndexError(
                f"cannot advance by {cnt}; only {self.remaining()} bytes remain"
            )
        self._pos += cnt

    def __repr__(self) -> str:
        return f"SliceBuf({bytes(self.chunk())!r})"