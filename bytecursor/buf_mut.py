"""Write cursors over byte buffers."""

from __future__ import annotations

import struct
import sys
from abc import ABC, abstractmethod

from bytecursor.buf import Buf, SliceBuf
from bytecursor.uninit_slice import UninitSlice
from bytecursor.writer import Writer

__all__ = ["BufMut", "VecBuf"]

_MAX_UINT_BYTES = 8
_GROW_STEP = 64


class BufMut(ABC):
    """A cursor for writing bytes; every write advances the position.

    Subclasses provide ``remaining_mut``, ``advance_mut`` and ``chunk_mut``.
    """

    @abstractmethod
    def remaining_mut(self) -> int:
        """Number of bytes that can still be written."""

    @abstractmethod
    def advance_mut(self, cnt: int) -> None:
        """Move the write position forward by ``cnt`` bytes."""

    @abstractmethod
    def chunk_mut(self) -> UninitSlice:
        """Writable region at the current position, possibly shorter than remaining_mut."""

    def has_remaining_mut(self) -> bool:
        """True while there is room for more bytes."""
        return self.remaining_mut() > 0

    def put(self, src) -> None:
        """Copy every remaining byte of ``src`` (a Buf, bytes-like or str) into self."""
        if not isinstance(src, Buf):
            src = SliceBuf(src)
        if self.remaining_mut() < src.remaining():
            raise IndexError(
                f"buffer overflow: need {src.remaining()} bytes, "
                f"room for {self.remaining_mut()}"
            )
        while src.has_remaining():
            s = src.chunk()
            d = self.chunk_mut()
            n = min(len(s), len(d))
            if n == 0:
                raise IndexError("buffer offered an empty chunk before its end")
            d[0:n].copy_from_slice(s[:n])
            src.advance(n)
            self.advance_mut(n)

    def put_slice(self, src) -> None:
        """Copy the bytes-like ``src`` into self."""
        data = memoryview(src).cast("B")
        size = len(data)
        if self.remaining_mut() < size:
            raise IndexError(
                f"buffer overflow: need {size} bytes, room for {self.remaining_mut()}"
            )
        off = 0
        while off < size:
            dst = self.chunk_mut()
            cnt = min(len(dst), size - off)
            if cnt == 0:
                raise IndexError("buffer offered an empty chunk before its end")
            dst[0:cnt].copy_from_slice(data[off:off + cnt])
            off += cnt
            self.advance_mut(cnt)

    def _put_int(self, n: int, size: int, order: str, signed: bool) -> None:
        self.put_slice(n.to_bytes(size, order, signed=signed))

    def put_u8(self, n: int) -> None:
        """Write an unsigned 8-bit integer."""
        self._put_int(n, 1, "big", False)

    def put_i8(self, n: int) -> None:
        """Write a signed 8-bit integer."""
        self._put_int(n, 1, "big", True)

    def put_u16(self, n: int) -> None:
        """Write a big-endian unsigned 16-bit integer."""
        self._put_int(n, 2, "big", False)

    def put_u16_le(self, n: int) -> None:
        """Write a little-endian unsigned 16-bit integer."""
        self._put_int(n, 2, "little", False)

    def put_i16(self, n: int) -> None:
        """Write a big-endian signed 16-bit integer."""
        self._put_int(n, 2, "big", True)

    def put_i16_le(self, n: int) -> None:
        """Write a little-endian signed 16-bit integer."""
        self._put_int(n, 2, "little", True)

    def put_u32(self, n: int) -> None:
        """Write a big-endian unsigned 32-bit integer."""
        self._put_int(n, 4, "big", False)

    def put_u32_le(self, n: int) -> None:
        """Write a little-endian unsigned 32-bit integer."""
        self._put_int(n, 4, "little", False)

    def put_i32(self, n: int) -> None:
        """Write a big-endian signed 32-bit integer."""
        self._put_int(n, 4, "big", True)

    def put_i32_le(self, n: int) -> None:
        """Write a little-endian signed 32-bit integer."""
        self._put_int(n, 4, "little", True)

    def put_u64(self, n: int) -> None:
        """Write a big-endian unsigned 64-bit integer."""
        self._put_int(n, 8, "big", False)

    def put_u64_le(self, n: int) -> None:
        """Write a little-endian unsigned 64-bit integer."""
        self._put_int(n, 8, "little", False)

    def put_i64(self, n: int) -> None:
        """Write a big-endian signed 64-bit integer."""
        self._put_int(n, 8, "big", True)

    def put_i64_le(self, n: int) -> None:
        """Write a little-endian signed 64-bit integer."""
        self._put_int(n, 8, "little", True)

    def put_u128(self, n: int) -> None:
        """Write a big-endian unsigned 128-bit integer."""
        self._put_int(n, 16, "big", False)

    def put_u128_le(self, n: int) -> None:
        """Write a little-endian unsigned 128-bit integer."""
        self._put_int(n, 16, "little", False)

    def put_i128(self, n: int) -> None:
        """Write a big-endian signed 128-bit integer."""
        self._put_int(n, 16, "big", True)

    def put_i128_le(self, n: int) -> None:
        """Write a little-endian signed 128-bit integer."""
        self._put_int(n, 16, "little", True)

    @staticmethod
    def _check_width(nbytes: int) -> None:
        if not 0 <= nbytes <= _MAX_UINT_BYTES:
            raise ValueError(f"nbytes must be between 0 and 8, got {nbytes}")

    def put_uint(self, n: int, nbytes: int) -> None:
        """Write the low ``nbytes`` bytes of the unsigned 64-bit ``n``, big-endian."""
        self._check_width(nbytes)
        full = n.to_bytes(_MAX_UINT_BYTES, "big", signed=False)
        self.put_slice(full[_MAX_UINT_BYTES - nbytes:])

    def put_uint_le(self, n: int, nbytes: int) -> None:
        """Write the low ``nbytes`` bytes of the unsigned 64-bit ``n``, little-endian."""
        self._check_width(nbytes)
        full = n.to_bytes(_MAX_UINT_BYTES, "little", signed=False)
        self.put_slice(full[:nbytes])

    def put_int(self, n: int, nbytes: int) -> None:
        """Write the low ``nbytes`` bytes of the signed 64-bit ``n``, big-endian."""
        self._check_width(nbytes)
        full = n.to_bytes(_MAX_UINT_BYTES, "big", signed=True)
        self.put_slice(full[_MAX_UINT_BYTES - nbytes:])

    def put_int_le(self, n: int, nbytes: int) -> None:
        """Write the low ``nbytes`` bytes of the signed 64-bit ``n``, little-endian."""
        self._check_width(nbytes)
        full = n.to_bytes(_MAX_UINT_BYTES, "little", signed=True)
        self.put_slice(full[:nbytes])

    def put_f32(self, n: float) -> None:
        """Write a big-endian IEEE 754 single-precision float."""
        self.put_slice(struct.pack(">f", n))

    def put_f32_le(self, n: float) -> None:
        """Write a little-endian IEEE 754 single-precision float."""
        self.put_slice(struct.pack("<f", n))

    def put_f64(self, n: float) -> None:
        """Write a big-endian IEEE 754 double-precision float."""
        self.put_slice(struct.pack(">d", n))

    def put_f64_le(self, n: float) -> None:
        """Write a little-endian IEEE 754 double-precision float."""
        self.put_slice(struct.pack("<d", n))

    def writer(self) -> Writer:
        """Return a file-like ``Writer`` that writes into this buffer."""
        return Writer(self)


class VecBuf(BufMut):
    """A growable byte buffer; writing past its end extends it."""

    def __init__(self, data=b"") -> None:
        self._buf = bytearray(data)
        self._len = len(self._buf)

    def _reserve(self, additional: int) -> None:
        capacity = len(self._buf)
        if capacity - self._len >= additional:
            return
        grown = bytearray(max(capacity * 2, self._len + additional))
        grown[:self._len] = self._buf[:self._len]
        self._buf = grown

    def remaining_mut(self) -> int:
        return sys.maxsize - self._len

    def advance_mut(self, cnt: int) -> None:
        if cnt < 0:
            raise ValueError(f"cannot advance by a negative count: {cnt}")
        if cnt > self.remaining_mut():
            raise IndexError(f"cannot advance by {cnt}; buffer would overflow")
        self._reserve(cnt)
        self._len += cnt

    def chunk_mut(self) -> UninitSlice:
        if len(self._buf) == self._len:
            self._reserve(_GROW_STEP)
        return UninitSlice(memoryview(self._buf)[self._len:])

    def __bytes__(self) -> bytes:
        return bytes(self._buf[:self._len])

    def __len__(self) -> int:
        return self._len

    def __eq__(self, other) -> bool:
        if isinstance(other, VecBuf):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self) == bytes(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"VecBuf({bytes(self)!r})"