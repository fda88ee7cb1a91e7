# bytecursor

Cursor-style byte buffers. A reading buffer hands out bytes from its current
position and moves forward as you read; a writing buffer fills bytes and moves
forward as you write. Integers of 8 to 128 bits, n-byte integers and IEEE 754
floats are available in both big-endian and little-endian order.

The package has no dependencies outside the standard library.

## Reading

`Buf` (in `bytecursor.buf`) is the abstract reading cursor. Subclasses supply
`remaining()`, `chunk()` and `advance(cnt)`; everything else is built on those:

- `has_remaining()`, `copy_to_slice(dst)` (fills a writable buffer such as a
  `bytearray`), `to_bytes()` (consumes everything left)
- `get_u8`, `get_i8`, `get_u16` … `get_i128` and their `_le` variants
- `get_uint(nbytes)`, `get_int(nbytes)` and their `_le` variants, for
  `nbytes` from 0 to 8
- `get_f32`, `get_f64` and their `_le` variants

Two ready-made readers are provided:

- `SliceBuf` (in `bytecursor.buf`) reads a bytes-like object, or a string
  encoded as UTF-8.
- `CursorBuf` (in `bytecursor.cursor`) reads a bytes-like object starting at
  `position`, which can be read and set. A position past the end leaves
  nothing to read.

```python
from bytecursor.buf import SliceBuf

buf = SliceBuf(b"\x08\x09\xA0\xA1 hello")
assert buf.get_u32() == 0x0809A0A1
assert buf.remaining() == 6
assert bytes(buf.chunk()) == b" hello"
```

```python
from bytecursor.cursor import CursorBuf

cur = CursorBuf(b" world")
cur.advance(1)
assert bytes(cur.chunk()) == b"world"
assert cur.position == 1
```

`get_int(nbytes)` reads `nbytes` bytes into a zero-padded 64-bit value, so for
fewer than 8 bytes the result is never negative.

Iterate over the bytes left in a buffer with `IntoIter` (in
`bytecursor.iter`); `into_inner()` gives back the buffer, positioned after
the bytes consumed:

```python
from bytecursor.buf import SliceBuf
from bytecursor.iter import IntoIter

assert list(IntoIter(SliceBuf(b"abc"))) == [ord("a"), ord("b"), ord("c")]
```

## Writing

`BufMut` (in `bytecursor.buf_mut`) is the abstract writing cursor. Subclasses
supply `remaining_mut()`, `advance_mut(cnt)` and `chunk_mut()`; on top of them
it offers `has_remaining_mut()`, `put(src)` (from a `Buf`, a bytes-like object
or a string), `put_slice(src)`, `put_u8` … `put_i128_le`, `put_uint`,
`put_int` and their `_le` variants, `put_f32`, `put_f64` and their `_le`
variants, and `writer()`.

- `VecBuf` (in `bytecursor.buf_mut`) grows as it is written to. `bytes()`,
  `len()` and `==` against bytes-like objects or other `VecBuf`s work on the
  bytes written so far.
- `SliceBufMut` (in `bytecursor.slice_mut`) writes in place into an existing
  writable buffer such as a `bytearray`; `position` is the number of bytes
  written so far.

```python
from bytecursor.buf_mut import VecBuf

out = VecBuf()
out.put_u8(ord("h"))
out.put_slice(b"ello")
out.put_u16(0x0809)
assert bytes(out) == b"hello\x08\x09"
```

```python
from bytecursor.slice_mut import SliceBufMut

target = bytearray(b"1111111111")
SliceBufMut(target).put_slice(b"123")
assert target == bytearray(b"1231111111")
```

`chunk_mut()` returns an `UninitSlice` (in `bytecursor.uninit_slice`), a
write-only window that supports `write_byte(index, byte)`,
`copy_from_slice(src)`, `len()` and slicing with a range.

`writer()` wraps a writing buffer in a `Writer` (in `bytecursor.writer`) with
file-like `write` and `flush`. `write` stores as much as fits and returns the
number of bytes stored; `into_inner()` returns the buffer.

## Errors

Reading past the end of a buffer, or writing more than it can hold, raises
`IndexError` instead of returning partial data. A negative advance, or an
`nbytes` outside 0 to 8, raises `ValueError`.

## Tests

```
pip install .[test]
pytest
```