"""Cursor-style byte buffers for reading and writing binary values."""

__version__ = "0.1.0"
__all__ = ["buf", "buf_mut", "cursor", "iter", "slice_mut", "uninit_slice", "writer"]