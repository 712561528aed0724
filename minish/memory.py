"""Byte-buffer helpers: allocation, filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def _byte(value: int | str | bytes) -> int:
    """Return the value as one byte, the way C truncates to unsigned char."""
    if isinstance(value, str):
        value = ord(value)
    elif isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {value!r}")
        value = value[0]
    return value & 0xFF


def mem_alloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of the given size."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def mem_set(buf: Buffer, value: int | str | bytes, n: int) -> Buffer:
    """Fill the first n bytes of buf with value and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([_byte(value)]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Zero the first n bytes of buf and return buf."""
    return mem_set(buf, 0, n)


def mem_copy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first n bytes of src into dest and return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def mem_ccopy(
    dest: Buffer, src: ReadableBuffer, c: int | str | bytes, n: int
) -> int | None:
    """Copy bytes from src to dest up to and including the first byte c.

    At most n bytes are copied. Returns the index in dest just past the
    copied c, or None if c did not occur among the first n bytes (in which
    case all n bytes were copied).
    """
    _check_count(n, dest, src)
    stop = bytes(src[:n]).find(bytes([_byte(c)]))
    if stop < 0:
        dest[:n] = bytes(src[:n])
        return None
    dest[: stop + 1] = bytes(src[: stop + 1])
    return stop + 1


def mem_chr(buf: ReadableBuffer, c: int | str | bytes, n: int) -> int | None:
    """Return the index of the first byte c among the first n bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(bytes([_byte(c)]))
    return None if index < 0 else index


def mem_cmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of bytes that differ, or 0
    when the first n bytes are equal.
    """
    _check_count(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def mem_move(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy n bytes inside buf from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns buf.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf