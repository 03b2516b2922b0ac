"""Byte-buffer helpers: fill, zero, copy, move, search and compare."""

from __future__ import annotations


def _check_length(buf_len: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: length must not be negative")
    if n > buf_len:
        raise ValueError(f"{what}: length {n} exceeds buffer of {buf_len} bytes")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c."""
    _check_length(len(buf), n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of c within n bytes."""
    _check_length(len(data), n, "memchr")
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_length(min(len(a), len(b)), n, "memcmp")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes of src to the start of dest and return dest."""
    _check_length(min(len(dest), len(src)), n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_offset to dest_offset, overlap allowed."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_length(len(buf) - max(dest_offset, src_offset), n, "memmove")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf