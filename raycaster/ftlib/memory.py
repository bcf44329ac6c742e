"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

import sys

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(buf: bytes | bytearray, start: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"span [{start}, {start + n}) outside buffer of length {len(buf)}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_span(buf, 0, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Raises MemoryError when the product overflows the platform's size type.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > _SIZE_MAX // size:
        raise MemoryError(f"{nmemb} * {size} bytes overflows the size type")
    return bytearray(nmemb * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of c among the first n, or None."""
    _check_span(buf, 0, n)
    index = buf.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest; return dest."""
    _check_span(dest, 0, n)
    _check_span(src, 0, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_start: int, src_start: int, n: int) -> bytearray:
    """Copy n bytes inside buf from src_start to dest_start, overlap allowed."""
    _check_span(buf, dest_start, n)
    _check_span(buf, src_start, n)
    buf[dest_start:dest_start + n] = bytes(buf[src_start:src_start + n])
    return buf