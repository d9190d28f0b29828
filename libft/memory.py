"""Operations on mutable byte buffers such as ``bytearray`` and ``memoryview``."""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero; nothing for ``n <= 0``."""
    if n <= 0:
        return
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, buf)
    target = c & 0xFF
    index = bytes(buf[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(
    dst: Optional[WritableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[WritableBuffer]:
    """Copy ``n`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are required")
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(
    dst: Optional[WritableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[WritableBuffer]:
    """Copy ``n`` bytes like :func:`memcpy`, correct when the buffers overlap."""
    # The source bytes are taken before any write, so overlap cannot corrupt them.
    return memcpy(dst, src, n)


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf