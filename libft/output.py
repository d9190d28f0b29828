"""Writing characters, strings and integers to open file descriptors."""

from __future__ import annotations

import os
from typing import Union

from libft.convert import itoa

CharLike = Union[int, str]
TextLike = Union[str, bytes, bytearray]

_NEWLINE = b"\n"


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying after partial writes."""
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, got {type(fd).__name__}")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return bytes([c & 0xFF])


def _text_bytes(s: TextLike) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an integer code writes its low byte."""
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: TextLike, fd: int) -> None:
    """Write ``s`` to ``fd``; text is encoded as UTF-8."""
    _write_all(fd, _text_bytes(s))


def putendl_fd(s: TextLike, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, _text_bytes(s) + _NEWLINE)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))