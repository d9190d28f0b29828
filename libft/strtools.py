"""String operations: measuring, bounded copying, searching, slicing and splitting.

Positions are returned as indices into the string, and ``None`` is returned
where nothing was found. Bounded copy and concatenation return the new string
together with the length that was attempted, so callers can detect truncation.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _as_char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integer codes keep their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``; a returned length
    of ``size`` or more means the copy was truncated.
    """
    _require_str(src, "src")
    _require_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` so the result fits a buffer of ``size`` with its terminator.

    Returns the resulting text and the length that the full concatenation
    would have had, counting ``dst`` as at most ``size`` long.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    _require_non_negative(size, "size")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _require_str(s, "s")
    ch = _as_char(c)
    if ch == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _require_str(s, "s")
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair, or 0.

    The end of a string compares as a NUL character, and comparison stops there.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _require_non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of the first ``little`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    _require_non_negative(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(_require_str(s, "s"))


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty if ``start`` is past the end."""
    _require_str(s, "s")
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Return ``s`` without the leading and trailing characters found in ``charset``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _require_str(s, "s")
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for each character of ``s``."""
    _require_str(s, "s")
    if f is None:
        raise TypeError("f must be callable")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each character of ``chars`` in place with ``f(index, char)`` and return ``chars``."""
    if f is None:
        raise TypeError("f must be callable")
    for index, ch in enumerate(list(chars)):
        chars[index] = f(index, ch)
    return chars