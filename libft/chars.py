"""Classification and case conversion of ASCII character codes.

Every function takes either an integer character code or a one-character
string. Only the ASCII ranges count: other codes are neither letters nor
digits, and case conversion leaves them unchanged.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST, _UPPER_LAST = 65, 90
_LOWER_FIRST, _LOWER_LAST = 97, 122
_DIGIT_FIRST, _DIGIT_LAST = 48, 57
_PRINT_FIRST, _PRINT_LAST = 32, 126
_ASCII_LAST = 127
_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def isalpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def isalnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= _ASCII_LAST


def isprint(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return _PRINT_FIRST <= _code(c) <= _PRINT_LAST


def toupper(c: CharLike) -> CharLike:
    """Return the upper-case form of an ASCII lower-case letter, else ``c``."""
    code = _code(c)
    if not _is_lower(code):
        return c
    upper = code - _CASE_OFFSET
    return chr(upper) if isinstance(c, str) else upper


def tolower(c: CharLike) -> CharLike:
    """Return the lower-case form of an ASCII upper-case letter, else ``c``."""
    code = _code(c)
    if not _is_upper(code):
        return c
    lower = code + _CASE_OFFSET
    return chr(lower) if isinstance(c, str) else lower