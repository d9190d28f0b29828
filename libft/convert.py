"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset(" \t\r\n\f\v")
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer after ASCII whitespace and one optional sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    Values beyond the 32-bit range wrap around.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        result = result * 10 + _DIGITS.index(ch)
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)