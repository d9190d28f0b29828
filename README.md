# libft

A small library of helpers for ASCII characters, byte buffers, strings,
32-bit integer conversion and writing to open file descriptors. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.

Each takes an integer character code or a one-character string. Only ASCII
ranges count. The predicates return `bool`. `toupper` and `tolower` return
the converted value in the same form they were given (an `int` for an `int`,
a `str` for a `str`) and return anything other than an ASCII letter of the
other case unchanged. A string longer than one character raises `ValueError`;
other types raise `TypeError`.

### `libft.memory`

Operations on `bytearray`, `memoryview` and (for reading) `bytes`:

- `bzero(buf, n)`: zero the first `n` bytes; does nothing when `n <= 0`.
- `calloc(nmemb, size)`: a new zero-filled `bytearray` of `nmemb * size` bytes.
- `memchr(buf, c, n)`: index of the first byte equal to the low byte of `c`
  within the first `n` bytes, or `None`.
- `memcmp(s1, s2, n)`: difference of the first unequal byte pair, or `0`.
- `memcpy(dst, src, n)` / `memmove(dst, src, n)`: copy `n` bytes to the start
  of `dst` and return `dst`; both are safe when the buffers overlap. Passing
  `None` for both returns `None`; `None` for only one raises `TypeError`.
- `memset(buf, c, n)`: fill the first `n` bytes with the low byte of `c` and
  return `buf`.

A negative count raises `ValueError`; a count beyond a buffer's length raises
`IndexError`.

### `libft.convert`

- `atoi(text)`: skips leading ASCII whitespace, reads one optional sign and
  the digits that follow, and stops at the first non-digit. Text without
  digits gives `0`; values beyond the 32-bit signed range wrap around.
- `itoa(n)`: decimal text of a 32-bit signed integer; values outside that
  range raise `OverflowError`, non-integers raise `TypeError`.

### `libft.strtools`

- `strlen(s)`, `strdup(s)`, `strjoin(s1, s2)`.
- `strlcpy(src, size)`: returns `(copied_text, len(src))`, copying at most
  `size - 1` characters.
- `strlcat(dst, src, size)`: returns `(result_text, attempted_length)`; the
  result fits a buffer of `size` characters including its terminator.
- `strchr(s, c)` / `strrchr(s, c)`: index of the first / last `c`, or `None`;
  searching for `"\0"` gives the end of the string.
- `strncmp(s1, s2, n)`: difference of the first unequal character codes within
  `n` characters, or `0`.
- `strnstr(big, little, n)`: index of `little` lying wholly within the first
  `n` characters of `big`, or `None`; an empty `little` gives `0`.
- `substr(s, start, length)`: at most `length` characters from `start`, or
  `""` when `start` is past the end.
- `strtrim(s, charset)`: `s` without leading and trailing characters from
  `charset`.
- `split(s, sep)`: words of `s` separated by the character `sep`, without
  empty words.
- `strmapi(s, f)`: new string of `f(index, char)` for each character.
- `striteri(chars, f)`: replaces each item of a mutable sequence in place with
  `f(index, char)` and returns it.

### `libft.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)`,
`putnbr_fd(n, fd)` write to an open file descriptor. Text is encoded as UTF-8,
`bytes` are written as they are, an integer character code writes its low
byte, and `putnbr_fd` writes the decimal form given by `itoa`.

## Examples

```python
from libft.convert import atoi, itoa
from libft.strtools import split, strtrim, strlcpy
from libft.chars import toupper

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
strlcpy("hello", 3)            # ("he", 5)
toupper("a")                   # "A"
toupper(ord("a"))              # 65
```

```python
from libft.memory import calloc, memset, memchr

buf = calloc(4, 2)         # bytearray of 8 zero bytes
memset(buf, ord("a"), 3)
memchr(buf, 0, len(buf))   # 3, the index of the first zero byte
```

```python
import sys
from libft.output import putendl_fd, putnbr_fd

putnbr_fd(-123, sys.stdout.fileno())
putendl_fd("", sys.stdout.fileno())
```

## What it does not do

The package is a library only: it installs no command-line program.