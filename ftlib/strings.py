"""String inspection, comparison, search and bounded copying with C-string semantics.

Text arguments are treated as NUL-terminated: anything after the first ``"\\0"``
is ignored. Functions that report a position return an index into the text, or
None when there is nothing to find.
"""

from __future__ import annotations

import re
from itertools import islice
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\r\f\v"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def _cstr(text: str) -> str:
    """Return ``text`` up to, not including, its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.partition("\0")[0]


def _char(c: CharLike) -> str:
    """Turn ``c`` into a single character; ints are truncated to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    match = _NUMBER.match(_cstr(text).lstrip(_WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strlen(text: Optional[str]) -> int:
    """Length of ``text`` up to its first NUL; None counts as empty."""
    if text is None:
        return 0
    return len(_cstr(text))


def strchr(text: Optional[str], c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    None text, or a character that is absent, gives None.
    """
    if text is None:
        return None
    s = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; NUL finds the terminator."""
    s = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    pairs = zip(_cstr(first) + "\0", _cstr(second) + "\0")
    if limit is not None:
        pairs = islice(pairs, limit)
    for a, b in pairs:
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Difference of the character codes at the first mismatch, or 0 when equal."""
    return _compare(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_size(n)
    return _compare(first, second, n)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_size(length)
    hay = _cstr(haystack)
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = hay[:length].find(pattern)
    return None if index < 0 else index


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting destination string and the full length of ``src``.
    A size of 0 leaves ``dest`` untouched.
    """
    _check_size(size)
    source = _cstr(src)
    if size == 0:
        return dest, len(source)
    return source[: size - 1], len(source)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length it tried to create: the length
    of ``src`` plus the smaller of ``size`` and the length of ``dest``.
    """
    _check_size(size)
    target = _cstr(dest)
    source = _cstr(src)
    used = len(target)
    attempted = len(source) + (size if size <= used else used)
    room = max(0, size - used - 1)
    return target + source[:room], attempted