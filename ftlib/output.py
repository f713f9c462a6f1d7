"""Writing characters, strings and numbers to text streams, and printf-style formatting.

The formatter understands the conversions ``%c``, ``%s``, ``%p``, ``%d``, ``%i``,
``%u``, ``%x`` and ``%X``. Any other character after ``%`` is written as it is,
so ``%%`` gives a single ``%``.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from ftlib.strings import itoa

CharLike = Union[int, str]

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_TEXT = "(null)"
NULL_POINTER = "0x0"

_UINT_MASK = 0xFFFFFFFF


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    """Turn ``c`` into one character; ints are truncated to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _text(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.partition("\0")[0]


def _unsigned(value: Any) -> int:
    """Reinterpret an integer as a 32-bit unsigned value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value & _UINT_MASK


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _stream(stream).write(_char(c))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``."""
    _stream(stream).write(_text(text))


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    _stream(stream).write(_text(text) + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer to ``stream``."""
    _stream(stream).write(itoa(n))


def count_hex(number: int) -> int:
    """Number of hexadecimal digits in ``number``; zero has none."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    length = 0
    while number > 0:
        number //= 16
        length += 1
    return length


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative ``number``, without prefix."""
    length = count_hex(number)
    if length == 0:
        return "0"
    digits = HEX_UPPER if upper else HEX_LOWER
    out = []
    while number > 0:
        number, rest = divmod(number, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def format_pointer(number: Optional[int]) -> str:
    """Address-style rendering: ``0x`` and lower-case hex digits; zero or None gives ``0x0``."""
    if number is None or number == 0:
        return NULL_POINTER
    return "0x" + format_hex(number)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec not in "cspdiuxX":
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return NULL_TEXT if value is None else _text(value)
    if spec == "p":
        if value is None or isinstance(value, int) and not isinstance(value, bool):
            return format_pointer(value)
        return format_pointer(id(value))
    if spec in "di":
        return itoa(value)
    if spec == "u":
        return str(_unsigned(value))
    return format_hex(_unsigned(value), upper=spec == "X")


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    A None format gives an empty string. A ``%`` with nothing after it is an error.
    """
    if fmt is None:
        return ""
    pieces = []
    arguments = iter(args)
    chars = iter(_text(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` and return the number of characters written."""
    text = sprintf(fmt, *args)
    if text:
        _stream(stream).write(text)
    return len(text)