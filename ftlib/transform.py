"""Building new strings from existing ones: slicing, trimming, joining, splitting and mapping.

Text arguments follow C-string rules: anything after the first ``"\\0"`` is ignored.
"""

from __future__ import annotations

from itertools import count
from typing import Callable, List, MutableSequence, Union

CharLike = Union[int, str]


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.partition("\0")[0]


def _separator(sep: CharLike) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise TypeError(f"expected a single character, got {sep!r}")
        return sep
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"expected an int or a single character, got {type(sep).__name__}")
    return chr(sep & 0xFF)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    s = _terminated(text)
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    s = _terminated(text)
    chars = _terminated(charset)
    if not chars:
        return s
    return s.strip(chars)


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _terminated(first) + _terminated(second)


def split(text: str, sep: CharLike) -> List[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces runs of separators leave."""
    s = _terminated(text)
    ch = _separator(sep)
    if ch == "\0":
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character of ``text``."""
    s = _terminated(text)
    mapped = []
    for index, ch in enumerate(s):
        result = func(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise TypeError(f"mapping function must return a single character, got {result!r}")
        mapped.append(result)
    return "".join(mapped)


def _is_terminator(item) -> bool:
    return item == "\0" or item == 0


def striteri(text: MutableSequence, func: Callable[[int, MutableSequence], None]) -> None:
    """Call ``func(index, text)`` for each position of a mutable character sequence.

    ``text`` is a list of characters or a bytearray that ``func`` may change in place.
    Iteration stops at the end of the sequence or at the first NUL, which is checked
    afresh before every call.
    """
    if isinstance(text, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a list or bytearray")
    for index in count():
        if index >= len(text) or _is_terminator(text[index]):
            break
        func(index, text)