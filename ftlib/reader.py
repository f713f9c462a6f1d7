"""Reading a stream one line at a time through a fixed-size read buffer.

Data is read in chunks of ``buffer_size`` until a newline turns up or the
source runs dry. Every line returned ends in a newline: a final line that had
none gets one. A chunk is cut at its first NUL, so whatever follows a NUL in
that chunk is dropped.
"""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Tuple, Union

BUFFER_SIZE = 42

Line = Union[bytes, str]


def _holds_newline(pending: Optional[Line]) -> bool:
    """Tell whether ``pending`` already contains a complete line."""
    if pending is None:
        return False
    if isinstance(pending, bytes):
        return b"\n" in pending
    return "\n" in pending


def _cut_line(pending: Line) -> Tuple[Line, Optional[Line]]:
    """Split off the first line, newline appended, and return it with the rest."""
    newline = b"\n" if isinstance(pending, bytes) else "\n"
    head, found, tail = pending.partition(newline)
    return head + newline, (tail if found else None)


def _terminated(chunk: Line) -> Line:
    """Return ``chunk`` up to its first NUL."""
    nul = b"\0" if isinstance(chunk, bytes) else "\0"
    return chunk.partition(nul)[0]


def _check_buffer_size(buffer_size: int) -> None:
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


def _check_source(source: Any) -> None:
    if isinstance(source, int) and not isinstance(source, bool) and source < 0:
        raise ValueError(f"file descriptor must not be negative, got {source}")


class LineReader:
    """Hand out the lines of ``source`` one by one.

    ``source`` is a file descriptor or any object with a ``read(size)`` method
    returning bytes or str. Lines come back in the same type.
    """

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        _check_source(source)
        self.source = source
        self.buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def _read_chunk(self) -> Line:
        if isinstance(self.source, int) and not isinstance(self.source, bool):
            return os.read(self.source, self.buffer_size)
        chunk = self.source.read(self.buffer_size)
        if isinstance(chunk, bytearray):
            chunk = bytes(chunk)
        return chunk

    def read_line(self) -> Optional[Line]:
        """Return the next line, newline included, or None once the source is exhausted.

        A read error is raised after the data held back so far is discarded.
        """
        pending = self._pending
        self._pending = None
        while not _holds_newline(pending):
            chunk = self._read_chunk()
            if not chunk:
                break
            chunk = _terminated(chunk)
            pending = chunk if pending is None else pending + chunk
        if not pending:
            return None
        line, self._pending = _cut_line(pending)
        return line

    def __iter__(self) -> Iterator[Line]:
        return iter(self.read_line, None)


_SHARED = LineReader(None)


def get_next_line(source: Any, buffer_size: int = BUFFER_SIZE) -> Optional[Line]:
    """Return the next line of ``source``, keeping unread data between calls.

    The held-back data is shared by all calls whatever the source. A negative
    file descriptor or a buffer size below 1 discards it and raises ValueError.
    """
    try:
        _check_source(source)
        _check_buffer_size(buffer_size)
    except (TypeError, ValueError):
        _SHARED._pending = None
        raise
    _SHARED.source = source
    _SHARED.buffer_size = buffer_size
    return _SHARED.read_line()