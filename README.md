# ftlib

A small library of low-level utilities: ASCII character tests, operations on
`bytearray` buffers, string routines that treat text as NUL-terminated, a
singly linked list, printf-style output and a line reader that works through
a fixed-size read buffer.

It is a library only; it installs no command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `ftlib.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`,
`to_lower`, `to_upper`. Each takes an int code or a one-character string;
the case functions return the same kind they were given and leave anything
outside the ASCII letters unchanged.

### `ftlib.memory`

Operations on byte buffers: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
`memcpy` and `memmove(buf, dst_offset, src_offset, length)`, which moves bytes
inside one buffer and allows the ranges to overlap. `memchr` returns an index
or `None`. Ranges that run past the end of a buffer, and negative lengths,
raise `ValueError`.

### `ftlib.strings`

`atoi`, `itoa`, `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
`strnstr`, `strlcpy`, `strlcat`. Anything after the first `"\0"` in an
argument is ignored. Search functions return an index or `None`.
`itoa` accepts only 32-bit signed integers and raises `OverflowError`
otherwise. Since Python strings are immutable, `strlcpy` and `strlcat` return
a pair: the resulting destination string and the length they tried to create.

### `ftlib.transform`

`substr`, `strtrim`, `strjoin`, `split`, `strmapi` and `striteri`.
`split` drops the empty pieces left by runs of separators. `striteri` calls
`func(index, sequence)` on a mutable list of characters or a `bytearray`,
stopping at its end or at the first NUL.

### `ftlib.lists`

`Node` (a `value` and a `next` link) and `LinkedList`, which holds values of
any type. A `LinkedList` can be built from an iterable and supports `len()`,
iteration and truth testing, plus `add_front`, `add_back`, `clear(delete)`,
`remove_first(delete)`, `iterate(func)`, `last`, `penultimate`,
`map(func, delete)` and `values`. If `func` raises during `map`, the values
already produced are passed to `delete` and the error propagates.

### `ftlib.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream
(standard output by default). `count_hex`, `format_hex` and `format_pointer`
render hexadecimal. `sprintf(fmt, *args)` returns formatted text and
`printf(fmt, *args, stream=None)` writes it and returns the number of
characters written. The conversions are `%c %s %p %d %i %u %x %X`; any other
character after `%` is written as it is, so `%%` gives `%`. A `None` string
argument prints `(null)`; `%u`, `%x` and `%X` treat their argument as a
32-bit unsigned value.

### `ftlib.reader`

`LineReader(source, buffer_size=42)` reads from a file descriptor or any
object with a `read(size)` method returning bytes or str. `read_line()`
returns the next line, always ending in a newline, or `None` when the source
is exhausted; iterating a `LineReader` yields its lines.
`get_next_line(source, buffer_size=42)` does the same through one reader
shared by every call, whatever the source; a negative file descriptor or a
buffer size below 1 discards the held-back data and raises `ValueError`.

## Example

```python
from ftlib.strings import atoi, itoa
from ftlib.transform import split
from ftlib.output import sprintf

atoi("   -92abc")               # -92
itoa(-2147483648)               # "-2147483648"
split("Im.possible", ".")       # ["Im", "possible"]
sprintf("%s is %x", "n", 255)   # "n is ff"
```

Reading lines:

```python
import io
from ftlib.reader import LineReader

reader = LineReader(io.StringIO("one\ntwo"))
reader.read_line()   # "one\n"
reader.read_line()   # "two\n"
reader.read_line()   # None
```