import pytest

from ftlib.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("A"), 4)
    assert result is buf
    assert buf == bytearray(b"AAAAef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_memset_rejects_negative_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"xyz!")
    bzero(buf, 3)
    assert buf == bytearray(b"\x00\x00\x00!")


def test_calloc_is_zeroed_with_product_size():
    buf = calloc(5, 4)
    assert len(buf) == 5 * 4
    assert all(b == 0 for b in buf)


def test_calloc_zero_count():
    assert calloc(0, 8) == bytearray()


def test_calloc_size_max_fails():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 1)
    with pytest.raises(MemoryError):
        calloc(1, SIZE_MAX)


def test_calloc_negative_fails():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_finds_first():
    data = bytes(range(10)) + bytes(range(10))
    assert memchr(data, 2, len(data)) == data.index(2)


def test_memchr_respects_length():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("o"), 5) == data.index(b"o")


def test_memchr_value_modulo_byte():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x101, 3) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"Hola", b"Holb", 3) == 0


def test_memcmp_returns_difference():
    assert memcmp(b"Hola", b"Holb", 4) == ord("a") - ord("b")
    assert memcmp(b"Holb", b"Hola", 4) == ord("b") - ord("a")


def test_memcmp_nonpositive_length():
    assert memcmp(b"a", b"b", 0) == 0
    assert memcmp(b"a", b"b", -3) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcpy_copies():
    dst = bytearray(5)
    result = memcpy(dst, b"Hola", 4)
    assert result is dst
    assert dst[:4] == b"Hola"
    assert dst[4] == 0


def test_memcpy_same_object_unchanged():
    buf = bytearray(b"abc")
    assert memcpy(buf, buf, 3) == bytearray(b"abc")


def test_memcpy_zero_length():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == bytearray(b"keep")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_matches_slice_copy():
    original = bytes(range(20))
    for dst in range(0, 10):
        for src in range(0, 10):
            buf = bytearray(original)
            memmove(buf, dst, src, 10)
            assert buf[dst:dst + 10] == original[src:src + 10]


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)