import io

import pytest

from ftlib.output import (
    HEX_LOWER,
    HEX_UPPER,
    count_hex,
    format_hex,
    format_pointer,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
    sprintf,
)


def test_put_char_accepts_str_and_int():
    buf = io.StringIO()
    put_char("d", buf)
    put_char(ord("z"), buf)
    assert buf.getvalue() == "dz"


def test_put_char_rejects_long_string():
    with pytest.raises(TypeError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("Determination", buf)
    assert buf.getvalue() == "Determination"


def test_put_str_stops_at_nul():
    buf = io.StringIO()
    put_str("Deter\0mination", buf)
    assert buf.getvalue() == "Deter"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Determination", buf)
    assert buf.getvalue() == "Determination\n"


@pytest.mark.parametrize("n", [0, -125, 42, 2147483647])
def test_put_nbr_matches_decimal(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == str(n)


def test_put_nbr_minimum_int():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_put_str_defaults_to_stdout(capsys):
    put_str("abc")
    assert capsys.readouterr().out == "abc"


def test_count_hex_zero_and_length_invariant():
    assert count_hex(0) == 0
    for n in (1, 15, 16, 255, 4096, 123456789):
        assert count_hex(n) == len(format_hex(n))


def test_count_hex_negative():
    with pytest.raises(ValueError):
        count_hex(-1)


def test_format_hex_round_trip():
    for n in (0, 1, 10, 255, 65535, 3735928559):
        assert int(format_hex(n), 16) == n
        assert int(format_hex(n, upper=True), 16) == n


def test_format_hex_digit_sets():
    assert format_hex(15) == HEX_LOWER[15]
    assert format_hex(15, upper=True) == HEX_UPPER[15]
    assert set(format_hex(2**40 - 1)) <= set(HEX_LOWER)
    assert set(format_hex(2**40 - 1, upper=True)) <= set(HEX_UPPER)


def test_format_pointer():
    assert format_pointer(0) == "0x0"
    assert format_pointer(None) == "0x0"
    assert format_pointer(255) == "0x" + format_hex(255)


def test_sprintf_plain_text_and_percent():
    assert sprintf("hello") == "hello"
    assert sprintf("%%") == "%"
    assert sprintf("%q") == "q"


def test_sprintf_none_format():
    assert sprintf(None) == ""


def test_sprintf_string_and_null():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_sprintf_char():
    assert sprintf("%c%c", "a", ord("b")) == "ab"


def test_sprintf_signed_matches_decimal():
    for n in (0, 132, -92, 2147483647):
        assert sprintf("%d", n) == str(n)
        assert sprintf("%i", n) == str(n)
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_sprintf_unsigned_wraps_negative():
    assert int(sprintf("%u", -1)) == 2**32 - 1
    assert sprintf("%u", 7) == "7"


def test_sprintf_hex():
    for n in (0, 255, 4096):
        assert int(sprintf("%x", n), 16) == n
        assert sprintf("%X", n) == format_hex(n, upper=True)
    assert int(sprintf("%x", -1), 16) == 2**32 - 1


def test_sprintf_pointer():
    assert sprintf("%p", 0) == "0x0"
    assert sprintf("%p", 4096) == format_pointer(4096)


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_sprintf_trailing_percent():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_printf_returns_length_and_writes():
    buf = io.StringIO()
    count = printf("%s=%d", "x", -5, stream=buf)
    assert buf.getvalue() == "x=-5"
    assert count == len(buf.getvalue())


def test_printf_none_format_writes_nothing():
    buf = io.StringIO()
    assert printf(None, stream=buf) == 0
    assert buf.getvalue() == ""


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "abc")
    assert capsys.readouterr().out == "abc"
    assert count == 3