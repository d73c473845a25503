import io

import pytest

from pushswap.libft.printf import (
    DECIMAL,
    HEX_LOWER,
    HEX_UPPER,
    format_pointer,
    format_signed,
    format_unsigned,
    printf,
    render,
)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 424242, 2**32 - 1])
def test_format_unsigned_hex_round_trip(n):
    assert int(format_unsigned(n, HEX_LOWER), 16) == n


@pytest.mark.parametrize("n", [0, 7, 134242, 2**31 - 1])
def test_format_unsigned_decimal_round_trip(n):
    assert format_unsigned(n, DECIMAL) == str(n)


def test_format_unsigned_upper_matches_lower():
    assert format_unsigned(424242, HEX_UPPER) == format_unsigned(424242, HEX_LOWER).upper()


def test_format_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        format_unsigned(-1, DECIMAL)


def test_format_unsigned_rejects_tiny_base():
    with pytest.raises(ValueError):
        format_unsigned(5, "0")


@pytest.mark.parametrize("n", [-134242, -1, 0, 134242])
def test_format_signed_decimal(n):
    assert format_signed(n, DECIMAL) == str(n)


def test_format_signed_negative_hex_round_trip():
    assert int(format_signed(-424242, HEX_LOWER), 16) == -424242


@pytest.mark.parametrize("address", [None, 0])
def test_format_pointer_null(address):
    assert format_pointer(address) == "(nil)"


def test_format_pointer_round_trip():
    text = format_pointer(424242)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 424242


def test_render_examples():
    assert render("%c\n", "h") == "h\n"
    assert render("hola %s\n", "como estas") == "hola como estas\n"
    assert render("num: %d\n", 134242) == "num: 134242\n"
    assert render("numi: %i\n", 134242) == "numi: 134242\n"
    assert render("numu: %u\n", 134242) == "numu: 134242\n"


def test_render_hex_round_trip():
    assert int(render("%x", 424242), 16) == 424242
    assert render("%X", 424242) == render("%x", 424242).upper()


def test_render_null_string():
    assert render("%s", None) == "(null)"


def test_render_null_pointers():
    assert render("point: %p %p\n", 0, 0) == "point: (nil) (nil)\n"


def test_render_percent_and_trailing_percent():
    assert render("%%%%%") == "%%"


def test_render_unknown_conversion_consumes_no_argument():
    assert render("a%qb%d", 5) == "ab5"


def test_render_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1


def test_render_signed_wraps_to_32_bits():
    assert int(render("%d", 2**31)) == -(2**31)


def test_render_char_from_code():
    assert render("%c", ord("z")) == "z"


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_render_stops_at_nul():
    assert render("ab\0cd") == "ab"


def test_printf_writes_and_counts():
    buffer = io.StringIO()
    count = printf("num: %d\n", 134242, out=buffer)
    assert buffer.getvalue() == "num: 134242\n"
    assert count == len(buffer.getvalue())


class _BrokenStream:
    def write(self, text):
        raise OSError("closed")


def test_printf_reports_write_failure():
    assert printf("x", out=_BrokenStream()) == -1