import string

import pytest

from pushswap.libft.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)

ALL_ASCII = [chr(code) for code in range(128)]


def test_isalpha_matches_ascii_letters():
    assert [c for c in ALL_ASCII if isalpha(c)] == sorted(string.ascii_letters)


def test_isdigit_matches_digits():
    assert [c for c in ALL_ASCII if isdigit(c)] == list(string.digits)


def test_isalnum_is_union():
    for c in ALL_ASCII:
        assert isalnum(c) == (isalpha(c) or isdigit(c))


def test_isascii_bounds():
    assert isascii(0) and isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(" ") and isprint("~")
    assert not isprint(31)
    assert not isprint(127)


def test_accepts_codes_and_chars_alike():
    for code in range(128):
        assert isalpha(code) == isalpha(chr(code))
        assert isprint(code) == isprint(chr(code))


def test_case_conversion_round_trip():
    assert "".join(tolower(c) for c in string.ascii_uppercase) == string.ascii_lowercase
    assert "".join(toupper(c) for c in string.ascii_lowercase) == string.ascii_uppercase


def test_case_conversion_leaves_others():
    for c in string.digits + string.punctuation + " ":
        assert tolower(c) == c
        assert toupper(c) == c


def test_case_conversion_on_codes():
    assert tolower(ord("Q")) == ord("q")
    assert toupper(ord("q")) == ord("Q")


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


@pytest.mark.parametrize("n", [0, 7, -7, 123653, -123653, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_pinned():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)