import pytest

from pushswap.parsing import (
    InputError,
    has_syntax_error,
    parse_arguments,
    parse_int,
    split_words,
)


def test_split_words_basic():
    assert split_words("3 2 1", " ") == ["3", "2", "1"]


def test_split_words_collapses_separators():
    assert split_words("  3   2 1  ", " ") == ["3", "2", "1"]


def test_split_words_empty_string():
    assert split_words("", " ") == []


def test_split_words_round_trip():
    words = ["10", "-4", "+7"]
    assert split_words(" ".join(words), " ") == words


def test_parse_int_plain():
    assert parse_int("12345") == 12345


def test_parse_int_skips_whitespace_and_sign():
    assert parse_int(" \t\n-42") == -42
    assert parse_int("+17") == 17


def test_parse_int_stops_at_non_digit():
    assert parse_int("+7abc") == 7


def test_parse_int_no_digits():
    assert parse_int("abc") == 0


@pytest.mark.parametrize("token", ["0", "42", "-42", "+42", "-2147483648"])
def test_valid_tokens_have_no_syntax_error(token):
    assert has_syntax_error(token) is False


@pytest.mark.parametrize("token", ["", "abc", "1a", "-", "+", "--1", "+-3", "4 2"])
def test_invalid_tokens_have_syntax_error(token):
    assert has_syntax_error(token) is True


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_arguments_accepts_int_limits():
    assert parse_arguments(["-2147483648", "2147483647"]) == [-(2**31), 2**31 - 1]


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_arguments_rejects_out_of_range(token):
    with pytest.raises(InputError):
        parse_arguments(["1", token])


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1", "2", "1"])


def test_parse_arguments_rejects_duplicates_with_sign():
    with pytest.raises(InputError):
        parse_arguments(["5", "+5"])


def test_parse_arguments_rejects_syntax():
    with pytest.raises(InputError):
        parse_arguments(["1", "two", "3"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])


def test_parse_arguments_empty():
    assert parse_arguments([]) == []