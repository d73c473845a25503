"""Reading the numbers for stack a from command-line tokens."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[ \n\t\r\v\f]*([+-]?)([0-9]*)")
_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the input numbers are malformed, out of range or repeated."""


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Read a leading integer, skipping whitespace and one optional sign.

    Reading stops at the first non-digit; with no digits the value is 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def has_syntax_error(token: str) -> bool:
    """True unless ``token`` is an optional sign followed by digits only."""
    return _WHOLE_NUMBER.fullmatch(token) is None


def parse_arguments(tokens: Iterable[str]) -> list[int]:
    """Turn tokens into the values of stack a, top first.

    Raises InputError for a malformed token, a value outside the 32-bit
    signed range, or a value that appears twice.
    """
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if has_syntax_error(token):
            raise InputError(f"not a number: {token!r}")
        value = parse_int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values