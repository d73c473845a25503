"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFF_FFFF
_ULONG_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _cstr(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def format_unsigned(n: int, digits: str) -> str:
    """Write the non-negative ``n`` in the base given by the digit string."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    out: list[str] = []
    while True:
        n, remainder = divmod(n, base)
        out.append(digits[remainder])
        if n == 0:
            break
    return "".join(reversed(out))


def format_signed(n: int, digits: str) -> str:
    """Write ``n`` in the base given by the digit string, with a leading '-' if negative."""
    n = operator.index(n)
    if n < 0:
        return "-" + format_unsigned(-n, digits)
    return format_unsigned(n, digits)


def format_pointer(address: int | None) -> str:
    """Hexadecimal form of an address with a 0x prefix; (nil) for a null one."""
    if address is None or address == 0:
        return "(nil)"
    return "0x" + format_unsigned(operator.index(address) & _ULONG_MASK, HEX_LOWER)


def _to_int32(value: Any) -> int:
    n = operator.index(value) & _UINT_MASK
    return n - (1 << 32) if n >= 1 << 31 else n


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    return _cstr(str(value))


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda v: format_signed(_to_int32(v), DECIMAL),
    "i": lambda v: format_signed(_to_int32(v), DECIMAL),
    "u": lambda v: format_unsigned(_to_uint32(v), DECIMAL),
    "x": lambda v: format_unsigned(_to_uint32(v), HEX_LOWER),
    "X": lambda v: format_unsigned(_to_uint32(v), HEX_UPPER),
    "p": format_pointer,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def render(fmt: str, *args: Any) -> str:
    """The text ``printf`` would write for ``fmt`` and ``args``.

    An unknown conversion is dropped without consuming an argument, and a
    lone '%' at the end of the format is ignored.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(_cstr(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(values, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write the formatted text to ``out`` (standard output by default).

    Returns the number of characters written, or -1 if writing failed.
    """
    text = render(fmt, *args)
    stream = out if out is not None else sys.stdout
    try:
        stream.write(text)
    except OSError:
        return -1
    return len(text)