"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from pushswap.libft.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _text(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character (a one-character string or a byte code) to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write the text of ``s``, up to any NUL, to ``fd``."""
    _write_all(fd, _text(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    _write_all(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))