"""String helpers with C-string semantics: text ends at the first NUL."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

from pushswap.parsing import split_words

_NUL = "\0"


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c % 256)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the character ``c``, dropping empty words."""
    return split_words(_cstr(s), _char(c))


def strchr(s: str, c: int | str) -> str | None:
    """The rest of ``s`` from the first ``c``; NUL finds the empty end."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return ""
    pos = text.find(ch)
    return None if pos < 0 else text[pos:]


def strrchr(s: str, c: int | str) -> str | None:
    """The rest of ``s`` from the last ``c``; NUL finds the empty end."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return ""
    pos = text.rfind(ch)
    return None if pos < 0 else text[pos:]


def strdup(s: str) -> str:
    """A copy of the text of ``s``."""
    return _cstr(s)


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], str | None]
) -> None:
    """Call ``f(index, char)`` for each character, storing any replacement it returns."""
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(s1: str, s2: str) -> str:
    """The text of ``s1`` followed by the text of ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    """
    _check_size("size", size)
    head = _cstr(dest)
    tail = _cstr(src)
    dest_len = min(len(head), size)
    if size <= dest_len:
        return head, size + len(tail)
    room = size - 1 - dest_len
    return head + tail[:room], dest_len + len(tail)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters holding ``dst``.

    Returns the buffer's text and the length of ``src``. With a size of
    zero nothing is copied and ``dst`` is left as it was.
    """
    _check_size("size", size)
    text = _cstr(src)
    if size == 0:
        return _cstr(dst), len(text)
    return text[: size - 1], len(text)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of ``f(index, char)`` for each character of ``s``."""
    return _cstr("".join(f(index, ch) for index, ch in enumerate(_cstr(s))))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign gives the order."""
    _check_size("n", n)
    pairs = zip_longest(_cstr(s1)[:n], _cstr(s2)[:n], fillvalue=_NUL)
    for first, second in pairs:
        if first != second:
            return ord(first) - ord(second)
    return 0


def strnstr(big: str, little: str, length: int) -> str | None:
    """The rest of ``big`` from the first ``little`` lying within ``length`` characters."""
    _check_size("length", length)
    haystack = _cstr(big)
    needle = _cstr(little)
    if not needle:
        return haystack
    if len(needle) > length:
        return None
    pos = haystack.find(needle, 0, min(len(haystack), length))
    return None if pos < 0 else haystack[pos:]


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    text = _cstr(s)
    chars = _cstr(charset)
    if not chars:
        return text
    return text.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]