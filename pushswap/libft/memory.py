"""Byte-buffer helpers working on bytes-like objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _byte(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    return c & 0xFF


def _view(buf) -> memoryview:
    return memoryview(buf).cast("B")


def _check_count(n: int, *buffers: memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for view in buffers:
        if n > len(view):
            raise ValueError(f"byte count {n} exceeds buffer of {len(view)} bytes")


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb`` items of ``size`` bytes.

    Raises OverflowError when the total does not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("item count and size must not be negative")
    if nmemb and size and size > SIZE_MAX // nmemb:
        raise OverflowError(f"{nmemb} * {size} bytes overflows the size range")
    return bytearray(nmemb * size)


def memchr(data, c: int | str, n: int) -> int | None:
    """Offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    view = _view(data)
    _check_count(n, view)
    pos = bytes(view[:n]).find(_byte(c))
    return None if pos < 0 else pos


def memcmp(s1, s2, n: int) -> int:
    """Difference of the first differing bytes within ``n``; 0 when equal."""
    first, second = _view(s1), _view(s2)
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    if dest is None and src is None:
        return None
    return memmove(dest, src, n)


def memmove(dest, src, n: int):
    """Copy ``n`` bytes of ``src`` to ``dest``, correct when they overlap."""
    target, source = _view(dest), _view(src)
    _check_count(n, target, source)
    target[:n] = bytes(source[:n])
    return dest


def memset(buf, c: int | str, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c``; return ``buf``."""
    view = _view(buf)
    _check_count(n, view)
    view[:n] = bytes([_byte(c)]) * n
    return buf