"""Byte-buffer primitives working on a bounded window of ``n`` bytes."""

from __future__ import annotations

from typing import Optional


def _window(buffer, n: int) -> memoryview:
    """Return a flat byte view of the first ``n`` bytes of ``buffer``."""
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if n < 0 or n > len(view):
        raise ValueError(f"byte count {n} is outside a buffer of {len(view)} bytes")
    return view[:n]


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    index = _window(data, n).tobytes().find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(first, second, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    left = _window(first, n).tobytes()
    right = _window(second, n).tobytes()
    for a, b in zip(left, right):
        if a != b:
            return a - b
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into the writable buffer ``dest`` and return it."""
    target = _window(dest, n)
    target[:] = _window(src, n)
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``, safe for overlapping buffers."""
    staged = _window(src, n).tobytes()
    _window(dest, n)[:] = staged
    return dest


def memset(dest, c: int, n: int):
    """Fill the first ``n`` bytes of ``dest`` with the byte ``c`` and return it."""
    _window(dest, n)[:] = bytes([c & 0xFF]) * n
    return dest