"""Whole-string transforms that return new strings."""

from __future__ import annotations

_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _cstr(text: str) -> str:
    if text is None:
        raise TypeError("expected a string, got None")
    return text.partition("\0")[0]


def to_upper(text: str) -> str:
    """Copy of ``text`` with ASCII letters upper-cased."""
    return _cstr(text).translate(_UPPER)


def to_lower(text: str) -> str:
    """Copy of ``text`` with ASCII letters lower-cased."""
    return _cstr(text).translate(_LOWER)


def insert(src: str, text: str, start_index: int) -> str:
    """Insert ``text`` into ``src`` before position ``start_index``.

    An index past the end raises ValueError; an index equal to the length of
    ``src`` leaves it unchanged, since insertion happens only before a character.
    """
    source = _cstr(src)
    addition = _cstr(text)
    if start_index < 0 or start_index > len(source):
        raise ValueError(
            f"start index {start_index} is outside a string of length {len(source)}"
        )
    if start_index == len(source):
        return source
    return source[:start_index] + addition + source[start_index:]