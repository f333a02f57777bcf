"""NUL-terminated string operations on Python ``str`` buffers.

A buffer may contain ``"\\0"``; its string value is everything before the first
one. Functions that write return the new buffer instead of changing the old.
"""

from __future__ import annotations

from itertools import islice, takewhile
from typing import Iterator, Optional, Union

Char = Union[str, int]


def _cstr(text: str) -> str:
    return text.partition("\0")[0]


def _char(c: Char) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _write(buffer: str, start: int, chars: str) -> str:
    """Overwrite ``buffer`` from ``start`` with ``chars`` and terminate if needed."""
    tail = buffer[start + len(chars):]
    if tail:
        return buffer[:start] + chars + "\0" + tail[1:]
    return buffer[:start] + chars


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"negative count {n}")


def strlen(text: str) -> int:
    """Length of the string up to the first NUL."""
    return len(_cstr(text))


def strcat(dest: str, src: str) -> str:
    """Append ``src`` to the string in ``dest``."""
    return _write(dest, strlen(dest), _cstr(src))


def strncat(dest: str, src: str, n: int) -> str:
    """Append at most ``n`` characters of ``src`` to the string in ``dest``."""
    _check_count(n)
    return _write(dest, strlen(dest), _cstr(src)[:n])


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in the string; NUL matches the terminator."""
    value = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(value)
    index = value.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in the string; NUL matches the terminator."""
    value = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(value)
    index = value.rfind(ch)
    return None if index < 0 else index


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    pairs = zip(_cstr(first) + "\0", _cstr(second) + "\0")
    if limit is not None:
        pairs = islice(pairs, limit)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Difference of the first unequal characters, or 0 when equal."""
    return _compare(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    _check_count(n)
    return _compare(first, second, n)


def strcpy(dest: str, src: str) -> str:
    """Write the string in ``src`` over the start of ``dest``."""
    return _write(dest, 0, _cstr(src))


def strncpy(dest: str, src: str, n: int) -> str:
    """Write exactly ``n`` characters of ``src`` over ``dest``, padding with NUL."""
    _check_count(n)
    return _cstr(src)[:n].ljust(n, "\0") + dest[n:]


def strcspn(text: str, reject: str) -> int:
    """Length of the leading run of characters not in ``reject``."""
    banned = set(_cstr(reject))
    return sum(1 for _ in takewhile(lambda ch: ch not in banned, _cstr(text)))


def strspn(text: str, accept: str) -> int:
    """Length of the leading run of characters all in ``accept``."""
    allowed = set(_cstr(accept))
    return sum(1 for _ in takewhile(lambda ch: ch in allowed, _cstr(text)))


def strpbrk(text: str, accept: str) -> Optional[int]:
    """Index of the first character of ``text`` found in ``accept``, or None."""
    allowed = set(_cstr(accept))
    return next((i for i, ch in enumerate(_cstr(text)) if ch in allowed), None)


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle matches at 0."""
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


class Tokenizer:
    """Splits a string into tokens; each call may use different delimiters."""

    def __init__(self, text: str) -> None:
        self._rest: Optional[str] = _cstr(text)

    def next_token(self, delim: str) -> Optional[str]:
        """Return the next token, or None once the string is used up."""
        if self._rest is None:
            return None
        delims = _cstr(delim)
        rest = self._rest[strspn(self._rest, delims):]
        if not rest:
            self._rest = None
            return None
        end = strcspn(rest, delims)
        self._rest = rest[end + 1:]
        return rest[:end]


def tokens(text: str, delim: str) -> Iterator[str]:
    """Yield every token of ``text`` split on the characters of ``delim``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delim)) is not None:
        yield token