"""A scanf-style reader following the C conversion rules.

Supported conversions: ``c d i u o x X p e E f g G s n %`` with an optional
``*`` to suppress assignment, a maximum field width and the length modifiers
``hh``, ``h``, ``l``, ``ll`` and ``L``. Integers are saturated and wrapped to
the C type the length modifier selects. Floats without ``l``/``L`` are
rounded to single precision.
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Pattern, Tuple

_SPACE = " \f\n\r\t\v"

_DIRECTIVE = re.compile(
    r"%(?P<star1>\**)(?P<width>\d*)(?P<star2>\**)"
    r"(?P<length>hh|h|ll|l|L)?(?P<conversion>.)?",
    re.DOTALL,
)

_DECIMAL = re.compile(r"[+-]?\d+")
_OCTAL = re.compile(r"[+-]?[0-7]+")
_HEX = re.compile(r"[+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+")
_AUTO = re.compile(r"[+-]?(?:0[xX](?=[0-9a-fA-F])[0-9a-fA-F]+|0[0-7]*|[1-9]\d*)")
_FLOAT = re.compile(
    r"[+-]?(?:nan|infinity|inf"
    r"|0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE,
)
_WORD = re.compile(r"[^ \f\n\r\t\v]+")

_BITS = {None: 32, "hh": 8, "h": 16, "l": 64, "ll": 64, "L": 64}
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_ULONG_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan.

    ``count`` is the number of assigned conversions, or -1 when the input ran
    out before anything was assigned. ``values`` holds what was read, in the
    order of the directives, including the positions stored by ``%n``.
    """

    count: int
    values: Tuple[Any, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]


class _Stop(Exception):
    """The input does not match the format; scanning ends."""


class _InputFailure(_Stop):
    """The input ended where a conversion needed characters."""


@dataclass
class _Directive:
    conversion: str
    suppress: bool
    width: Optional[int]
    length: Optional[str]


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_space(self) -> None:
        while not self.at_end and self.text[self.pos] in _SPACE:
            self.pos += 1

    def accept(self, ch: str) -> bool:
        if not self.at_end and self.text[self.pos] == ch:
            self.pos += 1
            return True
        return False

    def take(self, pattern: Pattern[str], width: Optional[int]) -> str:
        self.skip_space()
        if self.at_end:
            raise _InputFailure
        end = len(self.text) if width is None else self.pos + width
        match = pattern.match(self.text[self.pos:end])
        if match is None or not match.group():
            raise _Stop
        self.pos += match.end()
        return match.group()


def _wrap(number: int, bits: int, signed: bool) -> int:
    number &= (1 << bits) - 1
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def _to_single(number: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _auto_base(token: str) -> int:
    body = token.lstrip("+-").lower()
    if body.startswith("0x"):
        return 16
    if body.startswith("0") and len(body) > 1:
        return 8
    return 10


def _signed(cursor: _Cursor, spec: _Directive) -> int:
    if spec.conversion == "i":
        token = cursor.take(_AUTO, spec.width)
        number = int(token, _auto_base(token))
    else:
        number = int(cursor.take(_DECIMAL, spec.width), 10)
    number = min(max(number, _LONG_MIN), _LONG_MAX)
    return _wrap(number, _BITS[spec.length], signed=True)


_UNSIGNED_SYNTAX = {"u": (_DECIMAL, 10), "o": (_OCTAL, 8), "x": (_HEX, 16),
                    "X": (_HEX, 16), "p": (_HEX, 16)}


def _unsigned(cursor: _Cursor, spec: _Directive) -> int:
    pattern, base = _UNSIGNED_SYNTAX[spec.conversion]
    number = int(cursor.take(pattern, spec.width), base)
    if abs(number) > _ULONG_MAX:
        number = _ULONG_MAX
    bits = 64 if spec.conversion == "p" else _BITS[spec.length]
    return _wrap(number, bits, signed=False)


def _floating(cursor: _Cursor, spec: _Directive) -> float:
    token = cursor.take(_FLOAT, spec.width)
    if "x" in token.lower() and token.lower().lstrip("+-").startswith("0x"):
        number = float.fromhex(token)
    else:
        number = float(token)
    if spec.length in ("l", "ll", "L"):
        return number
    return _to_single(number)


def _char(cursor: _Cursor, spec: _Directive) -> str:
    if cursor.at_end:
        raise _InputFailure
    ch = cursor.text[cursor.pos]
    cursor.pos = min(cursor.pos + (spec.width or 1), len(cursor.text))
    return ch


def _string(cursor: _Cursor, spec: _Directive) -> str:
    return cursor.take(_WORD, spec.width)


_HANDLERS: Dict[str, Callable[[_Cursor, _Directive], Any]] = {
    "c": _char,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "o": _unsigned,
    "x": _unsigned,
    "X": _unsigned,
    "p": _unsigned,
    "e": _floating,
    "E": _floating,
    "f": _floating,
    "g": _floating,
    "G": _floating,
    "s": _string,
}


def _parse_directive(fmt: str, pos: int) -> Tuple[_Directive, int]:
    match = _DIRECTIVE.match(fmt, pos)
    conversion = match.group("conversion")
    if conversion is None:
        raise ValueError("incomplete conversion at the end of the format")
    if conversion not in _HANDLERS and conversion not in "n%":
        raise ValueError(f"unsupported conversion %{conversion}")
    width = int(match.group("width")) if match.group("width") else 0
    spec = _Directive(
        conversion=conversion,
        suppress=bool(match.group("star1") or match.group("star2")),
        width=width or None,
        length=match.group("length"),
    )
    return spec, match.end()


def sscanf(text: str, fmt: str) -> ScanResult:
    """Read values from ``text`` as described by the C-style format ``fmt``."""
    cursor = _Cursor(text)
    values = []
    count = 0
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch in _SPACE:
            while pos < len(fmt) and fmt[pos] in _SPACE:
                pos += 1
            cursor.skip_space()
            continue
        if ch != "%":
            if not cursor.accept(ch):
                break
            pos += 1
            continue
        spec, pos = _parse_directive(fmt, pos)
        if spec.conversion == "%":
            cursor.skip_space()
            if not cursor.accept("%"):
                break
            continue
        if spec.conversion == "n":
            if not spec.suppress:
                values.append(_wrap(cursor.pos, _BITS[spec.length], signed=True))
            continue
        try:
            value = _HANDLERS[spec.conversion](cursor, spec)
        except _InputFailure:
            if count == 0:
                count = -1
            break
        except _Stop:
            break
        if not spec.suppress:
            values.append(value)
            count += 1
    return ScanResult(count=count, values=tuple(values))