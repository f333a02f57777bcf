"""A printf-style formatter following the C conversion rules.

Supported conversions: ``c d i e E f g G o p s u x X n %`` with the flags
``- + space 0 #``, a width and a precision (either may be ``*``) and the length
modifiers ``h``, ``l`` and ``L``. Integers are wrapped to the width that the
length modifier selects, as a C ``int``/``short``/``long`` would be.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional

_DIRECTIVE = re.compile(
    r"%(?P<flags>[-+ 0#]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>[hlL])?"
    r"(?P<conversion>.)?",
    re.DOTALL,
)

_BITS = {"": 32, "h": 16, "l": 64, "L": 64}
_BASE_FORMAT = {8: "o", 10: "d", 16: "x"}


@dataclass
class Counter:
    """Receives the number of characters written so far for a ``%n`` conversion."""

    value: int = 0


@dataclass
class FormatSpec:
    """One parsed conversion directive."""

    conversion: str
    minus: bool = False
    plus: bool = False
    space: bool = False
    zero: bool = False
    sharp: bool = False
    width: int = 0
    precision: Optional[int] = None
    length: str = ""

    @classmethod
    def _from_match(cls, match: re.Match, arguments: Iterator[Any]) -> "FormatSpec":
        flags = match.group("flags")
        spec = cls(
            conversion=match.group("conversion"),
            minus="-" in flags,
            plus="+" in flags,
            space=" " in flags,
            zero="0" in flags,
            sharp="#" in flags,
            length=match.group("length") or "",
        )
        width = match.group("width")
        if width == "*":
            star = _as_int(_take(arguments))
            if star < 0:
                spec.minus = True
            spec.width = abs(star)
        elif width:
            spec.width = int(width)
        precision = match.group("precision")
        if precision == "*":
            star = _as_int(_take(arguments))
            spec.precision = star if star >= 0 else None
        elif precision is not None:
            spec.precision = int(precision) if precision else 0
        return spec


def _take(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"an integer is required, not {type(value).__name__}")
    return value


def _as_float(value: Any) -> float:
    if not isinstance(value, (int, float)):
        raise TypeError(f"a number is required, not {type(value).__name__}")
    return float(value)


def _wrap_unsigned(number: int, bits: int) -> int:
    return number & ((1 << bits) - 1)


def _wrap_signed(number: int, bits: int) -> int:
    number = _wrap_unsigned(number, bits)
    return number - (1 << bits) if number >= 1 << (bits - 1) else number


def _digits(number: int, base: int, precision: Optional[int]) -> str:
    if precision == 0 and number == 0:
        return ""
    return format(number, _BASE_FORMAT[base]).rjust(precision or 0, "0")


def _pad(spec: FormatSpec, sign: str, prefix: str, body: str, zero_ok: bool) -> str:
    fill = spec.width - len(sign) - len(prefix) - len(body)
    if fill <= 0:
        return sign + prefix + body
    if spec.minus:
        return sign + prefix + body + " " * fill
    if spec.zero and zero_ok:
        return sign + prefix + "0" * fill + body
    return " " * fill + sign + prefix + body


def _sign(spec: FormatSpec, negative: bool) -> str:
    if negative:
        return "-"
    if spec.plus:
        return "+"
    return " " if spec.space else ""


def _signed(spec: FormatSpec, value: Any) -> str:
    number = _wrap_signed(_as_int(value), _BITS[spec.length])
    body = _digits(abs(number), 10, spec.precision)
    return _pad(spec, _sign(spec, number < 0), "", body, spec.precision is None)


def _unsigned(spec: FormatSpec, value: Any) -> str:
    number = _wrap_unsigned(_as_int(value), _BITS[spec.length])
    return _pad(spec, "", "", _digits(number, 10, spec.precision), spec.precision is None)


def _octal(spec: FormatSpec, value: Any) -> str:
    number = _wrap_unsigned(_as_int(value), _BITS[spec.length])
    body = _digits(number, 8, spec.precision)
    if spec.sharp and not body.startswith("0"):
        body = "0" + body
    return _pad(spec, "", "", body, spec.precision is None)


def _hex(spec: FormatSpec, value: Any) -> str:
    number = _wrap_unsigned(_as_int(value), _BITS[spec.length])
    prefix = "0x" if spec.sharp and number else ""
    text = _pad(spec, "", prefix, _digits(number, 16, spec.precision), spec.precision is None)
    return text.upper() if spec.conversion == "X" else text


def _pointer(spec: FormatSpec, value: Any) -> str:
    number = 0 if value is None else _wrap_unsigned(_as_int(value), 64)
    return _pad(spec, "", "0x", _digits(number, 16, spec.precision), spec.precision is None)


def _char(spec: FormatSpec, value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        ch = value
    else:
        number = _as_int(value)
        ch = chr(number) if spec.length == "l" else chr(number & 0xFF)
    return _pad(spec, "", "", ch, spec.length != "l")


def _string(spec: FormatSpec, value: Any) -> str:
    if value is None:
        text = "(null)"
    elif isinstance(value, str):
        text = value.partition("\0")[0]
    else:
        raise TypeError(f"%s requires a string, not {type(value).__name__}")
    if spec.precision is not None:
        text = text[: spec.precision]
    return _pad(spec, "", "", text, value is not None and spec.length != "l")


def _floating(spec: FormatSpec, value: Any) -> str:
    number = _as_float(value)
    negative = math.copysign(1.0, number) < 0
    if math.isinf(number) or math.isnan(number):
        body = "inf" if math.isinf(number) else "nan"
        if spec.conversion in "EG":
            body = body.upper()
        return _pad(spec, _sign(spec, negative), "", body, False)
    precision = 6 if spec.precision is None else spec.precision
    alternate = "#" if spec.sharp else ""
    body = format(abs(number), f"{alternate}.{precision}{spec.conversion}")
    return _pad(spec, _sign(spec, negative), "", body, True)


_CONVERTERS: Dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": _char,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "o": _octal,
    "x": _hex,
    "X": _hex,
    "p": _pointer,
    "s": _string,
    "f": _floating,
    "e": _floating,
    "E": _floating,
    "g": _floating,
    "G": _floating,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the C-style format string ``fmt``.

    A ``%n`` conversion takes a :class:`Counter` and stores the number of
    characters produced so far in it. Surplus arguments are ignored.
    """
    arguments = iter(args)
    pieces = []
    position = 0
    while True:
        start = fmt.find("%", position)
        if start < 0:
            pieces.append(fmt[position:])
            break
        pieces.append(fmt[position:start])
        match = _DIRECTIVE.match(fmt, start)
        if match.group("conversion") is None:
            raise ValueError("incomplete conversion at the end of the format")
        spec = FormatSpec._from_match(match, arguments)
        if spec.conversion == "%":
            pieces.append("%")
        elif spec.conversion == "n":
            counter = _take(arguments)
            if not isinstance(counter, Counter):
                raise TypeError("%n requires a Counter")
            counter.value = sum(map(len, pieces))
        else:
            converter = _CONVERTERS.get(spec.conversion)
            if converter is None:
                raise ValueError(f"unsupported conversion %{spec.conversion}")
            pieces.append(converter(spec, _take(arguments)))
        position = match.end()
    return "".join(pieces)