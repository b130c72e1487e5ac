"""Range-checked numeric casts and C-style string parsing."""

from __future__ import annotations

import math
import re
import struct
import sys
from dataclasses import dataclass

from mariakit.types import ValueType

_FLT_MAX = (2.0 - 2.0**-23) * 2.0**127
_FLT_MIN = 2.0**-126
_U64_MAX = 2**64 - 1

_INT_LIMITS = {
    ValueType.BOOLEAN: (0, 1),
    ValueType.UNSIGNED8: (0, 2**8 - 1),
    ValueType.SIGNED8: (-(2**7), 2**7 - 1),
    ValueType.UNSIGNED16: (0, 2**16 - 1),
    ValueType.SIGNED16: (-(2**15), 2**15 - 1),
    ValueType.UNSIGNED32: (0, 2**32 - 1),
    ValueType.SIGNED32: (-(2**31), 2**31 - 1),
    ValueType.UNSIGNED64: (0, _U64_MAX),
    ValueType.SIGNED64: (-(2**63), 2**63 - 1),
}

_FLOAT_LIMITS = {
    ValueType.FLOAT32: (-_FLT_MAX, _FLT_MAX),
    ValueType.DOUBLE64: (-sys.float_info.max, sys.float_info.max),
}

# kinds parsed through a 32-bit signed integer before the range check
_INT32_PARSED = {
    ValueType.BOOLEAN,
    ValueType.UNSIGNED8,
    ValueType.SIGNED8,
    ValueType.UNSIGNED16,
    ValueType.SIGNED16,
    ValueType.SIGNED32,
}

_WS = r"[ \t\n\v\f\r]*"
_INT_RE = re.compile(_WS + r"([+-]?)([0-9]+)")
_FLOAT_RE = re.compile(
    _WS
    + r"(?P<num>[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN](?:\([0-9A-Za-z_]*\))?"
    r"))"
)


def _zero(kind: ValueType) -> bool | int | float:
    if kind is ValueType.BOOLEAN:
        return False
    if kind in _FLOAT_LIMITS:
        return 0.0
    return 0


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def checked_cast(value: int | float, kind: ValueType | int) -> bool | int | float:
    """Convert value to the numeric kind, or to that kind's zero if it does not fit."""
    kind = ValueType(kind)
    if kind in _INT_LIMITS:
        low, high = _INT_LIMITS[kind]
        if isinstance(value, float) and math.isnan(value):
            return _zero(kind)
    elif kind in _FLOAT_LIMITS:
        low, high = _FLOAT_LIMITS[kind]
    else:
        raise ValueError(f"not a numeric kind: {kind.name}")

    if value < low or value > high:
        return _zero(kind)
    if kind is ValueType.BOOLEAN:
        return bool(value)
    if kind is ValueType.FLOAT32:
        return _to_float32(float(value))
    if kind is ValueType.DOUBLE64:
        return float(value)
    return int(value)


def _parse_integer(text: str, low: int, high: int) -> tuple[int, int]:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    magnitude = int(match.group(2))
    value = -magnitude if match.group(1) == "-" else magnitude
    if not low <= value <= high:
        raise OverflowError(f"integer out of range: {text!r}")
    return value, match.end()


def _parse_unsigned(text: str) -> tuple[int, int]:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    magnitude = int(match.group(2))
    if magnitude > _U64_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    # a leading minus wraps around, as unsigned C parsing does
    value = (-magnitude if match.group(1) == "-" else magnitude) % (_U64_MAX + 1)
    return value, match.end()


def _has_nonzero_mantissa(number: str) -> bool:
    body = number.lstrip("+-")
    if body[:2].lower() == "0x":
        mantissa = re.split(r"[pP]", body[2:])[0]
    else:
        mantissa = re.split(r"[eE]", body)[0]
    return any(ch not in "0." for ch in mantissa)


def _parse_float(text: str, kind: ValueType) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid floating point number: {text!r}")
    number = match.group("num")
    lowered = number.lower()
    special = "inf" in lowered or "nan" in lowered
    if "x" in lowered:
        value = float.fromhex(number)
    elif "nan" in lowered:
        value = float(number.split("(")[0])
    else:
        value = float(number)

    out_of_range = False
    if not special:
        nonzero = _has_nonzero_mantissa(number)
        if math.isinf(value):
            out_of_range = True
        elif kind is ValueType.FLOAT32:
            try:
                narrowed = _to_float32(value)
            except OverflowError:
                out_of_range = True
            else:
                if math.isinf(narrowed) or (nonzero and abs(narrowed) < _FLT_MIN):
                    out_of_range = True
                value = narrowed
        elif nonzero and abs(value) < sys.float_info.min:
            out_of_range = True
    elif kind is ValueType.FLOAT32:
        value = _to_float32(value)

    if out_of_range:
        return math.nan
    if match.end() != len(text):
        return 0.0
    return value


def string_cast(text: str, kind: ValueType | int) -> bool | int | float:
    """Parse text as the numeric kind.

    Text with trailing characters yields the kind's zero; text without a
    leading number raises ValueError; integers too large for the parser raise
    OverflowError; floating point values out of range yield NaN.
    """
    kind = ValueType(kind)
    if kind in _FLOAT_LIMITS:
        return _parse_float(text, kind)
    if kind is ValueType.UNSIGNED32:
        value, end = _parse_unsigned(text)
        return checked_cast(value, kind) if end == len(text) else 0
    if kind is ValueType.UNSIGNED64:
        value, end = _parse_unsigned(text)
        return value if end == len(text) else 0
    if kind is ValueType.SIGNED64:
        low, high = _INT_LIMITS[ValueType.SIGNED64]
        value, end = _parse_integer(text, low, high)
        return value if end == len(text) else 0
    if kind in _INT32_PARSED:
        low, high = _INT_LIMITS[ValueType.SIGNED32]
        value, end = _parse_integer(text, low, high)
        if end != len(text):
            return _zero(kind)
        return checked_cast(value, kind)
    raise ValueError(f"not a numeric kind: {kind.name}")


@dataclass(frozen=True)
class Decimal:
    """A decimal number held as its exact textual form."""

    text: str = ""

    def float32(self) -> float:
        """The value as a single precision float."""
        return string_cast(self.text, ValueType.FLOAT32)

    def double64(self) -> float:
        """The value as a double precision float."""
        return string_cast(self.text, ValueType.DOUBLE64)

    def __str__(self) -> str:
        return self.text