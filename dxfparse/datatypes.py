"""Typed values carried by DXF tags."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class DataType:
    """Base of the value types; ``str()`` gives the textual form."""

    value: object


@dataclass(frozen=True)
class String(DataType):
    """A string value."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Integer(DataType):
    """An integer value."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(DataType):
    """A floating point value."""

    value: float

    def __str__(self) -> str:
        value = self.value
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text


def parse_string(text: str) -> String:
    """Wrap ``text`` as a String value."""
    return String(text)


def parse_integer(text: str) -> Integer:
    """Parse a decimal integer; raise ValueError on bad syntax or range."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer syntax: {text!r}")
    number = int(text)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return Integer(number)


def parse_float(text: str) -> Float:
    """Parse a floating point number; raise ValueError on bad syntax or range."""
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid float syntax: {text!r}")
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"invalid float syntax: {text!r}") from None
    if math.isinf(number) and not text.lstrip("+-").lower().startswith("inf"):
        raise ValueError(f"float out of range: {text!r}")
    return Float(number)


def as_string(value: DataType) -> str | None:
    """Return the string held by a String, or None for other types."""
    return value.value if isinstance(value, String) else None


def as_int(value: DataType) -> int | None:
    """Return the integer held by an Integer, or None for other types."""
    return value.value if isinstance(value, Integer) else None


def as_float(value: DataType) -> float | None:
    """Return the float held by a Float, or None for other types."""
    return value.value if isinstance(value, Float) else None