"""Number types the calculator can work in: range, parsing and display."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import Literal, Union

from .enums import ControllerType
from .rational import Rational

Number = Union[int, float, Rational]
Kind = Literal["integer", "floating", "rational"]

_INT_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_MAX_DIGITS = 40


def _round_to_float32(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class NumberType:
    """A number type: fixed-width integer, binary float or exact fraction.

    ``bits`` is the storage width for integers and floats; ``signed`` only
    matters for integers.
    """

    name: str
    kind: Kind
    bits: int = 64
    signed: bool = True

    def __post_init__(self) -> None:
        if self.kind not in ("integer", "floating", "rational"):
            raise ValueError(f"unknown number kind: {self.kind!r}")

    def coerce(self, value: Number) -> Number:
        """Convert ``value`` into this type, wrapping or rounding as storage does."""
        if self.kind == "integer":
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{self.name} cannot hold {value!r}")
            return self._wrap(value)
        if self.kind == "floating":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{self.name} cannot hold {value!r}")
            value = float(value)
            return _round_to_float32(value) if self.bits == 32 else value
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Rational(value)
        raise TypeError(f"{self.name} cannot hold {value!r}")

    def parse(self, text: str) -> Number:
        """Read a number from the start of ``text``; unreadable text gives zero."""
        if self.kind == "integer":
            return self._parse_integer(text)
        if self.kind == "floating":
            match = _FLOAT_PREFIX.match(text)
            if match is None:
                return self.coerce(0.0)
            return self.coerce(float(match.group(1)))
        try:
            return Rational.parse(text)
        except ValueError:
            return Rational()

    def format(self, value: Number) -> str:
        """Render ``value`` the way the display shows it."""
        if self.kind == "floating":
            return f"{value:.6g}"
        return str(value)

    def _wrap(self, value: int) -> int:
        modulus = 1 << self.bits
        value %= modulus
        if self.signed and value >= modulus >> 1:
            value -= modulus
        return value

    def _parse_integer(self, text: str) -> int:
        match = _INT_PREFIX.match(text)
        if match is None:
            return 0
        sign, digits = match.groups()
        digits = digits.lstrip("0") or "0"
        magnitude = int(digits) if len(digits) <= _MAX_DIGITS else 10 ** _MAX_DIGITS
        if self.signed:
            limit = 1 << (self.bits - 1)
            value = -magnitude if sign == "-" else magnitude
            return max(-limit, min(limit - 1, value))
        # Narrow unsigned types are read as a full unsigned word, then truncated.
        maximum = (1 << max(self.bits, 32)) - 1
        if magnitude > maximum:
            return self._wrap(maximum)
        return self._wrap(-magnitude if sign == "-" else magnitude)


_NUMBER_TYPES = {
    ControllerType.UINT8_T: NumberType("uint8_t", "integer", 8, False),
    ControllerType.INT: NumberType("int", "integer", 32, True),
    ControllerType.INT64_T: NumberType("int64_t", "integer", 64, True),
    ControllerType.SIZE_T: NumberType("size_t", "integer", 64, False),
    ControllerType.DOUBLE: NumberType("double", "floating", 64),
    ControllerType.FLOAT: NumberType("float", "floating", 32),
    ControllerType.RATIONAL: NumberType("Rational", "rational"),
}


def number_type(controller_type: ControllerType) -> NumberType:
    """Return the number type selected by ``controller_type``."""
    return _NUMBER_TYPES[controller_type]