"""Exact fractions kept in lowest terms with a positive denominator."""

from __future__ import annotations

import functools
import math
import operator
import re

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")
_SLASH = re.compile(r"\s*/")


def _as_rational(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    return None


@functools.total_ordering
class Rational:
    """An immutable fraction ``numerator / denominator``."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise ZeroDivisionError("rational number with zero denominator")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read ``"n"`` or ``"n / d"`` from the start of ``text``.

        Trailing text is ignored; a missing or unreadable denominator yields
        the integer ``n``. Raises ValueError when no integer leads the text
        or the denominator is zero.
        """
        match = _INTEGER.match(text)
        if match is None:
            raise ValueError(f"no integer at the start of {text!r}")
        numerator = int(match.group(1))
        rest = text[match.end():]
        slash = _SLASH.match(rest)
        if slash is None:
            return cls(numerator)
        denominator_match = _INTEGER.match(rest, slash.end())
        if denominator_match is None:
            return cls(numerator)
        denominator = int(denominator_match.group(1))
        if denominator == 0:
            raise ValueError(f"zero denominator in {text!r}")
        return cls(numerator, denominator)

    def inv(self) -> Rational:
        """Return the reciprocal."""
        return Rational(self._denominator, self._numerator)

    def __add__(self, other: object) -> Rational:
        rhs = _as_rational(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __radd__(self, other: object) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: object) -> Rational:
        rhs = _as_rational(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator - rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __rsub__(self, other: object) -> Rational:
        lhs = _as_rational(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Rational:
        rhs = _as_rational(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    def __rmul__(self, other: object) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Rational:
        rhs = _as_rational(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise ZeroDivisionError("rational division by zero")
        return Rational(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def __rtruediv__(self, other: object) -> Rational:
        lhs = _as_rational(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __pos__(self) -> Rational:
        return self

    def __eq__(self, other: object) -> bool:
        rhs = _as_rational(other)
        if rhs is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (rhs._numerator, rhs._denominator)

    def __lt__(self, other: object) -> bool:
        rhs = _as_rational(other)
        if rhs is None:
            return NotImplemented
        return self._numerator * rhs._denominator < rhs._numerator * self._denominator

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator} / {self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"