"""Integer powers of integers and fractions."""

from __future__ import annotations

from .rational import Rational


def integer_pow(base: int, exponent: int) -> int:
    """Return ``base`` to a non-negative ``exponent``; non-positive exponents give 1."""
    if exponent <= 0:
        return 1
    return base ** exponent


def rational_pow(lhs: Rational, rhs: Rational | int) -> Rational:
    """Raise ``lhs`` to a whole-number power ``rhs``.

    Raises ValueError for a fractional power and ZeroDivisionError when zero
    is raised to a negative power.
    """
    if not isinstance(rhs, Rational):
        rhs = Rational(rhs)
    if rhs.denominator != 1:
        raise ValueError("fractional power is not supported")
    power = rhs.numerator
    if power >= 0:
        return Rational(
            integer_pow(lhs.numerator, power), integer_pow(lhs.denominator, power)
        )
    return Rational(
        integer_pow(lhs.denominator, -power), integer_pow(lhs.numerator, -power)
    )