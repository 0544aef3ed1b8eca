"""A single-register calculator with one memory cell."""

from __future__ import annotations

import math

from .numeric import Number, NumberType
from .power import rational_pow

_DIVISION_BY_ZERO = "Division by zero"
_ZERO_POWER_TO_ZERO = "Zero power to zero"
_INTEGER_NEGATIVE_POWER = "Integer negative power"
_FRACTIONAL_POWER = "Fractional power is not supported"


class CalculatorError(Exception):
    """An operation the calculator refuses; the message is shown to the user."""


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _float_div(dividend: float, divisor: float) -> float:
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if math.isnan(dividend) or dividend == 0:
            return math.nan
        sign = math.copysign(1.0, dividend) * math.copysign(1.0, divisor)
        return math.copysign(math.inf, sign)


def _float_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


class Calculator:
    """Holds the current number of one number type and applies operations to it.

    Refused operations raise CalculatorError and leave the number unchanged.
    """

    def __init__(self, number_type: NumberType) -> None:
        self.number_type = number_type
        self.number: Number = number_type.coerce(0)
        self.memory: Number | None = None

    def set(self, value: Number) -> None:
        self.number = self.number_type.coerce(value)

    def add(self, value: Number) -> None:
        self.number = self.number_type.coerce(self.number + self._operand(value))

    def sub(self, value: Number) -> None:
        self.number = self.number_type.coerce(self.number - self._operand(value))

    def mul(self, value: Number) -> None:
        self.number = self.number_type.coerce(self.number * self._operand(value))

    def div(self, value: Number) -> None:
        """Divide; integers truncate toward zero, floats follow IEEE rules."""
        operand = self._operand(value)
        kind = self.number_type.kind
        if kind == "floating":
            result = _float_div(self.number, operand)
        elif operand == 0:
            raise CalculatorError(_DIVISION_BY_ZERO)
        elif kind == "integer":
            result = _truncating_div(self.number, operand)
        else:
            result = self.number / operand
        self.number = self.number_type.coerce(result)

    def pow(self, value: Number) -> None:
        """Raise the number to ``value``.

        Zero raised to a negative rational power raises ZeroDivisionError.
        """
        operand = self._operand(value)
        if self.number == 0 and operand == 0:
            raise CalculatorError(_ZERO_POWER_TO_ZERO)
        kind = self.number_type.kind
        if kind == "integer":
            if operand < 0:
                raise CalculatorError(_INTEGER_NEGATIVE_POWER)
            result = pow(self.number, operand, 1 << self.number_type.bits)
        elif kind == "floating":
            result = _float_pow(self.number, operand)
        else:
            if operand.denominator != 1:
                raise CalculatorError(_FRACTIONAL_POWER)
            result = rational_pow(self.number, operand)
        self.number = self.number_type.coerce(result)

    def save(self) -> None:
        self.memory = self.number

    def load(self) -> None:
        if self.memory is not None:
            self.number = self.memory

    def _operand(self, value: Number) -> Number:
        return self.number_type.coerce(value)