"""Keys, operations and number types known to the calculator."""

from __future__ import annotations

import enum


class Operation(enum.Enum):
    """A binary arithmetic operation."""

    MULTIPLICATION = enum.auto()
    DIVISION = enum.auto()
    SUBTRACTION = enum.auto()
    ADDITION = enum.auto()
    POWER = enum.auto()


class ControlKey(enum.Enum):
    """A key that controls the calculator rather than entering a digit."""

    EQUALS = enum.auto()
    CLEAR = enum.auto()
    MEM_SAVE = enum.auto()
    MEM_LOAD = enum.auto()
    MEM_CLEAR = enum.auto()
    PLUS_MINUS = enum.auto()
    BACKSPACE = enum.auto()
    EXTRA_KEY = enum.auto()


class ControllerType(enum.Enum):
    """The number type a calculator works in; the value is its display label."""

    UINT8_T = "uint8_t"
    INT = "int"
    INT64_T = "int64_t"
    SIZE_T = "size_t"
    DOUBLE = "double"
    FLOAT = "float"
    RATIONAL = "Rational"

    @classmethod
    def from_label(cls, label: str) -> ControllerType:
        """Return the member whose label is exactly ``label``."""
        try:
            return cls(label)
        except ValueError:
            raise ValueError(f"unknown number type label: {label!r}") from None