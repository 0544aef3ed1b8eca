"""Keypad calculator over fixed-width integers, floats and exact fractions."""

__version__ = "0.1.0"