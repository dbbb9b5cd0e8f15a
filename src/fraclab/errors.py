"""Errors raised by fraclab.

All of them derive from :class:`FractionError`, so a caller driving the menu
can catch every domain failure with one clause.
"""

from __future__ import annotations
import math


class FractionError(Exception):
    """Base class for fraclab errors."""


class ParseError(FractionError, ValueError):
    """Text could not be read as a finite real number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"{text!r} is not a number")
        self.text = text


class InvalidCoefficient(FractionError, ValueError):
    """A coefficient violates the exclusion rule of its fraction."""

    def __init__(self, name: str, value: float, rule: str) -> None:
        super().__init__(f"coefficient '{name}' {rule} (got {value!r})")
        self.name = name
        self.value = value
        self.rule = rule


class DivisionByZero(FractionError, ZeroDivisionError):
    """A denominator came within tolerance of zero, or was not finite, during evaluation."""

    def __init__(self, stage: str, denominator: float) -> None:
        state = "zero" if math.isfinite(denominator) else "undefined"
        super().__init__(f"{stage} denominator is {state} ({denominator!r})")
        self.stage = stage
        self.denominator = denominator
