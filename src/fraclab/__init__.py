from __future__ import annotations

from fraclab.errors import DivisionByZero, FractionError, InvalidCoefficient, ParseError
from fraclab.fraction import ContinuedFraction, FractionExpr, FractionKind, SimpleFraction
from fraclab.menu import FractionMenu
from fraclab.prompt import parse_number, read_validated_number
from fraclab.util import EPSILON

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "FractionError",
    "ParseError",
    "InvalidCoefficient",
    "DivisionByZero",
    "FractionKind",
    "FractionExpr",
    "SimpleFraction",
    "ContinuedFraction",
    "FractionMenu",
    "parse_number",
    "read_validated_number",
]
