from .base import *
from .simple import *
from .continued import *
from .pretty import describe, formula

__all__ = [
    "EPSILON",
    "FORBIDDEN_CONTINUED",
    "FractionKind",
    "FractionExpr",
    "SimpleFraction",
    "ContinuedFraction",
    "describe",
    "formula",
]
