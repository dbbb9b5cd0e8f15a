"""Human-readable rendering of fractions."""

from __future__ import annotations

from .base import FractionExpr
from .simple import SimpleFraction
from .continued import ContinuedFraction


def _fmt_coef(v: float) -> str:
    # repr keeps every digit the user typed, so the text round-trips.
    return repr(v)


def formula(expr: FractionExpr) -> str:
    """Return the formula of `expr` with its coefficients substituted."""
    match expr:
        case SimpleFraction(a):
            return f"1 / ({_fmt_coef(a)} * x)"
        case ContinuedFraction(a1, a2, a3):
            return (
                f"1 / ({_fmt_coef(a1)} * x + 1 / "
                f"({_fmt_coef(a2)} * x + 1 / ({_fmt_coef(a3)} * x)))"
            )
    raise TypeError(f"not a fraction: {expr!r}")


def describe(expr: FractionExpr) -> str:
    coefficients = ", ".join(f"{name}={_fmt_coef(v)}" for name, v in expr.named_coefficients())
    return "\n".join(
        [
            f"[Type: {expr.kind.title}]",
            f"Formula: {formula(expr)}",
            f"Coefficients: {coefficients}",
        ]
    )
