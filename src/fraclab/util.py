from __future__ import annotations
import math

import numpy as np

# Magnitudes below this are treated as zero by every validation and evaluation step.
EPSILON = 1e-12


def is_zero(value: float, tol: float = EPSILON) -> bool:
    return bool(np.abs(value) < tol)


def is_close(a: float, b: float, tol: float = EPSILON) -> bool:
    return is_zero(a - b, tol)


def fmt_value(v: float, precision: int = 4) -> str:
    if math.isnan(v):
        return "undefined"
    return f"{v:.{precision}f}"
