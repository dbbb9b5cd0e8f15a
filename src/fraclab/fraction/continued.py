from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Sequence, Tuple

import numpy as np
import numpy.typing as npt

from fraclab.util import EPSILON
from .base import FractionExpr, FractionKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContinuedFraction(FractionExpr):
    """f(x) = 1 / (a1*x + 1 / (a2*x + 1 / (a3*x))), with no coefficient equal to 3.

    Evaluation runs inside-out and checks each of the three denominators
    against the tolerance before dividing by it.
    """

    a1: float
    a2: float
    a3: float
    tolerance: float = field(default=EPSILON, compare=False)
    __match_args__ = ("a1", "a2", "a3")

    def __post_init__(self) -> None:
        for name in ("a1", "a2", "a3"):
            object.__setattr__(self, name, float(getattr(self, name)))
        self._validate()

    @property
    def kind(self) -> FractionKind:
        return FractionKind.CONTINUED

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return (self.a1, self.a2, self.a3)

    def evaluate(self, x: float) -> float:
        inner = self.a3 * x
        middle = self.a2 * x + self._reciprocal("inner", inner)
        outer = self.a1 * x + self._reciprocal("middle", middle)
        result = self._reciprocal("outer", outer)
        logger.debug("inner=%r middle=%r outer=%r -> %r", inner, middle, outer, result)
        return result

    def sample(self, xs: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        points = self._points(xs)
        ok = np.ones(points.shape, dtype=bool)
        r, ok = self._masked_reciprocal(self.a3 * points, ok)
        r, ok = self._masked_reciprocal(self.a2 * points + r, ok)
        r, ok = self._masked_reciprocal(self.a1 * points + r, ok)
        return r
