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
class SimpleFraction(FractionExpr):
    """f(x) = 1 / (a*x), with a != 0."""

    a: float
    tolerance: float = field(default=EPSILON, compare=False)
    __match_args__ = ("a",)

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", float(self.a))
        self._validate()

    @property
    def kind(self) -> FractionKind:
        return FractionKind.SIMPLE

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return (self.a,)

    def evaluate(self, x: float) -> float:
        result = self._reciprocal("a*x", self.a * x)
        logger.debug("1 / (%r * %r) = %r", self.a, x, result)
        return result

    def sample(self, xs: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        points = self._points(xs)
        result, _ = self._masked_reciprocal(self.a * points, np.ones(points.shape, dtype=bool))
        return result
