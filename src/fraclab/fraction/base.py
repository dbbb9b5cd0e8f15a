from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from fraclab.errors import DivisionByZero, InvalidCoefficient
from fraclab.util import EPSILON, is_close, is_zero

logger = logging.getLogger(__name__)

# Value every continued fraction coefficient must stay away from.
FORBIDDEN_CONTINUED = 3.0


class FractionKind(Enum):
    SIMPLE = 1
    CONTINUED = 2

    @property
    def key(self) -> str:
        """Menu key selecting this kind."""
        match self:
            case FractionKind.SIMPLE:
                return "1"
            case FractionKind.CONTINUED:
                return "2"
        assert False, "unreachable"

    @property
    def title(self) -> str:
        match self:
            case FractionKind.SIMPLE:
                return "Simple fraction"
            case FractionKind.CONTINUED:
                return "Continued fraction"
        assert False, "unreachable"

    @property
    def coefficient_names(self) -> Tuple[str, ...]:
        match self:
            case FractionKind.SIMPLE:
                return ("a",)
            case FractionKind.CONTINUED:
                return ("a1", "a2", "a3")
        assert False, "unreachable"

    @property
    def rule(self) -> str:
        match self:
            case FractionKind.SIMPLE:
                return "must not be zero"
            case FractionKind.CONTINUED:
                return "must not equal 3"
        assert False, "unreachable"

    def accepts(self, value: float, tol: float = EPSILON) -> bool:
        """Return whether `value` is a legal coefficient for this kind."""
        match self:
            case FractionKind.SIMPLE:
                return not is_zero(value, tol)
            case FractionKind.CONTINUED:
                return not is_close(value, FORBIDDEN_CONTINUED, tol)
        assert False, "unreachable"

    def create(self, *coefficients: float, tolerance: float = EPSILON) -> FractionExpr:
        """Build the fraction of this kind from its coefficients, in order."""
        from .simple import SimpleFraction
        from .continued import ContinuedFraction

        if len(coefficients) != len(self.coefficient_names):
            raise TypeError(
                f"{self.title} takes {len(self.coefficient_names)} coefficient(s), "
                f"got {len(coefficients)}"
            )
        match self:
            case FractionKind.SIMPLE:
                return SimpleFraction(*coefficients, tolerance=tolerance)
            case FractionKind.CONTINUED:
                return ContinuedFraction(*coefficients, tolerance=tolerance)
        assert False, "unreachable"

    @staticmethod
    def from_key(key: str) -> Optional[FractionKind]:
        for kind in FractionKind:
            if kind.key == key:
                return kind
        return None

    @staticmethod
    def from_name(name: str) -> FractionKind:
        return FractionKind[name.upper()]


class FractionExpr(ABC):
    """Shared contract of the fraction variants.

    A fraction is immutable and validated when it is built: every coefficient
    satisfies the exclusion rule of its kind for the instance's `tolerance`.
    """

    tolerance: float

    @property
    @abstractmethod
    def kind(self) -> FractionKind:
        ...

    @property
    @abstractmethod
    def coefficients(self) -> Tuple[float, ...]:
        """Return the coefficients in declaration order."""
        ...

    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Return f(x), raising DivisionByZero on a near-zero denominator."""
        ...

    @abstractmethod
    def sample(self, xs: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Return f at every point of `xs`, with NaN where f is undefined."""
        ...

    def describe(self) -> str:
        from .pretty import describe

        return describe(self)

    def named_coefficients(self) -> list[Tuple[str, float]]:
        return list(zip(self.kind.coefficient_names, self.coefficients))

    def _validate(self) -> None:
        if not (math.isfinite(self.tolerance) and self.tolerance > 0):
            raise ValueError(f"tolerance must be a positive finite number, got {self.tolerance!r}")
        for name, value in self.named_coefficients():
            if not math.isfinite(value):
                raise InvalidCoefficient(name, value, "must be finite")
            if not self.kind.accepts(value, self.tolerance):
                raise InvalidCoefficient(name, value, self.kind.rule)
        logger.debug("created %s with %s", self.kind.title, self.named_coefficients())

    def _reciprocal(self, stage: str, denominator: float) -> float:
        if not math.isfinite(denominator) or is_zero(denominator, self.tolerance):
            raise DivisionByZero(stage, denominator)
        return 1.0 / denominator

    def _masked_reciprocal(
        self, denominator: npt.NDArray[np.float64], ok: npt.NDArray[np.bool_]
    ) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.bool_]]:
        """Vectorized `_reciprocal`: points already undefined stay undefined."""
        ok = ok.copy()
        ok[ok] = np.isfinite(denominator[ok]) & (np.abs(denominator[ok]) >= self.tolerance)
        result = np.full_like(denominator, np.nan)
        result[ok] = 1.0 / denominator[ok]
        return result, ok

    @staticmethod
    def _points(xs: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return np.atleast_1d(np.asarray(xs, dtype=np.float64))
