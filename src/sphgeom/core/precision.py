"""Floating point comparison policy shared by all geometric operations."""

from __future__ import annotations

import math

import numpy as np

from sphgeom.config import PrecisionConfig
from sphgeom.exceptions import InvalidArgumentError


class PrecisionContext:
    """Compares floating point values using an absolute epsilon.

    Two values are considered equal when their difference is at most
    ``epsilon``. Every classification and equality test in sphgeom goes
    through an instance of this class.

    Args:
        epsilon: Non-negative, finite tolerance

    Raises:
        InvalidArgumentError: If ``epsilon`` is negative or not finite

    Examples:
        >>> precision = PrecisionContext(1e-6)
        >>> precision.eq(1.0, 1.0 + 1e-8)
        True
        >>> precision.compare(1.0, 2.0)
        -1
    """

    __slots__ = ("epsilon",)

    def __init__(self, epsilon: float) -> None:
        if not math.isfinite(epsilon) or epsilon < 0.0:
            raise InvalidArgumentError(f"Invalid epsilon value: {epsilon}")
        self.epsilon = float(epsilon)

    @classmethod
    def from_config(cls, config: PrecisionConfig | None = None) -> PrecisionContext:
        """Build a precision context from configuration."""
        config = config or PrecisionConfig()
        return cls(config.epsilon)

    def compare(self, a: float, b: float) -> int:
        """Return 0 if the values are equivalent, -1 if ``a < b`` and 1 otherwise."""
        if abs(a - b) <= self.epsilon:
            return 0
        return -1 if a < b else 1

    def eq(self, a: float, b: float) -> bool:
        return self.compare(a, b) == 0

    def eq_zero(self, a: float) -> bool:
        return self.compare(a, 0.0) == 0

    def sign(self, a: float) -> int:
        """Return the sign of ``a``, treating values equivalent to zero as zero."""
        return self.compare(a, 0.0)

    def lt(self, a: float, b: float) -> bool:
        return self.compare(a, b) < 0

    def lte(self, a: float, b: float) -> bool:
        return self.compare(a, b) <= 0

    def gt(self, a: float, b: float) -> bool:
        return self.compare(a, b) > 0

    def gte(self, a: float, b: float) -> bool:
        return self.compare(a, b) >= 0

    def vectors_eq(self, a: np.ndarray, b: np.ndarray) -> bool:
        """Return True if the vectors are equal component by component."""
        return all(self.eq(float(x), float(y)) for x, y in zip(a, b))

    def is_zero_vector(self, vec: np.ndarray) -> bool:
        return all(self.eq_zero(float(c)) for c in vec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrecisionContext):
            return NotImplemented
        return self.epsilon == other.epsilon

    def __hash__(self) -> int:
        return hash(self.epsilon)

    def __repr__(self) -> str:
        return f"PrecisionContext(epsilon={self.epsilon})"
