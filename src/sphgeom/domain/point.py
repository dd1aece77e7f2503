"""Points on the unit circle (S1) and on the unit sphere (S2).

This module defines the two point value types used throughout sphgeom:
- Point1S: an azimuth angle on the unit circle
- Point2S: an (azimuth, polar) pair on the unit sphere, backed by a unit vector

Both types are immutable. Exact equality (``==``) compares the stored angles
and treats NaN points as equal to each other; tolerance based comparison is
done with ``eq`` and a precision context.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from sphgeom.utils.vectors import angle_between, as_vector, normalize, orthogonal, rotation_matrix

if TYPE_CHECKING:
    from sphgeom.core.precision import PrecisionContext

TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi


def normalize_azimuth(azimuth: float) -> float:
    """Normalize an azimuth angle to the range ``[0, 2pi)``.

    Non-finite values are returned unchanged.

    Examples:
        >>> normalize_azimuth(-0.5 * math.pi) == 1.5 * math.pi
        True
    """
    if not math.isfinite(azimuth):
        return azimuth
    normalized = azimuth % TWO_PI
    # a tiny negative input rounds up to exactly 2pi
    if normalized >= TWO_PI:
        normalized = 0.0
    return normalized


def normalize_polar(polar: float) -> float:
    """Clamp a polar angle to the range ``[0, pi]``."""
    if not math.isfinite(polar):
        return polar
    return min(max(polar, 0.0), math.pi)


@dataclass(frozen=True, slots=True, eq=False)
class Point1S:
    """A point on the unit circle, given by its azimuth angle.

    Attributes:
        azimuth: Azimuth as given at construction (not normalized)
        normalized_azimuth: Azimuth normalized to ``[0, 2pi)``
    """

    azimuth: float
    normalized_azimuth: float

    ZERO = None  # type: Point1S
    PI = None  # type: Point1S
    NaN = None  # type: Point1S

    @classmethod
    def of(cls, azimuth: float) -> Point1S:
        """Create a point from an azimuth angle in radians."""
        azimuth = float(azimuth)
        return cls(azimuth, normalize_azimuth(azimuth))

    def is_nan(self) -> bool:
        return math.isnan(self.azimuth)

    def is_finite(self) -> bool:
        return math.isfinite(self.azimuth)

    def antipodal(self) -> Point1S:
        """Return the point on the opposite side of the circle."""
        return Point1S.of(self.normalized_azimuth + math.pi)

    def distance(self, other: Point1S) -> float:
        """Shortest angular distance to ``other``, in ``[0, pi]``."""
        dist = abs(other.normalized_azimuth - self.normalized_azimuth)
        return dist if dist <= math.pi else TWO_PI - dist

    def signed_distance(self, other: Point1S) -> float:
        """Signed shortest distance from this point to ``other``, in ``[-pi, pi)``.

        Positive values mean ``other`` is reached by moving counterclockwise.
        """
        return normalize_azimuth(other.normalized_azimuth - self.normalized_azimuth + math.pi) - math.pi

    def above(self, other: Point1S) -> Point1S:
        """Return the equivalent point with azimuth in ``[other.azimuth, other.azimuth + 2pi)``."""
        base = other.azimuth
        azimuth = base + normalize_azimuth(self.normalized_azimuth - normalize_azimuth(base))
        return Point1S(azimuth, self.normalized_azimuth)

    def eq(self, other: Point1S, precision: PrecisionContext) -> bool:
        """Return True if the points are equivalent within ``precision``."""
        return precision.eq_zero(self.signed_distance(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point1S):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()
        return self.normalized_azimuth == other.normalized_azimuth

    def __hash__(self) -> int:
        if self.is_nan():
            return hash("Point1S.NaN")
        return hash(self.normalized_azimuth)

    def __str__(self) -> str:
        return f"({self.azimuth})"

    def __repr__(self) -> str:
        return f"Point1S(azimuth={self.azimuth})"


Point1S.ZERO = Point1S.of(0.0)
Point1S.PI = Point1S.of(math.pi)
Point1S.NaN = Point1S.of(math.nan)


def _spherical_to_vector(azimuth: float, polar: float) -> np.ndarray:
    # non-finite angles have no direction
    if not (math.isfinite(azimuth) and math.isfinite(polar)):
        return np.full(3, math.nan)
    sin_polar = math.sin(polar)
    return np.array(
        [math.cos(azimuth) * sin_polar, math.sin(azimuth) * sin_polar, math.cos(polar)]
    )


@dataclass(frozen=True, slots=True, eq=False)
class Point2S:
    """A point on the unit sphere.

    The azimuth is measured in the x-y plane from the +x axis toward the +y
    axis and lies in ``[0, 2pi)``. The polar angle is measured from the +z
    axis and lies in ``[0, pi]``. Points at the poles compare equal
    regardless of their azimuth.

    Attributes:
        azimuth: Azimuth angle in radians
        polar: Polar angle in radians
        vector: Unit vector pointing at the point (read-only numpy array)
    """

    azimuth: float
    polar: float
    vector: np.ndarray = field(repr=False)

    PLUS_I = None  # type: Point2S
    PLUS_J = None  # type: Point2S
    PLUS_K = None  # type: Point2S
    MINUS_I = None  # type: Point2S
    MINUS_J = None  # type: Point2S
    MINUS_K = None  # type: Point2S
    NaN = None  # type: Point2S
    POSITIVE_INFINITY = None  # type: Point2S
    NEGATIVE_INFINITY = None  # type: Point2S

    def __post_init__(self) -> None:
        self.vector.setflags(write=False)

    @classmethod
    def of(cls, azimuth: float, polar: float) -> Point2S:
        """Create a point from spherical angles in radians.

        Non-finite angles are kept as given and the vector is all NaN.

        Examples:
            >>> Point2S.of(0.0, 0.5 * math.pi).vector.round(6).tolist()
            [1.0, 0.0, 0.0]
        """
        az = normalize_azimuth(float(azimuth))
        pol = normalize_polar(float(polar))
        return cls(az, pol, _spherical_to_vector(az, pol))

    @classmethod
    def from_vector(cls, vector: Sequence[float] | np.ndarray) -> Point2S:
        """Create a point from the direction of a 3D vector.

        Raises:
            InvalidArgumentError: If the vector is zero or not finite
        """
        unit = normalize(as_vector(vector))
        azimuth = normalize_azimuth(math.atan2(unit[1], unit[0]))
        polar = math.acos(min(max(float(unit[2]), -1.0), 1.0))
        return cls(azimuth, polar, unit)

    def is_nan(self) -> bool:
        return math.isnan(self.azimuth) or math.isnan(self.polar)

    def is_finite(self) -> bool:
        return math.isfinite(self.azimuth) and math.isfinite(self.polar)

    def is_pole(self) -> bool:
        """Return True if the point lies exactly on the +z or -z axis."""
        return self.polar == 0.0 or self.polar == math.pi

    def antipodal(self) -> Point2S:
        """Return the point on the opposite side of the sphere."""
        return Point2S.from_vector(-self.vector)

    def distance(self, other: Point2S) -> float:
        """Great circle distance to ``other``, in ``[0, pi]``."""
        return angle_between(self.vector, other.vector)

    def slerp(self, other: Point2S, t: float) -> Point2S:
        """Spherical linear interpolation toward ``other``.

        ``t = 0`` gives this point and ``t = 1`` gives ``other``; values
        outside ``[0, 1]`` extrapolate along the same great circle. For
        antipodal points an arbitrary (but deterministic) great circle is
        used.
        """
        axis = np.cross(self.vector, other.vector)
        if not np.any(axis):
            if np.dot(self.vector, other.vector) > 0:
                return self
            axis = orthogonal(self.vector)

        angle = self.distance(other) * t
        return Point2S.from_vector(rotation_matrix(axis, angle) @ self.vector)

    def eq(self, other: Point2S, precision: PrecisionContext) -> bool:
        """Return True if the point vectors are equal within ``precision``."""
        return precision.vectors_eq(self.vector, other.vector)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2S):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()
        if self.polar != other.polar:
            return False
        return self.is_pole() or self.azimuth == other.azimuth

    def __hash__(self) -> int:
        if self.is_nan():
            return hash("Point2S.NaN")
        if self.is_pole():
            return hash(self.polar)
        return hash((self.azimuth, self.polar))

    def __str__(self) -> str:
        return f"({self.azimuth}, {self.polar})"

    def __repr__(self) -> str:
        return f"Point2S(azimuth={self.azimuth}, polar={self.polar})"


Point2S.PLUS_I = Point2S(0.0, HALF_PI, np.array([1.0, 0.0, 0.0]))
Point2S.PLUS_J = Point2S(HALF_PI, HALF_PI, np.array([0.0, 1.0, 0.0]))
Point2S.PLUS_K = Point2S(0.0, 0.0, np.array([0.0, 0.0, 1.0]))
Point2S.MINUS_I = Point2S(math.pi, HALF_PI, np.array([-1.0, 0.0, 0.0]))
Point2S.MINUS_J = Point2S(1.5 * math.pi, HALF_PI, np.array([0.0, -1.0, 0.0]))
Point2S.MINUS_K = Point2S(0.0, math.pi, np.array([0.0, 0.0, -1.0]))
Point2S.NaN = Point2S(math.nan, math.nan, np.array([math.nan, math.nan, math.nan]))
Point2S.POSITIVE_INFINITY = Point2S.of(math.inf, math.inf)
Point2S.NEGATIVE_INFINITY = Point2S.of(-math.inf, -math.inf)


def polar_azimuth_key(point: Point2S) -> tuple[float, float]:
    """Sort key ordering points by polar angle, then by azimuth."""
    return (point.polar, point.azimuth)
