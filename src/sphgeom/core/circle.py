"""Great circles: the hyperplanes of the unit sphere."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from sphgeom.core.angular import AngularInterval, ConvexAngularInterval
from sphgeom.core.precision import PrecisionContext
from sphgeom.domain import HALF_PI, TWO_PI, HyperplaneLocation, Point1S, Point2S, Transform2S
from sphgeom.exceptions import InvalidArgumentError
from sphgeom.utils.vectors import angle_between, as_vector, normalize, orthogonal, orthogonal_component

if TYPE_CHECKING:
    from sphgeom.core.arc import GreatArc

VectorLike = Sequence[float] | np.ndarray


def _direction(value: Point2S | VectorLike) -> np.ndarray:
    if isinstance(value, Point2S):
        return value.vector
    return as_vector(value)


class GreatCircle:
    """A great circle defined by its pole and an orthonormal in-plane frame.

    The circle is the set of points 90 degrees away from ``pole``. Points on
    the pole side are on the MINUS side of the circle; the offset of the
    pole itself is ``-pi/2``. Positions along the circle are azimuths
    measured from ``u`` toward ``v``.

    Attributes:
        pole: Unit normal of the circle plane
        u: Unit vector of the zero azimuth
        v: Unit vector of the ``pi/2`` azimuth, ``pole x u``
        precision: Comparison policy for all classifications
    """

    __slots__ = ("pole", "u", "v", "precision")

    def __init__(
        self, pole: np.ndarray, u: np.ndarray, v: np.ndarray, precision: PrecisionContext
    ) -> None:
        self.pole = pole
        self.u = u
        self.v = v
        self.precision = precision
        for vec in (pole, u, v):
            vec.setflags(write=False)

    @classmethod
    def from_pole(cls, pole: Point2S | VectorLike, precision: PrecisionContext) -> GreatCircle:
        """Create a circle from its pole; the u axis is chosen deterministically."""
        unit_pole = normalize(_direction(pole))
        u = orthogonal(unit_pole)
        v = normalize(np.cross(unit_pole, u))
        return cls(unit_pole, u, v, precision)

    @classmethod
    def from_pole_and_u(
        cls, pole: Point2S | VectorLike, u: Point2S | VectorLike, precision: PrecisionContext
    ) -> GreatCircle:
        """Create a circle from its pole and a reference direction for the zero azimuth.

        Raises:
            InvalidArgumentError: If ``u`` is parallel to ``pole``
        """
        unit_pole = normalize(_direction(pole))
        unit_u = orthogonal_component(unit_pole, _direction(u))
        unit_v = normalize(np.cross(unit_pole, unit_u))
        return cls(unit_pole, unit_u, unit_v, precision)

    @classmethod
    def from_points(cls, a: Point2S, b: Point2S, precision: PrecisionContext) -> GreatCircle:
        """Create the circle running from ``a`` toward ``b``.

        ``a`` is placed at azimuth zero and ``b`` lies in ``(0, pi)``.

        Raises:
            InvalidArgumentError: If the points are not finite, equal or antipodal
        """
        if not a.is_finite() or not b.is_finite():
            raise InvalidArgumentError(f"Invalid points for great circle: {a}, {b}")

        dist = a.distance(b)
        err = None
        if precision.eq_zero(dist):
            err = "equal"
        elif precision.eq(dist, math.pi):
            err = "antipodal"
        if err is not None:
            raise InvalidArgumentError(
                f"Cannot create great circle from points {a} and {b}: points are {err}"
            )

        u = normalize(a.vector)
        pole = normalize(np.cross(u, b.vector))
        v = normalize(np.cross(pole, u))
        return cls(pole, u, v, precision)

    @property
    def pole_point(self) -> Point2S:
        return Point2S.from_vector(self.pole)

    @property
    def minus_point(self) -> Point2S:
        """The point deepest inside the minus side (the pole)."""
        return self.pole_point

    @property
    def plus_point(self) -> Point2S:
        """The point deepest inside the plus side (the antipodal pole)."""
        return Point2S.from_vector(-self.pole)

    def offset(self, point: Point2S | VectorLike) -> float:
        """Signed angular distance of ``point`` from the circle plane."""
        return angle_between(self.pole, _direction(point)) - HALF_PI

    def classify(self, point: Point2S | VectorLike) -> HyperplaneLocation:
        sign = self.precision.sign(self.offset(point))
        if sign > 0:
            return HyperplaneLocation.PLUS
        if sign < 0:
            return HyperplaneLocation.MINUS
        return HyperplaneLocation.ON

    def contains(self, point: Point2S | VectorLike) -> bool:
        return self.classify(point) == HyperplaneLocation.ON

    def azimuth(self, point: Point2S | VectorLike) -> float:
        """Azimuth of the projection of ``point`` onto the circle, in ``[0, 2pi)``."""
        vec = _direction(point)
        az = math.atan2(float(np.dot(vec, self.v)), float(np.dot(vec, self.u)))
        if az < 0.0:
            az += TWO_PI
        return az

    def vector_at(self, azimuth: float) -> np.ndarray:
        return math.cos(azimuth) * self.u + math.sin(azimuth) * self.v

    def to_subspace(self, point: Point2S) -> Point1S:
        return Point1S.of(self.azimuth(point))

    def to_space(self, point: Point1S) -> Point2S:
        return Point2S.from_vector(self.vector_at(point.azimuth))

    def project(self, point: Point2S) -> Point2S:
        """Project ``point`` onto the circle; the poles project to the zero azimuth."""
        return Point2S.from_vector(self.vector_at(self.azimuth(point)))

    def reverse(self) -> GreatCircle:
        """Return the same circle with the minus and plus sides swapped."""
        return GreatCircle(-self.pole, self.u, -self.v, self.precision)

    def transform(self, transform: Transform2S) -> GreatCircle:
        tu = transform.apply(Point2S.from_vector(self.u))
        tv = transform.apply(Point2S.from_vector(self.v))
        return GreatCircle.from_points(tu, tv, self.precision)

    def similar_orientation(self, other: GreatCircle) -> bool:
        return float(np.dot(self.pole, other.pole)) > 0.0

    def intersection(self, other: GreatCircle) -> Point2S | None:
        """Return the intersection point in the direction of ``pole x other.pole``.

        The antipodal point is also on both circles. Returns None when the
        circles coincide or are reverses of each other.
        """
        cross = np.cross(self.pole, other.pole)
        if self.precision.is_zero_vector(cross):
            return None
        return Point2S.from_vector(cross)

    def angle(self, other: GreatCircle, point: Point2S | None = None) -> float:
        """Angle between the circle poles.

        When ``point`` is given the angle is negated unless ``point`` lies on
        the ``pole x other.pole`` side, giving the signed turn from this
        circle to ``other`` at that intersection.
        """
        theta = angle_between(self.pole, other.pole)
        if point is None:
            return theta
        cross = np.cross(self.pole, other.pole)
        return theta if self.precision.gt(float(np.dot(point.vector, cross)), 0.0) else -theta

    def span(self) -> GreatArc:
        """Return the arc covering the entire circle."""
        from sphgeom.core.arc import GreatArc

        return GreatArc.from_interval(self, ConvexAngularInterval.full())

    def arc(
        self,
        start: Point2S | Point1S | float | AngularInterval,
        end: Point2S | Point1S | float | None = None,
    ) -> GreatArc:
        """Create an arc on this circle.

        Accepts a convex angular interval, or a start and end given as sphere
        points, circle points or azimuths. Equivalent start and end values
        produce the full circle.

        Raises:
            InvalidArgumentError: If the interval is wider than pi
        """
        from sphgeom.core.arc import GreatArc

        if isinstance(start, AngularInterval):
            pieces = start.to_convex()
            if len(pieces) != 1:
                raise InvalidArgumentError(f"Arc interval must be convex: {start}")
            return GreatArc.from_interval(self, pieces[0])

        if end is None:
            raise InvalidArgumentError("Arc end point is required")

        if isinstance(start, Point2S):
            start = self.to_subspace(start)
        if isinstance(end, Point2S):
            end = self.to_subspace(end)
        return GreatArc.from_interval(self, ConvexAngularInterval.of(start, end, self.precision))

    def eq(self, other: GreatCircle, precision: PrecisionContext | None = None) -> bool:
        """Return True if both circles have equivalent poles and frames.

        Reversed circles describe the same point set but are not equivalent.
        """
        if self is other:
            return True
        precision = precision or self.precision
        return (
            precision.vectors_eq(self.pole, other.pole)
            and precision.vectors_eq(self.u, other.u)
            and precision.vectors_eq(self.v, other.v)
        )

    def __repr__(self) -> str:
        return (
            f"GreatCircle[pole= {self.pole.tolist()}, u= {self.u.tolist()}, v= {self.v.tolist()}]"
        )
