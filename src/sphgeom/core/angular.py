"""One-dimensional partitioning of the unit circle.

- CutAngle: an oriented point that splits the circle into a minus and a plus side
- AngularInterval: a connected interval of azimuths, possibly the full circle
- ConvexAngularInterval: an angular interval no wider than pi

Great arcs store their extent along their circle as a ConvexAngularInterval.
"""

from __future__ import annotations

import math

from sphgeom.core.precision import PrecisionContext
from sphgeom.domain import HyperplaneLocation, Point1S, RegionLocation, Split, TWO_PI
from sphgeom.exceptions import InvalidArgumentError


def _as_point(value: Point1S | float) -> Point1S:
    return value if isinstance(value, Point1S) else Point1S.of(value)


class CutAngle:
    """An oriented point on the circle acting as a hyperplane.

    A positive-facing cut has its plus side at azimuths above the cut point;
    a negative-facing cut has its plus side below it. Offsets are computed
    on normalized azimuths, so the sides of a cut meet again at zero.
    """

    __slots__ = ("point", "positive_facing", "precision")

    def __init__(self, point: Point1S, positive_facing: bool, precision: PrecisionContext) -> None:
        self.point = point
        self.positive_facing = positive_facing
        self.precision = precision

    @classmethod
    def from_point_and_direction(
        cls, point: Point1S | float, positive_facing: bool, precision: PrecisionContext
    ) -> CutAngle:
        return cls(_as_point(point), positive_facing, precision)

    @classmethod
    def create_positive_facing(cls, point: Point1S | float, precision: PrecisionContext) -> CutAngle:
        return cls(_as_point(point), True, precision)

    @classmethod
    def create_negative_facing(cls, point: Point1S | float, precision: PrecisionContext) -> CutAngle:
        return cls(_as_point(point), False, precision)

    @property
    def azimuth(self) -> float:
        return self.point.azimuth

    def _normalized(self, point: Point1S) -> float:
        # points equivalent to zero are measured from zero so that values just
        # below 2pi are not placed on the far side of the circle
        if point.eq(Point1S.ZERO, self.precision):
            return 0.0
        return point.normalized_azimuth

    def offset(self, point: Point1S | float) -> float:
        """Signed offset of ``point``; positive values are on the plus side."""
        dist = self._normalized(_as_point(point)) - self._normalized(self.point)
        return dist if self.positive_facing else -dist

    def classify(self, point: Point1S | float) -> HyperplaneLocation:
        sign = self.precision.sign(self.offset(point))
        if sign > 0:
            return HyperplaneLocation.PLUS
        if sign < 0:
            return HyperplaneLocation.MINUS
        return HyperplaneLocation.ON

    def contains(self, point: Point1S | float) -> bool:
        return self.classify(point) == HyperplaneLocation.ON

    def project(self, point: Point1S | float) -> Point1S:
        return self.point

    def reverse(self) -> CutAngle:
        return CutAngle(self.point, not self.positive_facing, self.precision)

    def similar_orientation(self, other: CutAngle) -> bool:
        return self.positive_facing == other.positive_facing

    def eq(self, other: CutAngle, precision: PrecisionContext) -> bool:
        return self.positive_facing == other.positive_facing and self.point.eq(other.point, precision)

    def __repr__(self) -> str:
        return f"CutAngle[point= {self.point}, positiveFacing= {self.positive_facing}]"


class AngularInterval:
    """A connected interval of azimuth angles.

    The interval is bounded by a negative-facing cut at its minimum and a
    positive-facing cut at its maximum; the region is the minus side of
    both. The maximum azimuth is kept numerically above the minimum, so it
    may exceed ``2pi``. An interval without boundaries is the full circle.
    Zero-width intervals are not representable: equivalent endpoints
    describe the full circle.
    """

    __slots__ = ("min_boundary", "max_boundary", "midpoint")

    _FULL: AngularInterval

    def __init__(
        self,
        min_boundary: CutAngle | None,
        max_boundary: CutAngle | None,
        midpoint: Point1S | None,
    ) -> None:
        self.min_boundary = min_boundary
        self.max_boundary = max_boundary
        self.midpoint = midpoint

    @classmethod
    def full(cls) -> AngularInterval:
        return cls._FULL

    @classmethod
    def of(
        cls, min_value: Point1S | float, max_value: Point1S | float, precision: PrecisionContext
    ) -> AngularInterval:
        """Create the interval running counterclockwise from ``min_value`` to ``max_value``.

        Raises:
            InvalidArgumentError: If either value is not finite
        """
        min_point = _as_point(min_value)
        max_point = _as_point(max_value)
        _validate_interval_values(min_point, max_point)

        if min_point.eq(max_point, precision):
            return cls.full()

        return cls._create(
            CutAngle.create_negative_facing(min_point, precision),
            CutAngle.create_positive_facing(max_point.above(min_point), precision),
        )

    @classmethod
    def of_cuts(cls, a: CutAngle, b: CutAngle) -> AngularInterval:
        """Create the interval on the minus side of two oppositely facing cuts.

        The arguments may be given in any order. The full circle is returned
        when the cuts face the same way or sit at equivalent points.
        """
        _validate_interval_values(a.point, b.point)

        if (
            a.positive_facing == b.positive_facing
            or a.point.eq(b.point, a.precision)
            or b.point.eq(a.point, b.precision)
        ):
            return cls.full()

        min_cut, max_cut = (b, a) if a.positive_facing else (a, b)
        return cls._create(
            min_cut,
            CutAngle.create_positive_facing(max_cut.point.above(min_cut.point), max_cut.precision),
        )

    @classmethod
    def _create(cls, min_boundary: CutAngle, max_boundary: CutAngle) -> AngularInterval:
        midpoint = Point1S.of(0.5 * (min_boundary.azimuth + max_boundary.azimuth))
        return cls(min_boundary, max_boundary, midpoint)

    @property
    def min(self) -> float:
        return self.min_boundary.azimuth if self.min_boundary is not None else 0.0

    @property
    def max(self) -> float:
        return self.max_boundary.azimuth if self.max_boundary is not None else TWO_PI

    @property
    def size(self) -> float:
        return self.max - self.min

    @property
    def boundary_size(self) -> float:
        return 0.0

    @property
    def centroid(self) -> Point1S | None:
        return self.midpoint

    def is_full(self) -> bool:
        return self.min_boundary is None

    def is_empty(self) -> bool:
        return False

    def wraps_zero(self) -> bool:
        """Return True if the interval crosses the zero azimuth."""
        if self.is_full():
            return False
        min_az = self.min_boundary._normalized(self.min_boundary.point)
        max_az = self.max_boundary._normalized(self.max_boundary.point)
        return max_az < min_az

    def classify(self, point: Point1S | float) -> RegionLocation:
        if self.is_full():
            return RegionLocation.INSIDE

        min_loc = self.min_boundary.classify(point)
        max_loc = self.max_boundary.classify(point)

        if self.wraps_zero():
            outside = min_loc == HyperplaneLocation.PLUS and max_loc == HyperplaneLocation.PLUS
        else:
            outside = min_loc == HyperplaneLocation.PLUS or max_loc == HyperplaneLocation.PLUS

        if outside:
            return RegionLocation.OUTSIDE
        if HyperplaneLocation.ON in (min_loc, max_loc):
            return RegionLocation.BOUNDARY
        return RegionLocation.INSIDE

    def contains(self, point: Point1S | float) -> bool:
        return self.classify(point) != RegionLocation.OUTSIDE

    def project(self, point: Point1S | float) -> Point1S | None:
        """Return the boundary point closest to ``point``, or None for the full circle."""
        if self.is_full():
            return None
        pt = _as_point(point)
        min_dist = self.min_boundary.point.distance(pt)
        max_dist = self.max_boundary.point.distance(pt)
        return self.min_boundary.point if min_dist <= max_dist else self.max_boundary.point

    def to_convex(self) -> list[ConvexAngularInterval]:
        """Split the interval into convex pieces.

        Intervals wider than pi are divided at their midpoint.
        """
        if self.is_full():
            return [ConvexAngularInterval.full()]

        precision = self.min_boundary.precision
        if precision.lte(self.size, math.pi):
            return [ConvexAngularInterval(self.min_boundary, self.max_boundary, self.midpoint)]

        return [
            ConvexAngularInterval._create(
                self.min_boundary, CutAngle.create_positive_facing(self.midpoint, precision)
            ),
            ConvexAngularInterval._create(
                CutAngle.create_negative_facing(self.midpoint, precision), self.max_boundary
            ),
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}[min= {self.min}, max= {self.max}]"


class ConvexAngularInterval(AngularInterval):
    """An angular interval that is either full or at most pi wide."""

    __slots__ = ()

    _FULL: ConvexAngularInterval

    @classmethod
    def _create(cls, min_boundary: CutAngle, max_boundary: CutAngle) -> ConvexAngularInterval:
        interval = super()._create(min_boundary, max_boundary)
        if not interval.is_full() and not min_boundary.precision.lte(interval.size, math.pi):
            raise InvalidArgumentError(f"Interval is not convex: [{interval.min}, {interval.max}]")
        return interval

    def to_convex(self) -> list[ConvexAngularInterval]:
        return [self]

    def reverse(self) -> ConvexAngularInterval:
        """Return the same interval expressed with negated azimuths."""
        if self.is_full():
            return self
        return ConvexAngularInterval.of(
            Point1S.of(-self.max), Point1S.of(-self.min), self.min_boundary.precision
        )

    def split_diameter(self, splitter: CutAngle) -> Split[ConvexAngularInterval]:
        """Split the interval by the diameter through the splitter point.

        The diameter passes through the splitter point and its antipode. For
        a positive-facing splitter at ``s`` the minus half is ``[s - pi, s]``
        and the plus half is ``[s, s + pi]``; a negative-facing splitter
        swaps the halves. An interval touching the diameter only at its
        endpoints is not split.
        """
        precision = splitter.precision
        s = splitter.point.normalized_azimuth
        opposite = s + math.pi

        if self.is_full():
            upper = ConvexAngularInterval.of(s, opposite, precision)
            lower = ConvexAngularInterval.of(opposite, s, precision)
            if splitter.positive_facing:
                return Split(lower, upper)
            return Split(upper, lower)

        # center of the plus half of the splitter
        plus_center = Point1S.of(s + 0.5 * math.pi if splitter.positive_facing else s - 0.5 * math.pi)

        def side(point: Point1S) -> int:
            return precision.compare(0.5 * math.pi, plus_center.distance(point))

        min_side = side(self.min_boundary.point)
        max_side = side(self.max_boundary.point)

        if min_side == 0 and max_side == 0:
            min_side = max_side = side(self.midpoint)

        if min_side >= 0 and max_side >= 0:
            return Split(None, self)
        if min_side <= 0 and max_side <= 0:
            return Split(self, None)

        if min_side > 0:
            # leaves the plus half through its upper end
            crossing = Point1S.of(plus_center.normalized_azimuth + 0.5 * math.pi)
            plus = ConvexAngularInterval.of_cuts(
                self.min_boundary, CutAngle.create_positive_facing(crossing, precision)
            )
            minus = ConvexAngularInterval.of_cuts(
                CutAngle.create_negative_facing(crossing, precision), self.max_boundary
            )
        else:
            # enters the plus half through its lower end
            crossing = Point1S.of(plus_center.normalized_azimuth - 0.5 * math.pi)
            minus = ConvexAngularInterval.of_cuts(
                self.min_boundary, CutAngle.create_positive_facing(crossing, precision)
            )
            plus = ConvexAngularInterval.of_cuts(
                CutAngle.create_negative_facing(crossing, precision), self.max_boundary
            )

        return Split(minus, plus)


def _validate_interval_values(a: Point1S, b: Point1S) -> None:
    if not a.is_finite() or not b.is_finite():
        raise InvalidArgumentError(f"Invalid angular interval: [{a.azimuth}, {b.azimuth}]")


AngularInterval._FULL = AngularInterval(None, None, None)
ConvexAngularInterval._FULL = ConvexAngularInterval(None, None, None)
