"""Great arcs: convex subsets of a great circle."""

from __future__ import annotations

from sphgeom.core.angular import ConvexAngularInterval, CutAngle
from sphgeom.core.circle import GreatCircle
from sphgeom.core.precision import PrecisionContext
from sphgeom.domain import (
    HyperplaneLocation,
    Point2S,
    RegionLocation,
    Split,
    SplitLocation,
    Transform2S,
)


class GreatArc:
    """A connected portion of a great circle no longer than pi, or the full circle.

    The arc is stored as a convex angular interval in the subspace of its
    circle and runs counterclockwise (from ``u`` toward ``v``) from its start
    point to its end point. A full arc has no start or end point.
    """

    __slots__ = ("circle", "interval")

    def __init__(self, circle: GreatCircle, interval: ConvexAngularInterval) -> None:
        self.circle = circle
        self.interval = interval

    @classmethod
    def from_interval(cls, circle: GreatCircle, interval: ConvexAngularInterval) -> GreatArc:
        return cls(circle, interval)

    @classmethod
    def from_points(cls, start: Point2S, end: Point2S, precision: PrecisionContext) -> GreatArc:
        """Create the shorter arc from ``start`` to ``end``.

        Raises:
            InvalidArgumentError: If the points are equal or antipodal
        """
        circle = GreatCircle.from_points(start, end, precision)
        interval = ConvexAngularInterval.of(
            circle.to_subspace(start), circle.to_subspace(end), precision
        )
        return cls(circle, interval)

    @property
    def hyperplane(self) -> GreatCircle:
        return self.circle

    @property
    def precision(self) -> PrecisionContext:
        return self.circle.precision

    @property
    def start_point(self) -> Point2S | None:
        if self.interval.is_full():
            return None
        return self.circle.to_space(self.interval.min_boundary.point)

    @property
    def end_point(self) -> Point2S | None:
        if self.interval.is_full():
            return None
        return self.circle.to_space(self.interval.max_boundary.point)

    @property
    def midpoint(self) -> Point2S | None:
        if self.interval.is_full():
            return None
        return self.circle.to_space(self.interval.midpoint)

    @property
    def size(self) -> float:
        return self.interval.size

    def is_full(self) -> bool:
        return self.interval.is_full()

    def is_empty(self) -> bool:
        return False

    def classify(self, point: Point2S) -> RegionLocation:
        """Classify ``point`` relative to the arc.

        Points off the circle are OUTSIDE; the arc endpoints are BOUNDARY.
        """
        if self.circle.classify(point) != HyperplaneLocation.ON:
            return RegionLocation.OUTSIDE
        return self.interval.classify(self.circle.to_subspace(point))

    def contains(self, point: Point2S) -> bool:
        return self.classify(point) != RegionLocation.OUTSIDE

    def closest(self, point: Point2S) -> Point2S:
        """Return the point on the arc nearest to ``point``."""
        projected = self.circle.to_subspace(point)
        if self.interval.classify(projected) != RegionLocation.OUTSIDE:
            return self.circle.to_space(projected)

        start = self.start_point
        end = self.end_point
        return start if point.distance(start) <= point.distance(end) else end

    def to_convex(self) -> list[GreatArc]:
        return [self]

    def split(self, splitter: GreatCircle) -> Split[GreatArc]:
        """Split the arc by ``splitter``.

        Returns a split with neither side set when the arc lies on the
        splitter circle or its reverse.
        """
        intersection = splitter.intersection(self.circle)
        if intersection is None:
            return Split()

        # the circle poles point to the minus side, hence the negative-facing cut
        sub_splitter = CutAngle.create_negative_facing(
            self.circle.to_subspace(intersection), splitter.precision
        )
        sub_split = self.interval.split_diameter(sub_splitter)
        location = sub_split.location

        if location == SplitLocation.MINUS:
            return Split(self, None)
        if location == SplitLocation.PLUS:
            return Split(None, self)
        return Split(
            GreatArc(self.circle, sub_split.minus),
            GreatArc(self.circle, sub_split.plus),
        )

    def reverse(self) -> GreatArc:
        """Return the arc traversed in the opposite direction, on the reversed circle."""
        return GreatArc(self.circle.reverse(), self.interval.reverse())

    def transform(self, transform: Transform2S) -> GreatArc:
        return GreatArc(self.circle.transform(transform), self.interval)

    def __repr__(self) -> str:
        if self.is_full():
            return f"GreatArc[full= true, circle= {self.circle}]"
        return f"GreatArc[start= {self.start_point}, end= {self.end_point}]"
