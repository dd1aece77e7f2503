"""Arbitrary subsets of a single great circle."""

from __future__ import annotations

from collections.abc import Iterable

from sphgeom.core.angular import AngularInterval
from sphgeom.core.arc import GreatArc
from sphgeom.core.circle import GreatCircle
from sphgeom.domain import TWO_PI, Point2S, RegionLocation


class GreatCircleSubset:
    """A possibly disconnected subset of a great circle.

    The subset is held as sorted, pairwise disjoint angular intervals in
    the subspace of ``circle``. Touching or overlapping arcs are merged,
    including across the zero azimuth.
    """

    __slots__ = ("circle", "intervals")

    def __init__(self, circle: GreatCircle, intervals: list[AngularInterval]) -> None:
        self.circle = circle
        self.intervals = intervals

    @classmethod
    def from_arcs(cls, circle: GreatCircle, arcs: Iterable[GreatArc]) -> GreatCircleSubset:
        """Create the union of ``arcs``, all of which must lie on ``circle``.

        Arcs on a circle equivalent to ``circle`` keep their intervals; other
        arcs are re-expressed through their endpoints, so they must have the
        same orientation as ``circle``.
        """
        precision = circle.precision
        spans: list[tuple[float, float]] = []

        for arc in arcs:
            if arc.is_full():
                return cls(circle, [AngularInterval.full()])
            if arc.circle is circle or arc.circle.eq(circle):
                start = arc.interval.min_boundary.point.normalized_azimuth
            else:
                start = circle.azimuth(arc.start_point)
            spans.append((start, start + arc.size))

        if not spans:
            return cls(circle, [])

        spans.sort()
        merged: list[list[float]] = [list(spans[0])]
        for start, end in spans[1:]:
            current = merged[-1]
            if precision.lte(start, current[1]):
                current[1] = max(current[1], end)
            else:
                merged.append([start, end])

        # join the last span with the first when it wraps around zero
        if len(merged) > 1 and precision.gte(merged[-1][1], merged[0][0] + TWO_PI):
            last = merged.pop()
            merged[0] = [last[0], max(last[1], merged[0][1] + TWO_PI)]

        for start, end in merged:
            if precision.gte(end - start, TWO_PI):
                return cls(circle, [AngularInterval.full()])

        merged.sort()
        intervals = [AngularInterval.of(start, end, precision) for start, end in merged]
        return cls(circle, intervals)

    @property
    def size(self) -> float:
        return sum(interval.size for interval in self.intervals)

    def is_full(self) -> bool:
        return len(self.intervals) == 1 and self.intervals[0].is_full()

    def is_empty(self) -> bool:
        return not self.intervals

    def classify(self, point: Point2S) -> RegionLocation:
        if self.is_empty() or not self.circle.contains(point):
            return RegionLocation.OUTSIDE

        sub_point = self.circle.to_subspace(point)
        result = RegionLocation.OUTSIDE
        for interval in self.intervals:
            location = interval.classify(sub_point)
            if location == RegionLocation.INSIDE:
                return location
            if location == RegionLocation.BOUNDARY:
                result = location
        return result

    def to_convex(self) -> list[GreatArc]:
        """Return the subset as a list of great arcs no longer than pi (or full)."""
        return [
            GreatArc.from_interval(self.circle, convex)
            for interval in self.intervals
            for convex in interval.to_convex()
        ]

    def __repr__(self) -> str:
        return f"GreatCircleSubset[circle= {self.circle}, intervals= {self.intervals}]"
