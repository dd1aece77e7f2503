"""Convex regions of the sphere.

A convex area is the intersection of the minus sides (pole sides) of a
set of great circles. It is stored through its boundary arcs: each
bounding circle trimmed by all of the others. The empty set of boundaries
is the full sphere.

Size follows the extended form of Girard's theorem: the sum of the
interior angles minus ``(n - 2) * pi``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from sphgeom.core.arc import GreatArc
from sphgeom.core.circle import GreatCircle
from sphgeom.core.connector import connect_minimized
from sphgeom.core.path import GreatArcPath
from sphgeom.core.precision import PrecisionContext
from sphgeom.domain import (
    TWO_PI,
    HyperplaneLocation,
    Point2S,
    RegionLocation,
    Split,
    SplitLocation,
    Transform2S,
)
from sphgeom.exceptions import InvalidStateError, NonConvexBoundsError
from sphgeom.utils.vectors import angle_between, normalize

if TYPE_CHECKING:
    from sphgeom.core.tree import RegionBSPTree2S

logger = logging.getLogger(__name__)

FULL_SIZE = 4.0 * math.pi
HALF_SIZE = TWO_PI

# Boundary sizes below this use the triangle fan centroid
TRIANGLE_FAN_CENTROID_THRESHOLD = 1e-2


class ConvexArea2S:
    """A convex region of the sphere defined by its boundary arcs.

    Attributes:
        boundaries: Minimal set of boundary arcs; the region lies on the
            minus side of each
    """

    __slots__ = ("_boundaries",)

    _FULL: ConvexArea2S

    def __init__(self, boundaries: Sequence[GreatArc]) -> None:
        self._boundaries = tuple(boundaries)

    @classmethod
    def full(cls) -> ConvexArea2S:
        return cls._FULL

    @classmethod
    def from_bounds(cls, *bounds: GreatCircle) -> ConvexArea2S:
        """Create the area on the minus side of every circle in ``bounds``.

        Redundant circles are accepted and left out of the boundaries.

        Raises:
            NonConvexBoundsError: If two bounds are reverses of each other or
                no area lies on the minus side of all of them

        Examples:
            >>> ConvexArea2S.from_bounds().is_full()
            True
        """
        arcs = _build_boundaries(bounds)
        return cls(arcs) if arcs else cls.full()

    @classmethod
    def from_vertices(
        cls, vertices: Iterable[Point2S], precision: PrecisionContext, close: bool = False
    ) -> ConvexArea2S:
        """Create the area bounded by the circles through consecutive vertices.

        Consecutive equivalent vertices are skipped. An empty vertex list
        gives the full sphere. Open vertex lists of two unique vertices give
        a hemisphere and of three a lune.

        Raises:
            InvalidStateError: If only a single unique vertex is given, or
                a closed loop has fewer than 3 unique vertices
        """
        unique: list[Point2S] = []
        for vertex in vertices:
            if not unique or not vertex.eq(unique[-1], precision):
                unique.append(vertex)

        if not unique:
            return cls.full()

        if close and len(unique) > 1 and unique[-1].eq(unique[0], precision):
            unique.pop()

        if len(unique) == 1:
            raise InvalidStateError("Unable to create convex area: only a single unique vertex provided")
        if close and len(unique) < 3:
            raise InvalidStateError(
                f"Unable to create convex area: a closed loop needs 3 unique vertices, got {len(unique)}"
            )

        circles = [
            GreatCircle.from_points(a, b, precision) for a, b in zip(unique, unique[1:])
        ]
        if close:
            circles.append(GreatCircle.from_points(unique[-1], unique[0], precision))

        return cls.from_bounds(*circles)

    @classmethod
    def from_vertex_loop(cls, vertices: Iterable[Point2S], precision: PrecisionContext) -> ConvexArea2S:
        return cls.from_vertices(vertices, precision, close=True)

    @classmethod
    def from_path(cls, path: GreatArcPath) -> ConvexArea2S:
        """Create the area bounded by the circles of the arcs in ``path``."""
        return cls.from_bounds(*(arc.circle for arc in path))

    @property
    def boundaries(self) -> list[GreatArc]:
        return list(self._boundaries)

    def is_full(self) -> bool:
        return not self._boundaries

    def is_empty(self) -> bool:
        return False

    @property
    def boundary_path(self) -> GreatArcPath:
        """The boundary arcs connected into a single path."""
        paths = connect_minimized(self._boundaries)
        return paths[0] if paths else GreatArcPath.empty()

    @property
    def vertices(self) -> list[Point2S]:
        return self.boundary_path.vertices

    @property
    def interior_angles(self) -> list[float]:
        """Interior angle at the end vertex of each arc of the boundary path."""
        arcs = self.boundary_path.arcs
        count = len(arcs)
        if count < 2:
            return []

        angles = []
        for i, current in enumerate(arcs):
            following = arcs[(i + 1) % count]
            angles.append(math.pi - current.circle.angle(following.circle, current.end_point))
        return angles

    @property
    def size(self) -> float:
        count = len(self._boundaries)
        if count == 0:
            return FULL_SIZE
        if count == 1:
            return HALF_SIZE

        angles = self.interior_angles
        return max(0.0, math.fsum(angles) - (len(angles) - 2) * math.pi)

    @property
    def boundary_size(self) -> float:
        return math.fsum(arc.size for arc in self._boundaries)

    @property
    def centroid(self) -> Point2S | None:
        """Centroid of the area, or None for the full sphere and hemispheres."""
        if len(self._boundaries) < 2:
            return None
        return Point2S.from_vector(self.weighted_centroid_vector)

    @property
    def weighted_centroid_vector(self) -> np.ndarray | None:
        """Centroid direction scaled by the area, or None for the full sphere.

        Weighted vectors of disjoint areas can be summed to get the weighted
        centroid of their union.
        """
        arcs = self._boundaries
        count = len(arcs)
        if count == 0:
            return None
        if count == 1:
            # hemisphere
            return arcs[0].circle.pole * HALF_SIZE
        if count == 2:
            return _lune_weighted_centroid(arcs[0], arcs[1])
        if self.boundary_size < TRIANGLE_FAN_CENTROID_THRESHOLD:
            return _triangle_fan_weighted_centroid(arcs)
        return np.sum([arc.size * arc.circle.pole for arc in arcs], axis=0)

    def classify(self, point: Point2S) -> RegionLocation:
        on_boundary = False
        for arc in self._boundaries:
            location = arc.circle.classify(point)
            if location == HyperplaneLocation.PLUS:
                return RegionLocation.OUTSIDE
            if location == HyperplaneLocation.ON:
                on_boundary = True
        return RegionLocation.BOUNDARY if on_boundary else RegionLocation.INSIDE

    def contains(self, point: Point2S) -> bool:
        return self.classify(point) != RegionLocation.OUTSIDE

    def project(self, point: Point2S) -> Point2S | None:
        """Return the closest boundary point, or None for the full sphere."""
        closest = None
        closest_dist = math.inf
        for arc in self._boundaries:
            projected = arc.closest(point)
            dist = point.distance(projected)
            if closest is None or dist < closest_dist:
                closest = projected
                closest_dist = dist
        return closest

    def trim(self, arc: GreatArc) -> GreatArc | None:
        """Return the portion of ``arc`` inside this area, or None if nothing remains."""
        remaining: GreatArc | None = arc
        for boundary in self._boundaries:
            remaining = remaining.split(boundary.circle).minus
            if remaining is None:
                break
        return remaining

    def split(self, splitter: GreatCircle) -> Split[ConvexArea2S]:
        """Split the area into the parts on the minus and plus sides of ``splitter``."""
        if self.is_full():
            return Split(
                ConvexArea2S([splitter.span()]),
                ConvexArea2S([splitter.reverse().span()]),
            )

        trimmed = self.trim(splitter.span())
        if trimmed is None:
            # the splitter misses the area; the first boundary tells which side it is on
            test_arc = self._boundaries[0]
            location = test_arc.split(splitter).location
            if location == SplitLocation.MINUS or (
                location == SplitLocation.NEITHER
                and splitter.similar_orientation(test_arc.circle)
            ):
                return Split(self, None)
            return Split(None, self)

        minus_boundaries = []
        plus_boundaries = []
        for boundary in self._boundaries:
            part = boundary.split(splitter)
            if part.minus is not None:
                minus_boundaries.append(part.minus)
            if part.plus is not None:
                plus_boundaries.append(part.plus)

        minus_boundaries.append(trimmed)
        plus_boundaries.append(trimmed.reverse())
        return Split(ConvexArea2S(minus_boundaries), ConvexArea2S(plus_boundaries))

    def transform(self, transform: Transform2S) -> ConvexArea2S:
        if self.is_full():
            return self

        reverse = not transform.preserves_orientation()
        boundaries = []
        for arc in self._boundaries:
            transformed = arc.transform(transform)
            boundaries.append(transformed.reverse() if reverse else transformed)
        return ConvexArea2S(boundaries)

    def to_tree(self) -> RegionBSPTree2S:
        from sphgeom.core.tree import RegionBSPTree2S

        return RegionBSPTree2S.from_boundaries(self._boundaries, full=True)

    def __repr__(self) -> str:
        return f"ConvexArea2S[boundaries= {list(self._boundaries)}]"


def _build_boundaries(bounds: Sequence[GreatCircle]) -> list[GreatArc]:
    """Trim each bounding circle by all of the others.

    Equivalent circles contribute a single boundary; the first occurrence
    is kept.
    """
    boundaries = []
    not_convex = False

    for outer_idx, circle in enumerate(bounds):
        arc: GreatArc | None = circle.span()
        for inner_idx, splitter in enumerate(bounds):
            if circle is splitter:
                if outer_idx > inner_idx:
                    # same instance listed twice
                    arc = None
                    break
                continue

            split = arc.split(splitter)
            if split.location == SplitLocation.NEITHER:
                if circle.similar_orientation(splitter):
                    if outer_idx > inner_idx:
                        arc = None
                else:
                    # coincident circles facing opposite ways leave no area
                    not_convex = True
                    break
            else:
                arc = split.minus

            if arc is None:
                break

        if not_convex:
            break
        if arc is not None:
            boundaries.append(arc)

    if not_convex or (bounds and not boundaries):
        logger.debug("Rejected %d bounds for convex area", len(bounds))
        raise NonConvexBoundsError(list(bounds))

    return boundaries


def _lune_weighted_centroid(a: GreatArc, b: GreatArc) -> np.ndarray:
    # the exact center of the lune stays accurate for very thin lunes
    centroid = a.midpoint.slerp(b.midpoint, 0.5).vector
    weight = a.size * float(np.dot(centroid, a.circle.pole)) + b.size * float(
        np.dot(centroid, b.circle.pole)
    )
    return centroid * weight


def _triangle_fan_weighted_centroid(arcs: Sequence[GreatArc]) -> np.ndarray:
    p0 = arcs[0].start_point
    v0 = p0.vector
    total = np.zeros(3)
    for arc in arcs[1:]:
        if arc.contains(p0):
            continue
        v1 = arc.start_point.vector
        v2 = arc.end_point.vector
        triangle_centroid = normalize(v0 + v1 + v2)
        weight = (
            _arc_centroid_contribution(v0, v1, triangle_centroid)
            + _arc_centroid_contribution(v1, v2, triangle_centroid)
            + _arc_centroid_contribution(v2, v0, triangle_centroid)
        )
        total = total + weight * triangle_centroid
    return total


def _arc_centroid_contribution(a: np.ndarray, b: np.ndarray, centroid: np.ndarray) -> float:
    length = angle_between(a, b)
    plane_normal = normalize(np.cross(a, b))
    return length * float(np.dot(centroid, plane_normal))


ConvexArea2S._FULL = ConvexArea2S([])
