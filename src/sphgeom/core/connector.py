"""Connect unordered great arcs into paths.

Boundary arcs extracted from a region tree come out in tree order. The
connector joins arcs whose end point matches the start point of another
arc. When several arcs start at the same point, the one making the
smallest (or largest) interior angle with the incoming arc is chosen,
which keeps regions touching at a single vertex in separate paths.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from sphgeom.core.arc import GreatArc
from sphgeom.core.path import GreatArcPath

logger = logging.getLogger(__name__)


class _ConnectableArc:
    __slots__ = ("arc", "start", "end", "next", "previous", "exported")

    def __init__(self, arc: GreatArc) -> None:
        self.arc = arc
        self.start = arc.start_point
        self.end = arc.end_point
        self.next: _ConnectableArc | None = None
        self.previous: _ConnectableArc | None = None
        self.exported = False

    def sort_key(self) -> tuple:
        if self.start is None:
            start_key = (math.inf, math.inf)
        else:
            start_key = (self.start.polar, self.start.azimuth)
        zero_size = self.arc.precision.eq_zero(self.arc.size)
        return (*start_key, zero_size, *self.arc.circle.pole.tolist())

    def can_connect_to(self, other: _ConnectableArc) -> bool:
        return (
            self.end is not None
            and other.start is not None
            and self.end.eq(other.start, self.arc.precision)
        )

    def end_points_eq(self, other: _ConnectableArc) -> bool:
        return (
            self.end is not None
            and other.end is not None
            and self.end.eq(other.end, self.arc.precision)
        )

    def connect_to(self, other: _ConnectableArc) -> None:
        self.next = other
        other.previous = self

    def mark_exported(self) -> bool:
        if self.exported:
            return False
        self.exported = True
        return True

    def export_path(self) -> _ConnectableArc | None:
        """Mark the chain containing this element and return its first element."""
        if not self.mark_exported():
            return None

        root = self
        current = self.next
        while current is not None and current.mark_exported():
            current = current.next

        current = self.previous
        while current is not None and current.mark_exported():
            root = current
            current = current.previous
        return root


class InteriorAngleGreatArcConnector:
    """Joins great arcs into paths, resolving ambiguous joins by interior angle.

    Args:
        minimize_interior_angles: Pick the candidate with the smallest interior
            angle when True, the largest otherwise
    """

    def __init__(self, minimize_interior_angles: bool = True) -> None:
        self.minimize_interior_angles = minimize_interior_angles
        self._elements: list[_ConnectableArc] = []

    def add(self, arcs: GreatArc | Iterable[GreatArc]) -> None:
        """Add arcs to be connected by a later ``connect_all`` call."""
        if isinstance(arcs, GreatArc):
            arcs = [arcs]
        self._elements.extend(_ConnectableArc(arc) for arc in arcs)

    def connect(self, arcs: Iterable[GreatArc]) -> None:
        """Add arcs and link them in the given order before any other search."""
        new_elements = [_ConnectableArc(arc) for arc in arcs]
        self._elements.extend(new_elements)
        for element in new_elements:
            self._make_forward_connection(element)

    def connect_all(self, arcs: Iterable[GreatArc] | None = None) -> list[GreatArcPath]:
        """Connect every added arc and return the resulting paths.

        The connector is reset afterwards.
        """
        if arcs is not None:
            self.add(arcs)

        self._elements.sort(key=_ConnectableArc.sort_key)
        for element in self._elements:
            self._follow_forward_connections(element)

        paths = []
        for element in self._elements:
            root = element.export_path()
            if root is not None:
                paths.append(self._to_path(root))

        logger.debug("Connected %d arcs into %d paths", len(self._elements), len(paths))
        self._elements = []
        return paths

    def _follow_forward_connections(self, start: _ConnectableArc) -> None:
        current: _ConnectableArc | None = start
        while current is not None and current.end is not None and current.next is None:
            current = self._make_forward_connection(current)

    def _make_forward_connection(self, element: _ConnectableArc) -> _ConnectableArc | None:
        if element.end is None:
            return None

        point_connections = []
        connections = []
        for candidate in self._elements:
            if (
                candidate is not element
                and candidate.previous is None
                and candidate.start is not None
                and element.can_connect_to(candidate)
            ):
                if element.end_points_eq(candidate):
                    point_connections.append(candidate)
                else:
                    connections.append(candidate)

        following = None
        if point_connections:
            following = self._select_point_connection(element, point_connections)
        elif connections:
            following = (
                connections[0]
                if len(connections) == 1
                else self._select_connection(element, connections)
            )

        if following is not None:
            element.connect_to(following)
        return following

    @staticmethod
    def _select_point_connection(
        incoming: _ConnectableArc, candidates: list[_ConnectableArc]
    ) -> _ConnectableArc:
        # zero-length arcs: prefer unconnected elements, then the smallest turn
        best = None
        best_angle = 0.0
        best_unconnected = False
        for candidate in candidates:
            angle = abs(incoming.arc.circle.angle(candidate.arc.circle))
            unconnected = candidate.next is None
            if (
                best is None
                or (not best_unconnected and unconnected)
                or (best_unconnected == unconnected and angle < best_angle)
            ):
                best = candidate
                best_angle = angle
                best_unconnected = unconnected
        return best

    def _select_connection(
        self, incoming: _ConnectableArc, candidates: list[_ConnectableArc]
    ) -> _ConnectableArc:
        circle = incoming.arc.circle
        end = incoming.end

        def interior_angle(candidate: _ConnectableArc) -> float:
            return math.pi - circle.angle(candidate.arc.circle, end)

        if self.minimize_interior_angles:
            return min(candidates, key=interior_angle)
        return max(candidates, key=interior_angle)

    @staticmethod
    def _to_path(root: _ConnectableArc) -> GreatArcPath:
        builder = GreatArcPath.builder(None)
        builder.append(root.arc)
        current = root.next
        while current is not None and current is not root:
            builder.append(current.arc)
            current = current.next
        return builder.build()


def connect_minimized(arcs: Iterable[GreatArc]) -> list[GreatArcPath]:
    """Connect arcs into paths, choosing the smallest interior angle at ambiguous vertices."""
    return InteriorAngleGreatArcConnector(minimize_interior_angles=True).connect_all(arcs)


def connect_maximized(arcs: Iterable[GreatArc]) -> list[GreatArcPath]:
    """Connect arcs into paths, choosing the largest interior angle at ambiguous vertices."""
    return InteriorAngleGreatArcConnector(minimize_interior_angles=False).connect_all(arcs)
