"""Connected sequences of great arcs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from sphgeom.core.arc import GreatArc
from sphgeom.core.precision import PrecisionContext
from sphgeom.domain import Point2S
from sphgeom.exceptions import InvalidStateError

if TYPE_CHECKING:
    from sphgeom.core.tree import RegionBSPTree2S


class GreatArcPath:
    """An ordered chain of great arcs where each arc starts at the end of the previous one.

    A path is either empty, a single full arc, or a sequence of bounded
    arcs. Instances are immutable; use ``GreatArcPath.Builder`` or the
    factory methods to create them.

    Examples:
        >>> precision = PrecisionContext(1e-6)
        >>> path = GreatArcPath.from_vertex_loop(
        ...     [Point2S.PLUS_I, Point2S.PLUS_J, Point2S.PLUS_K], precision
        ... )
        >>> len(path.arcs), path.is_closed()
        (3, True)
    """

    __slots__ = ("_arcs",)

    _EMPTY: GreatArcPath

    def __init__(self, arcs: list[GreatArc]) -> None:
        self._arcs = tuple(arcs)

    @classmethod
    def empty(cls) -> GreatArcPath:
        return cls._EMPTY

    @classmethod
    def builder(cls, precision: PrecisionContext | None = None) -> GreatArcPath.Builder:
        return cls.Builder(precision)

    @classmethod
    def from_arcs(cls, arcs: Iterable[GreatArc]) -> GreatArcPath:
        """Create a path from connected arcs.

        Raises:
            InvalidStateError: If consecutive arcs are not connected
        """
        builder = cls.Builder(None)
        for arc in arcs:
            builder.append(arc)
        return builder.build()

    @classmethod
    def from_vertices(
        cls, vertices: Iterable[Point2S], precision: PrecisionContext, close: bool = False
    ) -> GreatArcPath:
        """Create a path through ``vertices``; consecutive equivalent vertices are skipped."""
        builder = cls.Builder(precision)
        builder.append_vertices(vertices)
        return builder.close() if close else builder.build()

    @classmethod
    def from_vertex_loop(cls, vertices: Iterable[Point2S], precision: PrecisionContext) -> GreatArcPath:
        """Create a closed path through ``vertices``."""
        return cls.from_vertices(vertices, precision, close=True)

    @property
    def arcs(self) -> list[GreatArc]:
        return list(self._arcs)

    @property
    def start_arc(self) -> GreatArc | None:
        return self._arcs[0] if self._arcs else None

    @property
    def end_arc(self) -> GreatArc | None:
        return self._arcs[-1] if self._arcs else None

    @property
    def start_vertex(self) -> Point2S | None:
        arc = self.start_arc
        return arc.start_point if arc is not None else None

    @property
    def end_vertex(self) -> Point2S | None:
        arc = self.end_arc
        return arc.end_point if arc is not None else None

    @property
    def vertices(self) -> list[Point2S]:
        """Path vertices; a closed path repeats its start vertex at the end."""
        result = []
        if self.start_vertex is not None:
            result.append(self.start_vertex)
        for arc in self._arcs:
            if arc.end_point is not None:
                result.append(arc.end_point)
        return result

    def is_empty(self) -> bool:
        return not self._arcs

    def is_closed(self) -> bool:
        end_arc = self.end_arc
        if end_arc is None:
            return False
        start = self.start_vertex
        end = end_arc.end_point
        return start is not None and end is not None and start.eq(end, end_arc.precision)

    def to_tree(self) -> RegionBSPTree2S:
        """Build a region whose boundary is this path; the inside lies on the pole side of each arc."""
        from sphgeom.core.tree import RegionBSPTree2S

        tree = RegionBSPTree2S.empty()
        tree.insert(self)
        return tree

    def __iter__(self) -> Iterator[GreatArc]:
        return iter(self._arcs)

    def __len__(self) -> int:
        return len(self._arcs)

    def __repr__(self) -> str:
        if self.is_empty():
            return "GreatArcPath[empty= true]"
        if len(self._arcs) == 1 and self._arcs[0].is_full():
            return f"GreatArcPath[full= true, circle= {self._arcs[0].circle}]"
        return f"GreatArcPath[vertices= {[str(v) for v in self.vertices]}]"

    class Builder:
        """Incrementally builds a path by appending and prepending vertices or arcs.

        Adding vertices requires a precision context; arcs carry their own.
        """

        def __init__(self, precision: PrecisionContext | None) -> None:
            self.precision = precision
            self._appended: list[GreatArc] = []
            self._prepended: list[GreatArc] = []
            self._start_vertex: Point2S | None = None
            self._end_vertex: Point2S | None = None
            self._end_vertex_precision: PrecisionContext | None = None

        @property
        def start_arc(self) -> GreatArc | None:
            if self._prepended:
                return self._prepended[-1]
            return self._appended[0] if self._appended else None

        @property
        def end_arc(self) -> GreatArc | None:
            if self._appended:
                return self._appended[-1]
            return self._prepended[0] if self._prepended else None

        def append(self, item: GreatArc | Point2S) -> GreatArcPath.Builder:
            """Append an arc or a vertex to the end of the path.

            Raises:
                InvalidStateError: If the arc does not start at the current end
                    vertex, the path ends in a full arc, or no precision is set
                    for vertices
            """
            if isinstance(item, GreatArc):
                self._validate_connected(self.end_arc, item)
                self._append_internal(item)
                return self

            precision = self._point_precision()
            if self._end_vertex is None:
                end = self.end_arc
                if end is not None:
                    raise InvalidStateError(f"Cannot add point {item} after full arc: {end}")
                self._start_vertex = item
                self._end_vertex = item
                self._end_vertex_precision = precision
            elif not self._end_vertex.eq(item, self._end_vertex_precision):
                self._append_internal(
                    GreatArc.from_points(self._end_vertex, item, self._end_vertex_precision)
                )
            return self

        def append_vertices(self, vertices: Iterable[Point2S]) -> GreatArcPath.Builder:
            for vertex in vertices:
                self.append(vertex)
            return self

        def prepend(self, item: GreatArc | Point2S) -> GreatArcPath.Builder:
            """Prepend an arc or a vertex to the start of the path.

            Raises:
                InvalidStateError: If the arc does not end at the current start
                    vertex, the path starts with a full arc, or no precision is
                    set for vertices
            """
            if isinstance(item, GreatArc):
                self._validate_connected(item, self.start_arc)
                self._prepend_internal(item)
                return self

            precision = self._point_precision()
            if self._start_vertex is None:
                start = self.start_arc
                if start is not None:
                    raise InvalidStateError(f"Cannot add point {item} before full arc: {start}")
                self._start_vertex = item
                self._end_vertex = item
                self._end_vertex_precision = precision
            elif not item.eq(self._start_vertex, precision):
                self._prepend_internal(GreatArc.from_points(item, self._start_vertex, precision))
            return self

        def prepend_vertices(self, vertices: Iterable[Point2S]) -> GreatArcPath.Builder:
            """Prepend vertices so that they appear in the given order at the start of the path."""
            for vertex in reversed(list(vertices)):
                self.prepend(vertex)
            return self

        def close(self) -> GreatArcPath:
            """Connect the end of the path back to its start and build it.

            Raises:
                InvalidStateError: If the path is full or holds a single point
            """
            if self.end_arc is not None:
                if self._start_vertex is None or self._end_vertex is None:
                    raise InvalidStateError("Unable to close path: path is full")
                if not self._end_vertex.eq(self._start_vertex, self._end_vertex_precision):
                    self._append_internal(
                        GreatArc.from_points(
                            self._end_vertex, self._start_vertex, self._end_vertex_precision
                        )
                    )
            return self.build()

        def build(self) -> GreatArcPath:
            """Build the path and reset the arc lists of the builder.

            Raises:
                InvalidStateError: If only a single point was added
            """
            arcs = list(reversed(self._prepended)) + self._appended
            if not arcs and self._start_vertex is not None:
                raise InvalidStateError(
                    f"Unable to create path; only a single point provided: {self._start_vertex}"
                )
            self._appended = []
            self._prepended = []
            return GreatArcPath(arcs) if arcs else GreatArcPath.empty()

        def _validate_connected(self, previous: GreatArc | None, following: GreatArc | None) -> None:
            if previous is None or following is None:
                return
            next_start = following.start_point
            previous_end = previous.end_point
            if (
                next_start is None
                or previous_end is None
                or not next_start.eq(previous_end, previous.precision)
            ):
                raise InvalidStateError(
                    f"Path arcs are not connected: previous= {previous}, next= {following}"
                )

        def _point_precision(self) -> PrecisionContext:
            if self.precision is None:
                raise InvalidStateError("Unable to create arc: no point precision specified")
            return self.precision

        def _append_internal(self, arc: GreatArc) -> None:
            if not self._appended and not self._prepended:
                self._start_vertex = arc.start_point
            self._end_vertex = arc.end_point
            self._end_vertex_precision = arc.precision
            self._appended.append(arc)

        def _prepend_internal(self, arc: GreatArc) -> None:
            self._start_vertex = arc.start_point
            if not self._prepended and not self._appended:
                self._end_vertex = arc.end_point
                self._end_vertex_precision = arc.precision
            self._prepended.append(arc)


GreatArcPath._EMPTY = GreatArcPath([])
