"""Unit tests for joining loose arcs into paths."""

import random

import pytest

from sphgeom.core import (
    GreatArc,
    InteriorAngleGreatArcConnector,
    connect_maximized,
    connect_minimized,
)
from sphgeom.domain import Point2S


def _loop(points: list[Point2S], precision) -> list[GreatArc]:
    return [
        GreatArc.from_points(points[i], points[(i + 1) % len(points)], precision)
        for i in range(len(points))
    ]


@pytest.fixture
def bowtie_arcs(precision) -> list[GreatArc]:
    """Two small triangles touching at +x."""
    vertex = Point2S.PLUS_I
    first = [
        vertex,
        Point2S.from_vector([1.0, 0.2, -0.1]),
        Point2S.from_vector([1.0, 0.2, 0.1]),
    ]
    second = [
        vertex,
        Point2S.from_vector([1.0, -0.2, 0.1]),
        Point2S.from_vector([1.0, -0.2, -0.1]),
    ]
    return _loop(first, precision) + _loop(second, precision)


class TestConnector:
    """Tests for InteriorAngleGreatArcConnector."""

    def test_shuffled_loop(self, precision) -> None:
        """Arcs given in any order are joined into a single closed path."""
        arcs = _loop([Point2S.PLUS_I, Point2S.PLUS_J, Point2S.PLUS_K], precision)
        shuffled = arcs[:]
        random.Random(3).shuffle(shuffled)

        paths = connect_minimized(shuffled)
        assert len(paths) == 1
        assert len(paths[0]) == 3
        assert paths[0].is_closed()

    def test_open_chain(self, precision) -> None:
        """Unclosed chains are returned from their first arc."""
        arcs = [
            GreatArc.from_points(Point2S.PLUS_J, Point2S.PLUS_K, precision),
            GreatArc.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision),
        ]
        paths = connect_minimized(arcs)
        assert len(paths) == 1
        assert not paths[0].is_closed()
        assert paths[0].start_vertex.distance(Point2S.PLUS_I) == pytest.approx(0.0, abs=1e-10)

    def test_disjoint_arcs(self, precision) -> None:
        """Unrelated arcs stay in separate paths."""
        arcs = [
            GreatArc.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision),
            GreatArc.from_points(Point2S.PLUS_K, Point2S.MINUS_I, precision),
        ]
        assert len(connect_minimized(arcs)) == 2

    def test_minimized_keeps_touching_loops_apart(self, bowtie_arcs) -> None:
        """The smallest interior angle keeps each triangle in its own path."""
        paths = connect_minimized(bowtie_arcs)
        assert len(paths) == 2
        assert all(path.is_closed() and len(path) == 3 for path in paths)

    def test_maximized_joins_touching_loops(self, bowtie_arcs) -> None:
        """The largest interior angle walks through the shared vertex."""
        paths = connect_maximized(bowtie_arcs)
        assert len(paths) == 1
        assert len(paths[0]) == 6

    def test_explicit_connections(self, precision) -> None:
        """connect links arcs in the given order before searching."""
        connector = InteriorAngleGreatArcConnector()
        connector.connect(_loop([Point2S.PLUS_I, Point2S.PLUS_J, Point2S.PLUS_K], precision))
        paths = connector.connect_all()
        assert len(paths) == 1
        assert paths[0].is_closed()

    def test_connector_resets(self, precision) -> None:
        """The connector is empty after connect_all."""
        connector = InteriorAngleGreatArcConnector()
        connector.add(GreatArc.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision))
        assert len(connector.connect_all()) == 1
        assert connector.connect_all() == []
