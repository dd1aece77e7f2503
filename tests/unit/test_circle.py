"""Unit tests for great circles."""

import math

import numpy as np
import pytest

from sphgeom.core import GreatCircle
from sphgeom.domain import HyperplaneLocation, Point1S, Point2S, Transform2S
from sphgeom.exceptions import InvalidArgumentError

PI = math.pi


def assert_point_eq(expected: Point2S, actual: Point2S) -> None:
    assert expected.distance(actual) == pytest.approx(0.0, abs=1e-8), f"{expected} != {actual}"


def assert_vector(expected, actual) -> None:
    np.testing.assert_allclose(actual, expected, atol=1e-10)


class TestConstruction:
    """Tests for GreatCircle factories."""

    def test_from_points_frame(self, precision) -> None:
        """The first point is the zero azimuth and the pole follows the right-hand rule."""
        circle = GreatCircle.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision)
        assert_vector([0.0, 0.0, 1.0], circle.pole)
        assert_vector([1.0, 0.0, 0.0], circle.u)
        assert_vector([0.0, 1.0, 0.0], circle.v)

    def test_from_pole_frame_is_orthonormal(self, precision) -> None:
        """from_pole picks an orthonormal frame."""
        circle = GreatCircle.from_pole([1.0, 2.0, 3.0], precision)
        assert np.linalg.norm(circle.pole) == pytest.approx(1.0)
        assert np.dot(circle.pole, circle.u) == pytest.approx(0.0, abs=1e-12)
        assert_vector(np.cross(circle.pole, circle.u), circle.v)

    def test_from_pole_and_u(self, precision) -> None:
        """The reference direction is projected onto the circle plane."""
        circle = GreatCircle.from_pole_and_u(Point2S.PLUS_K, [1.0, 0.0, 5.0], precision)
        assert_vector([1.0, 0.0, 0.0], circle.u)
        assert_vector([0.0, 1.0, 0.0], circle.v)

    def test_from_pole_and_parallel_u(self, precision) -> None:
        """A reference direction parallel to the pole is rejected."""
        with pytest.raises(InvalidArgumentError):
            GreatCircle.from_pole_and_u(Point2S.PLUS_K, [0.0, 0.0, 2.0], precision)

    @pytest.mark.parametrize(
        "b",
        [Point2S.PLUS_I, Point2S.MINUS_I, Point2S.NaN, Point2S.POSITIVE_INFINITY, Point2S.of(math.inf, 0.3)],
        ids=["equal", "antipodal", "nan", "infinite", "infinite-azimuth"],
    )
    def test_from_invalid_points(self, precision, b: Point2S) -> None:
        """Equal, antipodal and non-finite points do not define a circle."""
        with pytest.raises(InvalidArgumentError):
            GreatCircle.from_points(Point2S.PLUS_I, b, precision)

    def test_zero_pole(self, precision) -> None:
        """A zero pole vector is rejected."""
        with pytest.raises(InvalidArgumentError):
            GreatCircle.from_pole([0.0, 0.0, 0.0], precision)


class TestClassification:
    """Tests for offsets and classification."""

    def test_pole_side_is_minus(self, precision) -> None:
        """Points on the pole side have negative offsets."""
        circle = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        assert circle.offset(Point2S.PLUS_K) == pytest.approx(-0.5 * PI)
        assert circle.offset(Point2S.MINUS_K) == pytest.approx(0.5 * PI)
        assert circle.classify(Point2S.PLUS_K) == HyperplaneLocation.MINUS
        assert circle.classify(Point2S.MINUS_K) == HyperplaneLocation.PLUS
        assert circle.classify(Point2S.PLUS_I) == HyperplaneLocation.ON
        assert circle.contains(Point2S.of(1.0, 0.5 * PI + 1e-12))

    def test_minus_and_plus_points(self, precision) -> None:
        """The deepest points of each side are the pole and its antipode."""
        circle = GreatCircle.from_pole(Point2S.PLUS_J, precision)
        assert_point_eq(Point2S.PLUS_J, circle.minus_point)
        assert_point_eq(Point2S.MINUS_J, circle.plus_point)


class TestSubspace:
    """Tests for conversions between the sphere and the circle."""

    def test_azimuth(self, precision) -> None:
        """Azimuths are measured from u toward v."""
        circle = GreatCircle.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision)
        assert circle.azimuth(Point2S.PLUS_J) == pytest.approx(0.5 * PI)
        assert circle.azimuth(Point2S.MINUS_J) == pytest.approx(1.5 * PI)
        assert circle.azimuth(Point2S.of(0.25 * PI, 0.25 * PI)) == pytest.approx(0.25 * PI)

    def test_round_trip(self, precision) -> None:
        """Points on the circle survive conversion to the subspace and back."""
        circle = GreatCircle.from_points(Point2S.PLUS_J, Point2S.PLUS_K, precision)
        for azimuth in (0.0, 1.0, 3.0, 5.5):
            point = circle.to_space(Point1S.of(azimuth))
            assert circle.contains(point)
            assert circle.to_subspace(point).normalized_azimuth == pytest.approx(azimuth)

    def test_project(self, precision) -> None:
        """Points are projected onto the circle along meridians."""
        circle = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        projected = circle.project(Point2S.of(1.0, 0.3))
        assert circle.contains(projected)
        assert projected.azimuth == pytest.approx(1.0)


class TestOrientation:
    """Tests for reversal, transforms and circle relations."""

    def test_reverse(self, precision) -> None:
        """Reversal swaps the sides but keeps the zero azimuth."""
        circle = GreatCircle.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision)
        reversed_circle = circle.reverse()
        assert_vector([0.0, 0.0, -1.0], reversed_circle.pole)
        assert_vector(circle.u, reversed_circle.u)
        assert reversed_circle.classify(Point2S.PLUS_K) == HyperplaneLocation.PLUS
        assert not circle.similar_orientation(reversed_circle)
        assert not circle.eq(reversed_circle)
        assert circle.eq(reversed_circle.reverse())

    def test_transform(self, precision) -> None:
        """A quarter turn about +x moves the +z pole to -y."""
        circle = GreatCircle.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision)
        rotated = circle.transform(Transform2S.create_rotation(Point2S.PLUS_I, 0.5 * PI))
        assert_vector([0.0, -1.0, 0.0], rotated.pole)

    def test_reflection_reverses_pole(self, precision) -> None:
        """Reflecting through a plane containing the pole reverses the circle."""
        circle = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        reflected = circle.transform(Transform2S.create_reflection(Point2S.PLUS_I))
        assert_vector([0.0, 0.0, -1.0], reflected.pole)

    def test_reflection_across_itself(self, precision) -> None:
        """Points on the mirror plane are fixed, so the frame is unchanged."""
        circle = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        reflected = circle.transform(Transform2S.create_reflection(Point2S.PLUS_K))
        assert reflected.eq(circle)

    def test_intersection(self, precision) -> None:
        """The intersection follows the cross product of the poles."""
        a = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        b = GreatCircle.from_pole(Point2S.PLUS_I, precision)
        assert_point_eq(Point2S.PLUS_J, a.intersection(b))
        assert_point_eq(Point2S.MINUS_J, b.intersection(a))
        assert a.intersection(a.reverse()) is None

    def test_angle(self, precision) -> None:
        """Angles are signed by the intersection point when one is given."""
        a = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        b = GreatCircle.from_pole(Point2S.PLUS_I, precision)
        assert a.angle(b) == pytest.approx(0.5 * PI)
        assert a.angle(b, Point2S.PLUS_J) == pytest.approx(0.5 * PI)
        assert a.angle(b, Point2S.MINUS_J) == pytest.approx(-0.5 * PI)


class TestArcs:
    """Tests for arcs created from circles."""

    def test_span(self, precision) -> None:
        """The span covers the whole circle."""
        span = GreatCircle.from_pole(Point2S.PLUS_K, precision).span()
        assert span.is_full()
        assert span.size == pytest.approx(2 * PI)
        assert span.start_point is None

    def test_arc_from_azimuths(self, precision) -> None:
        """An arc of half the circle runs between the poles."""
        circle = GreatCircle.from_points(Point2S.PLUS_J, Point2S.PLUS_K, precision)
        arc = circle.arc(0.5 * PI, 1.5 * PI)
        assert_point_eq(Point2S.PLUS_K, arc.start_point)
        assert_point_eq(Point2S.MINUS_K, arc.end_point)
        assert arc.size == pytest.approx(PI)

    def test_arc_from_points(self, precision) -> None:
        """Sphere points are converted to azimuths."""
        circle = GreatCircle.from_points(Point2S.PLUS_I, Point2S.PLUS_J, precision)
        arc = circle.arc(Point2S.PLUS_J, Point2S.MINUS_I)
        assert arc.size == pytest.approx(0.5 * PI)

    def test_wide_arc_rejected(self, precision) -> None:
        """Arcs wider than pi are not convex."""
        circle = GreatCircle.from_pole(Point2S.PLUS_K, precision)
        with pytest.raises(InvalidArgumentError):
            circle.arc(0.0, 1.5 * PI)
