"""Unit tests for one-dimensional circle partitioning.

Tests cover:
- CutAngle offsets, classification and reversal
- AngularInterval construction, wrapping and classification
- ConvexAngularInterval reversal and diameter splitting
"""

import math

import pytest

from sphgeom.core import AngularInterval, ConvexAngularInterval, CutAngle
from sphgeom.domain import HyperplaneLocation, Point1S, RegionLocation, SplitLocation
from sphgeom.exceptions import InvalidArgumentError

PI = math.pi


def assert_interval(interval: AngularInterval, min_value: float, max_value: float) -> None:
    assert interval.min == pytest.approx(min_value, abs=1e-10)
    assert interval.max == pytest.approx(max_value, abs=1e-10)


class TestCutAngle:
    """Tests for CutAngle."""

    def test_positive_facing(self, precision) -> None:
        """Azimuths above a positive-facing cut are on the plus side."""
        cut = CutAngle.create_positive_facing(1.0, precision)
        assert cut.classify(1.5) == HyperplaneLocation.PLUS
        assert cut.classify(0.5) == HyperplaneLocation.MINUS
        assert cut.classify(1.0) == HyperplaneLocation.ON
        assert cut.offset(1.5) == pytest.approx(0.5)

    def test_negative_facing(self, precision) -> None:
        """Negative-facing cuts swap the sides."""
        cut = CutAngle.create_negative_facing(1.0, precision)
        assert cut.classify(1.5) == HyperplaneLocation.MINUS
        assert cut.classify(0.5) == HyperplaneLocation.PLUS
        assert cut.offset(0.5) == pytest.approx(0.5)

    def test_offsets_use_normalized_azimuths(self, precision) -> None:
        """Equivalent azimuths classify the same way."""
        cut = CutAngle.create_positive_facing(1.0, precision)
        assert cut.classify(1.5 + 2 * PI) == HyperplaneLocation.PLUS
        assert cut.classify(-2 * PI + 1.0) == HyperplaneLocation.ON

    def test_values_near_two_pi_are_zero(self, precision) -> None:
        """Azimuths just below 2pi are measured as zero."""
        cut = CutAngle.create_negative_facing(0.0, precision)
        assert cut.classify(2 * PI - 1e-12) == HyperplaneLocation.ON

    def test_reverse(self, precision) -> None:
        """Reversal flips the facing but keeps the point."""
        cut = CutAngle.create_positive_facing(1.0, precision)
        reversed_cut = cut.reverse()
        assert not reversed_cut.positive_facing
        assert reversed_cut.point == cut.point
        assert not cut.similar_orientation(reversed_cut)
        assert cut.eq(reversed_cut.reverse(), precision)


class TestAngularInterval:
    """Tests for AngularInterval."""

    def test_simple_interval(self, precision) -> None:
        """A small interval keeps its bounds and midpoint."""
        interval = AngularInterval.of(0.5, 1.5, precision)
        assert_interval(interval, 0.5, 1.5)
        assert interval.size == pytest.approx(1.0)
        assert interval.midpoint.azimuth == pytest.approx(1.0)
        assert not interval.wraps_zero()
        assert not interval.is_full()

    def test_max_is_kept_above_min(self, precision) -> None:
        """Intervals crossing zero get a maximum above 2pi."""
        interval = AngularInterval.of(1.5 * PI, 0.5 * PI, precision)
        assert_interval(interval, 1.5 * PI, 2.5 * PI)
        assert interval.wraps_zero()
        assert interval.classify(0.0) == RegionLocation.INSIDE
        assert interval.classify(PI) == RegionLocation.OUTSIDE
        assert interval.classify(0.5 * PI) == RegionLocation.BOUNDARY

    def test_equivalent_bounds_give_full_circle(self, precision) -> None:
        """Zero-width intervals are treated as the full circle."""
        interval = AngularInterval.of(1.0, 1.0 + 2 * PI, precision)
        assert interval.is_full()
        assert interval.size == pytest.approx(2 * PI)
        assert interval.classify(3.0) == RegionLocation.INSIDE
        assert interval.project(3.0) is None

    def test_non_finite_bounds(self, precision) -> None:
        """NaN and infinite bounds are rejected."""
        with pytest.raises(InvalidArgumentError):
            AngularInterval.of(math.nan, 1.0, precision)
        with pytest.raises(InvalidArgumentError):
            AngularInterval.of(0.0, math.inf, precision)

    def test_of_cuts_in_any_order(self, precision) -> None:
        """Cuts may be passed in either order."""
        lower = CutAngle.create_negative_facing(1.0, precision)
        upper = CutAngle.create_positive_facing(2.0, precision)
        assert_interval(AngularInterval.of_cuts(lower, upper), 1.0, 2.0)
        assert_interval(AngularInterval.of_cuts(upper, lower), 1.0, 2.0)
        assert AngularInterval.of_cuts(lower, lower).is_full()

    def test_project(self, precision) -> None:
        """Projection returns the nearest boundary point."""
        interval = AngularInterval.of(1.0, 2.0, precision)
        assert interval.project(0.8).azimuth == pytest.approx(1.0)
        assert interval.project(2.5).azimuth == pytest.approx(2.0)

    def test_to_convex_splits_wide_intervals(self, precision) -> None:
        """Intervals wider than pi are divided at the midpoint."""
        pieces = AngularInterval.of(0.0, 1.5 * PI, precision).to_convex()
        assert len(pieces) == 2
        assert_interval(pieces[0], 0.0, 0.75 * PI)
        assert_interval(pieces[1], 0.75 * PI, 1.5 * PI)

        single = AngularInterval.of(0.0, 0.5 * PI, precision).to_convex()
        assert len(single) == 1
        assert isinstance(single[0], ConvexAngularInterval)


class TestConvexAngularInterval:
    """Tests for ConvexAngularInterval."""

    def test_wide_interval_rejected(self, precision) -> None:
        """Convex intervals cannot exceed pi."""
        with pytest.raises(InvalidArgumentError):
            ConvexAngularInterval.of(0.0, 1.5 * PI, precision)

    def test_semicircle_allowed(self, precision) -> None:
        """Exactly pi is convex."""
        assert ConvexAngularInterval.of(0.0, PI, precision).size == pytest.approx(PI)

    def test_reverse(self, precision) -> None:
        """Reversal negates and swaps the bounds."""
        reversed_interval = ConvexAngularInterval.of(0.5, 1.5, precision).reverse()
        assert_interval(reversed_interval, -1.5, -0.5)
        assert ConvexAngularInterval.full().reverse().is_full()

    def test_split_full_positive(self, precision) -> None:
        """The full circle splits into two semicircles."""
        split = ConvexAngularInterval.full().split_diameter(
            CutAngle.create_positive_facing(0.5 * PI, precision)
        )
        assert split.location == SplitLocation.BOTH
        assert_interval(split.minus, 1.5 * PI, 2.5 * PI)
        assert_interval(split.plus, 0.5 * PI, 1.5 * PI)

    def test_split_full_negative(self, precision) -> None:
        """Negative-facing splitters swap the halves."""
        split = ConvexAngularInterval.full().split_diameter(
            CutAngle.create_negative_facing(0.0, precision)
        )
        assert_interval(split.minus, 0.0, PI)
        assert_interval(split.plus, PI, 2 * PI)

    def test_split_one_side(self, precision) -> None:
        """Intervals on one side are returned whole."""
        interval = ConvexAngularInterval.of(0.1, 0.5 * PI, precision)
        split = interval.split_diameter(CutAngle.create_negative_facing(0.0, precision))
        assert split.location == SplitLocation.MINUS
        assert split.minus is interval

        wrapped = ConvexAngularInterval.of(-0.4 * PI, 0.4 * PI, precision)
        split = wrapped.split_diameter(CutAngle.create_negative_facing(0.5 * PI, precision))
        assert split.location == SplitLocation.PLUS

    def test_split_touching_endpoints(self, precision) -> None:
        """Intervals touching the diameter only at their ends are not split."""
        interval = ConvexAngularInterval.of(0.0, PI, precision)
        split = interval.split_diameter(CutAngle.create_positive_facing(PI, precision))
        assert split.location == SplitLocation.MINUS

    @pytest.mark.parametrize(
        ("azimuth", "positive", "minus", "plus"),
        [
            (PI, False, (PI, 1.5 * PI), (0.5 * PI, PI)),
            (PI, True, (0.5 * PI, PI), (PI, 1.5 * PI)),
            (0.0, False, (0.5 * PI, PI), (PI, 1.5 * PI)),
            (0.0, True, (PI, 1.5 * PI), (0.5 * PI, PI)),
        ],
    )
    def test_split_both(self, precision, azimuth, positive, minus, plus) -> None:
        """Intervals crossing the diameter are divided at the crossing."""
        interval = ConvexAngularInterval.of(0.5 * PI, -0.5 * PI, precision)
        splitter = CutAngle.from_point_and_direction(Point1S.of(azimuth), positive, precision)
        split = interval.split_diameter(splitter)
        assert split.location == SplitLocation.BOTH
        assert_interval(split.minus, *minus)
        assert_interval(split.plus, *plus)

    def test_split_interval_on_splitter_boundary(self, precision) -> None:
        """An interval ending at the diameter stays on the side it covers."""
        interval = ConvexAngularInterval.of(0.5 * PI, -0.5 * PI, precision)
        split = interval.split_diameter(CutAngle.create_negative_facing(0.5 * PI, precision))
        assert split.location == SplitLocation.MINUS
