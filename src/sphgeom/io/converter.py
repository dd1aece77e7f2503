"""Converters between file angle pairs and domain points."""

import math
from collections.abc import Iterable

from sphgeom.config import AngleUnit
from sphgeom.domain import Point2S
from sphgeom.exceptions import InvalidArgumentError


def pair_to_point(pair: tuple[float, float], unit: AngleUnit) -> Point2S:
    """Convert an ``(azimuth, polar)`` pair in ``unit`` to a point."""
    azimuth, polar = pair
    if unit == AngleUnit.DEGREES:
        azimuth = math.radians(azimuth)
        polar = math.radians(polar)
    return Point2S.of(azimuth, polar)


def pairs_to_points(pairs: Iterable[tuple[float, float]], unit: AngleUnit) -> list[Point2S]:
    return [pair_to_point(pair, unit) for pair in pairs]


def point_to_pair(point: Point2S, unit: AngleUnit, decimals: int | None = None) -> tuple[float, float]:
    """Convert a point to an ``(azimuth, polar)`` pair in ``unit``, optionally rounded."""
    azimuth, polar = point.azimuth, point.polar
    if unit == AngleUnit.DEGREES:
        azimuth = math.degrees(azimuth)
        polar = math.degrees(polar)
    if decimals is not None:
        azimuth = round(azimuth, decimals)
        polar = round(polar, decimals)
    return azimuth, polar


def parse_pair(text: str) -> tuple[float, float]:
    """Parse ``"azimuth,polar"`` command line text.

    Raises:
        InvalidArgumentError: If the text is not two comma separated numbers
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise InvalidArgumentError(f"Expected 'azimuth,polar', got '{text}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid angle pair '{text}': {e}") from e
