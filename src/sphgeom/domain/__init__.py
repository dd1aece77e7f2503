"""Domain models for sphgeom.

This module contains the immutable value types shared by all geometry code:

- Point1S: A point on the unit circle
- Point2S: A point on the unit sphere
- Transform2S: A rotation and/or reflection of the sphere
- HyperplaneLocation, RegionLocation, SplitLocation, RegionCutRule: Location enums
- Split: Minus/plus result of splitting an object by a hyperplane
"""

from sphgeom.domain.partition import (
    HyperplaneLocation,
    RegionCutRule,
    RegionLocation,
    Split,
    SplitLocation,
)
from sphgeom.domain.point import (
    HALF_PI,
    TWO_PI,
    Point1S,
    Point2S,
    normalize_azimuth,
    polar_azimuth_key,
)
from sphgeom.domain.transform import Transform2S

__all__: list[str] = [
    # Constants
    "HALF_PI",
    "TWO_PI",
    # Enums
    "HyperplaneLocation",
    "RegionCutRule",
    "RegionLocation",
    "SplitLocation",
    # Core types
    "Point1S",
    "Point2S",
    "Split",
    "Transform2S",
    # Helpers
    "normalize_azimuth",
    "polar_azimuth_key",
]
