"""Region file I/O layer for sphgeom.

This module handles reading region definition files and writing
reports. Files are JSON documents validated with pydantic.

Key classes:
- RegionReader: Load and validate region definition files
- ReportWriter: Save batch reports
"""

from sphgeom.io.converter import pair_to_point, pairs_to_points, parse_pair, point_to_pair
from sphgeom.io.models import (
    ProbeResult,
    RegionDefinition,
    RegionFile,
    RegionReport,
    RegionResult,
)
from sphgeom.io.reader import RegionReader
from sphgeom.io.writer import ReportWriter

__all__ = [
    "ProbeResult",
    "RegionDefinition",
    "RegionFile",
    "RegionReader",
    "RegionReport",
    "RegionResult",
    "ReportWriter",
    "pair_to_point",
    "pairs_to_points",
    "parse_pair",
    "point_to_pair",
]
