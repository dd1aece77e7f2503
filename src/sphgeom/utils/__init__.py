"""Utility functions for sphgeom.

This module provides utility functions including:

- Logging setup and configuration
- Vector helpers (normalization, robust angles, rotation matrices)
- Progress reporting helpers
"""

from sphgeom.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)
from sphgeom.utils.vectors import (
    angle_between,
    as_vector,
    normalize,
    orthogonal,
    orthogonal_component,
    reflection_matrix,
    rotation_matrix,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "angle_between",
    "as_vector",
    "configure_logging",
    "normalize",
    "orthogonal",
    "orthogonal_component",
    "reflection_matrix",
    "rotation_matrix",
]
