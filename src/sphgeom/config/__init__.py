"""Configuration management for sphgeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PrecisionConfig: Floating point tolerance settings
- OutputConfig: Angle unit and formatting settings
- LoggingConfig: Logging settings
- SphGeomSettings: Main application settings
"""

from sphgeom.config.settings import (
    AngleUnit,
    LoggingConfig,
    OutputConfig,
    PrecisionConfig,
    SphGeomSettings,
    get_default_settings,
)

__all__ = [
    "AngleUnit",
    "LoggingConfig",
    "OutputConfig",
    "PrecisionConfig",
    "SphGeomSettings",
    "get_default_settings",
]
