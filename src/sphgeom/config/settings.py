"""Configuration settings for Sphgeom."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class AngleUnit(str, Enum):
    """Unit used when reading and printing angles."""

    RADIANS = "radians"
    DEGREES = "degrees"


class PrecisionConfig(BaseModel):
    """Configuration for floating point comparisons.

    All geometric comparisons (point equality, hyperplane classification,
    interval containment) go through a precision context built from this
    configuration. The tolerance is absolute and measured in radians.
    """

    epsilon: float = Field(
        default=1e-10,
        gt=0.0,
        le=1e-2,
        description="Absolute tolerance for floating point comparisons",
    )


class OutputConfig(BaseModel):
    """Configuration for console output and reports."""

    angle_unit: AngleUnit = Field(
        default=AngleUnit.RADIANS,
        description="Unit used for reported angles",
    )
    decimals: int = Field(
        default=6,
        ge=0,
        le=15,
        description="Number of decimals in printed values",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SphGeomSettings(BaseModel):
    """Main application settings."""

    precision: PrecisionConfig = Field(default_factory=PrecisionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SphGeomSettings:
    """Get default application settings."""
    return SphGeomSettings()
