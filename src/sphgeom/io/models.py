"""File models for region definitions and reports.

Region files and reports are JSON documents validated with pydantic.
Points are ``[azimuth, polar]`` pairs in the unit named by the file.
"""

from pydantic import BaseModel, Field, field_validator

from sphgeom.config import AngleUnit

AnglePair = tuple[float, float]


class RegionDefinition(BaseModel):
    """A named region: an outer vertex loop with optional holes and probe points."""

    name: str = Field(min_length=1)
    vertices: list[AnglePair] = Field(description="Outer boundary loop, region on the pole side")
    holes: list[list[AnglePair]] = Field(default_factory=list)
    probes: list[AnglePair] = Field(default_factory=list)

    @field_validator("vertices")
    @classmethod
    def _check_vertices(cls, value: list[AnglePair]) -> list[AnglePair]:
        if len(value) < 3:
            raise ValueError("a region loop needs at least 3 vertices")
        return value

    @field_validator("holes")
    @classmethod
    def _check_holes(cls, value: list[list[AnglePair]]) -> list[list[AnglePair]]:
        for hole in value:
            if len(hole) < 3:
                raise ValueError("a hole loop needs at least 3 vertices")
        return value


class RegionFile(BaseModel):
    """Contents of a region definition file."""

    angle_unit: AngleUnit = AngleUnit.RADIANS
    regions: list[RegionDefinition] = Field(default_factory=list)


class ProbeResult(BaseModel):
    point: AnglePair
    location: str


class RegionResult(BaseModel):
    """Measurements of one processed region."""

    name: str
    size: float
    boundary_size: float
    centroid: AnglePair | None = None
    path_count: int
    convex_count: int
    probes: list[ProbeResult] = Field(default_factory=list)
    duration_ms: float = 0.0


class RegionReport(BaseModel):
    """Report of a batch run."""

    angle_unit: AngleUnit = AngleUnit.RADIANS
    regions: list[RegionResult] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    total_size: float = 0.0
