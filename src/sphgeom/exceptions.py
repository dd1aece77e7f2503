"""Exception hierarchy for Sphgeom."""


class SphGeomError(Exception):
    """Base exception for all Sphgeom errors."""

    pass


class InvalidArgumentError(SphGeomError, ValueError):
    """Degenerate or malformed input passed to a constructor or factory."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidStateError(SphGeomError, RuntimeError):
    """Operation not allowed in the current state of a builder or region."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GeometryError(SphGeomError):
    """Errors in geometric calculations."""

    pass


class NonConvexBoundsError(GeometryError, InvalidArgumentError):
    """Bounding great circles do not enclose a convex region."""

    def __init__(self, bounds: object) -> None:
        self.bounds = bounds
        super().__init__(f"Bounding hyperplanes do not produce a convex region: {bounds}")


class RegionFileError(SphGeomError):
    """Error reading or validating a region definition file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read region file '{path}': {reason}")


class ReportWriteError(SphGeomError):
    """Error writing a region report."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write report '{path}': {reason}")


class RegionProcessingError(SphGeomError):
    """Error processing a single region definition."""

    def __init__(self, region_name: str, reason: str) -> None:
        self.region_name = region_name
        self.reason = reason
        super().__init__(f"Error processing region '{region_name}': {reason}")
