"""Region file reader.

This module provides the RegionReader class for loading region
definition files into validated models.
"""

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from sphgeom.config import AngleUnit
from sphgeom.exceptions import RegionFileError
from sphgeom.io.models import RegionDefinition, RegionFile


class RegionReader:
    """Loads JSON region definition files.

    Example:
        reader = RegionReader(Path("regions.json"))
        reader.load()
        for definition in reader.iter_regions():
            print(definition.name)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the region definition file
        """
        self._path = path
        self._file: RegionFile | None = None

    def load(self) -> RegionFile:
        """Read and validate the file.

        Returns:
            Parsed region file

        Raises:
            RegionFileError: If the file is missing, unreadable or invalid
        """
        if not self._path.exists():
            raise RegionFileError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise RegionFileError(str(self._path), str(e)) from e

        try:
            self._file = RegionFile.model_validate_json(text)
        except ValidationError as e:
            raise RegionFileError(str(self._path), f"{e.error_count()} validation error(s): {e}") from e

        names = [region.name for region in self._file.regions]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise RegionFileError(str(self._path), f"duplicate region names: {', '.join(duplicates)}")

        return self._file

    @property
    def region_file(self) -> RegionFile:
        """Return the loaded file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._file is None:
            raise RuntimeError("Region file not loaded. Call load() first.")
        return self._file

    @property
    def angle_unit(self) -> AngleUnit:
        return self.region_file.angle_unit

    @property
    def region_count(self) -> int:
        return len(self.region_file.regions)

    def iter_regions(self) -> Iterator[RegionDefinition]:
        """Iterate over the region definitions in file order."""
        yield from self.region_file.regions
