"""Report writer for batch results."""

from pathlib import Path

from sphgeom.exceptions import ReportWriteError
from sphgeom.io.models import RegionReport


class ReportWriter:
    """Writes region reports as JSON.

    Example:
        writer = ReportWriter(Path("report.json"))
        writer.write(report)
    """

    def __init__(self, path: Path, indent: int = 2) -> None:
        self._path = path
        self._indent = indent

    @staticmethod
    def get_report_path(region_path: Path) -> Path:
        """Return the default report path for a region file.

        Example:
            regions.json -> regions-report.json
        """
        return region_path.with_name(f"{region_path.stem}-report.json")

    def write(self, report: RegionReport) -> Path:
        """Write ``report`` and return the path written.

        Raises:
            ReportWriteError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(report.model_dump_json(indent=self._indent), encoding="utf-8")
        except OSError as e:
            raise ReportWriteError(str(self._path), str(e)) from e
        return self._path
