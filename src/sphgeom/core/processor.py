"""Batch processing of region definitions.

This module builds spherical regions from file definitions and measures
them. A failing region is logged and counted; the rest of the batch
continues.

Key components:
- build_region: Build a region tree from a definition
- RegionProcessor: Orchestrates a batch run and its report
"""

import time
from collections.abc import Callable
from pathlib import Path

from sphgeom.config import AngleUnit, SphGeomSettings
from sphgeom.core.path import GreatArcPath
from sphgeom.core.precision import PrecisionContext
from sphgeom.core.tree import RegionBSPTree2S
from sphgeom.exceptions import RegionProcessingError, SphGeomError
from sphgeom.io import (
    ProbeResult,
    RegionDefinition,
    RegionFile,
    RegionReader,
    RegionReport,
    RegionResult,
    ReportWriter,
    pairs_to_points,
    point_to_pair,
)
from sphgeom.utils import ProcessingLogger, ProcessingStats, configure_logging


def build_region(
    definition: RegionDefinition, unit: AngleUnit, precision: PrecisionContext
) -> RegionBSPTree2S:
    """Build the region of a definition: the outer loop minus every hole.

    Loops enclose their area on the pole side of each edge, so a hole is
    written with the same winding as the region it is removed from.

    Raises:
        InvalidArgumentError: If consecutive vertices are antipodal
        InvalidStateError: If a loop collapses to a single point
    """
    tree = GreatArcPath.from_vertex_loop(pairs_to_points(definition.vertices, unit), precision).to_tree()
    for hole in definition.holes:
        hole_tree = GreatArcPath.from_vertex_loop(pairs_to_points(hole, unit), precision).to_tree()
        tree.difference(hole_tree)
    return tree


class RegionProcessor:
    """Orchestrates measurement of region definitions.

    Example:
        settings = SphGeomSettings()
        processor = RegionProcessor(settings)
        report = processor.process_file(Path("regions.json"))
    """

    def __init__(self, config: SphGeomSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings for precision, output units and logging
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)
        self.precision = PrecisionContext.from_config(config.precision)

    @property
    def stats(self) -> ProcessingStats:
        return self.processing_logger.stats

    def process_region(self, definition: RegionDefinition, unit: AngleUnit) -> RegionResult:
        """Build and measure a single region.

        Raises:
            RegionProcessingError: If the region cannot be built
        """
        start_time = time.perf_counter()
        self.processing_logger.log_region_start(definition.name)

        try:
            tree = build_region(definition, unit, self.precision)
        except SphGeomError as e:
            raise RegionProcessingError(definition.name, str(e)) from e

        output = self.config.output
        centroid = tree.centroid
        probes = [
            ProbeResult(point=pair, location=tree.classify(point).name)
            for pair, point in zip(definition.probes, pairs_to_points(definition.probes, unit))
        ]

        result = RegionResult(
            name=definition.name,
            size=round(tree.size, output.decimals),
            boundary_size=round(tree.boundary_size, output.decimals),
            centroid=(
                point_to_pair(centroid, output.angle_unit, output.decimals)
                if centroid is not None
                else None
            ),
            path_count=len(tree.boundary_paths),
            convex_count=len(tree.to_convex()),
            probes=probes,
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )

        self.processing_logger.log_region_complete(
            definition.name, tree.size, result.path_count, result.duration_ms
        )
        return result

    def process(
        self,
        region_file: RegionFile,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> RegionReport:
        """Process every region of a loaded file.

        Args:
            region_file: Validated region definitions
            progress_callback: Optional callback(completed, total, region_name, success)

        Returns:
            Report with one result per successful region and the errors of the rest
        """
        stats = self.stats
        stats.start()

        report = RegionReport(angle_unit=self.config.output.angle_unit)
        total = len(region_file.regions)
        self.logger.info("Starting batch", regions=total, unit=region_file.angle_unit.value)

        for completed, definition in enumerate(region_file.regions, start=1):
            success = True
            try:
                report.regions.append(self.process_region(definition, region_file.angle_unit))
            except RegionProcessingError as e:
                success = False
                self.processing_logger.log_region_error(definition.name, e)
                report.errors[definition.name] = e.reason

            if progress_callback is not None:
                progress_callback(completed, total, definition.name, success)

        stats.finish()
        report.total_size = round(stats.total_size, self.config.output.decimals)

        self.logger.info(
            "Batch complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            total_size=round(stats.total_size, 6),
            duration_seconds=round(stats.duration_seconds, 3),
        )
        return report

    def process_file(
        self,
        region_path: Path,
        report_path: Path | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> RegionReport:
        """Read a region file, process it and optionally write the report.

        Raises:
            RegionFileError: If the file cannot be read or validated
            ReportWriteError: If the report cannot be written
        """
        reader = RegionReader(region_path)
        region_file = reader.load()
        self.logger.info("Region file loaded", path=str(region_path), regions=reader.region_count)

        report = self.process(region_file, progress_callback=progress_callback)

        if report_path is not None:
            ReportWriter(report_path).write(report)
            self.logger.info("Report written", path=str(report_path))

        return report
