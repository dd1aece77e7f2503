"""CLI application entry point for sphgeom.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from sphgeom import __version__
from sphgeom.cli.output import (
    console,
    create_progress,
    print_error,
    print_file_info,
    print_header,
    print_region,
    print_report,
    print_step,
    print_success,
)
from sphgeom.config import AngleUnit, LoggingConfig, OutputConfig, PrecisionConfig, SphGeomSettings
from sphgeom.core import RegionProcessor
from sphgeom.exceptions import RegionFileError, ReportWriteError, SphGeomError
from sphgeom.io import RegionDefinition, RegionReader, ReportWriter, parse_pair

# Create the Typer app
app = typer.Typer(
    name="sphgeom",
    help="Measure and classify regions of the unit sphere.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Sphgeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Measure and classify regions of the unit sphere."""


def _settings(
    degrees: bool,
    epsilon: float,
    decimals: int,
    log_file: Path | None,
    log_level: str,
) -> SphGeomSettings:
    try:
        return SphGeomSettings(
            precision=PrecisionConfig(epsilon=epsilon),
            output=OutputConfig(
                angle_unit=AngleUnit.DEGREES if degrees else AngleUnit.RADIANS,
                decimals=decimals,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValueError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1) from None


@app.command()
def polygon(
    vertices: Annotated[
        list[str],
        typer.Argument(
            help="Vertex loop as 'azimuth,polar' pairs; the region lies on the pole side of each edge",
            show_default=False,
        ),
    ],
    point: Annotated[
        list[str] | None,
        typer.Option(
            "--point",
            "-p",
            help="Probe point 'azimuth,polar' to classify (repeatable)",
        ),
    ] = None,
    degrees: Annotated[
        bool,
        typer.Option("--degrees", "-d", help="Angles are given and printed in degrees"),
    ] = False,
    epsilon: Annotated[
        float,
        typer.Option("--epsilon", "-e", help="Comparison tolerance in radians"),
    ] = 1e-10,
    decimals: Annotated[
        int,
        typer.Option("--decimals", help="Decimals in printed values", min=0, max=15),
    ] = 6,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Measure a single polygon given by its vertex loop.

    Example:
        sphgeom polygon --degrees 0,90 90,90 0,0 -p 30,60
    """
    settings = _settings(degrees, epsilon, decimals, None, "WARNING")

    try:
        definition = RegionDefinition(
            name="polygon",
            vertices=[parse_pair(text) for text in vertices],
            probes=[parse_pair(text) for text in point or []],
        )
    except SphGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except ValueError as e:
        print_error("Invalid polygon", details=str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        print_header(__version__)
        print_step("Polygon")

    processor = RegionProcessor(settings, quiet=True)
    try:
        result = processor.process_region(definition, settings.output.angle_unit)
    except SphGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    print_region(result, settings.output.angle_unit.value)


@app.command()
def batch(
    region_file: Annotated[
        Path,
        typer.Argument(help="Path to a JSON region definition file", show_default=False),
    ],
    report: Annotated[
        Path | None,
        typer.Option("--report", "-r", help="Write a JSON report to this path"),
    ] = None,
    default_report: Annotated[
        bool,
        typer.Option(
            "--write-report",
            "-w",
            help="Write the report next to the input ({name}-report.json)",
        ),
    ] = False,
    degrees: Annotated[
        bool,
        typer.Option("--degrees", "-d", help="Report centroids in degrees"),
    ] = False,
    epsilon: Annotated[
        float,
        typer.Option("--epsilon", "-e", help="Comparison tolerance in radians"),
    ] = 1e-10,
    decimals: Annotated[
        int,
        typer.Option("--decimals", help="Decimals in reported values", min=0, max=15),
    ] = 6,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Measure every region of a region definition file.

    Example:
        sphgeom batch regions.json --report report.json
    """
    if not region_file.exists():
        print_error(
            f"Input file not found: {region_file}",
            details=f"The file '{region_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    settings = _settings(degrees, epsilon, decimals, log_file, log_level)
    report_path = report
    if report_path is None and default_report:
        report_path = ReportWriter.get_report_path(region_file)

    try:
        reader = RegionReader(region_file)
        reader.load()

        if not quiet:
            print_header(__version__)
            print_step("Loading regions")
            print_file_info(str(region_file), reader.region_count, reader.angle_unit.value)
            print_step("Processing")

        processor = RegionProcessor(settings, quiet=quiet)
        if quiet:
            result = processor.process_file(region_file, report_path)
        else:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Processing {reader.region_count} regions", total=reader.region_count
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                result = processor.process_file(
                    region_file, report_path, progress_callback=update_progress
                )

        stats = processor.stats
        if not quiet:
            print_report(result)
            print_success(
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                errors=stats.error_count,
                report_path=str(report_path) if report_path is not None else None,
            )

    except RegionFileError as e:
        print_error(f"Could not read region file: {e.reason}")
        raise typer.Exit(code=1) from None
    except ReportWriteError as e:
        print_error(f"Could not write report: {e.reason}")
        raise typer.Exit(code=1) from None
    except SphGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if stats.error_count:
        raise typer.Exit(code=2)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
