"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from sphgeom.io import RegionReport, RegionResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for region processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sphgeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(path: str, region_count: int, angle_unit: str) -> None:
    """Print region file information."""
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {region_count} regions {SYM_DOT} angles in {angle_unit}")


def _format_pair(pair: tuple[float, float] | None) -> str:
    if pair is None:
        return "-"
    return f"({pair[0]}, {pair[1]})"


def print_region(result: RegionResult, unit: str) -> None:
    """Print the measurements of a single region.

    Args:
        result: Region measurements
        unit: Unit of the centroid angles
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Size", f"{result.size}")
    table.add_row("Boundary size", f"{result.boundary_size}")
    table.add_row(f"Centroid ({unit})", _format_pair(result.centroid))
    table.add_row("Boundary paths", str(result.path_count))
    table.add_row("Convex areas", str(result.convex_count))
    console.print(table)

    if result.probes:
        console.print("\n[bold]Probes[/bold]")
        for probe in result.probes:
            console.print(f"  {_format_pair(probe.point)} {SYM_DOT} {probe.location}")


def print_report(report: RegionReport) -> None:
    """Print a summary table of a batch report."""
    table = Table(title=None, header_style="bold")
    table.add_column("Region")
    table.add_column("Size", justify="right")
    table.add_column("Boundary", justify="right")
    table.add_column(f"Centroid ({report.angle_unit.value})")
    table.add_column("Paths", justify="right")

    for result in report.regions:
        table.add_row(
            result.name,
            f"{result.size}",
            f"{result.boundary_size}",
            _format_pair(result.centroid),
            str(result.path_count),
        )
    console.print(table)

    for name, reason in report.errors.items():
        console.print(f"  [red]{SYM_ERR}[/red] {name}: {reason}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    total_time_s: float,
    processed: int,
    errors: int,
    report_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of regions processed
        errors: Number of regions that failed
        report_path: Path of the written report, if any
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if report_path is not None:
        line = Text("  ")
        line.append(report_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} regions {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
