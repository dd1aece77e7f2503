"""Command-line interface for sphgeom.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Polygon measurement with probe point classification
- Batch processing of region files with JSON reports
- Quiet output mode
"""

from sphgeom.cli.app import cli, main

__all__ = ["cli", "main"]
