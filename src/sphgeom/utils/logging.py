"""Logging utilities for Sphgeom."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a batch processing run."""

    processed_count: int = 0
    error_count: int = 0
    total_size: float = 0.0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    def start(self) -> None:
        """Mark the start of the run."""
        self.start_time = time.perf_counter()

    def finish(self) -> None:
        """Mark the end of the run."""
        self.end_time = time.perf_counter()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sphgeom")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_region_start(self, region_name: str) -> None:
        """Log start of region processing."""
        self._logger.debug("Processing region", region=region_name)

    def log_region_complete(
        self,
        region_name: str,
        size: float,
        path_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful region processing."""
        self._logger.info(
            "Region processed",
            region=region_name,
            size=size,
            paths=path_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.total_size += size

    def log_region_error(self, region_name: str, error: Exception) -> None:
        """Log region processing error."""
        self._logger.error(
            "Region processing failed",
            region=region_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((region_name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
