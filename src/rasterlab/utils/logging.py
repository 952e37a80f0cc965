"""Logging utilities for rasterlab."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so a second call replaces them
_HANDLER_TAG = "_rasterlab_handler"


@dataclass
class RunStats:
    """Statistics accumulated over algorithm runs."""

    run_count: int = 0
    total_steps: int = 0
    export_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    timings_ms: dict[str, list[float]] = field(default_factory=dict)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
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
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(console_handler, _HANDLER_TAG, True)
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

    logger = structlog.get_logger("rasterlab")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RunLogger:
    """Logger for tracking algorithm runs and report exports."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def log_run_start(
        self,
        algorithm: str,
        a: tuple[int, int],
        b: tuple[int, int],
    ) -> None:
        """Log start of an algorithm run."""
        self._logger.debug("Running algorithm", algorithm=algorithm, a=a, b=b)

    def log_run_complete(
        self,
        algorithm: str,
        step_count: int,
        duration_ms: float,
    ) -> None:
        """Log a finished algorithm run."""
        self._logger.info(
            "Algorithm finished",
            algorithm=algorithm,
            steps=step_count,
            duration_ms=round(duration_ms, 4),
        )
        self._stats.run_count += 1
        self._stats.total_steps += step_count
        self._stats.timings_ms.setdefault(algorithm, []).append(duration_ms)

    def log_export(self, path: str, step_count: int) -> None:
        """Log a written report."""
        self._logger.info("Report saved", path=path, steps=step_count)
        self._stats.export_count += 1

    def log_export_error(self, path: str, error: Exception) -> None:
        """Log a report that could not be written."""
        self._logger.error(
            "Report export failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
