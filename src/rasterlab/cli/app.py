"""CLI application entry point for rasterlab.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from rasterlab import __version__
from rasterlab.cli.output import (
    console,
    print_algorithms,
    print_comparison,
    print_error,
    print_header,
    print_input,
    print_report_saved,
    print_run_summary,
    print_step,
    print_steps_table,
    print_warning,
)
from rasterlab.config import LoggingConfig, RasterSettings
from rasterlab.core import RasterEngine
from rasterlab.domain import Algorithm, Point
from rasterlab.exceptions import RasterLabError, ReportWriteError
from rasterlab.io import Report, ReportWriter
from rasterlab.utils import RunLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="rasterlab",
    help="Rasterize lines and circles with classic pixel algorithms.",
    add_completion=False,
    no_args_is_help=True,
)

StartOption = Annotated[
    tuple[int, int],
    typer.Option(
        "--start",
        "-a",
        help="First point X Y (circle: center)",
    ),
]
EndOption = Annotated[
    tuple[int, int],
    typer.Option(
        "--end",
        "-b",
        help="Second point X Y (circle: |X| is the radius)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]rasterlab[/bold blue] v{__version__}")
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
    """Rasterize lines and circles with classic pixel algorithms."""


def _build_settings(log_file: Path | None, log_level: str) -> RasterSettings:
    """Build settings from the logging options shared by all commands."""
    return RasterSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def _first_error(error: ValidationError) -> str:
    """Field name and message of the first validation failure."""
    detail = error.errors()[0]
    field = ".".join(str(part) for part in detail["loc"])
    return f"{field}: {detail['msg']}"


def _build_points(
    settings: RasterSettings, start: tuple[int, int], end: tuple[int, int]
) -> tuple[Point, Point]:
    """Validate raw coordinates against the configured range."""
    check = settings.coordinates.check
    a = Point(check(start[0]), check(start[1]))
    b = Point(check(end[0]), check(end[1]))
    return a, b


def _create_engine(settings: RasterSettings, quiet: bool) -> RasterEngine:
    """Configure logging and build an engine bound to the CLI logger."""
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return RasterEngine(RunLogger(logger))


@app.command()
def run(
    algorithm: Annotated[
        str,
        typer.Argument(
            help="Algorithm name or index (see 'rasterlab algorithms')",
            show_default=False,
        ),
    ],
    start: StartOption = (0, 0),
    end: EndOption = (0, 0),
    show_calculations: Annotated[
        bool,
        typer.Option(
            "--show-calculations",
            "-c",
            help="List every step with its note and intensity",
        ),
    ] = False,
    export: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Save a plain-text report to this path",
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option(
            "--title",
            "-t",
            help="Report title (default: algorithm name)",
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Run one algorithm and print the resulting pixels.

    Example:
        rasterlab run bresenham_line --start 0 0 --end 5 2 --show-calculations

    For the circle algorithm --start is the center and the magnitude of the
    X coordinate of --end is the radius.
    """
    try:
        settings = _build_settings(log_file, log_level)
        selected = _resolve_algorithm(algorithm)
        a, b = _build_points(settings, start, end)
        engine = _create_engine(settings, quiet)

        if not quiet:
            print_header(__version__)
            print_step("Input")
            print_input(selected, a, b)

        result = engine.run(selected, a, b)

        if not quiet:
            print_run_summary(len(result), result.elapsed_ms)
            if show_calculations:
                print_step("Steps")
                print_steps_table(result.steps)

        if export is not None:
            report = Report.from_result(
                result,
                title=title or f"{settings.report.default_title}: {selected.label}",
                precision=settings.report.elapsed_precision,
            )
            try:
                path = ReportWriter(export).write(report)
            except ReportWriteError as e:
                engine.run_logger.log_export_error(e.path, e)
                print_warning(f"Cannot save report: {e.reason}")
                raise typer.Exit(code=1) from e
            engine.run_logger.log_export(str(path), len(report.steps))
            if not quiet:
                print_report_saved(str(path))

    except ValidationError as e:
        print_error(f"Invalid option: {_first_error(e)}")
        raise typer.Exit(code=1) from e
    except RasterLabError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1) from e


@app.command()
def compare(
    start: StartOption = (0, 0),
    end: EndOption = (0, 0),
    repeat: Annotated[
        int | None,
        typer.Option(
            "--repeat",
            "-r",
            help="Runs per algorithm; the fastest is reported",
            min=1,
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Time every algorithm on the same input, relative to Bresenham line."""
    try:
        settings = _build_settings(log_file, log_level)
        repeat = repeat or settings.compare.repeat
        a, b = _build_points(settings, start, end)
        engine = _create_engine(settings, quiet=False)

        print_header(__version__)
        print_step(f"Comparing ({a.x}, {a.y}) → ({b.x}, {b.y})")
        rows = engine.compare(a, b, repeat=repeat)
        print_comparison(rows, repeat)

    except ValidationError as e:
        print_error(f"Invalid option: {_first_error(e)}")
        raise typer.Exit(code=1) from e
    except RasterLabError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1) from e


@app.command("algorithms")
def list_algorithms() -> None:
    """List available algorithms with their index."""
    print_algorithms()


def _resolve_algorithm(name: str) -> Algorithm:
    """Accept an algorithm value, label, or selection index."""
    if name.strip().isdigit():
        return Algorithm.from_index(int(name))
    return Algorithm.from_name(name)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
