"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from rasterlab.core import ComparisonRow
from rasterlab.domain import Algorithm, Point, Step

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]rasterlab[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_input(algorithm: Algorithm, a: Point, b: Point) -> None:
    """Print the algorithm and its input points.

    Args:
        algorithm: Algorithm about to run
        a: First point (center for the circle)
        b: Second point (radius point for the circle)
    """
    console.print(f"  [bold]{algorithm.label}[/bold]")
    if algorithm.is_circle:
        console.print(f"  center ({a.x}, {a.y}) {SYM_DOT} radius {abs(b.x)}")
    else:
        console.print(f"  ({a.x}, {a.y}) → ({b.x}, {b.y})")


def _format_ms(ms: float) -> str:
    """Format milliseconds with a sensible number of decimals."""
    if ms < 1:
        return f"{ms:.3f}ms"
    return f"{ms:.1f}ms"


def print_run_summary(step_count: int, elapsed_ms: float) -> None:
    """Print step count and elapsed time of a run.

    Args:
        step_count: Number of emitted steps
        elapsed_ms: Computation time in milliseconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} Done[/bold green] "
        f"{step_count} steps {SYM_DOT} {_format_ms(elapsed_ms)}"
    )


def print_steps_table(steps: Sequence[Step]) -> None:
    """Print the detailed step list.

    Args:
        steps: Steps to show
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("pixel", justify="left")
    table.add_column("intensity", justify="right")
    table.add_column("note", justify="left", overflow="fold")

    for index, step in enumerate(steps):
        # Text keeps notes like "rote:[SD]" from being read as markup
        table.add_row(
            str(index),
            f"({step.x}, {step.y})",
            f"{step.intensity:.3f}",
            Text(step.note),
        )
    console.print(table)


def print_comparison(rows: Sequence[ComparisonRow], repeat: int) -> None:
    """Print a timing comparison table.

    Args:
        rows: One row per algorithm
        repeat: Runs per algorithm
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("algorithm")
    table.add_column("steps", justify="right")
    table.add_column("best", justify="right")
    table.add_column("vs Bresenham", justify="right")

    for row in rows:
        relative = f"{row.relative:.2f}x" if row.relative is not None else "n/a"
        table.add_row(row.algorithm.label, str(row.step_count), _format_ms(row.best_ms), relative)

    console.print(table)
    console.print(f"  best of {repeat} run{'s' if repeat != 1 else ''}")


def print_algorithms() -> None:
    """Print the available algorithms with their selection index."""
    for index, algorithm in enumerate(Algorithm):
        console.print(f"  {index}  {algorithm.value:<18} {SYM_DOT} {algorithm.label}")


def print_report_saved(path: str) -> None:
    """Print report export confirmation.

    Args:
        path: Path of the written report
    """
    line = Text(f"  {SYM_OK} Report saved ")
    line.append(path, style="bold")
    console.print(line)


def print_warning(message: str) -> None:
    """Print warning message.

    Args:
        message: Warning text
    """
    console.print(f"\n[bold yellow]{SYM_WARN} Warning:[/bold yellow] {escape(message)}")


def print_error(message: str) -> None:
    """Print error message.

    Args:
        message: Error text, printed without markup interpretation
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
