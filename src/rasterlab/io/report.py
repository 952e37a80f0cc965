"""Plain-text report export.

This module provides the Report model and the ReportWriter that saves it.
The text layout is:

    Raster Algorithms Report
    Title: <title>
    Steps: <count>
    Elapsed ms: <elapsed>
    Steps detail:
    <index>: (<x>,<y>) <note>
"""

from dataclasses import dataclass, field
from pathlib import Path

from rasterlab.domain import RasterResult, Step
from rasterlab.exceptions import ReportWriteError

REPORT_HEADER = "Raster Algorithms Report"


@dataclass
class Report:
    """Summary of one algorithm run, ready for export.

    Attributes:
        title: Report title
        steps: Steps to list
        elapsed_ms: Computation time in milliseconds
        precision: Decimal places for the elapsed time
    """

    title: str = ""
    steps: list[Step] = field(default_factory=list)
    elapsed_ms: float = 0.0
    precision: int = 3

    @classmethod
    def from_result(cls, result: RasterResult, title: str, precision: int = 3) -> "Report":
        """Build a report from an algorithm result.

        Args:
            result: Algorithm output
            title: Report title
            precision: Decimal places for the elapsed time

        Returns:
            Report instance
        """
        return cls(
            title=title,
            steps=list(result.steps),
            elapsed_ms=result.elapsed_ms,
            precision=precision,
        )

    def detail_lines(self) -> list[str]:
        """One ``"<index>: (<x>,<y>) <note>"`` line per step."""
        return [
            f"{index}: ({step.x},{step.y}) {step.note}" for index, step in enumerate(self.steps)
        ]

    def to_text(self) -> str:
        """Render the report as plain text."""
        lines = [
            REPORT_HEADER,
            f"Title: {self.title}",
            f"Steps: {len(self.steps)}",
            f"Elapsed ms: {self.elapsed_ms:.{self.precision}f}",
            "Steps detail:",
            *self.detail_lines(),
        ]
        return "\n".join(lines) + "\n"


class ReportWriter:
    """Writes reports to text files.

    Example:
        writer = ReportWriter(Path("report.txt"))
        writer.write(report)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the report writer.

        Args:
            output_path: Path where the report will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, report: Report) -> Path:
        """Save the report.

        Args:
            report: Report to write

        Returns:
            Path the report was written to

        Raises:
            ReportWriteError: If the destination cannot be opened for writing
        """
        try:
            with open(self._output_path, "w", encoding="utf-8") as handle:
                handle.write(report.to_text())
        except OSError as e:
            reason = e.strerror or str(e)
            raise ReportWriteError(str(self._output_path), reason) from e
        return self._output_path
