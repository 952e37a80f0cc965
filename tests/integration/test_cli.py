"""End-to-end tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from rasterlab import __version__
from rasterlab.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestRunCommand:
    """Tests for 'rasterlab run'."""

    def test_bresenham_with_calculations(self, runner: CliRunner) -> None:
        """Detailed output lists every step with its note."""
        result = runner.invoke(
            app,
            ["run", "bresenham_line", "-a", "0", "0", "-b", "5", "2", "--show-calculations"],
        )
        assert result.exit_code == 0, result.output
        assert "6 steps" in result.output
        assert "err=5" in result.output
        assert "(5, 2)" in result.output

    def test_algorithm_by_index(self, runner: CliRunner) -> None:
        """The selection index works in place of a name."""
        result = runner.invoke(app, ["run", "3", "--start", "0", "0", "--end", "5", "0"])
        assert result.exit_code == 0, result.output
        assert "Bresenham Circle" in result.output
        assert "28 steps" in result.output

    def test_negative_coordinates(self, runner: CliRunner) -> None:
        """Negative values are parsed as coordinates, not options."""
        result = runner.invoke(app, ["run", "dda", "-a", "-3", "4", "-b", "3", "-4"])
        assert result.exit_code == 0, result.output
        assert "9 steps" in result.output

    def test_degenerate(self, runner: CliRunner) -> None:
        """Coincident points still run."""
        result = runner.invoke(app, ["run", "kastl_pitvey", "-c"])
        assert result.exit_code == 0, result.output
        assert "degenerate" in result.output

    def test_unknown_algorithm(self, runner: CliRunner) -> None:
        """Unknown algorithms are reported with exit code 1."""
        result = runner.invoke(app, ["run", "scanline"])
        assert result.exit_code == 1
        assert "Unknown algorithm" in result.output

    def test_coordinate_out_of_range(self, runner: CliRunner) -> None:
        """Coordinates outside the configured range are rejected."""
        result = runner.invoke(app, ["run", "dda", "-b", "5000", "0"])
        assert result.exit_code == 1
        assert "outside the range" in result.output

    def test_quiet(self, runner: CliRunner) -> None:
        """Quiet mode prints nothing on success."""
        result = runner.invoke(app, ["run", "wu", "-b", "4", "1", "--quiet"])
        assert result.exit_code == 0
        assert result.output.strip() == ""


class TestExport:
    """Tests for report export from the CLI."""

    def test_export_default_title(self, runner: CliRunner, tmp_path: Path) -> None:
        """Reports default to a title naming the algorithm."""
        path = tmp_path / "report.txt"
        result = runner.invoke(
            app, ["run", "bresenham_line", "-b", "5", "2", "--export", str(path)]
        )
        assert result.exit_code == 0, result.output
        text = path.read_text(encoding="utf-8")
        assert text.startswith("Raster Algorithms Report\n")
        assert "Title: rasterlab: Bresenham Line\n" in text
        assert "Steps: 6\n" in text
        assert "5: (5,2) err=3\n" in text

    def test_export_custom_title(self, runner: CliRunner, tmp_path: Path) -> None:
        """--title overrides the report title."""
        path = tmp_path / "report.txt"
        result = runner.invoke(
            app, ["run", "dda", "-b", "2", "2", "-e", str(path), "-t", "lab 4", "-q"]
        )
        assert result.exit_code == 0, result.output
        assert "Title: lab 4\n" in path.read_text(encoding="utf-8")

    def test_export_failure_warns(self, runner: CliRunner, tmp_path: Path) -> None:
        """An unwritable destination is a warning with exit code 1."""
        path = tmp_path / "missing" / "report.txt"
        result = runner.invoke(app, ["run", "dda", "-b", "2", "2", "-e", str(path)])
        assert result.exit_code == 1
        assert "Cannot save report" in result.output
        assert not path.exists()


class TestLoggingOptions:
    """Tests for the --log-level and --log-file options."""

    def test_unknown_log_level(self, runner: CliRunner) -> None:
        """An unknown level is reported as an invalid option."""
        result = runner.invoke(app, ["run", "dda", "-b", "2", "2", "--log-level", "verbose"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid option" in result.output
        assert "log_level" in result.output

    def test_lowercase_log_level(self, runner: CliRunner) -> None:
        """Levels are case-insensitive."""
        result = runner.invoke(app, ["run", "dda", "-b", "2", "2", "--log-level", "error"])
        assert result.exit_code == 0, result.output

    def test_unwritable_log_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A log file in a missing directory fails cleanly."""
        log_file = tmp_path / "missing" / "run.log"
        result = runner.invoke(app, ["run", "dda", "-b", "2", "2", "--log-file", str(log_file)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unexpected error" in result.output

    def test_compare_unknown_log_level(self, runner: CliRunner) -> None:
        """compare validates the level the same way."""
        result = runner.invoke(app, ["compare", "-b", "3", "1", "--log-level", "loud"])
        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_log_file_written(self, runner: CliRunner, tmp_path: Path) -> None:
        """Runs are recorded in the log file."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app, ["run", "wu", "-b", "3", "1", "-q", "--log-file", str(log_file)]
        )
        assert result.exit_code == 0, result.output
        assert "Algorithm finished" in log_file.read_text(encoding="utf-8")


class TestOtherCommands:
    """Tests for compare, algorithms and --version."""

    def test_compare(self, runner: CliRunner) -> None:
        """Every algorithm appears in the comparison table."""
        result = runner.invoke(app, ["compare", "-a", "0", "0", "-b", "30", "11", "-r", "2"])
        assert result.exit_code == 0, result.output
        for label in ("DDA", "Bresenham Line", "Kastl-Pitvey"):
            assert label in result.output
        assert "best of 2 runs" in result.output

    def test_algorithms(self, runner: CliRunner) -> None:
        """The listing shows values with their index."""
        result = runner.invoke(app, ["algorithms"])
        assert result.exit_code == 0
        assert "bresenham_circle" in result.output
        assert "kastl_pitvey" in result.output

    def test_version(self, runner: CliRunner) -> None:
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
