"""Command-line interface for rasterlab.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Run any of the six algorithms on two points
- Detailed per-step listing ("show calculations")
- Plain-text report export
- Timing comparison across all algorithms
"""

from rasterlab.cli.app import cli, main

__all__ = ["cli", "main"]
