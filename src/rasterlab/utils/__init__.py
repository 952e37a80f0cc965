"""Utility functions for rasterlab.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics tracking
"""

from rasterlab.utils.logging import (
    RunLogger,
    RunStats,
    configure_logging,
)

__all__ = [
    "RunLogger",
    "RunStats",
    "configure_logging",
]
