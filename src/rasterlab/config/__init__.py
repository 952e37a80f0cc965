"""Configuration management for rasterlab.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CoordinateConfig: Accepted input coordinate range
- ReportConfig: Report export settings
- CompareConfig: Timing comparison settings
- LoggingConfig: Logging settings
- RasterSettings: Main application settings
"""

from rasterlab.config.settings import (
    CompareConfig,
    CoordinateConfig,
    LoggingConfig,
    RasterSettings,
    ReportConfig,
    get_default_settings,
)

__all__ = [
    "CompareConfig",
    "CoordinateConfig",
    "LoggingConfig",
    "RasterSettings",
    "ReportConfig",
    "get_default_settings",
]
