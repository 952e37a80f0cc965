"""Configuration settings for rasterlab."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from rasterlab.exceptions import CoordinateRangeError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CoordinateConfig(BaseModel):
    """Accepted range for user-supplied coordinates.

    The engine itself works on any integer; this range only guards the
    command-line front end.
    """

    min_value: int = Field(
        default=-2000,
        description="Smallest accepted coordinate",
    )
    max_value: int = Field(
        default=2000,
        description="Largest accepted coordinate",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "CoordinateConfig":
        if self.min_value > self.max_value:
            raise ValueError("min_value must not exceed max_value")
        return self

    def check(self, value: int) -> int:
        """Validate a coordinate against the configured range.

        Args:
            value: Coordinate to validate

        Returns:
            The coordinate unchanged

        Raises:
            CoordinateRangeError: If the value is outside the range
        """
        if not self.min_value <= value <= self.max_value:
            raise CoordinateRangeError(value, self.min_value, self.max_value)
        return value


class ReportConfig(BaseModel):
    """Configuration for text report export."""

    default_title: str = Field(
        default="rasterlab",
        description="Title used when none is given on the command line",
    )
    elapsed_precision: int = Field(
        default=3,
        ge=0,
        le=9,
        description="Decimal places for the elapsed time line",
    )


class CompareConfig(BaseModel):
    """Configuration for the algorithm timing comparison."""

    repeat: int = Field(
        default=5,
        ge=1,
        le=1000,
        description="Runs per algorithm; the fastest run is reported",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class RasterSettings(BaseModel):
    """Main application settings."""

    coordinates: CoordinateConfig = Field(default_factory=CoordinateConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    compare: CompareConfig = Field(default_factory=CompareConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterSettings:
    """Get default application settings."""
    return RasterSettings()
