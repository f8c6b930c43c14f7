"""Configuration settings for Pill Splitter."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class GeometryConfig(BaseModel):
    """Configuration for drawing and splitting pills.

    All distances are in canvas pixels.
    """

    min_pill: float = Field(
        default=40,
        gt=0,
        description="Minimum width and height of a pill created by drawing",
    )
    min_part: float = Field(
        default=20,
        gt=0,
        description="Minimum width and height of any piece produced by a split",
    )
    corner_radius: float = Field(
        default=20,
        ge=0,
        description="Radius of rounded outer corners",
    )
    shift_step: float = Field(
        default=10,
        ge=0,
        description="How far a pill that cannot be split moves towards the low side",
    )
    shift_gap: float = Field(
        default=2,
        ge=0,
        description="Gap left past the split line when a pill moves towards the high side",
    )
    border_width: float = Field(
        default=4,
        ge=0,
        description="Outline width hint for renderers",
    )

    @model_validator(mode="after")
    def _check_thresholds(self) -> "GeometryConfig":
        if self.min_part > self.min_pill:
            raise ValueError("min_part must not exceed min_pill")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PillSplitterSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PillSplitterSettings:
    """Get default application settings."""
    return PillSplitterSettings()
