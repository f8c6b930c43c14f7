"""Configuration management for pillsplitter.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Size thresholds, corner rounding and shift distances
- LoggingConfig: Logging settings
- PillSplitterSettings: Main application settings
"""

from pillsplitter.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PillSplitterSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PillSplitterSettings",
    "get_default_settings",
]
