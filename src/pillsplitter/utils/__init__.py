"""Utility functions for pillsplitter.

This module provides utility functions including:

- Logging setup and configuration
- Editor event logging with session statistics
"""

from pillsplitter.utils.logging import (
    EditorLogger,
    EditorStats,
    configure_logging,
)

__all__ = [
    "EditorLogger",
    "EditorStats",
    "configure_logging",
]
