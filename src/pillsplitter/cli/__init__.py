"""Command-line interface for pillsplitter.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Replay of recorded pointer-event scripts
- Single-pill split previews
- JSON output for scripting
"""

from pillsplitter.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
