"""Input/output for pillsplitter.

This module reads pointer-event scripts and writes canvas views as JSON.

Key functions:
- load_script: Read a JSON event script from disk
- parse_script: Build an EventScript from decoded JSON
- dump_view: Render a canvas view as JSON
"""

from pillsplitter.io.script import (
    EventScript,
    dump_view,
    load_script,
    parse_script,
    view_to_dict,
)

__all__ = [
    "EventScript",
    "dump_view",
    "load_script",
    "parse_script",
    "view_to_dict",
]
