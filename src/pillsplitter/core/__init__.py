"""Core editing algorithms for pillsplitter.

This module contains:

- Geometry predicates (line/rectangle interior intersection)
- The split engine (pill + crosshair lines -> pieces or shift)
- The pill store (collection and id minting)
- The interaction controller (pointer-event state machine)

Geometry functions and the split engine are pure. Only the store and the
controller hold state.

Key functions:
- intersects_vertical / intersects_horizontal: Strict interior crossing tests
- normalize_box: Box spanned by an anchor and the pointer
- split_pill: Decide how one pill reacts to a click

Key classes:
- SplitEngine: Split engine bound to a geometry configuration
- PillStore: Ordered pill collection with id minting
- InteractionController: Idle / Drawing / Dragging state machine
"""

from pillsplitter.core.color import (
    ColorGenerator,
    pastel_color,
    pastel_color_generator,
)
from pillsplitter.core.controller import CanvasView, InteractionController
from pillsplitter.core.geometry import (
    intersects_horizontal,
    intersects_vertical,
    normalize_box,
    round_half_up,
)
from pillsplitter.core.splitter import (
    SplitEngine,
    SplitOutcome,
    SplitResult,
    split_pill,
)
from pillsplitter.core.store import PillStore

__all__ = [
    # Controller
    "CanvasView",
    "InteractionController",
    # Store
    "PillStore",
    # Split engine
    "SplitEngine",
    "SplitOutcome",
    "SplitResult",
    "split_pill",
    # Geometry functions
    "intersects_horizontal",
    "intersects_vertical",
    "normalize_box",
    "round_half_up",
    # Colors
    "ColorGenerator",
    "pastel_color",
    "pastel_color_generator",
]
