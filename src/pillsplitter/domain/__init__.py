"""Domain models for pillsplitter.

This module contains the domain models representing pills, gesture sessions,
interaction states and pointer events. All models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries for scripts and JSON output
- Independent of any rendering or event-capture toolkit

Key classes:
- CornerRadii: Per-corner rounding of a pill
- PillDraft: A pill without an id
- Pill: A pill held by the store
- DrawSession / DragSession: Transient gesture data
- IdleState / DrawingState / DraggingState: Interaction states
- PointerMove / PointerDown / PointerUp / Click: Pointer events
"""

from pillsplitter.domain.events import (
    Click,
    PointerDown,
    PointerEvent,
    PointerMove,
    PointerUp,
    TargetKind,
    event_from_dict,
)
from pillsplitter.domain.pill import CornerRadii, Pill, PillDraft
from pillsplitter.domain.session import (
    DraggingState,
    DragSession,
    DrawingState,
    DrawSession,
    IdleState,
    InteractionMode,
    InteractionState,
)

__all__: list[str] = [
    # Enums
    "InteractionMode",
    "TargetKind",
    # Core types
    "CornerRadii",
    "Pill",
    "PillDraft",
    # Sessions and states
    "DragSession",
    "DraggingState",
    "DrawSession",
    "DrawingState",
    "IdleState",
    "InteractionState",
    # Events
    "Click",
    "PointerDown",
    "PointerEvent",
    "PointerMove",
    "PointerUp",
    "event_from_dict",
]
