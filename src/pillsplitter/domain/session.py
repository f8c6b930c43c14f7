"""Transient gesture sessions and interaction states.

The controller is always in exactly one of three states. Each state is its
own type and carries only the data that is meaningful in it, so a drawing
session and a dragging session can never exist at the same time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class InteractionMode(str, Enum):
    """Interaction state names."""

    IDLE = "idle"
    DRAWING = "drawing"
    DRAGGING = "dragging"


@dataclass(frozen=True, slots=True)
class DrawSession:
    """Box being drawn between pointer-down on empty canvas and pointer-up.

    Attributes:
        anchor_x: X where the gesture started
        anchor_y: Y where the gesture started
        x: Left edge of the box spanned by anchor and pointer
        y: Top edge of the box spanned by anchor and pointer
        width: Non-negative box width
        height: Non-negative box height
    """

    anchor_x: float
    anchor_y: float
    x: float
    y: float
    width: float = 0
    height: float = 0

    @classmethod
    def start(cls, x: float, y: float) -> "DrawSession":
        """Open an empty session anchored at the pointer."""
        return cls(anchor_x=x, anchor_y=y, x=x, y=y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "anchor_x": self.anchor_x,
            "anchor_y": self.anchor_y,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class DragSession:
    """Pill being dragged between pointer-down on it and pointer-up.

    Attributes:
        pill_id: Id of the dragged pill
        grab_offset_x: Pointer x minus pill x at grab time
        grab_offset_y: Pointer y minus pill y at grab time
    """

    pill_id: int
    grab_offset_x: float
    grab_offset_y: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "pill_id": self.pill_id,
            "grab_offset_x": self.grab_offset_x,
            "grab_offset_y": self.grab_offset_y,
        }


@dataclass(frozen=True, slots=True)
class IdleState:
    """No gesture in progress.

    Attributes:
        suppress_click: The click terminating a just-finished draw gesture
            is still pending and must not split
    """

    mode: ClassVar[InteractionMode] = InteractionMode.IDLE

    suppress_click: bool = False


@dataclass(frozen=True, slots=True)
class DrawingState:
    """A draw gesture is in progress."""

    mode: ClassVar[InteractionMode] = InteractionMode.DRAWING

    session: DrawSession


@dataclass(frozen=True, slots=True)
class DraggingState:
    """A drag gesture is in progress."""

    mode: ClassVar[InteractionMode] = InteractionMode.DRAGGING

    session: DragSession


InteractionState = IdleState | DrawingState | DraggingState
