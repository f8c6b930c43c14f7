"""Pointer events delivered to the interaction controller.

Coordinates are already normalized into the canvas coordinate space, the same
space pill bounds are stored in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class TargetKind(str, Enum):
    """What a pointer-down landed on."""

    EMPTY = "empty"
    PILL = "pill"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PointerMove:
    """Pointer moved; also moves the crosshair lines."""

    type: ClassVar[str] = "move"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PointerMove":
        return cls(data["x"], data["y"])


@dataclass(frozen=True, slots=True)
class PointerDown:
    """Button pressed over empty canvas, over a pill, or over something else.

    Attributes:
        x: Pointer x coordinate
        y: Pointer y coordinate
        target: Kind of element under the pointer
        pill_id: Id of the pill under the pointer when target is PILL
    """

    type: ClassVar[str] = "down"

    x: float
    y: float
    target: TargetKind = TargetKind.EMPTY
    pill_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "target": self.target.value,
        }
        if self.pill_id is not None:
            data["pill_id"] = self.pill_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PointerDown":
        """Deserialize from dictionary.

        Raises:
            ValueError: If the target kind is unknown
        """
        return cls(
            data["x"],
            data["y"],
            target=TargetKind(data.get("target", TargetKind.EMPTY.value)),
            pill_id=data.get("pill_id"),
        )


@dataclass(frozen=True, slots=True)
class PointerUp:
    """Button released."""

    type: ClassVar[str] = "up"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PointerUp":
        return cls(data["x"], data["y"])


@dataclass(frozen=True, slots=True)
class Click:
    """Click delivered after a down/up pair."""

    type: ClassVar[str] = "click"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Click":
        return cls(data["x"], data["y"])


PointerEvent = PointerMove | PointerDown | PointerUp | Click

_EVENT_TYPES: dict[str, type] = {
    cls.type: cls for cls in (PointerMove, PointerDown, PointerUp, Click)
}


def event_from_dict(data: dict[str, Any]) -> PointerEvent:
    """Deserialize a pointer event.

    Args:
        data: Dictionary with a "type" field and x, y coordinates

    Returns:
        The matching event instance

    Raises:
        ValueError: If the event type or target kind is unknown
        KeyError: If a required field is missing
    """
    kind = data["type"]
    event_cls = _EVENT_TYPES.get(kind)
    if event_cls is None:
        raise ValueError(f"unknown event type '{kind}'")
    return event_cls.from_dict(data)
