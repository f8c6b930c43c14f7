"""Pointer-event scripts.

A script is a JSON document replayed through the interaction controller:

    {
        "geometry": {"min_pill": 40},
        "pills": [{"x": 0, "y": 0, "width": 100, "height": 100, "color": "red"}],
        "events": [
            {"type": "down", "x": 50, "y": 50, "target": "pill", "pill_id": 1},
            {"type": "up", "x": 50, "y": 50},
            {"type": "click", "x": 50, "y": 50}
        ]
    }

"geometry" and "pills" are optional. Seeded pills get ids 1, 2, ... in order.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from pillsplitter.config import GeometryConfig
from pillsplitter.core.controller import CanvasView
from pillsplitter.domain import CornerRadii, PillDraft, PointerEvent, event_from_dict
from pillsplitter.exceptions import (
    ScriptEventError,
    ScriptLoadError,
)


@dataclass
class EventScript:
    """Parsed event script.

    Attributes:
        geometry: Geometry settings for the replay
        pills: Pills present before the first event
        events: Pointer events in delivery order
    """

    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    pills: list[PillDraft] = field(default_factory=list)
    events: list[PointerEvent] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "geometry": self.geometry.model_dump(),
            "pills": [p.to_dict() for p in self.pills],
            "events": [e.to_dict() for e in self.events],
        }


class _RadiiRecord(BaseModel):
    """Corner radii as written in a script."""

    tl: float = Field(default=0, ge=0)
    tr: float = Field(default=0, ge=0)
    br: float = Field(default=0, ge=0)
    bl: float = Field(default=0, ge=0)


class _PillRecord(BaseModel):
    """Seeded pill as written in a script."""

    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    color: str = ""
    corner_radii: _RadiiRecord | None = None


class _EventRecord(BaseModel):
    """Pointer event as written in a script."""

    type: str
    x: float
    y: float
    target: str | None = None
    pill_id: int | None = None


class _ScriptDocument(BaseModel):
    """Top-level script shape; records are validated one by one."""

    geometry: dict[str, Any] = Field(default_factory=dict)
    pills: list[dict[str, Any]] = Field(default_factory=list)
    events: list[dict[str, Any]] = Field(default_factory=list)


def _first_error(error: ValidationError) -> str:
    detail = error.errors()[0]
    location = ".".join(str(part) for part in detail["loc"]) or "value"
    return f"{location}: {detail['msg']}"


def parse_script(data: dict[str, Any], source: str = "<script>") -> EventScript:
    """Build an EventScript from decoded JSON.

    Args:
        data: Decoded script document
        source: Name used in error messages

    Returns:
        EventScript instance

    Raises:
        ScriptLoadError: If the document or a seeded pill is malformed
        ScriptEventError: If an event record is malformed
    """
    if not isinstance(data, dict):
        raise ScriptLoadError(source, "top level must be an object")

    try:
        document = _ScriptDocument.model_validate(data)
    except ValidationError as e:
        raise ScriptLoadError(source, _first_error(e)) from e

    try:
        geometry = GeometryConfig(**document.geometry)
    except ValidationError as e:
        raise ScriptLoadError(source, f"invalid geometry: {_first_error(e)}") from e

    pills = []
    for i, raw in enumerate(document.pills):
        try:
            record = _PillRecord.model_validate(raw)
        except ValidationError as e:
            raise ScriptLoadError(source, f"invalid pill #{i}: {_first_error(e)}") from e
        radii = (
            CornerRadii(**record.corner_radii.model_dump())
            if record.corner_radii is not None
            else CornerRadii.uniform(geometry.corner_radius)
        )
        pills.append(
            PillDraft(
                record.x, record.y, record.width, record.height, record.color, radii
            )
        )

    events = []
    for i, raw in enumerate(document.events):
        try:
            record = _EventRecord.model_validate(raw)
            events.append(event_from_dict(record.model_dump(exclude_none=True)))
        except ValidationError as e:
            raise ScriptEventError(i, _first_error(e)) from e
        except ValueError as e:
            raise ScriptEventError(i, str(e)) from e

    return EventScript(geometry=geometry, pills=pills, events=events)


def load_script(path: Path) -> EventScript:
    """Read and parse an event script file.

    Args:
        path: Path to a JSON script

    Returns:
        EventScript instance

    Raises:
        ScriptLoadError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScriptLoadError(str(path), e.strerror or str(e)) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ScriptLoadError(str(path), f"invalid JSON: {e}") from e
    return parse_script(data, source=str(path))


def view_to_dict(view: CanvasView) -> dict[str, Any]:
    """Serialize a canvas view for JSON output."""
    return {
        "mode": view.mode.value,
        "crosshair": {"x": view.crosshair[0], "y": view.crosshair[1]},
        "draft": view.draft.to_dict() if view.draft else None,
        "dragging_id": view.dragging_id,
        "border_width": view.border_width,
        "pills": [p.to_dict() for p in view.pills],
    }


def dump_view(view: CanvasView, indent: int | None = 2) -> str:
    """Render a canvas view as a JSON string."""
    return json.dumps(view_to_dict(view), indent=indent)
