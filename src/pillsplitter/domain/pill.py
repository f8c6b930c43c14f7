"""Pill entity and its corner rounding.

This module defines the persistent domain types of the editor:
- CornerRadii: Independent per-corner rounding of a pill
- PillDraft: Bounds, color and rounding of a pill that has no id yet
- Pill: A pill living in the store, identified by a unique id
"""

from dataclasses import dataclass, field
from typing import Any

from pillsplitter.exceptions import InvalidPillError


@dataclass(frozen=True, slots=True)
class CornerRadii:
    """Corner radii of a pill in pixels.

    Attributes:
        tl: Top-left radius
        tr: Top-right radius
        br: Bottom-right radius
        bl: Bottom-left radius
    """

    tl: float = 0
    tr: float = 0
    br: float = 0
    bl: float = 0

    def __post_init__(self) -> None:
        for name in ("tl", "tr", "br", "bl"):
            if getattr(self, name) < 0:
                raise InvalidPillError(f"corner radius {name} must be >= 0")

    @classmethod
    def uniform(cls, radius: float) -> "CornerRadii":
        """Create radii with the same value on every corner."""
        return cls(tl=radius, tr=radius, br=radius, bl=radius)

    def to_css(self) -> str:
        """Render as a CSS border-radius value (top-left, top-right, bottom-right, bottom-left)."""
        return f"{_px(self.tl)}px {_px(self.tr)}px {_px(self.br)}px {_px(self.bl)}px"

    def to_dict(self) -> dict[str, Any]:
        return {"tl": self.tl, "tr": self.tr, "br": self.br, "bl": self.bl}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CornerRadii":
        return cls(
            tl=data.get("tl", 0),
            tr=data.get("tr", 0),
            br=data.get("br", 0),
            bl=data.get("bl", 0),
        )


def _px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _check_bounds(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise InvalidPillError(f"size must be positive, got {width}x{height}")


@dataclass(frozen=True, slots=True)
class PillDraft:
    """A pill that has not been added to a store yet.

    Produced by a finished draw gesture and by the split engine. The store
    turns drafts into pills by minting ids.

    Attributes:
        x: Left edge in pixels
        y: Top edge in pixels
        width: Width in pixels
        height: Height in pixels
        color: Opaque color token, copied verbatim onto split pieces
        corner_radii: Per-corner rounding
    """

    x: float
    y: float
    width: float
    height: float
    color: str
    corner_radii: CornerRadii = field(default_factory=CornerRadii)

    def __post_init__(self) -> None:
        _check_bounds(self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": self.color,
            "corner_radii": self.corner_radii.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PillDraft":
        radii = data.get("corner_radii")
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            color=data.get("color", ""),
            corner_radii=CornerRadii.from_dict(radii) if radii else CornerRadii(),
        )


@dataclass(frozen=True, slots=True)
class Pill:
    """An axis-aligned rounded rectangle on the canvas.

    Immutable: the store swaps in updated copies, so a list of pills handed
    to a renderer can never be changed behind the store's back.

    Attributes:
        id: Unique id, never reused within an editing session
        x: Left edge in pixels
        y: Top edge in pixels
        width: Width in pixels
        height: Height in pixels
        color: Opaque color token
        corner_radii: Per-corner rounding
    """

    id: int
    x: float
    y: float
    width: float
    height: float
    color: str
    corner_radii: CornerRadii = field(default_factory=CornerRadii)

    def __post_init__(self) -> None:
        _check_bounds(self.width, self.height)

    @classmethod
    def from_draft(cls, pill_id: int, draft: PillDraft) -> "Pill":
        """Attach an id to a draft."""
        return cls(
            id=pill_id,
            x=draft.x,
            y=draft.y,
            width=draft.width,
            height=draft.height,
            color=draft.color,
            corner_radii=draft.corner_radii,
        )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary representation of the pill
        """
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": self.color,
            "corner_radii": self.corner_radii.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pill":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a pill

        Returns:
            Pill instance
        """
        return cls.from_draft(data["id"], PillDraft.from_dict(data))
