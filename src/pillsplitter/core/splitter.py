"""Split engine: cut one pill along the crosshair lines.

Given a pill and the current crosshair position, the engine decides whether
the pill stays as it is, is cut into two or four pieces, or is shifted
sideways because every possible cut would leave a piece smaller than the
minimum part size.

Decision procedure for a pill and lines (x_line, y_line):

1. Neither line crosses the interior: unchanged.
2. Both lines cross:
   - all four quadrants >= min_part: four pieces
   - else left and right >= min_part: two pieces side by side
   - else top and bottom >= min_part: two pieces stacked
   - else shift along x
3. Only the vertical line crosses: two pieces side by side, or shift along x.
4. Only the horizontal line crosses: two pieces stacked, or shift along y.

The engine never mints ids. Pieces come back as drafts in emission order and
the store numbers them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pillsplitter.config import GeometryConfig
from pillsplitter.core.geometry import (
    intersects_horizontal,
    intersects_vertical,
    round_half_up,
)
from pillsplitter.domain import CornerRadii, Pill, PillDraft


class SplitOutcome(str, Enum):
    """What a click did to one pill."""

    UNCHANGED = "unchanged"
    QUAD = "quad"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    SHIFTED = "shifted"


@dataclass(frozen=True)
class SplitResult:
    """Result of running the engine on one pill.

    Attributes:
        pill_id: Id of the pill the engine looked at
        outcome: Kind of change
        pieces: Replacement drafts in emission order (QUAD, VERTICAL, HORIZONTAL)
        patch: In-place field updates (SHIFTED)
    """

    pill_id: int
    outcome: SplitOutcome
    pieces: tuple[PillDraft, ...] = ()
    patch: dict[str, float] = field(default_factory=dict)

    @property
    def is_split(self) -> bool:
        """True when the pill is replaced by pieces."""
        return bool(self.pieces)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pill_id": self.pill_id,
            "outcome": self.outcome.value,
            "pieces": [p.to_dict() for p in self.pieces],
            "patch": dict(self.patch),
        }


def _shift_along(
    start: float, center: float, line: float, config: GeometryConfig
) -> int:
    """New start coordinate moving a pill off a line it cannot be cut along.

    A pill whose center is before the line steps further back (never past
    zero); otherwise it jumps to just after the line.
    """
    if center < line:
        return max(0, round_half_up(start - config.shift_step))
    return round_half_up(line + config.shift_gap)


def _shift_x(pill: Pill, x_line: float, config: GeometryConfig) -> SplitResult:
    new_x = _shift_along(pill.x, pill.center[0], x_line, config)
    return SplitResult(pill.id, SplitOutcome.SHIFTED, patch={"x": new_x})


def _shift_y(pill: Pill, y_line: float, config: GeometryConfig) -> SplitResult:
    new_y = _shift_along(pill.y, pill.center[1], y_line, config)
    return SplitResult(pill.id, SplitOutcome.SHIFTED, patch={"y": new_y})


def _piece(
    pill: Pill, x: float, y: float, width: float, height: float, radii: CornerRadii
) -> PillDraft:
    return PillDraft(
        x=x, y=y, width=width, height=height, color=pill.color, corner_radii=radii
    )


def _split_vertical(
    pill: Pill, x_line: float, config: GeometryConfig
) -> SplitResult:
    r = config.corner_radius
    left = _piece(
        pill, pill.x, pill.y, x_line - pill.x, pill.height,
        CornerRadii(tl=r, bl=r),
    )
    right = _piece(
        pill, x_line, pill.y, pill.right - x_line, pill.height,
        CornerRadii(tr=r, br=r),
    )
    return SplitResult(pill.id, SplitOutcome.VERTICAL, pieces=(left, right))


def _split_horizontal(
    pill: Pill, y_line: float, config: GeometryConfig
) -> SplitResult:
    r = config.corner_radius
    top = _piece(
        pill, pill.x, pill.y, pill.width, y_line - pill.y,
        CornerRadii(tl=r, tr=r),
    )
    bottom = _piece(
        pill, pill.x, y_line, pill.width, pill.bottom - y_line,
        CornerRadii(br=r, bl=r),
    )
    return SplitResult(pill.id, SplitOutcome.HORIZONTAL, pieces=(top, bottom))


def _split_quad(
    pill: Pill, x_line: float, y_line: float, config: GeometryConfig
) -> SplitResult:
    r = config.corner_radius
    left_w = x_line - pill.x
    right_w = pill.right - x_line
    top_h = y_line - pill.y
    bot_h = pill.bottom - y_line
    pieces = (
        _piece(pill, pill.x, pill.y, left_w, top_h, CornerRadii(tl=r)),
        _piece(pill, x_line, pill.y, right_w, top_h, CornerRadii(tr=r)),
        _piece(pill, pill.x, y_line, left_w, bot_h, CornerRadii(bl=r)),
        # Bottom-right piece keeps all corners square, its outer corner included.
        _piece(pill, x_line, y_line, right_w, bot_h, CornerRadii()),
    )
    return SplitResult(pill.id, SplitOutcome.QUAD, pieces=pieces)


def split_pill(
    pill: Pill, x_line: float, y_line: float, config: GeometryConfig | None = None
) -> SplitResult:
    """Decide how a click at the crosshair lines changes one pill.

    Args:
        pill: Pill to split
        x_line: X coordinate of the vertical crosshair line
        y_line: Y coordinate of the horizontal crosshair line
        config: Size thresholds and rounding (defaults if None)

    Returns:
        SplitResult describing the replacement pieces or in-place shift
    """
    config = config or GeometryConfig()
    min_part = config.min_part

    v = intersects_vertical(pill, x_line)
    h = intersects_horizontal(pill, y_line)

    if not v and not h:
        return SplitResult(pill.id, SplitOutcome.UNCHANGED)

    can_vertical = (
        x_line - pill.x >= min_part and pill.right - x_line >= min_part
    )
    can_horizontal = (
        y_line - pill.y >= min_part and pill.bottom - y_line >= min_part
    )

    if v and h:
        if can_vertical and can_horizontal:
            return _split_quad(pill, x_line, y_line, config)
        if can_vertical:
            return _split_vertical(pill, x_line, config)
        if can_horizontal:
            return _split_horizontal(pill, y_line, config)
        return _shift_x(pill, x_line, config)

    if v:
        if can_vertical:
            return _split_vertical(pill, x_line, config)
        return _shift_x(pill, x_line, config)

    if can_horizontal:
        return _split_horizontal(pill, y_line, config)
    return _shift_y(pill, y_line, config)


class SplitEngine:
    """Split engine bound to one geometry configuration."""

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def split(self, pill: Pill, x_line: float, y_line: float) -> SplitResult:
        """Run the engine on one pill. See split_pill()."""
        return split_pill(pill, x_line, y_line, self.config)

    def split_all(
        self, pills: list[Pill] | tuple[Pill, ...], x_line: float, y_line: float
    ) -> list[SplitResult]:
        """Run the engine independently on every pill.

        Args:
            pills: Pills as of the click
            x_line: X coordinate of the vertical crosshair line
            y_line: Y coordinate of the horizontal crosshair line

        Returns:
            One result per pill, in input order
        """
        return [self.split(p, x_line, y_line) for p in pills]
