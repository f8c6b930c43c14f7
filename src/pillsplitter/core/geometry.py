"""Geometric predicates and helpers for pills and split lines.

This module provides:
- Strict line/rectangle interior intersection tests
- Normalization of an anchor/pointer pair into a non-negative box
- Pixel rounding matching the pointer source's convention

All functions are pure and stateless.
"""

import math

from pillsplitter.domain import Pill


def intersects_vertical(pill: Pill, x_line: float) -> bool:
    """Check whether a vertical line crosses the pill's interior.

    A line lying exactly on the left or right edge does not count.

    Args:
        pill: Pill to test
        x_line: X coordinate of the vertical line

    Returns:
        True if pill.x < x_line < pill.x + pill.width

    Examples:
        >>> p = Pill(1, 0, 0, 100, 50, "red")
        >>> intersects_vertical(p, 50)
        True
        >>> intersects_vertical(p, 100)
        False
    """
    return pill.x < x_line < pill.x + pill.width


def intersects_horizontal(pill: Pill, y_line: float) -> bool:
    """Check whether a horizontal line crosses the pill's interior.

    A line lying exactly on the top or bottom edge does not count.

    Args:
        pill: Pill to test
        y_line: Y coordinate of the horizontal line

    Returns:
        True if pill.y < y_line < pill.y + pill.height
    """
    return pill.y < y_line < pill.y + pill.height


def normalize_box(
    anchor_x: float, anchor_y: float, x: float, y: float
) -> tuple[float, float, float, float]:
    """Compute the axis-aligned box spanned by an anchor and a pointer.

    Args:
        anchor_x: X where the gesture started
        anchor_y: Y where the gesture started
        x: Current pointer x
        y: Current pointer y

    Returns:
        Tuple of (left, top, width, height) with non-negative width and height

    Examples:
        >>> normalize_box(100, 100, 40, 160)
        (40, 100, 60, 60)
    """
    return (
        min(anchor_x, x),
        min(anchor_y, y),
        abs(x - anchor_x),
        abs(y - anchor_y),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest whole pixel, halves going towards +infinity.

    Python's round() uses banker's rounding, which would snap 0.5 and 1.5
    to different sides.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)
