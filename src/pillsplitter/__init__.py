"""Pill Splitter - Split rounded rectangles with crosshair guide lines.

Pill Splitter is the editing core of an interactive 2D canvas: pills are drawn
by click-drag, moved by drag, and split by clicking while horizontal and
vertical crosshair lines pass through them.

Example:
    $ pillsplitter split 0 0 100 100 --at 50 50

This will show the four 50x50 pieces a click at (50, 50) cuts the pill into.
"""

__version__ = "0.1.0"
__author__ = "Pill Splitter contributors"

__all__ = ["__author__", "__version__"]
