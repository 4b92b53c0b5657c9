"""Page geometry shared by the layout engine.

Lengths are in layout units (PDF points for the default A4 page).  The
usable area is the page minus its margins; wrapping only looks at the usable
width and pagination only at the usable height.
"""

from __future__ import annotations

from dataclasses import dataclass

# A4 portrait in points.
A4_WIDTH: float = 595.0
A4_HEIGHT: float = 842.0

DEFAULT_MARGIN_LEFT: float = 50.0
DEFAULT_MARGIN_RIGHT: float = 50.0
DEFAULT_MARGIN_TOP: float = 80.0
DEFAULT_MARGIN_BOTTOM: float = 80.0

# Average glyph advance as a fraction of the font size, used whenever a
# measurer cannot provide a width.
FALLBACK_GLYPH_RATIO: float = 0.6


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Page size and margins of the target medium."""

    width: float = A4_WIDTH
    height: float = A4_HEIGHT
    margin_left: float = DEFAULT_MARGIN_LEFT
    margin_right: float = DEFAULT_MARGIN_RIGHT
    margin_top: float = DEFAULT_MARGIN_TOP
    margin_bottom: float = DEFAULT_MARGIN_BOTTOM

    @property
    def usable_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def usable_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom


A4 = PageGeometry()


__all__ = [
    "A4",
    "A4_HEIGHT",
    "A4_WIDTH",
    "DEFAULT_MARGIN_BOTTOM",
    "DEFAULT_MARGIN_LEFT",
    "DEFAULT_MARGIN_RIGHT",
    "DEFAULT_MARGIN_TOP",
    "FALLBACK_GLYPH_RATIO",
    "PageGeometry",
]
