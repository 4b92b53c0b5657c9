"""Text layout and character placement engine.

The engine is three pure stages: :func:`wrap` breaks text into lines that fit
the usable page width, :func:`paginate` groups lines into pages, and
:func:`place` turns a line into jittered character placements.  Glyph widths
come from an injected measurer and jitter from an injected random source.
"""

from .engine import DocumentLayout, build_layout, layout_text, place_page, select_page
from .geometry import A4, FALLBACK_GLYPH_RATIO, PageGeometry
from .glyph_placer import (
    DEFAULT_JITTER,
    CharacterPlacement,
    JitterSettings,
    RandomSource,
    place,
)
from .line_breaker import wrap
from .measure import Measurer, ReportlabMeasurer, estimate_width, measure_with_fallback
from .paginator import Page, max_lines_per_page, paginate
from .style import Style

__all__ = [
    "A4",
    "CharacterPlacement",
    "DEFAULT_JITTER",
    "DocumentLayout",
    "FALLBACK_GLYPH_RATIO",
    "JitterSettings",
    "Measurer",
    "Page",
    "PageGeometry",
    "RandomSource",
    "ReportlabMeasurer",
    "Style",
    "build_layout",
    "estimate_width",
    "layout_text",
    "max_lines_per_page",
    "measure_with_fallback",
    "paginate",
    "place",
    "place_page",
    "select_page",
    "wrap",
]
