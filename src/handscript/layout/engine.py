"""Document-level layout built from the wrap, paginate and place stages.

:func:`place_page` lays out a displayed page the way a canvas does: every line
starts at the left margin and line ``i`` sits on the baseline
``margin_top + i * style.line_height``.  :func:`build_layout` bundles pages
and, optionally, their placements into a :class:`DocumentLayout` that
serializes to plain JSON types.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .geometry import A4, PageGeometry
from .glyph_placer import DEFAULT_JITTER, CharacterPlacement, JitterSettings, RandomSource, place
from .line_breaker import wrap
from .measure import Measurer
from .paginator import Page, max_lines_per_page, paginate
from .style import Style


def layout_text(
    text: str,
    style: Style,
    measure: Measurer,
    *,
    geometry: PageGeometry = A4,
) -> list[Page]:
    """Wrap ``text`` and paginate the resulting lines."""

    return paginate(wrap(text, style, measure, geometry=geometry), style, geometry=geometry)


def select_page(pages: Sequence[Page], page_number: int) -> Page:
    """Return page ``page_number`` or an empty first page when out of range."""

    if 1 <= page_number <= len(pages):
        return pages[page_number - 1]
    return Page((), 1)


def place_page(
    page: Page,
    style: Style,
    measure: Measurer,
    *,
    geometry: PageGeometry = A4,
    rng: RandomSource | None = None,
    jitter: JitterSettings = DEFAULT_JITTER,
) -> list[list[CharacterPlacement]]:
    """Return per-line character placements for ``page``."""

    return [
        place(
            line,
            geometry.margin_left,
            geometry.margin_top + index * style.line_height,
            style,
            measure,
            rng=rng,
            jitter=jitter,
        )
        for index, line in enumerate(page.lines)
    ]


@dataclass(slots=True)
class DocumentLayout:
    """Pages of a laid-out document plus optional placements per page."""

    style: Style
    geometry: PageGeometry
    pages: list[Page]
    placements: dict[int, list[list[CharacterPlacement]]] = field(default_factory=dict)

    @property
    def line_count(self) -> int:
        return sum(len(page.lines) for page in self.pages)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable mapping of the layout."""

        pages: list[dict[str, object]] = []
        for page in self.pages:
            entry = page.to_dict()
            if page.page_number in self.placements:
                entry["placements"] = [
                    [p.to_dict() for p in line] for line in self.placements[page.page_number]
                ]
            pages.append(entry)
        return {
            "style": self.style.to_dict(),
            "geometry": {
                "width": self.geometry.width,
                "height": self.geometry.height,
                "margin_left": self.geometry.margin_left,
                "margin_right": self.geometry.margin_right,
                "margin_top": self.geometry.margin_top,
                "margin_bottom": self.geometry.margin_bottom,
                "usable_width": self.geometry.usable_width,
                "usable_height": self.geometry.usable_height,
            },
            "max_lines_per_page": max_lines_per_page(self.style, geometry=self.geometry),
            "page_count": len(self.pages),
            "pages": pages,
        }


def build_layout(
    text: str,
    style: Style,
    measure: Measurer,
    *,
    geometry: PageGeometry = A4,
    rng: RandomSource | None = None,
    jitter: JitterSettings = DEFAULT_JITTER,
    include_placements: bool = True,
    page_number: int | None = None,
) -> DocumentLayout:
    """Lay out ``text`` into a :class:`DocumentLayout`.

    When ``page_number`` is given only that page is kept, using the
    :func:`select_page` fallback for out-of-range numbers; an empty fallback
    page is dropped so the layout holds no empty pages.
    """

    pages = layout_text(text, style, measure, geometry=geometry)
    if page_number is not None:
        selected = select_page(pages, page_number)
        pages = [selected] if selected.lines else []

    layout = DocumentLayout(style=style, geometry=geometry, pages=pages)
    if include_placements:
        for page in pages:
            layout.placements[page.page_number] = place_page(
                page, style, measure, geometry=geometry, rng=rng, jitter=jitter
            )
    return layout


__all__ = [
    "DocumentLayout",
    "build_layout",
    "layout_text",
    "place_page",
    "select_page",
]
