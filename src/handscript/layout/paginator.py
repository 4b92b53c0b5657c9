"""Split wrapped lines into pages of bounded line count."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass

from .geometry import A4, PageGeometry
from .style import Style


@dataclass(slots=True, frozen=True)
class Page:
    """A page of wrapped lines.  ``page_number`` starts at 1."""

    lines: tuple[str, ...]
    page_number: int

    def to_dict(self) -> dict[str, object]:
        return {"page_number": self.page_number, "lines": list(self.lines)}


def max_lines_per_page(style: Style, *, geometry: PageGeometry = A4) -> int:
    """Return how many lines of ``style`` fit in the usable height.

    A line taller than the usable height still gets one line per page so
    that pagination always advances.  A line height that underflows to zero
    leaves the page unbounded.
    """

    line_height = style.line_height
    if line_height <= 0:
        return sys.maxsize
    lines = geometry.usable_height / line_height
    if math.isinf(lines):
        return sys.maxsize
    if not lines >= 1:
        return 1
    return math.floor(lines)


def paginate(
    lines: Iterable[str],
    style: Style,
    *,
    geometry: PageGeometry = A4,
) -> list[Page]:
    """Group ``lines`` into consecutively numbered pages.

    Zero lines produce zero pages; no page is ever empty.
    """

    limit = max_lines_per_page(style, geometry=geometry)
    pages: list[Page] = []
    current: list[str] = []
    page_number = 1

    for line in lines:
        if len(current) >= limit:
            pages.append(Page(tuple(current), page_number))
            current = []
            page_number += 1
        current.append(line)

    if current:
        pages.append(Page(tuple(current), page_number))
    return pages


__all__ = ["Page", "max_lines_per_page", "paginate"]
