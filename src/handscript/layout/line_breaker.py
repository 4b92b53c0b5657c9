"""Greedy width-based line breaking.

Words are maximal runs of non-whitespace; the separators between them are not
preserved.  Each output line joins its words with single spaces.  A word that
is wider than the usable width on its own still gets a line of its own: words
are never split.
"""

from __future__ import annotations

from .geometry import A4, PageGeometry
from .measure import Measurer, measure_with_fallback
from .style import Style


def wrap(
    text: str,
    style: Style,
    measure: Measurer,
    *,
    geometry: PageGeometry = A4,
) -> list[str]:
    """Wrap ``text`` into lines no wider than ``geometry.usable_width``.

    Parameters
    ----------
    text:
        Raw input.  Non-string or empty input yields ``[]``.
    style:
        Style handed to ``measure``.
    measure:
        Width measurer; faults fall back to the average-glyph estimate.
    geometry:
        Page geometry supplying the usable width.

    Returns
    -------
    list[str]
        Lines in reading order.  Only a line consisting of a single word may
        measure wider than the usable width.
    """

    if not isinstance(text, str) or not text:
        return []

    max_width = geometry.usable_width
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        width = measure_with_fallback(measure, candidate, style)
        if width > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines


__all__ = ["wrap"]
