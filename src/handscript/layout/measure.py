"""Glyph width measurement.

A *measurer* is any callable ``measure(text, style) -> float`` returning the
rendered width of ``text`` in layout units.  The layout engine treats
measurers as opaque and fallible: :func:`measure_with_fallback` converts a
raised exception or a non-finite result into the fixed average-glyph
estimate of :func:`estimate_width`, so wrapping and placement always
complete.

:class:`ReportlabMeasurer` is the default concrete measurer.  It reads font
metrics through ``reportlab`` and is imported lazily so the rest of
:mod:`handscript.layout` stays free of rendering dependencies.
"""

from __future__ import annotations

import math
import numbers
import os
import threading
from collections.abc import Callable, Mapping
from pathlib import Path

from handscript.utils.logging import get_logger

from .geometry import FALLBACK_GLYPH_RATIO
from .style import Style

Measurer = Callable[[str, Style], float]

_log = get_logger(__name__)


def estimate_width(text: str, style: Style, *, ratio: float = FALLBACK_GLYPH_RATIO) -> float:
    """Return ``len(text) * style.size * ratio``; ``0.0`` for empty text."""

    if not text:
        return 0.0
    return len(text) * style.size * ratio


def measure_with_fallback(
    measure: Measurer,
    text: str,
    style: Style,
    *,
    ratio: float = FALLBACK_GLYPH_RATIO,
) -> float:
    """Measure ``text`` with ``measure``, falling back to :func:`estimate_width`.

    The fallback is used when the measurer raises, returns something that is
    not a real number, or returns ``NaN``/infinity or a number too large for
    a float.  Faults are logged at DEBUG level only.
    """

    try:
        width = measure(text, style)
    except Exception as exc:  # noqa: BLE001 - measurer faults are recovered here
        _log.debug("measurer raised %s for %r; using estimate", type(exc).__name__, text)
        return estimate_width(text, style, ratio=ratio)
    if isinstance(width, bool) or not isinstance(width, numbers.Real):
        _log.debug("measurer returned %r for %r; using estimate", width, text)
        return estimate_width(text, style, ratio=ratio)
    try:
        value = float(width)
    except (OverflowError, TypeError, ValueError):
        _log.debug("measurer returned an unconvertible %s for %r; using estimate",
                   type(width).__name__, text)
        return estimate_width(text, style, ratio=ratio)
    if not math.isfinite(value):
        _log.debug("measurer returned %r for %r; using estimate", width, text)
        return estimate_width(text, style, ratio=ratio)
    return value


class ReportlabMeasurer:
    """Measure strings with ``reportlab`` font metrics.

    ``style.font`` is resolved once per font name, in order:

    1. a font already registered with ``reportlab`` (including the 14
       standard PDF fonts such as ``Helvetica``);
    2. a TrueType file in ``font_dir``, named by ``font_files[font]`` or
       ``<font>.ttf``, which gets registered;
    3. ``fallback_font``.

    Resolution is guarded by a lock; measuring afterwards is read-only.
    """

    def __init__(
        self,
        font_dir: str | os.PathLike[str] | None = None,
        *,
        fallback_font: str = "Helvetica",
        font_files: Mapping[str, str] | None = None,
    ) -> None:
        self.font_dir: Path | None = Path(font_dir) if font_dir is not None else None
        self.fallback_font = fallback_font
        self.font_files: dict[str, str] = dict(font_files or {})
        self._resolved: dict[str, str] = {}
        self._lock = threading.Lock()

    def resolve_font(self, font: str) -> str:
        """Return the ``reportlab`` font name used to measure ``font``."""

        with self._lock:
            resolved = self._resolved.get(font)
            if resolved is None:
                resolved = self._resolve_uncached(font)
                self._resolved[font] = resolved
        return resolved

    def _resolve_uncached(self, font: str) -> str:
        from reportlab.pdfbase import pdfmetrics
        from reportlab.pdfbase.ttfonts import TTFont

        if font in pdfmetrics.standardFonts or font in pdfmetrics.getRegisteredFontNames():
            return font

        if self.font_dir is not None:
            path = self.font_dir / self.font_files.get(font, f"{font}.ttf")
            if path.is_file():
                try:
                    pdfmetrics.registerFont(TTFont(font, str(path)))
                except Exception as exc:  # noqa: BLE001 - unreadable font files fall back
                    _log.warning("could not register font %s from %s: %s", font, path, exc)
                else:
                    _log.debug("registered font %s from %s", font, path)
                    return font

        _log.warning("font %s unavailable; measuring with %s", font, self.fallback_font)
        return self.fallback_font

    def __call__(self, text: str, style: Style) -> float:
        from reportlab.pdfbase.pdfmetrics import stringWidth

        return stringWidth(text, self.resolve_font(style.font), style.size)


__all__ = [
    "Measurer",
    "ReportlabMeasurer",
    "estimate_width",
    "measure_with_fallback",
]
