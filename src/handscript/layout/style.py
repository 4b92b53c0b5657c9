"""Handwriting style value object."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from handscript.utils.errors import InvalidStyleError


@dataclass(slots=True, frozen=True)
class Style:
    """Visual parameters of a handwriting rendition.

    Attributes
    ----------
    font:
        Font identifier understood by the measurer and the renderer.
    size:
        Font size in layout units.  Must be positive.
    slant:
        Shear applied by renderers, in signed degrees.
    line_spacing:
        Line height as a multiple of ``size``.  Must be positive.
    word_spacing:
        Multiplier applied to the advance of space characters.  Must be
        positive.
    ink_color:
        Colour string, usually ``#rrggbb``.
    """

    font: str
    size: float
    slant: float = 0.0
    line_spacing: float = 1.5
    word_spacing: float = 1.1
    ink_color: str = "#000000"

    def __post_init__(self) -> None:
        for name in ("size", "line_spacing", "word_spacing"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidStyleError(f"{name} must be a positive number, got {value!r}")
        if not math.isfinite(self.slant):
            raise InvalidStyleError(f"slant must be finite, got {self.slant!r}")

    @property
    def line_height(self) -> float:
        """Vertical distance between consecutive baselines."""

        return self.size * self.line_spacing

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


__all__ = ["Style"]
