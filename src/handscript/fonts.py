"""Catalogue of bundled handwriting fonts.

Entries map a font identifier (as used in :attr:`Style.font`) to a human
readable display name and the TrueType file shipping the glyphs.  The
catalogue itself is configuration; see ``fonts.catalogue`` in
``defaults.yml``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict

CSS_FALLBACK_FAMILY = "cursive"


class FontInfo(BaseModel):
    """A single catalogue entry."""

    name: str
    display_name: str
    file_name: str

    model_config = ConfigDict(extra="forbid", frozen=True)


def get_font_by_name(name: str, fonts: Iterable[FontInfo]) -> FontInfo | None:
    """Return the catalogue entry called ``name`` or ``None``."""

    for font in fonts:
        if font.name == name:
            return font
    return None


def css_font_family(name: str, fonts: Iterable[FontInfo]) -> str:
    """Return the CSS family for ``name``; generic ``cursive`` when unknown."""

    font = get_font_by_name(name, fonts)
    return font.display_name if font is not None else CSS_FALLBACK_FAMILY


def font_path(font: FontInfo, font_dir: str | os.PathLike[str]) -> Path:
    """Return the expected location of ``font`` inside ``font_dir``."""

    return Path(font_dir) / font.file_name


def font_files(fonts: Iterable[FontInfo]) -> dict[str, str]:
    """Return ``{name: file_name}`` for measurers that load font files."""

    return {font.name: font.file_name for font in fonts}


__all__ = [
    "CSS_FALLBACK_FAMILY",
    "FontInfo",
    "css_font_family",
    "font_files",
    "font_path",
    "get_font_by_name",
]
