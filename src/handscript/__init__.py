"""Hand-drawn text layout.

``handscript`` wraps plain text to a page width, paginates the lines to a
page height and places every character with a small random offset and
rotation so a renderer can draw it like handwriting.  The engine lives in
:mod:`handscript.layout`; configuration, file I/O and the command line
interface live in :mod:`handscript.config`, :mod:`handscript.io` and
:mod:`handscript.cli`.
"""

from .layout import (
    A4,
    CharacterPlacement,
    DocumentLayout,
    Page,
    PageGeometry,
    ReportlabMeasurer,
    Style,
    build_layout,
    paginate,
    place,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    "A4",
    "CharacterPlacement",
    "DocumentLayout",
    "Page",
    "PageGeometry",
    "ReportlabMeasurer",
    "Style",
    "__version__",
    "build_layout",
    "paginate",
    "place",
    "wrap",
]
