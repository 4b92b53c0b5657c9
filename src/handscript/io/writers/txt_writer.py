"""Plain-text layout writer.

:func:`write_layout_text` renders a :class:`~handscript.layout.DocumentLayout`
as wrapped lines, one per row, with a form feed row between pages.  Parent
directories are created as needed and UTF-8 without BOM is the default
encoding.
"""

from __future__ import annotations

import os
from pathlib import Path

from handscript.layout.engine import DocumentLayout

PathLikeStr = os.PathLike[str]

PAGE_BREAK = "\f"


def format_layout_text(layout: DocumentLayout) -> str:
    """Return the wrapped lines of ``layout`` with pages separated by form feeds."""

    blocks = ["\n".join(page.lines) for page in layout.pages]
    if not blocks:
        return ""
    return f"\n{PAGE_BREAK}\n".join(blocks) + "\n"


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as provided."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


def write_layout_text(
    path: str | PathLikeStr,
    layout: DocumentLayout,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write the wrapped lines of ``layout`` to ``path``."""

    write_text(path, format_layout_text(layout), encoding=encoding)


__all__ = ["PAGE_BREAK", "format_layout_text", "write_layout_text", "write_text"]
