"""JSON layout writer.

The document produced by :func:`write_layout_json` is the hand-off format for
external renderers: style, page geometry, and per page the wrapped lines plus,
when computed, one list of character placements per line.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from handscript.layout.engine import DocumentLayout

PathLikeStr = os.PathLike[str]


def write_layout_json(
    path: str | PathLikeStr,
    layout: DocumentLayout,
    *,
    encoding: str = "utf-8",
    indent: int | None = 2,
) -> None:
    """Serialize ``layout`` to ``path`` as UTF-8 JSON."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding) as f:
        json.dump(layout.to_dict(), f, ensure_ascii=False, indent=indent)
        f.write("\n")


__all__ = ["write_layout_json"]
