"""Plain-text reader.

:func:`read_text` loads text files without performing any content
normalization.  A UTF-8 byte-order mark is consumed transparently by the
default ``"utf-8-sig"`` codec.  ``FileNotFoundError`` and other I/O errors
propagate to the caller.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]
