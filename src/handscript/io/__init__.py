"""Extension based registry for file I/O.

Readers turn a file into raw text; ``.txt`` is registered by default.  Writers
serialize a :class:`~handscript.layout.DocumentLayout`; ``.txt`` (wrapped
lines) and ``.json`` (full layout with placements) are registered by default.
The registry dispatches on the lower-cased file extension.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..layout.engine import DocumentLayout
from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_text
from .writers.json_writer import write_layout_json
from .writers.txt_writer import write_layout_text

# Handlers take the path (and, for writers, the layout) plus keyword options.
ReaderFunc = Callable[..., str]
WriterFunc = Callable[..., None]

_READERS: dict[str, ReaderFunc] = {}
_WRITERS: dict[str, WriterFunc] = {}


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".txt"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a layout writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def supported_output_extensions() -> list[str]:
    """Return the registered writer extensions, sorted."""

    return sorted(_WRITERS)


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], layout: DocumentLayout, **kwargs: Any) -> None:
    """Write ``layout`` to ``path`` using the registered writer for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, layout, **kwargs)


register_reader(".txt", read_text)
register_writer(".txt", write_layout_text)
register_writer(".json", write_layout_json)

__all__ = [
    "ReaderFunc",
    "WriterFunc",
    "register_reader",
    "register_writer",
    "get_extension",
    "supported_output_extensions",
    "read_file",
    "write_file",
]
