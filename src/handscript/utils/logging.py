"""Logging utilities.

All loggers live below the ``handscript`` namespace so that applications can
tune the package with a single ``logging.getLogger("handscript")`` call.
:func:`configure_logging` is idempotent: calling it repeatedly only adjusts the
level of the handler it installed the first time.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "handscript"

_HANDLER_ATTR = "_handscript_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced below ``handscript``.

    ``name`` is typically ``__name__``; names already inside the package
    namespace are used unchanged.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install a stderr handler on the package logger and set its level."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = getattr(logger, _HANDLER_ATTR, None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        setattr(logger, _HANDLER_ATTR, handler)
    elif handler.stream is not sys.stderr:
        handler.setStream(sys.stderr)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
