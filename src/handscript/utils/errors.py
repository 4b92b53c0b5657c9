"""Typed exceptions for styles, presets and I/O formats."""


class InvalidStyleError(ValueError):
    """Raised when a style carries a non-positive or non-finite metric."""


class UnknownStyleError(KeyError):
    """Raised when a named style preset is not present in the configuration."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
