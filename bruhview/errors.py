from __future__ import annotations


class BruhError(Exception):
    """Base class for BRUH codec failures."""


class FormatError(BruhError, ValueError):
    """Raised when a BRUH container is malformed."""


class OutOfBoundsError(BruhError, IndexError):
    """Raised when decoded runs overflow the pixel buffer."""


class EncodingError(BruhError):
    """Raised when a pixel buffer cannot be rasterized."""
