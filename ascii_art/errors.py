#!/usr/bin/env python3
# ascii_art/errors.py
"""
Error taxonomy for the converter.

Every condition here is recoverable: the session catches them at its
command boundary, prints a one-line diagnostic and keeps the last valid
configuration.
"""

from __future__ import annotations

from typing import Optional


class AsciiArtError(Exception):
    """Base class for all converter errors."""


class ResolutionOutOfBoundsError(AsciiArtError, IndexError):
    """Requested column count is outside [min_res, max_res] for the padded image."""

    def __init__(self, resolution: int, min_res: Optional[int] = None, max_res: Optional[int] = None):
        super().__init__(f"Resolution out of image boundaries: {resolution}")
        self.resolution = resolution
        self.min_res = min_res
        self.max_res = max_res


class ImageLoadError(AsciiArtError, OSError):
    """Image file is missing or cannot be decoded."""

    def __init__(self, path: str, reason: str = ""):
        msg = f"Cannot load image {path!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.path = path


class EmptyPaletteError(AsciiArtError, LookupError):
    """A character lookup or render was attempted with no characters."""

    def __init__(self, msg: str = "Character palette is empty"):
        super().__init__(msg)


class CommandFormatError(AsciiArtError, ValueError):
    """Malformed command or argument. The message is the user-facing diagnostic."""


__all__ = [
    "AsciiArtError",
    "ResolutionOutOfBoundsError",
    "ImageLoadError",
    "EmptyPaletteError",
    "CommandFormatError",
]
