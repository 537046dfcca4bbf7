#!/usr/bin/env python3
# ascii_art/image/loader.py
"""Image source: decode a file into an immutable RGB pixel array."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from ascii_art.errors import ImageLoadError

log = logging.getLogger(__name__)


def load_image(path: str) -> np.ndarray:
    """
    Read `path` and return a read-only uint8 array of shape (height, width, 3).
    Raises ImageLoadError if the file cannot be opened or decoded.
    """
    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
            arr = np.array(rgb, dtype=np.uint8)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        log.debug("image load failed for %s: %s", path, e)
        raise ImageLoadError(path, str(e)) from e

    arr.setflags(write=False)
    log.debug("loaded %s (%dx%d)", path, arr.shape[1], arr.shape[0])
    return arr
