#!/usr/bin/env python3
# ascii_art/algorithm.py
"""
Conversion of one (image, resolution) pair into a character grid.

Construction does the expensive part once: load, pad, partition and cache
the brightness of every cell. run() only queries the shared CharMatcher,
so palette edits show up on the next run without rebuilding.
"""

from __future__ import annotations

import logging
from typing import Callable, List

import numpy as np

from ascii_art.errors import ResolutionOutOfBoundsError
from ascii_art.image.loader import load_image
from ascii_art.image.processor import brightness, pad, partition
from ascii_art.matching.char_matcher import CharMatcher

log = logging.getLogger(__name__)

CharGrid = List[List[str]]
ImageLoader = Callable[[str], np.ndarray]


def resolution_bounds(padded: np.ndarray) -> tuple:
    """(min_res, max_res) accepted for a padded image."""
    height, width = padded.shape[:2]
    return max(1, width // height), width


class AsciiArtAlgorithm:
    def __init__(
        self,
        image_path: str,
        resolution: int,
        matcher: CharMatcher,
        loader: ImageLoader = load_image,
    ):
        self.image_path = image_path
        self.resolution = resolution
        self._matcher = matcher

        padded = pad(loader(image_path))
        min_res, max_res = resolution_bounds(padded)
        # Cells must tile the padded width exactly
        if resolution < min_res or resolution > max_res or max_res % resolution:
            raise ResolutionOutOfBoundsError(resolution, min_res, max_res)

        height, width = padded.shape[:2]
        size = width // resolution
        self.cols = resolution
        self.rows = height // size

        cells = partition(padded, self.rows, self.cols)
        self._brightness = [[brightness(cell) for cell in row] for row in cells]
        log.debug(
            "algorithm built for %s: padded %dx%d, grid %dx%d, cell %dpx",
            image_path, width, height, self.cols, self.rows, size,
        )

    @property
    def brightness_grid(self) -> List[List[float]]:
        return [row[:] for row in self._brightness]

    def run(self) -> CharGrid:
        char_for = self._matcher.char_for
        return [[char_for(b) for b in row] for row in self._brightness]
