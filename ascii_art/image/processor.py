#!/usr/bin/env python3
# ascii_art/image/processor.py
"""
Pixel-level helpers for the conversion pipeline.

- pad():        center an image on a white canvas with power-of-two sides
- partition():  slice a padded image into a grid of equal square cells
- brightness(): luminosity-weighted mean of a region, in [0, 1]

Images are numpy uint8 arrays shaped (height, width, 3).
"""

from __future__ import annotations

from typing import List

import numpy as np

# Rec. 709 luma coefficients
RED_FACTOR = 0.2126
GREEN_FACTOR = 0.7152
BLUE_FACTOR = 0.0722
MAX_RGB = 255

_LUMA = np.array([RED_FACTOR, GREEN_FACTOR, BLUE_FACTOR], dtype=np.float64)

__all__ = [
    "next_power_of_two",
    "pad",
    "partition",
    "brightness",
    "MAX_RGB",
]


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n. The search starts at 2, so 1 maps to 2."""
    p = 2
    while p < n:
        p *= 2
    return p


def pad(image: np.ndarray) -> np.ndarray:
    """
    Embed `image` centered in a white canvas whose sides are powers of two.

    The margin on each axis is split with integer division; when it is odd
    the extra row/column lands on the bottom/right side.
    """
    height, width = image.shape[:2]
    padded_h = next_power_of_two(height)
    padded_w = next_power_of_two(width)
    top = (padded_h - height) // 2
    left = (padded_w - width) // 2

    canvas = np.full((padded_h, padded_w, 3), MAX_RGB, dtype=np.uint8)
    canvas[top:top + height, left:left + width] = image[..., :3]
    canvas.setflags(write=False)
    return canvas


def partition(padded: np.ndarray, rows: int, cols: int) -> List[List[np.ndarray]]:
    """
    Split `padded` into rows x cols square cells of edge width // cols.
    Caller guarantees the edge divides both dimensions.
    """
    size = padded.shape[1] // cols
    return [
        [padded[i * size:(i + 1) * size, j * size:(j + 1) * size] for j in range(cols)]
        for i in range(rows)
    ]


def brightness(image: np.ndarray) -> float:
    """Mean luminosity of `image` scaled to [0, 1]."""
    height, width = image.shape[:2]
    grey = image[..., :3].astype(np.float64) @ _LUMA
    return float(grey.sum()) / (height * width * MAX_RGB)
