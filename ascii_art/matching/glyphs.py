#!/usr/bin/env python3
# ascii_art/matching/glyphs.py
"""
Glyph rasterization and the per-character brightness oracle.

A character is drawn in black on a white square canvas; its brightness is
the share of pixels left white. Space is therefore 1.0 and dense glyphs
such as '@' or '#' score lowest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

log = logging.getLogger(__name__)

DEFAULT_GLYPH_SIZE = 16
LIT_THRESHOLD = 128

# Monospace faces tried in order before Pillow's built-in bitmap font.
FONT_CANDIDATES: Sequence[str] = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "/System/Library/Fonts/Monaco.dfont",
    "cour.ttf",
    "Consolas",
)

__all__ = [
    "GlyphRenderer",
    "render_glyph",
    "char_brightness",
    "DEFAULT_GLYPH_SIZE",
]


def _load_font(size: int, font_path: Optional[str]):
    candidates = [font_path] if font_path else []
    candidates.extend(FONT_CANDIDATES)
    for name in candidates:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    log.debug("no TrueType monospace font found, using Pillow default")
    return ImageFont.load_default()


@dataclass
class GlyphRenderer:
    """Renders characters to fixed-size boolean bitmaps and scores them."""
    size: int = DEFAULT_GLYPH_SIZE
    font_path: Optional[str] = None
    _font: Optional[ImageFont.ImageFont] = field(default=None, init=False, repr=False)
    _scores: Dict[str, float] = field(default_factory=dict, init=False, repr=False)

    @property
    def font(self):
        if self._font is None:
            self._font = _load_font(self.size, self.font_path)
        return self._font

    def render(self, char: str) -> np.ndarray:
        """Return a (size, size) bool array, True where the pixel stays white."""
        canvas = Image.new("L", (self.size, self.size), color=255)
        draw = ImageDraw.Draw(canvas)
        left, top, right, bottom = draw.textbbox((0, 0), char, font=self.font)
        x = (self.size - (right - left)) // 2 - left
        y = (self.size - (bottom - top)) // 2 - top
        draw.text((x, y), char, fill=0, font=self.font)
        return np.asarray(canvas) >= LIT_THRESHOLD

    def brightness(self, char: str) -> float:
        """Share of lit pixels in the glyph bitmap, memoized per character."""
        score = self._scores.get(char)
        if score is None:
            bitmap = self.render(char)
            score = float(np.count_nonzero(bitmap)) / bitmap.size
            self._scores[char] = score
        return score


_default_renderer = GlyphRenderer()


def render_glyph(char: str) -> np.ndarray:
    return _default_renderer.render(char)


def char_brightness(char: str) -> float:
    """Brightness in [0, 1] of `char` using the default renderer."""
    return _default_renderer.brightness(char)
