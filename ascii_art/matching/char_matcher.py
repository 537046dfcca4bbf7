#!/usr/bin/env python3
# ascii_art/matching/char_matcher.py
"""
Palette ownership and nearest-brightness character lookup.

The matcher keeps raw glyph brightness per character. Queries run against a
min/max normalized lookup that is rebuilt only on the first query after the
palette changes.
"""

from __future__ import annotations

import bisect
import logging
from typing import Callable, Dict, Iterable, List

from ascii_art.errors import EmptyPaletteError
from ascii_art.matching.glyphs import char_brightness

log = logging.getLogger(__name__)

BrightnessFn = Callable[[str], float]


class CharMatcher:
    """Maps a normalized brightness to the closest palette character."""

    def __init__(self, charset: Iterable[str] = (), brightness_of: BrightnessFn = char_brightness):
        self._brightness_of = brightness_of
        self._palette: Dict[str, float] = {}    # raw brightness
        self._keys: List[float] = []            # sorted normalized brightness
        self._chars: List[str] = []             # char for each key
        self._dirty = True
        for c in charset:
            self.add_char(c)

    # -------- palette --------

    def add_char(self, c: str) -> bool:
        """Add `c`. Returns True if the palette changed."""
        value = self._brightness_of(c)
        is_new = c not in self._palette
        self._palette[c] = value
        if is_new:
            self._dirty = True
        return is_new

    def remove_char(self, c: str) -> bool:
        """Remove `c` if present. Returns True if the palette changed."""
        if self._palette.pop(c, None) is None:
            return False
        self._dirty = True
        return True

    def chars(self) -> List[str]:
        """Palette in ascending character-code order."""
        return sorted(self._palette)

    @property
    def is_empty(self) -> bool:
        return not self._palette

    def __len__(self) -> int:
        return len(self._palette)

    def __contains__(self, c: object) -> bool:
        return c in self._palette

    # -------- lookup --------

    def _rebuild(self) -> None:
        lo = min(self._palette.values())
        hi = max(self._palette.values())
        span = hi - lo
        table: Dict[float, str] = {}
        for c, value in self._palette.items():
            # Degenerate palette: everything collapses onto key 0.0
            key = (value - lo) / span if span > 0 else 0.0
            held = table.get(key)
            if held is None or ord(c) < ord(held):
                table[key] = c
        self._keys = sorted(table)
        self._chars = [table[k] for k in self._keys]
        self._dirty = False
        log.debug("lookup rebuilt: %d chars, %d keys", len(self._palette), len(self._keys))

    def char_for(self, brightness: float) -> str:
        """
        Character whose normalized brightness is closest to `brightness`.
        Equal distances resolve to the lower key.
        """
        if not self._palette:
            raise EmptyPaletteError()
        if self._dirty:
            self._rebuild()

        keys = self._keys
        i = bisect.bisect_left(keys, brightness)
        if i == len(keys):
            return self._chars[-1]
        if keys[i] == brightness or i == 0:
            return self._chars[i]
        below = brightness - keys[i - 1]
        above = keys[i] - brightness
        return self._chars[i - 1] if below <= above else self._chars[i]
