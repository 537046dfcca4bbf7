#!/usr/bin/env python3
# ascii_art/shell/state.py
"""Mutable session configuration and dirty tracking for the shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

CharGrid = List[List[str]]


@dataclass
class SessionState:
    image_path: str
    resolution: int
    output_name: str = "console"

    # Last rendered grid; None until the first successful render
    grid: Optional[CharGrid] = field(default=None, repr=False)

    # Palette changed since the last render
    palette_dirty: bool = True
    # Image path or resolution changed since the last render
    config_dirty: bool = True

    @property
    def needs_run(self) -> bool:
        return self.config_dirty or self.palette_dirty or self.grid is None

    def mark_palette_changed(self) -> None:
        self.palette_dirty = True

    def commit_config(self, image_path: str, resolution: int) -> None:
        self.image_path = image_path
        self.resolution = resolution
        self.config_dirty = True

    def store_grid(self, grid: CharGrid) -> None:
        self.grid = grid
        self.palette_dirty = False
        self.config_dirty = False
