#!/usr/bin/env python3
# ascii_art/styles.py
"""
Style definitions for the shell prompt and diagnostics.
Provides light, dark, and auto themes for prompt_toolkit.
"""

import os

from prompt_toolkit.styles import Style

from ascii_art.config import Config

def make_style(cfg: Config) -> Style:
    theme = cfg["ui"].get("theme", "auto")

    base_dark = {
        "prompt": "#00ff00 bold",
        "error": "#ff5f5f",
        "info": "#87afff",
    }
    base_light = {
        "prompt": "#006600 bold",
        "error": "#af0000",
        "info": "#005faf",
    }

    if theme == "light":
        return Style.from_dict(base_light)
    if theme == "dark":
        return Style.from_dict(base_dark)

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "light":
        return Style.from_dict(base_light)
    return Style.from_dict(base_dark)
