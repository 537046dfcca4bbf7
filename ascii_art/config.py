#!/usr/bin/env python3
# ascii_art/config.py
"""
Config loader and defaults for the ASCII art shell.

Goals:
- Optional single JSON file per user; never written by the app.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- No external deps.

Usage:
    from ascii_art.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/ascii_art/ascii_art.json or OS-specific
    res = cfg["session"]["resolution"]
    cfg.update({"session": {"output": "html"}})
"""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

log = logging.getLogger(__name__)

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "session": {
        "image_path": "cat.jpeg",
        "resolution": 128,               # characters per row
        "charset": "0123456789",
        "output": "console",             # console | html
        "prompt": ">>> ",
    },
    "html": {
        "file": "out.html",
        "font": "Courier New",
        "font_size_px": 4,
    },
    "glyph": {
        "size_px": 16,                   # side of the square glyph bitmap
        "font": None,                    # TrueType path or None for auto
    },
    "ui": {
        "theme": "auto",                 # auto | light | dark
    },
    "logging": {
        "level": "WARNING",
        "file": None,                    # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

OUTPUT_NAMES = ("console", "html")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiArt")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiArt")
    return os.path.join(os.path.expanduser("~/.config"), "ascii_art")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_ART_CONFIG env override."""
    env = os.environ.get("ASCII_ART_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_art.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_choice(v: Any, choices: Tuple[str, ...], default: str) -> str:
    return v if v in choices else default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    # Detach from DEFAULT_CONFIG and the caller's dicts before coercing in place
    c = json.loads(json.dumps(_deep_merge(DEFAULT_CONFIG, cfg or {})))

    # session
    s = c["session"]
    s["image_path"] = str(s.get("image_path") or DEFAULT_CONFIG["session"]["image_path"])
    s["resolution"] = _coerce_int(s.get("resolution"), DEFAULT_CONFIG["session"]["resolution"], (1, 65536))
    charset = s.get("charset")
    if not isinstance(charset, str):
        charset = DEFAULT_CONFIG["session"]["charset"]
    s["charset"] = "".join(dict.fromkeys(charset))      # drop duplicates, keep order
    s["output"] = _coerce_choice(s.get("output"), OUTPUT_NAMES, DEFAULT_CONFIG["session"]["output"])
    s["prompt"] = str(s.get("prompt") if s.get("prompt") is not None else DEFAULT_CONFIG["session"]["prompt"])

    # html
    h = c["html"]
    h["file"] = str(h.get("file") or DEFAULT_CONFIG["html"]["file"])
    h["font"] = str(h.get("font") or DEFAULT_CONFIG["html"]["font"])
    h["font_size_px"] = _coerce_int(h.get("font_size_px"), DEFAULT_CONFIG["html"]["font_size_px"], (1, 64))

    # glyph
    g = c["glyph"]
    g["size_px"] = _coerce_int(g.get("size_px"), DEFAULT_CONFIG["glyph"]["size_px"], (4, 256))
    gf = g.get("font")
    g["font"] = str(gf) if gf else None

    # ui
    ui = c["ui"]
    ui["theme"] = _coerce_choice(ui.get("theme"), ("auto", "light", "dark"), DEFAULT_CONFIG["ui"]["theme"])

    # logging
    lg = c["logging"]
    level = str(lg.get("level") or "").upper()
    lg["level"] = level if level in LOG_LEVELS else DEFAULT_CONFIG["logging"]["level"]
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate({}))
    path: Optional[str] = None

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Read the user file if it exists. A missing or corrupt file yields defaults."""
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            return cls(_validate(DEFAULT_CONFIG), cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable config %s: %s", cfg_path, e)
            user_cfg = {}
        if not isinstance(user_cfg, dict):
            log.warning("ignoring config %s: top level is not an object", cfg_path)
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    @property
    def image_path(self) -> str:
        return self.data["session"]["image_path"]

    @property
    def resolution(self) -> int:
        return self.data["session"]["resolution"]


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "OUTPUT_NAMES",
    "_default_config_path",
]
