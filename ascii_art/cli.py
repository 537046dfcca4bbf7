#!/usr/bin/env python3
# ascii_art/cli.py
"""
Entry point for the ASCII art shell.
Loads configuration, applies command-line overrides and runs the Shell.
"""

import argparse
import logging
import sys

from ascii_art.config import Config, OUTPUT_NAMES
from ascii_art.errors import AsciiArtError
from ascii_art.logging_conf import setup_logging
from ascii_art.matching.char_matcher import CharMatcher
from ascii_art.matching.glyphs import GlyphRenderer
from ascii_art.shell.session import Shell
from ascii_art.version import version_info

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-art",
        description="Convert an image to ASCII art and tune the result interactively.",
    )
    parser.add_argument("--config", help="Path to a JSON config file.")
    parser.add_argument("--image", help="Initial image path.")
    parser.add_argument("--res", type=int, help="Initial resolution (characters per row).")
    parser.add_argument("--output", choices=OUTPUT_NAMES, help="Initial output method.")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG.")
    parser.add_argument("--version", action="version", version=version_info())
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config.load(args.config)

    overrides = {"session": {}, "logging": {}}
    if args.image:
        overrides["session"]["image_path"] = args.image
    if args.res is not None:
        overrides["session"]["resolution"] = args.res
    if args.output:
        overrides["session"]["output"] = args.output
    if args.log_level:
        overrides["logging"]["level"] = args.log_level
    cfg.update(overrides)
    setup_logging(cfg)

    glyphs = GlyphRenderer(size=cfg["glyph"]["size_px"], font_path=cfg["glyph"]["font"])
    matcher = CharMatcher(cfg["session"]["charset"], brightness_of=glyphs.brightness)
    try:
        shell = Shell(cfg, matcher)
    except AsciiArtError as e:
        log.error("cannot start session: %s", e)
        print(f"Cannot start: {e}", file=sys.stderr)
        return 1
    shell.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
