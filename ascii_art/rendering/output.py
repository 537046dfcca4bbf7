#!/usr/bin/env python3
# ascii_art/rendering/output.py
"""
Output sinks for rendered character grids.

- Common API: AsciiOutput.out(grid)
- Sinks are created by name through make_output(); register() adds new ones.
- ConsoleOutput prints through prompt_toolkit, HtmlOutput writes a page.
"""

from __future__ import annotations

import html
import logging
from typing import Callable, Dict, List, Optional

from prompt_toolkit import print_formatted_text

log = logging.getLogger(__name__)

CharGrid = List[List[str]]

DEFAULT_HTML_FILE = "out.html"
DEFAULT_HTML_FONT = "Courier New"

__all__ = [
    "AsciiOutput",
    "ConsoleOutput",
    "HtmlOutput",
    "make_output",
    "register",
    "output_names",
]

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII Art</title>
</head>
<body style="background:#ffffff; color:#000000;">
<pre style="font-family:'{font}', monospace; font-size:{size}px; line-height:1.0; letter-spacing:0;">
{body}
</pre>
</body>
</html>
"""


class AsciiOutput:
    """Interface for all sinks."""
    name: str = "base"

    def out(self, grid: CharGrid) -> None:
        raise NotImplementedError


class ConsoleOutput(AsciiOutput):
    """Print each row with a space after every character to square the cells."""

    name = "console"

    def __init__(self, printer: Optional[Callable[[str], None]] = None):
        self._print = printer or print_formatted_text

    def out(self, grid: CharGrid) -> None:
        for row in grid:
            self._print("".join(c + " " for c in row))


class HtmlOutput(AsciiOutput):
    """Write the grid as a standalone HTML page. Overwrites on every render."""

    name = "html"

    def __init__(self, path: str = DEFAULT_HTML_FILE, font: str = DEFAULT_HTML_FONT, font_size_px: int = 4):
        self.path = path
        self.font = font
        self.font_size_px = font_size_px

    def render_html(self, grid: CharGrid) -> str:
        body = "\n".join(html.escape("".join(row)) for row in grid)
        return _HTML_TEMPLATE.format(font=html.escape(self.font), size=self.font_size_px, body=body)

    def out(self, grid: CharGrid) -> None:
        page = self.render_html(grid)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(page)
        log.debug("wrote %d rows to %s", len(grid), self.path)


# -------------------------
# Registry
# -------------------------

OutputFactory = Callable[[Dict], AsciiOutput]

_FACTORIES: Dict[str, OutputFactory] = {
    "console": lambda opts: ConsoleOutput(),
    "html": lambda opts: HtmlOutput(
        opts.get("file", DEFAULT_HTML_FILE),
        opts.get("font", DEFAULT_HTML_FONT),
        int(opts.get("font_size_px", 4)),
    ),
}


def register(name: str, factory: OutputFactory) -> None:
    _FACTORIES[name] = factory


def output_names() -> List[str]:
    return list(_FACTORIES)


def make_output(name: str, opts: Optional[Dict] = None) -> Optional[AsciiOutput]:
    """Build the sink called `name`, or None if no such sink exists."""
    factory = _FACTORIES.get(name)
    if factory is None:
        return None
    return factory(opts or {})
