#!/usr/bin/env python3
# ascii_art/shell/session.py
"""
Interactive session controller.

Owns one long-lived CharMatcher and the current AsciiArtAlgorithm. Each
command runs to completion before the next line is read. The algorithm is
rebuilt only when the image or resolution changes, and re-run only when the
palette or that configuration changed since the last render.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from ascii_art.algorithm import AsciiArtAlgorithm, ImageLoader
from ascii_art.config import Config
from ascii_art.errors import CommandFormatError, ImageLoadError, ResolutionOutOfBoundsError
from ascii_art.image.loader import load_image
from ascii_art.matching.char_matcher import CharMatcher
from ascii_art.rendering.output import AsciiOutput, make_output
from ascii_art.shell import commands as cmd
from ascii_art.shell.state import SessionState
from ascii_art.styles import make_style

log = logging.getLogger(__name__)

EMPTY_CHARSET_ERROR = "Did not execute. Charset is empty."
RESOLUTION_BOUND_ERROR = "Did not change resolution due to exceeding boundaries."
OUTPUT_FILE_ERROR = "Did not execute due to problem with output file."
NEW_RES_SET_FORMAT = "Resolution set to {res}."

LineReader = Callable[[], str]
Echo = Callable[[str, str], None]


class Shell:
    """
    Command loop over a SessionState.

    `read_line` supplies one line per call and raises EOFError when input
    ends. `echo(text, kind)` receives every message, kind being "info" or
    "error". Both default to prompt_toolkit on the terminal.
    """

    def __init__(
        self,
        cfg: Optional[Config] = None,
        matcher: Optional[CharMatcher] = None,
        read_line: Optional[LineReader] = None,
        echo: Optional[Echo] = None,
        loader: ImageLoader = load_image,
    ):
        self.cfg = cfg or Config()
        session_cfg = self.cfg["session"]
        self.matcher = matcher if matcher is not None else CharMatcher(session_cfg["charset"])
        self._loader = loader
        self._style = make_style(self.cfg)
        self._echo = echo or self._print

        self.state = SessionState(
            image_path=session_cfg["image_path"],
            resolution=session_cfg["resolution"],
            output_name=session_cfg["output"],
        )
        # Raises ImageLoadError / ResolutionOutOfBoundsError for a bad starting config
        self.algorithm = AsciiArtAlgorithm(
            self.state.image_path, self.state.resolution, self.matcher, loader=self._loader,
        )
        self.output: AsciiOutput = self._make_output(self.state.output_name)
        self._read_line = read_line or self._prompt_reader(session_cfg["prompt"])

    # -------- terminal I/O --------

    def _prompt_reader(self, message: str) -> LineReader:
        session: PromptSession = PromptSession(FormattedText([("class:prompt", message)]), style=self._style)
        return session.prompt

    def _print(self, text: str, kind: str) -> None:
        print_formatted_text(FormattedText([(f"class:{kind}", text)]), style=self._style)

    def _make_output(self, name: str) -> Optional[AsciiOutput]:
        return make_output(name, self.cfg["html"])

    # -------- loop --------

    def run(self) -> None:
        while True:
            try:
                line = self._read_line()
            except KeyboardInterrupt:
                continue
            except EOFError:
                return
            if not self.dispatch(line):
                return

    def dispatch(self, line: str) -> bool:
        """Execute one input line. Returns False when the session should end."""
        try:
            command = cmd.parse_command(line)
        except CommandFormatError as e:
            log.debug("rejected %r: %s", line, e)
            self._echo(str(e), "error")
            return True

        if isinstance(command, cmd.Exit):
            return False
        if isinstance(command, cmd.ListChars):
            self._echo("".join(c + " " for c in self.matcher.chars()), "info")
        elif isinstance(command, cmd.Render):
            self.render()
        elif isinstance(command, cmd.EditPalette):
            self.edit_palette(command.chars, command.add)
        elif isinstance(command, cmd.ChangeResolution):
            self.change_resolution(command.up)
        elif isinstance(command, cmd.ChangeImage):
            self.rebuild(command.path, self.state.resolution)
        elif isinstance(command, cmd.ChangeOutput):
            self.change_output(command.name)
        return True

    # -------- commands --------

    def edit_palette(self, chars, add: bool) -> bool:
        edit = self.matcher.add_char if add else self.matcher.remove_char
        changed = False
        for c in chars:
            changed = edit(c) or changed
        if changed:
            self.state.mark_palette_changed()
        return changed

    def change_resolution(self, up: bool) -> bool:
        current = self.state.resolution
        new_res = current * 2 if up else current // 2
        if new_res == current:
            self._echo(cmd.RESOLUTION_FORMAT_ERROR, "error")
            return False
        if not self.rebuild(self.state.image_path, new_res):
            return False
        self._echo(NEW_RES_SET_FORMAT.format(res=self.state.resolution), "info")
        return True

    def rebuild(self, image_path: str, resolution: int) -> bool:
        """Swap in a new algorithm; on failure keep the previous one."""
        try:
            algorithm = AsciiArtAlgorithm(image_path, resolution, self.matcher, loader=self._loader)
        except ImageLoadError as e:
            log.warning("%s", e)
            self._echo(cmd.IMAGE_FILE_ERROR, "error")
            return False
        except ResolutionOutOfBoundsError as e:
            log.warning("%s (allowed %s..%s)", e, e.min_res, e.max_res)
            self._echo(RESOLUTION_BOUND_ERROR, "error")
            return False
        self.algorithm = algorithm
        self.state.commit_config(image_path, resolution)
        log.debug("config now %s @ %d", image_path, resolution)
        return True

    def change_output(self, name: str) -> bool:
        output = self._make_output(name)
        if output is None:
            self._echo(cmd.OUTPUT_FORMAT_ERROR, "error")
            return False
        self.output = output
        self.state.output_name = output.name
        return True

    def render(self) -> bool:
        if self.matcher.is_empty:
            self._echo(EMPTY_CHARSET_ERROR, "error")
            return False
        if self.state.needs_run:
            log.debug(
                "running algorithm (config_dirty=%s palette_dirty=%s)",
                self.state.config_dirty, self.state.palette_dirty,
            )
            self.state.store_grid(self.algorithm.run())
        try:
            self.output.out(self.state.grid)
        except OSError as e:
            log.warning("output failed: %s", e)
            self._echo(OUTPUT_FILE_ERROR, "error")
            return False
        return True
