#!/usr/bin/env python3
# ascii_art/shell/commands.py
"""
Parse one input line into a typed command.

Tokens are split on single spaces. Commands that take an argument need
exactly one; anything else raises CommandFormatError carrying the message
the shell prints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ascii_art.errors import CommandFormatError

EXIT = "exit"
CHARS = "chars"
RENDER = "asciiArt"
ADD = "add"
REMOVE = "remove"
RES = "res"
IMAGE = "image"
OUTPUT = "output"

ALL_ARG = "all"
SPACE_ARG = "space"
UP_ARG = "up"
DOWN_ARG = "down"
RANGE_DELIM = "-"

MIN_PRINTABLE = 32
MAX_PRINTABLE = 126

BASIC_COMMAND_ERROR = "Did not execute due to incorrect command."
PALETTE_FORMAT_ERROR = "Did not {verb} due to incorrect format."
RESOLUTION_FORMAT_ERROR = "Did not change resolution due to incorrect format."
IMAGE_FILE_ERROR = "Did not execute due to problem with image file."
OUTPUT_FORMAT_ERROR = "Did not change output method due to incorrect format."


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class ListChars:
    pass


@dataclass(frozen=True)
class Render:
    pass


@dataclass(frozen=True)
class EditPalette:
    add: bool
    chars: Tuple[str, ...]


@dataclass(frozen=True)
class ChangeResolution:
    up: bool


@dataclass(frozen=True)
class ChangeImage:
    path: str


@dataclass(frozen=True)
class ChangeOutput:
    name: str


Command = Union[Exit, ListChars, Render, EditPalette, ChangeResolution, ChangeImage, ChangeOutput]

_BARE = {EXIT: Exit(), CHARS: ListChars(), RENDER: Render()}


def char_range(first: str, last: str) -> Tuple[str, ...]:
    """Inclusive range of characters; bounds may come in either order."""
    lo, hi = sorted((ord(first), ord(last)))
    return tuple(chr(code) for code in range(lo, hi + 1))


def parse_palette_arg(arg: Optional[str]) -> Optional[Tuple[str, ...]]:
    if arg is None:
        return None
    if len(arg) == 1:
        return (arg,)
    if arg == ALL_ARG:
        return char_range(chr(MIN_PRINTABLE), chr(MAX_PRINTABLE))
    if arg == SPACE_ARG:
        return (" ",)
    bounds = arg.split(RANGE_DELIM)
    if len(bounds) == 2 and all(len(b) == 1 for b in bounds):
        return char_range(*bounds)
    return None


def parse_command(line: str) -> Command:
    bare = _BARE.get(line)
    if bare is not None:
        return bare

    words = line.split(" ")
    name = words[0]
    arg = words[1] if len(words) == 2 else None

    if name in (ADD, REMOVE):
        chars = parse_palette_arg(arg)
        if chars is None:
            raise CommandFormatError(PALETTE_FORMAT_ERROR.format(verb=name))
        return EditPalette(add=(name == ADD), chars=chars)
    if name == RES:
        if arg not in (UP_ARG, DOWN_ARG):
            raise CommandFormatError(RESOLUTION_FORMAT_ERROR)
        return ChangeResolution(up=(arg == UP_ARG))
    if name == IMAGE:
        if not arg:
            raise CommandFormatError(IMAGE_FILE_ERROR)
        return ChangeImage(arg)
    if name == OUTPUT:
        if not arg:
            raise CommandFormatError(OUTPUT_FORMAT_ERROR)
        return ChangeOutput(arg)
    raise CommandFormatError(BASIC_COMMAND_ERROR)
