import pytest

from ascii_art.errors import CommandFormatError
from ascii_art.shell import commands as cmd


@pytest.mark.parametrize("line,expected", [
    ("exit", cmd.Exit()),
    ("chars", cmd.ListChars()),
    ("asciiArt", cmd.Render()),
    ("res up", cmd.ChangeResolution(up=True)),
    ("res down", cmd.ChangeResolution(up=False)),
    ("image cat.png", cmd.ChangeImage("cat.png")),
    ("output html", cmd.ChangeOutput("html")),
    ("add m", cmd.EditPalette(add=True, chars=("m",))),
    ("remove space", cmd.EditPalette(add=False, chars=(" ",))),
    ("add -", cmd.EditPalette(add=True, chars=("-",))),
])
def test_parse(line, expected):
    assert cmd.parse_command(line) == expected


def test_all_covers_printable_ascii():
    parsed = cmd.parse_command("add all")
    assert parsed.chars[0] == " " and parsed.chars[-1] == "~"
    assert len(parsed.chars) == 95


def test_range_in_either_order():
    assert cmd.parse_command("add a-e").chars == tuple("abcde")
    assert cmd.parse_command("remove e-a").chars == tuple("abcde")


@pytest.mark.parametrize("line,message", [
    ("add", "Did not add due to incorrect format."),
    ("add ab", "Did not add due to incorrect format."),
    ("remove a-", "Did not remove due to incorrect format."),
    ("add a b", "Did not add due to incorrect format."),
    ("res", cmd.RESOLUTION_FORMAT_ERROR),
    ("res sideways", cmd.RESOLUTION_FORMAT_ERROR),
    ("image", cmd.IMAGE_FILE_ERROR),
    ("output", cmd.OUTPUT_FORMAT_ERROR),
    ("hello", cmd.BASIC_COMMAND_ERROR),
    ("", cmd.BASIC_COMMAND_ERROR),
    ("exit now", cmd.BASIC_COMMAND_ERROR),
])
def test_malformed(line, message):
    with pytest.raises(CommandFormatError) as exc:
        cmd.parse_command(line)
    assert str(exc.value) == message
