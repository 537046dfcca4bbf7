from typing import Dict, List

import numpy as np
import pytest
from PIL import Image

from ascii_art.config import Config
from ascii_art.matching.char_matcher import CharMatcher

# Fixed glyph scores so matcher behaviour does not depend on installed fonts.
GLYPH_TABLE: Dict[str, float] = {
    " ": 1.0,
    "#": 0.0,
    "0": 0.30, "1": 0.60, "2": 0.40, "3": 0.42, "4": 0.45,
    "5": 0.41, "6": 0.35, "7": 0.55, "8": 0.32, "9": 0.36,
    "m": 0.25,
}


def fake_brightness(c: str) -> float:
    if c in GLYPH_TABLE:
        return GLYPH_TABLE[c]
    return ((ord(c) * 37) % 97) / 100.0


def solid(width: int, height: int, rgb=(0, 0, 0)) -> np.ndarray:
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[...] = rgb
    return arr


def write_png(path, arr: np.ndarray) -> str:
    Image.fromarray(arr, "RGB").save(path)
    return str(path)


class RecordingOutput:
    name = "recording"

    def __init__(self):
        self.grids: List[List[List[str]]] = []

    def out(self, grid):
        self.grids.append([row[:] for row in grid])


@pytest.fixture
def matcher():
    return CharMatcher("0123456789", brightness_of=fake_brightness)


@pytest.fixture
def half_image():
    """256x128: left half black, right half white."""
    arr = solid(256, 128)
    arr[:, 128:] = 255
    return arr


@pytest.fixture
def image_file(tmp_path, half_image):
    return write_png(tmp_path / "half.png", half_image)


@pytest.fixture
def cfg(tmp_path, image_file):
    c = Config()
    c.update({
        "session": {"image_path": image_file, "resolution": 128},
        "html": {"file": str(tmp_path / "out.html")},
    })
    return c
