import numpy as np
import pytest

from ascii_art.errors import ImageLoadError
from ascii_art.image.loader import load_image
from ascii_art.image.processor import brightness, next_power_of_two, pad, partition

from conftest import solid, write_png


@pytest.mark.parametrize("n,expected", [(1, 2), (2, 2), (3, 4), (5, 8), (64, 64), (65, 128)])
def test_next_power_of_two(n, expected):
    assert next_power_of_two(n) == expected


def test_pad_3x5_centers_source_on_white():
    src = solid(3, 5, (10, 20, 30))
    padded = pad(src)

    assert padded.shape == (8, 4, 3)
    # width margin 1 -> right side; height margin 3 -> 1 top, 2 bottom
    assert (padded[1:6, 0:3] == (10, 20, 30)).all()
    mask = np.ones((8, 4), dtype=bool)
    mask[1:6, 0:3] = False
    assert (padded[mask] == 255).all()


def test_pad_keeps_power_of_two_image():
    src = solid(8, 4, (1, 2, 3))
    padded = pad(src)
    assert padded.shape == src.shape
    assert (padded == src).all()


def test_pad_single_pixel_grows_to_two():
    padded = pad(solid(1, 1))
    assert padded.shape == (2, 2, 3)
    assert (padded[0, 0] == 0).all()
    assert (padded[1, 1] == 255).all()


def test_partition_slices_square_cells():
    img = np.arange(8 * 4 * 3, dtype=np.uint8).reshape(8, 4, 3)
    cells = partition(img, 4, 2)
    assert len(cells) == 4 and all(len(row) == 2 for row in cells)
    assert all(cell.shape == (2, 2, 3) for row in cells for cell in row)
    assert (cells[2][1] == img[4:6, 2:4]).all()


def test_brightness_extremes_and_luma():
    assert brightness(solid(4, 4, (255, 255, 255))) == pytest.approx(1.0)
    assert brightness(solid(4, 4, (0, 0, 0))) == 0.0
    assert brightness(solid(2, 2, (255, 0, 0))) == pytest.approx(0.2126)
    assert brightness(solid(2, 2, (0, 255, 0))) == pytest.approx(0.7152)
    assert brightness(solid(2, 2, (0, 0, 255))) == pytest.approx(0.0722)


def test_brightness_is_mean_over_region():
    img = solid(2, 2)
    img[0, 0] = 255
    assert brightness(img) == pytest.approx(0.25)


def test_load_image_reads_rgb(tmp_path):
    path = write_png(tmp_path / "a.png", solid(5, 3, (7, 8, 9)))
    arr = load_image(path)
    assert arr.shape == (3, 5, 3)
    assert arr.dtype == np.uint8
    assert (arr == (7, 8, 9)).all()
    assert not arr.flags.writeable


def test_load_image_missing(tmp_path):
    with pytest.raises(ImageLoadError) as exc:
        load_image(str(tmp_path / "nope.png"))
    assert exc.value.path.endswith("nope.png")


def test_load_image_garbage(tmp_path):
    p = tmp_path / "bad.png"
    p.write_bytes(b"not an image")
    with pytest.raises(ImageLoadError):
        load_image(str(p))
