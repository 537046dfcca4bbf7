import numpy as np

from ascii_art.matching.glyphs import GlyphRenderer, char_brightness, render_glyph


def test_bitmap_shape_and_type():
    bitmap = render_glyph("A")
    assert bitmap.shape == (16, 16)
    assert bitmap.dtype == np.bool_


def test_space_is_fully_lit():
    assert char_brightness(" ") == 1.0


def test_dense_glyph_is_darker_than_space():
    for c in "@#MW":
        assert 0.0 <= char_brightness(c) < 1.0


def test_brightness_is_deterministic():
    fresh = GlyphRenderer()
    for c in "0123456789":
        assert fresh.brightness(c) == char_brightness(c)
        assert (fresh.render(c) == render_glyph(c)).all()


def test_custom_size():
    r = GlyphRenderer(size=8)
    assert r.render("x").shape == (8, 8)
    assert r.brightness(" ") == 1.0
