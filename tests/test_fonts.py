import pytest

from microsprite.fonts import GLYPH_COUNT, GLYPH_HEIGHT, GLYPH_WIDTH, glyph_for, load_default_font


def test_default_font_has_every_glyph():
    font = load_default_font()
    assert len(font) == GLYPH_COUNT
    assert (font.width, font.height) == (GLYPH_WIDTH, GLYPH_HEIGHT)
    assert not font.metadata.ambiguous
    assert font.metadata.id == "font"


def test_default_font_is_decoded_once():
    assert load_default_font() is load_default_font()


def test_glyph_shapes():
    rows = glyph_for("A").to_mask().split("\n")
    assert rows[0] == "..#.."
    assert rows[6] == "#...#"
    assert glyph_for(" ").to_mask() == "\n".join(["....."] * 7)


def test_glyph_for_rejects_strings_and_unknown_codes():
    with pytest.raises(ValueError):
        glyph_for("AB")
    with pytest.raises(ValueError):
        glyph_for("€")
