import logging

import pytest

from microsprite.errors import AmbiguousMetadataWarning, DecodeError
from microsprite.loader import SpriteFrames, load_header
from microsprite.rendering.surface import RasterSurface
from microsprite.source.header import split_statements

HEADER = """
#include <avr/pgmspace.h>

// player sprite
const unsigned char PROGMEM player[] = { /*2x8x2*/ 0x01, 0x80, 0xff, 0x00 };

// w: 2
const unsigned char PROGMEM wall[] = { 0xff, 0xff };

const char *title = "a; b";
"""


def test_split_statements_finds_array_declarations():
    statements = split_statements(HEADER)
    assert len(statements) == 2
    assert "player[]" in statements[0]
    assert statements[1].startswith("// w: 2")
    assert statements[1].endswith("};")


def test_semicolons_inside_braces_strings_and_comments_do_not_split():
    text = 'const char a[] = { 1, /* ; */ 2 }; // trailing ; here\nconst char b[] = { \';\', 3 };'
    statements = split_statements(text)
    assert len(statements) == 2
    assert statements[0].endswith("// trailing ; here")
    assert "b[]" in statements[1]


def test_load_header_keys_sprites_by_name():
    with pytest.warns(AmbiguousMetadataWarning):
        sprites = load_header(HEADER)
    assert list(sprites) == ["player", "wall"]
    assert isinstance(sprites["player"], SpriteFrames)
    assert len(sprites["player"]) == 2
    assert isinstance(sprites["wall"], RasterSurface)
    assert sprites["wall"].size == (2, 8)


def test_load_header_can_skip_undecodable_arrays():
    text = HEADER + "\nconst uint8_t tune[] = { 0x90, 0x45 };\n"
    with pytest.warns(AmbiguousMetadataWarning):
        with pytest.raises(DecodeError):
            load_header(text)
    with pytest.warns(AmbiguousMetadataWarning):
        sprites = load_header(text, skip_invalid=True)
    assert "tune" not in sprites


def test_banner_comment_does_not_override_the_sprite_annotation():
    text = (
        "/* 128x64 OLED sprites */\n"
        "const unsigned char ship[] = { /*8x8*/ " + ", ".join(["0xff"] * 8) + " };\n"
    )
    sprites = load_header(text)
    assert sprites["ship"].size == (8, 8)
    assert not sprites["ship"].metadata.ambiguous


def test_trailing_comment_stays_with_its_own_statement():
    ones = ", ".join(["0x01"] * 8)
    text = (
        "const uint8_t a[] = { /*8x8*/ " + ones + " }; // 16x16 below\n"
        "const uint8_t b[] = { /*8x8*/ " + ones + " };\n"
    )
    statements = split_statements(text)
    assert statements[0].endswith("// 16x16 below")
    assert statements[1].startswith("const uint8_t b[]")
    sprites = load_header(text)
    assert sprites["a"].size == (8, 8)
    assert sprites["b"].size == (8, 8)


def test_width_hint_after_a_statement_does_not_reach_the_next_one(caplog):
    text = "const uint8_t a[] = { /*2x8*/ 1, 2 }; // w: 4\n// w: 2\nconst uint8_t b[] = { 1, 2, 3, 4 };\n"
    with caplog.at_level(logging.WARNING, logger="microsprite.source.metadata"):
        with pytest.warns(AmbiguousMetadataWarning):
            sprites = load_header(text)
    assert sprites["a"].metadata.width_hint is None
    assert sprites["b"].metadata.width_hint == 2
    assert sprites["b"].size == (2, 16)
    assert "disagrees" not in caplog.text


def test_split_statements_logs_what_it_found(caplog):
    with caplog.at_level(logging.DEBUG, logger="microsprite.source.header"):
        split_statements(HEADER)
    assert "Found 2 array declaration(s)" in caplog.text
