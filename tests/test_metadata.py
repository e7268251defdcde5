import logging
import math

from microsprite.errors import ParseError
from microsprite.source.metadata import (
    ExplicitDimensions,
    InferredDimensions,
    parse_byte_values,
    parse_int_literal,
    parse_metadata,
)
from microsprite.source.scanner import find_array_name, find_dimension_annotation, find_width_hint


def test_parse_int_literal_forms():
    assert parse_int_literal("0x1F") == 31
    assert parse_int_literal(" 10 ") == 10
    assert parse_int_literal("0b11") == 3
    assert parse_int_literal("012") == 12
    assert parse_int_literal("7u") == 7
    assert parse_int_literal("0xFFUL") == 255
    assert parse_int_literal("0") == 0


def test_parse_byte_values_trims_dangling_comma():
    values, errors = parse_byte_values("0x1F, 10, 0b11, 012, 7u, ")
    assert values == (31, 10, 3, 12, 7)
    assert errors == ()


def test_malformed_tokens_become_nan_in_place():
    values, errors = parse_byte_values("1, foo, 3")
    assert len(values) == 3
    assert values[0] == 1 and values[2] == 3
    assert math.isnan(values[1])
    assert errors == (ParseError(1, "foo"),)


def test_empty_initializer_has_no_bytes():
    assert parse_byte_values("   ") == ((), ())


def test_explicit_annotation_sets_all_dimensions():
    meta = parse_metadata("const unsigned char PROGMEM ship[] = { /*16x8x4*/ 0x00, 0x3c };")
    assert meta.dimensions == ExplicitDimensions(16, 8, 4)
    assert meta.declared_width == 16
    assert meta.height == 8
    assert meta.frame_count == 4
    assert not meta.ambiguous
    assert meta.id == "ship"


def test_explicit_annotation_without_frames():
    meta = parse_metadata("bmp[] = { //128x64\n 0x00 };")
    assert meta.dimensions == ExplicitDimensions(128, 64, 0)
    assert meta.frame_count == 0


def test_trailing_x_without_digits_means_no_frames():
    assert parse_metadata("a[] = { /*8x8x*/ 1 };").frame_count == 0


def test_width_hint_infers_height_from_byte_count():
    statement = "// w: 4\nconst uint8_t s[] = { 1, 2, 3, 4, 5, 6, 7, 8, 9 };"
    meta = parse_metadata(statement)
    assert meta.ambiguous
    assert meta.dimensions == InferredDimensions(width=4, height=16)
    assert meta.frame_count == 0
    assert meta.width_hint == 4


def test_missing_geometry_leaves_height_zero():
    meta = parse_metadata("s[] = { 1, 2 };")
    assert meta.ambiguous
    assert meta.declared_width is None
    assert meta.height == 0


def test_zero_width_hint_is_ignored():
    assert parse_metadata("// w:0\ns[] = { 1, 2 };").dimensions == InferredDimensions(None, 0)


def test_annotation_overrides_hint_and_logs_mismatch(caplog):
    statement = "// w: 3\nconst uint8_t s[] = { /*2x8*/ 1, 2 };"
    with caplog.at_level(logging.WARNING, logger="microsprite.source.metadata"):
        meta = parse_metadata(statement)
    assert meta.declared_width == 2
    assert not meta.ambiguous
    assert "disagrees" in caplog.text


def test_label_overrides_declared_name():
    assert parse_metadata("ship[] = { /*1x8*/ 1 };", label="hero").id == "hero"


def test_byte_at_reads_missing_and_invalid_as_zero():
    meta = parse_metadata("a[] = { /*2x8*/ 5, bad };")
    assert meta.byte_at(0) == 5
    assert meta.byte_at(1) == 0
    assert meta.byte_at(7) == 0
    assert meta.invalid_count == 1


def test_scanner_helpers():
    assert find_dimension_annotation("{ /* 5x7x256 */") is not None
    assert find_dimension_annotation("{ /* 5x7x256 */").frames == 256
    assert find_dimension_annotation("16x8 outside any comment") is None
    assert find_width_hint("/* w:  12 wide */") == 12
    assert find_width_hint("no hint here") is None
    assert find_array_name("const static unsigned char font[] PROGMEM = {") == "font"
    assert find_array_name("int x = 3;") is None


def test_annotation_inside_the_braces_beats_earlier_comments():
    statement = "/* 128x64 display */\n// w: 4\nconst uint8_t ship[] = { /*8x8*/ 0xff, /* w: 8 */ 0xff };"
    assert find_dimension_annotation(statement).width == 8
    assert find_width_hint(statement) == 8
    meta = parse_metadata(statement)
    assert meta.dimensions == ExplicitDimensions(8, 8, 0)


def test_comments_after_the_initializer_are_ignored():
    statement = "const uint8_t a[] = { /*2x8*/ 1, 2 }; // 16x16 w: 4"
    assert find_dimension_annotation(statement).width == 2
    assert find_width_hint(statement) is None
