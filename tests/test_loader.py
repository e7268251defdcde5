import math

import pytest

from microsprite.errors import AmbiguousMetadataWarning, DecodeError
from microsprite.loader import LoaderSettings, SpriteFrames, SpriteLoader, load_graphics, load_header, load_sprite
from microsprite.rendering.providers import RowPackedProvider
from microsprite.rendering.surface import RasterSurface

SHIP = "const unsigned char PROGMEM ship[] = { /*2x8x3*/ 0x01, 0x00, 0x00, 0x01, 0xff, 0xff };"


def test_annotated_animation_loads_every_frame():
    sprite = load_sprite(SHIP)
    assert isinstance(sprite, SpriteFrames)
    assert len(sprite) == 3
    assert (sprite.width, sprite.height) == (2, 8)
    assert all(frame.size == (2, 8) for frame in sprite)
    assert sprite[0].is_opaque(0, 0) and not sprite[0].is_opaque(1, 0)
    assert sprite[1].is_opaque(1, 0) and not sprite[1].is_opaque(0, 0)
    assert sprite.metadata.frame_count == 3
    assert not sprite.metadata.ambiguous
    assert sprite.metadata.id == "ship"


def test_zero_frames_gives_a_single_surface():
    sprite = load_sprite("const uint8_t dot[] = { /*3x8*/ 1, 1, 1 };")
    assert isinstance(sprite, RasterSurface)
    assert sprite.size == (3, 8)
    assert sprite.metadata.id == "dot"
    assert sprite.to_mask().split("\n")[0] == "###"


def test_load_graphics_is_load_sprite():
    assert load_graphics is load_sprite


def test_malformed_tokens_do_not_abort_the_load():
    sprite = load_sprite("a[] = { /*2x8*/ 0x01, oops };")
    assert sprite.to_mask().split("\n")[0] == "#."
    assert math.isnan(sprite.metadata.raw_bytes[1])
    assert sprite.metadata.invalid_count == 1


def test_inferred_sprite_warns_but_loads():
    with pytest.warns(AmbiguousMetadataWarning):
        sprite = load_sprite("// w: 2\nconst uint8_t wall[] = { 0xff, 0xff };")
    assert sprite.size == (2, 8)
    assert sprite.metadata.ambiguous
    assert all(sprite.is_opaque(x, y) for x in range(2) for y in range(8))


def test_sprite_without_any_geometry_is_a_decode_error():
    with pytest.warns(AmbiguousMetadataWarning):
        with pytest.raises(DecodeError):
            load_sprite("const uint8_t s[] = { 1, 2 };")


def test_strict_loader_rejects_ambiguous_sprites():
    loader = SpriteLoader(LoaderSettings(reject_ambiguous=True))
    with pytest.raises(DecodeError):
        loader.load("// w: 2\nconst uint8_t wall[] = { 0xff, 0xff };")


def test_zero_height_annotation_is_a_decode_error():
    with pytest.raises(DecodeError):
        load_sprite("a[] = { /*4x0*/ 1 };")


def test_provider_can_be_swapped():
    loader = SpriteLoader(provider=RowPackedProvider())
    sprite = loader.load("a[] = { /*8x2*/ 0x80, 0x01 };")
    assert sprite.to_mask() == "#.......\n.......#"


def test_provider_can_be_chosen_by_name():
    loader = SpriteLoader(LoaderSettings(provider="row"))
    assert isinstance(loader.provider, RowPackedProvider)


def test_frames_slice_and_repr():
    sprite = load_sprite(SHIP)
    assert len(sprite[1:]) == 2
    assert "ship" in repr(sprite)


def test_ambiguity_warning_points_at_the_calling_line():
    source = "// w: 2\nconst uint8_t wall[] = { 0xff, 0xff };"
    with pytest.warns(AmbiguousMetadataWarning) as direct:
        SpriteLoader().load(source)
    with pytest.warns(AmbiguousMetadataWarning) as wrapped:
        load_sprite(source)
    with pytest.warns(AmbiguousMetadataWarning) as header:
        SpriteLoader().load_header(source)
    with pytest.warns(AmbiguousMetadataWarning) as module_header:
        load_header(source)
    for record in (direct, wrapped, header, module_header):
        assert record[0].filename == __file__
