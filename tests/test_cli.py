from PIL import Image

from microsprite.cli import main

HEADER = """
const unsigned char PROGMEM player[] = { /*2x8x2*/ 0x01, 0x80, 0xff, 0x00 };

// w: 2
const unsigned char PROGMEM wall[] = { 0xff, 0xff };
"""


def _write_header(tmp_path):
    path = tmp_path / "sprites.h"
    path.write_text(HEADER, encoding="utf-8")
    return str(path)


def test_lists_sprites(tmp_path, capsys):
    assert main([_write_header(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "player: 2x8 frames=2 bytes=4",
        "wall: 2x8 bytes=2 ambiguous",
    ]


def test_previews_a_frame(tmp_path, capsys):
    assert main([_write_header(tmp_path), "--preview", "player", "--frame", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["#."] * 8


def test_exports_a_scaled_frame_strip(tmp_path):
    out = tmp_path / "player.png"
    assert main([_write_header(tmp_path), "--export", "player", str(out), "--scale", "3"]) == 0
    with Image.open(out) as img:
        assert img.size == (12, 24)
        assert img.getpixel((0, 0)) == 255


def test_unknown_sprite_is_an_error(tmp_path, capsys):
    assert main([_write_header(tmp_path), "--preview", "ghost"]) == 2
    assert "No sprite named 'ghost'" in capsys.readouterr().err


def test_strict_mode_rejects_ambiguous_sprites(tmp_path, capsys):
    assert main([_write_header(tmp_path), "--strict"]) == 2
    assert "wall" in capsys.readouterr().err
