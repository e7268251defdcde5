from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from PIL import Image

from .loader import LoaderSettings, Sprite, SpriteFrames, SpriteLoader
from .rendering.providers import DEFAULT_PROVIDER, PROVIDERS
from .rendering.surface import RasterSurface


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="microsprite: decode PROGMEM sprite literals and inspect the result."
    )
    parser.add_argument("path", help="C/C++ header or source file containing sprite arrays")
    parser.add_argument(
        "--provider",
        choices=sorted(PROVIDERS),
        default=DEFAULT_PROVIDER,
        help=f"Byte packing of the sprite data (default: {DEFAULT_PROVIDER})",
    )
    parser.add_argument("--strict", action="store_true", help="Reject sprites without a WxH annotation")
    parser.add_argument("--preview", metavar="NAME", help="Print the pixel mask of a sprite")
    parser.add_argument("--frame", type=int, default=0, help="Frame to preview (default: 0)")
    parser.add_argument("--export", nargs=2, metavar=("NAME", "OUT"), help="Save a sprite as a PNG frame strip")
    parser.add_argument("--scale", type=int, default=1, help="Integer scale factor for --export")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    return parser.parse_args(argv)


def configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.captureWarnings(True)


def read_source(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        return handle.read()


def frames_of(sprite: Sprite) -> List[RasterSurface]:
    if isinstance(sprite, SpriteFrames):
        return list(sprite)
    return [sprite]


def describe(name: str, sprite: Sprite) -> str:
    metadata = sprite.metadata
    parts = [f"{name}: {sprite.width}x{sprite.height}"]
    if metadata is not None:
        if metadata.frame_count:
            parts.append(f"frames={metadata.frame_count}")
        parts.append(f"bytes={len(metadata.raw_bytes)}")
        if metadata.ambiguous:
            parts.append("ambiguous")
        if metadata.invalid_count:
            parts.append(f"invalid={metadata.invalid_count}")
    return " ".join(parts)


def frame_strip(sprite: Sprite, scale: int = 1) -> Image.Image:
    frames = frames_of(sprite)
    width, height = sprite.width, sprite.height
    strip = Image.new("L", (width * len(frames), height), 0)
    for index, frame in enumerate(frames):
        strip.paste(frame.image, (index * width, 0))
    if scale > 1:
        strip = strip.resize((strip.width * scale, strip.height * scale), Image.NEAREST)
    return strip


def lookup(sprites: Dict[str, Sprite], name: str) -> Sprite:
    sprite = sprites.get(name)
    if sprite is None:
        raise RuntimeError(f"No sprite named '{name}' (found: {', '.join(sorted(sprites)) or 'none'})")
    return sprite


def run(args: argparse.Namespace) -> int:
    settings = LoaderSettings(provider=args.provider, reject_ambiguous=args.strict)
    loader = SpriteLoader(settings)
    sprites = loader.load_header(read_source(args.path), skip_invalid=not args.strict)
    if args.preview:
        frames = frames_of(lookup(sprites, args.preview))
        if not 0 <= args.frame < len(frames):
            raise RuntimeError(f"Frame {args.frame} out of range (0-{len(frames) - 1})")
        print(frames[args.frame].to_mask())
        return 0
    if args.export:
        name, out_path = args.export
        frame_strip(lookup(sprites, name), max(1, args.scale)).save(out_path)
        return 0
    for name, sprite in sprites.items():
        print(describe(name, sprite))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
