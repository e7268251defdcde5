from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Sequence, Union, overload

from .errors import AmbiguousMetadataWarning, DecodeError
from .rendering.providers import DEFAULT_PROVIDER, PixelDataProvider, get_provider
from .rendering.rasterizer import load_bitmap
from .rendering.surface import RasterSurface
from .source.header import split_statements
from .source.literal import clean_literal
from .source.metadata import SpriteMetadata, parse_metadata

logger = logging.getLogger(__name__)


@dataclass
class LoaderSettings:
    provider: str = DEFAULT_PROVIDER
    reject_ambiguous: bool = False


class SpriteFrames(Sequence[RasterSurface]):
    """Animation frames of one sprite, in frame order."""

    def __init__(self, frames: Iterable[RasterSurface], metadata: SpriteMetadata) -> None:
        self._frames = tuple(frames)
        if not self._frames:
            raise DecodeError(f"{metadata.id or 'sprite'}: no frames decoded")
        self._metadata = metadata

    @property
    def width(self) -> int:
        return self._frames[0].width

    @property
    def height(self) -> int:
        return self._frames[0].height

    @property
    def metadata(self) -> SpriteMetadata:
        return self._metadata

    @overload
    def __getitem__(self, index: int) -> RasterSurface: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[RasterSurface]: ...

    def __getitem__(self, index):
        return self._frames[index]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[RasterSurface]:
        return iter(self._frames)

    def __repr__(self) -> str:
        label = f" {self._metadata.id!r}" if self._metadata.id else ""
        return f"<SpriteFrames{label} {len(self)}x {self.width}x{self.height}>"


Sprite = Union[RasterSurface, SpriteFrames]


class SpriteLoader:
    def __init__(
        self,
        settings: Optional[LoaderSettings] = None,
        provider: Optional[PixelDataProvider] = None,
    ) -> None:
        self.settings = settings or LoaderSettings()
        self.provider = provider or get_provider(self.settings.provider)

    def load(self, source: str, label: Optional[str] = None, stacklevel: int = 1) -> Sprite:
        """Decode one sprite literal into a surface or a sequence of frames.

        ``stacklevel`` counts wrapper frames above this call, so an ambiguity
        warning points at the caller of the outermost wrapper.
        """
        metadata = parse_metadata(source, clean_literal(source), label=label)
        self._check_ambiguity(metadata, stacklevel + 2)
        pixel_data = self.provider.decode(metadata)
        logger.debug(
            "Decoded %s: %sx%d, %d frame(s), %d byte(s)",
            metadata.id or "<sprite>",
            metadata.declared_width,
            metadata.height,
            metadata.frame_count,
            len(metadata.raw_bytes),
        )
        if pixel_data.frame_count > 0:
            return SpriteFrames((load_bitmap(mask, metadata) for mask in pixel_data.masks()), metadata)
        return load_bitmap(pixel_data.pif, metadata)

    def load_header(self, text: str, skip_invalid: bool = False, stacklevel: int = 1) -> Dict[str, Sprite]:
        """Decode every array declared in a C header, keyed by array name."""
        sprites: Dict[str, Sprite] = {}
        for index, statement in enumerate(split_statements(text)):
            try:
                sprite = self.load(statement, stacklevel=stacklevel + 1)
            except DecodeError as exc:
                if not skip_invalid:
                    raise
                logger.warning("Skipping statement %d: %s", index, exc)
                continue
            name = sprite.metadata.id or f"sprite{index}"
            if name in sprites:
                logger.warning("Duplicate sprite name %s; keeping the later one", name)
            sprites[name] = sprite
        return sprites

    def _check_ambiguity(self, metadata: SpriteMetadata, stacklevel: int) -> None:
        if not metadata.ambiguous:
            return
        label = metadata.id or "sprite"
        if self.settings.reject_ambiguous:
            raise DecodeError(f"{label}: no WxH annotation; dimensions would be guessed")
        warnings.warn(
            f"{label}: no WxH annotation; dimensions inferred from w:{metadata.declared_width}",
            AmbiguousMetadataWarning,
            stacklevel=stacklevel,
        )


def load_sprite(source: str, label: Optional[str] = None) -> Sprite:
    return SpriteLoader().load(source, label, stacklevel=2)


load_graphics = load_sprite


def load_header(text: str, loader: Optional[SpriteLoader] = None, skip_invalid: bool = False) -> Dict[str, Sprite]:
    return (loader or SpriteLoader()).load_header(text, skip_invalid=skip_invalid, stacklevel=2)
