from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ...errors import DecodeError
from ...source.metadata import SpriteMetadata

OPAQUE = "#"
TRANSPARENT = "."


@dataclass(frozen=True)
class PixelFrame:
    pif: str


@dataclass(frozen=True)
class PixelData:
    """Per-frame textual pixel masks decoded from one sprite literal.

    ``frame_count`` is 0 for a single, non-animated image; ``pif`` is then the
    only mask. For animations ``pif`` is the first frame.
    """

    metadata: SpriteMetadata
    frames: Tuple[PixelFrame, ...]

    @property
    def frame_count(self) -> int:
        return self.metadata.frame_count

    @property
    def pif(self) -> str:
        return self.frames[0].pif

    def frame(self, index: int) -> PixelFrame:
        return self.frames[index]

    def masks(self) -> List[str]:
        return [frame.pif for frame in self.frames]


class PixelDataProvider:
    """Strategy that unpacks sprite bytes into row-oriented pixel masks."""

    name = ""

    def decode(self, metadata: SpriteMetadata) -> PixelData:
        width, height = self._require_geometry(metadata)
        count = max(1, metadata.frame_count)
        frame_size = self.frame_size(width, height)
        frames = []
        for index in range(count):
            rows = self.unpack_frame(metadata, index * frame_size, width, height)
            frames.append(PixelFrame(pif=self._rows_to_mask(rows)))
        return PixelData(metadata=metadata, frames=tuple(frames))

    def frame_size(self, width: int, height: int) -> int:
        raise NotImplementedError

    def unpack_frame(self, metadata: SpriteMetadata, offset: int, width: int, height: int) -> List[List[int]]:
        raise NotImplementedError

    @staticmethod
    def _require_geometry(metadata: SpriteMetadata) -> Tuple[int, int]:
        width = metadata.declared_width
        height = metadata.height
        label = metadata.id or "sprite"
        if not width or width <= 0:
            raise DecodeError(f"{label}: width is unknown; add a WxH comment or a w: hint")
        if height <= 0:
            raise DecodeError(f"{label}: height must be greater than zero (got {height})")
        if metadata.frame_count < 0:
            raise DecodeError(f"{label}: frame count must not be negative")
        return width, height

    @staticmethod
    def _rows_to_mask(rows: List[List[int]]) -> str:
        return "\n".join("".join(OPAQUE if pix else TRANSPARENT for pix in row) for row in rows)
