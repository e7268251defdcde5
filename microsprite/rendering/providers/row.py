from __future__ import annotations

from typing import List

from ...source.metadata import SpriteMetadata
from .base import PixelDataProvider


class RowPackedProvider(PixelDataProvider):
    """Horizontal packing: each row is ``ceil(width / 8)`` bytes, padded."""

    name = "row"

    def __init__(self, lsb_first: bool = False) -> None:
        self.lsb_first = lsb_first

    def frame_size(self, width: int, height: int) -> int:
        return ((width + 7) // 8) * height

    def unpack_frame(self, metadata: SpriteMetadata, offset: int, width: int, height: int) -> List[List[int]]:
        width_bytes = (width + 7) // 8
        rows = []
        for y in range(height):
            row = []
            for x in range(width):
                value = metadata.byte_at(offset + y * width_bytes + x // 8)
                bit = x % 8 if self.lsb_first else 7 - (x % 8)
                row.append((value >> bit) & 1)
            rows.append(row)
        return rows
