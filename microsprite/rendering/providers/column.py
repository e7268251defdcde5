from __future__ import annotations

from typing import List

from ...source.metadata import SpriteMetadata
from .base import PixelDataProvider


class ColumnPackedProvider(PixelDataProvider):
    """Vertical 8-pixel column packing used by small monochrome OLED panels.

    The image is split into 8-pixel tall pages. Byte ``page * width + x``
    holds column ``x`` of that page, least significant bit at the top.
    """

    name = "column"

    def frame_size(self, width: int, height: int) -> int:
        pages = (height + 7) // 8
        return width * pages

    def unpack_frame(self, metadata: SpriteMetadata, offset: int, width: int, height: int) -> List[List[int]]:
        rows = []
        for y in range(height):
            page, bit = divmod(y, 8)
            base = offset + page * width
            rows.append([(metadata.byte_at(base + x) >> bit) & 1 for x in range(width)])
        return rows
