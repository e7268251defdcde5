from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional

from PIL import Image

from ..errors import DecodeError
from .providers.base import OPAQUE
from .surface import BACKGROUND, FOREGROUND, RasterSurface

if TYPE_CHECKING:
    from ..source.metadata import SpriteMetadata

_CONTROL_RE = re.compile(r"[\t\r\n]")


def load_bitmap(mask: str, metadata: Optional["SpriteMetadata"] = None) -> RasterSurface:
    """Rasterize a textual pixel mask, one ``#`` per opaque pixel.

    Rows are separated by whitespace. The first row sets the width; longer
    rows are clipped and shorter rows stay transparent past their end.
    A mask of only whitespace has no rows and raises ``DecodeError``; write
    transparent grids with ``.`` or build them with ``RasterSurface.blank``.
    """
    rows = _CONTROL_RE.sub(" ", mask).strip().split()
    if not rows:
        raise DecodeError("Pixel mask is empty")
    width = len(rows[0])
    height = len(rows)
    data = bytearray([BACKGROUND]) * (width * height)
    for y, row in enumerate(rows):
        for x, px in enumerate(row[:width]):
            if px == OPAQUE:
                data[y * width + x] = FOREGROUND
    image = Image.frombytes("L", (width, height), bytes(data))
    return RasterSurface(image, metadata=metadata)
