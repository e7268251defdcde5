from __future__ import annotations

import threading
from typing import TYPE_CHECKING, List, Optional, Tuple

from PIL import Image

from .providers.base import OPAQUE, TRANSPARENT

if TYPE_CHECKING:
    from ..source.metadata import SpriteMetadata

FOREGROUND = 255
BACKGROUND = 0


class SamplingContext:
    """Read access to a surface's pixels, created once per surface."""

    def __init__(self, image: Image.Image) -> None:
        self._image = image
        self._pixels = image.load()

    def pixel(self, x: int, y: int) -> int:
        return self._pixels[x, y]

    def region(self, x: int, y: int, width: int, height: int) -> List[int]:
        """Row-major luminance of a box; parts outside the image read as 0."""
        box = (x, y, x + width, y + height)
        return list(self._image.crop(box).tobytes())


class RasterSurface:
    """Immutable monochrome raster: luminance 0 is transparent, anything else opaque."""

    def __init__(self, image: Image.Image, metadata: Optional["SpriteMetadata"] = None) -> None:
        if image.mode != "L":
            image = image.convert("L")
        self._image = image
        self._metadata = metadata
        self._context: Optional[SamplingContext] = None
        self._context_lock = threading.Lock()

    @classmethod
    def blank(cls, width: int, height: int) -> "RasterSurface":
        return cls(Image.new("L", (width, height), BACKGROUND))

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def metadata(self) -> Optional["SpriteMetadata"]:
        return self._metadata

    @property
    def image(self) -> Image.Image:
        return self._image.copy()

    @property
    def context(self) -> SamplingContext:
        context = self._context
        if context is None:
            with self._context_lock:
                if self._context is None:
                    self._context = SamplingContext(self._image)
                context = self._context
        return context

    def is_opaque(self, x: int, y: int) -> bool:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        return self.context.pixel(x, y) > BACKGROUND

    def sample_region(self, x: int, y: int, width: int, height: int) -> List[int]:
        return self.context.region(x, y, width, height)

    def to_mask(self) -> str:
        rows = []
        for y in range(self.height):
            rows.append("".join(OPAQUE if self.is_opaque(x, y) else TRANSPARENT for x in range(self.width)))
        return "\n".join(rows)

    def __repr__(self) -> str:
        label = self._metadata.id if self._metadata and self._metadata.id else None
        suffix = f" {label!r}" if label else ""
        return f"<RasterSurface{suffix} {self.width}x{self.height}>"
