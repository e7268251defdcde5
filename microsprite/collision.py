"""Two-phase sprite collision.

Phase one intersects the axis-aligned bounding boxes of both sprites and
rejects disjoint pairs without touching any pixels. Phase two samples only
the overlapping region of each surface and reports a hit when both have an
opaque pixel at the same screen position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .debug import Color, DebugCanvas
from .errors import InvalidGeometryError
from .rendering.surface import RasterSurface

logger = logging.getLogger(__name__)

Rect = Tuple[int, int, int, int]

BOX_TONE: Color = (0, 200, 0, 77)
OVERLAP_TONE: Color = (200, 0, 0, 128)
HIT_TONE: Color = (255, 255, 0, 255)


@dataclass(frozen=True)
class CollisionResult:
    hit: bool
    rect: Optional[Rect] = None
    collisions: int = 0

    def __bool__(self) -> bool:
        return self.hit


def intersection(
    x1: int, y1: int, w1: int, h1: int, x2: int, y2: int, w2: int, h2: int
) -> Optional[Rect]:
    """Overlap of two boxes as ``(x, y, w, h)``, or None when they are disjoint."""
    ix = max(x1, x2)
    iw = min(x1 + w1, x2 + w2) - ix
    iy = max(y1, y2)
    ih = min(y1 + h1, y2 + h2) - iy
    if iw <= 0 or ih <= 0:
        return None
    return ix, iy, iw, ih


class CollisionDetector:
    def __init__(self, debug: Optional[DebugCanvas] = None) -> None:
        self.debug = debug

    def check(
        self,
        a: RasterSurface,
        xa: int,
        ya: int,
        b: RasterSurface,
        xb: int,
        yb: int,
        precise: bool = True,
    ) -> CollisionResult:
        _require_geometry(a, "first")
        _require_geometry(b, "second")
        rect = intersection(xa, ya, a.width, a.height, xb, yb, b.width, b.height)
        if self.debug is None:
            return self._resolve(a, xa, ya, b, xb, yb, rect, precise, None)
        with self.debug.state() as canvas:
            canvas.stroke = BOX_TONE
            canvas.stroke_rect(xa, ya, a.width, a.height)
            canvas.stroke_rect(xb, yb, b.width, b.height)
            if rect:
                canvas.fill = OVERLAP_TONE
                canvas.fill_rect(*rect)
                canvas.fill = HIT_TONE
            return self._resolve(a, xa, ya, b, xb, yb, rect, precise, canvas)

    def _resolve(
        self,
        a: RasterSurface,
        xa: int,
        ya: int,
        b: RasterSurface,
        xb: int,
        yb: int,
        rect: Optional[Rect],
        precise: bool,
        canvas: Optional[DebugCanvas],
    ) -> CollisionResult:
        if rect is None:
            return CollisionResult(hit=False)
        if not precise:
            return CollisionResult(hit=True, rect=rect)
        ix, iy, iw, ih = rect
        region_a = a.sample_region(ix - xa, iy - ya, iw, ih)
        region_b = b.sample_region(ix - xb, iy - yb, iw, ih)
        hits = _overlapping_pixels(region_a, region_b)
        if canvas is not None:
            for i in hits:
                canvas.fill_rect(ix + i % iw, iy + i // iw, 1, 1)
        logger.debug("Pixel test over %s: %d collision(s)", rect, len(hits))
        return CollisionResult(hit=bool(hits), rect=rect, collisions=len(hits))


def detect_collision(
    a: RasterSurface,
    xa: int,
    ya: int,
    b: RasterSurface,
    xb: int,
    yb: int,
    precise: bool = True,
    debug: Optional[DebugCanvas] = None,
) -> bool:
    return CollisionDetector(debug).check(a, xa, ya, b, xb, yb, precise).hit


def _overlapping_pixels(region_a: List[int], region_b: List[int]) -> List[int]:
    # Monochrome AND: any non-zero luminance counts as opaque.
    return [i for i, (pa, pb) in enumerate(zip(region_a, region_b)) if pa > 0 and pb > 0]


def _require_geometry(surface: RasterSurface, which: str) -> None:
    if surface.width <= 0 or surface.height <= 0:
        raise InvalidGeometryError(
            f"The {which} surface must have a positive size (got {surface.width}x{surface.height})"
        )
