from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from PIL import Image, ImageDraw

Color = Tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


class DebugCanvas:
    """Shared RGBA overlay that collision checks draw onto.

    Drawing state (``fill`` and ``stroke``) is saved and restored around each
    check by :meth:`state`, which also serialises access to the canvas.
    """

    def __init__(self, width: int, height: int, image: Optional[Image.Image] = None) -> None:
        if image is None:
            image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        elif image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image = image
        self.fill: Color = WHITE
        self.stroke: Color = WHITE
        self._draw = ImageDraw.Draw(self.image, "RGBA")
        self._saved: List[Tuple[Color, Color]] = []
        self._lock = threading.RLock()

    @property
    def depth(self) -> int:
        return len(self._saved)

    def save(self) -> None:
        self._saved.append((self.fill, self.stroke))

    def restore(self) -> None:
        if self._saved:
            self.fill, self.stroke = self._saved.pop()

    @contextmanager
    def state(self) -> Iterator["DebugCanvas"]:
        with self._lock:
            self.save()
            try:
                yield self
            finally:
                self.restore()

    def stroke_rect(self, x: int, y: int, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        self._draw.rectangle([x, y, x + width - 1, y + height - 1], outline=self.stroke)

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        self._draw.rectangle([x, y, x + width - 1, y + height - 1], fill=self.fill)

    def clear(self) -> None:
        with self._lock:
            self.image.paste((0, 0, 0, 0), (0, 0, self.image.width, self.image.height))
