"""Cursor-based scanning of sprite annotations.

Sprite literals carry their geometry in comments next to the byte data::

    const unsigned char PROGMEM ship[] = { /*16x8x4*/ 0x00, 0x3c, ... };
    // w: 16
    const unsigned char PROGMEM logo[] = { 0xff, 0x81, ... };

The scanner recognises both forms with a small explicit grammar instead of
matching the whole statement against one regular expression:

    annotation := COMMENT_OPEN WS* INT "x" INT ("x" INT)?
    width_hint := "w:" WS* INT
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .literal import initializer_span, strip_comments

COMMENT_OPENERS = ("//", "/*")

_ARRAY_NAME_RE = re.compile(r"([A-Za-z_]\w*)\s*(?:\[[^\]]*\]\s*)+[^;={}]*=")


class Scanner:
    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        while not self.at_end and self.text[self.pos].isspace():
            self.pos += 1

    def accept(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def read_int(self) -> Optional[int]:
        start = self.pos
        # str.isdigit() also accepts superscripts and other Unicode digits.
        while not self.at_end and "0" <= self.text[self.pos] <= "9":
            self.pos += 1
        if self.pos == start:
            return None
        return int(self.text[start : self.pos], 10)


@dataclass(frozen=True)
class DimensionAnnotation:
    width: int
    height: int
    frames: int = 0


def find_dimension_annotation(text: str) -> Optional[DimensionAnnotation]:
    """``WxH`` or ``WxHxF`` directly opening a comment.

    Comments inside the initializer braces win over comments before them.
    """
    start = _annotation_start(text)
    if start is None:
        return None
    return _scan_dimensions(Scanner(text, start + 2))


def _annotation_start(text: str) -> Optional[int]:
    for start in _by_preference(text, _positions(text, COMMENT_OPENERS)):
        if _scan_dimensions(Scanner(text, start + 2)):
            return start
    return None


def _positions(text: str, needles: Tuple[str, ...]) -> List[int]:
    found = []
    pos = text.find(needles[0][0])
    while pos != -1:
        if text.startswith(needles, pos):
            found.append(pos)
        pos = text.find(needles[0][0], pos + 1)
    return found


def _by_preference(text: str, positions: List[int]) -> List[int]:
    """Positions inside the initializer braces first, then those before them."""
    span = initializer_span(strip_comments(text))
    if span is None:
        return positions
    opening, closing = span
    inside = [pos for pos in positions if opening < pos < closing]
    before = [pos for pos in positions if pos < opening]
    return inside + before


def _scan_dimensions(scanner: Scanner) -> Optional[DimensionAnnotation]:
    scanner.skip_whitespace()
    width = scanner.read_int()
    if width is None or not scanner.accept("x"):
        return None
    height = scanner.read_int()
    if height is None:
        return None
    frames = 0
    if scanner.accept("x"):
        frames = scanner.read_int() or 0
    return DimensionAnnotation(width, height, frames)


def find_width_hint(text: str) -> Optional[int]:
    """Value of a ``w:`` followed by digits, preferring one inside the braces."""
    for pos in _by_preference(text, _positions(text, ("w:",))):
        scanner = Scanner(text, pos + 2)
        scanner.skip_whitespace()
        value = scanner.read_int()
        if value is not None:
            return value
    return None


def find_array_name(text: str) -> Optional[str]:
    """Identifier of the first array declared with an initializer."""
    match = _ARRAY_NAME_RE.search(text)
    if not match:
        return None
    return match.group(1)


def annotation_span(text: str) -> Tuple[int, int]:
    """Line and column (1-based) of the dimension annotation, or (0, 0)."""
    start = _annotation_start(text)
    if start is None:
        return 0, 0
    line = text.count("\n", 0, start) + 1
    column = start - (text.rfind("\n", 0, start) + 1) + 1
    return line, column
