from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..errors import ParseError
from .literal import clean_literal, strip_comments
from .scanner import annotation_span, find_array_name, find_dimension_annotation, find_width_hint

logger = logging.getLogger(__name__)

NAN = float("nan")

_TRAILING_COMMA_RE = re.compile(r",\s*$")
_C_SUFFIX_RE = re.compile(r"(?<=[0-9A-Fa-f])[uUlL]+$")
_LEADING_ZERO_RE = re.compile(r"^[+-]?0+\d+$")

ByteValue = Union[int, float]


@dataclass(frozen=True)
class ExplicitDimensions:
    """Geometry read from a ``WxH[xF]`` comment."""

    width: int
    height: int
    frames: int = 0


@dataclass(frozen=True)
class InferredDimensions:
    """Geometry guessed from a ``w:`` hint and the byte count."""

    width: Optional[int]
    height: int


Dimensions = Union[ExplicitDimensions, InferredDimensions]


@dataclass(frozen=True)
class SpriteMetadata:
    raw_bytes: Tuple[ByteValue, ...]
    dimensions: Dimensions
    id: Optional[str] = None
    width_hint: Optional[int] = None
    parse_errors: Tuple[ParseError, ...] = ()

    @property
    def declared_width(self) -> Optional[int]:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height

    @property
    def frame_count(self) -> int:
        if isinstance(self.dimensions, ExplicitDimensions):
            return self.dimensions.frames
        return 0

    @property
    def ambiguous(self) -> bool:
        return isinstance(self.dimensions, InferredDimensions)

    @property
    def invalid_count(self) -> int:
        return len(self.parse_errors)

    def byte_at(self, index: int) -> int:
        """Byte at ``index``, reading missing bytes and NAN sentinels as 0."""
        if index < 0 or index >= len(self.raw_bytes):
            return 0
        value = self.raw_bytes[index]
        if isinstance(value, float) and math.isnan(value):
            return 0
        return int(value)


def parse_int_literal(token: str) -> int:
    """Parse a C or Python integer literal such as ``0x3F``, ``0b101`` or ``12u``."""
    text = _C_SUFFIX_RE.sub("", token.strip())
    if _LEADING_ZERO_RE.match(text):
        return int(text, 10)
    return int(text, 0)


def parse_byte_values(contents: str) -> Tuple[Tuple[ByteValue, ...], Tuple[ParseError, ...]]:
    text = _TRAILING_COMMA_RE.sub("", strip_comments(contents).strip())
    if not text:
        return (), ()
    values: List[ByteValue] = []
    errors: List[ParseError] = []
    for index, token in enumerate(text.split(",")):
        try:
            values.append(parse_int_literal(token))
        except ValueError:
            values.append(NAN)
            errors.append(ParseError(index, token.strip()))
    return tuple(values), tuple(errors)


def infer_dimensions(byte_count: int, width_hint: Optional[int]) -> InferredDimensions:
    if not width_hint or width_hint <= 0:
        return InferredDimensions(width=None, height=0)
    return InferredDimensions(width=width_hint, height=(byte_count // width_hint) * 8)


def parse_metadata(
    statement: str,
    contents: Optional[str] = None,
    label: Optional[str] = None,
) -> SpriteMetadata:
    """Decode the byte values and geometry of one sprite literal.

    ``statement`` is the original annotated source text; ``contents`` is the
    cleaned initializer body (derived from the statement when omitted).
    """
    if contents is None:
        contents = clean_literal(statement)
    raw_bytes, parse_errors = parse_byte_values(contents)
    width_hint = find_width_hint(statement)
    annotation = find_dimension_annotation(statement)

    dimensions: Dimensions
    if annotation:
        dimensions = ExplicitDimensions(annotation.width, annotation.height, annotation.frames)
        if width_hint is not None and width_hint != annotation.width:
            line, column = annotation_span(statement)
            logger.warning(
                "Width hint w:%d disagrees with %dx%d annotation at %d:%d; using the annotation",
                width_hint,
                annotation.width,
                annotation.height,
                line,
                column,
            )
    else:
        dimensions = infer_dimensions(len(raw_bytes), width_hint)

    sprite_id = label
    if sprite_id is None:
        sprite_id = find_array_name(strip_comments(statement))

    if parse_errors:
        logger.debug("%s: %d malformed byte token(s)", sprite_id or "<sprite>", len(parse_errors))

    return SpriteMetadata(
        raw_bytes=raw_bytes,
        dimensions=dimensions,
        id=sprite_id,
        width_hint=width_hint,
        parse_errors=parse_errors,
    )
