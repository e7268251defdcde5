from __future__ import annotations

from dataclasses import dataclass


class MicrospriteError(Exception):
    """Base class for errors raised by microsprite."""


class DecodeError(MicrospriteError, ValueError):
    """A sprite literal could not be turned into any pixel mask."""


class InvalidGeometryError(MicrospriteError, ValueError):
    """A surface with non-positive width or height was used for collision."""


class AmbiguousMetadataWarning(UserWarning):
    """Sprite dimensions were inferred from a width hint and the byte count."""


@dataclass(frozen=True)
class ParseError:
    """Record of a numeric token that failed to parse.

    Not raised: the parser keeps a NAN sentinel at ``index`` in the byte
    sequence and stores this record next to it.
    """

    index: int
    token: str

    def __str__(self) -> str:
        return f"token {self.index}: {self.token!r} is not an integer literal"
