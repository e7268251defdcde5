from .collision import CollisionDetector, CollisionResult, detect_collision
from .debug import DebugCanvas
from .errors import AmbiguousMetadataWarning, DecodeError, InvalidGeometryError, MicrospriteError, ParseError
from .loader import LoaderSettings, Sprite, SpriteFrames, SpriteLoader, load_graphics, load_header, load_sprite
from .rendering import RasterSurface, load_bitmap
from .source import ExplicitDimensions, InferredDimensions, SpriteMetadata, parse_metadata

__all__ = [
    "AmbiguousMetadataWarning",
    "CollisionDetector",
    "CollisionResult",
    "DebugCanvas",
    "DecodeError",
    "ExplicitDimensions",
    "InferredDimensions",
    "InvalidGeometryError",
    "LoaderSettings",
    "MicrospriteError",
    "ParseError",
    "RasterSurface",
    "Sprite",
    "SpriteFrames",
    "SpriteLoader",
    "SpriteMetadata",
    "detect_collision",
    "load_bitmap",
    "load_graphics",
    "load_header",
    "load_sprite",
    "parse_metadata",
]
