from .header import split_statements
from .literal import array_initializer_content, clean_literal, strip_comments
from .metadata import (
    NAN,
    ExplicitDimensions,
    InferredDimensions,
    SpriteMetadata,
    parse_byte_values,
    parse_int_literal,
    parse_metadata,
)

__all__ = [
    "ExplicitDimensions",
    "InferredDimensions",
    "NAN",
    "SpriteMetadata",
    "array_initializer_content",
    "clean_literal",
    "parse_byte_values",
    "parse_int_literal",
    "parse_metadata",
    "split_statements",
    "strip_comments",
]
