"""Wire shapes - JSON decoding and validation for association sequences."""

from .codec import decode, encode
from .parser import parse_json_if_needed
from .schema import (
    FlatListSchema,
    MappingSchema,
    PairListSchema,
    ShapeSchema,
    ValueModelSchema,
)

__all__ = [
    "decode",
    "encode",
    "parse_json_if_needed",
    "ShapeSchema",
    "PairListSchema",
    "FlatListSchema",
    "MappingSchema",
    "ValueModelSchema",
]
