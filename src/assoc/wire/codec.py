"""Decode and encode association sequences in their wire shapes."""

from __future__ import annotations

import logging
from typing import Any, Literal

from assoc.kernel.config import DEFAULT_OPTIONS, AssocOptions
from assoc.kernel.sequence import AssocLike, AssocSequence
from assoc.ops.constructors import flatten, to_dict, to_duples, uniq
from assoc.ops.transforms import map_pairs

from .parser import parse_json_if_needed
from .schema import PairListSchema, ShapeSchema

logger = logging.getLogger(__name__)

Shape = Literal["pairs", "duples", "flat", "object"]


def decode(
    raw: Any,
    schema: ShapeSchema = PairListSchema(),
    options: AssocOptions = DEFAULT_OPTIONS,
) -> AssocSequence:
    """Parse raw JSON text or decoded data into a sequence.

    Args:
        raw: JSON text, or data already decoded from JSON
        schema: The shape the data is expected to have
        options: Partition and deduplication options

    Returns:
        The decoded sequence, deduplicated when options.unique is set

    Raises:
        ShapeError: If the data is not valid JSON or does not fit the schema
    """
    seq = schema.decode(parse_json_if_needed(raw), options)
    logger.debug("Decoded %d pairs with %s", len(seq), schema.describe())
    if options.unique:
        return uniq(seq, test=options.predicate())
    return seq


def encode(seq: AssocLike, shape: Shape = "pairs") -> Any:
    """Convert a sequence into JSON-ready data.

    "pairs" gives [[k, v], ...] straight from each pair, "duples" gives the
    same list built by wrapping and consing each value, "flat" gives
    [k1, v1, ...] and "object" gives a dict of the visible pairs.
    """
    if shape == "pairs":
        return map_pairs(lambda key, value: [key, value], seq)
    if shape == "duples":
        return to_duples(seq)
    if shape == "flat":
        return flatten(seq)
    if shape == "object":
        return to_dict(seq)
    raise ValueError(f"Unknown shape '{shape}', expected pairs, duples, flat or object")
