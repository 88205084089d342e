"""Tests for wire shape decoding and encoding."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ValidationError

from assoc import AssocOptions, AssocSequence, ShapeError
from assoc.wire import (
    FlatListSchema,
    MappingSchema,
    PairListSchema,
    ValueModelSchema,
    decode,
    encode,
    parse_json_if_needed,
)
from fakes import letters


class Endpoint(BaseModel):
    host: str
    port: int


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def test_parse_json_if_needed_with_string() -> None:
    """Test parsing JSON text."""
    assert parse_json_if_needed('[["a", 1]]') == [["a", 1]]


def test_parse_json_if_needed_passes_data_through() -> None:
    """Test decoded data is returned unchanged."""
    data = [["a", 1]]
    assert parse_json_if_needed(data) is data


def test_parse_json_if_needed_with_invalid_json() -> None:
    """Test invalid JSON raises ShapeError with the raw value."""
    with pytest.raises(ShapeError) as excinfo:
        parse_json_if_needed('[["a", 1]')
    assert "Invalid JSON" in str(excinfo.value)
    assert excinfo.value.raw_value == '[["a", 1]'


def test_decode_pair_list_from_json() -> None:
    """Test the default schema reads a list of [key, value] lists."""
    seq = decode('[["a", 1], ["b", 2], ["a", 3]]')
    assert seq == AssocSequence.of([("a", 1), ("b", 2), ("a", 3)])


def test_decode_pair_list_rejects_bad_entries() -> None:
    """Test entries that are not pairs raise ShapeError."""
    with pytest.raises(ShapeError, match="pair list"):
        decode('[["a", 1, 2]]')
    with pytest.raises(ShapeError):
        decode('{"a": 1}')
    with pytest.raises(ShapeError):
        decode('"ab"')


def test_decode_flat_list() -> None:
    """Test flat lists are partitioned."""
    seq = decode('["a", 1, "b", 2]', FlatListSchema())
    assert seq.pairs == (("a", 1), ("b", 2))


def test_decode_flat_list_odd_length() -> None:
    """Test odd-length flat lists follow the configured policy."""
    with pytest.raises(ShapeError, match="odd length"):
        decode('["a", 1, "b"]', FlatListSchema())
    padded = decode('["a", 1, "b"]', FlatListSchema(), AssocOptions(odd_length="pad"))
    assert padded.pairs == (("a", 1), ("b", None))


def test_decode_mapping() -> None:
    """Test JSON objects keep their key order."""
    seq = decode('{"z": 1, "a": [2]}', MappingSchema())
    assert seq.pairs == (("z", 1), ("a", [2]))


def test_decode_unique_option() -> None:
    """Test decoded data is deduplicated when unique is set."""
    raw = [["Accept", "a"], ["accept", "b"], ["Host", "h"]]
    assert len(decode(raw)) == 3
    assert decode(raw, options=AssocOptions(unique=True)).pairs == (
        ("Accept", "a"), ("accept", "b"), ("Host", "h"),
    )
    assert decode(raw, options=AssocOptions(unique=True, test="equalp")).pairs == (
        ("Accept", "a"), ("Host", "h"),
    )


def test_value_model_schema_with_pydantic_model() -> None:
    """Test values are validated into pydantic models."""
    schema = ValueModelSchema(Endpoint)
    seq = decode('[["primary", {"host": "a", "port": 80}], ["backup", {"host": "b", "port": "81"}]]', schema)
    assert seq[0] == ("primary", Endpoint(host="a", port=80))
    assert seq[1][1].port == 81
    assert schema.describe() == "ValueModelSchema(Endpoint, PairListSchema)"


def test_value_model_schema_with_dataclass_and_flat_list() -> None:
    """Test the inner schema decides the outer shape."""
    schema = ValueModelSchema(Point, inner=FlatListSchema())
    seq = decode(["origin", {"x": 0, "y": 0}], schema)
    assert seq.pairs == (("origin", Point(0, 0)),)


def test_value_model_schema_invalid_value() -> None:
    """Test an invalid value raises ShapeError chained to pydantic's error."""
    with pytest.raises(ShapeError) as excinfo:
        decode([["primary", {"host": "a"}]], ValueModelSchema(Endpoint))
    assert "Endpoint" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_encode_shapes() -> None:
    """Test encoding into each JSON-ready shape."""
    seq = letters()
    assert encode(seq) == [["a", 1], ["b", 2], ["b", 3], ["c", 4], ["a", 5]]
    assert encode(seq, "flat") == ["a", 1, "b", 2, "b", 3, "c", 4, "a", 5]
    assert encode(seq, "object") == {"a": 1, "b": 2, "c": 4}


def test_encode_pairs_matches_duples() -> None:
    """Test the default pairs shape and the duples shape agree."""
    seq = AssocSequence.of([("a", 1), ("b", [2])])
    assert encode(seq, "pairs") == [["a", 1], ["b", [2]]]
    assert encode(seq, "pairs") == encode(seq, "duples") == encode(seq)
    assert encode(seq, "flat") == ["a", 1, "b", [2]]
    assert encode(seq, "object") == {"a": 1, "b": [2]}


def test_encode_unknown_shape() -> None:
    with pytest.raises(ValueError, match="Unknown shape"):
        encode(letters(), "yaml")  # type: ignore[arg-type]


def test_encode_then_decode() -> None:
    """Test each encoded shape decodes to the visible pairs."""
    seq = letters()
    assert decode(encode(seq)) == seq
    assert decode(encode(seq, "flat"), FlatListSchema()) == seq
    assert decode(encode(seq, "object"), MappingSchema()).pairs == (("a", 1), ("b", 2), ("c", 4))


def test_schema_descriptions() -> None:
    assert PairListSchema().describe() == "PairListSchema"
    assert FlatListSchema().describe() == "FlatListSchema"
    assert MappingSchema().describe() == "MappingSchema"


def test_options_are_validated_and_frozen() -> None:
    """Test invalid options are rejected and options cannot change."""
    with pytest.raises(ValidationError):
        AssocOptions(odd_length="truncate")
    with pytest.raises(ValidationError):
        AssocOptions(test="string=")
    options = AssocOptions()
    with pytest.raises(ValidationError):
        options.test = "eq"  # type: ignore[misc]
    assert AssocOptions(test="equalp").predicate()("A", "a")
