# SPDX-License-Identifier: Apache-2.0
"""
Conversion layer: ids, vectors, payload values, selectors and filters.
"""

import uuid

import pytest

from qdrant_grpc_sdk import convert
from qdrant_grpc_sdk.convert import filters as F
from qdrant_grpc_sdk.core.errors import ConversionError
from qdrant_grpc_sdk.models import (
    Condition,
    ConditionOptions,
    DenseVector,
    Distance,
    Filter,
    IsEmptyCondition,
    MatchValue,
    NullValue,
    PointId,
    PointIdOptions,
    ReadConsistencyType,
    SparseVector,
    Value,
    ValueKind,
    Vector,
    VectorKind,
    VectorParams,
    WriteOrderingType,
)


# --------------------------------------------------------------------------- #
# Ids and vectors
# --------------------------------------------------------------------------- #

def test_point_id_from_int_and_uuid():
    """Verify integers map to num and strings or UUIDs map to uuid."""
    u = uuid.UUID("5c56c793-69f3-4fbf-87e6-c4bf54c28c26")
    assert convert.point_id(7) == PointId(PointIdOptions.num(7))
    assert convert.point_id(u) == PointId(PointIdOptions.uuid(str(u)))
    assert convert.point_id(str(u)) == PointId(PointIdOptions.uuid(str(u)))


@pytest.mark.parametrize("bad", [-1, True, 1.5, None])
def test_point_id_rejects_invalid(bad):
    """Verify negative, bool and non-id values raise ConversionError."""
    with pytest.raises(ConversionError):
        convert.point_id(bad)


def test_sparse_vector_preserves_order():
    """Verify indices and values keep their input order exactly."""
    sv = convert.sparse_vector([3, 1, 4], [0.1, 0.2, 0.3])
    assert sv.indices == [3, 1, 4]
    assert sv.values == [0.1, 0.2, 0.3]


def test_sparse_vector_length_mismatch():
    """Verify mismatched index and value counts raise ConversionError."""
    with pytest.raises(ConversionError) as exc_info:
        convert.sparse_vector([1, 2], [0.5])
    assert exc_info.value.code == "CONVERSION_ERROR"


def test_sparse_vector_from_pairs():
    """Verify pairs are split into parallel sequences in order."""
    sv = convert.sparse_vector_from_pairs([(9, 0.5), (2, 0.25)])
    assert sv == SparseVector(values=[0.5, 0.25], indices=[9, 2])


def test_vector_dense_sparse_and_multi():
    """Verify each vector shape maps to the flat Vector encoding."""
    assert convert.vector([1, 2]) == Vector(data=[1.0, 2.0])

    sparse = convert.vector(SparseVector(values=[0.5], indices=[7]))
    assert sparse.data == [0.5]
    assert sparse.indices.data == [7]

    multi = convert.vector([[1.0, 2.0], [3.0, 4.0]])
    assert multi.data == [1.0, 2.0, 3.0, 4.0]
    assert multi.vectors_count == 2


def test_vector_multi_requires_equal_widths():
    """Verify ragged multi-vectors are rejected."""
    with pytest.raises(ConversionError):
        convert.vector([[1.0, 2.0], [3.0]])


def test_vectors_named_and_unnamed():
    """Verify a mapping becomes named vectors and a list the unnamed vector."""
    unnamed = convert.vectors([0.5, 0.25])
    assert unnamed.vectors_options.case == "vector"

    named = convert.vectors({"image": [0.5], "text": SparseVector(values=[1.0], indices=[3])})
    assert named.vectors_options.case == "vectors"
    assert set(named.vectors_options.value.vectors) == {"image", "text"}


def test_dense_values_reads_either_encoding():
    """Verify dense values are found in data or in the typed alternative."""
    assert convert.dense_values(Vector(data=[1.0])) == [1.0]
    typed = Vector(vector=VectorKind.dense(DenseVector(data=[0.5, 0.25])))
    assert convert.dense_values(typed) == [0.5, 0.25]


# --------------------------------------------------------------------------- #
# Payload values
# --------------------------------------------------------------------------- #

def test_value_keeps_bool_int_and_float_apart():
    """Verify bools are not treated as integers and ints not as doubles."""
    assert convert.value(True).kind == ValueKind.bool_value(True)
    assert convert.value(3).kind == ValueKind.integer_value(3)
    assert convert.value(3.0).kind == ValueKind.double_value(3.0)
    assert convert.value(None).kind == ValueKind.null_value(NullValue.NULL_VALUE)


def test_payload_round_trip_to_python():
    """Verify nested payloads convert back to the same Python structure."""
    data = {"city": "Berlin", "n": 3, "tags": ["a", "b"], "meta": {"ok": True, "none": None}}
    assert convert.payload_to_dict(convert.payload(data)) == data


def test_payload_rejects_non_string_keys():
    """Verify payload keys must be strings."""
    with pytest.raises(ConversionError):
        convert.payload({1: "x"})


def test_value_rejects_unsupported_type():
    """Verify unsupported payload values raise ConversionError."""
    with pytest.raises(ConversionError):
        convert.value(object())


def test_unset_value_maps_to_none():
    """Verify a Value without kind reads back as None."""
    assert convert.to_python(Value()) is None


# --------------------------------------------------------------------------- #
# Selectors
# --------------------------------------------------------------------------- #

def test_points_selector_from_ids_and_filter():
    """Verify ids select explicitly and filters select by condition."""
    by_ids = convert.points_selector([1, "5c56c793-69f3-4fbf-87e6-c4bf54c28c26"])
    assert by_ids.points_selector_one_of.case == "points"
    assert [i.point_id_options.case for i in by_ids.points_selector_one_of.value.ids] == ["num", "uuid"]

    flt = F.must(F.matches("city", "Berlin"))
    assert convert.points_selector(flt).points_selector_one_of.value is flt


def test_points_selector_rejects_single_string():
    """Verify a bare string is not treated as a sequence of ids."""
    with pytest.raises(ConversionError):
        convert.points_selector("abc")


def test_with_payload_and_with_vectors():
    """Verify bools enable and name lists include."""
    assert convert.with_payload(True).selector_options.case == "enable"
    assert convert.with_payload(["a", "b"]).selector_options.value.fields == ["a", "b"]
    assert convert.with_vectors("image").selector_options.value.names == ["image"]


def test_read_consistency_level_or_factor():
    """Verify a named level and an integer replica count map to different alternatives."""
    assert convert.read_consistency(ReadConsistencyType.MAJORITY).value.case == "type"
    assert convert.read_consistency(2).value.case == "factor"
    with pytest.raises(ConversionError):
        convert.read_consistency(True)


def test_write_ordering_and_shard_keys():
    """Verify ordering levels and shard key selectors convert."""
    assert convert.write_ordering(WriteOrderingType.STRONG).type is WriteOrderingType.STRONG
    selector = convert.shard_key_selector(["eu", 7])
    assert [k.key.case for k in selector.shard_keys] == ["keyword", "number"]
    assert len(convert.shard_key_selector("eu").shard_keys) == 1


def test_vectors_config_single_and_named():
    """Verify one VectorParams is unnamed and a mapping is named."""
    params = VectorParams(size=4, distance=Distance.COSINE)
    assert convert.vectors_config(params).config.case == "params"
    named = convert.vectors_config({"image": params})
    assert named.config.case == "params_map"
    assert named.config.value.map == {"image": params}


# --------------------------------------------------------------------------- #
# Filters
# --------------------------------------------------------------------------- #

def test_match_value_alternatives():
    """Verify each Python value picks the matching alternative."""
    assert F.match_value("x").match_value == MatchValue.keyword("x")
    assert F.match_value("x", text=True).match_value.case == "text"
    assert F.match_value(3).match_value.case == "integer"
    assert F.match_value(False).match_value.case == "boolean"
    assert F.match_value(["a", "b"]).match_value.value.strings == ["a", "b"]
    assert F.match_value([1, 2]).match_value.value.integers == [1, 2]
    with pytest.raises(ConversionError):
        F.match_value(["a", 1])


def test_excludes_uses_except_alternatives():
    """Verify exclusion lists map to except_keywords and except_integers."""
    assert F.excludes("tag", ["a"]).match.match_value.case == "except_keywords"
    assert F.excludes("n", [1, 2]).match.match_value.case == "except_integers"


def test_filter_clauses_and_nesting():
    """Verify conditions are wrapped in order and filters nest."""
    flt = F.must(
        F.matches("city", "Berlin"),
        F.range_("price", gte=10, lt=20),
        F.should(F.is_empty("tags"), F.is_null("owner")),
    )
    cases = [c.condition_one_of.case for c in flt.must]
    assert cases == ["field", "field", "filter"]
    assert flt.must[1].condition_one_of.value.range.gte == 10
    assert flt.must[2].condition_one_of.value.should[0] == Condition(ConditionOptions.is_empty(IsEmptyCondition(key="tags")))


def test_all_of_concatenates_clauses():
    """Verify all_of keeps every clause of every filter in order."""
    combined = F.all_of(F.must(F.is_empty("a")), F.must(F.is_empty("b")), F.must_not(F.has_id([1])))
    assert [c.condition_one_of.value.key for c in combined.must] == ["a", "b"]
    assert combined.must_not[0].condition_one_of.case == "has_id"


def test_nested_and_geo_conditions():
    """Verify nested and geo helpers build the expected bodies."""
    nested = F.nested("items", F.must(F.matches("sku", 5)))
    assert F.condition(nested).condition_one_of.case == "nested"
    radius = F.geo_radius("location", lon=13.4, lat=52.5, radius=1000.0)
    assert radius.geo_radius.center.lat == 52.5
    assert F.values_count("tags", gte=2).values_count.gte == 2


def test_condition_rejects_unknown_body():
    """Verify unsupported condition bodies raise ConversionError."""
    with pytest.raises(ConversionError):
        F.condition("city == Berlin")


def test_filter_of_empty_filter_is_valid():
    """Verify an empty Filter can be wrapped as a condition."""
    assert F.condition(Filter()).condition_one_of.case == "filter"


@pytest.mark.parametrize("bad", [3.5, None, {"a": 1}])
def test_match_value_rejects_unsupported_types(bad):
    """Verify floats, None and mappings raise ConversionError instead of TypeError."""
    with pytest.raises(ConversionError) as exc_info:
        F.matches("price", bad)
    assert exc_info.value.code == "CONVERSION_ERROR"


def test_excludes_rejects_scalar():
    """Verify a single value instead of a list raises ConversionError."""
    with pytest.raises(ConversionError):
        F.excludes("n", 3)


def test_enum_member_by_member_number_and_name():
    """Verify enum inputs accept members, wire numbers and case-insensitive names."""
    assert convert.enum_member(Distance, Distance.DOT) is Distance.DOT
    assert convert.enum_member(Distance, 1) is Distance.COSINE
    assert convert.enum_member(Distance, "euclid") is Distance.EUCLID


@pytest.mark.parametrize("bad", [7, "fastest", True, 1.0])
def test_write_ordering_rejects_unknown_values(bad):
    """Verify unknown ordering values raise ConversionError instead of ValueError."""
    with pytest.raises(ConversionError) as exc_info:
        convert.write_ordering(bad)
    assert exc_info.value.code == "CONVERSION_ERROR"
