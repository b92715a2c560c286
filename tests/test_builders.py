# SPDX-License-Identifier: Apache-2.0
"""
Builders: required-field checks, last-write-wins setters and the messages
they produce.
"""

import pytest

from qdrant_grpc_sdk.builders import (
    ChangeAliasesBuilder,
    ClearPayloadPointsBuilder,
    CountPointsBuilder,
    CreateCollectionBuilder,
    CreateFieldIndexCollectionBuilder,
    DeleteCollectionBuilder,
    DeleteFieldIndexCollectionBuilder,
    DeletePayloadPointsBuilder,
    DeletePointsBuilder,
    GetPointsBuilder,
    HnswConfigDiffBuilder,
    PointStructBuilder,
    RecommendPointsBuilder,
    ScrollPointsBuilder,
    SearchBatchPointsBuilder,
    SearchParamsBuilder,
    SearchPointsBuilder,
    SetPayloadPointsBuilder,
    SparseVectorBuilder,
    UpsertPointsBuilder,
    VectorParamsBuilder,
    chunk_points,
)
from qdrant_grpc_sdk.convert import filters as F
from qdrant_grpc_sdk.core.errors import BuildError, ConversionError
from qdrant_grpc_sdk.models import (
    ChangeAliases,
    Distance,
    FieldType,
    HnswConfigDiff,
    IntegerIndexParams,
    RecommendStrategy,
    SearchParams,
    SparseVector,
    UpsertPoints,
    TextIndexParams,
    TokenizerType,
    WriteOrderingType,
)

# Valid values for every required field, keyed by builder.
REQUIRED_VALUES = {
    PointStructBuilder: {"id": 1, "vectors": [0.5, 0.25]},
    UpsertPointsBuilder: {"collection_name": "docs", "points": [PointStructBuilder(1, [0.5])]},
    DeletePointsBuilder: {"collection_name": "docs", "points": [1, 2]},
    SetPayloadPointsBuilder: {"collection_name": "docs", "payload": {"city": "Berlin"}},
    DeletePayloadPointsBuilder: {"collection_name": "docs", "keys": ["city"]},
    ClearPayloadPointsBuilder: {"collection_name": "docs", "points": [1]},
    GetPointsBuilder: {"collection_name": "docs", "ids": [1]},
    SearchPointsBuilder: {"collection_name": "docs", "vector": [0.5], "limit": 3},
    SearchBatchPointsBuilder: {"collection_name": "docs", "search_points": [SearchPointsBuilder("docs", [0.5], 1)]},
    ScrollPointsBuilder: {"collection_name": "docs"},
    CountPointsBuilder: {"collection_name": "docs"},
    RecommendPointsBuilder: {"collection_name": "docs", "limit": 3},
    CreateFieldIndexCollectionBuilder: {"collection_name": "docs", "field_name": "city"},
    DeleteFieldIndexCollectionBuilder: {"collection_name": "docs", "field_name": "city"},
    VectorParamsBuilder: {"size": 4, "distance": Distance.DOT},
    CreateCollectionBuilder: {"collection_name": "docs"},
    DeleteCollectionBuilder: {"collection_name": "docs"},
}

REQUIRED_CASES = [
    (builder, missing) for builder, values in REQUIRED_VALUES.items() for missing in values
]


def _stage(builder_cls, values):
    builder = builder_cls.empty()
    for name, value in values.items():
        getattr(builder, name)(value)
    return builder


def test_required_table_covers_every_builder():
    """Verify the value table lists exactly each builder's required fields."""
    for builder_cls, values in REQUIRED_VALUES.items():
        assert set(values) == set(builder_cls.required), builder_cls.__name__


@pytest.mark.parametrize("builder_cls", list(REQUIRED_VALUES), ids=lambda c: c.__name__)
def test_build_succeeds_when_required_fields_set(builder_cls):
    """Verify a builder with every required field staged builds its target."""
    msg = _stage(builder_cls, REQUIRED_VALUES[builder_cls]).build()
    assert isinstance(msg, builder_cls.target)


@pytest.mark.parametrize(
    "builder_cls, missing",
    REQUIRED_CASES,
    ids=[f"{b.__name__}-{m}" for b, m in REQUIRED_CASES],
)
def test_build_names_the_missing_required_field(builder_cls, missing):
    """Verify BuildError names exactly the required field left unset."""
    values = {k: v for k, v in REQUIRED_VALUES[builder_cls].items() if k != missing}
    with pytest.raises(BuildError) as exc_info:
        _stage(builder_cls, values).build()

    err = exc_info.value
    assert err.code == "BUILD_ERROR"
    assert err.field_name == missing
    assert err.builder == builder_cls.__name__
    assert err.target == builder_cls.target.__name__


@pytest.mark.parametrize(
    "builder, expected",
    [
        (SearchParamsBuilder(), SearchParams()),
        (HnswConfigDiffBuilder(), HnswConfigDiff()),
        (ChangeAliasesBuilder(), ChangeAliases()),
        (SparseVectorBuilder(), SparseVector()),
    ],
)
def test_builders_without_required_fields_never_fail(builder, expected):
    """Verify builders of all-optional messages build defaults."""
    assert builder.build() == expected


def test_last_write_wins():
    """Verify setting a field again overwrites the staged value."""
    msg = UpsertPointsBuilder("a", []).collection_name("b").collection_name("c").wait(True).wait(False).build()
    assert msg.collection_name == "c"
    assert msg.wait is False


def test_unset_optional_stays_none():
    """Verify an unset wait is None, not False."""
    msg = UpsertPointsBuilder("docs", [PointStructBuilder(1, [0.5])]).build()
    assert msg.wait is None
    assert msg.ordering is None


def test_write_options_are_converted():
    """Verify ordering and shard keys accept plain values."""
    msg = (
        DeletePointsBuilder("docs")
        .points(F.must(F.matches("city", "Berlin")))
        .ordering(WriteOrderingType.STRONG)
        .shard_key_selector("eu")
        .build()
    )
    assert msg.points.points_selector_one_of.case == "filter"
    assert msg.ordering.type is WriteOrderingType.STRONG
    assert msg.shard_key_selector.shard_keys[0].key.value == "eu"


def test_builds_are_independent():
    """Verify each build returns a new message that later setters do not touch."""
    builder = SparseVectorBuilder().add(3, 0.5)
    first = builder.build()
    builder.add(1, 0.25)
    second = builder.build()
    assert first == SparseVector(values=[0.5], indices=[3])
    assert second == SparseVector(values=[0.5, 0.25], indices=[3, 1])


def test_sparse_builder_checks_pairing_at_build():
    """Verify replacing only one side of a sparse vector fails on build."""
    builder = SparseVectorBuilder([1, 2], [0.5, 0.25]).indices([1, 2, 3])
    with pytest.raises(ConversionError):
        builder.build()


def test_point_struct_converts_id_vectors_and_payload():
    """Verify the point builder converts Python values to model values."""
    point = PointStructBuilder("5c56c793-69f3-4fbf-87e6-c4bf54c28c26", {"image": [0.5]}, {"n": 1}).build()
    assert point.id.point_id_options.case == "uuid"
    assert point.vectors.vectors_options.case == "vectors"
    assert point.payload["n"].kind.case == "integer_value"


def test_search_with_sparse_then_dense_vector():
    """Verify a sparse query stages indices and a later dense query clears them."""
    builder = SearchPointsBuilder("docs", SparseVectorBuilder().add(4, 0.5).add(2, 0.25), 5).vector_name("text")
    sparse = builder.build()
    assert sparse.vector == [0.5, 0.25]
    assert sparse.sparse_indices.data == [4, 2]

    dense = builder.vector([1.0, 0.0]).build()
    assert dense.sparse_indices is None
    assert dense.vector == [1.0, 0.0]


def test_search_options():
    """Verify nested builders and selectors are finished by the search builder."""
    msg = (
        SearchPointsBuilder("docs", [0.5], 10)
        .params(SearchParamsBuilder().hnsw_ef(128).exact(False))
        .with_payload(["city"])
        .with_vectors(False)
        .score_threshold(0.5)
        .read_consistency(2)
        .build()
    )
    assert msg.params == SearchParams(hnsw_ef=128, exact=False)
    assert msg.with_payload.selector_options.value.fields == ["city"]
    assert msg.with_vectors.selector_options.value is False
    assert msg.read_consistency.value.case == "factor"


def test_create_collection_with_named_vectors():
    """Verify a mapping of vector params builders becomes a params map."""
    msg = (
        CreateCollectionBuilder("docs")
        .vectors_config({"image": VectorParamsBuilder(4, Distance.DOT), "text": VectorParamsBuilder(8, 1)})
        .hnsw_config(HnswConfigDiffBuilder().m(16))
        .on_disk_payload(True)
        .build()
    )
    params = msg.vectors_config.config.value.map
    assert params["image"].distance is Distance.DOT
    assert params["text"].distance is Distance.COSINE
    assert msg.hnsw_config.m == 16
    assert msg.shard_number is None


def test_change_aliases_keeps_action_order():
    """Verify alias actions are recorded in call order."""
    msg = (
        ChangeAliasesBuilder()
        .create_alias("docs_v2", "docs")
        .rename_alias("old", "new")
        .delete_alias("stale")
        .build()
    )
    assert [a.action.case for a in msg.actions] == ["create_alias", "rename_alias", "delete_alias"]


def test_chunk_points_preserves_order_and_options():
    """Verify chunks keep point order and carry the request's other fields."""
    request = UpsertPointsBuilder("docs", [PointStructBuilder(i, [float(i)]) for i in range(5)]).wait(True).build()
    chunks = chunk_points(request, 2)
    assert [len(c.points) for c in chunks] == [2, 2, 1]
    assert [p.id.point_id_options.value for c in chunks for p in c.points] == [0, 1, 2, 3, 4]
    assert all(isinstance(c, UpsertPoints) and c.collection_name == "docs" and c.wait is True for c in chunks)


def test_repr_lists_staged_fields():
    """Verify the builder repr names the staged slots."""
    assert repr(CountPointsBuilder("docs").exact(True)) == "CountPointsBuilder(staged=[collection_name, exact])"


def test_vector_params_distance_accepts_name_and_rejects_unknown():
    """Verify distances convert from names and unknown values raise ConversionError."""
    assert VectorParamsBuilder(4, "dot").build().distance is Distance.DOT
    with pytest.raises(ConversionError):
        VectorParamsBuilder(4, 42)


def test_recommend_sorts_examples_into_ids_and_vectors():
    """Verify id examples and vector examples land in their own lists, in call order."""
    msg = (
        RecommendPointsBuilder("docs", 5)
        .add_positive(17)
        .add_positive([0.5, 0.25])
        .add_negative("5c56c793-69f3-4fbf-87e6-c4bf54c28c26")
        .add_negative(SparseVectorBuilder().add(2, 0.5))
        .add_positive(18)
        .strategy("best_score")
        .lookup_from("archive", "image")
        .build()
    )
    assert [p.point_id_options.value for p in msg.positive] == [17, 18]
    assert msg.positive_vectors[0].data == [0.5, 0.25]
    assert msg.negative[0].point_id_options.case == "uuid"
    assert msg.negative_vectors[0].indices.data == [2]
    assert msg.strategy is RecommendStrategy.BEST_SCORE
    assert msg.lookup_from.collection_name == "archive"
    assert msg.lookup_from.vector_name == "image"


def test_recommend_rejects_unknown_strategy():
    """Verify an unknown strategy name raises ConversionError."""
    with pytest.raises(ConversionError) as exc_info:
        RecommendPointsBuilder("docs", 5).strategy("nearest")
    assert exc_info.value.code == "CONVERSION_ERROR"


def test_create_field_index_wraps_index_params():
    """Verify bare index params are wrapped into the matching alternative."""
    msg = (
        CreateFieldIndexCollectionBuilder("docs", "body", "text")
        .field_index_params(TextIndexParams(tokenizer=TokenizerType.WORD, lowercase=True))
        .wait(True)
        .build()
    )
    assert msg.field_type is FieldType.TEXT
    assert msg.field_index_params.index_params.case == "text_index_params"
    assert msg.field_index_params.index_params.value.lowercase is True

    numeric = CreateFieldIndexCollectionBuilder("docs", "year", FieldType.INTEGER).field_index_params(
        IntegerIndexParams(lookup=True, range=False)
    )
    assert numeric.build().field_index_params.index_params.case == "integer_index_params"


def test_create_field_index_without_type_leaves_it_unset():
    """Verify the field type stays None when not given."""
    assert CreateFieldIndexCollectionBuilder("docs", "city").build().field_type is None


def test_delete_field_index_write_options():
    """Verify the delete request carries wait and ordering."""
    msg = DeleteFieldIndexCollectionBuilder("docs", "city").wait(False).ordering("strong").build()
    assert msg.wait is False
    assert msg.ordering.type is WriteOrderingType.STRONG
