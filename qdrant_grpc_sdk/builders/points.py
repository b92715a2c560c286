# qdrant_grpc_sdk/builders/points.py
# SPDX-License-Identifier: Apache-2.0
"""
Builders for point messages and the requests of the ``Points`` service.

Usage
-----
    request = (
        UpsertPointsBuilder("docs", [PointStructBuilder(1, [0.5, 0.25], {"lang": "en"})])
        .wait(True)
        .ordering(WriteOrderingType.STRONG)
        .build()
    )
"""

from __future__ import annotations

import uuid
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from qdrant_grpc_sdk.builders.base import MessageBuilder, built
from qdrant_grpc_sdk.convert import selectors as sel
from qdrant_grpc_sdk.convert.values import payload as to_payload
from qdrant_grpc_sdk.convert.vectors import (
    PointIdLike,
    VectorLike,
    VectorsLike,
    point_id,
    sparse_vector,
    vector,
    vectors,
)
from qdrant_grpc_sdk.models.points import (
    ClearPayloadPoints,
    CountPoints,
    CreateFieldIndexCollection,
    DeleteFieldIndexCollection,
    DeletePayloadPoints,
    DeletePoints,
    FieldType,
    Filter,
    GetPoints,
    IntegerIndexParams,
    KeywordIndexParams,
    LookupLocation,
    PayloadIndexParams,
    PointId,
    PointStruct,
    RecommendPoints,
    RecommendStrategy,
    ScrollPoints,
    SearchBatchPoints,
    SearchParams,
    SearchPoints,
    SetPayloadPoints,
    SparseIndices,
    SparseVector,
    TextIndexParams,
    UpsertPoints,
)

PointLike = Union[PointStruct, "PointStructBuilder"]


class _WriteOptionsMixin:
    """Setters shared by every write request."""

    def wait(self, wait: bool):
        return self._set("wait", wait)

    def ordering(self, ordering: Any):
        return self._set("ordering", sel.write_ordering(ordering))

    def shard_key_selector(self, selector: Any):
        return self._set("shard_key_selector", sel.shard_key_selector(selector))


class _ReadOptionsMixin:
    """Setters shared by every read request."""

    def read_consistency(self, consistency: Any):
        return self._set("read_consistency", sel.read_consistency(consistency))

    def shard_key_selector(self, selector: Any):
        return self._set("shard_key_selector", sel.shard_key_selector(selector))

    def timeout(self, seconds: int):
        return self._set("timeout", seconds)


# =============================================================================
# Points and vectors
# =============================================================================

class PointStructBuilder(MessageBuilder[PointStruct]):
    target = PointStruct
    required = ("id", "vectors")

    def __init__(self, id: PointIdLike, vectors: VectorsLike, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        self.id(id)
        self.vectors(vectors)
        if payload is not None:
            self.payload(payload)

    def id(self, value: PointIdLike) -> "PointStructBuilder":
        return self._set("id", point_id(value))

    def vectors(self, value: VectorsLike) -> "PointStructBuilder":
        return self._set("vectors", vectors(value))

    def payload(self, value: Mapping[str, Any]) -> "PointStructBuilder":
        return self._set("payload", to_payload(value))


class SparseVectorBuilder(MessageBuilder[SparseVector]):
    """Accumulates ``(index, value)`` pairs in insertion order."""

    target = SparseVector

    def __init__(self, indices: Sequence[int] = (), values: Sequence[float] = ()) -> None:
        super().__init__()
        initial = sparse_vector(indices, values)
        self._set("indices", list(initial.indices))
        self._set("values", list(initial.values))

    def add(self, index: int, value: float) -> "SparseVectorBuilder":
        self._slots.setdefault("indices", []).append(int(index))
        self._slots.setdefault("values", []).append(float(value))
        return self

    def indices(self, indices: Sequence[int]) -> "SparseVectorBuilder":
        return self._set("indices", [int(i) for i in indices])

    def values(self, values: Sequence[float]) -> "SparseVectorBuilder":
        return self._set("values", [float(v) for v in values])

    def build(self) -> SparseVector:
        staged = super().build()
        # Setters may replace one side only; pairing is checked at the end.
        return sparse_vector(staged.indices, staged.values)


class SearchParamsBuilder(MessageBuilder[SearchParams]):
    target = SearchParams

    def hnsw_ef(self, value: int) -> "SearchParamsBuilder":
        return self._set("hnsw_ef", value)

    def exact(self, value: bool) -> "SearchParamsBuilder":
        return self._set("exact", value)

    def indexed_only(self, value: bool) -> "SearchParamsBuilder":
        return self._set("indexed_only", value)


# =============================================================================
# Write requests
# =============================================================================

class UpsertPointsBuilder(_WriteOptionsMixin, MessageBuilder[UpsertPoints]):
    target = UpsertPoints
    required = ("collection_name", "points")

    def __init__(self, collection_name: str, points: Iterable[PointLike]) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.points(points)

    def collection_name(self, name: str) -> "UpsertPointsBuilder":
        return self._set("collection_name", name)

    def points(self, points: Iterable[PointLike]) -> "UpsertPointsBuilder":
        return self._set("points", [built(p) for p in points])


class DeletePointsBuilder(_WriteOptionsMixin, MessageBuilder[DeletePoints]):
    target = DeletePoints
    required = ("collection_name", "points")

    def __init__(self, collection_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)

    def collection_name(self, name: str) -> "DeletePointsBuilder":
        return self._set("collection_name", name)

    def points(self, selector: Any) -> "DeletePointsBuilder":
        """Ids to delete, or a :class:`Filter` selecting them."""
        return self._set("points", sel.points_selector(selector))


class SetPayloadPointsBuilder(_WriteOptionsMixin, MessageBuilder[SetPayloadPoints]):
    target = SetPayloadPoints
    required = ("collection_name", "payload")

    def __init__(self, collection_name: str, payload: Mapping[str, Any]) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.payload(payload)

    def collection_name(self, name: str) -> "SetPayloadPointsBuilder":
        return self._set("collection_name", name)

    def payload(self, payload: Mapping[str, Any]) -> "SetPayloadPointsBuilder":
        return self._set("payload", to_payload(payload))

    def points_selector(self, selector: Any) -> "SetPayloadPointsBuilder":
        return self._set("points_selector", sel.points_selector(selector))

    def key(self, key: str) -> "SetPayloadPointsBuilder":
        """Write under this nested payload path instead of the payload root."""
        return self._set("key", key)


class DeletePayloadPointsBuilder(_WriteOptionsMixin, MessageBuilder[DeletePayloadPoints]):
    target = DeletePayloadPoints
    required = ("collection_name", "keys")

    def __init__(self, collection_name: str, keys: Iterable[str]) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.keys(keys)

    def collection_name(self, name: str) -> "DeletePayloadPointsBuilder":
        return self._set("collection_name", name)

    def keys(self, keys: Iterable[str]) -> "DeletePayloadPointsBuilder":
        return self._set("keys", list(keys))

    def points_selector(self, selector: Any) -> "DeletePayloadPointsBuilder":
        return self._set("points_selector", sel.points_selector(selector))


class ClearPayloadPointsBuilder(_WriteOptionsMixin, MessageBuilder[ClearPayloadPoints]):
    target = ClearPayloadPoints
    required = ("collection_name", "points")

    def __init__(self, collection_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)

    def collection_name(self, name: str) -> "ClearPayloadPointsBuilder":
        return self._set("collection_name", name)

    def points(self, selector: Any) -> "ClearPayloadPointsBuilder":
        return self._set("points", sel.points_selector(selector))


# =============================================================================
# Read requests
# =============================================================================

class GetPointsBuilder(_ReadOptionsMixin, MessageBuilder[GetPoints]):
    target = GetPoints
    required = ("collection_name", "ids")

    def __init__(self, collection_name: str, ids: Iterable[PointIdLike]) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.ids(ids)

    def collection_name(self, name: str) -> "GetPointsBuilder":
        return self._set("collection_name", name)

    def ids(self, ids: Iterable[PointIdLike]) -> "GetPointsBuilder":
        return self._set("ids", [point_id(i) for i in ids])

    def with_payload(self, selector: Any) -> "GetPointsBuilder":
        return self._set("with_payload", sel.with_payload(selector))

    def with_vectors(self, selector: Any) -> "GetPointsBuilder":
        return self._set("with_vectors", sel.with_vectors(selector))


class SearchPointsBuilder(_ReadOptionsMixin, MessageBuilder[SearchPoints]):
    """
    Builds a :class:`SearchPoints` request.

    ``vector`` accepts dense values or a :class:`SparseVector`; a sparse
    query stages its values in ``vector`` and its indices in
    ``sparse_indices``.
    """

    target = SearchPoints
    required = ("collection_name", "vector", "limit")

    def __init__(
        self,
        collection_name: str,
        vector: Union[Sequence[float], SparseVector, "SparseVectorBuilder"],
        limit: int,
    ) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.vector(vector)
        self.limit(limit)

    def collection_name(self, name: str) -> "SearchPointsBuilder":
        return self._set("collection_name", name)

    def vector(self, vector: Union[Sequence[float], SparseVector, "SparseVectorBuilder"]) -> "SearchPointsBuilder":
        vector = built(vector)
        if isinstance(vector, SparseVector):
            self._set("sparse_indices", SparseIndices(data=list(vector.indices)))
            return self._set("vector", list(vector.values))
        self._slots.pop("sparse_indices", None)
        return self._set("vector", [float(v) for v in vector])

    def limit(self, limit: int) -> "SearchPointsBuilder":
        return self._set("limit", limit)

    def filter(self, flt: Filter) -> "SearchPointsBuilder":
        return self._set("filter", flt)

    def with_payload(self, selector: Any) -> "SearchPointsBuilder":
        return self._set("with_payload", sel.with_payload(selector))

    def with_vectors(self, selector: Any) -> "SearchPointsBuilder":
        return self._set("with_vectors", sel.with_vectors(selector))

    def params(self, params: Union[SearchParams, SearchParamsBuilder]) -> "SearchPointsBuilder":
        return self._set("params", built(params))

    def score_threshold(self, threshold: float) -> "SearchPointsBuilder":
        return self._set("score_threshold", threshold)

    def offset(self, offset: int) -> "SearchPointsBuilder":
        return self._set("offset", offset)

    def vector_name(self, name: str) -> "SearchPointsBuilder":
        return self._set("vector_name", name)

    def sparse_indices(self, indices: Sequence[int]) -> "SearchPointsBuilder":
        return self._set("sparse_indices", SparseIndices(data=list(indices)))


class SearchBatchPointsBuilder(MessageBuilder[SearchBatchPoints]):
    target = SearchBatchPoints
    required = ("collection_name", "search_points")

    def __init__(self, collection_name: str, search_points: Iterable[Union[SearchPoints, SearchPointsBuilder]]) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.search_points(search_points)

    def collection_name(self, name: str) -> "SearchBatchPointsBuilder":
        return self._set("collection_name", name)

    def search_points(self, searches: Iterable[Union[SearchPoints, SearchPointsBuilder]]) -> "SearchBatchPointsBuilder":
        return self._set("search_points", [built(s) for s in searches])

    def read_consistency(self, consistency: Any) -> "SearchBatchPointsBuilder":
        return self._set("read_consistency", sel.read_consistency(consistency))

    def timeout(self, seconds: int) -> "SearchBatchPointsBuilder":
        return self._set("timeout", seconds)


class ScrollPointsBuilder(_ReadOptionsMixin, MessageBuilder[ScrollPoints]):
    target = ScrollPoints
    required = ("collection_name",)

    def __init__(self, collection_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)

    def collection_name(self, name: str) -> "ScrollPointsBuilder":
        return self._set("collection_name", name)

    def filter(self, flt: Filter) -> "ScrollPointsBuilder":
        return self._set("filter", flt)

    def offset(self, offset: PointIdLike) -> "ScrollPointsBuilder":
        """Start from this point id (the ``next_page_offset`` of the previous page)."""
        return self._set("offset", point_id(offset))

    def limit(self, limit: int) -> "ScrollPointsBuilder":
        return self._set("limit", limit)

    def with_payload(self, selector: Any) -> "ScrollPointsBuilder":
        return self._set("with_payload", sel.with_payload(selector))

    def with_vectors(self, selector: Any) -> "ScrollPointsBuilder":
        return self._set("with_vectors", sel.with_vectors(selector))


class CountPointsBuilder(_ReadOptionsMixin, MessageBuilder[CountPoints]):
    target = CountPoints
    required = ("collection_name",)

    def __init__(self, collection_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)

    def collection_name(self, name: str) -> "CountPointsBuilder":
        return self._set("collection_name", name)

    def filter(self, flt: Filter) -> "CountPointsBuilder":
        return self._set("filter", flt)

    def exact(self, exact: bool) -> "CountPointsBuilder":
        return self._set("exact", exact)


class RecommendPointsBuilder(_ReadOptionsMixin, MessageBuilder[RecommendPoints]):
    """
    Builds a :class:`RecommendPoints` request.

    Examples are point ids or raw vectors; ``add_positive`` and
    ``add_negative`` sort them into the matching id or vector list.

    Usage:
        RecommendPointsBuilder("docs", 10).add_positive(17).add_negative([0.5, 0.25]).build()
    """

    target = RecommendPoints
    required = ("collection_name", "limit")

    def __init__(self, collection_name: str, limit: int) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.limit(limit)

    def _add_example(self, ids_slot: str, vectors_slot: str, example: Any) -> "RecommendPointsBuilder":
        example = built(example)
        if isinstance(example, (PointId, int, str, uuid.UUID)):
            self._slots.setdefault(ids_slot, []).append(point_id(example))
        else:
            self._slots.setdefault(vectors_slot, []).append(vector(example))
        return self

    def collection_name(self, name: str) -> "RecommendPointsBuilder":
        return self._set("collection_name", name)

    def limit(self, limit: int) -> "RecommendPointsBuilder":
        return self._set("limit", limit)

    def add_positive(self, example: Union[PointIdLike, VectorLike]) -> "RecommendPointsBuilder":
        return self._add_example("positive", "positive_vectors", example)

    def add_negative(self, example: Union[PointIdLike, VectorLike]) -> "RecommendPointsBuilder":
        return self._add_example("negative", "negative_vectors", example)

    def positive(self, ids: Iterable[PointIdLike]) -> "RecommendPointsBuilder":
        return self._set("positive", [point_id(i) for i in ids])

    def negative(self, ids: Iterable[PointIdLike]) -> "RecommendPointsBuilder":
        return self._set("negative", [point_id(i) for i in ids])

    def filter(self, flt: Filter) -> "RecommendPointsBuilder":
        return self._set("filter", flt)

    def with_payload(self, selector: Any) -> "RecommendPointsBuilder":
        return self._set("with_payload", sel.with_payload(selector))

    def with_vectors(self, selector: Any) -> "RecommendPointsBuilder":
        return self._set("with_vectors", sel.with_vectors(selector))

    def params(self, params: Union[SearchParams, SearchParamsBuilder]) -> "RecommendPointsBuilder":
        return self._set("params", built(params))

    def score_threshold(self, threshold: float) -> "RecommendPointsBuilder":
        return self._set("score_threshold", threshold)

    def offset(self, offset: int) -> "RecommendPointsBuilder":
        return self._set("offset", offset)

    def using(self, vector_name: str) -> "RecommendPointsBuilder":
        return self._set("using", vector_name)

    def lookup_from(self, collection_name: str, vector_name: Optional[str] = None) -> "RecommendPointsBuilder":
        return self._set("lookup_from", LookupLocation(collection_name=collection_name, vector_name=vector_name))

    def strategy(self, strategy: Union[RecommendStrategy, int, str]) -> "RecommendPointsBuilder":
        return self._set("strategy", sel.enum_member(RecommendStrategy, strategy))


# =============================================================================
# Payload indexes
# =============================================================================

class CreateFieldIndexCollectionBuilder(MessageBuilder[CreateFieldIndexCollection]):
    """
    Builds a :class:`CreateFieldIndexCollection` request.

    Usage:
        CreateFieldIndexCollectionBuilder("docs", "body", FieldType.TEXT).field_index_params(
            TextIndexParams(tokenizer=TokenizerType.WORD, lowercase=True)
        )
    """

    target = CreateFieldIndexCollection
    required = ("collection_name", "field_name")

    def __init__(
        self,
        collection_name: str,
        field_name: str,
        field_type: Optional[Union[FieldType, int, str]] = None,
    ) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.field_name(field_name)
        if field_type is not None:
            self.field_type(field_type)

    def collection_name(self, name: str) -> "CreateFieldIndexCollectionBuilder":
        return self._set("collection_name", name)

    def field_name(self, name: str) -> "CreateFieldIndexCollectionBuilder":
        return self._set("field_name", name)

    def field_type(self, field_type: Union[FieldType, int, str]) -> "CreateFieldIndexCollectionBuilder":
        return self._set("field_type", sel.enum_member(FieldType, field_type))

    def field_index_params(
        self,
        params: Union[PayloadIndexParams, TextIndexParams, IntegerIndexParams, KeywordIndexParams],
    ) -> "CreateFieldIndexCollectionBuilder":
        return self._set("field_index_params", sel.payload_index_params(params))

    def wait(self, wait: bool) -> "CreateFieldIndexCollectionBuilder":
        return self._set("wait", wait)

    def ordering(self, ordering: Any) -> "CreateFieldIndexCollectionBuilder":
        return self._set("ordering", sel.write_ordering(ordering))


class DeleteFieldIndexCollectionBuilder(MessageBuilder[DeleteFieldIndexCollection]):
    target = DeleteFieldIndexCollection
    required = ("collection_name", "field_name")

    def __init__(self, collection_name: str, field_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)
        self.field_name(field_name)

    def collection_name(self, name: str) -> "DeleteFieldIndexCollectionBuilder":
        return self._set("collection_name", name)

    def field_name(self, name: str) -> "DeleteFieldIndexCollectionBuilder":
        return self._set("field_name", name)

    def wait(self, wait: bool) -> "DeleteFieldIndexCollectionBuilder":
        return self._set("wait", wait)

    def ordering(self, ordering: Any) -> "DeleteFieldIndexCollectionBuilder":
        return self._set("ordering", sel.write_ordering(ordering))


def chunk_points(request: UpsertPoints, chunk_size: int) -> Tuple[UpsertPoints, ...]:
    """
    Split ``request`` into requests of at most ``chunk_size`` points.

    Order is kept; every chunk carries the request's other fields unchanged.
    """
    points = request.points
    return tuple(
        UpsertPoints(
            collection_name=request.collection_name,
            wait=request.wait,
            points=list(points[start:start + chunk_size]),
            ordering=request.ordering,
            shard_key_selector=request.shard_key_selector,
        )
        for start in range(0, len(points), chunk_size)
    )


__all__ = [
    "PointStructBuilder",
    "SparseVectorBuilder",
    "SearchParamsBuilder",
    "UpsertPointsBuilder",
    "DeletePointsBuilder",
    "SetPayloadPointsBuilder",
    "DeletePayloadPointsBuilder",
    "ClearPayloadPointsBuilder",
    "GetPointsBuilder",
    "SearchPointsBuilder",
    "SearchBatchPointsBuilder",
    "ScrollPointsBuilder",
    "CountPointsBuilder",
    "RecommendPointsBuilder",
    "CreateFieldIndexCollectionBuilder",
    "DeleteFieldIndexCollectionBuilder",
    "chunk_points",
]
