# qdrant_grpc_sdk/models/points.py
# SPDX-License-Identifier: Apache-2.0
"""
Point messages: identifiers, vectors, selectors, filters, and the request and
response shapes of the ``Points`` service.

Every type is an immutable value. Optional fields default to ``None``,
repeated fields to an empty list and maps to an empty dict, mirroring proto3
defaults. Fields the wire format marks as ``optional`` keep ``None`` distinct
from the zero value (``wait=None`` is not ``wait=False``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional

from qdrant_grpc_sdk.models.base import OneOf, map_field, oneof_field, proto_enum, proto_message, repeated_field
from qdrant_grpc_sdk.models.json_value import Value


# =============================================================================
# Enums
# =============================================================================

@proto_enum("qdrant.UpdateStatus")
class UpdateStatus(enum.IntEnum):
    UNKNOWN = 0
    ACKNOWLEDGED = 1
    COMPLETED = 2
    CLOCK_REJECTED = 3


@proto_enum("qdrant.WriteOrderingType")
class WriteOrderingType(enum.IntEnum):
    WEAK = 0
    MEDIUM = 1
    STRONG = 2


@proto_enum("qdrant.ReadConsistencyType")
class ReadConsistencyType(enum.IntEnum):
    ALL = 0
    MAJORITY = 1
    QUORUM = 2


# =============================================================================
# Consistency and sharding
# =============================================================================

@proto_message("qdrant.WriteOrdering")
@dataclass(frozen=True)
class WriteOrdering:
    type: WriteOrderingType = WriteOrderingType.WEAK


class ReadConsistencyValue(OneOf):
    cases = ("type", "factor")


@proto_message("qdrant.ReadConsistency")
@dataclass(frozen=True)
class ReadConsistency:
    """Either a named consistency level or an explicit number of replicas."""
    value: Optional[ReadConsistencyValue] = oneof_field(ReadConsistencyValue)


class ShardKeyValue(OneOf):
    cases = ("keyword", "number")


@proto_message("qdrant.ShardKey")
@dataclass(frozen=True)
class ShardKey:
    key: Optional[ShardKeyValue] = oneof_field(ShardKeyValue)


@proto_message("qdrant.ShardKeySelector")
@dataclass(frozen=True)
class ShardKeySelector:
    shard_keys: List[ShardKey] = repeated_field()


# =============================================================================
# Identifiers and vectors
# =============================================================================

class PointIdOptions(OneOf):
    cases = ("num", "uuid")


@proto_message("qdrant.PointId")
@dataclass(frozen=True)
class PointId:
    """Point identifier: an unsigned 64-bit integer or a UUID string."""
    point_id_options: Optional[PointIdOptions] = oneof_field(PointIdOptions)


@proto_message("qdrant.SparseIndices")
@dataclass(frozen=True)
class SparseIndices:
    data: List[int] = repeated_field()


@proto_message("qdrant.DenseVector")
@dataclass(frozen=True)
class DenseVector:
    data: List[float] = repeated_field()


@proto_message("qdrant.SparseVector")
@dataclass(frozen=True)
class SparseVector:
    """
    Sparse vector as two parallel sequences.

    Attributes:
        values: Non-zero values, position ``i`` pairs with ``indices[i]``
        indices: Dimension index of each value
    """
    values: List[float] = repeated_field()
    indices: List[int] = repeated_field()


@proto_message("qdrant.MultiDenseVector")
@dataclass(frozen=True)
class MultiDenseVector:
    vectors: List[DenseVector] = repeated_field()


class VectorKind(OneOf):
    cases = ("dense", "sparse", "multi_dense")


@proto_message("qdrant.Vector")
@dataclass(frozen=True)
class Vector:
    """
    A single vector.

    The flat ``data``/``indices``/``vectors_count`` encoding is understood by
    every server version: dense vectors fill ``data``, sparse vectors add
    ``indices`` and multi-dense vectors set ``vectors_count``. Newer servers
    may answer with the typed ``vector`` alternative instead.
    """
    data: List[float] = repeated_field()
    indices: Optional[SparseIndices] = None
    vectors_count: Optional[int] = None
    vector: Optional[VectorKind] = oneof_field(VectorKind)


@proto_message("qdrant.NamedVectors")
@dataclass(frozen=True)
class NamedVectors:
    vectors: Dict[str, Vector] = map_field()


class VectorsOptions(OneOf):
    cases = ("vector", "vectors")


@proto_message("qdrant.Vectors")
@dataclass(frozen=True)
class Vectors:
    vectors_options: Optional[VectorsOptions] = oneof_field(VectorsOptions)


# =============================================================================
# Selectors
# =============================================================================

@proto_message("qdrant.VectorsSelector")
@dataclass(frozen=True)
class VectorsSelector:
    names: List[str] = repeated_field()


class WithVectorsOptions(OneOf):
    cases = ("enable", "include")


@proto_message("qdrant.WithVectorsSelector")
@dataclass(frozen=True)
class WithVectorsSelector:
    selector_options: Optional[WithVectorsOptions] = oneof_field(WithVectorsOptions)


@proto_message("qdrant.PayloadIncludeSelector")
@dataclass(frozen=True)
class PayloadIncludeSelector:
    fields: List[str] = repeated_field()


@proto_message("qdrant.PayloadExcludeSelector")
@dataclass(frozen=True)
class PayloadExcludeSelector:
    fields: List[str] = repeated_field()


class WithPayloadOptions(OneOf):
    cases = ("enable", "include", "exclude")


@proto_message("qdrant.WithPayloadSelector")
@dataclass(frozen=True)
class WithPayloadSelector:
    selector_options: Optional[WithPayloadOptions] = oneof_field(WithPayloadOptions)


@proto_message("qdrant.PointsIdsList")
@dataclass(frozen=True)
class PointsIdsList:
    ids: List[PointId] = repeated_field()


class PointsSelectorOptions(OneOf):
    cases = ("points", "filter")


@proto_message("qdrant.PointsSelector")
@dataclass(frozen=True)
class PointsSelector:
    """Selects points either by explicit ids or by a filter."""
    points_selector_one_of: Optional[PointsSelectorOptions] = oneof_field(PointsSelectorOptions)


@proto_message("qdrant.SearchParams")
@dataclass(frozen=True)
class SearchParams:
    hnsw_ef: Optional[int] = None
    exact: Optional[bool] = None
    indexed_only: Optional[bool] = None


# =============================================================================
# Filters
# =============================================================================

@proto_message("qdrant.Filter")
@dataclass(frozen=True)
class Filter:
    """
    Boolean combination of conditions.

    Attributes:
        should: At least one of these must hold
        must: All of these must hold
        must_not: None of these may hold
    """
    should: List["Condition"] = repeated_field()
    must: List["Condition"] = repeated_field()
    must_not: List["Condition"] = repeated_field()


@proto_message("qdrant.IsEmptyCondition")
@dataclass(frozen=True)
class IsEmptyCondition:
    key: str = ""


@proto_message("qdrant.IsNullCondition")
@dataclass(frozen=True)
class IsNullCondition:
    key: str = ""


@proto_message("qdrant.HasIdCondition")
@dataclass(frozen=True)
class HasIdCondition:
    has_id: List[PointId] = repeated_field()


@proto_message("qdrant.NestedCondition")
@dataclass(frozen=True)
class NestedCondition:
    key: str = ""
    filter: Optional[Filter] = None


@proto_message("qdrant.RepeatedStrings")
@dataclass(frozen=True)
class RepeatedStrings:
    strings: List[str] = repeated_field()


@proto_message("qdrant.RepeatedIntegers")
@dataclass(frozen=True)
class RepeatedIntegers:
    integers: List[int] = repeated_field()


class MatchValue(OneOf):
    cases = (
        "keyword",
        "integer",
        "boolean",
        "text",
        "keywords",
        "integers",
        "except_integers",
        "except_keywords",
    )


@proto_message("qdrant.Match")
@dataclass(frozen=True)
class Match:
    match_value: Optional[MatchValue] = oneof_field(MatchValue)


@proto_message("qdrant.Range")
@dataclass(frozen=True)
class Range:
    lt: Optional[float] = None
    gt: Optional[float] = None
    gte: Optional[float] = None
    lte: Optional[float] = None


@proto_message("qdrant.GeoPoint")
@dataclass(frozen=True)
class GeoPoint:
    lon: float = 0.0
    lat: float = 0.0


@proto_message("qdrant.GeoBoundingBox")
@dataclass(frozen=True)
class GeoBoundingBox:
    top_left: Optional[GeoPoint] = None
    bottom_right: Optional[GeoPoint] = None


@proto_message("qdrant.GeoRadius")
@dataclass(frozen=True)
class GeoRadius:
    center: Optional[GeoPoint] = None
    radius: float = 0.0


@proto_message("qdrant.ValuesCount")
@dataclass(frozen=True)
class ValuesCount:
    lt: Optional[int] = None
    gt: Optional[int] = None
    gte: Optional[int] = None
    lte: Optional[int] = None


@proto_message("qdrant.FieldCondition")
@dataclass(frozen=True)
class FieldCondition:
    """Condition on a payload key; the server applies every clause that is set."""
    key: str = ""
    match: Optional[Match] = None
    range: Optional[Range] = None
    geo_bounding_box: Optional[GeoBoundingBox] = None
    geo_radius: Optional[GeoRadius] = None
    values_count: Optional[ValuesCount] = None


class ConditionOptions(OneOf):
    cases = ("field", "is_empty", "has_id", "filter", "is_null", "nested")


@proto_message("qdrant.Condition")
@dataclass(frozen=True)
class Condition:
    condition_one_of: Optional[ConditionOptions] = oneof_field(ConditionOptions)


# =============================================================================
# Points
# =============================================================================

@proto_message("qdrant.PointStruct")
@dataclass(frozen=True)
class PointStruct:
    """
    A point to upsert.

    Attributes:
        id: Point identifier
        payload: Arbitrary JSON-like payload
        vectors: Unnamed vector or named vectors
    """
    id: Optional[PointId] = None
    payload: Dict[str, Value] = map_field()
    vectors: Optional[Vectors] = None


@proto_message("qdrant.ScoredPoint")
@dataclass(frozen=True)
class ScoredPoint:
    id: Optional[PointId] = None
    payload: Dict[str, Value] = map_field()
    score: float = 0.0
    version: int = 0
    vectors: Optional[Vectors] = None
    shard_key: Optional[ShardKey] = None


@proto_message("qdrant.RetrievedPoint")
@dataclass(frozen=True)
class RetrievedPoint:
    id: Optional[PointId] = None
    payload: Dict[str, Value] = map_field()
    vectors: Optional[Vectors] = None
    shard_key: Optional[ShardKey] = None


# =============================================================================
# Requests
# =============================================================================

@proto_message("qdrant.UpsertPoints")
@dataclass(frozen=True)
class UpsertPoints:
    """
    Insert or replace points.

    Attributes:
        collection_name: Target collection
        wait: Wait until the change is applied (None leaves it to the server)
        points: Points to write, in order
        ordering: Write ordering guarantees
        shard_key_selector: Restrict the write to these shards
    """
    collection_name: str = ""
    wait: Optional[bool] = None
    points: List[PointStruct] = repeated_field()
    ordering: Optional[WriteOrdering] = None
    shard_key_selector: Optional[ShardKeySelector] = None


@proto_message("qdrant.DeletePoints")
@dataclass(frozen=True)
class DeletePoints:
    collection_name: str = ""
    wait: Optional[bool] = None
    points: Optional[PointsSelector] = None
    ordering: Optional[WriteOrdering] = None
    shard_key_selector: Optional[ShardKeySelector] = None


@proto_message("qdrant.GetPoints")
@dataclass(frozen=True)
class GetPoints:
    collection_name: str = ""
    ids: List[PointId] = repeated_field()
    with_payload: Optional[WithPayloadSelector] = None
    with_vectors: Optional[WithVectorsSelector] = None
    read_consistency: Optional[ReadConsistency] = None
    shard_key_selector: Optional[ShardKeySelector] = None
    timeout: Optional[int] = None


@proto_message("qdrant.SetPayloadPoints")
@dataclass(frozen=True)
class SetPayloadPoints:
    """
    Set (or, through ``OverwritePayload``, replace) payload of selected points.

    ``key`` targets a nested payload path instead of the payload root.
    """
    collection_name: str = ""
    wait: Optional[bool] = None
    payload: Dict[str, Value] = map_field()
    points_selector: Optional[PointsSelector] = None
    ordering: Optional[WriteOrdering] = None
    shard_key_selector: Optional[ShardKeySelector] = None
    key: Optional[str] = None


@proto_message("qdrant.DeletePayloadPoints")
@dataclass(frozen=True)
class DeletePayloadPoints:
    collection_name: str = ""
    wait: Optional[bool] = None
    keys: List[str] = repeated_field()
    points_selector: Optional[PointsSelector] = None
    ordering: Optional[WriteOrdering] = None
    shard_key_selector: Optional[ShardKeySelector] = None


@proto_message("qdrant.ClearPayloadPoints")
@dataclass(frozen=True)
class ClearPayloadPoints:
    collection_name: str = ""
    wait: Optional[bool] = None
    points: Optional[PointsSelector] = None
    ordering: Optional[WriteOrdering] = None
    shard_key_selector: Optional[ShardKeySelector] = None


@proto_message("qdrant.SearchPoints")
@dataclass(frozen=True)
class SearchPoints:
    """
    Nearest-neighbour search.

    Attributes:
        collection_name: Collection to search
        vector: Query vector (values of a sparse query when ``sparse_indices`` is set)
        filter: Restrict candidates to points matching this filter
        limit: Maximum number of results
        with_payload: Payload to return with each hit
        params: Index tuning for this query
        score_threshold: Drop hits scoring worse than this
        offset: Skip this many best hits
        vector_name: Named vector to search against
        with_vectors: Vectors to return with each hit
        read_consistency: Replica agreement required for the read
        timeout: Server-side timeout in seconds
        shard_key_selector: Restrict the search to these shards
        sparse_indices: Indices of a sparse query vector
    """
    collection_name: str = ""
    vector: List[float] = repeated_field()
    filter: Optional[Filter] = None
    limit: int = 0
    with_payload: Optional[WithPayloadSelector] = None
    params: Optional[SearchParams] = None
    score_threshold: Optional[float] = None
    offset: Optional[int] = None
    vector_name: Optional[str] = None
    with_vectors: Optional[WithVectorsSelector] = None
    read_consistency: Optional[ReadConsistency] = None
    timeout: Optional[int] = None
    shard_key_selector: Optional[ShardKeySelector] = None
    sparse_indices: Optional[SparseIndices] = None


@proto_message("qdrant.SearchBatchPoints")
@dataclass(frozen=True)
class SearchBatchPoints:
    collection_name: str = ""
    search_points: List[SearchPoints] = repeated_field()
    read_consistency: Optional[ReadConsistency] = None
    timeout: Optional[int] = None


@proto_message("qdrant.ScrollPoints")
@dataclass(frozen=True)
class ScrollPoints:
    collection_name: str = ""
    filter: Optional[Filter] = None
    offset: Optional[PointId] = None
    limit: Optional[int] = None
    with_payload: Optional[WithPayloadSelector] = None
    with_vectors: Optional[WithVectorsSelector] = None
    read_consistency: Optional[ReadConsistency] = None
    shard_key_selector: Optional[ShardKeySelector] = None
    timeout: Optional[int] = None


@proto_message("qdrant.CountPoints")
@dataclass(frozen=True)
class CountPoints:
    collection_name: str = ""
    filter: Optional[Filter] = None
    exact: Optional[bool] = None
    read_consistency: Optional[ReadConsistency] = None
    shard_key_selector: Optional[ShardKeySelector] = None
    timeout: Optional[int] = None


# =============================================================================
# Responses
# =============================================================================

@proto_message("qdrant.UpdateResult")
@dataclass(frozen=True)
class UpdateResult:
    operation_id: Optional[int] = None
    status: UpdateStatus = UpdateStatus.UNKNOWN


@proto_message("qdrant.PointsOperationResponse")
@dataclass(frozen=True)
class PointsOperationResponse:
    """
    Outcome of a write.

    Attributes:
        result: Server status of the write
        time: Seconds the server spent on the request
    """
    result: Optional[UpdateResult] = None
    time: float = 0.0


@proto_message("qdrant.SearchResponse")
@dataclass(frozen=True)
class SearchResponse:
    result: List[ScoredPoint] = repeated_field()
    time: float = 0.0


@proto_message("qdrant.BatchResult")
@dataclass(frozen=True)
class BatchResult:
    result: List[ScoredPoint] = repeated_field()


@proto_message("qdrant.SearchBatchResponse")
@dataclass(frozen=True)
class SearchBatchResponse:
    result: List[BatchResult] = repeated_field()
    time: float = 0.0


@proto_message("qdrant.GetResponse")
@dataclass(frozen=True)
class GetResponse:
    result: List[RetrievedPoint] = repeated_field()
    time: float = 0.0


@proto_message("qdrant.ScrollResponse")
@dataclass(frozen=True)
class ScrollResponse:
    """One page of points; ``next_page_offset`` is None on the last page."""
    next_page_offset: Optional[PointId] = None
    result: List[RetrievedPoint] = repeated_field()
    time: float = 0.0


@proto_message("qdrant.CountResult")
@dataclass(frozen=True)
class CountResult:
    count: int = 0


@proto_message("qdrant.CountResponse")
@dataclass(frozen=True)
class CountResponse:
    result: Optional[CountResult] = None
    time: float = 0.0


# =============================================================================
# Recommendations
# =============================================================================

@proto_enum("qdrant.RecommendStrategy")
class RecommendStrategy(enum.IntEnum):
    AVERAGE_VECTOR = 0
    BEST_SCORE = 1


@proto_message("qdrant.LookupLocation")
@dataclass(frozen=True)
class LookupLocation:
    """Collection (and vector) that example point ids are looked up in."""
    collection_name: str = ""
    vector_name: Optional[str] = None
    shard_key_selector: Optional[ShardKeySelector] = None


@proto_message("qdrant.RecommendPoints")
@dataclass(frozen=True)
class RecommendPoints:
    """
    Search by example: points close to ``positive`` and far from ``negative``.

    Attributes:
        collection_name: Collection to search
        positive: Ids of points to look similar to
        negative: Ids of points to look dissimilar to
        filter: Restrict candidates to points matching this filter
        limit: Maximum number of results
        with_payload: Payload to return with each hit
        params: Index tuning for this query
        score_threshold: Drop hits scoring worse than this
        offset: Skip this many best hits
        using: Named vector to compare
        with_vectors: Vectors to return with each hit
        lookup_from: Where example ids are resolved, if not this collection
        read_consistency: Replica agreement required for the read
        strategy: How examples are combined
        positive_vectors: Raw vectors to look similar to
        negative_vectors: Raw vectors to look dissimilar to
        timeout: Server-side timeout in seconds
        shard_key_selector: Restrict the search to these shards
    """
    collection_name: str = ""
    positive: List[PointId] = repeated_field()
    negative: List[PointId] = repeated_field()
    filter: Optional[Filter] = None
    limit: int = 0
    with_payload: Optional[WithPayloadSelector] = None
    params: Optional[SearchParams] = None
    score_threshold: Optional[float] = None
    offset: Optional[int] = None
    using: Optional[str] = None
    with_vectors: Optional[WithVectorsSelector] = None
    lookup_from: Optional[LookupLocation] = None
    read_consistency: Optional[ReadConsistency] = None
    strategy: Optional[RecommendStrategy] = None
    positive_vectors: List[Vector] = repeated_field()
    negative_vectors: List[Vector] = repeated_field()
    timeout: Optional[int] = None
    shard_key_selector: Optional[ShardKeySelector] = None


@proto_message("qdrant.RecommendResponse")
@dataclass(frozen=True)
class RecommendResponse:
    result: List[ScoredPoint] = repeated_field()
    time: float = 0.0


# =============================================================================
# Payload indexes
# =============================================================================

@proto_enum("qdrant.FieldType")
class FieldType(enum.IntEnum):
    KEYWORD = 0
    INTEGER = 1
    FLOAT = 2
    GEO = 3
    TEXT = 4
    BOOL = 5
    DATETIME = 6
    UUID = 7


@proto_enum("qdrant.TokenizerType")
class TokenizerType(enum.IntEnum):
    UNKNOWN = 0
    PREFIX = 1
    WHITESPACE = 2
    WORD = 3
    MULTILINGUAL = 4


@proto_message("qdrant.KeywordIndexParams")
@dataclass(frozen=True)
class KeywordIndexParams:
    is_tenant: Optional[bool] = None
    on_disk: Optional[bool] = None


@proto_message("qdrant.IntegerIndexParams")
@dataclass(frozen=True)
class IntegerIndexParams:
    lookup: Optional[bool] = None
    range: Optional[bool] = None
    is_principal: Optional[bool] = None
    on_disk: Optional[bool] = None


@proto_message("qdrant.TextIndexParams")
@dataclass(frozen=True)
class TextIndexParams:
    tokenizer: TokenizerType = TokenizerType.UNKNOWN
    lowercase: Optional[bool] = None
    min_token_len: Optional[int] = None
    max_token_len: Optional[int] = None


class IndexParams(OneOf):
    cases = ("text_index_params", "integer_index_params", "keyword_index_params")


@proto_message("qdrant.PayloadIndexParams")
@dataclass(frozen=True)
class PayloadIndexParams:
    index_params: Optional[IndexParams] = oneof_field(IndexParams)


@proto_message("qdrant.CreateFieldIndexCollection")
@dataclass(frozen=True)
class CreateFieldIndexCollection:
    """
    Index a payload field so filters on it (and full-text matches) are fast.

    Attributes:
        collection_name: Collection holding the field
        wait: Wait until the index is built
        field_name: Payload key to index
        field_type: Kind of index
        field_index_params: Type-specific index settings
        ordering: Write ordering guarantee
    """
    collection_name: str = ""
    wait: Optional[bool] = None
    field_name: str = ""
    field_type: Optional[FieldType] = None
    field_index_params: Optional[PayloadIndexParams] = None
    ordering: Optional[WriteOrdering] = None


@proto_message("qdrant.DeleteFieldIndexCollection")
@dataclass(frozen=True)
class DeleteFieldIndexCollection:
    collection_name: str = ""
    wait: Optional[bool] = None
    field_name: str = ""
    ordering: Optional[WriteOrdering] = None


@dataclass(frozen=True)
class ChunkedUpsertResponse:
    """
    Aggregate of a chunked upsert.

    Not a wire message: the client assembles it from one
    ``PointsOperationResponse`` per chunk.

    Attributes:
        result: Result of the last chunk
        time: Sum of the time reported by every chunk
        chunk_results: Result of every chunk, in the order they were sent
    """
    result: Optional[UpdateResult] = None
    time: float = 0.0
    chunk_results: List[Optional[UpdateResult]] = repeated_field()


__all__ = [
    "UpdateStatus",
    "WriteOrderingType",
    "ReadConsistencyType",
    "WriteOrdering",
    "ReadConsistencyValue",
    "ReadConsistency",
    "ShardKeyValue",
    "ShardKey",
    "ShardKeySelector",
    "PointIdOptions",
    "PointId",
    "SparseIndices",
    "DenseVector",
    "SparseVector",
    "MultiDenseVector",
    "VectorKind",
    "Vector",
    "NamedVectors",
    "VectorsOptions",
    "Vectors",
    "VectorsSelector",
    "WithVectorsOptions",
    "WithVectorsSelector",
    "PayloadIncludeSelector",
    "PayloadExcludeSelector",
    "WithPayloadOptions",
    "WithPayloadSelector",
    "PointsIdsList",
    "PointsSelectorOptions",
    "PointsSelector",
    "SearchParams",
    "Filter",
    "IsEmptyCondition",
    "IsNullCondition",
    "HasIdCondition",
    "NestedCondition",
    "RepeatedStrings",
    "RepeatedIntegers",
    "MatchValue",
    "Match",
    "Range",
    "GeoPoint",
    "GeoBoundingBox",
    "GeoRadius",
    "ValuesCount",
    "FieldCondition",
    "ConditionOptions",
    "Condition",
    "PointStruct",
    "ScoredPoint",
    "RetrievedPoint",
    "UpsertPoints",
    "DeletePoints",
    "GetPoints",
    "SetPayloadPoints",
    "DeletePayloadPoints",
    "ClearPayloadPoints",
    "SearchPoints",
    "SearchBatchPoints",
    "ScrollPoints",
    "CountPoints",
    "UpdateResult",
    "PointsOperationResponse",
    "SearchResponse",
    "BatchResult",
    "SearchBatchResponse",
    "GetResponse",
    "ScrollResponse",
    "CountResult",
    "CountResponse",
    "RecommendStrategy",
    "LookupLocation",
    "RecommendPoints",
    "RecommendResponse",
    "FieldType",
    "TokenizerType",
    "KeywordIndexParams",
    "IntegerIndexParams",
    "TextIndexParams",
    "IndexParams",
    "PayloadIndexParams",
    "CreateFieldIndexCollection",
    "DeleteFieldIndexCollection",
    "ChunkedUpsertResponse",
]
