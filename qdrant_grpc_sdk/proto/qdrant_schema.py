# qdrant_grpc_sdk/proto/qdrant_schema.py
# SPDX-License-Identifier: Apache-2.0
"""
Wire schema of the Qdrant gRPC API (package ``qdrant``).

Field numbers mirror the published ``collections.proto``, ``points.proto``,
``snapshots_service.proto``, ``qdrant.proto`` and ``json_with_int.proto``.
Only the subset used by this client is declared; fields the server sends
that are not declared here are skipped by the protobuf runtime.
"""

from __future__ import annotations

from qdrant_grpc_sdk.proto.schema_dsl import (
    ProtoSchema,
    enum,
    field,
    map_field,
    message,
    oneof,
    optional,
    repeated,
    rpc,
    service,
)

PACKAGE = "qdrant"

ENUMS = [
    enum("NullValue", NULL_VALUE=0),
    enum("Distance", UnknownDistance=0, Cosine=1, Euclid=2, Dot=3, Manhattan=4),
    enum("CollectionStatus", UnknownCollectionStatus=0, Green=1, Yellow=2, Red=3, Grey=4),
    enum("UpdateStatus", UnknownUpdateStatus=0, Acknowledged=1, Completed=2, ClockRejected=3),
    enum("WriteOrderingType", Weak=0, Medium=1, Strong=2),
    enum("ReadConsistencyType", All=0, Majority=1, Quorum=2),
    enum("FieldType", FieldTypeKeyword=0, FieldTypeInteger=1, FieldTypeFloat=2, FieldTypeGeo=3, FieldTypeText=4, FieldTypeBool=5, FieldTypeDatetime=6, FieldTypeUuid=7),
    enum("TokenizerType", Unknown=0, Prefix=1, Whitespace=2, Word=3, Multilingual=4),
    enum("RecommendStrategy", AverageVector=0, BestScore=1),
]

# ---------------------------------------------------------------------------
# json_with_int.proto
# ---------------------------------------------------------------------------

JSON_MESSAGES = [
    message("Struct", map_field("fields", 1, "string", "Value")),
    message(
        "Value",
        oneof(
            "kind",
            field("null_value", 1, "NullValue"),
            field("double_value", 2, "double"),
            field("integer_value", 3, "int64"),
            field("string_value", 4, "string"),
            field("bool_value", 5, "bool"),
            field("struct_value", 6, "Struct"),
            field("list_value", 7, "ListValue"),
        ),
    ),
    message("ListValue", repeated("values", 1, "Value")),
]

# ---------------------------------------------------------------------------
# points.proto: vectors, ids, selectors
# ---------------------------------------------------------------------------

POINT_MESSAGES = [
    message("WriteOrdering", field("type", 1, "WriteOrderingType")),
    message(
        "ReadConsistency",
        oneof("value", field("type", 1, "ReadConsistencyType"), field("factor", 2, "uint64")),
    ),
    message(
        "PointId",
        oneof("point_id_options", field("num", 1, "uint64"), field("uuid", 2, "string")),
    ),
    message("SparseIndices", repeated("data", 1, "uint32")),
    message("DenseVector", repeated("data", 1, "float")),
    message("SparseVector", repeated("values", 1, "float"), repeated("indices", 2, "uint32")),
    message("MultiDenseVector", repeated("vectors", 1, "DenseVector")),
    message(
        "Vector",
        repeated("data", 1, "float"),
        field("indices", 2, "SparseIndices"),
        optional("vectors_count", 3, "uint32"),
        oneof(
            "vector",
            field("dense", 101, "DenseVector"),
            field("sparse", 102, "SparseVector"),
            field("multi_dense", 103, "MultiDenseVector"),
        ),
    ),
    message("NamedVectors", map_field("vectors", 1, "string", "Vector")),
    message(
        "Vectors",
        oneof("vectors_options", field("vector", 1, "Vector"), field("vectors", 2, "NamedVectors")),
    ),
    message("VectorsSelector", repeated("names", 1, "string")),
    message(
        "WithVectorsSelector",
        oneof("selector_options", field("enable", 1, "bool"), field("include", 2, "VectorsSelector")),
    ),
    message("PayloadIncludeSelector", repeated("fields", 1, "string")),
    message("PayloadExcludeSelector", repeated("fields", 1, "string")),
    message(
        "WithPayloadSelector",
        oneof(
            "selector_options",
            field("enable", 1, "bool"),
            field("include", 2, "PayloadIncludeSelector"),
            field("exclude", 3, "PayloadExcludeSelector"),
        ),
    ),
    message(
        "PointStruct",
        field("id", 1, "PointId"),
        map_field("payload", 3, "string", "Value"),
        field("vectors", 4, "Vectors"),
    ),
    message("ShardKey", oneof("key", field("keyword", 1, "string"), field("number", 2, "uint64"))),
    message("ShardKeySelector", repeated("shard_keys", 1, "ShardKey")),
    message("PointsIdsList", repeated("ids", 1, "PointId")),
    message(
        "PointsSelector",
        oneof("points_selector_one_of", field("points", 1, "PointsIdsList"), field("filter", 2, "Filter")),
    ),
    message(
        "SearchParams",
        optional("hnsw_ef", 1, "uint64"),
        optional("exact", 2, "bool"),
        optional("indexed_only", 4, "bool"),
    ),
]

# ---------------------------------------------------------------------------
# points.proto: filters
# ---------------------------------------------------------------------------

FILTER_MESSAGES = [
    message(
        "Filter",
        repeated("should", 1, "Condition"),
        repeated("must", 2, "Condition"),
        repeated("must_not", 3, "Condition"),
    ),
    message(
        "Condition",
        oneof(
            "condition_one_of",
            field("field", 1, "FieldCondition"),
            field("is_empty", 2, "IsEmptyCondition"),
            field("has_id", 3, "HasIdCondition"),
            field("filter", 4, "Filter"),
            field("is_null", 5, "IsNullCondition"),
            field("nested", 6, "NestedCondition"),
        ),
    ),
    message("IsEmptyCondition", field("key", 1, "string")),
    message("IsNullCondition", field("key", 1, "string")),
    message("HasIdCondition", repeated("has_id", 1, "PointId")),
    message("NestedCondition", field("key", 1, "string"), field("filter", 2, "Filter")),
    message(
        "FieldCondition",
        field("key", 1, "string"),
        field("match", 2, "Match"),
        field("range", 3, "Range"),
        field("geo_bounding_box", 4, "GeoBoundingBox"),
        field("geo_radius", 5, "GeoRadius"),
        field("values_count", 6, "ValuesCount"),
    ),
    message("RepeatedStrings", repeated("strings", 1, "string")),
    message("RepeatedIntegers", repeated("integers", 1, "int64")),
    message(
        "Match",
        oneof(
            "match_value",
            field("keyword", 1, "string"),
            field("integer", 2, "int64"),
            field("boolean", 3, "bool"),
            field("text", 4, "string"),
            field("keywords", 5, "RepeatedStrings"),
            field("integers", 6, "RepeatedIntegers"),
            field("except_integers", 7, "RepeatedIntegers"),
            field("except_keywords", 8, "RepeatedStrings"),
        ),
    ),
    message(
        "Range",
        optional("lt", 1, "double"),
        optional("gt", 2, "double"),
        optional("gte", 3, "double"),
        optional("lte", 4, "double"),
    ),
    message("GeoPoint", field("lon", 1, "double"), field("lat", 2, "double")),
    message("GeoBoundingBox", field("top_left", 1, "GeoPoint"), field("bottom_right", 2, "GeoPoint")),
    message("GeoRadius", field("center", 1, "GeoPoint"), field("radius", 2, "float")),
    message(
        "ValuesCount",
        optional("lt", 1, "uint64"),
        optional("gt", 2, "uint64"),
        optional("gte", 3, "uint64"),
        optional("lte", 4, "uint64"),
    ),
]

# ---------------------------------------------------------------------------
# points.proto: requests and responses
# ---------------------------------------------------------------------------

POINT_OPERATION_MESSAGES = [
    message(
        "UpsertPoints",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        repeated("points", 3, "PointStruct"),
        field("ordering", 4, "WriteOrdering"),
        field("shard_key_selector", 5, "ShardKeySelector"),
    ),
    message(
        "DeletePoints",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        field("points", 3, "PointsSelector"),
        field("ordering", 4, "WriteOrdering"),
        field("shard_key_selector", 5, "ShardKeySelector"),
    ),
    message(
        "GetPoints",
        field("collection_name", 1, "string"),
        repeated("ids", 2, "PointId"),
        field("with_payload", 4, "WithPayloadSelector"),
        field("with_vectors", 5, "WithVectorsSelector"),
        field("read_consistency", 6, "ReadConsistency"),
        field("shard_key_selector", 7, "ShardKeySelector"),
        optional("timeout", 8, "uint64"),
    ),
    message(
        "SetPayloadPoints",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        map_field("payload", 3, "string", "Value"),
        field("points_selector", 5, "PointsSelector"),
        field("ordering", 6, "WriteOrdering"),
        field("shard_key_selector", 7, "ShardKeySelector"),
        optional("key", 8, "string"),
    ),
    message(
        "DeletePayloadPoints",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        repeated("keys", 3, "string"),
        field("points_selector", 5, "PointsSelector"),
        field("ordering", 6, "WriteOrdering"),
        field("shard_key_selector", 7, "ShardKeySelector"),
    ),
    message(
        "ClearPayloadPoints",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        field("points", 3, "PointsSelector"),
        field("ordering", 4, "WriteOrdering"),
        field("shard_key_selector", 5, "ShardKeySelector"),
    ),
    message(
        "SearchPoints",
        field("collection_name", 1, "string"),
        repeated("vector", 2, "float"),
        field("filter", 3, "Filter"),
        field("limit", 4, "uint64"),
        field("with_payload", 6, "WithPayloadSelector"),
        field("params", 7, "SearchParams"),
        optional("score_threshold", 8, "float"),
        optional("offset", 9, "uint64"),
        optional("vector_name", 10, "string"),
        field("with_vectors", 11, "WithVectorsSelector"),
        field("read_consistency", 12, "ReadConsistency"),
        optional("timeout", 13, "uint64"),
        field("shard_key_selector", 14, "ShardKeySelector"),
        field("sparse_indices", 15, "SparseIndices"),
    ),
    message(
        "SearchBatchPoints",
        field("collection_name", 1, "string"),
        repeated("search_points", 2, "SearchPoints"),
        field("read_consistency", 3, "ReadConsistency"),
        optional("timeout", 4, "uint64"),
    ),
    message(
        "ScrollPoints",
        field("collection_name", 1, "string"),
        field("filter", 2, "Filter"),
        field("offset", 3, "PointId"),
        optional("limit", 4, "uint32"),
        field("with_payload", 6, "WithPayloadSelector"),
        field("with_vectors", 7, "WithVectorsSelector"),
        field("read_consistency", 8, "ReadConsistency"),
        field("shard_key_selector", 9, "ShardKeySelector"),
        optional("timeout", 11, "uint64"),
    ),
    message(
        "CountPoints",
        field("collection_name", 1, "string"),
        field("filter", 2, "Filter"),
        optional("exact", 3, "bool"),
        field("read_consistency", 4, "ReadConsistency"),
        field("shard_key_selector", 5, "ShardKeySelector"),
        optional("timeout", 6, "uint64"),
    ),
    message("UpdateResult", optional("operation_id", 1, "uint64"), field("status", 2, "UpdateStatus")),
    message("PointsOperationResponse", field("result", 1, "UpdateResult"), field("time", 2, "double")),
    message(
        "ScoredPoint",
        field("id", 1, "PointId"),
        map_field("payload", 2, "string", "Value"),
        field("score", 3, "float"),
        field("version", 5, "uint64"),
        field("vectors", 6, "Vectors"),
        field("shard_key", 7, "ShardKey"),
    ),
    message("SearchResponse", repeated("result", 1, "ScoredPoint"), field("time", 2, "double")),
    message("BatchResult", repeated("result", 1, "ScoredPoint")),
    message("SearchBatchResponse", repeated("result", 1, "BatchResult"), field("time", 2, "double")),
    message(
        "RetrievedPoint",
        field("id", 1, "PointId"),
        map_field("payload", 2, "string", "Value"),
        field("vectors", 4, "Vectors"),
        field("shard_key", 5, "ShardKey"),
    ),
    message("GetResponse", repeated("result", 1, "RetrievedPoint"), field("time", 2, "double")),
    message(
        "ScrollResponse",
        field("next_page_offset", 1, "PointId"),
        repeated("result", 2, "RetrievedPoint"),
        field("time", 3, "double"),
    ),
    message("CountResult", field("count", 1, "uint64")),
    message("CountResponse", field("result", 1, "CountResult"), field("time", 2, "double")),
    message(
        "LookupLocation",
        field("collection_name", 1, "string"),
        optional("vector_name", 2, "string"),
        field("shard_key_selector", 3, "ShardKeySelector"),
    ),
    message(
        "RecommendPoints",
        field("collection_name", 1, "string"),
        repeated("positive", 2, "PointId"),
        repeated("negative", 3, "PointId"),
        field("filter", 4, "Filter"),
        field("limit", 5, "uint64"),
        field("with_payload", 7, "WithPayloadSelector"),
        field("params", 8, "SearchParams"),
        optional("score_threshold", 9, "float"),
        optional("offset", 10, "uint64"),
        optional("using", 11, "string"),
        field("with_vectors", 12, "WithVectorsSelector"),
        field("lookup_from", 13, "LookupLocation"),
        field("read_consistency", 14, "ReadConsistency"),
        optional("strategy", 16, "RecommendStrategy"),
        repeated("positive_vectors", 17, "Vector"),
        repeated("negative_vectors", 18, "Vector"),
        optional("timeout", 19, "uint64"),
        field("shard_key_selector", 20, "ShardKeySelector"),
    ),
    message("RecommendResponse", repeated("result", 1, "ScoredPoint"), field("time", 2, "double")),
    # Payload indexes
    message(
        "KeywordIndexParams",
        optional("is_tenant", 1, "bool"),
        optional("on_disk", 2, "bool"),
    ),
    message(
        "IntegerIndexParams",
        optional("lookup", 1, "bool"),
        optional("range", 2, "bool"),
        optional("is_principal", 3, "bool"),
        optional("on_disk", 4, "bool"),
    ),
    message(
        "TextIndexParams",
        field("tokenizer", 1, "TokenizerType"),
        optional("lowercase", 2, "bool"),
        optional("min_token_len", 3, "uint64"),
        optional("max_token_len", 4, "uint64"),
    ),
    message(
        "PayloadIndexParams",
        oneof(
            "index_params",
            field("text_index_params", 1, "TextIndexParams"),
            field("integer_index_params", 2, "IntegerIndexParams"),
            field("keyword_index_params", 3, "KeywordIndexParams"),
        ),
    ),
    message(
        "CreateFieldIndexCollection",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        field("field_name", 3, "string"),
        optional("field_type", 4, "FieldType"),
        field("field_index_params", 5, "PayloadIndexParams"),
        field("ordering", 6, "WriteOrdering"),
    ),
    message(
        "DeleteFieldIndexCollection",
        field("collection_name", 1, "string"),
        optional("wait", 2, "bool"),
        field("field_name", 3, "string"),
        field("ordering", 4, "WriteOrdering"),
    ),
]

# ---------------------------------------------------------------------------
# collections.proto
# ---------------------------------------------------------------------------

COLLECTION_MESSAGES = [
    message(
        "HnswConfigDiff",
        optional("m", 1, "uint64"),
        optional("ef_construct", 2, "uint64"),
        optional("full_scan_threshold", 3, "uint64"),
        optional("max_indexing_threads", 4, "uint64"),
        optional("on_disk", 5, "bool"),
        optional("payload_m", 6, "uint64"),
    ),
    message(
        "VectorParams",
        field("size", 1, "uint64"),
        field("distance", 2, "Distance"),
        field("hnsw_config", 3, "HnswConfigDiff"),
        optional("on_disk", 5, "bool"),
    ),
    message("VectorParamsMap", map_field("map", 1, "string", "VectorParams")),
    message(
        "VectorsConfig",
        oneof("config", field("params", 1, "VectorParams"), field("params_map", 2, "VectorParamsMap")),
    ),
    message(
        "SparseIndexConfig",
        optional("full_scan_threshold", 1, "uint64"),
        optional("on_disk", 2, "bool"),
    ),
    message("SparseVectorParams", field("index", 1, "SparseIndexConfig")),
    message("SparseVectorConfig", map_field("map", 1, "string", "SparseVectorParams")),
    message(
        "CreateCollection",
        field("collection_name", 1, "string"),
        field("hnsw_config", 4, "HnswConfigDiff"),
        optional("shard_number", 7, "uint32"),
        optional("on_disk_payload", 8, "bool"),
        optional("timeout", 9, "uint64"),
        field("vectors_config", 10, "VectorsConfig"),
        optional("replication_factor", 11, "uint32"),
        optional("write_consistency_factor", 12, "uint32"),
        field("sparse_vectors_config", 16, "SparseVectorConfig"),
    ),
    message("DeleteCollection", field("collection_name", 1, "string"), optional("timeout", 2, "uint64")),
    message("CollectionOperationResponse", field("result", 1, "bool"), field("time", 2, "double")),
    message("GetCollectionInfoRequest", field("collection_name", 1, "string")),
    message(
        "CollectionParams",
        field("shard_number", 3, "uint32"),
        field("on_disk_payload", 4, "bool"),
        field("vectors_config", 5, "VectorsConfig"),
        optional("replication_factor", 6, "uint32"),
        optional("write_consistency_factor", 7, "uint32"),
        field("sparse_vectors_config", 10, "SparseVectorConfig"),
    ),
    message("CollectionConfig", field("params", 1, "CollectionParams"), field("hnsw_config", 2, "HnswConfigDiff")),
    message("OptimizerStatus", field("ok", 1, "bool"), field("error", 2, "string")),
    message(
        "CollectionInfo",
        field("status", 1, "CollectionStatus"),
        field("optimizer_status", 2, "OptimizerStatus"),
        optional("vectors_count", 3, "uint64"),
        field("segments_count", 4, "uint64"),
        field("config", 7, "CollectionConfig"),
        optional("points_count", 9, "uint64"),
        optional("indexed_vectors_count", 10, "uint64"),
    ),
    message("GetCollectionInfoResponse", field("result", 1, "CollectionInfo"), field("time", 2, "double")),
    message("ListCollectionsRequest"),
    message("CollectionDescription", field("name", 1, "string")),
    message(
        "ListCollectionsResponse",
        repeated("collections", 1, "CollectionDescription"),
        field("time", 2, "double"),
    ),
    message("CollectionExistsRequest", field("collection_name", 1, "string")),
    message("CollectionExists", field("exists", 1, "bool")),
    message("CollectionExistsResponse", field("result", 1, "CollectionExists"), field("time", 2, "double")),
    message("CreateAlias", field("collection_name", 1, "string"), field("alias_name", 2, "string")),
    message("RenameAlias", field("old_alias_name", 1, "string"), field("new_alias_name", 2, "string")),
    message("DeleteAlias", field("alias_name", 1, "string")),
    message(
        "AliasOperations",
        oneof(
            "action",
            field("create_alias", 1, "CreateAlias"),
            field("rename_alias", 2, "RenameAlias"),
            field("delete_alias", 3, "DeleteAlias"),
        ),
    ),
    message("ChangeAliases", repeated("actions", 1, "AliasOperations"), optional("timeout", 2, "uint64")),
    message("ListAliasesRequest"),
    message("ListCollectionAliasesRequest", field("collection_name", 1, "string")),
    message("AliasDescription", field("alias_name", 1, "string"), field("collection_name", 2, "string")),
    message("ListAliasesResponse", repeated("aliases", 1, "AliasDescription"), field("time", 2, "double")),
]

# ---------------------------------------------------------------------------
# snapshots_service.proto, qdrant.proto
# ---------------------------------------------------------------------------

SNAPSHOT_MESSAGES = [
    message("CreateSnapshotRequest", field("collection_name", 1, "string")),
    message("ListSnapshotsRequest", field("collection_name", 1, "string")),
    message("DeleteSnapshotRequest", field("collection_name", 1, "string"), field("snapshot_name", 2, "string")),
    message(
        "SnapshotDescription",
        field("name", 1, "string"),
        field("creation_time", 2, "google.protobuf.Timestamp"),
        field("size", 3, "int64"),
        optional("checksum", 4, "string"),
    ),
    message(
        "CreateSnapshotResponse",
        field("snapshot_description", 1, "SnapshotDescription"),
        field("time", 2, "double"),
    ),
    message(
        "ListSnapshotsResponse",
        repeated("snapshot_descriptions", 1, "SnapshotDescription"),
        field("time", 2, "double"),
    ),
    message("DeleteSnapshotResponse", field("time", 1, "double")),
]

SERVICE_MESSAGES = [
    message("HealthCheckRequest"),
    message(
        "HealthCheckReply",
        field("title", 1, "string"),
        field("version", 2, "string"),
        optional("commit", 3, "string"),
    ),
]

SERVICES = [
    service(
        "Collections",
        rpc("Get", "GetCollectionInfoRequest", "GetCollectionInfoResponse"),
        rpc("List", "ListCollectionsRequest", "ListCollectionsResponse"),
        rpc("Create", "CreateCollection", "CollectionOperationResponse"),
        rpc("Delete", "DeleteCollection", "CollectionOperationResponse"),
        rpc("UpdateAliases", "ChangeAliases", "CollectionOperationResponse"),
        rpc("ListCollectionAliases", "ListCollectionAliasesRequest", "ListAliasesResponse"),
        rpc("ListAliases", "ListAliasesRequest", "ListAliasesResponse"),
        rpc("CollectionExists", "CollectionExistsRequest", "CollectionExistsResponse"),
    ),
    service(
        "Points",
        rpc("Upsert", "UpsertPoints", "PointsOperationResponse"),
        rpc("Delete", "DeletePoints", "PointsOperationResponse"),
        rpc("Get", "GetPoints", "GetResponse"),
        rpc("SetPayload", "SetPayloadPoints", "PointsOperationResponse"),
        rpc("OverwritePayload", "SetPayloadPoints", "PointsOperationResponse"),
        rpc("DeletePayload", "DeletePayloadPoints", "PointsOperationResponse"),
        rpc("ClearPayload", "ClearPayloadPoints", "PointsOperationResponse"),
        rpc("CreateFieldIndex", "CreateFieldIndexCollection", "PointsOperationResponse"),
        rpc("DeleteFieldIndex", "DeleteFieldIndexCollection", "PointsOperationResponse"),
        rpc("Search", "SearchPoints", "SearchResponse"),
        rpc("SearchBatch", "SearchBatchPoints", "SearchBatchResponse"),
        rpc("Scroll", "ScrollPoints", "ScrollResponse"),
        rpc("Recommend", "RecommendPoints", "RecommendResponse"),
        rpc("Count", "CountPoints", "CountResponse"),
    ),
    service(
        "Snapshots",
        rpc("Create", "CreateSnapshotRequest", "CreateSnapshotResponse"),
        rpc("List", "ListSnapshotsRequest", "ListSnapshotsResponse"),
        rpc("Delete", "DeleteSnapshotRequest", "DeleteSnapshotResponse"),
    ),
    service("Qdrant", rpc("HealthCheck", "HealthCheckRequest", "HealthCheckReply")),
]

SCHEMA = ProtoSchema(
    PACKAGE,
    enums=ENUMS,
    messages=(
        JSON_MESSAGES
        + POINT_MESSAGES
        + FILTER_MESSAGES
        + POINT_OPERATION_MESSAGES
        + COLLECTION_MESSAGES
        + SNAPSHOT_MESSAGES
        + SERVICE_MESSAGES
    ),
    services=SERVICES,
    filename="qdrant_grpc_sdk/qdrant.proto",
)

__all__ = ["PACKAGE", "SCHEMA"]
