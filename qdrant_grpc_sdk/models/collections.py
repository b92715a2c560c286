# qdrant_grpc_sdk/models/collections.py
# SPDX-License-Identifier: Apache-2.0
"""Collection and alias messages of the ``Collections`` service."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional

from qdrant_grpc_sdk.models.base import OneOf, map_field, oneof_field, proto_enum, proto_message, repeated_field


@proto_enum("qdrant.Distance")
class Distance(enum.IntEnum):
    UNKNOWN = 0
    COSINE = 1
    EUCLID = 2
    DOT = 3
    MANHATTAN = 4


@proto_enum("qdrant.CollectionStatus")
class CollectionStatus(enum.IntEnum):
    UNKNOWN = 0
    GREEN = 1
    YELLOW = 2
    RED = 3
    GREY = 4


# =============================================================================
# Vector configuration
# =============================================================================

@proto_message("qdrant.HnswConfigDiff")
@dataclass(frozen=True)
class HnswConfigDiff:
    """
    HNSW index parameters; unset fields keep the server's values.

    Attributes:
        m: Edges per node in the index graph
        ef_construct: Neighbours considered while building the index
        full_scan_threshold: Payload-filtered size (KB) below which a full scan is used
        max_indexing_threads: Threads for background indexing (0 = automatic)
        on_disk: Keep the index on disk instead of in memory
        payload_m: Edges per node for payload-aware links
    """
    m: Optional[int] = None
    ef_construct: Optional[int] = None
    full_scan_threshold: Optional[int] = None
    max_indexing_threads: Optional[int] = None
    on_disk: Optional[bool] = None
    payload_m: Optional[int] = None


@proto_message("qdrant.VectorParams")
@dataclass(frozen=True)
class VectorParams:
    size: int = 0
    distance: Distance = Distance.UNKNOWN
    hnsw_config: Optional[HnswConfigDiff] = None
    on_disk: Optional[bool] = None


@proto_message("qdrant.VectorParamsMap")
@dataclass(frozen=True)
class VectorParamsMap:
    map: Dict[str, VectorParams] = map_field()


class VectorsConfigOptions(OneOf):
    cases = ("params", "params_map")


@proto_message("qdrant.VectorsConfig")
@dataclass(frozen=True)
class VectorsConfig:
    """A single unnamed vector space or a map of named ones."""
    config: Optional[VectorsConfigOptions] = oneof_field(VectorsConfigOptions)


@proto_message("qdrant.SparseIndexConfig")
@dataclass(frozen=True)
class SparseIndexConfig:
    full_scan_threshold: Optional[int] = None
    on_disk: Optional[bool] = None


@proto_message("qdrant.SparseVectorParams")
@dataclass(frozen=True)
class SparseVectorParams:
    index: Optional[SparseIndexConfig] = None


@proto_message("qdrant.SparseVectorConfig")
@dataclass(frozen=True)
class SparseVectorConfig:
    map: Dict[str, SparseVectorParams] = map_field()


# =============================================================================
# Requests
# =============================================================================

@proto_message("qdrant.CreateCollection")
@dataclass(frozen=True)
class CreateCollection:
    collection_name: str = ""
    hnsw_config: Optional[HnswConfigDiff] = None
    shard_number: Optional[int] = None
    on_disk_payload: Optional[bool] = None
    timeout: Optional[int] = None
    vectors_config: Optional[VectorsConfig] = None
    replication_factor: Optional[int] = None
    write_consistency_factor: Optional[int] = None
    sparse_vectors_config: Optional[SparseVectorConfig] = None


@proto_message("qdrant.DeleteCollection")
@dataclass(frozen=True)
class DeleteCollection:
    collection_name: str = ""
    timeout: Optional[int] = None


@proto_message("qdrant.GetCollectionInfoRequest")
@dataclass(frozen=True)
class GetCollectionInfoRequest:
    collection_name: str = ""


@proto_message("qdrant.ListCollectionsRequest")
@dataclass(frozen=True)
class ListCollectionsRequest:
    pass


@proto_message("qdrant.CollectionExistsRequest")
@dataclass(frozen=True)
class CollectionExistsRequest:
    collection_name: str = ""


@proto_message("qdrant.CreateAlias")
@dataclass(frozen=True)
class CreateAlias:
    collection_name: str = ""
    alias_name: str = ""


@proto_message("qdrant.RenameAlias")
@dataclass(frozen=True)
class RenameAlias:
    old_alias_name: str = ""
    new_alias_name: str = ""


@proto_message("qdrant.DeleteAlias")
@dataclass(frozen=True)
class DeleteAlias:
    alias_name: str = ""


class AliasAction(OneOf):
    cases = ("create_alias", "rename_alias", "delete_alias")


@proto_message("qdrant.AliasOperations")
@dataclass(frozen=True)
class AliasOperations:
    action: Optional[AliasAction] = oneof_field(AliasAction)


@proto_message("qdrant.ChangeAliases")
@dataclass(frozen=True)
class ChangeAliases:
    """Alias changes applied atomically, in order."""
    actions: List[AliasOperations] = repeated_field()
    timeout: Optional[int] = None


@proto_message("qdrant.ListAliasesRequest")
@dataclass(frozen=True)
class ListAliasesRequest:
    pass


@proto_message("qdrant.ListCollectionAliasesRequest")
@dataclass(frozen=True)
class ListCollectionAliasesRequest:
    collection_name: str = ""


# =============================================================================
# Responses
# =============================================================================

@proto_message("qdrant.CollectionOperationResponse")
@dataclass(frozen=True)
class CollectionOperationResponse:
    result: bool = False
    time: float = 0.0


@proto_message("qdrant.CollectionParams")
@dataclass(frozen=True)
class CollectionParams:
    shard_number: int = 0
    on_disk_payload: bool = False
    vectors_config: Optional[VectorsConfig] = None
    replication_factor: Optional[int] = None
    write_consistency_factor: Optional[int] = None
    sparse_vectors_config: Optional[SparseVectorConfig] = None


@proto_message("qdrant.CollectionConfig")
@dataclass(frozen=True)
class CollectionConfig:
    params: Optional[CollectionParams] = None
    hnsw_config: Optional[HnswConfigDiff] = None


@proto_message("qdrant.OptimizerStatus")
@dataclass(frozen=True)
class OptimizerStatus:
    ok: bool = False
    error: str = ""


@proto_message("qdrant.CollectionInfo")
@dataclass(frozen=True)
class CollectionInfo:
    """
    Collection state as reported by the server.

    Attributes:
        status: Overall health (green, yellow, red, grey)
        optimizer_status: Whether background optimization is healthy
        vectors_count: Approximate number of stored vectors (older servers)
        segments_count: Number of storage segments
        config: Effective collection configuration
        points_count: Approximate number of points
        indexed_vectors_count: Vectors covered by the vector index
    """
    status: CollectionStatus = CollectionStatus.UNKNOWN
    optimizer_status: Optional[OptimizerStatus] = None
    vectors_count: Optional[int] = None
    segments_count: int = 0
    config: Optional[CollectionConfig] = None
    points_count: Optional[int] = None
    indexed_vectors_count: Optional[int] = None


@proto_message("qdrant.GetCollectionInfoResponse")
@dataclass(frozen=True)
class GetCollectionInfoResponse:
    result: Optional[CollectionInfo] = None
    time: float = 0.0


@proto_message("qdrant.CollectionDescription")
@dataclass(frozen=True)
class CollectionDescription:
    name: str = ""


@proto_message("qdrant.ListCollectionsResponse")
@dataclass(frozen=True)
class ListCollectionsResponse:
    collections: List[CollectionDescription] = repeated_field()
    time: float = 0.0


@proto_message("qdrant.CollectionExists")
@dataclass(frozen=True)
class CollectionExists:
    exists: bool = False


@proto_message("qdrant.CollectionExistsResponse")
@dataclass(frozen=True)
class CollectionExistsResponse:
    result: Optional[CollectionExists] = None
    time: float = 0.0


@proto_message("qdrant.AliasDescription")
@dataclass(frozen=True)
class AliasDescription:
    alias_name: str = ""
    collection_name: str = ""


@proto_message("qdrant.ListAliasesResponse")
@dataclass(frozen=True)
class ListAliasesResponse:
    aliases: List[AliasDescription] = repeated_field()
    time: float = 0.0


__all__ = [
    "Distance",
    "CollectionStatus",
    "HnswConfigDiff",
    "VectorParams",
    "VectorParamsMap",
    "VectorsConfigOptions",
    "VectorsConfig",
    "SparseIndexConfig",
    "SparseVectorParams",
    "SparseVectorConfig",
    "CreateCollection",
    "DeleteCollection",
    "GetCollectionInfoRequest",
    "ListCollectionsRequest",
    "CollectionExistsRequest",
    "CreateAlias",
    "RenameAlias",
    "DeleteAlias",
    "AliasAction",
    "AliasOperations",
    "ChangeAliases",
    "ListAliasesRequest",
    "ListCollectionAliasesRequest",
    "CollectionOperationResponse",
    "CollectionParams",
    "CollectionConfig",
    "OptimizerStatus",
    "CollectionInfo",
    "GetCollectionInfoResponse",
    "CollectionDescription",
    "ListCollectionsResponse",
    "CollectionExists",
    "CollectionExistsResponse",
    "AliasDescription",
    "ListAliasesResponse",
]
