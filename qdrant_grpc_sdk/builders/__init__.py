# qdrant_grpc_sdk/builders/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Fluent builders producing request and configuration messages."""

from qdrant_grpc_sdk.builders.base import MessageBuilder, built
from qdrant_grpc_sdk.builders.collections import (
    ChangeAliasesBuilder,
    CreateCollectionBuilder,
    DeleteCollectionBuilder,
    HnswConfigDiffBuilder,
    VectorParamsBuilder,
)
from qdrant_grpc_sdk.builders.points import (
    ClearPayloadPointsBuilder,
    CountPointsBuilder,
    CreateFieldIndexCollectionBuilder,
    DeletePayloadPointsBuilder,
    DeleteFieldIndexCollectionBuilder,
    DeletePointsBuilder,
    GetPointsBuilder,
    PointStructBuilder,
    RecommendPointsBuilder,
    ScrollPointsBuilder,
    SearchBatchPointsBuilder,
    SearchParamsBuilder,
    SearchPointsBuilder,
    SetPayloadPointsBuilder,
    SparseVectorBuilder,
    UpsertPointsBuilder,
    chunk_points,
)

__all__ = [
    "MessageBuilder",
    "built",
    "ChangeAliasesBuilder",
    "CreateCollectionBuilder",
    "DeleteCollectionBuilder",
    "HnswConfigDiffBuilder",
    "VectorParamsBuilder",
    "ClearPayloadPointsBuilder",
    "CountPointsBuilder",
    "CreateFieldIndexCollectionBuilder",
    "DeletePayloadPointsBuilder",
    "DeleteFieldIndexCollectionBuilder",
    "DeletePointsBuilder",
    "GetPointsBuilder",
    "PointStructBuilder",
    "RecommendPointsBuilder",
    "ScrollPointsBuilder",
    "SearchBatchPointsBuilder",
    "SearchParamsBuilder",
    "SearchPointsBuilder",
    "SetPayloadPointsBuilder",
    "SparseVectorBuilder",
    "UpsertPointsBuilder",
    "chunk_points",
]
