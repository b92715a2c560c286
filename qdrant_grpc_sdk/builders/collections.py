# qdrant_grpc_sdk/builders/collections.py
# SPDX-License-Identifier: Apache-2.0
"""Builders for collection configuration and ``Collections`` service requests."""

from __future__ import annotations

from typing import Mapping, Union

from qdrant_grpc_sdk.builders.base import MessageBuilder, built
from qdrant_grpc_sdk.convert.selectors import enum_member, vectors_config
from qdrant_grpc_sdk.models.collections import (
    AliasAction,
    AliasOperations,
    ChangeAliases,
    CreateAlias,
    CreateCollection,
    DeleteAlias,
    DeleteCollection,
    Distance,
    HnswConfigDiff,
    RenameAlias,
    SparseVectorConfig,
    SparseVectorParams,
    VectorParams,
    VectorsConfig,
)


class HnswConfigDiffBuilder(MessageBuilder[HnswConfigDiff]):
    target = HnswConfigDiff

    def m(self, value: int) -> "HnswConfigDiffBuilder":
        return self._set("m", value)

    def ef_construct(self, value: int) -> "HnswConfigDiffBuilder":
        return self._set("ef_construct", value)

    def full_scan_threshold(self, value: int) -> "HnswConfigDiffBuilder":
        return self._set("full_scan_threshold", value)

    def max_indexing_threads(self, value: int) -> "HnswConfigDiffBuilder":
        return self._set("max_indexing_threads", value)

    def on_disk(self, value: bool) -> "HnswConfigDiffBuilder":
        return self._set("on_disk", value)

    def payload_m(self, value: int) -> "HnswConfigDiffBuilder":
        return self._set("payload_m", value)


class VectorParamsBuilder(MessageBuilder[VectorParams]):
    target = VectorParams
    required = ("size", "distance")

    def __init__(self, size: int, distance: Union[Distance, int, str]) -> None:
        super().__init__()
        self.size(size)
        self.distance(distance)

    def size(self, size: int) -> "VectorParamsBuilder":
        return self._set("size", size)

    def distance(self, distance: Union[Distance, int, str]) -> "VectorParamsBuilder":
        return self._set("distance", enum_member(Distance, distance))

    def hnsw_config(self, config: Union[HnswConfigDiff, HnswConfigDiffBuilder]) -> "VectorParamsBuilder":
        return self._set("hnsw_config", built(config))

    def on_disk(self, on_disk: bool) -> "VectorParamsBuilder":
        return self._set("on_disk", on_disk)


VectorsConfigLike = Union[
    VectorsConfig,
    VectorParams,
    VectorParamsBuilder,
    Mapping[str, Union[VectorParams, VectorParamsBuilder]],
]


class CreateCollectionBuilder(MessageBuilder[CreateCollection]):
    """
    Builds a :class:`CreateCollection` request.

    Usage:
        CreateCollectionBuilder("docs").vectors_config(VectorParamsBuilder(384, Distance.COSINE)).build()
    """

    target = CreateCollection
    required = ("collection_name",)

    def __init__(self, collection_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)

    def collection_name(self, name: str) -> "CreateCollectionBuilder":
        return self._set("collection_name", name)

    def vectors_config(self, config: VectorsConfigLike) -> "CreateCollectionBuilder":
        if isinstance(config, Mapping):
            config = {name: built(params) for name, params in config.items()}
        return self._set("vectors_config", vectors_config(built(config)))

    def sparse_vectors_config(
        self,
        config: Union[SparseVectorConfig, Mapping[str, SparseVectorParams]],
    ) -> "CreateCollectionBuilder":
        if not isinstance(config, SparseVectorConfig):
            config = SparseVectorConfig(map=dict(config))
        return self._set("sparse_vectors_config", config)

    def hnsw_config(self, config: Union[HnswConfigDiff, HnswConfigDiffBuilder]) -> "CreateCollectionBuilder":
        return self._set("hnsw_config", built(config))

    def shard_number(self, value: int) -> "CreateCollectionBuilder":
        return self._set("shard_number", value)

    def on_disk_payload(self, value: bool) -> "CreateCollectionBuilder":
        return self._set("on_disk_payload", value)

    def timeout(self, seconds: int) -> "CreateCollectionBuilder":
        return self._set("timeout", seconds)

    def replication_factor(self, value: int) -> "CreateCollectionBuilder":
        return self._set("replication_factor", value)

    def write_consistency_factor(self, value: int) -> "CreateCollectionBuilder":
        return self._set("write_consistency_factor", value)


class DeleteCollectionBuilder(MessageBuilder[DeleteCollection]):
    target = DeleteCollection
    required = ("collection_name",)

    def __init__(self, collection_name: str) -> None:
        super().__init__()
        self.collection_name(collection_name)

    def collection_name(self, name: str) -> "DeleteCollectionBuilder":
        return self._set("collection_name", name)

    def timeout(self, seconds: int) -> "DeleteCollectionBuilder":
        return self._set("timeout", seconds)


class ChangeAliasesBuilder(MessageBuilder[ChangeAliases]):
    """Collects alias actions in call order; they are applied atomically by the server."""

    target = ChangeAliases

    def _action(self, action: AliasAction) -> "ChangeAliasesBuilder":
        self._slots.setdefault("actions", []).append(AliasOperations(action))
        return self

    def create_alias(self, collection_name: str, alias_name: str) -> "ChangeAliasesBuilder":
        return self._action(AliasAction.create_alias(CreateAlias(collection_name=collection_name, alias_name=alias_name)))

    def rename_alias(self, old_alias_name: str, new_alias_name: str) -> "ChangeAliasesBuilder":
        return self._action(
            AliasAction.rename_alias(RenameAlias(old_alias_name=old_alias_name, new_alias_name=new_alias_name))
        )

    def delete_alias(self, alias_name: str) -> "ChangeAliasesBuilder":
        return self._action(AliasAction.delete_alias(DeleteAlias(alias_name=alias_name)))

    def timeout(self, seconds: int) -> "ChangeAliasesBuilder":
        return self._set("timeout", seconds)


__all__ = [
    "HnswConfigDiffBuilder",
    "VectorParamsBuilder",
    "CreateCollectionBuilder",
    "DeleteCollectionBuilder",
    "ChangeAliasesBuilder",
]
