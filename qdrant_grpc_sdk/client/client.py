# qdrant_grpc_sdk/client/client.py
# SPDX-License-Identifier: Apache-2.0
"""
Async Qdrant gRPC client.

Purpose
-------
One coroutine per remote operation. Each call:

1. accepts a finished message or its builder (built before any I/O),
2. encodes the request and decorates the call metadata,
3. invokes the unary RPC over the shared channel and awaits one response,
4. decodes the response, or raises a :class:`QdrantError` subclass.

Design notes
------------
- Construction never performs I/O; the channel opens on the first call.
- No retries and no caching. The only call that fans out is
  :meth:`QdrantClient.upsert_points_chunked`, and only when asked to.
- Local failures (build, conversion, malformed metadata, bad URL) are raised
  before anything is sent. Delivery failures raise :class:`TransportError`;
  non-OK server statuses raise :class:`ResponseError`.
- Calls issued concurrently from different tasks are independent and
  unordered; await each write before the next when order matters.

Usage
-----
    async with QdrantClient.from_url("http://localhost:6334") as client:
        await client.create_collection(
            CreateCollectionBuilder("docs").vectors_config(VectorParamsBuilder(4, Distance.DOT))
        )
        await client.upsert_points(
            UpsertPointsBuilder("docs", [PointStructBuilder(1, [0.5, 0.25, 0.0, 1.0])]).wait(True)
        )
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Type, TypeVar, Union

import grpc

from qdrant_grpc_sdk.builders.base import MessageBuilder
from qdrant_grpc_sdk.builders.collections import ChangeAliasesBuilder
from qdrant_grpc_sdk.builders.points import chunk_points
from qdrant_grpc_sdk.client.channel import RECONNECT_STATUS_CODES, ChannelFactory, ChannelPool, create_channel
from qdrant_grpc_sdk.client.config import QdrantConfig
from qdrant_grpc_sdk.client.interceptors import ApiKeyDecorator, UserAgentDecorator, decorate
from qdrant_grpc_sdk.core.error_context import attach_context
from qdrant_grpc_sdk.core.errors import (
    ConversionError,
    NoSnapshotFound,
    PreconditionError,
    QdrantError,
    error_from_rpc,
)
from qdrant_grpc_sdk.core.version import __version__, is_compatible
from qdrant_grpc_sdk.models import codec
from qdrant_grpc_sdk.models.collections import (
    ChangeAliases,
    CollectionExistsRequest,
    CollectionExistsResponse,
    CollectionOperationResponse,
    CreateCollection,
    DeleteCollection,
    GetCollectionInfoRequest,
    GetCollectionInfoResponse,
    ListAliasesRequest,
    ListAliasesResponse,
    ListCollectionAliasesRequest,
    ListCollectionsRequest,
    ListCollectionsResponse,
)
from qdrant_grpc_sdk.models.points import (
    ChunkedUpsertResponse,
    ClearPayloadPoints,
    CountPoints,
    CountResponse,
    CreateFieldIndexCollection,
    DeleteFieldIndexCollection,
    DeletePayloadPoints,
    DeletePoints,
    GetPoints,
    GetResponse,
    PointsOperationResponse,
    RecommendPoints,
    RecommendResponse,
    ScrollPoints,
    ScrollResponse,
    SearchBatchPoints,
    SearchBatchResponse,
    SearchPoints,
    SearchResponse,
    SetPayloadPoints,
    UpsertPoints,
)
from qdrant_grpc_sdk.models.snapshots import (
    CreateSnapshotRequest,
    CreateSnapshotResponse,
    DeleteSnapshotRequest,
    DeleteSnapshotResponse,
    HealthCheckReply,
    HealthCheckRequest,
    ListSnapshotsRequest,
    ListSnapshotsResponse,
    SnapshotDescription,
)
from qdrant_grpc_sdk.proto import SCHEMA

LOG = logging.getLogger(__name__)

M = TypeVar("M")
R = TypeVar("R")

RequestLike = Union[M, MessageBuilder]


class QdrantClient:
    """
    Async client for the Qdrant gRPC API.

    The client is safe to share between tasks; all calls go through one
    lazily opened channel.
    """

    def __init__(
        self,
        config: Optional[QdrantConfig] = None,
        *,
        channel_factory: ChannelFactory = create_channel,
    ) -> None:
        self._config = config or QdrantConfig()
        self._decorators = (
            ApiKeyDecorator(self._config.api_key),
            UserAgentDecorator(),
            *self._config.metadata_decorators,
        )
        self._pool = ChannelPool(self._config, factory=channel_factory)
        self._compatibility_checked = not self._config.check_compatibility

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> "QdrantClient":
        return cls(QdrantConfig.from_url(url, **overrides))

    @property
    def config(self) -> QdrantConfig:
        return self._config

    async def close(self) -> None:
        await self._pool.close()

    async def __aenter__(self) -> "QdrantClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ------------------------------------------------------------------ #
    # Call plumbing
    # ------------------------------------------------------------------ #

    @staticmethod
    def _coerce(request: Any, expected: Type[M]) -> M:
        if isinstance(request, MessageBuilder):
            request = request.build()
        if not isinstance(request, expected):
            raise ConversionError(
                f"expected {expected.__name__} or its builder, got {type(request).__name__}"
            )
        return request

    async def _call(
        self,
        service: str,
        method: str,
        request: Any,
        response_type: Type[R],
        *,
        timeout: Optional[float] = None,
    ) -> R:
        operation = f"{service}/{method}"
        collection = getattr(request, "collection_name", None)
        context = {"operation": operation}
        if collection:
            context["collection"] = collection

        if timeout is None:
            timeout = self._config.timeout
        try:
            if timeout <= 0:
                raise PreconditionError(
                    f"timeout must be positive, got {timeout}", details={"timeout": timeout}
                )
            payload = codec.encode(request)
            metadata = decorate((), self._decorators)
        except QdrantError as exc:
            attach_context(exc, "client", stage="prepare", **context)
            raise

        if not self._compatibility_checked and service != "Qdrant":
            self._compatibility_checked = True
            await self.check_compatibility()

        try:
            channel = await self._pool.get_channel()
        except QdrantError as exc:
            attach_context(exc, "client", stage="connect", **context)
            raise

        rpc = channel.unary_unary(SCHEMA.rpc_path(service, method))
        started = time.monotonic()
        try:
            raw = await rpc(payload, timeout=timeout, metadata=metadata)
        except grpc.aio.AioRpcError as exc:
            if exc.code() in RECONNECT_STATUS_CODES:
                await self._pool.drop_channel(channel)
            err = error_from_rpc(exc, operation=operation)
            attach_context(err, "client", stage="call", **context)
            LOG.debug("%s failed after %.1fms: %s", operation, (time.monotonic() - started) * 1000, err.code)
            raise err from exc

        LOG.debug("%s completed in %.1fms", operation, (time.monotonic() - started) * 1000)
        try:
            return codec.decode(response_type, raw)
        except QdrantError as exc:
            attach_context(exc, "client", stage="decode", **context)
            raise

    # ------------------------------------------------------------------ #
    # Service
    # ------------------------------------------------------------------ #

    async def health_check(self, *, timeout: Optional[float] = None) -> HealthCheckReply:
        return await self._call("Qdrant", "HealthCheck", HealthCheckRequest(), HealthCheckReply, timeout=timeout)

    async def check_compatibility(self) -> bool:
        """
        Compare this library's version with the server's.

        Never raises: an unreachable server or a mismatch only logs a warning.
        """
        try:
            reply = await self.health_check()
        except QdrantError as e:
            LOG.warning("could not read server version to check client compatibility: %s", e)
            return False
        compatible = is_compatible(__version__, reply.version)
        if not compatible:
            LOG.warning(
                "client version %s is incompatible with server version %s; "
                "major versions should match and minor versions differ by at most 1",
                __version__,
                reply.version,
            )
        return compatible

    # ------------------------------------------------------------------ #
    # Collections
    # ------------------------------------------------------------------ #

    async def list_collections(self, *, timeout: Optional[float] = None) -> ListCollectionsResponse:
        return await self._call("Collections", "List", ListCollectionsRequest(), ListCollectionsResponse, timeout=timeout)

    async def collection_info(
        self,
        collection: Union[str, GetCollectionInfoRequest],
        *,
        timeout: Optional[float] = None,
    ) -> GetCollectionInfoResponse:
        if isinstance(collection, str):
            collection = GetCollectionInfoRequest(collection_name=collection)
        request = self._coerce(collection, GetCollectionInfoRequest)
        return await self._call("Collections", "Get", request, GetCollectionInfoResponse, timeout=timeout)

    async def collection_exists(
        self,
        collection: Union[str, CollectionExistsRequest],
        *,
        timeout: Optional[float] = None,
    ) -> CollectionExistsResponse:
        if isinstance(collection, str):
            collection = CollectionExistsRequest(collection_name=collection)
        request = self._coerce(collection, CollectionExistsRequest)
        return await self._call("Collections", "CollectionExists", request, CollectionExistsResponse, timeout=timeout)

    async def create_collection(
        self,
        request: RequestLike[CreateCollection],
        *,
        timeout: Optional[float] = None,
    ) -> CollectionOperationResponse:
        request = self._coerce(request, CreateCollection)
        return await self._call("Collections", "Create", request, CollectionOperationResponse, timeout=timeout)

    async def delete_collection(
        self,
        request: Union[str, RequestLike[DeleteCollection]],
        *,
        timeout: Optional[float] = None,
    ) -> CollectionOperationResponse:
        if isinstance(request, str):
            request = DeleteCollection(collection_name=request)
        request = self._coerce(request, DeleteCollection)
        return await self._call("Collections", "Delete", request, CollectionOperationResponse, timeout=timeout)

    async def update_aliases(
        self,
        request: RequestLike[ChangeAliases],
        *,
        timeout: Optional[float] = None,
    ) -> CollectionOperationResponse:
        request = self._coerce(request, ChangeAliases)
        return await self._call("Collections", "UpdateAliases", request, CollectionOperationResponse, timeout=timeout)

    async def create_alias(self, collection_name: str, alias_name: str) -> CollectionOperationResponse:
        return await self.update_aliases(ChangeAliasesBuilder().create_alias(collection_name, alias_name))

    async def rename_alias(self, old_alias_name: str, new_alias_name: str) -> CollectionOperationResponse:
        return await self.update_aliases(ChangeAliasesBuilder().rename_alias(old_alias_name, new_alias_name))

    async def delete_alias(self, alias_name: str) -> CollectionOperationResponse:
        return await self.update_aliases(ChangeAliasesBuilder().delete_alias(alias_name))

    async def list_aliases(self, *, timeout: Optional[float] = None) -> ListAliasesResponse:
        return await self._call("Collections", "ListAliases", ListAliasesRequest(), ListAliasesResponse, timeout=timeout)

    async def list_collection_aliases(
        self,
        collection: Union[str, ListCollectionAliasesRequest],
        *,
        timeout: Optional[float] = None,
    ) -> ListAliasesResponse:
        if isinstance(collection, str):
            collection = ListCollectionAliasesRequest(collection_name=collection)
        request = self._coerce(collection, ListCollectionAliasesRequest)
        return await self._call("Collections", "ListCollectionAliases", request, ListAliasesResponse, timeout=timeout)

    # ------------------------------------------------------------------ #
    # Points
    # ------------------------------------------------------------------ #

    async def upsert_points(
        self,
        request: RequestLike[UpsertPoints],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, UpsertPoints)
        return await self._call("Points", "Upsert", request, PointsOperationResponse, timeout=timeout)

    async def upsert_points_chunked(
        self,
        request: RequestLike[UpsertPoints],
        chunk_size: int,
        *,
        timeout: Optional[float] = None,
    ) -> ChunkedUpsertResponse:
        """
        Upsert in chunks of at most ``chunk_size`` points.

        Chunks are sent one after another in input order. ``time`` is the sum
        over all chunks, ``result`` is the last chunk's result and
        ``chunk_results`` keeps every chunk's result. If a chunk fails, the
        error is raised with ``chunk`` in its context; earlier chunks stay
        applied.
        """
        if chunk_size < 1:
            raise PreconditionError(f"chunk_size must be at least 1, got {chunk_size}")
        request = self._coerce(request, UpsertPoints)

        if len(request.points) <= chunk_size:
            response = await self.upsert_points(request, timeout=timeout)
            return ChunkedUpsertResponse(result=response.result, time=response.time, chunk_results=[response.result])

        chunks = chunk_points(request, chunk_size)
        total_time = 0.0
        results = []
        for index, chunk in enumerate(chunks):
            try:
                response = await self.upsert_points(chunk, timeout=timeout)
            except QdrantError as exc:
                attach_context(exc, "client", chunk=index, chunks=len(chunks))
                raise
            total_time += response.time
            results.append(response.result)
        LOG.debug("upserted %d points in %d chunks", len(request.points), len(chunks))
        return ChunkedUpsertResponse(result=results[-1], time=total_time, chunk_results=results)

    async def delete_points(
        self,
        request: RequestLike[DeletePoints],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, DeletePoints)
        return await self._call("Points", "Delete", request, PointsOperationResponse, timeout=timeout)

    async def get_points(self, request: RequestLike[GetPoints], *, timeout: Optional[float] = None) -> GetResponse:
        request = self._coerce(request, GetPoints)
        return await self._call("Points", "Get", request, GetResponse, timeout=timeout)

    async def set_payload(
        self,
        request: RequestLike[SetPayloadPoints],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, SetPayloadPoints)
        return await self._call("Points", "SetPayload", request, PointsOperationResponse, timeout=timeout)

    async def overwrite_payload(
        self,
        request: RequestLike[SetPayloadPoints],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, SetPayloadPoints)
        return await self._call("Points", "OverwritePayload", request, PointsOperationResponse, timeout=timeout)

    async def delete_payload(
        self,
        request: RequestLike[DeletePayloadPoints],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, DeletePayloadPoints)
        return await self._call("Points", "DeletePayload", request, PointsOperationResponse, timeout=timeout)

    async def clear_payload(
        self,
        request: RequestLike[ClearPayloadPoints],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, ClearPayloadPoints)
        return await self._call("Points", "ClearPayload", request, PointsOperationResponse, timeout=timeout)

    async def search_points(
        self,
        request: RequestLike[SearchPoints],
        *,
        timeout: Optional[float] = None,
    ) -> SearchResponse:
        request = self._coerce(request, SearchPoints)
        return await self._call("Points", "Search", request, SearchResponse, timeout=timeout)

    async def search_batch_points(
        self,
        request: RequestLike[SearchBatchPoints],
        *,
        timeout: Optional[float] = None,
    ) -> SearchBatchResponse:
        request = self._coerce(request, SearchBatchPoints)
        return await self._call("Points", "SearchBatch", request, SearchBatchResponse, timeout=timeout)

    async def scroll(self, request: RequestLike[ScrollPoints], *, timeout: Optional[float] = None) -> ScrollResponse:
        request = self._coerce(request, ScrollPoints)
        return await self._call("Points", "Scroll", request, ScrollResponse, timeout=timeout)

    async def count(self, request: RequestLike[CountPoints], *, timeout: Optional[float] = None) -> CountResponse:
        request = self._coerce(request, CountPoints)
        return await self._call("Points", "Count", request, CountResponse, timeout=timeout)

    async def recommend(
        self,
        request: RequestLike[RecommendPoints],
        *,
        timeout: Optional[float] = None,
    ) -> RecommendResponse:
        request = self._coerce(request, RecommendPoints)
        return await self._call("Points", "Recommend", request, RecommendResponse, timeout=timeout)

    async def create_field_index(
        self,
        request: RequestLike[CreateFieldIndexCollection],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        """Index a payload field so filters on it avoid a full scan."""
        request = self._coerce(request, CreateFieldIndexCollection)
        return await self._call("Points", "CreateFieldIndex", request, PointsOperationResponse, timeout=timeout)

    async def delete_field_index(
        self,
        request: RequestLike[DeleteFieldIndexCollection],
        *,
        timeout: Optional[float] = None,
    ) -> PointsOperationResponse:
        request = self._coerce(request, DeleteFieldIndexCollection)
        return await self._call("Points", "DeleteFieldIndex", request, PointsOperationResponse, timeout=timeout)

    # ------------------------------------------------------------------ #
    # Snapshots
    # ------------------------------------------------------------------ #

    async def create_snapshot(self, collection_name: str, *, timeout: Optional[float] = None) -> CreateSnapshotResponse:
        request = CreateSnapshotRequest(collection_name=collection_name)
        return await self._call("Snapshots", "Create", request, CreateSnapshotResponse, timeout=timeout)

    async def list_snapshots(self, collection_name: str, *, timeout: Optional[float] = None) -> ListSnapshotsResponse:
        request = ListSnapshotsRequest(collection_name=collection_name)
        return await self._call("Snapshots", "List", request, ListSnapshotsResponse, timeout=timeout)

    async def delete_snapshot(
        self,
        collection_name: str,
        snapshot_name: str,
        *,
        timeout: Optional[float] = None,
    ) -> DeleteSnapshotResponse:
        request = DeleteSnapshotRequest(collection_name=collection_name, snapshot_name=snapshot_name)
        return await self._call("Snapshots", "Delete", request, DeleteSnapshotResponse, timeout=timeout)

    async def latest_snapshot(self, collection_name: str) -> SnapshotDescription:
        """Most recently created snapshot of ``collection_name``."""
        snapshots = (await self.list_snapshots(collection_name)).snapshot_descriptions
        if not snapshots:
            raise NoSnapshotFound(
                f"collection {collection_name!r} has no snapshots",
                details={"collection": collection_name},
            )
        dated = [s for s in snapshots if s.creation_time is not None]
        if not dated:
            return snapshots[-1]
        return max(dated, key=lambda s: s.creation_time)


__all__ = ["QdrantClient"]
