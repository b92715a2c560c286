# SPDX-License-Identifier: Apache-2.0
"""
Error taxonomy, gRPC status mapping and error context.
"""

import json

import grpc
import pytest

from qdrant_grpc_sdk.core.error_context import attach_context, get_context, has_context
from qdrant_grpc_sdk.core.errors import (
    BuildError,
    ConversionError,
    InvalidUriError,
    MalformedMetadataError,
    PreconditionError,
    QdrantError,
    ResourceExhaustedError,
    ResponseError,
    TransportError,
    error_from_rpc,
)


def _rpc_error(code, details="", initial=(), trailing=()):
    return grpc.aio.AioRpcError(
        code,
        grpc.aio.Metadata(*initial),
        grpc.aio.Metadata(*trailing),
        details=details,
    )


def test_build_error_names_missing_field():
    """Verify BuildError.uninitialized carries the field, builder and target."""
    err = BuildError.uninitialized("collection_name", builder="UpsertPointsBuilder", target="UpsertPoints")
    assert err.code == "BUILD_ERROR"
    assert err.field_name == "collection_name"
    assert err.builder == "UpsertPointsBuilder"
    assert err.target == "UpsertPoints"
    assert "collection_name" in str(err)
    assert err.details["field"] == "collection_name"
    assert err.remote is False


def test_conversion_error_is_value_error():
    """Verify ConversionError can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise ConversionError("bad id")


def test_precondition_subclasses_keep_their_codes():
    """Verify URI and metadata errors are preconditions with their own codes."""
    uri = InvalidUriError("Unsupported schema 'ftp'")
    meta = MalformedMetadataError("bad header", header="api-key")
    assert isinstance(uri, PreconditionError) and uri.code == "INVALID_URI"
    assert isinstance(meta, PreconditionError) and meta.code == "MALFORMED_METADATA"
    assert meta.details == {"header": "api-key"}


def test_error_asdict_is_json_serializable():
    """Verify asdict() output is stable and JSON-serializable."""
    err = ResourceExhaustedError("slow down", retry_after_seconds=2, details={"operation": "Points/Upsert"})
    data = err.asdict()
    assert data["error"] == "ResourceExhaustedError"
    assert data["code"] == "RESOURCE_EXHAUSTED"
    assert data["retry_after_ms"] == 2000
    assert data["remote"] is True
    json.dumps(data)


def test_status_not_found_maps_to_response_error():
    """Verify a server verdict becomes ResponseError with the status name as code."""
    err = error_from_rpc(_rpc_error(grpc.StatusCode.NOT_FOUND, "Collection `docs` not found"), operation="Collections/Get")
    assert type(err) is ResponseError
    assert err.code == "NOT_FOUND"
    assert err.status_code == grpc.StatusCode.NOT_FOUND
    assert err.status_message == "Collection `docs` not found"
    assert err.remote is True
    assert err.details == {"operation": "Collections/Get", "status": "NOT_FOUND"}


def test_unavailable_without_headers_maps_to_transport_error():
    """Verify UNAVAILABLE with no response headers is a delivery failure."""
    err = error_from_rpc(_rpc_error(grpc.StatusCode.UNAVAILABLE, "connection refused"), operation="Points/Upsert")
    assert isinstance(err, TransportError)
    assert err.code == "TRANSPORT_ERROR"
    assert err.remote is False


def test_deadline_exceeded_maps_to_transport_error():
    """Verify an expired deadline without a verdict is a transport failure."""
    err = error_from_rpc(_rpc_error(grpc.StatusCode.DEADLINE_EXCEEDED), operation="Points/Search")
    assert isinstance(err, TransportError)


def test_unavailable_after_headers_maps_to_response_error():
    """Verify UNAVAILABLE sent by a responding server is a remote verdict."""
    err = error_from_rpc(
        _rpc_error(grpc.StatusCode.UNAVAILABLE, "shutting down", initial=[("server", "qdrant")]),
        operation="Points/Search",
    )
    assert isinstance(err, ResponseError)
    assert err.code == "UNAVAILABLE"


def test_resource_exhausted_reads_retry_after():
    """Verify RESOURCE_EXHAUSTED exposes the retry-after hint in seconds and ms."""
    err = error_from_rpc(
        _rpc_error(grpc.StatusCode.RESOURCE_EXHAUSTED, "rate limited", trailing=[("retry-after", "3")]),
        operation="Points/Upsert",
    )
    assert isinstance(err, ResourceExhaustedError)
    assert err.retry_after_seconds == 3
    assert err.retry_after_ms == 3000


def test_resource_exhausted_ignores_bad_retry_after():
    """Verify a non-numeric retry-after header leaves the hint unset."""
    err = error_from_rpc(
        _rpc_error(grpc.StatusCode.RESOURCE_EXHAUSTED, trailing=[("retry-after", "soon")]),
        operation="Points/Upsert",
    )
    assert isinstance(err, ResourceExhaustedError)
    assert err.retry_after_seconds is None
    assert err.retry_after_ms is None


def test_attach_context_merges_repeated_calls():
    """Verify context from several layers is merged and origin is kept."""
    err = QdrantError("boom", code="X")
    assert not has_context(err)
    attach_context(err, "client", operation="Points/Upsert")
    attach_context(err, "chunked", chunk=2)
    ctx = get_context(err)
    assert ctx == {"origin": "client", "operation": "Points/Upsert", "chunk": 2}
    assert has_context(err)


def test_get_context_of_plain_exception_is_empty():
    """Verify exceptions without attached context report an empty mapping."""
    assert get_context(RuntimeError("x")) == {}
