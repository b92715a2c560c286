# qdrant_grpc_sdk/core/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Errors, error context and version helpers shared by every layer."""

from qdrant_grpc_sdk.core.errors import (
    BuildError,
    ConversionError,
    InvalidUriError,
    MalformedMetadataError,
    NoSnapshotFound,
    PreconditionError,
    QdrantError,
    ResourceExhaustedError,
    ResponseError,
    TransportError,
    VersionError,
    error_from_rpc,
)
from qdrant_grpc_sdk.core.error_context import attach_context, get_context, has_context
from qdrant_grpc_sdk.core.version import Version, __version__, is_compatible, user_agent

__all__ = [
    "BuildError",
    "ConversionError",
    "InvalidUriError",
    "MalformedMetadataError",
    "NoSnapshotFound",
    "PreconditionError",
    "QdrantError",
    "ResourceExhaustedError",
    "ResponseError",
    "TransportError",
    "VersionError",
    "error_from_rpc",
    "attach_context",
    "get_context",
    "has_context",
    "Version",
    "__version__",
    "is_compatible",
    "user_agent",
]
