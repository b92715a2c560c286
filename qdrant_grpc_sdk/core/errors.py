# qdrant_grpc_sdk/core/errors.py
# SPDX-License-Identifier: Apache-2.0
"""
Normalized errors for the Qdrant gRPC client.

Purpose
-------
Every failure the library raises derives from :class:`QdrantError`. The
taxonomy separates three situations callers need to tell apart:

- Local problems detected before any network I/O:
  :class:`BuildError`, :class:`ConversionError`, :class:`PreconditionError`
  (and its subclasses :class:`InvalidUriError`, :class:`MalformedMetadataError`).
- Delivery problems where the request never got a server verdict:
  :class:`TransportError` (connect timeout, unreachable host, deadline).
- Remote verdicts where the server answered with a non-OK gRPC status:
  :class:`ResponseError` and :class:`ResourceExhaustedError`.

``QdrantError.remote`` is ``True`` only for the last group.

Design notes
------------
- Errors carry a machine-readable ``code`` (UPPER_SNAKE_CASE), an optional
  ``retry_after_ms`` hint and a shallow ``details`` mapping that is safe to
  log. ``asdict()`` returns a stable dictionary for structured logging.
- Nothing here retries. Callers decide what to do with a failure.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import grpc

LOG = logging.getLogger(__name__)

# Status codes that describe a failed delivery rather than a server verdict,
# when no response headers were received.
TRANSPORT_STATUS_CODES = frozenset(
    {
        grpc.StatusCode.UNAVAILABLE,
        grpc.StatusCode.DEADLINE_EXCEEDED,
        grpc.StatusCode.CANCELLED,
    }
)


# =============================================================================
# Base error
# =============================================================================

class QdrantError(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (UPPER_SNAKE_CASE)
        retry_after_ms: Suggested delay before retrying (None if no hint)
        details: Additional context (JSON-serializable, shallow)
        remote: True when the remote service produced the failure status
    """

    remote: bool = False

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        retry_after_ms: Optional[int] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.retry_after_ms = retry_after_ms
        self.details = dict(details or {})

    def asdict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization and logging."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "remote": self.remote,
            "retry_after_ms": self.retry_after_ms,
            "details": {k: self.details[k] for k in sorted(self.details)},
        }


# =============================================================================
# Local errors (raised before any network I/O)
# =============================================================================

class BuildError(QdrantError):
    """A builder could not produce its message (a required field was never set)."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        builder: Optional[str] = None,
        target: Optional[str] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("code", "BUILD_ERROR")
        details = dict(kwargs.pop("details", None) or {})
        details.update(
            {k: v for k, v in (("field", field_name), ("builder", builder), ("target", target)) if v}
        )
        super().__init__(message, details=details, **kwargs)
        self.field_name = field_name
        self.builder = builder
        self.target = target

    @classmethod
    def uninitialized(cls, field_name: str, *, builder: str, target: str) -> "BuildError":
        return cls(
            f"`{field_name}` must be initialized before {builder}.build() can produce {target}",
            field_name=field_name,
            builder=builder,
            target=target,
        )


class ConversionError(QdrantError, ValueError):
    """A value could not be reinterpreted into the required message shape."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "CONVERSION_ERROR")
        super().__init__(message, **kwargs)


class PreconditionError(QdrantError):
    """A local precondition failed; nothing was sent."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "PRECONDITION_FAILED")
        super().__init__(message, **kwargs)


class InvalidUriError(PreconditionError):
    """The configured URL cannot be used to reach a server."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "INVALID_URI")
        super().__init__(message, **kwargs)


class MalformedMetadataError(PreconditionError):
    """A header value cannot be encoded as gRPC ASCII metadata."""

    def __init__(self, message: str, *, header: Optional[str] = None, **kwargs: Any):
        kwargs.setdefault("code", "MALFORMED_METADATA")
        details = dict(kwargs.pop("details", None) or {})
        if header:
            details["header"] = header
        super().__init__(message, details=details, **kwargs)
        self.header = header


class VersionError(QdrantError, ValueError):
    """A version string is empty or not of the form ``major.minor[.patch]``."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "VERSION_ERROR")
        super().__init__(message, **kwargs)


class NoSnapshotFound(QdrantError):
    """A collection has no snapshot to return."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "NO_SNAPSHOT_FOUND")
        super().__init__(message, **kwargs)


# =============================================================================
# Delivery and remote errors
# =============================================================================

class TransportError(QdrantError):
    """The request could not be delivered or no verdict arrived in time."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "TRANSPORT_ERROR")
        super().__init__(message, **kwargs)


class ResponseError(QdrantError):
    """The remote service answered with a non-OK gRPC status."""

    remote = True

    def __init__(
        self,
        message: str,
        *,
        status_code: grpc.StatusCode = grpc.StatusCode.UNKNOWN,
        status_message: str = "",
        **kwargs: Any,
    ):
        kwargs.setdefault("code", status_code.name)
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.status_message = status_message


class ResourceExhaustedError(ResponseError):
    """The server rejected the request due to rate or resource limits."""

    def __init__(self, message: str, *, retry_after_seconds: Optional[int] = None, **kwargs: Any):
        kwargs.setdefault("code", "RESOURCE_EXHAUSTED")
        kwargs.setdefault("status_code", grpc.StatusCode.RESOURCE_EXHAUSTED)
        if retry_after_seconds is not None:
            kwargs.setdefault("retry_after_ms", retry_after_seconds * 1000)
        super().__init__(message, **kwargs)
        self.retry_after_seconds = retry_after_seconds


# =============================================================================
# gRPC status mapping
# =============================================================================

def _metadata_value(exc: grpc.aio.AioRpcError, key: str) -> Optional[str]:
    for metadata in (exc.trailing_metadata(), exc.initial_metadata()):
        for k, v in metadata or ():
            if k.lower() == key:
                return v.decode("ascii", "replace") if isinstance(v, bytes) else str(v)
    return None


def _retry_after_seconds(exc: grpc.aio.AioRpcError) -> Optional[int]:
    raw = _metadata_value(exc, "retry-after")
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        LOG.debug("ignoring non-numeric retry-after header: %r", raw)
        return None


def error_from_rpc(exc: grpc.aio.AioRpcError, *, operation: str) -> QdrantError:
    """
    Translate a failed gRPC call into the client taxonomy.

    UNAVAILABLE, DEADLINE_EXCEEDED and CANCELLED without any response
    headers become :class:`TransportError`; RESOURCE_EXHAUSTED becomes
    :class:`ResourceExhaustedError`; every other status becomes
    :class:`ResponseError`.
    """
    status = exc.code()
    status_message = exc.details() or ""
    details = {"operation": operation, "status": status.name}
    message = f"{operation} failed with {status.name}: {status_message}".rstrip(": ")

    if status in TRANSPORT_STATUS_CODES and not exc.initial_metadata():
        return TransportError(message, details=details)

    if status == grpc.StatusCode.RESOURCE_EXHAUSTED:
        return ResourceExhaustedError(
            message,
            retry_after_seconds=_retry_after_seconds(exc),
            status_message=status_message,
            details=details,
        )

    return ResponseError(
        message,
        status_code=status,
        status_message=status_message,
        details=details,
    )


__all__ = [
    "QdrantError",
    "BuildError",
    "ConversionError",
    "PreconditionError",
    "InvalidUriError",
    "MalformedMetadataError",
    "VersionError",
    "NoSnapshotFound",
    "TransportError",
    "ResponseError",
    "ResourceExhaustedError",
    "TRANSPORT_STATUS_CODES",
    "error_from_rpc",
]
