# qdrant_grpc_sdk/client/interceptors.py
# SPDX-License-Identifier: Apache-2.0
"""
Request decoration.

Every outgoing call passes its metadata through an ordered tuple of
decorators. A decorator receives the metadata list built so far and returns
the list to use; it never sees or changes the request body.

The client installs, in this order:

1. :class:`ApiKeyDecorator` - ``api-key`` header when a key is configured
2. :class:`UserAgentDecorator` - ``x-user-agent`` client identification
3. any decorators supplied through ``QdrantConfig.metadata_decorators``

A header value that cannot be carried as gRPC ASCII metadata raises
:class:`MalformedMetadataError` instead of being dropped.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from qdrant_grpc_sdk.core.errors import MalformedMetadataError
from qdrant_grpc_sdk.core.version import user_agent

Metadata = List[Tuple[str, str]]
MetadataDecorator = Callable[[Metadata], Metadata]

API_KEY_HEADER = "api-key"
USER_AGENT_HEADER = "x-user-agent"


def validate_header_value(header: str, value: str) -> str:
    """Return ``value`` if it is printable ASCII, else raise :class:`MalformedMetadataError`."""
    if not isinstance(value, str):
        raise MalformedMetadataError(
            f"{header} header must be a string, got {type(value).__name__}",
            header=header,
        )
    for ch in value:
        if not (0x20 <= ord(ch) <= 0x7E):
            raise MalformedMetadataError(
                f"{header} header contains a character that cannot be sent as gRPC metadata",
                header=header,
            )
    return value


class ApiKeyDecorator:
    """Adds the ``api-key`` header; does nothing when no key is configured."""

    def __init__(self, api_key: Optional[str]) -> None:
        self._api_key = api_key if api_key is None else validate_header_value(API_KEY_HEADER, api_key)

    def __call__(self, metadata: Metadata) -> Metadata:
        if self._api_key is None:
            return metadata
        return [*metadata, (API_KEY_HEADER, self._api_key)]


class UserAgentDecorator:
    def __init__(self, value: Optional[str] = None) -> None:
        self._value = validate_header_value(USER_AGENT_HEADER, value or user_agent())

    def __call__(self, metadata: Metadata) -> Metadata:
        return [*metadata, (USER_AGENT_HEADER, self._value)]


def decorate(metadata: Sequence[Tuple[str, str]], decorators: Sequence[MetadataDecorator]) -> Metadata:
    """Apply ``decorators`` in order and validate the final header values."""
    result: Metadata = list(metadata)
    for decorator in decorators:
        result = decorator(result)
    for key, value in result:
        validate_header_value(key, value)
    return result


__all__ = [
    "API_KEY_HEADER",
    "USER_AGENT_HEADER",
    "Metadata",
    "MetadataDecorator",
    "ApiKeyDecorator",
    "UserAgentDecorator",
    "decorate",
    "validate_header_value",
]
