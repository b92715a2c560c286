# qdrant_grpc_sdk/client/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Async transport: configuration, request decoration, channel handling and the client."""

from qdrant_grpc_sdk.client.channel import RECONNECT_STATUS_CODES, ChannelPool, create_channel
from qdrant_grpc_sdk.client.client import QdrantClient
from qdrant_grpc_sdk.client.config import Compression, QdrantConfig
from qdrant_grpc_sdk.client.interceptors import (
    API_KEY_HEADER,
    USER_AGENT_HEADER,
    ApiKeyDecorator,
    MetadataDecorator,
    UserAgentDecorator,
    decorate,
)

__all__ = [
    "RECONNECT_STATUS_CODES",
    "ChannelPool",
    "create_channel",
    "QdrantClient",
    "Compression",
    "QdrantConfig",
    "API_KEY_HEADER",
    "USER_AGENT_HEADER",
    "ApiKeyDecorator",
    "MetadataDecorator",
    "UserAgentDecorator",
    "decorate",
]
