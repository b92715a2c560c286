# qdrant_grpc_sdk/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""
qdrant_grpc_sdk

Async gRPC client for the Qdrant vector search engine.

Layers, bottom-up:

- ``models``   immutable messages and the wire codec
- ``convert``  Python values -> model values (ids, vectors, payloads, filters)
- ``builders`` fluent construction of requests with required-field checks
- ``client``   configuration, request decoration and the async client
"""

from qdrant_grpc_sdk.builders import *  # noqa: F401,F403
from qdrant_grpc_sdk.builders import __all__ as _builders_all
from qdrant_grpc_sdk.client import Compression, QdrantClient, QdrantConfig
from qdrant_grpc_sdk.core import *  # noqa: F401,F403
from qdrant_grpc_sdk.core import __all__ as _core_all
from qdrant_grpc_sdk.convert import filters
from qdrant_grpc_sdk.models import Distance, UpdateStatus

__all__ = [
    "Compression",
    "QdrantClient",
    "QdrantConfig",
    "Distance",
    "UpdateStatus",
    "filters",
    *_builders_all,
    *_core_all,
]
