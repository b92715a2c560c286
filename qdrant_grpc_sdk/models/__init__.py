# qdrant_grpc_sdk/models/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""
Message model: immutable dataclasses for every request and response the
client sends or receives, plus the codec that maps them to the wire.
"""

from qdrant_grpc_sdk.models.base import MESSAGE_TYPES, OneOf
from qdrant_grpc_sdk.models.codec import decode, encode, from_proto, to_proto
from qdrant_grpc_sdk.models.collections import *  # noqa: F401,F403
from qdrant_grpc_sdk.models.collections import __all__ as _collections_all
from qdrant_grpc_sdk.models.json_value import *  # noqa: F401,F403
from qdrant_grpc_sdk.models.json_value import __all__ as _json_all
from qdrant_grpc_sdk.models.points import *  # noqa: F401,F403
from qdrant_grpc_sdk.models.points import __all__ as _points_all
from qdrant_grpc_sdk.models.snapshots import *  # noqa: F401,F403
from qdrant_grpc_sdk.models.snapshots import __all__ as _snapshots_all

__all__ = [
    "MESSAGE_TYPES",
    "OneOf",
    "decode",
    "encode",
    "from_proto",
    "to_proto",
    *_json_all,
    *_points_all,
    *_collections_all,
    *_snapshots_all,
]
