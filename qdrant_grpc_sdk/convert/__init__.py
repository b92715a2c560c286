# qdrant_grpc_sdk/convert/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""
Conversion layer: pure functions turning ergonomic Python values into model
values (ids, vectors, payloads, selectors, filters).
"""

from qdrant_grpc_sdk.convert import filters
from qdrant_grpc_sdk.convert.selectors import (
    enum_member,
    payload_index_params,
    points_selector,
    read_consistency,
    shard_key,
    shard_key_selector,
    vectors_config,
    with_payload,
    with_vectors,
    write_ordering,
)
from qdrant_grpc_sdk.convert.values import payload, payload_to_dict, to_python, value
from qdrant_grpc_sdk.convert.vectors import (
    dense_values,
    point_id,
    sparse_vector,
    sparse_vector_from_pairs,
    vector,
    vectors,
)

__all__ = [
    "filters",
    "enum_member",
    "payload_index_params",
    "points_selector",
    "read_consistency",
    "shard_key",
    "shard_key_selector",
    "vectors_config",
    "with_payload",
    "with_vectors",
    "write_ordering",
    "payload",
    "payload_to_dict",
    "to_python",
    "value",
    "dense_values",
    "point_id",
    "sparse_vector",
    "sparse_vector_from_pairs",
    "vector",
    "vectors",
]
