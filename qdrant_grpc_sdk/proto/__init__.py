# qdrant_grpc_sdk/proto/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Runtime-compiled protobuf schema of the Qdrant gRPC API."""

from qdrant_grpc_sdk.proto.qdrant_schema import PACKAGE, SCHEMA
from qdrant_grpc_sdk.proto.schema_dsl import ProtoSchema

__all__ = ["PACKAGE", "SCHEMA", "ProtoSchema"]
