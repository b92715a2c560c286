# qdrant_grpc_sdk/models/snapshots.py
# SPDX-License-Identifier: Apache-2.0
"""Snapshot messages and the health-check pair of the ``Qdrant`` service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from qdrant_grpc_sdk.models.base import proto_message, repeated_field


@proto_message("qdrant.CreateSnapshotRequest")
@dataclass(frozen=True)
class CreateSnapshotRequest:
    collection_name: str = ""


@proto_message("qdrant.ListSnapshotsRequest")
@dataclass(frozen=True)
class ListSnapshotsRequest:
    collection_name: str = ""


@proto_message("qdrant.DeleteSnapshotRequest")
@dataclass(frozen=True)
class DeleteSnapshotRequest:
    collection_name: str = ""
    snapshot_name: str = ""


@proto_message("qdrant.SnapshotDescription")
@dataclass(frozen=True)
class SnapshotDescription:
    """
    Attributes:
        name: Snapshot file name
        creation_time: When the snapshot was taken (UTC), if reported
        size: Size in bytes
        checksum: SHA-256 of the snapshot file, if reported
    """
    name: str = ""
    creation_time: Optional[datetime] = None
    size: int = 0
    checksum: Optional[str] = None


@proto_message("qdrant.CreateSnapshotResponse")
@dataclass(frozen=True)
class CreateSnapshotResponse:
    snapshot_description: Optional[SnapshotDescription] = None
    time: float = 0.0


@proto_message("qdrant.ListSnapshotsResponse")
@dataclass(frozen=True)
class ListSnapshotsResponse:
    snapshot_descriptions: List[SnapshotDescription] = repeated_field()
    time: float = 0.0


@proto_message("qdrant.DeleteSnapshotResponse")
@dataclass(frozen=True)
class DeleteSnapshotResponse:
    time: float = 0.0


@proto_message("qdrant.HealthCheckRequest")
@dataclass(frozen=True)
class HealthCheckRequest:
    pass


@proto_message("qdrant.HealthCheckReply")
@dataclass(frozen=True)
class HealthCheckReply:
    title: str = ""
    version: str = ""
    commit: Optional[str] = None


__all__ = [
    "CreateSnapshotRequest",
    "ListSnapshotsRequest",
    "DeleteSnapshotRequest",
    "SnapshotDescription",
    "CreateSnapshotResponse",
    "ListSnapshotsResponse",
    "DeleteSnapshotResponse",
    "HealthCheckRequest",
    "HealthCheckReply",
]
