# qdrant_grpc_sdk/models/json_value.py
# SPDX-License-Identifier: Apache-2.0
"""Payload values: a JSON-like tree that keeps integers distinct from doubles."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional

from qdrant_grpc_sdk.models.base import OneOf, map_field, oneof_field, proto_enum, proto_message, repeated_field


@proto_enum("qdrant.NullValue")
class NullValue(enum.IntEnum):
    NULL_VALUE = 0


class ValueKind(OneOf):
    cases = (
        "null_value",
        "double_value",
        "integer_value",
        "string_value",
        "bool_value",
        "struct_value",
        "list_value",
    )


@proto_message("qdrant.Value")
@dataclass(frozen=True)
class Value:
    """A single payload value; ``kind`` None means an unset value."""
    kind: Optional[ValueKind] = oneof_field(ValueKind)


@proto_message("qdrant.Struct")
@dataclass(frozen=True)
class Struct:
    fields: Dict[str, Value] = map_field()


@proto_message("qdrant.ListValue")
@dataclass(frozen=True)
class ListValue:
    values: List[Value] = repeated_field()


__all__ = ["NullValue", "ValueKind", "Value", "Struct", "ListValue"]
