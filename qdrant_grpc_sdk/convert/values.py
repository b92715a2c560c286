# qdrant_grpc_sdk/convert/values.py
# SPDX-License-Identifier: Apache-2.0
"""
Payload conversions between plain Python values and :class:`Value` trees.

``None``, ``bool``, ``int``, ``float``, ``str``, sequences and mappings are
accepted. ``bool`` is checked before ``int`` so ``True`` never becomes
``integer_value=1``. Integers stay integers on the wire (``int64``).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from qdrant_grpc_sdk.core.errors import ConversionError
from qdrant_grpc_sdk.models.json_value import ListValue, NullValue, Struct, Value, ValueKind


def value(obj: Any) -> Value:
    """Convert a JSON-like Python object into a payload :class:`Value`."""
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Value(ValueKind.null_value(NullValue.NULL_VALUE))
    if isinstance(obj, bool):
        return Value(ValueKind.bool_value(obj))
    if isinstance(obj, int):
        return Value(ValueKind.integer_value(obj))
    if isinstance(obj, float):
        return Value(ValueKind.double_value(obj))
    if isinstance(obj, str):
        return Value(ValueKind.string_value(obj))
    if isinstance(obj, Mapping):
        return Value(ValueKind.struct_value(Struct(fields=payload(obj))))
    if isinstance(obj, (list, tuple)):
        return Value(ValueKind.list_value(ListValue(values=[value(item) for item in obj])))
    raise ConversionError(f"unsupported payload value type: {type(obj).__name__}")


def payload(obj: Mapping[str, Any]) -> Dict[str, Value]:
    """Convert a mapping of payload keys to :class:`Value` entries."""
    out: Dict[str, Value] = {}
    for key, item in obj.items():
        if not isinstance(key, str):
            raise ConversionError(f"payload keys must be strings, got {type(key).__name__}")
        out[key] = value(item)
    return out


def to_python(val: Value) -> Any:
    """Inverse of :func:`value`; an unset value maps to ``None``."""
    kind = val.kind
    if kind is None or kind.case == "null_value":
        return None
    if kind.case == "struct_value":
        return payload_to_dict(kind.value.fields)
    if kind.case == "list_value":
        return [to_python(item) for item in kind.value.values]
    return kind.value


def payload_to_dict(fields: Mapping[str, Value]) -> Dict[str, Any]:
    return {key: to_python(item) for key, item in fields.items()}


__all__ = ["value", "payload", "to_python", "payload_to_dict"]
