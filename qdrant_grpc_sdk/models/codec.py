# qdrant_grpc_sdk/models/codec.py
# SPDX-License-Identifier: Apache-2.0
"""
Codec between model dataclasses and protobuf wire messages.

Purpose
-------
``to_proto`` / ``from_proto`` are pure, schema-driven mappings; ``encode`` /
``decode`` add the binary step. The mapping is driven by the compiled
descriptors, so every model field is converted according to its wire type:

- real oneofs      <-> :class:`OneOf` values (``WhichOneof``)
- proto3 optionals <-> ``None`` when absent (``HasField``)
- messages         <-> nested models, ``None`` when absent
- maps / repeated  <-> ``dict`` / ``list``
- enums            <-> registered ``IntEnum`` (unknown numbers stay ``int``)
- Timestamp        <-> timezone-aware ``datetime``

Design notes
------------
- Type and range errors reported by the protobuf runtime (e.g. a negative
  value for a ``uint64`` field) become :class:`ConversionError`.
- Decoding ignores unknown fields, as the protobuf runtime does.
- Float fields are 32-bit on the wire; values that are not exactly
  representable come back rounded to the nearest float32.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import timezone
from typing import Any, Type, TypeVar

from google.protobuf import message as pb_message
from google.protobuf.descriptor import FieldDescriptor

from qdrant_grpc_sdk.core.errors import ConversionError
from qdrant_grpc_sdk.models.base import ENUM_TYPES, MESSAGE_TYPES, OneOf, oneof_type, proto_name
from qdrant_grpc_sdk.proto import SCHEMA

LOG = logging.getLogger(__name__)

M = TypeVar("M")

_TIMESTAMP = "google.protobuf.Timestamp"


def _is_map(fd: FieldDescriptor) -> bool:
    return (
        fd.type == FieldDescriptor.TYPE_MESSAGE
        and fd.message_type.GetOptions().map_entry
    )


def _is_repeated(fd: FieldDescriptor) -> bool:
    return fd.is_repeated


def _real_oneofs(descriptor) -> dict:
    return {
        o.name: o
        for o in descriptor.oneofs
        if not (len(o.fields) == 1 and o.name == f"_{o.fields[0].name}")
    }


# =============================================================================
# Encoding
# =============================================================================

def to_proto(msg: Any):
    """Convert a model instance into a protobuf message of its registered type."""
    pb = SCHEMA.message_class(proto_name(msg))()
    _fill(pb, msg)
    return pb


def _fill(pb, msg: Any) -> None:
    descriptor = pb.DESCRIPTOR
    oneofs = _real_oneofs(descriptor)
    for f in dataclasses.fields(msg):
        value = getattr(msg, f.name)
        if value is None:
            continue
        if f.name in oneofs:
            if not isinstance(value, OneOf):
                raise ConversionError(
                    f"{descriptor.full_name}.{f.name} expects a tagged union, got {type(value).__name__}"
                )
            fd = descriptor.fields_by_name[value.case]
            _set_singular(pb, fd, value.value)
            continue

        fd = descriptor.fields_by_name[f.name]
        try:
            if _is_map(fd):
                _fill_map(getattr(pb, fd.name), fd, value)
            elif _is_repeated(fd):
                _fill_repeated(getattr(pb, fd.name), fd, value)
            else:
                _set_singular(pb, fd, value)
        except (TypeError, ValueError) as e:
            if isinstance(e, ConversionError):
                raise
            raise ConversionError(f"{fd.full_name}: {e}") from e


def _fill_map(container, fd: FieldDescriptor, value: Any) -> None:
    value_fd = fd.message_type.fields_by_name["value"]
    for key, item in value.items():
        if value_fd.type == FieldDescriptor.TYPE_MESSAGE:
            _fill(container[key], item)
        elif value_fd.type == FieldDescriptor.TYPE_ENUM:
            container[key] = int(item)
        else:
            container[key] = item


def _fill_repeated(container, fd: FieldDescriptor, value: Any) -> None:
    if fd.type == FieldDescriptor.TYPE_MESSAGE:
        for item in value:
            _fill(container.add(), item)
    elif fd.type == FieldDescriptor.TYPE_ENUM:
        container.extend(int(item) for item in value)
    else:
        container.extend(value)


def _set_singular(pb, fd: FieldDescriptor, value: Any) -> None:
    try:
        if fd.type == FieldDescriptor.TYPE_MESSAGE:
            sub = getattr(pb, fd.name)
            # Presence must survive for empty messages (e.g. an empty Filter).
            sub.SetInParent()
            if fd.message_type.full_name == _TIMESTAMP:
                sub.FromDatetime(value)
            else:
                _fill(sub, value)
        elif fd.type == FieldDescriptor.TYPE_ENUM:
            setattr(pb, fd.name, int(value))
        else:
            setattr(pb, fd.name, value)
    except (TypeError, ValueError, AttributeError) as e:
        if isinstance(e, ConversionError):
            raise
        raise ConversionError(f"{fd.full_name}: {e}") from e


def encode(msg: Any) -> bytes:
    return to_proto(msg).SerializeToString()


# =============================================================================
# Decoding
# =============================================================================

def from_proto(pb) -> Any:
    """Convert a protobuf message into its registered model type."""
    descriptor = pb.DESCRIPTOR
    cls = MESSAGE_TYPES.get(descriptor.full_name)
    if cls is None:
        raise ConversionError(f"no model registered for {descriptor.full_name}")

    oneofs = _real_oneofs(descriptor)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in oneofs:
            case = pb.WhichOneof(f.name)
            if case is not None:
                union = oneof_type(cls, f.name)
                kwargs[f.name] = union(case, _get_singular(pb, descriptor.fields_by_name[case]))
            continue

        fd = descriptor.fields_by_name[f.name]
        if _is_map(fd):
            value_fd = fd.message_type.fields_by_name["value"]
            kwargs[f.name] = {k: _convert_out(value_fd, v) for k, v in getattr(pb, fd.name).items()}
        elif _is_repeated(fd):
            kwargs[f.name] = [_convert_out(fd, v) for v in getattr(pb, fd.name)]
        elif fd.type == FieldDescriptor.TYPE_MESSAGE or fd.containing_oneof is not None:
            if pb.HasField(fd.name):
                kwargs[f.name] = _get_singular(pb, fd)
        else:
            kwargs[f.name] = _convert_out(fd, getattr(pb, fd.name))
    return cls(**kwargs)


def _get_singular(pb, fd: FieldDescriptor) -> Any:
    return _convert_out(fd, getattr(pb, fd.name))


def _convert_out(fd: FieldDescriptor, value: Any) -> Any:
    if fd.type == FieldDescriptor.TYPE_MESSAGE:
        if fd.message_type.full_name == _TIMESTAMP:
            return value.ToDatetime(tzinfo=timezone.utc)
        return from_proto(value)
    if fd.type == FieldDescriptor.TYPE_ENUM:
        enum_cls = ENUM_TYPES.get(fd.enum_type.full_name)
        if enum_cls is None:
            return value
        try:
            return enum_cls(value)
        except ValueError:
            LOG.debug("unknown %s value %d", fd.enum_type.full_name, value)
            return value
    return value


def decode(cls: Type[M], data: bytes) -> M:
    """Parse ``data`` as the wire message registered for ``cls``."""
    pb = SCHEMA.message_class(proto_name(cls))()
    try:
        pb.ParseFromString(data)
    except pb_message.DecodeError as e:
        raise ConversionError(f"cannot decode {proto_name(cls)}: {e}") from e
    return from_proto(pb)


__all__ = ["to_proto", "from_proto", "encode", "decode"]
