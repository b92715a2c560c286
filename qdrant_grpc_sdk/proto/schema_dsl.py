# qdrant_grpc_sdk/proto/schema_dsl.py
# SPDX-License-Identifier: Apache-2.0
"""
Declarative protobuf schema, compiled at import time.

Purpose
-------
Describe a proto3 file (messages, enums, services) with plain Python values
and compile it into a ``FileDescriptorProto`` registered in a private
``DescriptorPool``. Message classes come from
``message_factory.GetMessageClass`` so encoding, decoding and unknown-field
handling are done by the protobuf runtime itself; no protoc step is needed.

Supported shapes
----------------
- scalar fields (proto3 implicit presence)
- ``optional`` scalar fields (explicit presence via synthetic oneofs)
- repeated scalars and messages
- singular message and enum fields
- ``map<K, V>`` fields (nested ``XxxEntry`` types with ``map_entry``)
- oneofs
- services with unary methods

Usage
-----
    schema = ProtoSchema(
        "demo",
        enums=[enum("Color", RED=0, BLUE=1)],
        messages=[
            message("Paint", field("color", 1, "Color"), optional("shade", 2, "uint32")),
        ],
        services=[service("Painter", rpc("Paint", "Paint", "Paint"))],
    )
    PaintPb = schema.message_class("demo.Paint")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Union

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory, timestamp_pb2

LOG = logging.getLogger(__name__)

_FDP = descriptor_pb2.FieldDescriptorProto

SCALAR_TYPES: Dict[str, int] = {
    "double": _FDP.TYPE_DOUBLE,
    "float": _FDP.TYPE_FLOAT,
    "int64": _FDP.TYPE_INT64,
    "uint64": _FDP.TYPE_UINT64,
    "int32": _FDP.TYPE_INT32,
    "uint32": _FDP.TYPE_UINT32,
    "bool": _FDP.TYPE_BOOL,
    "string": _FDP.TYPE_STRING,
    "bytes": _FDP.TYPE_BYTES,
}

SINGULAR = "singular"
OPTIONAL = "optional"
REPEATED = "repeated"
MAP = "map"


# =============================================================================
# Declarations
# =============================================================================

@dataclass(frozen=True)
class FieldSpec:
    """
    One field of a message.

    Attributes:
        name: Field name (snake_case)
        number: Wire tag
        type_name: Scalar name, local message/enum name, or a fully qualified
            name for dependencies (e.g. ``google.protobuf.Timestamp``)
        label: One of singular / optional / repeated / map
        key_type: Map key scalar type (maps only)
    """
    name: str
    number: int
    type_name: str
    label: str = SINGULAR
    key_type: Optional[str] = None


@dataclass(frozen=True)
class OneofSpec:
    name: str
    fields: Tuple[FieldSpec, ...]


@dataclass(frozen=True)
class MessageSpec:
    name: str
    members: Tuple[Union[FieldSpec, OneofSpec], ...]


@dataclass(frozen=True)
class EnumSpec:
    name: str
    values: Tuple[Tuple[str, int], ...]


@dataclass(frozen=True)
class MethodSpec:
    name: str
    input_type: str
    output_type: str


@dataclass(frozen=True)
class ServiceSpec:
    name: str
    methods: Tuple[MethodSpec, ...]


def field(name: str, number: int, type_name: str) -> FieldSpec:
    return FieldSpec(name, number, type_name)


def optional(name: str, number: int, type_name: str) -> FieldSpec:
    return FieldSpec(name, number, type_name, label=OPTIONAL)


def repeated(name: str, number: int, type_name: str) -> FieldSpec:
    return FieldSpec(name, number, type_name, label=REPEATED)


def map_field(name: str, number: int, key_type: str, value_type: str) -> FieldSpec:
    return FieldSpec(name, number, value_type, label=MAP, key_type=key_type)


def oneof(name: str, *fields: FieldSpec) -> OneofSpec:
    return OneofSpec(name, tuple(fields))


def message(name: str, *members: Union[FieldSpec, OneofSpec]) -> MessageSpec:
    return MessageSpec(name, tuple(members))


def enum(name: str, **values: int) -> EnumSpec:
    return EnumSpec(name, tuple(values.items()))


def rpc(name: str, input_type: str, output_type: str) -> MethodSpec:
    return MethodSpec(name, input_type, output_type)


def service(name: str, *methods: MethodSpec) -> ServiceSpec:
    return ServiceSpec(name, tuple(methods))


def _camel(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


# =============================================================================
# Compiled schema
# =============================================================================

class ProtoSchema:
    """
    A compiled proto3 file living in its own descriptor pool.

    Message classes are created lazily and cached per full name.
    """

    def __init__(
        self,
        package: str,
        *,
        messages: Sequence[MessageSpec],
        enums: Sequence[EnumSpec] = (),
        services: Sequence[ServiceSpec] = (),
        dependencies: Iterable[ModuleType] = (timestamp_pb2,),
        filename: Optional[str] = None,
    ) -> None:
        self.package = package
        self._enum_names = {e.name for e in enums}
        self._message_names = {m.name for m in messages}
        self._dependencies = tuple(dependencies)

        self.file_proto = descriptor_pb2.FileDescriptorProto(
            name=filename or f"{package}.proto",
            package=package,
            syntax="proto3",
        )
        self.file_proto.dependency.extend(dep.DESCRIPTOR.name for dep in self._dependencies)
        for spec in enums:
            self._compile_enum(spec)
        for spec in messages:
            self._compile_message(spec)
        for spec in services:
            self._compile_service(spec)

        self.pool = descriptor_pool.DescriptorPool()
        for dep in self._dependencies:
            self.pool.AddSerializedFile(dep.DESCRIPTOR.serialized_pb)
        self.pool.AddSerializedFile(self.file_proto.SerializeToString())
        self._classes: Dict[str, Any] = {}
        LOG.debug(
            "compiled schema %s: %d messages, %d enums, %d services",
            package,
            len(messages),
            len(enums),
            len(services),
        )

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #

    def qualify(self, name: str) -> str:
        return name if "." in name else f"{self.package}.{name}"

    def message_descriptor(self, name: str):
        return self.pool.FindMessageTypeByName(self.qualify(name))

    def message_class(self, name: str):
        full_name = self.qualify(name)
        cls = self._classes.get(full_name)
        if cls is None:
            cls = message_factory.GetMessageClass(self.pool.FindMessageTypeByName(full_name))
            self._classes[full_name] = cls
        return cls

    def method(self, service_name: str, method_name: str):
        return self.pool.FindServiceByName(self.qualify(service_name)).FindMethodByName(method_name)

    def rpc_path(self, service_name: str, method_name: str) -> str:
        return f"/{self.qualify(service_name)}/{method_name}"

    # ------------------------------------------------------------------ #
    # Compilation
    # ------------------------------------------------------------------ #

    def _resolve(self, type_name: str) -> Tuple[int, str]:
        if type_name in SCALAR_TYPES:
            return SCALAR_TYPES[type_name], ""
        if "." in type_name:
            return _FDP.TYPE_MESSAGE, f".{type_name}"
        if type_name in self._enum_names:
            return _FDP.TYPE_ENUM, f".{self.package}.{type_name}"
        if type_name in self._message_names:
            return _FDP.TYPE_MESSAGE, f".{self.package}.{type_name}"
        raise ValueError(f"unknown type {type_name!r} in schema {self.package}")

    def _set_type(self, fd: descriptor_pb2.FieldDescriptorProto, type_name: str) -> None:
        kind, ref = self._resolve(type_name)
        fd.type = kind
        if ref:
            fd.type_name = ref

    def _compile_enum(self, spec: EnumSpec) -> None:
        ed = self.file_proto.enum_type.add(name=spec.name)
        for value_name, number in spec.values:
            ed.value.add(name=value_name, number=number)

    def _compile_message(self, spec: MessageSpec) -> None:
        dp = self.file_proto.message_type.add(name=spec.name)

        # Real oneofs must precede the synthetic ones of proto3 optionals.
        real = [m for m in spec.members if isinstance(m, OneofSpec)]
        for decl in real:
            dp.oneof_decl.add(name=decl.name)
        oneof_index = {decl.name: i for i, decl in enumerate(real)}

        for member in spec.members:
            if isinstance(member, OneofSpec):
                for f in member.fields:
                    self._add_field(dp, spec.name, f).oneof_index = oneof_index[member.name]
                continue

            fd = self._add_field(dp, spec.name, member)
            if member.label == OPTIONAL:
                fd.proto3_optional = True
                fd.oneof_index = len(dp.oneof_decl)
                dp.oneof_decl.add(name=f"_{member.name}")

    def _add_field(self, dp, message_name: str, spec: FieldSpec) -> descriptor_pb2.FieldDescriptorProto:
        fd = dp.field.add(name=spec.name, number=spec.number)
        if spec.label == MAP:
            entry_name = f"{_camel(spec.name)}Entry"
            entry = dp.nested_type.add(name=entry_name)
            entry.options.map_entry = True
            for sub_name, number, type_name in (("key", 1, spec.key_type), ("value", 2, spec.type_name)):
                sub = entry.field.add(name=sub_name, number=number, label=_FDP.LABEL_OPTIONAL)
                self._set_type(sub, type_name)
            fd.label = _FDP.LABEL_REPEATED
            fd.type = _FDP.TYPE_MESSAGE
            fd.type_name = f".{self.package}.{message_name}.{entry_name}"
            return fd

        fd.label = _FDP.LABEL_REPEATED if spec.label == REPEATED else _FDP.LABEL_OPTIONAL
        self._set_type(fd, spec.type_name)
        return fd

    def _compile_service(self, spec: ServiceSpec) -> None:
        sd = self.file_proto.service.add(name=spec.name)
        for m in spec.methods:
            sd.method.add(
                name=m.name,
                input_type=f".{self.qualify(m.input_type)}",
                output_type=f".{self.qualify(m.output_type)}",
            )


__all__ = [
    "FieldSpec",
    "OneofSpec",
    "MessageSpec",
    "EnumSpec",
    "MethodSpec",
    "ServiceSpec",
    "ProtoSchema",
    "SCALAR_TYPES",
    "field",
    "optional",
    "repeated",
    "map_field",
    "oneof",
    "message",
    "enum",
    "rpc",
    "service",
]
