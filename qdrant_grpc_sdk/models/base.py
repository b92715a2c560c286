# qdrant_grpc_sdk/models/base.py
# SPDX-License-Identifier: Apache-2.0
"""
Building blocks of the message model.

- ``@proto_message("qdrant.X")`` registers a frozen dataclass as the model of
  a wire message. The codec uses the registry to map in both directions.
- ``@proto_enum("qdrant.X")`` does the same for ``IntEnum`` types.
- :class:`OneOf` is the tagged union used for every proto ``oneof``: a value
  holds exactly one ``case`` and its ``value``, so setting an alternative
  always replaces the previous one.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Type, TypeVar

from qdrant_grpc_sdk.core.errors import ConversionError

T = TypeVar("T")

MESSAGE_TYPES: Dict[str, type] = {}
ENUM_TYPES: Dict[str, type] = {}

_RESERVED_CASES = frozenset({"case", "value", "cases", "of"})


def proto_message(full_name: str) -> Callable[[Type[T]], Type[T]]:
    """Register ``cls`` as the model for the wire message ``full_name``."""

    def register(cls: Type[T]) -> Type[T]:
        cls.__proto_name__ = full_name  # type: ignore[attr-defined]
        MESSAGE_TYPES[full_name] = cls
        return cls

    return register


def proto_enum(full_name: str) -> Callable[[Type[T]], Type[T]]:
    def register(cls: Type[T]) -> Type[T]:
        ENUM_TYPES[full_name] = cls
        return cls

    return register


def proto_name(obj: Any) -> str:
    cls = obj if isinstance(obj, type) else type(obj)
    try:
        return cls.__proto_name__
    except AttributeError:
        raise ConversionError(f"{cls.__name__} is not a registered message type") from None


# =============================================================================
# Tagged unions
# =============================================================================

@dataclass(frozen=True)
class OneOf:
    """
    A tagged union value.

    Subclasses list their alternatives in ``cases``; each alternative also
    becomes a classmethod constructor, e.g. ``PointIdOptions.num(7)``.

    Attributes:
        case: Name of the active alternative (the proto field name)
        value: Value of the active alternative
    """
    case: str
    value: Any

    cases: ClassVar[Tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in cls.cases:
            if name in _RESERVED_CASES or name in cls.__dict__:
                continue
            setattr(cls, name, classmethod(lambda c, value, _case=name: c(_case, value)))

    def __post_init__(self) -> None:
        if self.case not in self.cases:
            raise ConversionError(
                f"{type(self).__name__} has no alternative {self.case!r} "
                f"(expected one of: {', '.join(self.cases)})"
            )

    @classmethod
    def of(cls, case: str, value: Any) -> "OneOf":
        return cls(case, value)

    def get(self, case: str) -> Optional[Any]:
        """Value of ``case`` if it is the active alternative, else None."""
        return self.value if self.case == case else None


def oneof_field(union: Type[OneOf]) -> Any:
    """Dataclass field holding an optional tagged union of type ``union``."""
    return dataclasses.field(default=None, metadata={"oneof": union})


def oneof_type(cls: type, field_name: str) -> Optional[Type[OneOf]]:
    for f in dataclasses.fields(cls):
        if f.name == field_name:
            return f.metadata.get("oneof")
    return None


def repeated_field() -> Any:
    return dataclasses.field(default_factory=list)


def map_field() -> Any:
    return dataclasses.field(default_factory=dict)


__all__ = [
    "MESSAGE_TYPES",
    "ENUM_TYPES",
    "OneOf",
    "map_field",
    "oneof_field",
    "oneof_type",
    "proto_enum",
    "proto_message",
    "proto_name",
    "repeated_field",
]
