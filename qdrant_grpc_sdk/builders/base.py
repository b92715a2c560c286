# qdrant_grpc_sdk/builders/base.py
# SPDX-License-Identifier: Apache-2.0
"""
Builder base class.

Purpose
-------
A builder stages field values for exactly one message type and produces a
new, independent message on :meth:`MessageBuilder.build`.

Design notes
------------
- One slot per target field, kept in a dict: a missing key means "never
  set", which is distinct from "set to the default value".
- Setters are defined by subclasses, named after the field they stage, and
  return the builder so calls can be chained. Setting a field again
  overwrites the staged value.
- ``build()`` resolves every slot: staged values are copied into the
  message (lists and dicts are copied so later builder use cannot alias the
  message), required slots that were never set raise :class:`BuildError`
  naming the field, and all other unset slots take the message's default.
- Builders whose message has no required field never raise from ``build()``.
- Builders are single-task objects and take no locks.
"""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Dict, Generic, Tuple, Type, TypeVar

from qdrant_grpc_sdk.core.errors import BuildError

M = TypeVar("M")
B = TypeVar("B", bound="MessageBuilder")


def _copy(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def built(value: Any) -> Any:
    """Finish ``value`` if it is a builder, otherwise return it unchanged."""
    if isinstance(value, MessageBuilder):
        return value.build()
    return value


class MessageBuilder(Generic[M]):
    """
    Staging object for one message type.

    Subclasses set:
        target: The model dataclass produced by ``build()``
        required: Names of fields that must be staged before ``build()``
    """

    target: ClassVar[Type[Any]]
    required: ClassVar[Tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._slots: Dict[str, Any] = {}

    @classmethod
    def empty(cls: Type[B]) -> B:
        """A builder with every slot unset, bypassing constructor arguments."""
        obj = cls.__new__(cls)
        MessageBuilder.__init__(obj)
        return obj

    def _set(self: B, name: str, value: Any) -> B:
        self._slots[name] = value
        return self

    def is_set(self, name: str) -> bool:
        return name in self._slots

    def build(self) -> M:
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(self.target):
            if f.name in self._slots:
                kwargs[f.name] = _copy(self._slots[f.name])
            elif f.name in self.required:
                raise BuildError.uninitialized(
                    f.name,
                    builder=type(self).__name__,
                    target=self.target.__name__,
                )
        return self.target(**kwargs)

    def __repr__(self) -> str:
        staged = ", ".join(sorted(self._slots))
        return f"{type(self).__name__}(staged=[{staged}])"


__all__ = ["MessageBuilder", "built"]
