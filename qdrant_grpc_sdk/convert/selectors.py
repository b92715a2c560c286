# qdrant_grpc_sdk/convert/selectors.py
# SPDX-License-Identifier: Apache-2.0
"""Conversions for selectors, consistency settings and vector configuration."""

from __future__ import annotations

import enum
from typing import Iterable, Mapping, Sequence, Type, TypeVar, Union

from qdrant_grpc_sdk.convert.vectors import PointIdLike, point_id
from qdrant_grpc_sdk.core.errors import ConversionError
from qdrant_grpc_sdk.models.collections import VectorParams, VectorParamsMap, VectorsConfig, VectorsConfigOptions
from qdrant_grpc_sdk.models.points import (
    Filter,
    IndexParams,
    IntegerIndexParams,
    KeywordIndexParams,
    PayloadExcludeSelector,
    PayloadIncludeSelector,
    PayloadIndexParams,
    PointsIdsList,
    PointsSelector,
    PointsSelectorOptions,
    ReadConsistency,
    ReadConsistencyType,
    ReadConsistencyValue,
    ShardKey,
    ShardKeySelector,
    ShardKeyValue,
    TextIndexParams,
    VectorsSelector,
    WithPayloadOptions,
    WithPayloadSelector,
    WithVectorsOptions,
    WithVectorsSelector,
    WriteOrdering,
    WriteOrderingType,
)

E = TypeVar("E", bound=enum.IntEnum)


def points_selector(obj: Union[PointsSelector, Filter, PointsIdsList, Iterable[PointIdLike]]) -> PointsSelector:
    """Ids (any iterable of id-likes) select points explicitly; a Filter selects by condition."""
    if isinstance(obj, PointsSelector):
        return obj
    if isinstance(obj, Filter):
        return PointsSelector(PointsSelectorOptions.filter(obj))
    if isinstance(obj, PointsIdsList):
        return PointsSelector(PointsSelectorOptions.points(obj))
    if isinstance(obj, (str, bytes)):
        raise ConversionError("points selector needs a sequence of ids, not a single string")
    return PointsSelector(PointsSelectorOptions.points(PointsIdsList(ids=[point_id(i) for i in obj])))


def with_payload(
    obj: Union[WithPayloadSelector, bool, Sequence[str], PayloadIncludeSelector, PayloadExcludeSelector],
) -> WithPayloadSelector:
    if isinstance(obj, WithPayloadSelector):
        return obj
    if isinstance(obj, bool):
        return WithPayloadSelector(WithPayloadOptions.enable(obj))
    if isinstance(obj, PayloadIncludeSelector):
        return WithPayloadSelector(WithPayloadOptions.include(obj))
    if isinstance(obj, PayloadExcludeSelector):
        return WithPayloadSelector(WithPayloadOptions.exclude(obj))
    if isinstance(obj, str):
        obj = [obj]
    return WithPayloadSelector(WithPayloadOptions.include(PayloadIncludeSelector(fields=list(obj))))


def with_vectors(obj: Union[WithVectorsSelector, bool, Sequence[str], VectorsSelector]) -> WithVectorsSelector:
    if isinstance(obj, WithVectorsSelector):
        return obj
    if isinstance(obj, bool):
        return WithVectorsSelector(WithVectorsOptions.enable(obj))
    if isinstance(obj, VectorsSelector):
        return WithVectorsSelector(WithVectorsOptions.include(obj))
    if isinstance(obj, str):
        obj = [obj]
    return WithVectorsSelector(WithVectorsOptions.include(VectorsSelector(names=list(obj))))


def enum_member(enum_cls: Type[E], obj: Union[E, int, str]) -> E:
    """Look up a member of ``enum_cls`` by member, wire number or name."""
    if isinstance(obj, enum_cls):
        return obj
    if isinstance(obj, str):
        try:
            return enum_cls[obj.upper()]
        except KeyError:
            raise ConversionError(f"unknown {enum_cls.__name__} name: {obj!r}") from None
    if isinstance(obj, int) and not isinstance(obj, bool):
        try:
            return enum_cls(obj)
        except ValueError:
            raise ConversionError(f"unknown {enum_cls.__name__} value: {obj!r}") from None
    raise ConversionError(f"unsupported {enum_cls.__name__}: {type(obj).__name__}")


def write_ordering(obj: Union[WriteOrdering, WriteOrderingType, int, str]) -> WriteOrdering:
    if isinstance(obj, WriteOrdering):
        return obj
    return WriteOrdering(type=enum_member(WriteOrderingType, obj))


def read_consistency(obj: Union[ReadConsistency, ReadConsistencyType, int]) -> ReadConsistency:
    """A :class:`ReadConsistencyType` names a level; a plain int is a replica count."""
    if isinstance(obj, ReadConsistency):
        return obj
    if isinstance(obj, ReadConsistencyType):
        return ReadConsistency(ReadConsistencyValue.type(obj))
    if isinstance(obj, int) and not isinstance(obj, bool):
        return ReadConsistency(ReadConsistencyValue.factor(obj))
    raise ConversionError(f"unsupported read consistency: {obj!r}")


def shard_key(obj: Union[ShardKey, str, int]) -> ShardKey:
    if isinstance(obj, ShardKey):
        return obj
    if isinstance(obj, str):
        return ShardKey(ShardKeyValue.keyword(obj))
    if isinstance(obj, int) and not isinstance(obj, bool):
        return ShardKey(ShardKeyValue.number(obj))
    raise ConversionError(f"unsupported shard key: {obj!r}")


def shard_key_selector(obj: Union[ShardKeySelector, str, int, Sequence[Union[ShardKey, str, int]]]) -> ShardKeySelector:
    if isinstance(obj, ShardKeySelector):
        return obj
    if isinstance(obj, (str, int, ShardKey)):
        return ShardKeySelector(shard_keys=[shard_key(obj)])
    return ShardKeySelector(shard_keys=[shard_key(k) for k in obj])


def payload_index_params(
    obj: Union[PayloadIndexParams, TextIndexParams, IntegerIndexParams, KeywordIndexParams],
) -> PayloadIndexParams:
    if isinstance(obj, PayloadIndexParams):
        return obj
    if isinstance(obj, TextIndexParams):
        return PayloadIndexParams(IndexParams.text_index_params(obj))
    if isinstance(obj, IntegerIndexParams):
        return PayloadIndexParams(IndexParams.integer_index_params(obj))
    if isinstance(obj, KeywordIndexParams):
        return PayloadIndexParams(IndexParams.keyword_index_params(obj))
    raise ConversionError(f"unsupported payload index params: {type(obj).__name__}")


def vectors_config(obj: Union[VectorsConfig, VectorParams, Mapping[str, VectorParams]]) -> VectorsConfig:
    """One :class:`VectorParams` configures the unnamed vector; a mapping configures named ones."""
    if isinstance(obj, VectorsConfig):
        return obj
    if isinstance(obj, VectorParams):
        return VectorsConfig(VectorsConfigOptions.params(obj))
    if isinstance(obj, Mapping):
        return VectorsConfig(VectorsConfigOptions.params_map(VectorParamsMap(map=dict(obj))))
    raise ConversionError(f"unsupported vectors config: {type(obj).__name__}")


__all__ = [
    "enum_member",
    "points_selector",
    "with_payload",
    "with_vectors",
    "write_ordering",
    "read_consistency",
    "shard_key",
    "shard_key_selector",
    "payload_index_params",
    "vectors_config",
]
