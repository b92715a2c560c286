# qdrant_grpc_sdk/convert/filters.py
# SPDX-License-Identifier: Apache-2.0
"""
Filter and condition helpers.

Usage
-----
    from qdrant_grpc_sdk.convert import filters as F

    flt = F.must(
        F.matches("city", "London"),
        F.range_("price", gte=10, lt=100),
        F.must_not(F.is_empty("tags")),
    )
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from qdrant_grpc_sdk.convert.vectors import PointIdLike, point_id
from qdrant_grpc_sdk.core.errors import ConversionError
from qdrant_grpc_sdk.models.points import (
    Condition,
    ConditionOptions,
    FieldCondition,
    Filter,
    GeoBoundingBox,
    GeoPoint,
    GeoRadius,
    HasIdCondition,
    IsEmptyCondition,
    IsNullCondition,
    Match,
    MatchValue,
    NestedCondition,
    Range,
    RepeatedIntegers,
    RepeatedStrings,
    ValuesCount,
)

ConditionLike = Union[Condition, Filter, FieldCondition, IsEmptyCondition, IsNullCondition, HasIdCondition, NestedCondition]

_CASES = (
    (FieldCondition, "field"),
    (IsEmptyCondition, "is_empty"),
    (HasIdCondition, "has_id"),
    (Filter, "filter"),
    (IsNullCondition, "is_null"),
    (NestedCondition, "nested"),
)


def condition(obj: ConditionLike) -> Condition:
    """Wrap any condition body (or a nested Filter) into a :class:`Condition`."""
    if isinstance(obj, Condition):
        return obj
    for cls, case in _CASES:
        if isinstance(obj, cls):
            return Condition(ConditionOptions.of(case, obj))
    raise ConversionError(f"unsupported condition type: {type(obj).__name__}")


# =============================================================================
# Filters
# =============================================================================

def must(*conditions: ConditionLike) -> Filter:
    return Filter(must=[condition(c) for c in conditions])


def should(*conditions: ConditionLike) -> Filter:
    return Filter(should=[condition(c) for c in conditions])


def must_not(*conditions: ConditionLike) -> Filter:
    return Filter(must_not=[condition(c) for c in conditions])


def all_of(*filters: Filter) -> Filter:
    """Concatenate the clauses of several filters, keeping their order."""
    return Filter(
        should=[c for f in filters for c in f.should],
        must=[c for f in filters for c in f.must],
        must_not=[c for f in filters for c in f.must_not],
    )


# =============================================================================
# Field conditions
# =============================================================================

def match_value(value: Union[str, int, bool, Sequence[str], Sequence[int]], *, text: bool = False) -> Match:
    if isinstance(value, bool):
        return Match(MatchValue.boolean(value))
    if isinstance(value, int):
        return Match(MatchValue.integer(value))
    if isinstance(value, str):
        return Match(MatchValue.text(value) if text else MatchValue.keyword(value))
    if not isinstance(value, (list, tuple)):
        raise ConversionError(f"unsupported match value type: {type(value).__name__}")
    values = list(value)
    if values and all(isinstance(v, str) for v in values):
        return Match(MatchValue.keywords(RepeatedStrings(strings=values)))
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return Match(MatchValue.integers(RepeatedIntegers(integers=values)))
    raise ConversionError("match values must be all strings or all integers")


def matches(key: str, value: Union[str, int, bool, Sequence[str], Sequence[int]]) -> FieldCondition:
    """Exact match; a list matches any of its elements."""
    return FieldCondition(key=key, match=match_value(value))


def matches_text(key: str, text: str) -> FieldCondition:
    """Full-text match (requires a text index on ``key``, see ``QdrantClient.create_field_index``)."""
    return FieldCondition(key=key, match=match_value(text, text=True))


def excludes(key: str, values: Union[Sequence[str], Sequence[int]]) -> FieldCondition:
    """Matches points whose ``key`` is none of ``values``."""
    if not isinstance(values, (list, tuple)):
        raise ConversionError(f"excluded values must be a list, got {type(values).__name__}")
    values = list(values)
    if values and all(isinstance(v, str) for v in values):
        return FieldCondition(key=key, match=Match(MatchValue.except_keywords(RepeatedStrings(strings=values))))
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return FieldCondition(key=key, match=Match(MatchValue.except_integers(RepeatedIntegers(integers=values))))
    raise ConversionError("excluded values must be all strings or all integers")


def range_(
    key: str,
    *,
    gt: Optional[float] = None,
    gte: Optional[float] = None,
    lt: Optional[float] = None,
    lte: Optional[float] = None,
) -> FieldCondition:
    return FieldCondition(key=key, range=Range(lt=lt, gt=gt, gte=gte, lte=lte))


def values_count(
    key: str,
    *,
    gt: Optional[int] = None,
    gte: Optional[int] = None,
    lt: Optional[int] = None,
    lte: Optional[int] = None,
) -> FieldCondition:
    return FieldCondition(key=key, values_count=ValuesCount(lt=lt, gt=gt, gte=gte, lte=lte))


def geo_radius(key: str, *, lon: float, lat: float, radius: float) -> FieldCondition:
    return FieldCondition(key=key, geo_radius=GeoRadius(center=GeoPoint(lon=lon, lat=lat), radius=radius))


def geo_bounding_box(key: str, *, top_left: GeoPoint, bottom_right: GeoPoint) -> FieldCondition:
    return FieldCondition(key=key, geo_bounding_box=GeoBoundingBox(top_left=top_left, bottom_right=bottom_right))


# =============================================================================
# Other conditions
# =============================================================================

def is_empty(key: str) -> IsEmptyCondition:
    return IsEmptyCondition(key=key)


def is_null(key: str) -> IsNullCondition:
    return IsNullCondition(key=key)


def has_id(ids: Iterable[PointIdLike]) -> HasIdCondition:
    return HasIdCondition(has_id=[point_id(i) for i in ids])


def nested(key: str, flt: Filter) -> NestedCondition:
    """Apply ``flt`` to each element of the array stored under ``key``."""
    return NestedCondition(key=key, filter=flt)


__all__ = [
    "ConditionLike",
    "condition",
    "must",
    "should",
    "must_not",
    "all_of",
    "match_value",
    "matches",
    "matches_text",
    "excludes",
    "range_",
    "values_count",
    "geo_radius",
    "geo_bounding_box",
    "is_empty",
    "is_null",
    "has_id",
    "nested",
]
