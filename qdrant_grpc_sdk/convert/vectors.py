# qdrant_grpc_sdk/convert/vectors.py
# SPDX-License-Identifier: Apache-2.0
"""
Conversions for point ids and vectors.

All functions are pure. They never sort, deduplicate or truncate: position
``i`` of any input sequence maps to position ``i`` of the output.
"""

from __future__ import annotations

import uuid
from typing import Iterable, Mapping, Sequence, Tuple, Union

from qdrant_grpc_sdk.core.errors import ConversionError
from qdrant_grpc_sdk.models.points import (
    DenseVector,
    MultiDenseVector,
    NamedVectors,
    PointId,
    PointIdOptions,
    SparseIndices,
    SparseVector,
    Vector,
    Vectors,
    VectorsOptions,
)

PointIdLike = Union[PointId, int, str, uuid.UUID]
VectorLike = Union[Vector, SparseVector, DenseVector, Sequence[float], Sequence[Sequence[float]]]
VectorsLike = Union[Vectors, VectorLike, Mapping[str, VectorLike]]


def point_id(obj: PointIdLike) -> PointId:
    """An unsigned integer becomes ``num``; a string or UUID becomes ``uuid``."""
    if isinstance(obj, PointId):
        return obj
    if isinstance(obj, bool):
        raise ConversionError("point id cannot be a bool")
    if isinstance(obj, int):
        if obj < 0:
            raise ConversionError(f"numeric point id must be non-negative, got {obj}")
        return PointId(PointIdOptions.num(obj))
    if isinstance(obj, uuid.UUID):
        return PointId(PointIdOptions.uuid(str(obj)))
    if isinstance(obj, str):
        return PointId(PointIdOptions.uuid(obj))
    raise ConversionError(f"unsupported point id type: {type(obj).__name__}")


def sparse_vector(indices: Sequence[int], values: Sequence[float]) -> SparseVector:
    """Build a sparse vector from parallel ``indices`` and ``values``."""
    if len(indices) != len(values):
        raise ConversionError(
            f"sparse vector needs as many values as indices ({len(values)} values, {len(indices)} indices)"
        )
    return SparseVector(values=[float(v) for v in values], indices=[int(i) for i in indices])


def sparse_vector_from_pairs(pairs: Iterable[Tuple[int, float]]) -> SparseVector:
    indices = []
    values = []
    for index, val in pairs:
        indices.append(int(index))
        values.append(float(val))
    return SparseVector(values=values, indices=indices)


def _is_nested(obj: Sequence) -> bool:
    return len(obj) > 0 and isinstance(obj[0], (list, tuple, DenseVector))


def vector(obj: VectorLike) -> Vector:
    """
    Convert a vector-ish value into a :class:`Vector`.

    - ``Sequence[float]`` -> dense
    - :class:`SparseVector` -> sparse (values in ``data``, ``indices`` set)
    - ``Sequence[Sequence[float]]`` -> multi-dense (flattened, ``vectors_count`` set)
    """
    if isinstance(obj, Vector):
        return obj
    if isinstance(obj, SparseVector):
        return Vector(data=list(obj.values), indices=SparseIndices(data=list(obj.indices)))
    if isinstance(obj, DenseVector):
        return Vector(data=list(obj.data))
    if isinstance(obj, MultiDenseVector):
        return _multi_dense([v.data for v in obj.vectors])
    if isinstance(obj, (list, tuple)):
        if _is_nested(obj):
            return _multi_dense([v.data if isinstance(v, DenseVector) else v for v in obj])
        return Vector(data=[float(v) for v in obj])
    raise ConversionError(f"unsupported vector type: {type(obj).__name__}")


def _multi_dense(rows: Sequence[Sequence[float]]) -> Vector:
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ConversionError("all vectors of a multi-vector must have the same dimension")
    return Vector(data=[float(v) for row in rows for v in row], vectors_count=len(rows))


def vectors(obj: VectorsLike) -> Vectors:
    """A single vector becomes an unnamed vector; a mapping becomes named vectors."""
    if isinstance(obj, Vectors):
        return obj
    if isinstance(obj, Mapping):
        named = NamedVectors(vectors={name: vector(v) for name, v in obj.items()})
        return Vectors(VectorsOptions.vectors(named))
    return Vectors(VectorsOptions.vector(vector(obj)))


def dense_values(vec: Vector) -> Sequence[float]:
    """Dense values of ``vec`` whichever encoding the server used."""
    if vec.vector is not None and vec.vector.case == "dense":
        return vec.vector.value.data
    return vec.data


__all__ = [
    "PointIdLike",
    "VectorLike",
    "VectorsLike",
    "point_id",
    "sparse_vector",
    "sparse_vector_from_pairs",
    "vector",
    "vectors",
    "dense_values",
]
