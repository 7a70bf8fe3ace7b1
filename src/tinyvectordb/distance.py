from math import sqrt
from typing import Sequence, Union

from .errors import DimensionMismatchError
from .records import VectorRecord

VectorLike = Union[VectorRecord, Sequence[float]]


def components_of(vector: VectorLike) -> Sequence[float]:
    if isinstance(vector, VectorRecord):
        return vector.components
    return vector


def euclidean_distance(a: VectorLike, b: VectorLike, strict: bool = True) -> float:
    """Return the Euclidean distance between ``a`` and ``b``.

    With ``strict`` the vectors must have the same length, otherwise
    ``DimensionMismatchError`` is raised. Without it only the shared prefix is
    compared. NaN and infinite components propagate through the arithmetic.
    """
    xs = components_of(a)
    ys = components_of(b)
    if strict and len(xs) != len(ys):
        raise DimensionMismatchError(expected=len(xs), actual=len(ys))
    return sqrt(sum((x - y) * (x - y) for x, y in zip(xs, ys)))
