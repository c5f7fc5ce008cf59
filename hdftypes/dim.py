"""Shape helpers: a shape is an int, or a sequence of ints."""

from __future__ import annotations

from collections.abc import Sequence
from math import prod
from typing import Union

Shape = Union[int, Sequence[int]]


def _check_extent(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"dimension must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"dimension must be non-negative, got {value}")
    return value


def dims(shape: Shape) -> list[int]:
    """Return the extents of ``shape`` as a list."""
    if isinstance(shape, (str, bytes)):
        raise TypeError(f"invalid shape: {shape!r}")
    if isinstance(shape, Sequence):
        return [_check_extent(extent) for extent in shape]
    return [_check_extent(shape)]


def ndim(shape: Shape) -> int:
    """Return the number of dimensions of ``shape``."""
    return len(dims(shape))


def size(shape: Shape) -> int:
    """Return the number of elements; a scalar (empty) shape holds one."""
    return prod(dims(shape))