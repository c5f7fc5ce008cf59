"""Dataspace classes, selection operators and selection kinds."""

from __future__ import annotations

from enum import IntEnum

ALL = 0
"""Identifier that stands for the whole dataspace."""

UNLIMITED = (1 << 64) - 1
"""Maximum extent of a dimension that can grow without bound."""

MAX_RANK = 32
"""Largest number of dimensions a dataspace can have."""


class SpaceClass(IntEnum):
    """Class of a dataspace extent."""

    NO_CLASS = -1
    SCALAR = 0
    SIMPLE = 1
    NULL = 2


class SelectOperator(IntEnum):
    """How a new selection is combined with the existing one."""

    NOOP = -1
    SET = 0
    OR = 1
    AND = 2
    XOR = 3
    NOTB = 4
    NOTA = 5
    APPEND = 6
    PREPEND = 7
    INVALID = 8


class SelectionType(IntEnum):
    """Kind of selection held by a dataspace."""

    ERROR = -1
    NONE = 0
    POINTS = 1
    HYPERSLABS = 2
    ALL = 3
    N = 4


def is_unlimited(dim: int) -> bool:
    """Return whether the maximum extent ``dim`` means "unlimited"."""
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise TypeError(f"dimension must be an integer, got {dim!r}")
    return dim == UNLIMITED