"""Reference kinds and their stored sizes."""

from __future__ import annotations

from enum import IntEnum

OBJECT_REF_SIZE = 8
"""Size in bytes of an object reference (a file address)."""

DSET_REGION_REF_SIZE = 12
"""Size in bytes of a dataset region reference."""


class RefType(IntEnum):
    """Kind of a reference."""

    BADTYPE = -1
    OBJECT = 0
    DATASET_REGION = 1
    MAXTYPE = 2


_SIZES = {
    RefType.OBJECT: OBJECT_REF_SIZE,
    RefType.DATASET_REGION: DSET_REGION_REF_SIZE,
}


def reference_size(ref_type: int) -> int:
    """Return the size in bytes of a stored reference of kind ``ref_type``."""
    if isinstance(ref_type, bool) or not isinstance(ref_type, int):
        raise TypeError(f"reference type must be an integer, got {ref_type!r}")
    kind = RefType(ref_type)
    try:
        return _SIZES[kind]
    except KeyError:
        raise ValueError(f"no stored size for reference type {kind.name}") from None