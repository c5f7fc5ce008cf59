"""Filter identifiers, flags and filter-specific settings."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class FilterId(IntEnum):
    """Identifiers of the predefined filters."""

    ERROR = -1
    NONE = 0
    DEFLATE = 1
    SHUFFLE = 2
    FLETCHER32 = 3
    SZIP = 4
    NBIT = 5
    SCALEOFFSET = 6
    RESERVED = 256


FILTER_MAX = 65535
"""Largest valid filter identifier."""

FILTER_ALL = 0
"""Symbol meaning "all filters" when removing filters."""

MAX_NFILTERS = 32
"""Largest number of filters in one pipeline."""


class FilterFlag(IntFlag):
    """Flags of a filter in a pipeline."""

    MANDATORY = 0x0000
    OPTIONAL = 0x0001
    REVERSE = 0x0100
    SKIP_EDC = 0x0200


FLAG_DEFMASK = 0x00FF
"""Mask of the flags that are stored with the filter definition."""

FLAG_INVMASK = 0xFF00
"""Mask of the flags that are passed at invocation time."""


class SzipOption(IntFlag):
    """Option bits of the szip filter."""

    ALLOW_K13 = 1
    CHIP = 2
    EC = 4
    NN = 32


SZIP_MAX_PIXELS_PER_BLOCK = 32

SHUFFLE_USER_NPARMS = 0
SHUFFLE_TOTAL_NPARMS = 1

SZIP_USER_NPARMS = 2
SZIP_TOTAL_NPARMS = 4
SZIP_PARM_MASK = 0
SZIP_PARM_PPB = 1
SZIP_PARM_BPP = 2
SZIP_PARM_PPS = 3

NBIT_USER_NPARMS = 0

SCALEOFFSET_USER_NPARMS = 2

SO_INT_MINBITS_DEFAULT = 0

CLASS_T_VERS = 1

FILTER_CONFIG_ENCODE_ENABLED = 0x0001
FILTER_CONFIG_DECODE_ENABLED = 0x0002


class ScaleType(IntEnum):
    """Scaling method of the scale-offset filter."""

    FLOAT_DSCALE = 0
    FLOAT_ESCALE = 1
    INT = 2


class EdcCheck(IntEnum):
    """Whether error detection is performed on read."""

    ERROR = -1
    DISABLE = 0
    ENABLE = 1
    NO = 2


class CallbackReturn(IntEnum):
    """What a filter failure callback asks for."""

    ERROR = -1
    FAIL = 0
    CONT = 1
    NO = 2


def is_reserved_filter(filter_id: int) -> bool:
    """Return whether ``filter_id`` lies in the range reserved for the library."""
    if isinstance(filter_id, bool) or not isinstance(filter_id, int):
        raise TypeError(f"filter id must be an integer, got {filter_id!r}")
    if not 0 <= filter_id <= FILTER_MAX:
        raise ValueError(f"filter id out of range: {filter_id}")
    return filter_id < FilterId.RESERVED