"""Datatype classes, byte orders, paddings and conversion settings."""

from __future__ import annotations

import struct
from enum import IntEnum

VARIABLE = (1 << (8 * struct.calcsize("P"))) - 1
"""Size value that marks a variable-length string type."""

OPAQUE_TAG_MAX = 256
"""Maximum length of an opaque type tag."""


class TypeClass(IntEnum):
    """Class of a datatype."""

    NO_CLASS = -1
    INTEGER = 0
    FLOAT = 1
    TIME = 2
    STRING = 3
    BITFIELD = 4
    OPAQUE = 5
    COMPOUND = 6
    REFERENCE = 7
    ENUM = 8
    VLEN = 9
    ARRAY = 10
    NCLASSES = 11


class ByteOrder(IntEnum):
    """Byte order of an atomic datatype."""

    ERROR = -1
    LE = 0
    BE = 1
    VAX = 2
    MIXED = 3
    NONE = 4


class Sign(IntEnum):
    """Signedness of an integer datatype."""

    ERROR = -1
    NONE = 0
    TWOS_COMPLEMENT = 1
    NSGN = 2


class Norm(IntEnum):
    """Mantissa normalization of a floating-point datatype."""

    ERROR = -1
    IMPLIED = 0
    MSBSET = 1
    NONE = 2


class CharSet(IntEnum):
    """Character set of a string datatype."""

    ERROR = -1
    ASCII = 0
    UTF8 = 1
    RESERVED_2 = 2
    RESERVED_3 = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    RESERVED_7 = 7
    RESERVED_8 = 8
    RESERVED_9 = 9
    RESERVED_10 = 10
    RESERVED_11 = 11
    RESERVED_12 = 12
    RESERVED_13 = 13
    RESERVED_14 = 14
    RESERVED_15 = 15


NCSET = CharSet.RESERVED_2
"""Number of character sets actually in use."""


class StrPad(IntEnum):
    """How a fixed-size string is terminated or padded."""

    ERROR = -1
    NULLTERM = 0
    NULLPAD = 1
    SPACEPAD = 2
    RESERVED_3 = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    RESERVED_7 = 7
    RESERVED_8 = 8
    RESERVED_9 = 9
    RESERVED_10 = 10
    RESERVED_11 = 11
    RESERVED_12 = 12
    RESERVED_13 = 13
    RESERVED_14 = 14
    RESERVED_15 = 15


NSTR = StrPad.RESERVED_3
"""Number of string padding kinds actually in use."""


class Pad(IntEnum):
    """Padding of unused bits in an atomic datatype."""

    ERROR = -1
    ZERO = 0
    ONE = 1
    BACKGROUND = 2
    NPAD = 3


class ConvCommand(IntEnum):
    """Command passed to a conversion function."""

    INIT = 0
    CONV = 1
    FREE = 2


class BackgroundNeed(IntEnum):
    """Whether a conversion needs a background buffer."""

    NO = 0
    TEMP = 1
    YES = 2


class Persistence(IntEnum):
    """Kind of a registered conversion path."""

    DONTCARE = -1
    HARD = 0
    SOFT = 1


class Direction(IntEnum):
    """Search direction when looking up a native datatype."""

    DEFAULT = 0
    ASCEND = 1
    DESCEND = 2


class ConvException(IntEnum):
    """Kind of exception raised during a datatype conversion."""

    RANGE_HI = 0
    RANGE_LOW = 1
    PRECISION = 2
    TRUNCATE = 3
    PINF = 4
    NINF = 5
    NAN = 6


class ConvResult(IntEnum):
    """What a conversion exception handler did."""

    ABORT = -1
    UNHANDLED = 0
    HANDLED = 1


def is_variable(size: int) -> bool:
    """Return whether ``size`` marks a variable-length string type."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {size!r}")
    return size == VARIABLE