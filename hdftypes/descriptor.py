"""Descriptions of in-memory value layouts: scalars, strings, arrays and compounds."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from .strings import VarLenAscii, VarLenUnicode

_POINTER_SIZE = struct.calcsize("P")
_HVL_SIZE = struct.calcsize("nP")
_MAX_TUPLE_LEN = 12


def _round_up(value: int, align: int) -> int:
    if align <= 1:
        return value
    return -(-value // align) * align


class IntSize(Enum):
    """Width of an integer type in bytes."""

    U1 = 1
    U2 = 2
    U4 = 4
    U8 = 8

    @classmethod
    def from_int(cls, size: int) -> Optional[IntSize]:
        if isinstance(size, bool) or not isinstance(size, int):
            return None
        try:
            return cls(size)
        except ValueError:
            return None


class FloatSize(Enum):
    """Width of a floating-point type in bytes."""

    U4 = 4
    U8 = 8

    @classmethod
    def from_int(cls, size: int) -> Optional[FloatSize]:
        if isinstance(size, bool) or not isinstance(size, int):
            return None
        try:
            return cls(size)
        except ValueError:
            return None


class TypeDescriptor(ABC):
    """Describes the memory layout of one value."""

    @abstractmethod
    def size(self) -> int:
        """Return the size of a value in bytes."""

    def _c_alignment(self) -> int:
        return self.size()

    def to_c_repr(self) -> TypeDescriptor:
        """Return the layout with compounds laid out as C structs."""
        return self

    def to_packed_repr(self) -> TypeDescriptor:
        """Return the layout with compounds packed without padding."""
        return self


@dataclass(frozen=True)
class IntegerType(TypeDescriptor):
    width: IntSize

    def size(self) -> int:
        return self.width.value


@dataclass(frozen=True)
class UnsignedType(TypeDescriptor):
    width: IntSize

    def size(self) -> int:
        return self.width.value


@dataclass(frozen=True)
class FloatType(TypeDescriptor):
    width: FloatSize

    def size(self) -> int:
        return self.width.value


@dataclass(frozen=True)
class BooleanType(TypeDescriptor):
    def size(self) -> int:
        return 1


@dataclass(frozen=True)
class EnumMember:
    name: str
    value: int


@dataclass(frozen=True)
class EnumType(TypeDescriptor):
    width: IntSize
    signed: bool
    members: tuple[EnumMember, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    def size(self) -> int:
        return self.width.value

    def base_type(self) -> TypeDescriptor:
        return IntegerType(self.width) if self.signed else UnsignedType(self.width)


@dataclass(frozen=True)
class CompoundField:
    name: str
    ty: TypeDescriptor
    offset: int
    index: int

    @classmethod
    def typed(cls, name: str, spec: Any, offset: int, index: int) -> CompoundField:
        return cls(name, type_descriptor(spec), offset, index)


@dataclass(frozen=True)
class CompoundType(TypeDescriptor):
    fields: tuple[CompoundField, ...]
    nbytes: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def size(self) -> int:
        return self.nbytes

    def _c_alignment(self) -> int:
        return max((f.ty._c_alignment() for f in self.fields), default=1)

    def to_c_repr(self) -> CompoundType:
        offset = 0
        max_align = 1
        nbytes = self.nbytes
        laid_out = []
        for f in sorted(self.fields, key=lambda f: f.index):
            ty = f.ty.to_c_repr()
            align = ty._c_alignment()
            offset = _round_up(offset, align)
            laid_out.append(replace(f, ty=ty, offset=offset))
            max_align = max(max_align, align)
            offset += ty.size()
            nbytes = _round_up(offset, max_align)
        return CompoundType(laid_out, nbytes)

    def to_packed_repr(self) -> CompoundType:
        offset = 0
        laid_out = []
        for f in sorted(self.fields, key=lambda f: f.index):
            ty = f.ty.to_packed_repr()
            laid_out.append(replace(f, ty=ty, offset=offset))
            offset += ty.size()
        return CompoundType(laid_out, offset)


@dataclass(frozen=True)
class FixedArrayType(TypeDescriptor):
    ty: TypeDescriptor
    length: int

    def size(self) -> int:
        return self.ty.size() * self.length

    def _c_alignment(self) -> int:
        return self.ty._c_alignment()

    def to_c_repr(self) -> FixedArrayType:
        return FixedArrayType(self.ty.to_c_repr(), self.length)

    def to_packed_repr(self) -> FixedArrayType:
        return FixedArrayType(self.ty.to_packed_repr(), self.length)


@dataclass(frozen=True)
class FixedAsciiType(TypeDescriptor):
    length: int

    def size(self) -> int:
        return self.length

    def _c_alignment(self) -> int:
        return 1


@dataclass(frozen=True)
class FixedUnicodeType(TypeDescriptor):
    length: int

    def size(self) -> int:
        return self.length

    def _c_alignment(self) -> int:
        return 1


@dataclass(frozen=True)
class VarLenArrayType(TypeDescriptor):
    ty: TypeDescriptor

    def size(self) -> int:
        return _HVL_SIZE

    def _c_alignment(self) -> int:
        return _POINTER_SIZE

    def to_c_repr(self) -> VarLenArrayType:
        return VarLenArrayType(self.ty.to_c_repr())

    def to_packed_repr(self) -> VarLenArrayType:
        return VarLenArrayType(self.ty.to_packed_repr())


@dataclass(frozen=True)
class VarLenAsciiType(TypeDescriptor):
    def size(self) -> int:
        return _POINTER_SIZE


@dataclass(frozen=True)
class VarLenUnicodeType(TypeDescriptor):
    def size(self) -> int:
        return _POINTER_SIZE


_POINTER_INT = IntSize(_POINTER_SIZE)

_SCALARS: dict[str, TypeDescriptor] = {
    "bool": BooleanType(),
    "i8": IntegerType(IntSize.U1),
    "i16": IntegerType(IntSize.U2),
    "i32": IntegerType(IntSize.U4),
    "i64": IntegerType(IntSize.U8),
    "u8": UnsignedType(IntSize.U1),
    "u16": UnsignedType(IntSize.U2),
    "u32": UnsignedType(IntSize.U4),
    "u64": UnsignedType(IntSize.U8),
    "f32": FloatType(FloatSize.U4),
    "f64": FloatType(FloatSize.U8),
    "isize": IntegerType(_POINTER_INT),
    "usize": UnsignedType(_POINTER_INT),
}


def type_descriptor(spec: Any) -> TypeDescriptor:
    """Return the descriptor for ``spec``.

    ``spec`` may be a descriptor, a scalar name such as ``"u16"`` or ``"f64"``,
    ``bool``, ``int`` or ``float``, the ``VarLenAscii`` or ``VarLenUnicode``
    class, a tuple of specs (a compound) or ``[spec, length]`` (a fixed array).
    """
    if isinstance(spec, TypeDescriptor):
        return spec
    if isinstance(spec, str):
        try:
            return _SCALARS[spec]
        except KeyError:
            raise ValueError(f"unknown type name: {spec!r}") from None
    if spec is bool:
        return BooleanType()
    if spec is int:
        return IntegerType(IntSize.U8)
    if spec is float:
        return FloatType(FloatSize.U8)
    if spec is VarLenAscii:
        return VarLenAsciiType()
    if spec is VarLenUnicode:
        return VarLenUnicodeType()
    if isinstance(spec, tuple):
        return tuple_type(*spec)
    if isinstance(spec, list):
        if len(spec) != 2:
            raise TypeError(f"fixed array spec must be [spec, length], got {spec!r}")
        item, length = spec
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise TypeError(f"fixed array length must be a non-negative integer: {length!r}")
        return FixedArrayType(type_descriptor(item), length)
    raise TypeError(f"unsupported type spec: {spec!r}")


def tuple_type(*args: Any) -> CompoundType:
    """Return the compound layout of a native tuple with the given member types.

    All members but the last are ordered by decreasing alignment; the last stays
    at the end. Fields are listed in order of offset.
    """
    if not 1 <= len(args) <= _MAX_TUPLE_LEN:
        raise TypeError(f"tuples must have 1 to {_MAX_TUPLE_LEN} members, got {len(args)}")
    types = [type_descriptor(arg) for arg in args]
    last = len(types) - 1
    order = sorted(
        range(last), key=lambda i: (types[i].size() != 0, -types[i]._c_alignment())
    )
    order.append(last)

    offsets = [0] * len(types)
    offset = 0
    max_align = 1
    for i in order:
        align = types[i]._c_alignment()
        offset = _round_up(offset, align)
        offsets[i] = offset
        offset += types[i].size()
        max_align = max(max_align, align)

    fields = [CompoundField(str(i), ty, offsets[i], i) for i, ty in enumerate(types)]
    fields.sort(key=lambda f: f.offset)
    return CompoundType(fields, _round_up(offset, max_align))