"""Fixed-size and variable-length ASCII and UTF-8 string values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


class StringErrorKind(Enum):
    """What went wrong when building a string value."""

    INTERNAL_NULL = "variable length string with internal null"
    INSUFFICIENT_CAPACITY = "insufficient capacity for fixed sized string"
    ASCII_ERROR = "one or more bytes are not ASCII"


class StringError(ValueError):
    """Raised when text cannot be stored in the requested string type."""

    def __init__(self, kind: StringErrorKind) -> None:
        super().__init__(f"string error: {kind.value}")
        self.kind = kind


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def _require_ascii(data: bytes) -> None:
    if not data.isascii():
        raise StringError(StringErrorKind.ASCII_ERROR)


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text


def _check_capacity(capacity: object) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError(f"capacity must be an integer, got {capacity!r}")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return capacity


class _StringValue(ABC):
    """Behaviour shared by all string values; lengths are counted in bytes."""

    __slots__ = ()

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Return the stored bytes, without terminating or padding nulls."""

    def as_str(self) -> str:
        return self.as_bytes().decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self.as_bytes())

    def __bool__(self) -> bool:
        return bool(self.as_bytes())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.as_str() == other
        if isinstance(other, type(self)):
            return self.as_str() == other.as_str()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_str())

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return repr(self.as_str())

    def __bytes__(self) -> bytes:
        return self.as_bytes()


class VarLenAscii(_StringValue):
    """A null-terminated ASCII string of any length."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = b""

    @classmethod
    def _from_bytes(cls, data: bytes) -> VarLenAscii:
        obj = cls()
        obj._data = data.split(b"\0", 1)[0]
        return obj

    @classmethod
    def from_ascii(cls, data: BytesLike) -> VarLenAscii:
        raw = _to_bytes(data)
        if b"\0" in raw:
            raise StringError(StringErrorKind.INTERNAL_NULL)
        _require_ascii(raw)
        return cls._from_bytes(raw)

    @classmethod
    def from_ascii_unchecked(cls, data: BytesLike) -> VarLenAscii:
        """Store ``data`` without checks; it ends at the first null byte."""
        return cls._from_bytes(_to_bytes(data))

    def as_bytes(self) -> bytes:
        return self._data

    def as_str(self) -> str:
        return super().as_str()

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()


class VarLenUnicode(_StringValue):
    """A null-terminated UTF-8 string of any length."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = b""

    @classmethod
    def _from_bytes(cls, data: bytes) -> VarLenUnicode:
        obj = cls()
        obj._data = data.split(b"\0", 1)[0]
        return obj

    @classmethod
    def from_str(cls, text: str) -> VarLenUnicode:
        text = _require_text(text)
        if "\0" in text:
            raise StringError(StringErrorKind.INTERNAL_NULL)
        return cls._from_bytes(text.encode("utf-8"))

    @classmethod
    def from_str_unchecked(cls, text: str) -> VarLenUnicode:
        """Store ``text`` without checks; it ends at the first null character."""
        return cls._from_bytes(_require_text(text).encode("utf-8"))

    def as_bytes(self) -> bytes:
        return self._data

    def as_str(self) -> str:
        return super().as_str()

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()


class _FixedString(_StringValue):
    """A null-padded buffer of a fixed number of bytes."""

    __slots__ = ("_capacity", "_buffer")

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._buffer = bytes(self._capacity)

    @classmethod
    def _from_bytes(cls, data: bytes, capacity: int):
        obj = cls(capacity)
        head = data[: obj._capacity]
        obj._buffer = head + bytes(obj._capacity - len(head))
        return obj

    @property
    def capacity(self) -> int:
        return self._capacity

    def as_bytes(self) -> bytes:
        return self._buffer.rstrip(b"\0")


class FixedAscii(_FixedString):
    """An ASCII string stored in a null-padded buffer of fixed capacity."""

    __slots__ = ()

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    @classmethod
    def from_ascii(cls, data: BytesLike, capacity: int) -> FixedAscii:
        raw = _to_bytes(data)
        if len(raw) > _check_capacity(capacity):
            raise StringError(StringErrorKind.INSUFFICIENT_CAPACITY)
        _require_ascii(raw)
        return cls._from_bytes(raw, capacity)

    @classmethod
    def from_ascii_unchecked(cls, data: BytesLike, capacity: int) -> FixedAscii:
        """Store ``data`` without checks, truncated to ``capacity`` bytes."""
        return cls._from_bytes(_to_bytes(data), capacity)

    def as_bytes(self) -> bytes:
        return super().as_bytes()

    def as_str(self) -> str:
        return super().as_str()

    def __len__(self) -> int:
        return len(self.as_bytes())

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()


class FixedUnicode(_FixedString):
    """A UTF-8 string stored in a null-padded buffer of fixed capacity in bytes."""

    __slots__ = ()

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    @classmethod
    def from_str(cls, text: str, capacity: int) -> FixedUnicode:
        raw = _require_text(text).encode("utf-8")
        if len(raw) > _check_capacity(capacity):
            raise StringError(StringErrorKind.INSUFFICIENT_CAPACITY)
        return cls._from_bytes(raw, capacity)

    @classmethod
    def from_str_unchecked(cls, text: str, capacity: int) -> FixedUnicode:
        """Store ``text`` without checks, truncated to ``capacity`` bytes."""
        return cls._from_bytes(_require_text(text).encode("utf-8"), capacity)

    def as_bytes(self) -> bytes:
        return super().as_bytes()

    def as_str(self) -> str:
        return super().as_str()

    def __len__(self) -> int:
        return len(self.as_bytes())

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()