"""Variable-length array values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class VarLenArray:
    """An immutable sequence of items of variable length."""

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: tuple[Any, ...] = tuple(items) if items is not None else ()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VarLenArray):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(item) for item in self._items) + "]"

    def to_list(self) -> list[Any]:
        return list(self._items)