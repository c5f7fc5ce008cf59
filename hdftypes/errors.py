"""Error frames, error stacks and the exceptions raised by the package."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional

_UNKNOWN = "unknown library error"


class ErrorFrame:
    """One frame of a library error stack."""

    def __init__(self, desc: str, func: str, major: str, minor: str) -> None:
        self.desc = desc
        self.func = func
        self.major = major
        self.minor = minor
        self.description = f"{func}(): {desc}"

    def detail(self) -> str:
        return f"Error in {self.func}(): {self.desc} [{self.major}: {self.minor}]"

    def __repr__(self) -> str:
        return f"ErrorFrame({self.description!r})"


class ErrorStack:
    """An ordered collection of error frames, outermost first."""

    def __init__(self) -> None:
        self._frames: list[ErrorFrame] = []
        self._description: Optional[str] = None

    def push(self, frame: ErrorFrame) -> None:
        self._frames.append(frame)
        top = self._frames[0].description
        if len(self._frames) == 1:
            self._description = top
        else:
            self._description = f"{top}: {self._frames[-1].desc}"

    def __len__(self) -> int:
        return len(self._frames)

    def __getitem__(self, index: int) -> ErrorFrame:
        return self._frames[index]

    def __iter__(self) -> Iterator[ErrorFrame]:
        return iter(self._frames)

    @property
    def description(self) -> str:
        return self._description if self._description is not None else _UNKNOWN

    def top(self) -> Optional[ErrorFrame]:
        return self._frames[0] if self._frames else None

    def detail(self) -> Optional[str]:
        top = self.top()
        return top.detail() if top is not None else None


class H5Error(Exception):
    """Base class of all errors raised by the package."""

    @property
    def description(self) -> str:
        return str(self)


class LibraryError(H5Error):
    """An error reported by the storage library, with its full stack."""

    def __init__(self, stack: ErrorStack) -> None:
        super().__init__(stack.description)
        self.stack = stack


class InternalError(H5Error):
    """A usage error detected by the package itself."""


def h5check(
    value: int,
    signed: bool = True,
    query: Optional[Callable[[], Optional[ErrorStack]]] = None,
) -> int:
    """Return ``value`` unless it signals failure and ``query`` reports an error stack.

    A signed result signals failure when negative, an unsigned one when zero.
    """
    failed = value < 0 if signed else value == 0
    if failed and query is not None:
        stack = query()
        if stack is not None and len(stack) > 0:
            raise LibraryError(stack)
    return value