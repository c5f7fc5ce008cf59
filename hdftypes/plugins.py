"""Plugin kinds and plugin loading flags."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class PluginType(IntEnum):
    """Kind of a dynamically loaded plugin."""

    ERROR = -1
    FILTER = 0
    NONE = 1


class PluginFlag(IntFlag):
    """Which kinds of plugins may be loaded."""

    FILTER = 0x0001
    ALL = 0xFFFF


def filter_plugins_enabled(flags: int) -> bool:
    """Return whether the loading state ``flags`` allows filter plugins."""
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise TypeError(f"flags must be an integer, got {flags!r}")
    return bool(flags & PluginFlag.FILTER)