from __future__ import annotations

"""Thread-safe, lazily initialised single-instance helpers."""

from .accessor import Instance, SharedInstanceAccessor, default_accessor, get_instance
from .extra import LockedSingleton, LockedSingletonMeta
from .wraps import shared

__all__ = [
    "Instance",
    "SharedInstanceAccessor",
    "default_accessor",
    "get_instance",
    "LockedSingleton",
    "LockedSingletonMeta",
    "shared",
]
