from __future__ import annotations

"""
lazyinit

Lazily initialised, thread-safe shared instances, plus small factory and
builder helpers.
"""

from .version import VERSION
from .errors import LziError, OnceCellError, UnsupportedStyleError
from .once import OnceCell
from .singleton import (
    Instance,
    LockedSingleton,
    SharedInstanceAccessor,
    get_instance,
    shared,
)

__version__ = VERSION

__all__ = [
    "VERSION",
    "LziError",
    "OnceCellError",
    "UnsupportedStyleError",
    "OnceCell",
    "Instance",
    "LockedSingleton",
    "SharedInstanceAccessor",
    "get_instance",
    "shared",
]
