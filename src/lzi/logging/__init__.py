from __future__ import annotations

"""Logging helpers for ``lzi``.

Wraps loguru with project defaults: one shared core, a module-aware
formatter, and a :class:`NullLogger` for callers that want silence.
"""

from .static import (
    EVENT_COLORS,
    LOGLEVEL_MAPPING,
    REVERSE_LOGLEVEL_MAPPING,
)
from .formatters import LoggerFormatter
from .null_logger import NullLogger
from .main import (
    Logger,
    create_default_logger,
    change_logger_level,
    get_default_logger_level,
    get_logger,
    default_logger,
    null_logger,
    logger,
)

__all__ = [
    "EVENT_COLORS",
    "LOGLEVEL_MAPPING",
    "REVERSE_LOGLEVEL_MAPPING",
    "LoggerFormatter",
    "NullLogger",
    "Logger",
    "create_default_logger",
    "change_logger_level",
    "get_default_logger_level",
    "get_logger",
    "default_logger",
    "null_logger",
    "logger",
]
