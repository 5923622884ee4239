from __future__ import annotations

"""Factory helpers for configuring ``lzi`` logging.

A single loguru core backs every logger handed out here.  Named loggers are
cheap views over that core that carry their module name in ``extra`` so the
formatter can prefix records with it.
"""

import atexit as _atexit
import os
import sys
import threading
import typing as t

from loguru._logger import Core as _Core
from loguru._logger import Logger as _Logger

from .formatters import LoggerFormatter
from .null_logger import NullLogger
from .static import LOGLEVEL_MAPPING, REVERSE_LOGLEVEL_MAPPING

if t.TYPE_CHECKING:
    from pydantic_settings import BaseSettings

_lock = threading.Lock()
_logger_contexts: t.Dict[str, 'Logger'] = {}
_handler_id: t.Optional[int] = None
_DISABLE_QUEUE = os.getenv('LZI_DISABLE_LOGURU_QUEUE', '0') == '1'

__all__ = [
    "Logger",
    "create_global_logger",
    "create_default_logger",
    "change_logger_level",
    "get_default_logger_level",
    "get_logger",
    "logger",
    "default_logger",
    "null_logger",
]


class Logger(_Logger):
    """Loguru logger carrying a registry name and optional settings."""

    name: t.Optional[str] = None
    settings: t.Optional['BaseSettings'] = None
    is_global: bool = False


def _normalize_level(level: t.Union[str, int]) -> str:
    if isinstance(level, int):
        return LOGLEVEL_MAPPING.get(level, 'INFO')
    level = level.upper()
    if level not in REVERSE_LOGLEVEL_MAPPING:
        raise ValueError(f"Unknown log level: {level}")
    return level


def _add_stdout_handler(
    _logger: 'Logger',
    level: str,
    format: t.Optional[t.Callable[[t.Dict[str, t.Any]], str]] = None,
    **kwargs: t.Any,
) -> int:
    return _logger.add(
        sys.stdout,
        enqueue = not _DISABLE_QUEUE,
        backtrace = True,
        colorize = True,
        level = level,
        format = format if format is not None else LoggerFormatter.default_formatter,
        **kwargs,
    )


def create_global_logger(
    name: str = "lzi",
    level: t.Union[str, int] = "INFO",
    format: t.Optional[t.Callable[[t.Dict[str, t.Any]], str]] = None,
    settings: t.Optional['BaseSettings'] = None,
    **kwargs: t.Any,
) -> Logger:
    """Instantiate the shared global loguru logger used across ``lzi``.

    Args:
        name: Registry key for the logger instance.
        level: Minimum level for the stdout handler.
        format: Optional callable used to format log records.
        settings: Optional settings object attached to the logger.
        **kwargs: Forwarded to :meth:`loguru.Logger.add`.
    """
    global _handler_id
    _logger = Logger(
        core = _Core(),
        exception = None,
        depth = 0,
        record = False,
        lazy = False,
        colors = False,
        raw = False,
        capture = True,
        patchers = [],
        extra = {},
    )
    _logger.name = name
    _logger.is_global = True
    _atexit.register(_logger.remove)

    _handler_id = _add_stdout_handler(_logger, _normalize_level(level), format = format, **kwargs)
    if settings: _logger.settings = settings
    _logger_contexts[name] = _logger
    return _logger


def create_default_logger(
    name: t.Optional[str] = None,
    level: t.Union[str, int] = "INFO",
    settings: t.Optional['BaseSettings'] = None,
    **kwargs: t.Any,
) -> Logger:
    """Return the global logger, or a named view over it.

    ``name`` is usually ``__name__``; only its root component is used as the
    registry key, so every module in a package shares one logger.
    """
    if name:
        if name.upper() in REVERSE_LOGLEVEL_MAPPING:
            level = name
            name = None
        else:
            name = name.split('.')[0]

    if name is None: name = 'lzi'
    if name in _logger_contexts:
        return _logger_contexts[name]

    with _lock:
        if name in _logger_contexts:
            return _logger_contexts[name]
        if name == 'lzi' or 'lzi' not in _logger_contexts:
            _global = create_global_logger(level = level, settings = settings, **kwargs)
            if name == 'lzi': return _global

        _logger = _logger_contexts['lzi']
        *options, extra = _logger._options
        new_logger = Logger(_logger._core, *options, {**extra, 'module_name': name})
        new_logger.name = name
        if settings: new_logger.settings = settings
        _logger_contexts[name] = new_logger
        return new_logger


def change_logger_level(
    level: t.Union[str, int] = "INFO",
    verbose: bool = False,
    **kwargs: t.Any,
) -> None:
    """Swap the stdout handler of the global logger for one at ``level``."""
    global logger_level, _handler_id
    level = _normalize_level(level)
    if level == logger_level: return
    with _lock:
        if _handler_id is not None:
            logger.remove(_handler_id)
        _handler_id = _add_stdout_handler(logger, level, **kwargs)
        previous, logger_level = logger_level, level
    if verbose: logger.info(f"Changing logger level from {previous} -> {level}")


def get_default_logger_level() -> str:
    """Level from the environment. ``DEBUG_ENABLED=True`` wins over ``LZI_LOG_LEVEL``."""
    if os.getenv('LOGGING_DEBUG_ENABLED', os.getenv('DEBUG_ENABLED')) == 'True':
        return 'DEBUG'
    return os.getenv('LZI_LOG_LEVEL', 'INFO').upper()


logger_level: str = get_default_logger_level()


get_logger = create_default_logger
logger = create_default_logger('lzi', level = logger_level)
default_logger = logger
null_logger = NullLogger(name = 'null_logger')
