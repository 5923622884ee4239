from __future__ import annotations


from .static import (
    DEFAULT_CLASS_COLOR,
    DEFAULT_FUNCTION_COLOR,
    EVENT_COLORS,
    FALLBACK_EVENT_COLOR,
    RESET_COLOR,
)
from typing import Dict, Any, Union


class LoggerFormatter:

    max_extra_lengths: Dict[str, int] = {}

    @classmethod
    def get_extra_length(cls, key: str, value: str) -> int:
        """
        Returns the max length seen so far for an extra key
        """
        if key not in cls.max_extra_lengths:
            cls.max_extra_lengths[key] = len(key)
        if len(value) > cls.max_extra_lengths[key]:
            cls.max_extra_lengths[key] = len(value)
        return cls.max_extra_lengths[key]

    @classmethod
    def event_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Formats the prefix for records bound with ``event`` / ``cell``.
        """
        _extra: Dict[str, Any] = record.get('extra', {})
        event: str = str(_extra.get('event'))
        event_color = EVENT_COLORS.get(event.lower(), FALLBACK_EVENT_COLOR)
        extra = event_color + '{extra[event]}</>:'
        if _extra.get('cell'):
            cell_length = cls.get_extra_length('cell', str(_extra['cell']))
            extra += '<b><fg #006d77>{extra[cell]:<' + str(cell_length) + '}</></>: '
        else:
            extra += ' '
        return extra

    @classmethod
    def default_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Module-aware formatter.

        Records bound with ``logger.bind(event='created', cell='...')`` get a
        coloured event prefix instead of the ``module:function`` one.
        """
        _extra = record.get('extra', {})
        if _extra.get('event'):
            extra = cls.event_formatter(record)
        elif _extra.get('module_name'):
            extra = DEFAULT_CLASS_COLOR + '{extra[module_name]}</>:' + DEFAULT_FUNCTION_COLOR + '{function}</>: '
        else:
            extra = DEFAULT_CLASS_COLOR + '{name}</>:' + DEFAULT_FUNCTION_COLOR + '{function}</>: '
        return "<level>{level: <8}</> <green>{time:YYYY-MM-DD HH:mm:ss.SSS}</>: " \
                   + extra + "<level>{message}</level>" + RESET_COLOR + "\n{exception}"
