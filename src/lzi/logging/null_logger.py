from __future__ import annotations

"""No-op logger that still forwards rendered messages to optional hooks."""

import typing as t


def format_message(message: t.Any, *args: t.Any, extra: t.Optional[t.Dict[str, t.Any]] = None) -> str:
    """Render ``message`` the way loguru would, then append ``extra`` lines."""
    rendered = str(message)
    if args and '{' in rendered:
        try:
            rendered = rendered.format(*args)
        except (IndexError, KeyError, ValueError):
            rendered = ' '.join([rendered, *(str(a) for a in args)])
    elif args:
        rendered = ' '.join([rendered, *(str(a) for a in args)])
    if extra:
        rendered += '\n' + '\n'.join(f'- {k}: {v}' for k, v in extra.items())
    return rendered


class NullLogger:
    """Logger that drops output, delegating only to an explicit ``hook``."""

    def __init__(self, name: str = 'null_logger'):
        self.name = name

    def log(
        self,
        level: t.Union[str, int],
        message: t.Any,
        *args: t.Any,
        hook: t.Optional[t.Callable[[str], None]] = None,
        extra: t.Optional[t.Dict[str, t.Any]] = None,
        **kwargs: t.Any,
    ) -> None:
        if not hook: return
        hook(format_message(message, *args, extra = extra))

    def bind(self, **kwargs: t.Any) -> 'NullLogger':
        return self

    def opt(self, *args: t.Any, **kwargs: t.Any) -> 'NullLogger':
        return self

    def trace(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('TRACE', *args, **kwargs)

    def debug(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('DEBUG', *args, **kwargs)

    def info(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('INFO', *args, **kwargs)

    def success(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('SUCCESS', *args, **kwargs)

    def warning(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('WARNING', *args, **kwargs)

    def error(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('ERROR', *args, **kwargs)

    def exception(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('ERROR', *args, **kwargs)

    def critical(self, *args: t.Any, **kwargs: t.Any) -> None:
        self.log('CRITICAL', *args, **kwargs)


__all__ = ["NullLogger", "format_message"]
