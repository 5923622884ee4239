from __future__ import annotations

"""Lazily constructed, process-wide shared instance."""

import typing as t

from lzi.logging import logger
from lzi.once import OnceCell

T = t.TypeVar('T')


class Instance:
    """The shared object. Carries no state; only its identity matters."""

    def do_something(self) -> str:
        return "Doing something."


class SharedInstanceAccessor(t.Generic[T]):
    """Hands out one lazily built object to every caller.

    The object is built by ``factory`` the first time :meth:`get_instance`
    runs. Concurrent first calls are serialised by the underlying
    :class:`~lzi.once.OnceCell`, so the factory runs once and every caller
    gets the identical object back.

    Args:
        factory: Zero-argument callable that builds the instance.
        name: Label for log records. Defaults to the factory's name.
        announce: Log whether each call created or reused the instance.
            ``None`` defers to ``LziSettings.announce``.
    """

    def __init__(
        self,
        factory: t.Callable[[], T] = Instance,
        name: t.Optional[str] = None,
        announce: t.Optional[bool] = None,
    ):
        self._cell: OnceCell[T] = OnceCell(factory, name = name)
        self._announce = announce

    @property
    def name(self) -> str:
        return self._cell.name

    @property
    def constructed(self) -> bool:
        """Whether the instance exists yet."""
        return self._cell.is_set

    @property
    def announce(self) -> bool:
        if self._announce is None:
            from lzi.configs import get_settings
            self._announce = get_settings().announce
        return self._announce

    def acquire(self) -> t.Tuple[T, bool]:
        """Returns ``(instance, created)``.

        ``created`` is ``True`` only for the call that built the instance.
        """
        instance, created = self._cell.ensure()
        if self.announce:
            if created:
                logger.bind(event = 'created', cell = self.name).debug('Creating single instance now.')
            else:
                logger.bind(event = 'reused', cell = self.name).debug('Single instance already created.')
        return instance, created

    def get_instance(self) -> T:
        """Returns the shared instance, constructing it on first call."""
        return self.acquire()[0]

    __call__ = get_instance

    def __repr__(self) -> str:
        state = 'constructed' if self.constructed else 'pending'
        return f'<{self.__class__.__name__} {self.name!r} {state}>'


default_accessor: SharedInstanceAccessor[Instance] = SharedInstanceAccessor(Instance, name = 'Instance')


def get_instance() -> Instance:
    """Returns the process-wide :class:`Instance`."""
    return default_accessor.get_instance()


__all__ = ["Instance", "SharedInstanceAccessor", "default_accessor", "get_instance"]
