from __future__ import annotations

"""Initialise-exactly-once container.

:class:`OnceCell` owns a single slot and the lock that guards writes to it.
Reads take a fast path that never touches the lock: the slot is loaded once
into a local and compared against the ``EMPTY`` sentinel. A single attribute
load or store of an object reference is atomic in CPython (free-threaded
builds included), and the value is only stored after the factory has
returned, so a reader either sees ``EMPTY`` or a fully constructed object.
"""

import threading
import typing as t

from lzi.errors import OnceCellError
from lzi.logging import logger

T = t.TypeVar('T')


class Constant(tuple):
    """Pretty display helper for immutable sentinel values."""

    def __new__(cls, name):
        return tuple.__new__(cls, (name,))

    def __repr__(self):
        return f'{self[0]}'


EMPTY = Constant('EMPTY')


class OnceCell(t.Generic[T]):
    """A slot that is written at most once, under a lock.

    Args:
        factory: Default zero-argument callable used to build the value.
            Can be overridden per call in :meth:`get_or_init`.
        name: Label used in log records and error messages. Defaults to the
            factory's qualified name.
        on_init: Optional callback invoked with the new value while the guard
            is held, just before it is published. If it raises, nothing is
            published and the next call starts over.

    Example:
        >>> cell = OnceCell(dict)
        >>> cell.get_or_init() is cell.get_or_init()
        True
    """

    def __init__(
        self,
        factory: t.Optional[t.Callable[[], T]] = None,
        name: t.Optional[str] = None,
        on_init: t.Optional[t.Callable[[T], None]] = None,
    ):
        self._value: t.Union[T, Constant] = EMPTY
        self._factory = factory
        self._on_init = on_init
        self._lock = threading.Lock()
        self._owner: t.Optional[int] = None
        if name is None and factory is not None:
            name = getattr(factory, '__qualname__', None)
        self.name = name or 'OnceCell'

    @property
    def is_set(self) -> bool:
        """Whether the value has been published."""
        return self._value is not EMPTY

    @property
    def locked(self) -> bool:
        """Whether an initialisation is currently in progress."""
        return self._lock.locked()

    def get(self) -> t.Optional[T]:
        """Returns the value, or ``None`` when the cell is still empty."""
        value = self._value
        return None if value is EMPTY else value

    def ensure(self, factory: t.Optional[t.Callable[[], T]] = None) -> t.Tuple[T, bool]:
        """Returns ``(value, created)``, building the value on first call.

        ``created`` is ``True`` for exactly one caller over the life of the
        cell: the one whose factory call produced the published value.

        Raises:
            OnceCellError: the cell is empty and no factory is available, or
                the factory tried to read the cell it is initialising.
            Exception: whatever the factory or ``on_init`` raises. The cell
                stays empty and the lock is released, so a later call can retry.
        """
        value = self._value
        if value is not EMPTY:
            return value, False

        if self._owner == threading.get_ident():
            raise OnceCellError('re-entrant initialisation detected', self.name)

        with self._lock:
            value = self._value
            if value is not EMPTY:
                return value, False

            if factory is None: factory = self._factory
            if factory is None:
                raise OnceCellError('cell is empty and no factory was provided', self.name)

            self._owner = threading.get_ident()
            try:
                value = factory()
                if self._on_init is not None:
                    self._on_init(value)
            except Exception as e:
                logger.bind(event = 'failed', cell = self.name).debug(f'Initialisation failed: {e!r}')
                raise
            finally:
                self._owner = None

            self._value = value

        logger.bind(event = 'created', cell = self.name).debug('Value initialised')
        return value, True

    def get_or_init(self, factory: t.Optional[t.Callable[[], T]] = None) -> T:
        """Returns the value, building it with ``factory`` on first call."""
        return self.ensure(factory)[0]

    def set(self, value: T) -> bool:
        """Publishes ``value`` if the cell is empty.

        Returns ``True`` when this call stored the value.
        """
        if self._value is not EMPTY:
            return False
        if self._owner == threading.get_ident():
            raise OnceCellError('re-entrant initialisation detected', self.name)
        with self._lock:
            if self._value is not EMPTY:
                return False
            if self._on_init is not None:
                self._owner = threading.get_ident()
                try:
                    self._on_init(value)
                finally:
                    self._owner = None
            self._value = value
        return True

    def __repr__(self) -> str:
        state = 'set' if self.is_set else 'empty'
        return f'<{self.__class__.__name__} {self.name!r} {state}>'


__all__ = ["OnceCell", "EMPTY", "Constant"]
