from __future__ import annotations

"""Class-level singleton helpers built on :class:`~lzi.once.OnceCell`."""

import typing as t

from lzi.once import OnceCell


class LockedSingletonMeta(type):
    """Metaclass giving each class its own once-cell for its instance.

    Construction (``__new__`` and ``__init__``) happens once, under the cell's
    lock. Arguments passed to later calls are ignored.
    """

    def __init__(cls, name: str, bases: t.Tuple[type, ...], namespace: t.Dict[str, t.Any], **kwargs: t.Any):
        super().__init__(name, bases, namespace, **kwargs)
        cls._instance_cell = OnceCell(name = cls.__qualname__)

    def __call__(cls, *args: t.Any, **kwargs: t.Any):
        return cls._instance_cell.get_or_init(
            lambda: super(LockedSingletonMeta, cls).__call__(*args, **kwargs)
        )


class LockedSingleton(metaclass = LockedSingletonMeta):
    """Singleton base class, safe for multi-thread initialisation.

    Every subclass gets its own instance:

        >>> class Registry(LockedSingleton):
        ...     def __init__(self):
        ...         self.items = []
        >>> Registry() is Registry()
        True
    """

    @classmethod
    def get_instance(cls):
        return cls()

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance_cell.is_set


__all__ = ["LockedSingletonMeta", "LockedSingleton"]
