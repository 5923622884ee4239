from __future__ import annotations

"""Decorator that turns a class into a shared-instance accessor."""

import typing as t

from .accessor import SharedInstanceAccessor

ObjT = t.TypeVar("ObjT")


@t.overload
def shared(
    obj_cls: t.Callable[[], ObjT],
    name: t.Optional[str] = None,
    announce: t.Optional[bool] = None,
) -> SharedInstanceAccessor[ObjT]:
    ...


@t.overload
def shared(
    obj_cls: None = None,
    name: t.Optional[str] = None,
    announce: t.Optional[bool] = None,
) -> t.Callable[[t.Callable[[], ObjT]], SharedInstanceAccessor[ObjT]]:
    ...


def shared(
    obj_cls: t.Optional[t.Callable[[], ObjT]] = None,
    name: t.Optional[str] = None,
    announce: t.Optional[bool] = None,
) -> t.Union[SharedInstanceAccessor[ObjT], t.Callable[[t.Callable[[], ObjT]], SharedInstanceAccessor[ObjT]]]:
    """Replace ``obj_cls`` with an accessor that builds it once, on first call.

        >>> @shared
        ... class Clock:
        ...     pass
        >>> Clock() is Clock.get_instance()
        True
    """

    if obj_cls is not None:
        return SharedInstanceAccessor(obj_cls, name = name, announce = announce)

    def wrapper(inner_cls: t.Callable[[], ObjT]) -> SharedInstanceAccessor[ObjT]:
        return SharedInstanceAccessor(inner_cls, name = name, announce = announce)

    return wrapper


__all__ = ["shared"]
