from __future__ import annotations

"""Abstract factory: families of furniture that share a style."""

import abc
import typing as t
from enum import Enum

from pydantic import BaseModel, ConfigDict

from lzi.errors import UnsupportedStyleError


class FurnitureStyle(str, Enum):
    classic = 'classic'
    modern = 'modern'


class Chair(BaseModel):
    model_config = ConfigDict(frozen = True)

    name: str
    material: str


class Table(BaseModel):
    model_config = ConfigDict(frozen = True)

    name: str
    material: str


class FurnitureFactory(abc.ABC):
    """Makes a matching chair and table."""

    style: t.ClassVar[FurnitureStyle]

    @abc.abstractmethod
    def make_chair(self) -> Chair:
        ...

    @abc.abstractmethod
    def make_table(self) -> Table:
        ...


class ClassicFurnitureFactory(FurnitureFactory):

    style = FurnitureStyle.classic

    def make_chair(self) -> Chair:
        return Chair(name = "Classic Chair", material = "Wood")

    def make_table(self) -> Table:
        return Table(name = "Classic Table", material = "Wood")


class ModernFurnitureFactory(FurnitureFactory):

    style = FurnitureStyle.modern

    def make_chair(self) -> Chair:
        return Chair(name = "Modern Chair", material = "Plastic")

    def make_table(self) -> Table:
        return Table(name = "Modern Table", material = "Plastic")


_factories: t.Dict[str, t.Type[FurnitureFactory]] = {
    FurnitureStyle.classic.value: ClassicFurnitureFactory,
    FurnitureStyle.modern.value: ModernFurnitureFactory,
}


def new_furniture_factory(style: t.Union[str, FurnitureStyle]) -> FurnitureFactory:
    """
    Returns the factory for ``style``.

    Matching is exact: ``"Classic"`` is not ``"classic"``.

    Raises:
        UnsupportedStyleError: no factory exists for ``style``
    """
    if isinstance(style, FurnitureStyle): style = style.value
    if style not in _factories:
        raise UnsupportedStyleError(style)
    return _factories[style]()


__all__ = [
    "FurnitureStyle",
    "Chair",
    "Table",
    "FurnitureFactory",
    "ClassicFurnitureFactory",
    "ModernFurnitureFactory",
    "new_furniture_factory",
]
