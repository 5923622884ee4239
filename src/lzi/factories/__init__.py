from __future__ import annotations

"""Factory illustrations: a simple factory and an abstract factory."""

from .simple import Car, CarFactory, ElectricCar, GasCar
from .abstract import (
    Chair,
    ClassicFurnitureFactory,
    FurnitureFactory,
    FurnitureStyle,
    ModernFurnitureFactory,
    Table,
    new_furniture_factory,
)

__all__ = [
    "Car",
    "CarFactory",
    "ElectricCar",
    "GasCar",
    "Chair",
    "Table",
    "FurnitureStyle",
    "FurnitureFactory",
    "ClassicFurnitureFactory",
    "ModernFurnitureFactory",
    "new_furniture_factory",
]
