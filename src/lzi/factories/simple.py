from __future__ import annotations

"""Simple factory: picks a car implementation from ``CAR_PREFERENCE``."""

import abc

from lzi.configs import CarPreference, CarSettings
from lzi.logging import logger


class Car(abc.ABC):

    @abc.abstractmethod
    def drive(self) -> str:
        ...

    @abc.abstractmethod
    def fuel_type(self) -> str:
        ...


class ElectricCar(Car):

    def drive(self) -> str:
        return "Driving an electric car"

    def fuel_type(self) -> str:
        return "Powered by electricity"


class GasCar(Car):

    def drive(self) -> str:
        return "Driving a gas-powered car"

    def fuel_type(self) -> str:
        return "Powered by gasoline"


class CarFactory:
    """Builds the car selected by the environment.

    The preference is read on every call, so changing ``CAR_PREFERENCE``
    between calls changes the product.
    """

    def create_car(self) -> Car:
        preference = CarSettings().car_preference
        logger.debug(f'Creating car for preference: {preference.value}')
        if preference == CarPreference.electric:
            return ElectricCar()
        return GasCar()


__all__ = ["Car", "ElectricCar", "GasCar", "CarFactory"]
