import pytest

from lzi.errors import LziError, UnsupportedStyleError
from lzi.factories import (
    CarFactory,
    Chair,
    ClassicFurnitureFactory,
    ElectricCar,
    FurnitureStyle,
    GasCar,
    ModernFurnitureFactory,
    Table,
    new_furniture_factory,
)


def test_car_factory_defaults_to_gas(monkeypatch):
    monkeypatch.delenv("CAR_PREFERENCE", raising = False)
    car = CarFactory().create_car()

    assert isinstance(car, GasCar)
    assert car.drive() == "Driving a gas-powered car"
    assert car.fuel_type() == "Powered by gasoline"


def test_car_factory_reads_preference_on_every_call(monkeypatch):
    monkeypatch.setenv("CAR_PREFERENCE", "gas")
    factory = CarFactory()
    assert isinstance(factory.create_car(), GasCar)

    monkeypatch.setenv("CAR_PREFERENCE", "electric")
    car = factory.create_car()
    assert isinstance(car, ElectricCar)
    assert car.drive() == "Driving an electric car"
    assert car.fuel_type() == "Powered by electricity"


@pytest.mark.parametrize("value", ["diesel", "Electric", ""])
def test_car_factory_falls_back_to_gas_for_unknown_preference(monkeypatch, value):
    monkeypatch.setenv("CAR_PREFERENCE", value)
    assert isinstance(CarFactory().create_car(), GasCar)


def test_classic_family():
    factory = new_furniture_factory("classic")
    assert isinstance(factory, ClassicFurnitureFactory)
    assert factory.make_chair() == Chair(name = "Classic Chair", material = "Wood")
    assert factory.make_table() == Table(name = "Classic Table", material = "Wood")


def test_modern_family():
    factory = new_furniture_factory(FurnitureStyle.modern)
    assert isinstance(factory, ModernFurnitureFactory)
    assert factory.make_chair().name == "Modern Chair"
    assert factory.make_chair().material == "Plastic"
    assert factory.make_table().name == "Modern Table"
    assert factory.make_table().material == "Plastic"


@pytest.mark.parametrize("style", ["rustic", "Classic", ""])
def test_unsupported_style(style):
    with pytest.raises(UnsupportedStyleError) as exc_info:
        new_furniture_factory(style)
    assert str(exc_info.value) == f"Style {style} is not supported"
    assert exc_info.value.style == style
    assert isinstance(exc_info.value, LziError)
    assert isinstance(exc_info.value, ValueError)


def test_furniture_is_immutable():
    chair = new_furniture_factory("classic").make_chair()
    with pytest.raises(Exception):
        chair.name = "Broken Chair"
