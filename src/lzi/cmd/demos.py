from __future__ import annotations

import os
import typing as t
from typer import Typer, echo, Option, Argument, Exit

from lzi.builder import PCBuilder
from lzi.errors import LziError
from lzi.factories import CarFactory, new_furniture_factory
from lzi.singleton import default_accessor

# Each command replays one construction pattern and prints what it produced

cmd = Typer(no_args_is_help=True)


@cmd.command('singleton', help = "Fetch the shared instance several times")
def run_singleton(
    calls: int = Option(2, '-n', '--calls', min = 1, help = "Number of times to fetch the instance"),
):
    """
    Fetch the process-wide instance and print each handle's identity.

    >>> lzi run singleton
    """
    instances = []
    for _ in range(calls):
        instance, created = default_accessor.acquire()
        echo("Creating single instance now." if created else "Single instance already created.")
        instances.append(instance)
    for instance in instances:
        echo(hex(id(instance)))
    echo(instances[0].do_something())


@cmd.command('factory', help = "Build a car from CAR_PREFERENCE")
def run_factory():
    """
    Build a car with the current preference, then again with ``electric``.

    >>> lzi run factory
    """
    factory = CarFactory()
    car = factory.create_car()
    echo(car.drive())
    echo(car.fuel_type())

    os.environ['CAR_PREFERENCE'] = 'electric'
    car = factory.create_car()
    echo(car.drive())
    echo(car.fuel_type())


@cmd.command('furniture', help = "Make a chair and a table for each style")
def run_furniture(
    styles: t.Optional[t.List[str]] = Argument(None, help = "Furniture styles. Defaults to classic and modern"),
):
    """
    >>> lzi run furniture classic modern
    """
    for style in styles or ['classic', 'modern']:
        try:
            factory = new_furniture_factory(style)
        except LziError as e:
            echo(str(e), err = True)
            raise Exit(code = 1) from e
        echo(f"Chair: {factory.make_chair().name}")
        echo(f"Table: {factory.make_table().name}")


@cmd.command('build', help = "Assemble a computer")
def run_build(
    cpu: str = Option("Intel i7", help = "CPU model"),
    ram: str = Option("16GB", help = "Memory size"),
    storage: str = Option("1TB SSD", help = "Storage device"),
    os_name: str = Option("Windows 7", '--os', help = "Operating system"),
):
    """
    >>> lzi run build --cpu "AMD Ryzen 7" --os Linux
    """
    computer = (
        PCBuilder()
        .set_cpu(cpu)
        .set_ram(ram)
        .set_storage(storage)
        .set_os(os_name)
        .build()
    )
    echo(f"Computer built: {computer}")
