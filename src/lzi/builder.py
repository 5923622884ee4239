from __future__ import annotations

"""Builder: assembles a :class:`Computer` through chained setters."""

import abc
import typing as t

from pydantic import BaseModel


_LABELS = {'cpu': 'CPU', 'ram': 'RAM', 'storage': 'Storage', 'os': 'OS'}


class Computer(BaseModel):
    cpu: str = ''
    ram: str = ''
    storage: str = ''
    os: str = ''

    def __str__(self) -> str:
        return '{' + ' '.join(f'{_LABELS[k]}:{v}' for k, v in self.model_dump().items()) + '}'


class ComputerBuilder(abc.ABC):

    @abc.abstractmethod
    def set_cpu(self, cpu: str) -> 'ComputerBuilder':
        ...

    @abc.abstractmethod
    def set_ram(self, ram: str) -> 'ComputerBuilder':
        ...

    @abc.abstractmethod
    def set_storage(self, storage: str) -> 'ComputerBuilder':
        ...

    @abc.abstractmethod
    def set_os(self, os: str) -> 'ComputerBuilder':
        ...

    @abc.abstractmethod
    def build(self) -> Computer:
        ...


class PCBuilder(ComputerBuilder):
    """
    Collects parts, then builds.

        >>> PCBuilder().set_cpu("Intel i7").set_ram("16GB").build().ram
        '16GB'
    """

    def __init__(self):
        self._parts: t.Dict[str, str] = {}

    def set_cpu(self, cpu: str) -> 'PCBuilder':
        self._parts['cpu'] = cpu
        return self

    def set_ram(self, ram: str) -> 'PCBuilder':
        self._parts['ram'] = ram
        return self

    def set_storage(self, storage: str) -> 'PCBuilder':
        self._parts['storage'] = storage
        return self

    def set_os(self, os: str) -> 'PCBuilder':
        self._parts['os'] = os
        return self

    def build(self) -> Computer:
        return Computer(**self._parts)


__all__ = ["Computer", "ComputerBuilder", "PCBuilder"]
