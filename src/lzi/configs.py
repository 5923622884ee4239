from __future__ import annotations

"""
lzi Settings Configuration
"""

from enum import Enum
from pydantic import field_validator
from pydantic_settings import BaseSettings

from .once import OnceCell


class CarPreference(str, Enum):
    electric = 'electric'
    gas = 'gas'


class LziSettings(BaseSettings):
    """
    Package-wide settings

    Environment variables:
        LZI_LOG_LEVEL: Minimum level for the stdout log handler
        LZI_ANNOUNCE: Log whether an accessor constructed or reused its instance
    """

    log_level: str = 'INFO'
    announce: bool = True

    class Config:
        env_prefix = "LZI_"
        case_sensitive = False
        extra = "ignore"

    @field_validator('log_level', mode = 'before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return str(v).upper()


class CarSettings(BaseSettings):
    """
    Simple factory settings

    Environment variables:
        CAR_PREFERENCE: ``electric`` selects the electric car, anything else the gas car
    """

    car_preference: CarPreference = CarPreference.gas

    class Config:
        env_prefix = ""
        case_sensitive = False
        extra = "ignore"

    @field_validator('car_preference', mode = 'before')
    @classmethod
    def validate_car_preference(cls, v: object) -> CarPreference:
        if isinstance(v, CarPreference): return v
        try:
            return CarPreference(str(v))
        except ValueError:
            return CarPreference.gas


_settings: OnceCell[LziSettings] = OnceCell(LziSettings, name = 'settings')


def get_settings() -> LziSettings:
    """Returns the process-wide :class:`LziSettings`, loaded on first use."""
    return _settings.get_or_init()


__all__ = ["CarPreference", "LziSettings", "CarSettings", "get_settings"]
