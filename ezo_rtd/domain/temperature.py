"""
Value types produced by the EZO RTD response parsers.

All types are immutable. A ``Temperature`` is always one of the three scale
variants, so a numeric value never travels without the scale it was read in.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

# Largest interval the device can report (unsigned 32-bit).
MAX_INTERVAL_SECONDS = 0xFFFFFFFF


class TemperatureScale(str, Enum):
    """Temperature scales supported by the sensor, keyed by the device's scale letter."""
    CELSIUS = "c"
    KELVIN = "k"
    FAHRENHEIT = "f"


@dataclass(frozen=True)
class TemperatureScaleResponse:
    """Decoded reply to the scale query command."""
    scale: TemperatureScale


@dataclass(frozen=True)
class DataLoggerStorageIntervalSeconds:
    """
    Seconds between automatic readings stored by the data logger.

    Attributes:
        seconds: Interval length, 0 when the logger is disabled.
    """
    seconds: int

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= MAX_INTERVAL_SECONDS:
            raise ValueError(f"seconds must be between 0 and {MAX_INTERVAL_SECONDS}, got {self.seconds}")


@dataclass(frozen=True)
class DataLoggerStorageIntervalResponse:
    """Decoded reply to the data logger interval query command."""
    interval: DataLoggerStorageIntervalSeconds


@dataclass(frozen=True)
class Temperature:
    """
    A temperature reading tagged with its scale.

    Only the ``Celsius``, ``Kelvin`` and ``Fahrenheit`` subclasses are meant to
    be instantiated; use ``from_scale`` when the scale is only known at runtime.
    """
    value: float

    scale: ClassVar[TemperatureScale]

    @classmethod
    def from_scale(cls, scale: TemperatureScale | str, value: float) -> "Temperature":
        variant = _VARIANTS[TemperatureScale(scale)]
        return variant(float(value))

    def __str__(self) -> str:
        return f"{self.value}{self.scale.value.upper()}"


@dataclass(frozen=True)
class Celsius(Temperature):
    scale: ClassVar[TemperatureScale] = TemperatureScale.CELSIUS


@dataclass(frozen=True)
class Kelvin(Temperature):
    scale: ClassVar[TemperatureScale] = TemperatureScale.KELVIN


@dataclass(frozen=True)
class Fahrenheit(Temperature):
    scale: ClassVar[TemperatureScale] = TemperatureScale.FAHRENHEIT


_VARIANTS: dict[TemperatureScale, type[Temperature]] = {
    TemperatureScale.CELSIUS: Celsius,
    TemperatureScale.KELVIN: Kelvin,
    TemperatureScale.FAHRENHEIT: Fahrenheit,
}


@dataclass(frozen=True)
class TemperatureResponse:
    """Decoded reply to the reading command."""
    temperature: Temperature
