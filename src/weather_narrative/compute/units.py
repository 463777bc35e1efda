"""Temperature values tagged with their unit.

Every raw temperature carries its unit so the Kelvin offset is applied
exactly once, at the point a Celsius value is read.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math

KELVIN_OFFSET = 273.15


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    KELVIN = "kelvin"


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    """Convert a tagged value to Celsius."""
    if unit == TemperatureUnit.KELVIN:
        return value - KELVIN_OFFSET
    if unit == TemperatureUnit.CELSIUS:
        return value
    raise ValueError(f"Unknown temperature unit: {unit!r}")


@dataclass(frozen=True)
class Temperature:
    value: float
    unit: TemperatureUnit

    @property
    def celsius(self) -> float:
        return to_celsius(self.value, self.unit)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (15.5 -> 16, -0.5 -> 0)."""
    return math.floor(value + 0.5)
