"""Domain values passed between the client, the narrative engine and the pages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from weather_narrative.compute.units import Temperature


@dataclass(frozen=True)
class Condition:
    """One entry of an observation's ``weather`` list."""

    code: int
    main: str = ""
    description: str = ""
    icon: str = ""

    @property
    def is_daytime(self) -> bool | None:
        """Day/night flag from the icon token ("01d" / "01n"), None if absent."""
        if self.icon.endswith("d"):
            return True
        if self.icon.endswith("n"):
            return False
        return None


@dataclass(frozen=True)
class WeatherObservation:
    """One place at one instant, read-only after parsing."""

    city: str
    timestamp: int
    temperature: Temperature
    conditions: tuple[Condition, ...]
    city_id: int | None = None
    country: str = ""
    lat: float | None = None
    lon: float | None = None
    utc_offset: int = 0
    temp_min: Temperature | None = None
    temp_max: Temperature | None = None
    humidity: int | None = None
    pressure: int | None = None
    wind_speed: float | None = None
    sunrise: int | None = None
    sunset: int | None = None

    def __post_init__(self) -> None:
        if not self.conditions:
            raise ValueError(f"Observation for {self.city!r} has no weather conditions")

    @property
    def local_hour(self) -> int:
        """Hour of day (0-23) at the observed place."""
        local = datetime.fromtimestamp(self.timestamp + self.utc_offset, tz=timezone.utc)
        return local.hour

    @property
    def is_daytime(self) -> bool | None:
        return self.conditions[0].is_daytime

    @property
    def icon(self) -> str:
        return self.conditions[0].icon


@dataclass
class Narrative:
    """Display-ready result for one request, filled in by ``assemble``."""

    city: str = ""
    country: str = ""
    temperature: int | None = None
    temp_min: int | None = None
    temp_max: int | None = None
    description: str = ""
    comparison: str = ""
    icon: str = ""
    humidity: int | None = None
    pressure: int | None = None
    wind_speed: float | None = None
    sunrise: int | None = None
    sunset: int | None = None
    utc_offset: int = 0
