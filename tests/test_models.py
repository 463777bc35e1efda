"""Tests for observation values."""

import pytest

from weather_narrative.compute.units import Temperature, TemperatureUnit
from weather_narrative.models import Condition, WeatherObservation


def _obs(**overrides) -> WeatherObservation:
    fields = dict(
        city="Oslo",
        timestamp=1717250400,  # 14:00 UTC
        temperature=Temperature(12.0, TemperatureUnit.CELSIUS),
        conditions=(Condition(803, "Clouds", "broken clouds", "04d"),),
    )
    fields.update(overrides)
    return WeatherObservation(**fields)


class TestWeatherObservation:
    def test_empty_conditions_rejected(self):
        with pytest.raises(ValueError):
            _obs(conditions=())

    def test_local_hour_uses_offset(self):
        assert _obs().local_hour == 14
        assert _obs(utc_offset=7200).local_hour == 16
        assert _obs(utc_offset=-16 * 3600).local_hour == 22

    def test_daytime_from_first_icon(self):
        assert _obs().is_daytime is True
        night = _obs(conditions=(Condition(800, icon="01n"), Condition(701, icon="50d")))
        assert night.is_daytime is False

    def test_daytime_unknown_without_icon(self):
        assert _obs(conditions=(Condition(800),)).is_daytime is None

    def test_frozen(self):
        obs = _obs()
        with pytest.raises(AttributeError):
            obs.city = "Bergen"
