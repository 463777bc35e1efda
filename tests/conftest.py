"""Shared test fixtures."""

import pytest

from weather_narrative.compute.units import Temperature, TemperatureUnit
from weather_narrative.models import Condition, WeatherObservation

# 2024-06-01 14:00 UTC
AFTERNOON_UTC = 1717250400


@pytest.fixture
def current_payload() -> dict:
    """A /data/2.5/weather response in standard (Kelvin) units."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"},
        ],
        "main": {
            "temp": 289.35,
            "temp_min": 287.6,
            "temp_max": 291.2,
            "humidity": 62,
            "pressure": 1015,
        },
        "wind": {"speed": 4.1},
        "dt": AFTERNOON_UTC,
        "sys": {"country": "GB", "sunrise": 1717213680, "sunset": 1717272540},
        "timezone": 0,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def history_payload() -> dict:
    """A history/city response with one hourly entry, 24h earlier."""
    return {
        "cod": "200",
        "city_id": 2643743,
        "cnt": 1,
        "list": [
            {
                "dt": AFTERNOON_UTC - 86400,
                "main": {"temp": 283.15, "humidity": 80, "pressure": 1009},
                "wind": {"speed": 6.2},
                "weather": [
                    {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"},
                ],
            }
        ],
    }


@pytest.fixture
def today() -> WeatherObservation:
    """London, 16.2C and clear at 14:00 local time."""
    return WeatherObservation(
        city="London",
        city_id=2643743,
        country="GB",
        timestamp=AFTERNOON_UTC,
        temperature=Temperature(16.2, TemperatureUnit.CELSIUS),
        temp_min=Temperature(14.5, TemperatureUnit.CELSIUS),
        temp_max=Temperature(18.1, TemperatureUnit.CELSIUS),
        humidity=62,
        pressure=1015,
        wind_speed=4.1,
        sunrise=1717213680,
        sunset=1717272540,
        conditions=(Condition(800, "Clear", "clear sky", "01d"),),
    )


@pytest.fixture
def yesterday() -> WeatherObservation:
    return WeatherObservation(
        city="London",
        timestamp=AFTERNOON_UTC - 86400,
        temperature=Temperature(10.0, TemperatureUnit.CELSIUS),
        conditions=(Condition(500, "Rain", "light rain", "10d"),),
    )
