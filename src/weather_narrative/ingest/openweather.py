"""OpenWeatherMap fetcher: current conditions by city and the same hour yesterday.

Both functions return None instead of raising: a missing "today" becomes a
not-found page upstream, a missing "yesterday" just drops the comparison.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from weather_narrative.config import (
    CURRENT_WEATHER_URL,
    HISTORY_LOOKBACK_SECONDS,
    HISTORY_URL,
    OPENWEATHER_API_KEY,
    OPENWEATHER_UNITS,
    REQUEST_TIMEOUT,
)
from weather_narrative.compute.units import Temperature, TemperatureUnit
from weather_narrative.models import Condition, WeatherObservation

logger = logging.getLogger(__name__)

UNIT_BY_PARAM = {
    "standard": TemperatureUnit.KELVIN,
    "metric": TemperatureUnit.CELSIUS,
}


def fetch_current(
    city: str,
    api_key: str = OPENWEATHER_API_KEY,
    units: str = OPENWEATHER_UNITS,
) -> WeatherObservation | None:
    """Fetch the current observation for a city name.

    Args:
        city: City name as typed by the user, e.g. "London" or "Paris,FR".
        api_key: OpenWeatherMap app id.
        units: "standard" (Kelvin) or "metric" (Celsius).

    Returns:
        Parsed observation, or None if the city is unknown or the request failed.
    """
    params = {"q": city, "appid": api_key, "units": _check_units(units)}

    logger.info("Fetching current weather for %r", city)

    try:
        resp = requests.get(CURRENT_WEATHER_URL, params=params, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
    except Exception:
        logger.exception("Failed to fetch current weather for %r", city)
        return None

    try:
        return parse_current(data, UNIT_BY_PARAM[units])
    except (AttributeError, KeyError, TypeError, ValueError):
        logger.exception("Invalid current weather payload for %r", city)
        return None


def fetch_yesterday(
    today: WeatherObservation,
    api_key: str = OPENWEATHER_API_KEY,
    units: str = OPENWEATHER_UNITS,
) -> WeatherObservation | None:
    """Fetch the hourly observation 24h before ``today`` for the same city.

    Returns:
        Parsed observation, or None on request failure, unsupported units, a
        malformed payload or an empty result set.
    """
    params: dict[str, Any] = {
        "type": "hour",
        "start": today.timestamp - HISTORY_LOOKBACK_SECONDS,
        "cnt": 1,
        "appid": api_key,
        "units": units,
    }
    if today.city_id is not None:
        params["id"] = today.city_id
    elif today.lat is not None and today.lon is not None:
        params["lat"] = today.lat
        params["lon"] = today.lon
    else:
        params["q"] = today.city

    logger.info("Fetching history for %r at %d", today.city, params["start"])

    try:
        _check_units(units)
        resp = requests.get(HISTORY_URL, params=params, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
    except Exception:
        logger.exception("Failed to fetch history for %r", today.city)
        return None

    try:
        return parse_history(data, today, UNIT_BY_PARAM[units])
    except (AttributeError, KeyError, TypeError, ValueError):
        logger.exception("Invalid history payload for %r", today.city)
        return None


def parse_current(data: dict[str, Any], unit: TemperatureUnit) -> WeatherObservation:
    """Build an observation from a ``/data/2.5/weather`` response."""
    _require_object(data)
    main = data["main"]
    sys_ = data.get("sys") or {}
    coord = data.get("coord") or {}
    return WeatherObservation(
        city=data["name"],
        city_id=data.get("id"),
        country=sys_.get("country", ""),
        lat=coord.get("lat"),
        lon=coord.get("lon"),
        timestamp=int(data["dt"]),
        utc_offset=int(data.get("timezone", 0)),
        temperature=Temperature(float(main["temp"]), unit),
        temp_min=_optional_temperature(main.get("temp_min"), unit),
        temp_max=_optional_temperature(main.get("temp_max"), unit),
        humidity=main.get("humidity"),
        pressure=main.get("pressure"),
        wind_speed=(data.get("wind") or {}).get("speed"),
        sunrise=sys_.get("sunrise"),
        sunset=sys_.get("sunset"),
        conditions=_parse_conditions(data["weather"]),
    )


def parse_history(
    data: dict[str, Any],
    today: WeatherObservation,
    unit: TemperatureUnit,
) -> WeatherObservation | None:
    """Build an observation from the first entry of a history response.

    City identity comes from ``today``; history entries carry only readings.
    """
    _require_object(data)
    entries = data.get("list") or []
    if not entries:
        logger.warning("No history entries for %r", today.city)
        return None

    entry = entries[0]
    main = entry["main"]
    return WeatherObservation(
        city=today.city,
        city_id=today.city_id,
        country=today.country,
        lat=today.lat,
        lon=today.lon,
        timestamp=int(entry["dt"]),
        utc_offset=today.utc_offset,
        temperature=Temperature(float(main["temp"]), unit),
        temp_min=_optional_temperature(main.get("temp_min"), unit),
        temp_max=_optional_temperature(main.get("temp_max"), unit),
        humidity=main.get("humidity"),
        pressure=main.get("pressure"),
        wind_speed=(entry.get("wind") or {}).get("speed"),
        conditions=_parse_conditions(entry["weather"]),
    )


def _parse_conditions(weather: list[dict[str, Any]]) -> tuple[Condition, ...]:
    return tuple(
        Condition(
            code=int(w["id"]),
            main=w.get("main", ""),
            description=w.get("description", ""),
            icon=w.get("icon", ""),
        )
        for w in weather
    )


def _require_object(data: Any) -> None:
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")


def _optional_temperature(value: float | None, unit: TemperatureUnit) -> Temperature | None:
    if value is None:
        return None
    return Temperature(float(value), unit)


def _check_units(units: str) -> str:
    if units not in UNIT_BY_PARAM:
        raise ValueError(f"Unsupported units {units!r}, expected one of {sorted(UNIT_BY_PARAM)}")
    return units
