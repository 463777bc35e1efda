"""Narrative assembly: one observation pair in, one display-ready Narrative out."""

from __future__ import annotations

from weather_narrative.config import BAND_EDGES, FRAMING_POLICY
from weather_narrative.compute.comparison import compare_temperatures
from weather_narrative.compute.conditions import compose, describe_conditions
from weather_narrative.compute.framing import FramingPolicy, PhrasePair, frame
from weather_narrative.compute.units import round_half_up
from weather_narrative.models import Narrative, WeatherObservation


def assemble(
    today: WeatherObservation,
    yesterday: WeatherObservation | None = None,
    *,
    hour: int | None = None,
    framing: FramingPolicy = FramingPolicy(FRAMING_POLICY),
    band_edges: tuple[float, float, float] = BAND_EDGES,
) -> Narrative:
    """Build the narrative for ``today``, comparing with ``yesterday`` when known.

    Args:
        today: Current observation (required).
        yesterday: Observation roughly 24h earlier, or None if unavailable.
        hour: Local hour to frame the comparison with. Defaults to the hour
            of ``today.timestamp`` at the observed place.
        framing: Which time-of-day policy to apply.
        band_edges: Celsius band edges for the comparison.

    Returns:
        Populated Narrative. ``comparison`` is "" when ``yesterday`` is None.
    """
    narrative = Narrative()
    narrative.city = today.city
    narrative.country = today.country
    narrative.temperature = round_half_up(today.temperature.celsius)
    if today.temp_min is not None:
        narrative.temp_min = round_half_up(today.temp_min.celsius)
    if today.temp_max is not None:
        narrative.temp_max = round_half_up(today.temp_max.celsius)

    phrases = [d.phrase for d in describe_conditions(today.conditions)]
    narrative.description = compose(phrases)

    if yesterday is not None:
        pair = _phrase_pair(today, hour, framing)
        narrative.comparison = compare_temperatures(
            today.temperature, yesterday.temperature, pair, band_edges
        )

    narrative.icon = today.icon
    narrative.humidity = today.humidity
    narrative.pressure = today.pressure
    narrative.wind_speed = today.wind_speed
    narrative.sunrise = today.sunrise
    narrative.sunset = today.sunset
    narrative.utc_offset = today.utc_offset
    return narrative


def _phrase_pair(
    today: WeatherObservation,
    hour: int | None,
    framing: FramingPolicy,
) -> PhrasePair:
    if hour is None:
        hour = today.local_hour
    if framing == FramingPolicy.DAYLIGHT:
        is_daytime = _daytime(today)
        if is_daytime is not None:
            return frame(None, is_daytime)
    return frame(hour)


def _daytime(obs: WeatherObservation) -> bool | None:
    """Day/night from the icon token, else from sunrise/sunset."""
    if obs.is_daytime is not None:
        return obs.is_daytime
    if obs.sunrise is not None and obs.sunset is not None:
        return obs.sunrise <= obs.timestamp < obs.sunset
    return None
