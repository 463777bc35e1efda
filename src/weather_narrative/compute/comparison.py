"""Day-over-day temperature comparison.

Bands the Celsius difference between today and yesterday (edges from
``config``, tight policy by default):

    Much colder:     diff < -5
    Colder:          -5   <= diff < -2.5
    Slightly cooler: -2.5 <= diff < -1
    Similar:         -1   <= diff < 1
    Slightly warmer:  1   <= diff < 2.5
    Warmer:           2.5 <= diff < 5
    Much warmer:      diff >= 5
"""

from __future__ import annotations

from enum import Enum

from weather_narrative.config import BAND_EDGES
from weather_narrative.compute.framing import PhrasePair
from weather_narrative.compute.units import Temperature, TemperatureUnit, to_celsius


class Band(str, Enum):
    MUCH_COLDER = "much_colder"
    COLDER = "colder"
    SLIGHTLY_COLDER = "slightly_colder"
    SIMILAR = "similar"
    SLIGHTLY_WARMER = "slightly_warmer"
    WARMER = "warmer"
    MUCH_WARMER = "much_warmer"


_BANDS_ASCENDING = [
    Band.MUCH_COLDER,
    Band.COLDER,
    Band.SLIGHTLY_COLDER,
    Band.SIMILAR,
    Band.SLIGHTLY_WARMER,
    Band.WARMER,
    Band.MUCH_WARMER,
]

_BAND_ADJECTIVES = {
    Band.MUCH_COLDER: "much colder",
    Band.COLDER: "colder",
    Band.SLIGHTLY_COLDER: "slightly cooler",
    Band.SIMILAR: "",
    Band.SLIGHTLY_WARMER: "slightly warmer",
    Band.WARMER: "warmer",
    Band.MUCH_WARMER: "much warmer",
}


def classify_band(
    diff: float,
    band_edges: tuple[float, float, float] = BAND_EDGES,
) -> Band:
    """Place a Celsius difference in one of the seven left-closed bands."""
    small, medium, large = band_edges
    if not 0 < small < medium < large:
        raise ValueError(f"Band edges must be positive and ascending: {band_edges}")
    boundaries = (-large, -medium, -small, small, medium, large)
    index = sum(1 for b in boundaries if diff >= b)
    return _BANDS_ASCENDING[index]


def compare(
    today_temp: float,
    yesterday_temp: float | None,
    today_unit: TemperatureUnit,
    yesterday_unit: TemperatureUnit,
    phrases: PhrasePair,
    band_edges: tuple[float, float, float] = BAND_EDGES,
) -> str:
    """Render the comparison sentence, or "" when yesterday is unknown.

    Args:
        today_temp: Today's raw temperature in ``today_unit``.
        yesterday_temp: Yesterday's raw temperature in ``yesterday_unit``.
        today_unit: Unit tag for ``today_temp``.
        yesterday_unit: Unit tag for ``yesterday_temp``.
        phrases: Subject/reference pair from the framer.
        band_edges: (small, medium, large) Celsius edges.

    Returns:
        e.g. "This afternoon is much warmer than yesterday."
    """
    if yesterday_temp is None:
        return ""

    diff = to_celsius(today_temp, today_unit) - to_celsius(yesterday_temp, yesterday_unit)
    band = classify_band(diff, band_edges)

    if band == Band.SIMILAR:
        return f"{phrases.subject}'s temperature is similar to {phrases.reference}."
    return f"{phrases.subject} is {_BAND_ADJECTIVES[band]} than {phrases.reference}."


def compare_temperatures(
    today: Temperature,
    yesterday: Temperature | None,
    phrases: PhrasePair,
    band_edges: tuple[float, float, float] = BAND_EDGES,
) -> str:
    """Same as ``compare`` for unit-tagged values; "" when yesterday is unknown."""
    if yesterday is None:
        return ""
    return compare(today.value, yesterday.value, today.unit, yesterday.unit, phrases, band_edges)
