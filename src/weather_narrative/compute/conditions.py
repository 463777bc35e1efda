"""Condition code classification and description joining.

Codes follow the OpenWeatherMap condition vocabulary
(https://openweathermap.org/weather-conditions). Phrases are lowercase noun
phrases that read naturally after "with" or as a subject complement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from weather_narrative.models import Condition

CONDITION_PHRASES: dict[int, str] = {
    # Thunderstorm
    200: "thunderstorms with light rain",
    201: "thunderstorms with rain",
    202: "thunderstorms with heavy rain",
    210: "light thunderstorms",
    211: "thunderstorms",
    212: "heavy thunderstorms",
    221: "ragged thunderstorms",
    # Drizzle
    300: "light drizzle",
    301: "drizzle",
    302: "heavy drizzle",
    310: "light drizzle",
    311: "drizzle",
    312: "heavy drizzle",
    313: "showers",
    314: "heavy rain",
    321: "showers",
    # Rain
    502: "heavy rain",
    503: "very heavy rain",
    504: "extreme rain",
    511: "freezing rain",
    520: "light showers",
    521: "showers",
    522: "heavy showers",
    531: "ragged showers",
    # Snow
    600: "light snow",
    601: "snow",
    602: "heavy snow",
    611: "sleet",
    612: "light sleet",
    613: "sleet showers",
    615: "light rain and snow",
    616: "rain and snow",
    620: "light snow showers",
    621: "snow showers",
    622: "heavy snow showers",
    # Atmosphere
    731: "dust whirls",
    741: "fog",
    751: "blowing sand",
    761: "dust",
    762: "volcanic ash",
    771: "squalls",
    781: "a tornado",
    # Clouds
    800: "clear skies",
    801: "a few clouds",
    802: "scattered clouds",
    803: "broken clouds",
    804: "overcast skies",
    # Extreme
    900: "a tornado",
    901: "a tropical storm",
    902: "a hurricane",
    903: "extreme cold",
    904: "extreme heat",
    905: "high winds",
    906: "hail",
    # Wind
    951: "calm air",
    952: "a light breeze",
    953: "a gentle breeze",
    954: "a moderate breeze",
    955: "a fresh breeze",
    956: "a strong breeze",
    957: "near-gale winds",
    958: "gale-force winds",
    959: "severe gales",
    960: "a storm",
    961: "a violent storm",
    962: "a hurricane",
}


@dataclass(frozen=True)
class ConditionDescriptor:
    code: int
    phrase: str


def classify(code: int, fallback_text: str) -> str:
    """Return the idiomatic phrase for a condition code, or ``fallback_text``."""
    return CONDITION_PHRASES.get(code, fallback_text)


def describe_conditions(conditions: Iterable[Condition]) -> list[ConditionDescriptor]:
    """Classify each condition, keeping the order the API reported them in."""
    return [
        ConditionDescriptor(code=c.code, phrase=classify(c.code, c.description))
        for c in conditions
    ]


def compose(phrases: Sequence[str]) -> str:
    """Join phrases as an English list: "a", "a and b", "a, b and c"."""
    if not phrases:
        raise ValueError("compose() needs at least one phrase")
    if len(phrases) == 1:
        return phrases[0]
    return ", ".join(phrases[:-1]) + " and " + phrases[-1]
