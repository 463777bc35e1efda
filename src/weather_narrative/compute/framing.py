"""Time-of-day framing for comparison sentences.

Picks the subject ("This afternoon") and the period it is compared against
("yesterday"). The four-way hour policy is preferred; the two-way day/night
policy is used only when no hour is available.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FramingPolicy(str, Enum):
    HOUR = "hour"
    DAYLIGHT = "daylight"


@dataclass(frozen=True)
class PhrasePair:
    subject: str
    reference: str


TONIGHT = PhrasePair("Tonight", "last night")
TODAY = PhrasePair("Today", "yesterday")
THIS_AFTERNOON = PhrasePair("This afternoon", "yesterday")
THIS_EVENING = PhrasePair("This evening", "last night")


def frame(hour: int | None, is_daytime: bool | None = None) -> PhrasePair:
    """Select the phrase pair from the hour, else from the day/night flag."""
    if hour is not None:
        return frame_by_hour(hour)
    if is_daytime is not None:
        return frame_by_daylight(is_daytime)
    raise ValueError("frame() needs an hour or a day/night flag")


def frame_by_hour(hour: int) -> PhrasePair:
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour out of range: {hour}")
    if hour < 5 or hour > 21:
        return TONIGHT
    if hour < 12:
        return TODAY
    if hour < 18:
        return THIS_AFTERNOON
    return THIS_EVENING


def frame_by_daylight(is_daytime: bool) -> PhrasePair:
    return TODAY if is_daytime else TONIGHT
