"""Pydantic response models for the API."""

from __future__ import annotations

from pydantic import BaseModel


class NarrativeResponse(BaseModel):
    city: str
    country: str = ""
    temperature: int
    temp_min: int | None = None
    temp_max: int | None = None
    description: str
    comparison: str = ""
    icon: str = ""
    humidity: int | None = None
    pressure: int | None = None
    wind_speed: float | None = None
    sunrise: int | None = None
    sunset: int | None = None
    utc_offset: int = 0
