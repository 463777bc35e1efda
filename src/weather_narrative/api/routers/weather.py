"""Narrative JSON endpoint."""

from __future__ import annotations

from dataclasses import asdict
import logging

from fastapi import APIRouter, HTTPException

from weather_narrative.api.schemas import NarrativeResponse
from weather_narrative.compute.narrative import assemble
from weather_narrative.ingest.openweather import fetch_current, fetch_yesterday

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{city}", response_model=NarrativeResponse)
def get_weather(city: str) -> NarrativeResponse:
    """Return the narrative for a city, with the comparison omitted if history is unavailable."""
    today = fetch_current(city)
    if today is None:
        raise HTTPException(status_code=404, detail=f"City {city!r} not found")

    yesterday = fetch_yesterday(today)
    if yesterday is None:
        logger.warning("No history for %r, omitting comparison", today.city)

    narrative = assemble(today, yesterday)
    return NarrativeResponse(**asdict(narrative))
