"""HTML pages: home, weather narrative and city-not-found."""

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, RedirectResponse

from weather_narrative.compute.narrative import assemble
from weather_narrative.ingest.openweather import fetch_current, fetch_yesterday
from weather_narrative.render import render_template

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home() -> HTMLResponse:
    return HTMLResponse(render_template("index.html.j2"))


@router.get("/weather")
def search(city: str = Query("", description="City name from the search form")) -> RedirectResponse:
    """Turn the search form submission into a /weather/{city} URL."""
    city = city.strip()
    if not city:
        return RedirectResponse("/", status_code=302)
    return RedirectResponse(f"/weather/{quote(city, safe='')}", status_code=302)


@router.get("/weather/{city}", response_class=HTMLResponse)
def weather_page(city: str):
    today = fetch_current(city)
    if today is None:
        return RedirectResponse(f"/error?city={quote(city, safe='')}", status_code=302)

    yesterday = fetch_yesterday(today)
    if yesterday is None:
        logger.warning("No history for %r, omitting comparison", today.city)

    narrative = assemble(today, yesterday)
    return HTMLResponse(render_template("weather.html.j2", n=narrative))


@router.get("/error", response_class=HTMLResponse)
def not_found(city: str = Query("")) -> HTMLResponse:
    return HTMLResponse(render_template("error.html.j2", city=city), status_code=404)
