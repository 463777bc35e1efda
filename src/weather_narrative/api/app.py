"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI


def create_app() -> FastAPI:
    app = FastAPI(
        title="Weather Narrative",
        version="0.1.0",
        description="Current weather for a city, told in plain English",
    )

    from weather_narrative.api.routers import pages, weather

    app.include_router(pages.router, tags=["pages"])
    app.include_router(weather.router, prefix="/api/weather", tags=["weather"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
