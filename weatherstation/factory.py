from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from weatherstation.api.router import api_router
from weatherstation.clients.sensors import build_sensors, derive_rng
from weatherstation.core.config import Settings, load_settings
from weatherstation.core.logging import setup_logging
from weatherstation.repositories.memory import InMemoryReadingRepository
from weatherstation.services.alerts import WeatherAlertSystem
from weatherstation.services.station import WeatherStation

logger = logging.getLogger(__name__)


def build_station(settings: Settings) -> WeatherStation:
    return WeatherStation(
        name=settings.station_name,
        repo=InMemoryReadingRepository(),
        sensors=build_sensors(settings.sensors, seed=settings.random_seed),
    )


def _collect_once(station: WeatherStation, alert_system: WeatherAlertSystem) -> None:
    reading = station.collect_reading()
    alert_system.check_for_alerts(reading)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    station = build_station(settings)
    alert_system = WeatherAlertSystem()
    # The forecaster draws from the offset after the last sensor.
    forecast_rng = derive_rng(settings.random_seed, len(station.sensors))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        stop_event: threading.Event | None = None
        bg_thread: threading.Thread | None = None

        if settings.collection_background_enabled:
            stop_event = threading.Event()

            def _loop() -> None:
                while stop_event is not None and not stop_event.is_set():
                    try:
                        _collect_once(station, alert_system)
                    except Exception:
                        logger.exception("Background collection failed")
                    stop_event.wait(settings.collection_interval_seconds)

            bg_thread = threading.Thread(
                target=_loop, name="station-background-collection", daemon=True
            )
            bg_thread.start()
            logger.info(
                "Background collection every %.2fs for %s",
                settings.collection_interval_seconds,
                station.name,
            )

        yield
        if stop_event is not None:
            stop_event.set()
        if bg_thread is not None and bg_thread.is_alive():
            bg_thread.join(timeout=2.0)

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Weather Station API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.station = station
    app.state.alert_system = alert_system
    app.state.forecast_rng = forecast_rng

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "weather-station", "station": station.name, "status": "ok"}

    app.include_router(api_router)
    return app
