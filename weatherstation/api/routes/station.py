from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from weatherstation.api.deps import (
    ReadUser,
    WriteUser,
    get_alert_system,
    get_analyzer,
    get_station,
)
from weatherstation.models.weather import Alert
from weatherstation.schemas.weather import (
    AlertRead,
    CollectResponse,
    CurrentWeather,
    ExpireAlertsResponse,
    ReadingRead,
    StatisticsResponse,
    TrendPointRead,
    TrendsResponse,
)
from weatherstation.services.alerts import WeatherAlertSystem
from weatherstation.services.analyzer import WeatherAnalyzer
from weatherstation.services.conditions import classify_current
from weatherstation.services.station import WeatherStation

router = APIRouter(prefix="/station")


def _alert_read(alert: Alert) -> AlertRead:
    return AlertRead(
        alert_type=alert.alert_type,
        message=alert.message,
        issued_at=alert.issued_at,
        expired=alert.expired,
        status=alert.status,
    )


@router.post(
    "/readings",
    response_model=CollectResponse,
    status_code=status.HTTP_201_CREATED,
)
def collect_reading(
    _: WriteUser,
    station: Annotated[WeatherStation, Depends(get_station)],
    alert_system: Annotated[WeatherAlertSystem, Depends(get_alert_system)],
) -> CollectResponse:
    reading = station.collect_reading()
    alerts = alert_system.check_for_alerts(reading)
    return CollectResponse(
        reading=ReadingRead.model_validate(reading.__dict__),
        condition=classify_current(reading.temperature, reading.humidity),
        alerts=[_alert_read(a) for a in alerts],
    )


@router.get("/readings/latest", response_model=CurrentWeather)
def latest_reading(
    _: ReadUser,
    station: Annotated[WeatherStation, Depends(get_station)],
) -> CurrentWeather:
    reading = station.latest()
    if reading is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No weather data available",
        )
    return CurrentWeather(
        station=station.name,
        reading=ReadingRead.model_validate(reading.__dict__),
        condition=classify_current(reading.temperature, reading.humidity),
    )


@router.get("/readings", response_model=list[ReadingRead])
def list_readings(
    _: ReadUser,
    station: Annotated[WeatherStation, Depends(get_station)],
    limit: Annotated[int | None, Query(ge=1, le=10_000)] = None,
) -> list[ReadingRead]:
    rows = station.history()
    if limit is not None:
        rows = rows[-limit:]
    return [ReadingRead.model_validate(r.__dict__) for r in rows]


@router.get("/trends", response_model=TrendsResponse)
def trends(
    _: ReadUser,
    station: Annotated[WeatherStation, Depends(get_station)],
    analyzer: Annotated[WeatherAnalyzer, Depends(get_analyzer)],
) -> TrendsResponse:
    temperature = analyzer.temperature_trend()
    humidity = analyzer.humidity_trend()
    return TrendsResponse(
        station=station.name,
        temperature=[TrendPointRead.model_validate(p.__dict__) for p in temperature],
        humidity=[TrendPointRead.model_validate(p.__dict__) for p in humidity],
    )


@router.get("/alerts", response_model=list[AlertRead])
def list_alerts(
    _: ReadUser,
    alert_system: Annotated[WeatherAlertSystem, Depends(get_alert_system)],
) -> list[AlertRead]:
    return [_alert_read(a) for a in alert_system.active_alerts()]


@router.post("/alerts/expire", response_model=ExpireAlertsResponse)
def expire_alerts(
    _: WriteUser,
    alert_system: Annotated[WeatherAlertSystem, Depends(get_alert_system)],
) -> ExpireAlertsResponse:
    return ExpireAlertsResponse(expired=alert_system.expire_all())


@router.get("/statistics", response_model=StatisticsResponse)
def statistics(
    _: ReadUser,
    analyzer: Annotated[WeatherAnalyzer, Depends(get_analyzer)],
) -> StatisticsResponse:
    return StatisticsResponse.model_validate(asdict(analyzer.statistics()))


@router.get("/health", tags=["meta"])
def health(
    station: Annotated[WeatherStation, Depends(get_station)],
) -> dict[str, str | int]:
    return {
        "status": "ok",
        "station": station.name,
        "sensors": len(station.sensors),
        "readings": station.reading_count(),
    }
