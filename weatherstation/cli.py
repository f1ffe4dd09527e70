"""Command line driver: run a day-by-day simulation or serve the API."""

from __future__ import annotations

import os

import click

from weatherstation.clients.sensors import build_sensors, derive_rng
from weatherstation.core.config import SENSOR_KINDS
from weatherstation.core.exceptions import InsufficientDataError
from weatherstation.core.logging import setup_logging
from weatherstation.repositories.memory import InMemoryReadingRepository
from weatherstation.services import report
from weatherstation.services.alerts import WeatherAlertSystem
from weatherstation.services.analyzer import WeatherAnalyzer
from weatherstation.services.forecast import WeatherForecaster
from weatherstation.services.station import WeatherStation


@click.group()
@click.option("--log-level", default="WARNING", show_default=True, help="Logging level.")
def cli(log_level: str) -> None:
    """Weather station simulator."""
    setup_logging(log_level)


@cli.command()
@click.option("--station", "station_name", default="Central Weather Station", show_default=True)
@click.option("--days", default=7, show_default=True, type=click.IntRange(min=0))
@click.option("--forecast-days", default=3, show_default=True, type=click.IntRange(min=0))
@click.option("--seed", default=None, type=int, help="Seed for reproducible runs.")
@click.option(
    "--sensor",
    "sensors",
    multiple=True,
    type=click.Choice(SENSOR_KINDS),
    help="Sensor kinds to install (repeatable). Defaults to all.",
)
def simulate(
    station_name: str,
    days: int,
    forecast_days: int,
    seed: int | None,
    sensors: tuple[str, ...],
) -> None:
    """Collect one reading per simulated day, then print a full report."""
    station = WeatherStation(
        name=station_name,
        repo=InMemoryReadingRepository(),
        sensors=build_sensors(list(sensors or SENSOR_KINDS), seed=seed),
    )
    alert_system = WeatherAlertSystem()

    for day in range(1, days + 1):
        reading = station.collect_reading()
        for alert in alert_system.check_for_alerts(reading):
            click.echo(f"!!! WEATHER ALERT !!! {report.format_alert(alert)}")
        click.echo(f"Day {day} data collected.")

    analyzer = WeatherAnalyzer(station=station)
    click.echo()
    click.echo(report.format_current_weather(station.name, station.latest()))
    click.echo()
    click.echo(
        report.format_trends(
            station.name, analyzer.temperature_trend(), analyzer.humidity_trend()
        )
    )
    click.echo()

    forecaster = WeatherForecaster(station=station, rng=derive_rng(seed, len(station.sensors)))
    try:
        click.echo(report.format_forecast(forecaster.predict(forecast_days)))
    except InsufficientDataError as e:
        click.echo(f"Forecast unavailable: {e}")
    click.echo()

    active = alert_system.active_alerts()
    if active:
        click.echo("=== Active Alerts ===")
        for alert in active:
            click.echo(report.format_alert(alert))
        click.echo()
    click.echo(report.format_statistics(analyzer.statistics()))


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True)
@click.option("--port", default=lambda: int(os.getenv("PORT", "8000")), type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    reload_enabled = os.getenv("WS_ENV", "development").lower() != "production"
    uvicorn.run(
        "weatherstation.factory:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    cli()
