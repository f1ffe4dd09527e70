"""Plain-text rendering of station data for the command line."""

from __future__ import annotations

from weatherstation.models.weather import Alert, Forecast, Reading, TrendPoint, WeatherStatistics
from weatherstation.services.conditions import classify_current

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
TREND_FORMAT = "%m-%d"


def format_reading(reading: Reading) -> str:
    return (
        f"Time: {reading.timestamp.strftime(TIMESTAMP_FORMAT)}, "
        f"Temp: {reading.temperature:.1f}°C, "
        f"Humidity: {reading.humidity:.1f}%, "
        f"Pressure: {reading.pressure:.1f}hPa, "
        f"Wind: {reading.wind_speed:.1f}km/h {reading.wind_direction}"
    )


def format_current_weather(station_name: str, reading: Reading | None) -> str:
    if reading is None:
        return "No weather data available."
    condition = classify_current(reading.temperature, reading.humidity)
    return "\n".join(
        [
            "=== Current Weather ===",
            f"Station: {station_name}",
            format_reading(reading),
            f"Weather condition: {condition}",
            "======================",
        ]
    )


def format_trends(
    station_name: str,
    temperature: list[TrendPoint],
    humidity: list[TrendPoint],
) -> str:
    if not temperature and not humidity:
        return "No historical data available."
    lines = ["=== Weather Trends ===", f"Station: {station_name}", "", "Temperature Trend:"]
    lines += [f"{p.timestamp.strftime(TREND_FORMAT)}: {p.value:.1f}°C" for p in temperature]
    lines += ["", "Humidity Trend:"]
    lines += [f"{p.timestamp.strftime(TREND_FORMAT)}: {p.value:.1f}%" for p in humidity]
    lines.append("=====================")
    return "\n".join(lines)


def format_forecast(forecast: Forecast) -> str:
    lines = ["=== Weather Forecast ==="]
    for p in forecast.predictions:
        lines.append(
            f"Day {p.day}: {p.condition}, Temp: {p.min_temp:.1f} to {p.max_temp:.1f}°C, "
            f"{p.description}"
        )
    lines.append("=======================")
    return "\n".join(lines)


def format_alert(alert: Alert) -> str:
    return (
        f"[{alert.status}] {alert.alert_type} - {alert.message} "
        f"(Issued: {alert.issued_at.strftime(TIMESTAMP_FORMAT)})"
    )


def format_statistics(stats: WeatherStatistics) -> str:
    lines = [
        "=== Weather Statistics ===",
        f"Average Temperature: {stats.average_temperature:.1f}°C",
        f"Maximum Temperature: {stats.max_temperature:.1f}°C",
        f"Minimum Temperature: {stats.min_temperature:.1f}°C",
        "",
        "Wind Direction Distribution:",
    ]
    for direction, count in sorted(stats.wind_direction_distribution.items()):
        lines.append(f"{direction}: {count} times")
    lines.append("=========================")
    return "\n".join(lines)
