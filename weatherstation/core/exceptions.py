from __future__ import annotations


class WeatherStationError(Exception):
    """Base class for errors raised by the station services."""


class InsufficientDataError(WeatherStationError):
    """Raised when a forecast is requested before any reading was collected."""

    def __init__(self, message: str = "No historical data available for prediction") -> None:
        super().__init__(message)
