from __future__ import annotations

import logging
import random

from weatherstation.core.exceptions import InsufficientDataError
from weatherstation.models.weather import Forecast, Prediction
from weatherstation.services.conditions import classify_forecast, describe
from weatherstation.services.station import WeatherStation

logger = logging.getLogger(__name__)

HUMIDITY_BOUNDS = (30.0, 100.0)
PRESSURE_BOUNDS = (950.0, 1050.0)

TEMPERATURE_STEP = 5.0
HUMIDITY_STEP = 10.0
PRESSURE_STEP = 5.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class WeatherForecaster:
    """Random-walk forecast seeded from the station's latest reading.

    Every day starts from the previous day's generated values, so errors
    compound instead of reverting to the baseline. ``min_temp`` and
    ``max_temp`` are drawn independently, so the walked temperature is not
    guaranteed to fall between them.
    """

    def __init__(self, *, station: WeatherStation, rng: random.Random | None = None) -> None:
        self._station = station
        self._rng = rng or random.Random()

    def predict(self, days: int) -> Forecast:
        if days < 0:
            raise ValueError("'days' must be >= 0")

        latest = self._station.latest()
        if latest is None:
            raise InsufficientDataError()

        temperature = latest.temperature
        humidity = latest.humidity
        pressure = latest.pressure
        rand = self._rng.random

        predictions: list[Prediction] = []
        for day in range(1, days + 1):
            temperature = temperature + (rand() - 0.5) * TEMPERATURE_STEP
            humidity = _clamp(humidity + (rand() - 0.5) * HUMIDITY_STEP, *HUMIDITY_BOUNDS)
            pressure = _clamp(pressure + (rand() - 0.5) * PRESSURE_STEP, *PRESSURE_BOUNDS)

            condition = classify_forecast(temperature, humidity, pressure)
            min_temp = temperature - 2 + rand() * 4
            max_temp = temperature + 2 + rand() * 4

            predictions.append(
                Prediction(
                    day=day,
                    condition=condition,
                    min_temp=min_temp,
                    max_temp=max_temp,
                    description=describe(condition, temperature),
                    humidity=humidity,
                    pressure=pressure,
                )
            )

        logger.debug("Forecast for %s: %d day(s)", self._station.name, len(predictions))
        return Forecast(
            station=self._station.name,
            issued_at=self._station.clock(),
            predictions=tuple(predictions),
        )
