from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from weatherstation.clients.sensors import (
    HumiditySensor,
    PressureSensor,
    Sensor,
    TemperatureSensor,
    WindSensor,
)
from weatherstation.models.weather import NO_DIRECTION, Reading
from weatherstation.repositories.base import ReadingRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class WeatherStation:
    def __init__(
        self,
        *,
        name: str,
        repo: ReadingRepository,
        sensors: list[Sensor] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._name = name
        self._repo = repo
        self._sensors: list[Sensor] = list(sensors or [])
        self._clock = clock or _utcnow
        # Held from timestamping through append so history stays in time order.
        self._collect_lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def clock(self) -> Callable[[], datetime]:
        return self._clock

    @property
    def sensors(self) -> list[Sensor]:
        return list(self._sensors)

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors.append(sensor)

    def collect_reading(self) -> Reading:
        """Poll every sensor once and append the combined reading to history.

        Sensors are polled in registration order; when two sensors of the
        same kind are registered the later one wins.
        """
        with self._collect_lock:
            reading = self._poll_sensors(self._clock())
            self._repo.append(reading)
        logger.debug("Collected reading for %s: %s", self._name, reading)
        return reading

    def _poll_sensors(self, timestamp: datetime) -> Reading:
        temperature = humidity = pressure = wind_speed = 0.0
        wind_direction = NO_DIRECTION

        for sensor in self._sensors:
            if isinstance(sensor, TemperatureSensor):
                temperature = sensor.read_value()
            elif isinstance(sensor, HumiditySensor):
                humidity = sensor.read_value()
            elif isinstance(sensor, PressureSensor):
                pressure = sensor.read_value()
            elif isinstance(sensor, WindSensor):
                wind_speed = sensor.read_value()
                wind_direction = sensor.read_direction()
            else:
                logger.debug("Ignoring unsupported sensor %r", sensor)

        return Reading(
            timestamp=timestamp,
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
            wind_speed=wind_speed,
            wind_direction=wind_direction,
        )

    def latest(self) -> Reading | None:
        return self._repo.latest()

    def history(self) -> list[Reading]:
        return self._repo.history()

    def reading_count(self) -> int:
        return self._repo.count()
