"""Simulated sensors that feed a :class:`~weatherstation.services.station.WeatherStation`.

Every sensor owns its random source. Pass ``rng`` (or ``seed`` through
:func:`build_sensors`) to get reproducible readings.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from weatherstation.models.weather import COMPASS_DIRECTIONS


class Sensor(ABC):
    sensor_type: str = ""
    unit: str = ""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @abstractmethod
    def read_value(self) -> float: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RangeSensor(Sensor):
    """Sensor producing a uniform value in ``[low, high)``."""

    low: float = 0.0
    high: float = 1.0

    def read_value(self) -> float:
        return self.low + self._rng.random() * (self.high - self.low)


class TemperatureSensor(RangeSensor):
    sensor_type = "Temperature"
    unit = "°C"
    low = -10.0
    high = 40.0


class HumiditySensor(RangeSensor):
    sensor_type = "Humidity"
    unit = "%"
    low = 30.0
    high = 100.0


class PressureSensor(RangeSensor):
    sensor_type = "Pressure"
    unit = "hPa"
    low = 950.0
    high = 1050.0


class WindSensor(RangeSensor):
    sensor_type = "Wind"
    unit = "km/h"
    low = 0.0
    high = 100.0

    def read_direction(self) -> str:
        return self._rng.choice(COMPASS_DIRECTIONS)


SENSOR_CLASSES: dict[str, type[Sensor]] = {
    cls.sensor_type: cls
    for cls in (TemperatureSensor, HumiditySensor, PressureSensor, WindSensor)
}


def derive_rng(seed: int | None, offset: int) -> random.Random:
    """Generator for the ``offset``-th consumer of a run seed; unseeded when ``seed`` is None."""
    if seed is None:
        return random.Random()
    return random.Random(seed + offset)


def build_sensors(kinds: list[str], *, seed: int | None = None) -> list[Sensor]:
    """Instantiate sensors by type name, in the given order.

    With a seed, sensor ``i`` gets ``derive_rng(seed, i)`` so two sensors
    never share a stream. Other consumers take offsets past the last sensor.
    """
    sensors: list[Sensor] = []
    for index, kind in enumerate(kinds):
        try:
            cls = SENSOR_CLASSES[kind]
        except KeyError as e:
            raise ValueError(f"Unknown sensor kind '{kind}'") from e
        sensors.append(cls(rng=derive_rng(seed, index)))
    return sensors
