from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta, timezone

from weatherstation.clients.sensors import build_sensors
from weatherstation.models.weather import NO_DIRECTION
from weatherstation.repositories.memory import InMemoryReadingRepository
from weatherstation.services.conditions import classify_current
from weatherstation.services.station import WeatherStation
from tests.fakes import (
    FixedHumiditySensor,
    FixedPressureSensor,
    FixedTemperatureSensor,
    FixedWindSensor,
)


def test_latest_is_none_on_empty_history(station: WeatherStation) -> None:
    assert station.latest() is None
    assert station.history() == []


def test_collect_builds_history_in_order(station: WeatherStation) -> None:
    for sensor in build_sensors(["Temperature", "Humidity", "Pressure", "Wind"], seed=9):
        station.add_sensor(sensor)

    collected = [station.collect_reading() for _ in range(5)]

    history = station.history()
    assert len(history) == 5
    assert history == collected
    assert station.latest() == collected[-1]
    timestamps = [r.timestamp for r in history]
    assert timestamps == sorted(timestamps)


def test_history_is_an_independent_copy(station: WeatherStation) -> None:
    station.add_sensor(FixedTemperatureSensor(10.0))
    station.collect_reading()

    snapshot = station.history()
    snapshot.clear()

    assert len(station.history()) == 1


def test_missing_sensors_default_to_zero_and_no_direction(station: WeatherStation) -> None:
    station.add_sensor(FixedTemperatureSensor(12.5))

    reading = station.collect_reading()

    assert reading.temperature == 12.5
    assert reading.humidity == 0.0
    assert reading.pressure == 0.0
    assert reading.wind_speed == 0.0
    assert reading.wind_direction == NO_DIRECTION


def test_wind_sensor_fills_speed_and_direction(station: WeatherStation) -> None:
    station.add_sensor(FixedWindSensor(42.0, "SW"))

    reading = station.collect_reading()

    assert reading.wind_speed == 42.0
    assert reading.wind_direction == "SW"


def test_duplicate_sensor_kinds_last_registered_wins(station: WeatherStation) -> None:
    station.add_sensor(FixedTemperatureSensor(1.0))
    station.add_sensor(FixedPressureSensor(990.0))
    station.add_sensor(FixedTemperatureSensor(2.0))
    station.add_sensor(FixedWindSensor(5.0, "N"))
    station.add_sensor(FixedWindSensor(6.0, "E"))

    reading = station.collect_reading()

    assert reading.temperature == 2.0
    assert reading.pressure == 990.0
    assert reading.wind_speed == 6.0
    assert reading.wind_direction == "E"


def test_fixed_sensors_classify_as_rain(station: WeatherStation) -> None:
    station.add_sensor(FixedTemperatureSensor(5.0))
    station.add_sensor(FixedHumiditySensor(90.0))

    reading = station.collect_reading()

    assert classify_current(reading.temperature, reading.humidity) == "Rain"


class _StallingClock:
    """First call hands out the earlier stamp, then waits until released."""

    def __init__(self) -> None:
        self.first_stamped = threading.Event()
        self.release = threading.Event()
        self._base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._calls = 0

    def __call__(self) -> datetime:
        self._calls += 1
        stamp = self._base + timedelta(seconds=self._calls)
        if self._calls == 1:
            self.first_stamped.set()
            self.release.wait(timeout=5)
        return stamp


def test_overlapping_collections_keep_time_order() -> None:
    clock = _StallingClock()
    station = WeatherStation(name="Race", repo=InMemoryReadingRepository(), clock=clock)
    station.add_sensor(FixedTemperatureSensor(10.0))

    first = threading.Thread(target=station.collect_reading)
    first.start()
    assert clock.first_stamped.wait(timeout=5)

    second = threading.Thread(target=station.collect_reading)
    second.start()
    time.sleep(0.05)
    clock.release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    stamps = [r.timestamp for r in station.history()]
    assert len(stamps) == 2
    assert stamps == sorted(stamps)


def test_reading_count_tracks_history(station: WeatherStation) -> None:
    assert station.reading_count() == 0
    station.add_sensor(FixedTemperatureSensor(3.0))
    station.collect_reading()
    station.collect_reading()
    assert station.reading_count() == 2
