from __future__ import annotations

from collections import Counter

from weatherstation.models.weather import Reading, TrendPoint, WeatherStatistics
from weatherstation.services.station import WeatherStation


class WeatherAnalyzer:
    """Statistics derived from the station history at call time."""

    def __init__(self, *, station: WeatherStation) -> None:
        self._station = station

    def average_temperature(self) -> float:
        return _average(self._station.history())

    def max_temperature(self) -> float:
        temps = [r.temperature for r in self._station.history()]
        return max(temps, default=0.0)

    def min_temperature(self) -> float:
        temps = [r.temperature for r in self._station.history()]
        return min(temps, default=0.0)

    def wind_direction_distribution(self) -> dict[str, int]:
        return dict(Counter(r.wind_direction for r in self._station.history()))

    def statistics(self) -> WeatherStatistics:
        # One snapshot so every figure describes the same history.
        rows = self._station.history()
        temps = [r.temperature for r in rows]
        return WeatherStatistics(
            count=len(rows),
            average_temperature=_average(rows),
            max_temperature=max(temps, default=0.0),
            min_temperature=min(temps, default=0.0),
            wind_direction_distribution=dict(Counter(r.wind_direction for r in rows)),
        )

    def temperature_trend(self) -> list[TrendPoint]:
        return [
            TrendPoint(timestamp=r.timestamp, value=r.temperature)
            for r in self._station.history()
        ]

    def humidity_trend(self) -> list[TrendPoint]:
        return [
            TrendPoint(timestamp=r.timestamp, value=r.humidity)
            for r in self._station.history()
        ]


def _average(rows: list[Reading]) -> float:
    if not rows:
        return 0.0
    return sum(r.temperature for r in rows) / len(rows)
