from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

COMPASS_DIRECTIONS: tuple[str, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
NO_DIRECTION = "N/A"


@dataclass(frozen=True)
class Reading:
    timestamp: datetime
    temperature: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0
    wind_speed: float = 0.0
    wind_direction: str = NO_DIRECTION


@dataclass(frozen=True)
class Prediction:
    day: int
    condition: str
    min_temp: float
    max_temp: float
    description: str
    humidity: float
    pressure: float


@dataclass(frozen=True)
class Forecast:
    station: str
    issued_at: datetime
    predictions: tuple[Prediction, ...] = ()


@dataclass
class Alert:
    alert_type: str
    message: str
    issued_at: datetime
    expired: bool = False

    @property
    def status(self) -> str:
        return "EXPIRED" if self.expired else "ACTIVE"

    def expire(self) -> None:
        self.expired = True


@dataclass(frozen=True)
class TrendPoint:
    timestamp: datetime
    value: float


@dataclass(frozen=True)
class WeatherStatistics:
    count: int
    average_temperature: float
    max_temperature: float
    min_temperature: float
    wind_direction_distribution: dict[str, int] = field(default_factory=dict)
