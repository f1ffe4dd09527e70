from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ReadingRead(BaseModel):
    timestamp: datetime
    temperature: float
    humidity: float
    pressure: float
    wind_speed: float = Field(ge=0)
    wind_direction: str = Field(min_length=1, max_length=8)


class AlertRead(BaseModel):
    alert_type: str = Field(min_length=1, max_length=64)
    message: str
    issued_at: datetime
    expired: bool = False
    status: str


class CurrentWeather(BaseModel):
    station: str
    reading: ReadingRead
    condition: str


class CollectResponse(BaseModel):
    reading: ReadingRead
    condition: str
    alerts: list[AlertRead] = Field(default_factory=list)


class TrendPointRead(BaseModel):
    timestamp: datetime
    value: float


class TrendsResponse(BaseModel):
    station: str
    temperature: list[TrendPointRead] = Field(default_factory=list)
    humidity: list[TrendPointRead] = Field(default_factory=list)


class PredictionRead(BaseModel):
    day: int = Field(ge=1)
    condition: str
    min_temp: float
    max_temp: float
    description: str
    humidity: float = Field(ge=30, le=100)
    pressure: float = Field(ge=950, le=1050)


class ForecastResponse(BaseModel):
    station: str
    issued_at: datetime
    predictions: list[PredictionRead] = Field(default_factory=list)


class ExpireAlertsResponse(BaseModel):
    expired: int = Field(ge=0)


class StatisticsResponse(BaseModel):
    count: int = Field(ge=0)
    average_temperature: float
    max_temperature: float
    min_temperature: float
    wind_direction_distribution: dict[str, int] = Field(default_factory=dict)
