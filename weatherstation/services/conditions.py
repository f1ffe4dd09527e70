"""Condition labels for current weather and for forecast days.

The two classifiers share thresholds but only the forecast variant looks at
pressure, so they are kept as separate functions.
"""

from __future__ import annotations

SNOW = "Snow"
FREEZING = "Freezing"
RAIN = "Rain"
CLOUDY = "Cloudy"
SHOWERS = "Showers"
PARTLY_CLOUDY = "Partly Cloudy"
THUNDERSTORM = "Thunderstorm possible"
SUNNY = "Sunny"

CONDITIONS: tuple[str, ...] = (
    SNOW,
    FREEZING,
    RAIN,
    CLOUDY,
    SHOWERS,
    PARTLY_CLOUDY,
    THUNDERSTORM,
    SUNNY,
)

_DESCRIPTIONS: dict[str, str] = {
    SNOW: "Heavy snowfall expected, travel may be affected",
    FREEZING: "Freezing temperatures, risk of ice on roads",
    RAIN: "Persistent rain throughout the day",
    CLOUDY: "Overcast with little sunshine expected",
    SHOWERS: "Scattered showers throughout the day",
    PARTLY_CLOUDY: "Mix of sun and clouds",
    THUNDERSTORM: "Hot and humid with chance of thunderstorms",
    SUNNY: "Clear skies and sunny",
}
EXTREME_HEAT_DESCRIPTION = "Extremely hot, stay hydrated"
FALLBACK_DESCRIPTION = "Weather conditions normal for this time of year"


def classify_current(temperature: float, humidity: float) -> str:
    if temperature < 0:
        return SNOW if humidity > 70 else FREEZING
    if temperature < 10:
        return RAIN if humidity > 80 else CLOUDY
    if temperature < 25:
        return SHOWERS if humidity > 70 else PARTLY_CLOUDY
    return THUNDERSTORM if humidity > 60 else SUNNY


def classify_forecast(temperature: float, humidity: float, pressure: float) -> str:
    if temperature < 0:
        return SNOW if humidity > 70 else FREEZING
    if temperature < 10:
        if humidity > 80:
            return RAIN
        if pressure < 1000:
            return CLOUDY
        return PARTLY_CLOUDY
    if temperature < 25:
        if humidity > 70 and pressure < 1010:
            return SHOWERS
        return PARTLY_CLOUDY
    if humidity > 60 and pressure < 1005:
        return THUNDERSTORM
    return SUNNY


def describe(condition: str, temperature: float) -> str:
    if condition == SUNNY and temperature > 30:
        return EXTREME_HEAT_DESCRIPTION
    return _DESCRIPTIONS.get(condition, FALLBACK_DESCRIPTION)
