from __future__ import annotations

import pytest
from pydantic import ValidationError

from weatherstation.core.config import SENSOR_KINDS, Settings, load_settings

SECRET = "test_secret_key_must_be_32_chars_minimum"


def test_defaults() -> None:
    settings = Settings(_env_file=None, secret_key=SECRET)
    assert settings.sensors == list(SENSOR_KINDS)
    assert settings.station_name == "Central Weather Station"
    assert settings.forecast_default_days == 3
    assert settings.random_seed is None
    assert settings.is_production is False


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WS_SECRET_KEY", SECRET)
    monkeypatch.setenv("WS_STATION_NAME", "Harbour")
    monkeypatch.setenv("WS_SENSORS", '["Wind", "Pressure"]')
    monkeypatch.setenv("WS_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.station_name == "Harbour"
    assert settings.sensors == ["Wind", "Pressure"]
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://localhost:3000", "http://localhost:8000"]


def test_unknown_sensor_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key=SECRET, sensors=["Rainfall"])


def test_short_secret_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key="short")
