from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from weatherstation.core.config import Settings
from weatherstation.core.security import get_password_hash
from weatherstation.factory import create_app
from weatherstation.repositories.memory import InMemoryReadingRepository
from weatherstation.services.station import WeatherStation
from tests.fakes import SteppingClock


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # setup_logging binds to the sys.stderr of the moment; CliRunner closes its stream.
    logging.getLogger("weatherstation").handlers.clear()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="DEBUG",
        secret_key="test_secret_key_must_be_32_chars_minimum",
        admin_username="admin",
        admin_password_hash=get_password_hash("password"),
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        station_name="Test Station",
        random_seed=1234,
        forecast_default_days=3,
        forecast_max_days=10,
        collection_background_enabled=False,
    )


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def token(client: TestClient) -> str:
    resp = client.post(
        "/api/v1/auth/token",
        data={"username": "admin", "password": "password"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


@pytest.fixture()
def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def station() -> WeatherStation:
    return WeatherStation(
        name="Test Station",
        repo=InMemoryReadingRepository(),
        clock=SteppingClock(),
    )
