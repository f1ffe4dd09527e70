from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADMIN_PASSWORD_HASH = (
    "$2b$12$sdOU8uwfeIt/6CaZUIM6ke71zg30wHn0r3QC4TDA3xHYwQxTVEEXi"
)

SENSOR_KINDS = ("Temperature", "Humidity", "Pressure", "Wind")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WS_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    secret_key: str = Field(min_length=32)
    algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=30, ge=1, le=60 * 24 * 30)

    admin_username: str = Field(default="admin", min_length=3, max_length=64)
    admin_password_hash: str = Field(default=DEFAULT_ADMIN_PASSWORD_HASH, min_length=10)

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    station_name: str = Field(default="Central Weather Station", min_length=1, max_length=128)
    sensors: list[str] = Field(default_factory=lambda: list(SENSOR_KINDS))
    random_seed: int | None = Field(default=None)

    forecast_default_days: int = Field(default=3, ge=0, le=30)
    forecast_max_days: int = Field(default=14, ge=1, le=30)

    collection_background_enabled: bool = Field(default=False)
    collection_interval_seconds: float = Field(default=60.0, ge=0.25, le=86_400.0)

    @field_validator("sensors")
    @classmethod
    def _validate_sensors(cls, v: list[str]) -> list[str]:
        for kind in v:
            if kind not in SENSOR_KINDS:
                raise ValueError(f"Unknown sensor kind '{kind}'.")
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
