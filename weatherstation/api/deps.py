from __future__ import annotations

from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import OAuth2PasswordBearer, SecurityScopes

from weatherstation.core.config import Settings
from weatherstation.core.security import (
    ALL_SCOPES,
    READ_SCOPE,
    WRITE_SCOPE,
    read_token,
    verify_password,
)
from weatherstation.schemas.auth import User
from weatherstation.services.alerts import WeatherAlertSystem
from weatherstation.services.analyzer import WeatherAnalyzer
from weatherstation.services.forecast import WeatherForecaster
from weatherstation.services.station import WeatherStation

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/token",
    scopes={
        READ_SCOPE: "Read station readings, forecasts, alerts and statistics",
        WRITE_SCOPE: "Collect readings and manage alerts",
    },
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_station(request: Request) -> WeatherStation:
    return request.app.state.station


def get_alert_system(request: Request) -> WeatherAlertSystem:
    return request.app.state.alert_system


def get_forecaster(
    request: Request,
    station: Annotated[WeatherStation, Depends(get_station)],
) -> WeatherForecaster:
    return WeatherForecaster(station=station, rng=request.app.state.forecast_rng)


def get_analyzer(
    station: Annotated[WeatherStation, Depends(get_station)],
) -> WeatherAnalyzer:
    return WeatherAnalyzer(station=station)


def authenticate_user(*, username: str, password: str, settings: Settings) -> User | None:
    if username != settings.admin_username:
        return None
    if not verify_password(password, settings.admin_password_hash):
        return None
    return User(username=username, scopes=list(ALL_SCOPES))


def get_current_user(
    security_scopes: SecurityScopes,
    token: Annotated[str, Depends(oauth2_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    authenticate_value = "Bearer"
    if security_scopes.scopes:
        authenticate_value = f'Bearer scope="{security_scopes.scope_str}"'

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": authenticate_value},
    )

    try:
        claims = read_token(token, settings=settings)
    except jwt.PyJWTError as e:  # noqa: BLE001 - normalize to 401
        raise credentials_exception from e

    for scope in security_scopes.scopes:
        if not claims.allows(scope):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions",
                headers={"WWW-Authenticate": authenticate_value},
            )

    return User(username=claims.subject, scopes=list(claims.scopes))


CurrentUser = Annotated[User, Security(get_current_user)]

ReadUser = Annotated[User, Security(get_current_user, scopes=[READ_SCOPE])]
WriteUser = Annotated[User, Security(get_current_user, scopes=[WRITE_SCOPE])]
