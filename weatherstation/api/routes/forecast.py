from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from weatherstation.api.deps import ReadUser, get_forecaster, get_settings
from weatherstation.core.config import Settings
from weatherstation.core.exceptions import InsufficientDataError
from weatherstation.schemas.weather import ForecastResponse
from weatherstation.services.forecast import WeatherForecaster

router = APIRouter(prefix="/station")


@router.get("/forecast", response_model=ForecastResponse)
def forecast(
    _: ReadUser,
    forecaster: Annotated[WeatherForecaster, Depends(get_forecaster)],
    settings: Annotated[Settings, Depends(get_settings)],
    days: Annotated[int | None, Query(ge=0)] = None,
) -> ForecastResponse:
    if days is None:
        days = settings.forecast_default_days
    if days > settings.forecast_max_days:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"'days' must be <= {settings.forecast_max_days}",
        )
    try:
        result = forecaster.predict(days)
    except InsufficientDataError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    return ForecastResponse.model_validate(asdict(result))
