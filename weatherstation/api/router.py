from fastapi import APIRouter

from weatherstation.api.routes import auth, forecast, station

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(station.router, tags=["station"])
api_router.include_router(forecast.router, tags=["forecast"])
