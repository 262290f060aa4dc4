"""Top-level API router aggregation."""

from fastapi import APIRouter

from . import forecast, health, lookup, weather

api_router = APIRouter(prefix="/api")

api_router.include_router(weather.router)
api_router.include_router(forecast.router)
api_router.include_router(lookup.router)
api_router.include_router(health.router)
