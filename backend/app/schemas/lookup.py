"""Pydantic schemas for the combined lookup, health, and error responses."""

from pydantic import BaseModel

from .current import CurrentConditions
from .forecast import ForecastResponse


class LookupResponse(BaseModel):
    current: CurrentConditions
    forecast: ForecastResponse


class HealthResponse(BaseModel):
    status: str = "ok"
    api_key_configured: bool


class ErrorResponse(BaseModel):
    error: str
