"""Shared FastAPI dependencies for the weather routes."""

from fastapi import Query

from ..config import settings
from ..schemas.lookup import ErrorResponse
from ..services.location_query import UpstreamQuery, resolve_location, validate_location
from ..services.openweather import OpenWeatherClient

# Documented error bodies for routes that take a location
LOCATION_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid location"},
    404: {"model": ErrorResponse, "description": "Location not found"},
    500: {"model": ErrorResponse, "description": "API key not configured or internal error"},
    502: {"model": ErrorResponse, "description": "Weather service unavailable"},
}


def get_weather_client() -> OpenWeatherClient:
    """Provider client built from the current settings."""
    return OpenWeatherClient.from_settings(settings)


def get_location_query(
    location: str | None = Query(None, description="City, \"City, ST\" or ZIP"),
) -> UpstreamQuery:
    """Validate the ``location`` parameter and resolve it to an upstream query.

    Raises InvalidLocationError (HTTP 400) for a missing, blank or
    over-long location.
    """
    return resolve_location(validate_location(location))
