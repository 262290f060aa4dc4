"""GET /api/forecast - Five-day daily forecast for a location."""

from fastapi import APIRouter, Depends

from ..config import settings
from ..schemas.forecast import ForecastResponse
from ..services.display import forecast_days
from ..services.location_query import UpstreamQuery
from ..services.openweather import OpenWeatherClient
from .dependencies import LOCATION_ERROR_RESPONSES, get_location_query, get_weather_client

router = APIRouter()


def build_forecast(payload: dict) -> ForecastResponse:
    """Aggregate a provider forecast payload into daily rows."""
    city = payload.get("city")
    return ForecastResponse(
        location=city.get("name") if isinstance(city, dict) else None,
        days=forecast_days(payload, settings.display_tz),
    )


@router.get("/forecast", response_model=ForecastResponse, responses=LOCATION_ERROR_RESPONSES)
async def get_forecast(
    query: UpstreamQuery = Depends(get_location_query),
    client: OpenWeatherClient = Depends(get_weather_client),
):
    """Return up to five daily summaries for the requested location."""
    payload = await client.fetch_forecast(query)
    return build_forecast(payload)
