"""GET /api/lookup - Current conditions and forecast in one request."""

import asyncio

from fastapi import APIRouter, Depends

from ..schemas.lookup import LookupResponse
from ..services.location_query import UpstreamQuery
from ..services.openweather import OpenWeatherClient
from .dependencies import LOCATION_ERROR_RESPONSES, get_location_query, get_weather_client
from .forecast import build_forecast
from .weather import build_current

router = APIRouter()


@router.get("/lookup", response_model=LookupResponse, responses=LOCATION_ERROR_RESPONSES)
async def get_lookup(
    query: UpstreamQuery = Depends(get_location_query),
    client: OpenWeatherClient = Depends(get_weather_client),
):
    """Fetch both provider endpoints concurrently and return both panels."""
    current_payload, forecast_payload = await asyncio.gather(
        client.fetch_current(query),
        client.fetch_forecast(query),
    )
    return LookupResponse(
        current=build_current(current_payload),
        forecast=build_forecast(forecast_payload),
    )
