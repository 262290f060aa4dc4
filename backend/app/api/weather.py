"""GET /api/weather - Current conditions for a location."""

import logging

from fastapi import APIRouter, Depends

from ..schemas.current import CurrentConditions
from ..services.display import current_conditions
from ..services.errors import UpstreamUnavailableError
from ..services.location_query import UpstreamQuery
from ..services.openweather import OpenWeatherClient
from .dependencies import LOCATION_ERROR_RESPONSES, get_location_query, get_weather_client

logger = logging.getLogger(__name__)
router = APIRouter()


def build_current(payload: dict) -> CurrentConditions:
    """Validate a provider weather payload into the current-conditions panel."""
    try:
        return CurrentConditions(**current_conditions(payload))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        logger.warning("Malformed current weather payload: %r", exc)
        raise UpstreamUnavailableError("malformed current weather payload") from exc


@router.get("/weather", response_model=CurrentConditions, responses=LOCATION_ERROR_RESPONSES)
async def get_weather(
    query: UpstreamQuery = Depends(get_location_query),
    client: OpenWeatherClient = Depends(get_weather_client),
):
    """Return current conditions for the requested location."""
    payload = await client.fetch_current(query)
    return build_current(payload)
