"""OpenWeatherMap API client.

Fetches current conditions and the 5-day / 3-hour forecast for a resolved
location query. Successful payloads are cached in-process for a short time
so repeated lookups of the same place do not hit the provider again.

API docs: https://openweathermap.org/current, https://openweathermap.org/forecast5
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .errors import MissingApiKeyError, UpstreamStatusError, UpstreamUnavailableError
from .location_query import DEFAULT_COUNTRY, UpstreamQuery, query_params

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"

CURRENT_ENDPOINT = "weather"
FORECAST_ENDPOINT = "forecast"

# HTTP timeout for provider requests (seconds).
REQUEST_TIMEOUT = 10.0

# Cache duration in seconds (10 minutes).
CACHE_TTL_SECONDS = 10 * 60

# Upper bound on cached responses; oldest are evicted first.
MAX_CACHE_ENTRIES = 512


@dataclass
class _CacheEntry:
    """Internal cache entry for one provider response."""
    payload: dict
    expires_at: float


# Module-level cache keyed by (endpoint, sorted location/unit params).
_cache: dict[tuple, _CacheEntry] = {}


def _cache_key(endpoint: str, params: dict[str, str]) -> tuple:
    """Produce a stable cache key; the API key is never part of it."""
    return (endpoint,) + tuple(sorted((k, v) for k, v in params.items() if k != "appid"))


def _get_cached(key: tuple) -> Optional[dict]:
    entry = _cache.get(key)
    if entry is None:
        return None
    if time.time() < entry.expires_at:
        logger.debug("OpenWeather cache hit for %s", key)
        return entry.payload
    del _cache[key]
    return None


def _prune_cache(now: float) -> None:
    """Drop expired entries, then the oldest ones beyond MAX_CACHE_ENTRIES."""
    for key in [k for k, entry in _cache.items() if entry.expires_at <= now]:
        del _cache[key]
    while len(_cache) >= MAX_CACHE_ENTRIES:
        del _cache[next(iter(_cache))]


def _set_cached(key: tuple, payload: dict, ttl: float) -> None:
    if ttl <= 0:
        return
    now = time.time()
    _cache.pop(key, None)
    _prune_cache(now)
    _cache[key] = _CacheEntry(payload=payload, expires_at=now + ttl)


def clear_cache() -> None:
    """Drop every cached provider response."""
    _cache.clear()


class OpenWeatherClient:
    """Async client for the two OpenWeatherMap endpoints the dashboard uses."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "imperial",
        country: str = DEFAULT_COUNTRY,
        timeout: float = REQUEST_TIMEOUT,
        cache_ttl: float = CACHE_TTL_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.country = country
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Any) -> "OpenWeatherClient":
        return cls(
            api_key=settings.openweather_api_key,
            base_url=settings.openweather_base_url,
            units=settings.units,
            country=settings.country,
            timeout=settings.request_timeout,
            cache_ttl=settings.cache_ttl_seconds,
        )

    async def fetch_current(self, query: UpstreamQuery) -> dict:
        """Fetch current conditions for a location query."""
        return await self._fetch(CURRENT_ENDPOINT, query)

    async def fetch_forecast(self, query: UpstreamQuery) -> dict:
        """Fetch the 3-hour interval forecast for a location query."""
        return await self._fetch(FORECAST_ENDPOINT, query)

    async def _fetch(self, endpoint: str, query: UpstreamQuery) -> dict:
        """GET one provider endpoint.

        Raises:
            MissingApiKeyError: no API key configured.
            UpstreamStatusError: provider returned a non-2xx status.
            UpstreamUnavailableError: network failure, timeout, or a body
                that is not a JSON object.
        """
        if not self.api_key:
            raise MissingApiKeyError()

        params = query_params(query, self.country)
        params["units"] = self.units

        key = _cache_key(endpoint, params)
        cached = _get_cached(key)
        if cached is not None:
            return cached

        url = f"{self.base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                resp = await client.get(url, params={**params, "appid": self.api_key})
        except httpx.HTTPError as exc:
            # Request errors can echo the URL, which holds the key; log the type only
            logger.warning("OpenWeather %s request failed: %s", endpoint, type(exc).__name__)
            raise UpstreamUnavailableError(type(exc).__name__) from exc

        if not resp.is_success:
            logger.warning(
                "OpenWeather %s returned HTTP %d for %s",
                endpoint, resp.status_code, params,
            )
            raise UpstreamStatusError(resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning("OpenWeather %s returned a non-JSON body", endpoint)
            raise UpstreamUnavailableError("invalid JSON") from exc
        if not isinstance(payload, dict):
            logger.warning("OpenWeather %s returned %s, expected an object",
                           endpoint, type(payload).__name__)
            raise UpstreamUnavailableError("unexpected payload")

        _set_cached(key, payload, self.cache_ttl)
        logger.info("OpenWeather %s fetched for %s", endpoint, params)
        return payload
