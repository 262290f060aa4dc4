"""Application configuration using Pydantic Settings."""

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import model_validator
from pydantic_settings import BaseSettings

# Resolve config: prefer system config (installed), fall back to repo .env (dev)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_SYSTEM_CONF = Path("/etc/weather-dashboard/weather.conf")
_ENV_FILE = _SYSTEM_CONF if _SYSTEM_CONF.exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    # OpenWeatherMap
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    request_timeout: float = 10.0

    # Fixed product scope: US locations, Fahrenheit/mph
    units: str = "imperial"
    country: str = "US"

    # Upstream payload cache (0 disables)
    cache_ttl_seconds: int = 600

    # Zone used to group forecast days when the payload carries no offset
    display_timezone: str = "UTC"

    @model_validator(mode="after")
    def _check_timezone(self) -> "Settings":
        """Reject display_timezone values that are not IANA zone names."""
        try:
            ZoneInfo(self.display_timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {self.display_timezone}") from exc
        return self

    @property
    def display_tz(self) -> ZoneInfo:
        return ZoneInfo(self.display_timezone)

    @property
    def api_key_configured(self) -> bool:
        return bool(self.openweather_api_key)

    # CORS
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_prefix": "WEATHER_", "env_file": str(_ENV_FILE)}


settings = Settings()
