"""Display formatting for current conditions and forecast days.

Turns provider payloads and daily summaries into the values the dashboard
shows: rounded temperatures, title-cased descriptions and icon glyphs.
"""

from datetime import timezone, tzinfo
from typing import Any

from .forecast_daily import (
    DailySummary,
    aggregate_daily,
    parse_forecast_entries,
    payload_timezone,
    round_half_up,
    title_case,
)

DEFAULT_GLYPH = "🌤️"

# OpenWeatherMap icon codes -> emoji; "d" day, "n" night variants.
ICON_GLYPHS = {
    "01d": "☀️", "01n": "🌙", "02d": "⛅", "02n": "☁️",
    "03d": "☁️", "03n": "☁️", "04d": "☁️", "04n": "☁️",
    "09d": "🌧️", "09n": "🌧️", "10d": "🌦️", "10n": "🌧️",
    "11d": "⛈️", "11n": "⛈️", "13d": "❄️", "13n": "❄️",
    "50d": "🌫️", "50n": "🌫️",
}


def glyph_for(icon: str | None) -> str:
    return ICON_GLYPHS.get(icon or "", DEFAULT_GLYPH)


def display_location(name: str, country: str | None) -> str:
    """City name, with the country appended only for non-US results."""
    if not country or country == "US":
        return name
    return f"{name}, {country}"


def current_conditions(payload: dict[str, Any]) -> dict[str, Any]:
    """Build the current-conditions panel from a provider weather payload.

    Raises:
        KeyError, IndexError, TypeError: payload lacks a required field.
    """
    main = payload["main"]
    weather = payload["weather"][0]
    coord = payload.get("coord") or {}
    return {
        "location": display_location(payload["name"], (payload.get("sys") or {}).get("country")),
        "temperature": round_half_up(main["temp"]),
        "feels_like": round_half_up(main["feels_like"]),
        "humidity": main.get("humidity"),
        "wind_speed": round_half_up((payload.get("wind") or {}).get("speed", 0.0)),
        "description": title_case(weather["description"]),
        "icon": weather["icon"],
        "glyph": glyph_for(weather["icon"]),
        "latitude": coord.get("lat"),
        "longitude": coord.get("lon"),
    }


def forecast_day(summary: DailySummary) -> dict[str, Any]:
    return {
        "day_label": summary.day_label,
        "high": summary.high,
        "low": summary.low,
        "condition": summary.condition,
        "icon": summary.icon,
        "glyph": glyph_for(summary.icon),
    }


def forecast_days(payload: dict[str, Any], default_tz: tzinfo = timezone.utc) -> list[dict[str, Any]]:
    """Daily forecast panel rows from a provider forecast payload.

    Days are grouped in the location's own UTC offset when the payload
    reports one, otherwise in ``default_tz``.
    """
    entries = parse_forecast_entries(payload)
    tz = payload_timezone(payload, default_tz)
    return [forecast_day(summary) for summary in aggregate_daily(entries, tz)]
