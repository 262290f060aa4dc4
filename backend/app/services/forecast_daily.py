"""Daily forecast aggregation.

Collapses the provider's 3-hour forecast samples into per-day summaries:
high/low temperature plus the condition and icon of the first sample seen
for each day. Days are calendar dates in a caller-supplied time zone and
keep the order in which they first appear in the series.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Iterable

logger = logging.getLogger(__name__)

# Number of days shown in the forecast panel.
MAX_FORECAST_DAYS = 5

# Short en-US weekday names indexed by date.weekday().
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class ForecastEntry:
    """One provider forecast sample."""
    timestamp: int  # Unix seconds
    temperature: float  # Degrees F
    condition: str  # e.g. "light rain"
    icon: str  # e.g. "10d"


@dataclass(frozen=True)
class DailySummary:
    """Aggregated forecast for one calendar day."""
    day_label: str  # e.g. "Tue"
    high: int
    low: int
    condition: str  # Title-cased, e.g. "Light Rain"
    icon: str


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (-2.5 -> -2)."""
    return math.floor(value + 0.5)


def title_case(text: str) -> str:
    """Upper-case the first letter of each space-separated word.

    Unlike str.title(), the remaining letters are left untouched.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def aggregate_daily(
    entries: Iterable[ForecastEntry],
    tz: tzinfo = timezone.utc,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailySummary]:
    """Reduce forecast samples to at most ``max_days`` daily summaries.

    Args:
        entries: Forecast samples in chronological order.
        tz: Time zone whose calendar dates define a day.
        max_days: Upper bound on the number of summaries returned.

    Returns:
        One DailySummary per distinct date, in first-appearance order.
        An empty series yields an empty list.
    """
    # dicts keep insertion order, which is first-appearance order here
    days: dict[date, tuple[datetime, ForecastEntry, list[float]]] = {}
    for entry in entries:
        local = datetime.fromtimestamp(entry.timestamp, tz)
        key = local.date()
        if key not in days:
            days[key] = (local, entry, [])
        days[key][2].append(entry.temperature)

    summaries: list[DailySummary] = []
    for local, first, temps in list(days.values())[:max_days]:
        summaries.append(DailySummary(
            day_label=WEEKDAY_ABBREVIATIONS[local.weekday()],
            high=round_half_up(max(temps)),
            low=round_half_up(min(temps)),
            condition=title_case(first.condition),
            icon=first.icon,
        ))
    return summaries


def _parse_entry(item: Any) -> ForecastEntry:
    weather = item["weather"][0]
    timestamp = int(item["dt"])
    # Raises OverflowError/OSError outside the platform time_t range
    datetime.fromtimestamp(timestamp, timezone.utc)
    temperature = float(item["main"]["temp"])
    if not math.isfinite(temperature):
        raise ValueError(f"non-finite temperature {temperature!r}")
    return ForecastEntry(
        timestamp=timestamp,
        temperature=temperature,
        condition=str(weather["description"]),
        icon=str(weather["icon"]),
    )


def parse_forecast_entries(payload: dict) -> list[ForecastEntry]:
    """Extract forecast samples from a provider forecast payload.

    Samples missing ``dt``, ``main.temp`` or ``weather[0]`` fields, with a
    timestamp out of range, or with a NaN/infinite temperature are skipped with a warning instead of failing the whole batch.
    """
    raw = payload.get("list") or []
    entries: list[ForecastEntry] = []
    for idx, item in enumerate(raw):
        try:
            entries.append(_parse_entry(item))
        except (KeyError, IndexError, TypeError, ValueError, OverflowError, OSError) as exc:
            logger.warning("Skipping malformed forecast sample %d: %r", idx, exc)
    if len(entries) < len(raw):
        logger.info("Parsed %d of %d forecast samples", len(entries), len(raw))
    return entries


def payload_timezone(payload: dict, default: tzinfo = timezone.utc) -> tzinfo:
    """Return the location's fixed UTC offset from the payload, else ``default``."""
    city = payload.get("city")
    offset = city.get("timezone") if isinstance(city, dict) else None
    if offset is None:
        return default
    try:
        return timezone(timedelta(seconds=int(offset)))
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring unusable forecast timezone offset %r: %s", offset, exc)
        return default
