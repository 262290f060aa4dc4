"""Free-text location classification for upstream weather queries.

Maps a user-entered location ("50401", "Baxter, IA", "Chicago") onto one of
three query shapes understood by the weather provider. Precedence is fixed:
ZIP code first, then city/state, then bare city.

The country is always the United States.
"""

import re
from dataclasses import dataclass
from typing import Union

from .errors import InvalidLocationError

MAX_LOCATION_LENGTH = 100

DEFAULT_COUNTRY = "US"

ZIP_PATTERN = re.compile(r"[0-9]{5}")

# City portion is greedy, so the split happens at the last comma.
CITY_STATE_PATTERN = re.compile(r"(.+),\s*([A-Za-z]{2,})")


@dataclass(frozen=True)
class ZipQuery:
    """5-digit US postal code, passed through unvalidated."""
    code: str


@dataclass(frozen=True)
class CityStateQuery:
    """City with a state name or abbreviation."""
    city: str
    state: str


@dataclass(frozen=True)
class CityQuery:
    """Bare city name; the provider picks the most populous match."""
    city: str


UpstreamQuery = Union[ZipQuery, CityStateQuery, CityQuery]


def validate_location(raw: str | None) -> str:
    """Trim a location and enforce the non-empty, <= 100 character rule.

    Raises:
        InvalidLocationError: if nothing is left after trimming or the
            trimmed text exceeds MAX_LOCATION_LENGTH.
    """
    text = (raw or "").strip()
    if not text or len(text) > MAX_LOCATION_LENGTH:
        raise InvalidLocationError("Invalid location")
    return text


def resolve_location(text: str) -> UpstreamQuery:
    """Classify a location string into exactly one upstream query shape.

    Args:
        text: Non-empty location, at most MAX_LOCATION_LENGTH characters.

    Returns:
        ZipQuery, CityStateQuery or CityQuery.
    """
    location = text.strip()

    if ZIP_PATTERN.fullmatch(location):
        return ZipQuery(code=location)

    match = CITY_STATE_PATTERN.fullmatch(location)
    if match:
        return CityStateQuery(
            city=match.group(1).strip(),
            state=match.group(2).strip(),
        )

    return CityQuery(city=location)


def query_params(query: UpstreamQuery, country: str = DEFAULT_COUNTRY) -> dict[str, str]:
    """Serialize a query into the provider's location parameters."""
    if isinstance(query, ZipQuery):
        return {"zip": f"{query.code},{country}"}
    if isinstance(query, CityStateQuery):
        return {"q": f"{query.city},{query.state},{country}"}
    return {"q": f"{query.city},{country}"}
