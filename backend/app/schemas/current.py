"""Pydantic schemas for current conditions API."""

from pydantic import BaseModel


class CurrentConditions(BaseModel):
    location: str
    temperature: int
    feels_like: int
    humidity: int | None = None
    wind_speed: int
    description: str
    icon: str
    glyph: str
    latitude: float | None = None
    longitude: float | None = None
