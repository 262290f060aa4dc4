"""Pydantic schemas for forecast API."""

from pydantic import BaseModel


class DailyForecast(BaseModel):
    day_label: str
    high: int
    low: int
    condition: str
    icon: str
    glyph: str


class ForecastResponse(BaseModel):
    location: str | None = None
    days: list[DailyForecast]
