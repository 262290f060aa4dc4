"""Tests for dashboard display formatting."""

from datetime import timedelta, timezone

import pytest

from app.services.display import (
    DEFAULT_GLYPH,
    current_conditions,
    display_location,
    forecast_days,
    glyph_for,
)


def _current_payload(**overrides):
    payload = {
        "name": "Baxter",
        "sys": {"country": "US"},
        "coord": {"lat": 41.83, "lon": -93.15},
        "main": {"temp": 71.6, "feels_like": 70.5, "humidity": 64},
        "wind": {"speed": 9.22},
        "weather": [{"description": "broken clouds", "icon": "04d"}],
    }
    payload.update(overrides)
    return payload


class TestGlyphs:
    def test_known_codes(self):
        assert glyph_for("01d") == "☀️"
        assert glyph_for("01n") == "🌙"
        assert glyph_for("10d") == "🌦️"

    @pytest.mark.parametrize("icon", ["99x", "", None])
    def test_unknown_codes_use_default(self, icon):
        assert glyph_for(icon) == DEFAULT_GLYPH


class TestDisplayLocation:
    def test_us_shows_city_only(self):
        assert display_location("Baxter", "US") == "Baxter"

    def test_other_country_appended(self):
        assert display_location("London", "GB") == "London, GB"

    def test_missing_country(self):
        assert display_location("Baxter", None) == "Baxter"


class TestCurrentConditions:
    def test_panel_values(self):
        panel = current_conditions(_current_payload())
        assert panel == {
            "location": "Baxter",
            "temperature": 72,
            "feels_like": 71,
            "humidity": 64,
            "wind_speed": 9,
            "description": "Broken Clouds",
            "icon": "04d",
            "glyph": "☁️",
            "latitude": 41.83,
            "longitude": -93.15,
        }

    def test_missing_weather_raises(self):
        with pytest.raises(IndexError):
            current_conditions(_current_payload(weather=[]))


class TestForecastDays:
    def test_rows_include_glyph(self):
        payload = {"list": [
            {"dt": 1704067200, "main": {"temp": 33.4},
             "weather": [{"description": "light snow", "icon": "13d"}]},
        ]}
        (row,) = forecast_days(payload)
        assert row == {
            "day_label": "Mon", "high": 33, "low": 33,
            "condition": "Light Snow", "icon": "13d", "glyph": "❄️",
        }

    def test_payload_offset_overrides_default(self):
        # Tuesday 02:00 UTC; Monday evening at the location's UTC-5
        sample = {"dt": 1704067200 + 86400 + 7200, "main": {"temp": 20},
                  "weather": [{"description": "clear sky", "icon": "01n"}]}
        utc_rows = forecast_days({"list": [sample]}, timezone.utc)
        local_rows = forecast_days({"list": [sample], "city": {"timezone": -18000}},
                                   timezone(timedelta(hours=3)))
        assert utc_rows[0]["day_label"] == "Tue"
        assert local_rows[0]["day_label"] == "Mon"
