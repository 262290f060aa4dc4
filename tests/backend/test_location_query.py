"""Tests for location classification and upstream query parameters."""

import pytest

from app.services.errors import InvalidLocationError
from app.services.location_query import (
    MAX_LOCATION_LENGTH,
    CityQuery,
    CityStateQuery,
    ZipQuery,
    query_params,
    resolve_location,
    validate_location,
)


class TestZip:
    @pytest.mark.parametrize("code", ["50401", "00000", "99999", "12345"])
    def test_five_digits_is_zip(self, code):
        assert resolve_location(code) == ZipQuery(code=code)

    def test_surrounding_whitespace_trimmed(self):
        assert resolve_location("  50401 ") == ZipQuery(code="50401")

    @pytest.mark.parametrize("text", ["5040", "504011", "50 401"])
    def test_wrong_digit_count_is_city(self, text):
        assert resolve_location(text) == CityQuery(city=text)

    def test_non_ascii_digits_are_not_zip(self):
        text = "５０４０１"  # full-width 50401
        assert resolve_location(text) == CityQuery(city=text)


class TestCityState:
    def test_abbreviation(self):
        assert resolve_location("Baxter, IA") == CityStateQuery(city="Baxter", state="IA")

    def test_full_state_name(self):
        assert resolve_location("Baxter, Iowa") == CityStateQuery(city="Baxter", state="Iowa")

    def test_no_space_after_comma(self):
        assert resolve_location("Baxter,IA") == CityStateQuery(city="Baxter", state="IA")

    def test_city_is_trimmed(self):
        assert resolve_location("St. Louis   ,  MO") == CityStateQuery(city="St. Louis", state="MO")

    def test_splits_on_last_comma(self):
        result = resolve_location("Kansas City, Kansas, KS")
        assert result == CityStateQuery(city="Kansas City, Kansas", state="KS")

    @pytest.mark.parametrize("text", [
        "Washington, D.C.",
        "Springfield, IL 62701",
        "Baxter, I",
        "Baxter, IA!",
    ])
    def test_trailing_token_not_alphabetic_falls_through(self, text):
        assert resolve_location(text) == CityQuery(city=text)

    def test_leading_comma_is_city(self):
        assert resolve_location(", IA") == CityQuery(city=", IA")


class TestCityOnly:
    def test_bare_city(self):
        assert resolve_location("Chicago") == CityQuery(city="Chicago")

    def test_multi_word_city_trimmed(self):
        assert resolve_location("  New York  ") == CityQuery(city="New York")

    def test_resolution_is_repeatable(self):
        assert resolve_location("Des Moines, IA") == resolve_location("Des Moines, IA")


class TestQueryParams:
    def test_zip(self):
        assert query_params(ZipQuery("50401")) == {"zip": "50401,US"}

    def test_city_state(self):
        assert query_params(CityStateQuery("Baxter", "IA")) == {"q": "Baxter,IA,US"}

    def test_city(self):
        assert query_params(CityQuery("Chicago")) == {"q": "Chicago,US"}

    def test_country_override(self):
        assert query_params(CityQuery("Toronto"), country="CA") == {"q": "Toronto,CA"}


class TestValidateLocation:
    def test_trims(self):
        assert validate_location("  Baxter, IA ") == "Baxter, IA"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_empty_rejected(self, raw):
        with pytest.raises(InvalidLocationError):
            validate_location(raw)

    def test_max_length_accepted(self):
        text = "a" * MAX_LOCATION_LENGTH
        assert validate_location(text) == text

    def test_over_max_length_rejected(self):
        with pytest.raises(InvalidLocationError):
            validate_location("a" * (MAX_LOCATION_LENGTH + 1))

    def test_error_is_client_error(self):
        with pytest.raises(InvalidLocationError) as info:
            validate_location("")
        assert info.value.status_code == 400
        assert info.value.public_message == "Invalid location"
