"""Tests for ZIP code geocoding and the fallback resolver."""
import json
from unittest.mock import Mock

import pytest
from geocoding_provider import LocationResolver, OpenMeteoGeocoder, ZippopotamProvider
from weather_data import Coordinates
from weather_provider import GeocodingProviderBase, LocationNotFoundError


@pytest.fixture
def zippopotam_response():
    """Sample Zippopotam.us response (coordinates are strings)."""
    return {
        "post code": "72762",
        "country": "United States",
        "country abbreviation": "US",
        "places": [
            {
                "place name": "Springdale",
                "longitude": "-94.2129",
                "state": "Arkansas",
                "state abbreviation": "AR",
                "latitude": "36.1871",
            }
        ],
    }


@pytest.fixture
def geocoding_response():
    """Sample Open-Meteo geocoding response."""
    return {
        "results": [
            {
                "id": 4132093,
                "name": "Springdale",
                "latitude": 36.18674,
                "longitude": -94.12881,
                "country_code": "US",
            }
        ],
        "generationtime_ms": 0.5,
    }


class StaticGeocoder(GeocodingProviderBase):
    """Geocoder returning a fixed answer and counting calls."""

    def __init__(self, name, coords):
        self.name = name
        self.coords = coords
        self.call_count = 0

    def lookup(self, zip_code):
        self.call_count += 1
        return self.coords


def test_zippopotam_lookup(zippopotam_response):
    fetch = Mock(return_value=json.dumps(zippopotam_response))

    coords = ZippopotamProvider(fetch).lookup("72762")

    assert coords == Coordinates(36.1871, -94.2129)
    fetch.assert_called_once_with("http://api.zippopotam.us/us/72762")


@pytest.mark.parametrize("raw", ["", "{}", "not json", '{"places": []}', '{"places": [{"latitude": "x"}]}'])
def test_zippopotam_lookup_no_result(raw):
    assert ZippopotamProvider(Mock(return_value=raw)).lookup("00000") is None


def test_open_meteo_geocoder_lookup(geocoding_response):
    fetch = Mock(return_value=json.dumps(geocoding_response))

    coords = OpenMeteoGeocoder(fetch).lookup("72762")

    assert coords == Coordinates(36.18674, -94.12881)
    url, params = fetch.call_args[0]
    assert url == "https://geocoding-api.open-meteo.com/v1/search"
    assert params["name"] == "72762"
    assert params["country"] == "US"
    assert params["count"] == 1


def test_open_meteo_geocoder_no_results():
    fetch = Mock(return_value='{"generationtime_ms": 0.3}')
    assert OpenMeteoGeocoder(fetch).lookup("99999") is None


def test_resolver_uses_primary_when_in_box():
    primary = StaticGeocoder("primary", Coordinates(36.19, -94.21))
    fallback = StaticGeocoder("fallback", Coordinates(40.0, -100.0))

    coords = LocationResolver(primary, fallback).resolve("72762")

    assert coords == Coordinates(36.19, -94.21)
    assert fallback.call_count == 0


def test_resolver_falls_back_when_primary_empty():
    primary = StaticGeocoder("primary", None)
    fallback = StaticGeocoder("fallback", Coordinates(40.0, -100.0))

    coords = LocationResolver(primary, fallback).resolve("72762")

    assert coords == Coordinates(40.0, -100.0)


def test_resolver_discards_out_of_box_primary():
    primary = StaticGeocoder("primary", Coordinates(48.85, 2.35))
    fallback = StaticGeocoder("fallback", Coordinates(40.0, -100.0))

    coords = LocationResolver(primary, fallback).resolve("75001")

    assert coords == Coordinates(40.0, -100.0)
    assert fallback.call_count == 1


def test_resolver_fails_when_both_out_of_box():
    primary = StaticGeocoder("primary", Coordinates(48.85, 2.35))
    fallback = StaticGeocoder("fallback", Coordinates(-33.9, 151.2))

    with pytest.raises(LocationNotFoundError) as exc_info:
        LocationResolver(primary, fallback).resolve("75001")

    assert "75001" in str(exc_info.value)


def test_resolver_fails_when_both_empty():
    with pytest.raises(LocationNotFoundError):
        LocationResolver(StaticGeocoder("a", None), StaticGeocoder("b", None)).resolve("00000")
