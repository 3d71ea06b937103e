"""ZIP code to coordinates: Zippopotam.us first, Open-Meteo geocoding as fallback."""
import json
import logging
from typing import Any, Optional

from http_fetch import Fetcher
from weather_data import Coordinates
from weather_provider import GeocodingProviderBase, LocationNotFoundError


def _parse_json(raw: str, source: str) -> Optional[Any]:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        logging.debug(f"{source}: response is not JSON: {e}")
        return None


class ZippopotamProvider(GeocodingProviderBase):
    """
    ZIP-authoritative lookup using Zippopotam.us.

    Response shape: {"places": [{"latitude": "36.37", "longitude": "-94.21", ...}]}
    with coordinates encoded as strings.
    """

    name = "zippopotam"
    BASE_URL = "http://api.zippopotam.us/us/"

    def __init__(self, fetch: Fetcher):
        self.fetch = fetch

    def lookup(self, zip_code: str) -> Optional[Coordinates]:
        data = _parse_json(self.fetch(self.BASE_URL + zip_code), self.name)
        if not isinstance(data, dict):
            return None

        places = data.get("places") or []
        if not places:
            logging.debug(f"{self.name}: no places for {zip_code}")
            return None
        try:
            return Coordinates(
                latitude=float(places[0]["latitude"]),
                longitude=float(places[0]["longitude"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logging.debug(f"{self.name}: malformed place entry: {e}")
            return None


class OpenMeteoGeocoder(GeocodingProviderBase):
    """General place-name geocoder, queried with the ZIP as free text and restricted to the US."""

    name = "open-meteo-geocoding"
    BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(self, fetch: Fetcher):
        self.fetch = fetch

    def lookup(self, zip_code: str) -> Optional[Coordinates]:
        params = {
            "name": zip_code,
            "count": 1,
            "language": "en",
            "format": "json",
            "country": "US",
        }
        data = _parse_json(self.fetch(self.BASE_URL, params), self.name)
        if not isinstance(data, dict):
            return None

        results = data.get("results") or []
        if not results:
            logging.debug(f"{self.name}: no results for {zip_code}")
            return None
        try:
            return Coordinates(
                latitude=float(results[0]["latitude"]),
                longitude=float(results[0]["longitude"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logging.debug(f"{self.name}: malformed result entry: {e}")
            return None


class LocationResolver:
    """
    Resolve a ZIP code using a primary and a fallback geocoder.

    ZIP-specific geocoders sometimes lack coverage or answer with non-US
    coordinates for ambiguous input, so every answer goes through the
    bounding-box check before it is accepted.
    """

    def __init__(self, primary: GeocodingProviderBase, fallback: GeocodingProviderBase):
        self.primary = primary
        self.fallback = fallback

    def resolve(self, zip_code: str) -> Coordinates:
        """
        Resolve a ZIP code to coordinates inside the U.S. bounding box.

        Raises:
            LocationNotFoundError: If neither source produced usable coordinates
        """
        for provider in (self.primary, self.fallback):
            coords = provider.lookup(zip_code)
            if coords is None:
                logging.info(f"{provider.name}: no coordinates for {zip_code}")
                continue
            if not coords.in_us_bbox():
                logging.warning(
                    f"{provider.name}: {coords.latitude},{coords.longitude} for {zip_code} is outside the US, discarding"
                )
                continue
            logging.info(f"Resolved {zip_code} via {provider.name}: {coords.latitude},{coords.longitude}")
            return coords

        raise LocationNotFoundError(f"Could not resolve ZIP {zip_code}")
