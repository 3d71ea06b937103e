"""Open-Meteo forecast API provider implementation."""
import json
import logging

from weather_config import ReportConfig
from weather_data import Coordinates, ForecastSample
from weather_provider import WeatherProviderBase, WeatherProviderError
from http_fetch import Fetcher


class OpenMeteoProvider(WeatherProviderBase):
    """
    Weather provider using the Open-Meteo forecast API.

    Uses the free forecast endpoint: https://open-meteo.com/en/docs
    No API key is needed. Wind speed is always requested in m/s and
    precipitation in mm so every display unit can be derived locally;
    temperature comes back in the configured authoritative unit.
    """

    BASE_URL = "https://api.open-meteo.com/v1/forecast"
    CURRENT_FIELDS = (
        "temperature_2m",
        "weather_code",
        "relative_humidity_2m",
        "pressure_msl",
        "wind_speed_10m",
        "wind_direction_10m",
        "precipitation",
    )

    def __init__(self, fetch: Fetcher, config: ReportConfig, timezone: str = "auto"):
        """
        Initialize Open-Meteo provider.

        Args:
            fetch: Callable doing the HTTP GET, returns "" on failure
            config: Report configuration (selects the temperature unit)
            timezone: "auto" or an explicit TZ name such as America/Chicago
        """
        self.fetch = fetch
        self.config = config
        self.timezone = timezone

    def build_params(self, coords: Coordinates) -> dict:
        return {
            "latitude": coords.latitude,
            "longitude": coords.longitude,
            "current": ",".join(self.CURRENT_FIELDS),
            "temperature_unit": self.config.temperature_unit,
            "wind_speed_unit": "ms",
            "precipitation_unit": "mm",
            "timezone": self.timezone,
        }

    def get_current(self, coords: Coordinates) -> ForecastSample:
        """
        Fetch current conditions from the Open-Meteo forecast API.

        Returns:
            ForecastSample: Current weather information

        Raises:
            WeatherProviderError: If the response is empty, not JSON or lacks temperature
        """
        params = self.build_params(coords)
        logging.info(f"Making Open-Meteo API request: {self.BASE_URL}")
        logging.debug(f"Request parameters: {params}")

        raw = self.fetch(self.BASE_URL, params)
        logging.debug(f"Reply (first 400 bytes): {raw[:400]}")
        if not raw:
            raise WeatherProviderError("Empty response from forecast API")

        try:
            data = json.loads(raw)
        except ValueError as e:
            logging.error(f"Failed to parse API response: {e}")
            raise WeatherProviderError(f"Failed to parse response: {e}") from e

        if not isinstance(data, dict):
            raise WeatherProviderError("Unexpected forecast response shape")
        if data.get("error"):
            raise WeatherProviderError(f"Open-Meteo API error: {data.get('reason', 'Unknown error')}")

        current = data.get("current")
        if not isinstance(current, dict):
            logging.error("Response missing 'current' block")
            raise WeatherProviderError("Response missing 'current' block")

        sample = ForecastSample.from_current(current)
        logging.info(f"Successfully parsed weather data: {sample.temperature}{self.config.temperature_mode}, code {sample.weather_code}")
        return sample
