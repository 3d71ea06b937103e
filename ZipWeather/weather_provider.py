"""Provider abstractions - allows swapping different geocoding and forecast APIs."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from weather_data import Coordinates, ForecastSample


class GeocodingProviderBase(ABC):
    """Abstract base class for ZIP code to coordinate lookups."""

    name = "geocoder"

    @abstractmethod
    def lookup(self, zip_code: str) -> Optional["Coordinates"]:
        """
        Look up coordinates for a ZIP code.

        Returns:
            Coordinates, or None if this source has no usable answer
        """
        pass


class WeatherProviderBase(ABC):
    """Abstract base class for current-conditions forecast providers."""

    @abstractmethod
    def get_current(self, coords: "Coordinates") -> "ForecastSample":
        """
        Fetch current conditions for a location.

        Returns:
            ForecastSample: Current weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch or parse data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a provider fails; the run ends with "No Report"."""
    pass


class LocationNotFoundError(WeatherProviderError):
    """No geocoding source produced coordinates inside the U.S. bounding box."""
    pass
