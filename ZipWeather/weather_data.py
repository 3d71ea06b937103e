"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from weather_provider import WeatherProviderError

# Rough U.S. bounds including Alaska and Hawaii
US_LAT_RANGE = (18.0, 72.0)
US_LON_RANGE = (-170.0, -60.0)


@dataclass(frozen=True)
class Coordinates:
    """A resolved latitude/longitude pair."""
    latitude: float
    longitude: float

    def in_us_bbox(self) -> bool:
        """Check the coordinates fall inside the continental-US-plus-AK/HI box."""
        return (
            US_LAT_RANGE[0] <= self.latitude <= US_LAT_RANGE[1]
            and US_LON_RANGE[0] <= self.longitude <= US_LON_RANGE[1]
        )


@dataclass(frozen=True)
class ForecastSample:
    """Current conditions as reported by the forecast API."""
    temperature: float  # in the configured API unit
    weather_code: Optional[int] = None  # WMO code
    relative_humidity: Optional[float] = None  # percent
    pressure_msl: Optional[float] = None  # hPa
    wind_speed: Optional[float] = None  # m/s
    wind_direction: Optional[float] = None  # degrees
    precipitation: Optional[float] = None  # mm

    @classmethod
    def from_current(cls, current: Mapping[str, Any]) -> "ForecastSample":
        """
        Build a sample from the forecast API's "current" block.

        Args:
            current: Mapping with temperature_2m, weather_code, ... keys

        Returns:
            ForecastSample: Parsed sample

        Raises:
            WeatherProviderError: If temperature is missing or a value is not numeric
        """
        if current.get("temperature_2m") is None:
            raise WeatherProviderError("Response missing 'temperature_2m'")

        try:
            code = _optional_float(current, "weather_code")
            return cls(
                temperature=float(current["temperature_2m"]),
                weather_code=int(code) if code is not None else None,
                relative_humidity=_optional_float(current, "relative_humidity_2m"),
                pressure_msl=_optional_float(current, "pressure_msl"),
                wind_speed=_optional_float(current, "wind_speed_10m"),
                wind_direction=_optional_float(current, "wind_direction_10m"),
                precipitation=_optional_float(current, "precipitation"),
            )
        except (TypeError, ValueError) as e:
            raise WeatherProviderError(f"Failed to parse current conditions: {e}") from e


def _optional_float(current: Mapping[str, Any], key: str) -> Optional[float]:
    value = current.get(key)
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class WeatherReport:
    """Result of one run: the printed line plus what the output writer needs."""
    line: str
    sections: List[str] = field(default_factory=list)
    temperature: Optional[int] = None  # in the authoritative unit
    temperature_mode: str = "F"
    condition: str = ""  # title-cased, "" if unknown
