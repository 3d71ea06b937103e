"""Unit conversions used by the report layout - pure functions for testability."""
import math

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_WIDTH = 360.0 / len(COMPASS_POINTS)

INHG_PER_HPA = 0.02953
MPH_PER_MS = 2.23694
KMH_PER_MS = 3.6
KN_PER_MS = 1.94384
MM_PER_INCH = 25.4


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() rounds halves to even, which would turn 72.5 into 72.

    Args:
        value: Any real number

    Returns:
        Nearest integer (2.5 -> 3, -2.5 -> -3)
    """
    value = float(value)
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def celsius_to_fahrenheit(celsius: float) -> int:
    return round_half_away(float(celsius) * 9 / 5 + 32)


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return round_half_away((float(fahrenheit) - 32) * 5 / 9)


def hpa_to_inhg(hpa: float) -> float:
    """Convert hectopascals to inches of mercury (unrounded, see inhg_display)."""
    return float(hpa) * INHG_PER_HPA


def inhg_display(hpa: float) -> str:
    return f"{hpa_to_inhg(hpa):.2f}"


def hpa_display(hpa: float) -> int:
    return round_half_away(hpa)


def ms_to_mph(speed_ms: float) -> int:
    return round_half_away(float(speed_ms) * MPH_PER_MS)


def ms_to_kmh(speed_ms: float) -> int:
    return round_half_away(float(speed_ms) * KMH_PER_MS)


def ms_to_kn(speed_ms: float) -> int:
    return round_half_away(float(speed_ms) * KN_PER_MS)


def mm_to_in(mm: float) -> str:
    """Convert millimetres to inches, formatted with 2 decimal places."""
    return f"{float(mm) / MM_PER_INCH:.2f}"


def mm_display(mm: float) -> str:
    return f"{float(mm):.2f}"


def compass(degrees: float) -> str:
    """
    Get the 16-point compass label for a wind direction.

    Each label owns a 22.5 degree sector centred on its bearing, so the
    direction is shifted by half a sector before the truncating division.

    Args:
        degrees: Direction in degrees; any real value, wrapped into [0, 360)

    Returns:
        One of N, NNE, NE, ... NNW
    """
    direction = float(degrees) % 360.0
    index = int((direction + SECTOR_WIDTH / 2) / SECTOR_WIDTH)
    if index == len(COMPASS_POINTS):
        index = 0
    return COMPASS_POINTS[index]
