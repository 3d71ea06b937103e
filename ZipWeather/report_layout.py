"""Report layout logic - pure functions turning a forecast sample into the summary line."""
from typing import List, Optional, Tuple

from weather_config import ReportConfig
from weather_conditions import condition
from weather_data import ForecastSample, WeatherReport
from weather_units import (
    celsius_to_fahrenheit,
    compass,
    fahrenheit_to_celsius,
    hpa_display,
    inhg_display,
    mm_display,
    mm_to_in,
    ms_to_kmh,
    ms_to_kn,
    ms_to_mph,
    round_half_away,
)

SEPARATOR = " / "


def join_sections(sections: List[str]) -> str:
    """Join sections with " / ", skipping empty ones so no stray separators appear."""
    return SEPARATOR.join(section for section in sections if section)


def combine_units(values: List[str]) -> str:
    """
    Combine the enabled units of one measurement.

    The first value is the primary unit; any further values are appended
    in parentheses, e.g. ["12 mph", "19 kmh"] -> "12 mph (19 kmh)".
    """
    if not values:
        return ""
    return " ".join([values[0]] + [f"({value})" for value in values[1:]])


def display_temperatures(sample: ForecastSample, config: ReportConfig) -> Tuple[int, int]:
    """
    Get (fahrenheit, celsius) integer display temperatures.

    The authoritative unit is rounded from the API value; the other unit is
    converted from that rounded figure so both always agree on screen.
    """
    if config.temperature_mode == "F":
        fahrenheit = round_half_away(sample.temperature)
        return fahrenheit, fahrenheit_to_celsius(fahrenheit)
    celsius = round_half_away(sample.temperature)
    return celsius_to_fahrenheit(celsius), celsius


def format_pressure(pressure_hpa: Optional[float], config: ReportConfig) -> str:
    if not config.show_pressure or pressure_hpa is None:
        return ""
    values = []
    if config.pressure_inhg:
        values.append(f"{inhg_display(pressure_hpa)} inHG")
    if config.pressure_hpa:
        values.append(f"{hpa_display(pressure_hpa)} hPa")
    return combine_units(values)


def format_wind(speed_ms: Optional[float], direction: Optional[float], config: ReportConfig) -> str:
    if not config.show_wind or speed_ms is None:
        return ""
    values = []
    if config.wind_mph:
        values.append(f"{ms_to_mph(speed_ms)} mph")
    if config.wind_kmh:
        values.append(f"{ms_to_kmh(speed_ms)} kmh")
    if config.wind_kn:
        values.append(f"{ms_to_kn(speed_ms)} kn")

    parts = [combine_units(values)]
    if direction is not None:
        parts.append(compass(direction))
    parts = [part for part in parts if part]
    if not parts:
        return ""
    return "Wind " + " ".join(parts)


def format_precipitation(precip_mm: Optional[float], config: ReportConfig) -> str:
    if not config.show_precip or precip_mm is None:
        return ""
    values = []
    if config.precip_inch:
        values.append(f"{mm_to_in(precip_mm)} inch")
    if config.precip_mm:
        values.append(f"{mm_display(precip_mm)} mm")
    return combine_units(values)


def build_sections(sample: ForecastSample, config: ReportConfig) -> List[str]:
    """
    Build the report sections in canonical order.

    Order is temperature(s), condition, humidity, pressure, wind,
    precipitation. Disabled sections and sections whose value is missing
    are left out.

    Args:
        sample: Parsed current conditions
        config: Section and unit toggles

    Returns:
        List of non-empty section strings
    """
    sections = []

    fahrenheit, celsius = display_temperatures(sample, config)
    if config.show_fahrenheit:
        sections.append(f"{fahrenheit}F")
    if config.show_celsius:
        sections.append(f"{celsius}C")

    if config.show_condition:
        sections.append(condition(sample.weather_code))

    if config.show_humidity and sample.relative_humidity is not None:
        sections.append(f"Humidity {round_half_away(sample.relative_humidity)}%")

    sections.append(format_pressure(sample.pressure_msl, config))
    sections.append(format_wind(sample.wind_speed, sample.wind_direction, config))
    sections.append(format_precipitation(sample.precipitation, config))

    return [section for section in sections if section]


def build_report(sample: ForecastSample, config: ReportConfig) -> WeatherReport:
    """Assemble the full report: printed line plus the values the output writer persists."""
    sections = build_sections(sample, config)
    fahrenheit, celsius = display_temperatures(sample, config)
    return WeatherReport(
        line=join_sections(sections),
        sections=sections,
        temperature=fahrenheit if config.temperature_mode == "F" else celsius,
        temperature_mode=config.temperature_mode,
        condition=condition(sample.weather_code),
    )
