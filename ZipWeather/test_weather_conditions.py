"""Tests for weather_conditions module."""
import pytest
from weather_conditions import condition, condition_words, title_case, wmo_to_words


@pytest.mark.parametrize("code,expected", [
    (0, "Clear"),
    (1, "Partly Cloudy"),
    (3, "Partly Cloudy"),
    (48, "Fog"),
    (57, "Drizzle"),
    (61, "Rain"),
    (77, "Snow"),
    (82, "Showers"),
    (86, "Snow Showers"),
    (99, "Thunderstorms"),
])
def test_condition_known_codes(code, expected):
    assert condition(code) == expected


def test_condition_unknown_code_is_empty():
    """Unknown codes produce no text so the section is dropped."""
    assert condition(9999) == ""
    assert condition(4) == ""
    assert condition(None) == ""


def test_wmo_to_words_is_lowercase():
    assert wmo_to_words(85) == "snow showers"


def test_title_case():
    assert title_case("partly cloudy") == "Partly Cloudy"
    assert title_case("sNOW sHOWERS") == "Snow Showers"
    assert title_case("") == ""


def test_condition_words_limits_to_three():
    assert condition_words("Partly Cloudy") == ["partly", "cloudy"]
    assert condition_words("One Two Three Four") == ["one", "two", "three"]
    assert condition_words("") == []
