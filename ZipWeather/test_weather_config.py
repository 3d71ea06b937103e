"""Tests for configuration loading."""
import os

import pytest
from weather_config import (
    DEFAULT_DESTDIR,
    ReportConfig,
    load_config,
    load_report_config,
    load_run_settings,
    parse_bool,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate os.environ and start without ZIPWEATHER_* or DEBUG variables."""
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in list(os.environ):
        if name.startswith("ZIPWEATHER_") or name == "DEBUG":
            monkeypatch.delenv(name, raising=False)


def test_defaults_match_switchboard():
    config = load_report_config()

    assert config == ReportConfig()
    assert config.show_fahrenheit is True
    assert config.show_celsius is False
    assert config.pressure_inhg is True
    assert config.pressure_hpa is False
    assert config.wind_mph is True
    assert config.temperature_mode == "F"
    assert config.temperature_unit == "fahrenheit"


def test_toggles_from_environment(monkeypatch):
    monkeypatch.setenv("ZIPWEATHER_SHOW_CELSIUS", "YES")
    monkeypatch.setenv("ZIPWEATHER_SHOW_HUMIDITY", "no")
    monkeypatch.setenv("ZIPWEATHER_WIND_KN", "true")
    monkeypatch.setenv("ZIPWEATHER_TEMPERATURE_MODE", "c")

    config = load_report_config()

    assert config.show_celsius is True
    assert config.show_humidity is False
    assert config.wind_kn is True
    assert config.temperature_mode == "C"
    assert config.temperature_unit == "celsius"


def test_invalid_toggle(monkeypatch):
    monkeypatch.setenv("ZIPWEATHER_SHOW_WIND", "maybe")

    with pytest.raises(SystemExit) as exc_info:
        load_report_config()

    assert "ZIPWEATHER_SHOW_WIND" in str(exc_info.value)


def test_invalid_temperature_mode(monkeypatch):
    monkeypatch.setenv("ZIPWEATHER_TEMPERATURE_MODE", "K")

    with pytest.raises(SystemExit):
        load_report_config()


def test_run_settings_defaults():
    settings = load_run_settings()

    assert settings.destdir == DEFAULT_DESTDIR
    assert settings.diagnostic is False
    assert settings.timeout == 10.0
    assert settings.timezone == "auto"
    assert settings.sounds_dir is None


def test_run_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("ZIPWEATHER_DESTDIR", str(tmp_path))
    monkeypatch.setenv("ZIPWEATHER_TIMEOUT", "3.5")
    monkeypatch.setenv("ZIPWEATHER_TIMEZONE", "America/Chicago")

    settings = load_run_settings()

    assert settings.diagnostic is True
    assert settings.destdir == str(tmp_path)
    assert settings.timeout == 3.5
    assert settings.timezone == "America/Chicago"


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("ZIPWEATHER_TIMEOUT", "soon")

    with pytest.raises(SystemExit):
        load_run_settings()


def test_load_config_reads_dotenv(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ZIPWEATHER_SHOW_CELSIUS=YES\n")

    config, settings = load_config(str(dotenv))

    assert config.show_celsius is True
    assert settings.destdir == DEFAULT_DESTDIR


@pytest.mark.parametrize("value,expected", [
    ("YES", True), ("y", True), ("1", True), ("On", True),
    ("NO", False), ("false", False), ("0", False), ("off", False),
])
def test_parse_bool(value, expected):
    assert parse_bool("X", value) is expected
