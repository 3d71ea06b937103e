"""Configuration: display toggles and run settings loaded from the environment."""
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

ENV_PREFIX = "ZIPWEATHER_"
TEMPERATURE_MODES = ("F", "C")
DEFAULT_DESTDIR = "/tmp"

_TRUE_VALUES = ("yes", "y", "true", "1", "on")
_FALSE_VALUES = ("no", "n", "false", "0", "off")


@dataclass(frozen=True)
class ReportConfig:
    """Which sections and units appear in the report line."""
    # On-screen temperature units; the API/temperature-file unit is temperature_mode
    show_fahrenheit: bool = True
    show_celsius: bool = False

    show_condition: bool = True
    show_humidity: bool = True
    show_pressure: bool = True
    show_precip: bool = True
    show_wind: bool = True

    # Unit toggles, in the order extra units are appended
    pressure_inhg: bool = True
    pressure_hpa: bool = False
    precip_inch: bool = True
    precip_mm: bool = False
    wind_mph: bool = True
    wind_kmh: bool = False
    wind_kn: bool = False

    process_condition: bool = True  # build condition.gsm
    temperature_mode: str = "F"

    def __post_init__(self):
        if self.temperature_mode not in TEMPERATURE_MODES:
            raise ValueError(f"temperature_mode must be one of {TEMPERATURE_MODES}, got {self.temperature_mode!r}")

    @property
    def temperature_unit(self) -> str:
        """Temperature unit name understood by the forecast API."""
        return "fahrenheit" if self.temperature_mode == "F" else "celsius"


@dataclass(frozen=True)
class RunSettings:
    """Process-level settings that do not affect the report text."""
    destdir: str = DEFAULT_DESTDIR
    diagnostic: bool = False
    timeout: float = 10.0
    retries: int = 2
    timezone: str = "auto"
    sounds_dir: Optional[str] = None
    log_file: Optional[str] = None


def parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise SystemExit(f"Invalid value for {name}: {value!r} (expected YES or NO)")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return parse_bool(name, value)


def load_report_config() -> ReportConfig:
    """Build a ReportConfig from ZIPWEATHER_* toggles, falling back to the defaults."""
    defaults = ReportConfig()
    toggles = {}
    for name in (
        "show_fahrenheit", "show_celsius", "show_condition", "show_humidity",
        "show_pressure", "show_precip", "show_wind", "pressure_inhg", "pressure_hpa",
        "precip_inch", "precip_mm", "wind_mph", "wind_kmh", "wind_kn", "process_condition",
    ):
        toggles[name] = _env_bool(ENV_PREFIX + name.upper(), getattr(defaults, name))

    mode = os.getenv(ENV_PREFIX + "TEMPERATURE_MODE", defaults.temperature_mode).strip().upper()
    if mode not in TEMPERATURE_MODES:
        raise SystemExit(f"Invalid {ENV_PREFIX}TEMPERATURE_MODE: {mode!r} (expected F or C)")

    return ReportConfig(temperature_mode=mode, **toggles)


def load_run_settings() -> RunSettings:
    timeout = os.getenv(ENV_PREFIX + "TIMEOUT", "10")
    try:
        timeout_val = float(timeout)
    except ValueError as exc:
        raise SystemExit(f"Invalid {ENV_PREFIX}TIMEOUT: {exc}") from exc

    return RunSettings(
        destdir=os.getenv(ENV_PREFIX + "DESTDIR") or DEFAULT_DESTDIR,
        diagnostic=os.getenv("DEBUG", "0") == "1",
        timeout=timeout_val,
        timezone=os.getenv(ENV_PREFIX + "TIMEZONE") or "auto",
        sounds_dir=os.getenv(ENV_PREFIX + "SOUNDS_DIR") or None,
        log_file=os.getenv(ENV_PREFIX + "LOG_FILE") or None,
    )


def load_config(dotenv_path: Optional[str] = None) -> Tuple[ReportConfig, RunSettings]:
    """Load .env (if any) into the environment, then read the report config and run settings."""
    load_dotenv(dotenv_path)
    config = load_report_config()
    return config, load_run_settings()
