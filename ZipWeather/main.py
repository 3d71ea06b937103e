"""ZIP code weather summary for a small display: one line on stdout plus side files."""
import argparse
import functools
import logging
import sys
from typing import List, Optional

from geocoding_provider import LocationResolver, OpenMeteoGeocoder, ZippopotamProvider
from http_fetch import fetch_text
from openmeteo_provider import OpenMeteoProvider
from output_writer import build_locator
from weather_config import ReportConfig, RunSettings, load_config
from weather_provider import WeatherProviderError
from weather_service import WeatherService

NO_REPORT = "No Report"
TEXT_ONLY_FLAG = "v"

USAGE = """
USAGE: {prog} <US ZIP> [v]
  Example: {prog} 72762
           {prog} 72762 v   # text-only
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("zip-weather", add_help=False)
    parser.add_argument("zip_code", nargs="?")
    parser.add_argument("mode", nargs="?")
    # extra arguments are ignored
    args, _ = parser.parse_known_args(argv)
    return args


def setup_logging(settings: RunSettings) -> None:
    # stdout carries only the report line; stderr stays silent unless DEBUG=1
    stderr_handler = logging.StreamHandler(sys.stderr)
    if not settings.diagnostic:
        stderr_handler.setLevel(logging.CRITICAL + 1)
    handlers = [stderr_handler]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=logging.DEBUG if settings.diagnostic else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_weather_service(config: ReportConfig, settings: RunSettings) -> WeatherService:
    fetch = functools.partial(
        fetch_text,
        timeout=settings.timeout,
        retries=settings.retries,
        diagnostic=settings.diagnostic,
    )
    resolver = LocationResolver(ZippopotamProvider(fetch), OpenMeteoGeocoder(fetch))
    provider = OpenMeteoProvider(fetch, config, timezone=settings.timezone)
    service = WeatherService(
        resolver=resolver,
        provider=provider,
        config=config,
        destdir=settings.destdir,
        locator=build_locator(settings.sounds_dir),
    )
    logging.info(f"Weather service ready (destdir={settings.destdir})")
    return service


def main(argv: Optional[List[str]] = None, service: Optional[WeatherService] = None) -> int:
    args = parse_args(argv)
    if not args.zip_code:
        print(USAGE.format(prog="zip-weather"))
        return 0

    config, settings = load_config()
    setup_logging(settings)
    logging.debug(f"Configuration loaded: {config}")
    logging.debug(f"Run settings: {settings}")

    text_only = args.mode == TEXT_ONLY_FLAG
    if service is None:
        service = build_weather_service(config, settings)

    try:
        report = service.run(args.zip_code, text_only=text_only)
    except WeatherProviderError as err:
        logging.debug(f"Weather report failed: {err}")
        print(NO_REPORT)
        return 1

    print(report.line)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
