"""Weather service tying location lookup, forecast fetch and report layout together."""
import logging
from typing import Optional

from geocoding_provider import LocationResolver
from output_writer import AssetLocator, clear_outputs, write_condition_audio, write_temperature
from report_layout import build_report
from weather_config import ReportConfig
from weather_data import WeatherReport
from weather_provider import WeatherProviderBase


class WeatherService:
    """
    Service that turns a ZIP code into a report and the display's side files.

    One instance handles one invocation; nothing is cached between runs.
    """

    def __init__(
        self,
        resolver: LocationResolver,
        provider: WeatherProviderBase,
        config: ReportConfig,
        destdir: str,
        locator: Optional[AssetLocator] = None,
    ):
        """
        Initialize weather service.

        Args:
            resolver: ZIP code to coordinates lookup
            provider: Forecast provider
            config: Section and unit toggles
            destdir: Directory holding the temperature and condition.gsm files
            locator: Audio clip lookup; no audio file is built without one
        """
        self.resolver = resolver
        self.provider = provider
        self.config = config
        self.destdir = destdir
        self.locator = locator

    def get_report(self, zip_code: str) -> WeatherReport:
        """
        Build the report for a ZIP code.

        Raises:
            WeatherProviderError: If the location cannot be resolved or the forecast fetch/parse fails
        """
        coords = self.resolver.resolve(zip_code)
        sample = self.provider.get_current(coords)
        logging.debug(f"Forecast sample: {sample}")
        report = build_report(sample, self.config)
        logging.info(f"Report for {zip_code}: {report.line!r}")
        return report

    def run(self, zip_code: str, text_only: bool = False) -> WeatherReport:
        """
        Build the report and, unless text_only, refresh the side files.

        Previous side files are removed before anything can fail, so a
        failed run leaves no file rather than a stale one. Text-only runs
        never touch the files.
        """
        if not text_only:
            clear_outputs(self.destdir)

        report = self.get_report(zip_code)

        if not text_only:
            self.write_outputs(report)
        return report

    def write_outputs(self, report: WeatherReport) -> None:
        write_temperature(self.destdir, report.temperature, report.temperature_mode)

        if self.config.process_condition and self.config.show_condition and report.condition:
            if self.locator is None:
                logging.debug("No audio locator configured, skipping condition audio")
                return
            write_condition_audio(self.destdir, report.condition, self.locator)
