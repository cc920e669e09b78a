import argparse
import sys

from weather_report.config import settings
from weather_report.errors import WeatherReportError
from weather_report.service import generate_report
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the current weather report for a location.")
    parser.add_argument("country", help="Country name, e.g. Russia")
    parser.add_argument("region", help="Region or city name, e.g. Samara")
    parser.add_argument("--access-key", default=None,
                        help="weatherstack access key (default: WEATHER_ACCESS_KEY)")
    parser.add_argument("--units", choices=["m", "f", "s"], default=None,
                        help="Unit system requested from the provider")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Log level (default: WEATHER_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run one report and return the process exit code."""
    args = parse_args(argv)
    # stdout carries the report; all log records go to stderr.
    setup_logging(level=(args.log_level or settings.log_level).upper(), log_to_stdout=False)

    access_key = args.access_key or settings.access_key
    try:
        generate_report(access_key, args.country, args.region, settings=settings, units=args.units)
    except WeatherReportError as exc:
        logger.error("Weather report failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
