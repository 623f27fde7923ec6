"""Command line entry point: ``forecast -lat=<value> -lon=<value> -days=<value>``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .config import DEFAULT_DAYS, DEFAULT_LATITUDE, DEFAULT_LONGITUDE, ForecastConfig, ImproperlyConfigured
from .presenter import ForecastPresenter
from .providers import ForecastError, OpenMeteoProvider, RequestConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forecast",
        description="Print a daily and hourly weather forecast for a location.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-lat", "--lat", dest="latitude", type=float, default=DEFAULT_LATITUDE,
        help="Latitude (default: New York City)",
    )
    parser.add_argument(
        "-lon", "--lon", dest="longitude", type=float, default=DEFAULT_LONGITUDE,
        help="Longitude (default: New York City)",
    )
    parser.add_argument(
        "-days", "--days", dest="days", type=int, default=DEFAULT_DAYS,
        help="Number of days to show (default: 2; max: 7)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request and time lookup details")
    return parser


def configure_logging(level: str, verbose: bool = False) -> None:
    resolved = logging.INFO if verbose else getattr(logging, level, logging.WARNING)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    provider: Optional[OpenMeteoProvider] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    out = stdout or sys.stdout
    args = build_parser().parse_args(args_list)

    try:
        config = ForecastConfig(latitude=args.latitude, longitude=args.longitude, days=args.days)
    except ImproperlyConfigured as exc:
        out.write(f"Error: {exc}\n")
        return 1
    configure_logging(config.log_level, verbose=args.verbose)

    if not args_list:
        out.write(
            f"Using default location: New York City ({DEFAULT_LATITUDE:.2f}, {DEFAULT_LONGITUDE:.2f}) "
            f"and {DEFAULT_DAYS} days\n"
        )
        out.write("You can specify location and days with: -lat=<value> -lon=<value> -days=<value>\n")

    if config.days < 1:
        out.write("Error: Days must be at least 1\n")
        return 1

    provider = provider or OpenMeteoProvider(
        base_url=config.base_url,
        request_config=RequestConfig(timeout=config.timeout),
    )
    try:
        forecast = provider.fetch(config.latitude, config.longitude)
    except ForecastError as exc:
        logger.debug("Forecast fetch failed", exc_info=exc)
        out.write(f"Error getting weather forecast: {exc}\n")
        return 1

    ForecastPresenter(stream=out).present(forecast, config.days)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
