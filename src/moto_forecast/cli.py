"""Command-line interface for riding-condition analysis.

Every command reads a forecast snapshot JSON file (see
`moto_forecast.models.snapshot.ForecastSnapshot`).
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

from moto_forecast import __version__
from moto_forecast.config import get_settings
from moto_forecast.forecast import (
    RideWindowFinder,
    best_and_worst_day,
    daily_outlook,
    good_riding_hours_ahead,
)
from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.snapshot import ForecastSnapshot
from moto_forecast.scoring import assess, score
from moto_forecast.sources import ObservationSourceError, load_snapshot

logger = logging.getLogger(__name__)


def _format_temperature(temp_c: float, fahrenheit: bool) -> str:
    if fahrenheit:
        return f"{temp_c * 9 / 5 + 32:.0f}°F"
    return f"{temp_c:.0f}°C"


def _format_wind(observation: WeatherObservation, fahrenheit: bool) -> str:
    if fahrenheit:
        return f"{observation.wind_speed_mph:.0f} mph"
    return f"{observation.wind_speed_kph:.0f} km/h"


def _cmd_score(snapshot: ForecastSnapshot, args: argparse.Namespace) -> int:
    observation = snapshot.current
    if observation is None and snapshot.hourly:
        observation = snapshot.hourly[0]
    if observation is None:
        print("Snapshot has no current or hourly observations.", file=sys.stderr)
        return 1

    assessment = assess(observation)
    result = assessment.score

    print(f"{observation.timestamp:%Y-%m-%d %H:%M}  {assessment.summary}")
    print(
        f"Temperature {_format_temperature(observation.temperature_c, args.fahrenheit)}, "
        f"wind {_format_wind(observation, args.fahrenheit)}, "
        f"rain {observation.precipitation_percent:.0f}%"
    )
    print(
        f"Riding confidence: {result.confidence}% ({result.condition.value}) - "
        f"{result.rating.value}: {result.rating.description}"
    )
    for penalty in result.penalties:
        print(f"  -{penalty.points:<3} {penalty.reason}")

    print("\nRecommendations:")
    for line in assessment.recommendations:
        print(f"  - {line}")

    print("\nGear:")
    for line in assessment.gear:
        print(f"  - {line}")

    return 0


def _cmd_window(snapshot: ForecastSnapshot, args: argparse.Namespace) -> int:
    settings = get_settings()
    finder = RideWindowFinder(min_duration=settings.min_window)
    window = finder.find(snapshot.hourly)

    if window is None:
        print("No recommended riding window.")
    else:
        print(
            f"Best riding window: {window.start:%m/%d %H:%M} - {window.end:%m/%d %H:%M} "
            f"({window.hours:.0f} hours)"
        )

    duration = good_riding_hours_ahead(snapshot.hourly)
    if duration is not None:
        print(duration.describe())

    return 0


def _cmd_days(snapshot: ForecastSnapshot, args: argparse.Namespace) -> int:
    extremes = best_and_worst_day(snapshot.daily)
    if extremes is None:
        print("No daily forecast available.")
        return 0

    for observation in snapshot.daily:
        marker = "  <- best day" if observation == extremes.best.observation else ""
        print(
            f"{observation.timestamp:%a, %m/%d}  "
            f"{score(observation).confidence:>3}%  "
            f"{_format_temperature(observation.temperature_c, args.fahrenheit)}{marker}"
        )

    print(f"\nWorst day: {extremes.worst.observation.timestamp:%a, %m/%d}")
    return 0


def _cmd_outlook(snapshot: ForecastSnapshot, args: argparse.Namespace) -> int:
    outlook = daily_outlook(snapshot.hourly)
    if outlook is None:
        print("No hourly forecast available.")
        return 0

    print(outlook.value)
    return 0


COMMANDS = {
    "score": _cmd_score,
    "window": _cmd_window,
    "days": _cmd_days,
    "outlook": _cmd_outlook,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Moto Forecast - Riding conditions from weather forecasts"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    help_text = {
        "score": "Score current conditions and list advice and gear",
        "window": "Find the best contiguous riding window in the hourly forecast",
        "days": "Show daily riding confidence with best and worst day",
        "outlook": "Summarize today's riding outlook",
    }
    for name, text in help_text.items():
        sub = subparsers.add_parser(name, help=text)
        sub.add_argument("snapshot", help="Path to forecast snapshot JSON")
        sub.add_argument(
            "--fahrenheit",
            action="store_true",
            help="Display temperatures in Fahrenheit and wind in mph",
        )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        snapshot = load_snapshot(args.snapshot)
    except ObservationSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if snapshot.is_stale(settings.snapshot_max_age, now=datetime.now(timezone.utc)):
        logger.warning(
            f"Snapshot {args.snapshot} is older than "
            f"{settings.snapshot_max_age_minutes} minutes"
        )

    return COMMANDS[args.command](snapshot, args)


if __name__ == "__main__":
    sys.exit(main())
