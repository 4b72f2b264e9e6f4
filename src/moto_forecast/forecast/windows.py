"""Safe riding window finder.

Scans a time-ordered series of hourly observations for the longest
contiguous run of good riding hours.

An hour is good when all of these hold:
- Precipitation chance below 30%
- Wind below 30 km/h
- Temperature between 15°C and 30°C (inclusive)

This is a direct threshold check and is intentionally stricter than the
confidence score's Good band.

Run length is measured between the timestamps of the run's first and last
observations, not by counting samples, so uneven spacing does not favour
densely sampled runs. When two runs have the same duration the earlier one
wins. Runs shorter than the minimum duration (3 hours by default) are not
reported.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import timedelta

from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.riding import (
    RidingCondition,
    RidingDuration,
    SafeRidingWindow,
)
from moto_forecast.scoring.engine import score

logger = logging.getLogger(__name__)

DEFAULT_MIN_WINDOW = timedelta(hours=3)

MAX_PRECIPITATION_PERCENT = 30
MAX_WIND_KPH = 30
MIN_TEMPERATURE_C = 15
MAX_TEMPERATURE_C = 30


def is_good_riding_hour(observation: WeatherObservation) -> bool:
    """Check if an observation passes the good-riding thresholds."""
    return (
        observation.precipitation_percent < MAX_PRECIPITATION_PERCENT
        and observation.wind_speed_kph < MAX_WIND_KPH
        and MIN_TEMPERATURE_C <= observation.temperature_c <= MAX_TEMPERATURE_C
    )


def _is_bad_riding_hour(observation: WeatherObservation) -> bool:
    return score(observation).condition != RidingCondition.GOOD


def longest_run(
    series: Sequence[WeatherObservation],
    predicate: Callable[[WeatherObservation], bool],
) -> SafeRidingWindow | None:
    """Find the longest contiguous run of observations matching predicate.

    Single left-to-right pass. A run closes on the first failing observation
    or at the end of the series. Only a strictly longer run replaces the
    current best, so ties go to the earliest run.

    Returns:
        The longest run (possibly zero duration), or None if nothing matched
    """
    best: SafeRidingWindow | None = None
    run_start: WeatherObservation | None = None
    run_last: WeatherObservation | None = None
    run_count = 0

    def close_run() -> None:
        nonlocal best
        if run_start is None or run_last is None:
            return
        candidate = SafeRidingWindow(
            start=run_start.timestamp,
            end=run_last.timestamp,
            observations=run_count,
        )
        if best is None or candidate.duration > best.duration:
            best = candidate

    for observation in series:
        if predicate(observation):
            if run_start is None:
                run_start = observation
                run_count = 0
            run_last = observation
            run_count += 1
        else:
            close_run()
            run_start = None
            run_last = None

    # Flush a run still open at the end of the series
    close_run()

    return best


class RideWindowFinder:
    """Finds the best contiguous riding window in an hourly series.

    Example:
        ```python
        finder = RideWindowFinder(min_duration=timedelta(hours=3))
        window = finder.find(snapshot.hourly)
        if window:
            print(f"Ride from {window.start:%H:%M} to {window.end:%H:%M}")
        ```
    """

    def __init__(self, min_duration: timedelta = DEFAULT_MIN_WINDOW):
        """Initialize the finder.

        Args:
            min_duration: Shortest window worth reporting
        """
        self.min_duration = min_duration

    def find(self, series: Sequence[WeatherObservation]) -> SafeRidingWindow | None:
        """Find the longest good-riding window.

        Args:
            series: Time-ordered hourly observations

        Returns:
            The window, or None if no run lasts at least min_duration
        """
        best = longest_run(series, is_good_riding_hour)
        if best is None:
            logger.debug(f"No good riding hours in {len(series)} observations")
            return None

        if best.duration < self.min_duration:
            logger.debug(
                f"Longest good run {best.duration} is shorter than {self.min_duration}"
            )
            return None

        return best

    def find_bad_run(
        self, series: Sequence[WeatherObservation]
    ) -> SafeRidingWindow | None:
        """Find the longest run of observations that are not Good.

        Uses the confidence-based condition rather than the window thresholds.
        Returned regardless of duration; callers decide what counts as long.
        """
        return longest_run(series, _is_bad_riding_hour)


def find_safe_riding_window(
    series: Sequence[WeatherObservation],
    min_duration: timedelta = DEFAULT_MIN_WINDOW,
) -> SafeRidingWindow | None:
    """Convenience function to find the safe riding window.

    Args:
        series: Time-ordered hourly observations
        min_duration: Shortest window worth reporting

    Returns:
        The longest good window, or None
    """
    return RideWindowFinder(min_duration=min_duration).find(series)


def find_longest_bad_run(
    series: Sequence[WeatherObservation],
) -> SafeRidingWindow | None:
    """Convenience function to find the longest non-Good run."""
    return RideWindowFinder().find_bad_run(series)


def good_riding_hours_ahead(
    series: Sequence[WeatherObservation],
    max_hours: int = 24,
) -> RidingDuration | None:
    """Count consecutive good riding hours from the start of the series.

    Args:
        series: Time-ordered hourly observations, starting now
        max_hours: Stop counting after this many observations

    Returns:
        RidingDuration with the count and the first bad timestamp (if one was
        reached), or None if the first observation is already bad
    """
    hours = 0
    until = None

    for observation in series[:max_hours]:
        if not is_good_riding_hour(observation):
            until = observation.timestamp
            break
        hours += 1

    if hours == 0:
        return None

    return RidingDuration(hours=hours, until=until)
