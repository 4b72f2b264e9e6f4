"""Series-level riding analysis: windows, best days and outlook."""

from moto_forecast.forecast.days import best_and_worst_day, daily_outlook
from moto_forecast.forecast.windows import (
    RideWindowFinder,
    find_longest_bad_run,
    find_safe_riding_window,
    good_riding_hours_ahead,
    is_good_riding_hour,
    longest_run,
)

__all__ = [
    "RideWindowFinder",
    "best_and_worst_day",
    "daily_outlook",
    "find_longest_bad_run",
    "find_safe_riding_window",
    "good_riding_hours_ahead",
    "is_good_riding_hour",
    "longest_run",
]
