"""Daily riding selection and outlook.

Daily series are expected to hold one representative observation per
calendar day; reducing hourly data to that is the fetch layer's job.
"""

from __future__ import annotations

from collections.abc import Sequence

from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.riding import (
    DailyOutlook,
    DayExtremes,
    RidingCondition,
    ScoredObservation,
)
from moto_forecast.scoring.engine import score

# Consecutive non-Good hours that make a "long" bad period
LONG_BAD_PERIOD_HOURS = 3


def best_and_worst_day(
    daily: Sequence[WeatherObservation],
) -> DayExtremes | None:
    """Select the highest and lowest confidence days.

    The first occurrence wins ties for both best and worst.

    Args:
        daily: Daily-aggregate observations in date order

    Returns:
        DayExtremes, or None for an empty series
    """
    best: ScoredObservation | None = None
    worst: ScoredObservation | None = None

    for observation in daily:
        scored = ScoredObservation(observation=observation, score=score(observation))
        if best is None or scored.score.confidence > best.score.confidence:
            best = scored
        if worst is None or scored.score.confidence < worst.score.confidence:
            worst = scored

    if best is None or worst is None:
        return None

    return DayExtremes(best=best, worst=worst)


def daily_outlook(hourly: Sequence[WeatherObservation]) -> DailyOutlook | None:
    """Summarize the riding outlook for a run of hourly observations.

    Considers the worst condition seen and whether there were at least
    three consecutive hours that were not Good.

    Returns:
        DailyOutlook, or None for an empty series
    """
    if not hourly:
        return None

    worst = RidingCondition.GOOD
    consecutive_bad = 0
    has_long_bad_period = False

    for observation in hourly:
        condition = score(observation).condition
        if condition == RidingCondition.GOOD:
            consecutive_bad = 0
            continue

        consecutive_bad += 1
        if condition == RidingCondition.UNSAFE:
            worst = RidingCondition.UNSAFE
        elif worst != RidingCondition.UNSAFE:
            worst = RidingCondition.MODERATE

        if consecutive_bad >= LONG_BAD_PERIOD_HOURS:
            has_long_bad_period = True

    if has_long_bad_period:
        if worst == RidingCondition.UNSAFE:
            return DailyOutlook.POOR
        return DailyOutlook.USE_CAUTION

    if worst == RidingCondition.UNSAFE:
        return DailyOutlook.WATCH_FOR_CHANGES
    if worst == RidingCondition.MODERATE:
        return DailyOutlook.GENERALLY_GOOD
    return DailyOutlook.EXCELLENT
