"""Domain models for riding-condition scoring."""

from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.riding import (
    DailyOutlook,
    DayExtremes,
    Penalty,
    RideRating,
    RidingAssessment,
    RidingCondition,
    RidingDuration,
    RidingScore,
    RiskFactor,
    SafeRidingWindow,
    ScoredObservation,
    VisibilityCondition,
)
from moto_forecast.models.snapshot import ForecastSnapshot

__all__ = [
    # Observation
    "WeatherObservation",
    "ForecastSnapshot",
    # Riding
    "DailyOutlook",
    "DayExtremes",
    "Penalty",
    "RideRating",
    "RidingAssessment",
    "RidingCondition",
    "RidingDuration",
    "RidingScore",
    "RiskFactor",
    "SafeRidingWindow",
    "ScoredObservation",
    "VisibilityCondition",
]
