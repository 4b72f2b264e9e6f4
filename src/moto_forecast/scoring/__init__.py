"""Per-observation riding scoring and advice."""

from __future__ import annotations

from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.riding import RidingAssessment
from moto_forecast.scoring.advice import (
    AdviceRule,
    gear_recommendations,
    recommendations,
)
from moto_forecast.scoring.engine import (
    condition_for_confidence,
    ride_rating,
    score,
    visibility_condition,
    weather_summary,
)


def assess(observation: WeatherObservation) -> RidingAssessment:
    """Score an observation and gather its advice in one result."""
    return RidingAssessment(
        observation=observation,
        score=score(observation),
        recommendations=recommendations(observation),
        gear=gear_recommendations(observation),
        summary=weather_summary(observation),
        visibility=visibility_condition(observation.visibility_km),
    )


__all__ = [
    "AdviceRule",
    "assess",
    "condition_for_confidence",
    "gear_recommendations",
    "recommendations",
    "ride_rating",
    "score",
    "visibility_condition",
    "weather_summary",
]
