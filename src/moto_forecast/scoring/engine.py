"""Riding confidence scoring.

Confidence starts at 100 and each risk factor deducts points independently.
The total is clamped to [0, 100].

| Factor        | Condition                         | Penalty |
|---------------|-----------------------------------|---------|
| Temperature   | below 10°C or above 35°C          | 30      |
| Temperature   | 10-15°C or 30-35°C                | 15      |
| Wind          | above 30 km/h                     | 25      |
| Wind          | above 20 km/h, up to 30 km/h      | 15      |
| Precipitation | any nonzero chance                | 40      |
| Visibility    | below 5 km, or unknown            | 20      |

Worsening any single factor never raises the score. Missing visibility is
scored as poor visibility.
"""

from __future__ import annotations

from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.riding import (
    Penalty,
    RideRating,
    RidingCondition,
    RidingScore,
    RiskFactor,
    VisibilityCondition,
)

PERFECT_SCORE = 100

# Temperature band (°C)
EXTREME_COLD_C = 10
COOL_C = 15
WARM_C = 30
EXTREME_HEAT_C = 35

# Wind (km/h)
MODERATE_WIND_KPH = 20
STRONG_WIND_KPH = 30

# Visibility (km)
MIN_VISIBILITY_KM = 5

# Condition thresholds
GOOD_MIN_CONFIDENCE = 80
MODERATE_MIN_CONFIDENCE = 50


def _temperature_penalty(temp_c: float) -> Penalty | None:
    if temp_c < EXTREME_COLD_C or temp_c > EXTREME_HEAT_C:
        return Penalty(
            factor=RiskFactor.TEMPERATURE,
            points=30,
            reason=f"Extreme temperature ({temp_c:.0f}°C)",
        )
    if temp_c < COOL_C or temp_c > WARM_C:
        return Penalty(
            factor=RiskFactor.TEMPERATURE,
            points=15,
            reason=f"Uncomfortable temperature ({temp_c:.0f}°C)",
        )
    return None


def _wind_penalty(wind_kph: float) -> Penalty | None:
    if wind_kph > STRONG_WIND_KPH:
        return Penalty(
            factor=RiskFactor.WIND,
            points=25,
            reason=f"Strong wind ({wind_kph:.0f} km/h)",
        )
    if wind_kph > MODERATE_WIND_KPH:
        return Penalty(
            factor=RiskFactor.WIND,
            points=15,
            reason=f"Moderate wind ({wind_kph:.0f} km/h)",
        )
    return None


def _precipitation_penalty(precip_percent: float) -> Penalty | None:
    # Binary: any chance of rain costs the full 40 points
    if precip_percent > 0:
        return Penalty(
            factor=RiskFactor.PRECIPITATION,
            points=40,
            reason=f"Chance of rain ({precip_percent:.0f}%)",
        )
    return None


def _visibility_penalty(visibility_km: float | None) -> Penalty | None:
    if visibility_km is None:
        return Penalty(
            factor=RiskFactor.VISIBILITY,
            points=20,
            reason="Visibility unknown",
        )
    if visibility_km < MIN_VISIBILITY_KM:
        return Penalty(
            factor=RiskFactor.VISIBILITY,
            points=20,
            reason=f"Poor visibility ({visibility_km:.1f} km)",
        )
    return None


def condition_for_confidence(confidence: int) -> RidingCondition:
    """Map a confidence score to a riding condition.

    80-100 is Good, 50-79 is Moderate, anything lower is Unsafe.
    """
    if confidence >= GOOD_MIN_CONFIDENCE:
        return RidingCondition.GOOD
    if confidence >= MODERATE_MIN_CONFIDENCE:
        return RidingCondition.MODERATE
    return RidingCondition.UNSAFE


def ride_rating(confidence: int) -> RideRating:
    """Map a confidence score to the six-tier display rating."""
    if confidence >= 90:
        return RideRating.EXCELLENT
    if confidence >= 75:
        return RideRating.GOOD
    if confidence >= 60:
        return RideRating.MODERATE
    if confidence >= 40:
        return RideRating.FAIR
    if confidence >= 20:
        return RideRating.POOR
    return RideRating.UNSAFE


def visibility_condition(visibility_km: float | None) -> VisibilityCondition:
    """Categorize visibility for display."""
    if visibility_km is None:
        return VisibilityCondition.UNKNOWN
    if visibility_km >= 10:
        return VisibilityCondition.EXCELLENT
    if visibility_km >= 7:
        return VisibilityCondition.GOOD
    if visibility_km >= 4:
        return VisibilityCondition.MODERATE
    if visibility_km >= 1:
        return VisibilityCondition.POOR
    return VisibilityCondition.HAZARDOUS


def score(observation: WeatherObservation) -> RidingScore:
    """Score an observation for riding.

    Args:
        observation: Observation in canonical units

    Returns:
        RidingScore with confidence, condition, rating and the penalties applied
    """
    candidates = [
        _temperature_penalty(observation.temperature_c),
        _wind_penalty(observation.wind_speed_kph),
        _precipitation_penalty(observation.precipitation_percent),
        _visibility_penalty(observation.visibility_km),
    ]
    penalties = [p for p in candidates if p is not None]

    total = sum(p.points for p in penalties)
    confidence = max(0, min(PERFECT_SCORE, PERFECT_SCORE - total))

    return RidingScore(
        confidence=confidence,
        condition=condition_for_confidence(confidence),
        rating=ride_rating(confidence),
        penalties=penalties,
    )


def weather_summary(observation: WeatherObservation) -> str:
    """Build a short comma-separated description of the conditions.

    Example: "Light Rain, Mild, Moderate winds, Rain likely"
    """
    parts: list[str] = []

    if observation.description:
        parts.append(observation.description.title())

    # Temperature context only for daily aggregates
    if observation.high_temp_c is not None and observation.low_temp_c is not None:
        if observation.high_temp_c > WARM_C:
            parts.append("Hot")
        elif observation.high_temp_c < COOL_C:
            parts.append("Cool")
        else:
            parts.append("Mild")

    wind = observation.wind_speed_kph
    if wind > STRONG_WIND_KPH:
        parts.append("Strong winds")
    elif wind > MODERATE_WIND_KPH:
        parts.append("Moderate winds")
    else:
        parts.append("Light winds")

    if observation.visibility_km is not None and observation.visibility_km < MIN_VISIBILITY_KM:
        parts.append("Poor visibility")

    precip = observation.precipitation_percent
    if precip >= 70:
        parts.append("Heavy rain very likely")
    elif precip >= 50:
        parts.append("Rain likely")
    elif precip >= 30:
        parts.append("Rain possible")
    elif precip >= 10:
        parts.append("Slight chance of rain")

    return ", ".join(parts)
