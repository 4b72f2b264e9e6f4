"""Riding score, window and outlook models.

Every model here is derived from observations on demand. Nothing is
persisted or mutated after construction.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from moto_forecast.models.observation import WeatherObservation


class RidingCondition(str, Enum):
    """Categorical riding condition derived from confidence."""

    GOOD = "Good"
    MODERATE = "Moderate"
    UNSAFE = "Unsafe"


class RideRating(str, Enum):
    """Finer-grained display rating derived from confidence."""

    EXCELLENT = "Excellent!"
    GOOD = "Good"
    MODERATE = "Moderate"
    FAIR = "Fair"
    POOR = "Poor"
    UNSAFE = "Not Recommended"

    @property
    def description(self) -> str:
        return _RATING_DESCRIPTIONS[self]


_RATING_DESCRIPTIONS = {
    RideRating.EXCELLENT: "Perfect conditions for riding!",
    RideRating.GOOD: "Great day for a ride",
    RideRating.MODERATE: "Decent riding conditions",
    RideRating.FAIR: "Exercise caution",
    RideRating.POOR: "Consider postponing",
    RideRating.UNSAFE: "Not recommended for riding",
}


class VisibilityCondition(str, Enum):
    """Visibility category for display."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    MODERATE = "Moderate"
    POOR = "Poor"
    HAZARDOUS = "Hazardous"
    UNKNOWN = "Unknown"

    @property
    def description(self) -> str:
        return _VISIBILITY_DESCRIPTIONS[self]


_VISIBILITY_DESCRIPTIONS = {
    VisibilityCondition.EXCELLENT: "Perfect visibility for riding",
    VisibilityCondition.GOOD: "Clear visibility",
    VisibilityCondition.MODERATE: "Moderate visibility - Exercise caution",
    VisibilityCondition.POOR: "Poor visibility - Increased risk",
    VisibilityCondition.HAZARDOUS: "Hazardous conditions - Not recommended",
    VisibilityCondition.UNKNOWN: "Visibility data unavailable",
}


class RiskFactor(str, Enum):
    """Factors that can reduce riding confidence."""

    TEMPERATURE = "temperature"
    WIND = "wind"
    PRECIPITATION = "precipitation"
    VISIBILITY = "visibility"


class Penalty(BaseModel):
    """A single deduction applied to the confidence score."""

    model_config = ConfigDict(frozen=True)

    factor: RiskFactor
    points: int = Field(..., gt=0, description="Points deducted from 100")
    reason: str


class RidingScore(BaseModel):
    """Riding confidence for one observation."""

    model_config = ConfigDict(frozen=True)

    confidence: int = Field(..., ge=0, le=100, description="Riding confidence (0-100)")
    condition: RidingCondition
    rating: RideRating
    penalties: list[Penalty] = Field(
        default_factory=list, description="Deductions in evaluation order"
    )

    @property
    def total_penalty(self) -> int:
        """Sum of all deductions before clamping."""
        return sum(p.points for p in self.penalties)


class SafeRidingWindow(BaseModel):
    """A contiguous span of observations, bounded by their own timestamps."""

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Timestamp of the first observation")
    end: datetime = Field(..., description="Timestamp of the last observation")
    observations: int = Field(default=1, ge=1, description="Observations in the span")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration(self) -> timedelta:
        """Span duration (end - start)."""
        return self.end - self.start

    @property
    def hours(self) -> float:
        return self.duration.total_seconds() / 3600


class ScoredObservation(BaseModel):
    """An observation paired with its score."""

    model_config = ConfigDict(frozen=True)

    observation: WeatherObservation
    score: RidingScore


class DayExtremes(BaseModel):
    """Best and worst riding days in a daily series."""

    model_config = ConfigDict(frozen=True)

    best: ScoredObservation
    worst: ScoredObservation


class DailyOutlook(str, Enum):
    """Overall riding outlook for a run of hourly observations."""

    EXCELLENT = "Excellent Day"
    GENERALLY_GOOD = "Generally Good"
    WATCH_FOR_CHANGES = "Watch for Weather Changes"
    USE_CAUTION = "Use Caution Today"
    POOR = "Poor Day for Riding"


class RidingDuration(BaseModel):
    """Consecutive good riding hours from the start of a series."""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(..., ge=1, description="Consecutive good observations")
    until: datetime | None = Field(
        default=None, description="Timestamp of the first bad observation, if any"
    )

    def describe(self) -> str:
        """Human-readable summary, e.g. 'Good riding conditions for 3 hours'."""
        plural = "s" if self.hours > 1 else ""
        if self.until is not None:
            return (
                f"Good riding conditions for {self.hours} hour{plural} "
                f"(until {self.until:%H:%M})"
            )
        return f"Good riding conditions for at least {self.hours} hour{plural}"


class RidingAssessment(BaseModel):
    """Everything the presentation layer needs for one observation."""

    model_config = ConfigDict(frozen=True)

    observation: WeatherObservation
    score: RidingScore
    recommendations: list[str]
    gear: list[str]
    summary: str
    visibility: VisibilityCondition
