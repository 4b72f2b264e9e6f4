"""Riding analysis routes.

Request bodies carry observations in canonical units. Absent results
(no window, empty series) are returned as null rather than as errors.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from moto_forecast.config import Settings, get_settings
from moto_forecast.forecast import (
    RideWindowFinder,
    best_and_worst_day,
    daily_outlook,
    good_riding_hours_ahead,
)
from moto_forecast.models.observation import WeatherObservation, ensure_time_ordered
from moto_forecast.models.riding import (
    DailyOutlook,
    DayExtremes,
    RidingAssessment,
    RidingDuration,
    SafeRidingWindow,
)
from moto_forecast.scoring import assess

router = APIRouter()


class SeriesRequest(BaseModel):
    """A time-ordered series of observations."""

    observations: list[WeatherObservation] = Field(
        default_factory=list, description="Observations in time order"
    )

    @field_validator("observations")
    @classmethod
    def validate_time_ordered(
        cls, v: list[WeatherObservation]
    ) -> list[WeatherObservation]:
        """Reject series that are not in timestamp order."""
        ensure_time_ordered(v)
        return v


class WindowResponse(BaseModel):
    """Best riding window and the run of good hours from now."""

    window: SafeRidingWindow | None = None
    good_hours_ahead: RidingDuration | None = None
    min_window_hours: float


class OutlookResponse(BaseModel):
    """Daily riding outlook."""

    outlook: DailyOutlook | None = None


class DaysResponse(BaseModel):
    """Best and worst days."""

    extremes: DayExtremes | None = None


@router.post("/assess", response_model=RidingAssessment)
async def assess_observation(observation: WeatherObservation) -> RidingAssessment:
    """Score one observation and return advice and gear."""
    return assess(observation)


@router.post("/window", response_model=WindowResponse)
async def find_window(
    request: SeriesRequest,
    settings: Settings = Depends(get_settings),
) -> WindowResponse:
    """Find the best contiguous riding window."""
    finder = RideWindowFinder(min_duration=settings.min_window)
    return WindowResponse(
        window=finder.find(request.observations),
        good_hours_ahead=good_riding_hours_ahead(request.observations),
        min_window_hours=settings.min_window_hours,
    )


@router.post("/outlook", response_model=OutlookResponse)
async def get_outlook(request: SeriesRequest) -> OutlookResponse:
    """Summarize the riding outlook for an hourly series."""
    return OutlookResponse(outlook=daily_outlook(request.observations))


@router.post("/days", response_model=DaysResponse)
async def get_best_and_worst_days(request: SeriesRequest) -> DaysResponse:
    """Select the best and worst riding days."""
    return DaysResponse(extremes=best_and_worst_day(request.observations))
