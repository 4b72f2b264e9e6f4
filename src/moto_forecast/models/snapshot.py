"""Forecast snapshot model.

A snapshot is the caller-owned cache of the last weather fetch: the current
observation, the hourly and daily series, and when they were fetched. It is
immutable, so window scans can run against it while a newer snapshot is
being built elsewhere.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moto_forecast.models.observation import WeatherObservation, ensure_time_ordered


class ForecastSnapshot(BaseModel):
    """Immutable copy of one weather fetch for a location."""

    model_config = ConfigDict(frozen=True)

    fetched_at: datetime = Field(..., description="When the data was fetched")
    location_name: str | None = Field(default=None, description="Display name")

    current: WeatherObservation | None = Field(
        default=None, description="Current conditions"
    )
    hourly: tuple[WeatherObservation, ...] = Field(
        default=(), description="Hourly forecast, time-ordered"
    )
    daily: tuple[WeatherObservation, ...] = Field(
        default=(), description="One representative observation per day"
    )

    @field_validator("hourly", "daily")
    @classmethod
    def validate_time_ordered(
        cls, v: tuple[WeatherObservation, ...]
    ) -> tuple[WeatherObservation, ...]:
        """Ensure series are in non-decreasing timestamp order."""
        ensure_time_ordered(v)
        return v

    def age(self, now: datetime | None = None) -> timedelta:
        """Time elapsed since the fetch."""
        now = now or datetime.now(timezone.utc)
        fetched_at = self.fetched_at
        # Naive timestamps are treated as UTC
        if fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now - fetched_at

    def is_stale(self, max_age: timedelta, now: datetime | None = None) -> bool:
        """Check if the snapshot is older than max_age."""
        return self.age(now) > max_age

    def hourly_between(self, start: datetime, end: datetime) -> list[WeatherObservation]:
        """Get hourly observations within a time range (inclusive)."""
        return [h for h in self.hourly if start <= h.timestamp <= end]
