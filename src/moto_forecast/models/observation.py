"""Weather observation model.

## Canonical Units
- Temperature: Celsius (°C)
- Wind speed: kilometers per hour (km/h)
- Precipitation: probability percentage (0-100), not volume
- Visibility: kilometers (km)
- Humidity: percentage (0-100)

Providers usually report wind in m/s. Pass `wind_speed_ms` instead of
`wind_speed_kph` and the model converts it on construction, so all riding
thresholds compare against a single unit.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator

MS_TO_KPH = 3.6
KPH_TO_MPH = 0.621371
KM_TO_MILES = 0.621371


class WeatherObservation(BaseModel):
    """One weather data point (current, hourly or daily aggregate)."""

    model_config = ConfigDict(frozen=True)

    timestamp: AwareDatetime = Field(
        ..., description="Time the observation applies to (timezone-aware)"
    )

    # Temperature
    temperature_c: float = Field(..., description="Temperature in Celsius")
    feels_like_c: float | None = Field(
        default=None, description="Feels-like temperature in Celsius"
    )
    high_temp_c: float | None = Field(
        default=None, description="Daily high (daily aggregates only)"
    )
    low_temp_c: float | None = Field(
        default=None, description="Daily low (daily aggregates only)"
    )

    humidity_percent: int = Field(
        default=0, ge=0, le=100, description="Relative humidity percentage"
    )
    wind_speed_kph: float = Field(..., ge=0, description="Wind speed in km/h")
    precipitation_percent: float = Field(
        default=0, ge=0, le=100, description="Probability of precipitation (%)"
    )
    visibility_km: float | None = Field(
        default=None, ge=0, description="Visibility in kilometers (None = unknown)"
    )
    uv_index: float | None = Field(default=None, ge=0, description="UV index")

    # Display only
    description: str = Field(default="", description="Provider condition text")
    icon: str = Field(default="", description="Provider icon code")

    @model_validator(mode="before")
    @classmethod
    def normalize_wind_speed(cls, data: Any) -> Any:
        """Convert provider-native m/s wind speed to km/h."""
        if isinstance(data, dict) and "wind_speed_ms" in data:
            if data.get("wind_speed_kph") is not None:
                raise ValueError("Provide either wind_speed_ms or wind_speed_kph, not both")
            data = dict(data)
            speed_ms = data.pop("wind_speed_ms")
            data["wind_speed_kph"] = speed_ms * MS_TO_KPH if speed_ms is not None else None
        return data

    @property
    def temperature_f(self) -> float:
        """Temperature in Fahrenheit."""
        return self.temperature_c * 9 / 5 + 32

    @property
    def feels_like_f(self) -> float | None:
        """Feels-like temperature in Fahrenheit."""
        return self.feels_like_c * 9 / 5 + 32 if self.feels_like_c is not None else None

    @property
    def wind_speed_ms(self) -> float:
        """Wind speed in meters per second."""
        return self.wind_speed_kph / MS_TO_KPH

    @property
    def wind_speed_mph(self) -> float:
        """Wind speed in miles per hour."""
        return self.wind_speed_kph * KPH_TO_MPH

    @property
    def visibility_miles(self) -> float | None:
        """Visibility in miles."""
        return self.visibility_km * KM_TO_MILES if self.visibility_km is not None else None

    @property
    def is_daily(self) -> bool:
        """Check if this is a daily aggregate (has high/low)."""
        return self.high_temp_c is not None or self.low_temp_c is not None


def ensure_time_ordered(
    observations: Sequence[WeatherObservation],
) -> Sequence[WeatherObservation]:
    """Check observations are in non-decreasing timestamp order.

    Raises:
        ValueError: On the first observation earlier than its predecessor
    """
    for previous, current in zip(observations, observations[1:]):
        if current.timestamp < previous.timestamp:
            raise ValueError(
                f"Observations out of order: {current.timestamp.isoformat()} "
                f"follows {previous.timestamp.isoformat()}"
            )
    return observations
