"""Pytest fixtures for riding-condition tests.

Observations default to ideal riding weather so each test only states the
fields it cares about.
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Keep settings independent of any developer .env values
os.environ.setdefault("MOTO_FORECAST_ENVIRONMENT", "development")

from moto_forecast.models.observation import WeatherObservation
from moto_forecast.models.snapshot import ForecastSnapshot

BASE_TIME = datetime(2024, 6, 15, 6, 0, tzinfo=timezone.utc)

IDEAL = {
    "temperature_c": 22.0,
    "feels_like_c": 22.0,
    "humidity_percent": 50,
    "wind_speed_kph": 10.0,
    "precipitation_percent": 0.0,
    "visibility_km": 10.0,
    "uv_index": 4.0,
    "description": "clear sky",
    "icon": "01d",
}

# Fails the good-riding-hour check (and scores Unsafe)
STORMY = {
    "temperature_c": 12.0,
    "wind_speed_kph": 35.0,
    "precipitation_percent": 80.0,
    "visibility_km": 3.0,
    "description": "thunderstorm",
}


def observation(hour: float = 0, **overrides) -> WeatherObservation:
    """Build an observation `hour` hours after BASE_TIME."""
    fields = {**IDEAL, "timestamp": BASE_TIME + timedelta(hours=hour)}
    fields.update(overrides)
    return WeatherObservation(**fields)


def hourly_series(pattern: str, start_hour: float = 0) -> list[WeatherObservation]:
    """Build an hourly series from a pattern string.

    'G' is an ideal hour and 'B' a stormy one, e.g. "GGGBGG".
    """
    series = []
    for i, char in enumerate(pattern):
        overrides = STORMY if char == "B" else {}
        series.append(observation(start_hour + i, **overrides))
    return series


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from moto_forecast.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ideal_observation() -> WeatherObservation:
    """Perfect riding weather."""
    return observation()


@pytest.fixture
def stormy_observation() -> WeatherObservation:
    """Everything wrong at once."""
    return observation(**STORMY)


@pytest.fixture
def daily_series() -> list[WeatherObservation]:
    """A week of daily aggregates with mixed conditions."""
    days = [
        {"precipitation_percent": 60.0, "high_temp_c": 18.0, "low_temp_c": 9.0},
        {"high_temp_c": 24.0, "low_temp_c": 14.0},
        {"temperature_c": 33.0, "high_temp_c": 34.0, "low_temp_c": 21.0},
        {"temperature_c": 5.0, "wind_speed_kph": 40.0, "precipitation_percent": 90.0,
         "visibility_km": None, "high_temp_c": 7.0, "low_temp_c": 1.0},
        {"high_temp_c": 25.0, "low_temp_c": 15.0},
    ]
    return [observation(24 * i, **fields) for i, fields in enumerate(days)]


@pytest.fixture
def sample_snapshot(daily_series: list[WeatherObservation]) -> ForecastSnapshot:
    """Snapshot with current, hourly and daily data."""
    return ForecastSnapshot(
        fetched_at=BASE_TIME,
        location_name="Asheville, NC, US",
        current=observation(),
        hourly=tuple(hourly_series("GGBGGGGGBB")),
        daily=tuple(daily_series),
    )


@pytest.fixture
def make_observation():
    """Factory for observations relative to BASE_TIME."""
    return observation


@pytest.fixture
def make_series():
    """Factory for hourly series from a 'G'/'B' pattern."""
    return hourly_series
