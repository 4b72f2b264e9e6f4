"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every variable is prefixed with `MOTO_FORECAST_`.

## Optional Environment Variables

- MOTO_FORECAST_DEBUG: Enable debug mode and API docs (default: false)
- MOTO_FORECAST_LOG_LEVEL: Logging level (default: INFO)
- MOTO_FORECAST_MIN_WINDOW_HOURS: Shortest riding window to report (default: 3)
- MOTO_FORECAST_SNAPSHOT_MAX_AGE_MINUTES: Age after which a snapshot is stale

## Example .env file

```
MOTO_FORECAST_DEBUG=true
MOTO_FORECAST_LOG_LEVEL=DEBUG
MOTO_FORECAST_MIN_WINDOW_HOURS=2
```
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moto_forecast import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOTO_FORECAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Moto Forecast"
    app_version: str = __version__
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Riding analysis
    min_window_hours: float = Field(
        default=3,
        ge=1,
        description="Shortest safe riding window worth reporting (hours)",
    )
    snapshot_max_age_minutes: int = Field(
        default=30,
        ge=1,
        le=1440,
        description="Age after which a forecast snapshot should be refreshed",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Uppercase and validate the log level name."""
        level = str(v).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def min_window(self) -> timedelta:
        """Minimum riding window as a timedelta."""
        return timedelta(hours=self.min_window_hours)

    @property
    def snapshot_max_age(self) -> timedelta:
        """Snapshot staleness threshold as a timedelta."""
        return timedelta(minutes=self.snapshot_max_age_minutes)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
