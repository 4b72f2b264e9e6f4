"""Loading forecast snapshots from JSON.

The weather fetch layer writes (or returns) snapshots as JSON in canonical
units; this module turns them back into validated `ForecastSnapshot` values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from moto_forecast.models.snapshot import ForecastSnapshot

logger = logging.getLogger(__name__)


class ObservationSourceError(Exception):
    """Raised when a snapshot cannot be read or validated."""

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source


def parse_snapshot(data: str | bytes | dict[str, Any], source: str = "<data>") -> ForecastSnapshot:
    """Validate snapshot data.

    Args:
        data: JSON text or an already-decoded mapping
        source: Name used in error messages

    Returns:
        Validated ForecastSnapshot

    Raises:
        ObservationSourceError: If the data is not a valid snapshot
    """
    try:
        if isinstance(data, dict):
            snapshot = ForecastSnapshot.model_validate(data)
        else:
            snapshot = ForecastSnapshot.model_validate_json(data)
    except ValidationError as e:
        raise ObservationSourceError(
            f"Invalid snapshot in {source}: {e.error_count()} validation error(s)\n{e}",
            source=source,
        ) from e

    logger.debug(
        f"Loaded snapshot from {source}: {len(snapshot.hourly)} hourly, "
        f"{len(snapshot.daily)} daily"
    )
    return snapshot


def load_snapshot(path: str | Path) -> ForecastSnapshot:
    """Read and validate a snapshot JSON file.

    Raises:
        ObservationSourceError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ObservationSourceError(f"Cannot read {path}: {e}", source=str(path)) from e

    return parse_snapshot(text, source=str(path))
