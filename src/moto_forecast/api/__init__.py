"""FastAPI application and routes.

This module exposes riding analysis over HTTP for the presentation layer.

## API Structure

- /health - Service health
- /api/riding/assess - Score, advice and gear for one observation
- /api/riding/window - Best contiguous riding window in an hourly series
- /api/riding/outlook - Daily outlook for an hourly series
- /api/riding/days - Best and worst day in a daily series

All endpoints are stateless; callers send the observations they hold.
"""

from moto_forecast.api.app import create_app

__all__ = ["create_app"]
