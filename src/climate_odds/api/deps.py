"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from climate_odds.service import OddsService


def get_service(request: Request) -> OddsService:
    """Provide the app-wide OddsService (and with it the shared history cache)."""
    return request.app.state.service
