"""Odds endpoint - the core product output."""

from __future__ import annotations

from datetime import date
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from climate_odds.api.deps import get_service
from climate_odds.api.schemas import CacheClearResponse, OddsResponse
from climate_odds.ingest.nasa_power import RemoteFetchError
from climate_odds.models import Coordinate, Thresholds
from climate_odds.service import OddsService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=OddsResponse)
def get_odds(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    target_date: date = Query(..., alias="date"),
    hot: float | None = Query(None, description="Too hot above this max temperature (°C)"),
    cold: float | None = Query(None, description="Too cold below this min temperature (°C)"),
    rain: float | None = Query(None, description="Rain at or above this daily total (mm)"),
    wind: float | None = Query(None, description="Wind at or above this mean speed (km/h)"),
    service: OddsService = Depends(get_service),
) -> OddsResponse:
    """Historical odds of each requested threshold being crossed on this day of year.

    Orchestrates: fetch history (cached per coordinate) -> align day of year -> score.
    """
    thresholds = Thresholds(hot=hot, cold=cold, rain=rain, wind=wind)
    try:
        report = service.get_odds(Coordinate(lat, lon), target_date, thresholds)
    except RemoteFetchError:
        logger.warning("History fetch failed for lat=%.4f lon=%.4f", lat, lon)
        raise HTTPException(502, "Failed to fetch historical data")

    return OddsResponse.from_report(report)


@router.delete("/cache", response_model=CacheClearResponse)
def clear_cache(service: OddsService = Depends(get_service)) -> CacheClearResponse:
    return CacheClearResponse(cleared=service.clear_cache())
