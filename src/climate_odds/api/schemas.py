"""Pydantic response models for the API."""

from __future__ import annotations

from datetime import date
from pydantic import BaseModel

from climate_odds.models import OddsReport


class OddsResultResponse(BaseModel):
    id: str
    label: str
    percentage: float
    note: str
    condition_kind: str


class WeatherSummaryResponse(BaseModel):
    avg_high: float
    avg_low: float
    avg_precip: float
    avg_wind: float


class OddsResponse(BaseModel):
    lat: float
    lon: float
    target_date: date
    day_of_year: int
    matched_years: int
    odds: list[OddsResultResponse]
    summary: WeatherSummaryResponse | None = None

    @classmethod
    def from_report(cls, report: OddsReport) -> "OddsResponse":
        summary = None
        if report.summary is not None:
            summary = WeatherSummaryResponse(
                avg_high=report.summary.avg_high,
                avg_low=report.summary.avg_low,
                avg_precip=report.summary.avg_precip,
                avg_wind=report.summary.avg_wind,
            )
        return cls(
            lat=report.coordinate.latitude,
            lon=report.coordinate.longitude,
            target_date=report.target_date,
            day_of_year=report.day_of_year,
            matched_years=report.matched_years,
            odds=[
                OddsResultResponse(
                    id=o.id,
                    label=o.label,
                    percentage=o.percentage,
                    note=o.note,
                    condition_kind=o.condition_kind.value,
                )
                for o in report.odds
            ],
            summary=summary,
        )


class CacheClearResponse(BaseModel):
    cleared: int
