"""Odds service: fetch the history for a coordinate, then score it."""

from __future__ import annotations

from datetime import date
import logging

from climate_odds.compute.day_of_year import day_of_year
from climate_odds.compute.odds import match_day_records, score_records, summarize
from climate_odds.ingest.fetcher import HistoricalDataFetcher
from climate_odds.models import Coordinate, OddsReport, Thresholds

logger = logging.getLogger(__name__)


class OddsService:
    """Owns one fetcher (and so one cache) for its lifetime."""

    def __init__(self, fetcher: HistoricalDataFetcher | None = None) -> None:
        self.fetcher = fetcher if fetcher is not None else HistoricalDataFetcher()

    def get_odds(
        self,
        coordinate: Coordinate,
        target_date: date,
        thresholds: Thresholds,
    ) -> OddsReport:
        """Climatological odds for ``thresholds`` on ``target_date``'s day of year.

        Raises RemoteFetchError if the history cannot be fetched.
        """
        raw = self.fetcher.fetch(coordinate)
        doy = day_of_year(target_date)
        records = match_day_records(raw, doy)
        odds = score_records(records, thresholds)
        summary = summarize(records)
        matched = len(records)

        logger.info(
            "Odds for lat=%.4f lon=%.4f doy=%d: %d years matched, %d thresholds",
            coordinate.latitude, coordinate.longitude, doy, matched, len(odds),
        )
        return OddsReport(
            coordinate=coordinate,
            target_date=target_date,
            day_of_year=doy,
            matched_years=matched,
            odds=odds,
            summary=summary,
        )

    def clear_cache(self) -> int:
        cleared = self.fetcher.clear()
        logger.info("Cleared %d cached coordinates", cleared)
        return cleared
