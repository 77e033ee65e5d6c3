"""Climate odds - historical exceedance odds for comfort thresholds on a day of year."""

__version__ = "0.1.0"

from climate_odds.compute.odds import compute_odds
from climate_odds.ingest.fetcher import HistoricalDataFetcher
from climate_odds.ingest.nasa_power import RemoteFetchError
from climate_odds.models import Coordinate, RawSeries, Thresholds
from climate_odds.service import OddsService

__all__ = [
    "Coordinate",
    "HistoricalDataFetcher",
    "OddsService",
    "RawSeries",
    "RemoteFetchError",
    "Thresholds",
    "compute_odds",
]
