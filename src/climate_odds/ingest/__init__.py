from climate_odds.ingest.cache import SeriesCache
from climate_odds.ingest.fetcher import HistoricalDataFetcher
from climate_odds.ingest.nasa_power import RemoteFetchError, fetch_power_daily

__all__ = ["HistoricalDataFetcher", "RemoteFetchError", "SeriesCache", "fetch_power_daily"]
