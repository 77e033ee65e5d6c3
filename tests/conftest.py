"""Shared test fixtures."""

import pytest

from climate_odds.ingest.cache import SeriesCache
from climate_odds.ingest.fetcher import HistoricalDataFetcher
from climate_odds.models import RawSeries


class CountingFetch:
    """Stand-in for the NASA POWER call that records each coordinate it was asked for."""

    def __init__(self, series: RawSeries | None = None, error: Exception | None = None):
        self.series = series if series is not None else RawSeries()
        self.error = error
        self.calls: list[tuple[float, float]] = []

    def __call__(self, lat: float, lon: float) -> RawSeries:
        self.calls.append((lat, lon))
        if self.error is not None:
            raise self.error
        return self.series


@pytest.fixture
def july_series() -> RawSeries:
    """Three non-leap years of July 15 (DOY 196) plus neighbouring distractor days.

    2019 has no min temperature, precipitation or wind for July 15.
    """
    return RawSeries(
        max_temp={
            "20170714": 50.0,
            "20170715": 31.0,
            "20170716": 50.0,
            "20180715": 36.0,
            "20190715": 40.0,
            "20190716": -5.0,
        },
        min_temp={
            "20170715": 18.0,
            "20180715": 22.0,
            "20170716": 0.0,
        },
        precipitation={
            "20170715": 0.0,
            "20180715": 5.0,
            "20190715": 12.5,
        },
        wind_speed={
            "20170715": 2.5,
            "20180715": 7.0,
        },
    )


@pytest.fixture
def counting_fetch(july_series) -> CountingFetch:
    return CountingFetch(july_series)


@pytest.fixture
def fetcher(counting_fetch) -> HistoricalDataFetcher:
    """Fetcher with a fresh cache and no network."""
    return HistoricalDataFetcher(cache=SeriesCache(), fetch_func=counting_fetch)


@pytest.fixture
def make_fetch():
    """Factory for CountingFetch stand-ins with custom payloads or errors."""
    return CountingFetch
