"""Historical data fetcher: NASA POWER behind a per-coordinate memo."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from climate_odds.ingest.cache import CacheKey, SeriesCache
from climate_odds.ingest.nasa_power import fetch_power_daily
from climate_odds.models import Coordinate, RawSeries

logger = logging.getLogger(__name__)

FetchFunc = Callable[[float, float], RawSeries]


class HistoricalDataFetcher:
    """Return the raw daily history for a coordinate, hitting the network once per key.

    Concurrent first requests for the same rounded coordinate share one
    upstream call: the first caller fetches under a per-key lock, the others
    wait on it and then read the cache. A failed fetch caches nothing and its
    error goes only to the caller that made it; callers that were waiting on
    the lock then retry the upstream call one at a time. A key's lock is
    dropped once its history is cached.
    """

    def __init__(
        self,
        cache: SeriesCache | None = None,
        fetch_func: FetchFunc = fetch_power_daily,
    ) -> None:
        self.cache = cache if cache is not None else SeriesCache()
        self._fetch_func = fetch_func
        self._key_locks: dict[CacheKey, threading.Lock] = {}
        self._key_locks_guard = threading.Lock()

    def fetch(self, coordinate: Coordinate) -> RawSeries:
        key = self.cache.key_for(coordinate)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        with self._lock_for(key):
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Cache filled by concurrent fetch for %s", key)
                return cached

            series = self._fetch_func(coordinate.latitude, coordinate.longitude)
            self.cache.set(key, series)
            with self._key_locks_guard:
                self._key_locks.pop(key, None)
            logger.info("Cached history for %s (%d cached coordinates)", key, len(self.cache))
            return series

    def clear(self) -> int:
        with self._key_locks_guard:
            for key, lock in list(self._key_locks.items()):
                if not lock.locked():
                    del self._key_locks[key]
        return self.cache.clear()

    def _lock_for(self, key: CacheKey) -> threading.Lock:
        with self._key_locks_guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[key] = lock
            return lock
