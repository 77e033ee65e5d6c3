from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple

from climate_odds.config import CACHE_PRECISION
from climate_odds.models import Coordinate, RawSeries

CacheKey = Tuple[float, float]


class SeriesCache:
    """In-memory RawSeries store keyed by rounded coordinate.

    Entries live until ``clear()`` or process exit. Stored series are
    immutable, so a racing second write for the same key is harmless.
    """

    def __init__(self, precision: int = CACHE_PRECISION) -> None:
        self.precision = precision
        self._storage: Dict[CacheKey, RawSeries] = {}
        self._lock = threading.Lock()

    def key_for(self, coordinate: Coordinate) -> CacheKey:
        return (
            round(coordinate.latitude, self.precision),
            round(coordinate.longitude, self.precision),
        )

    def get(self, key: CacheKey) -> Optional[RawSeries]:
        with self._lock:
            return self._storage.get(key)

    def set(self, key: CacheKey, value: RawSeries) -> None:
        with self._lock:
            self._storage[key] = value

    def clear(self) -> int:
        with self._lock:
            count = len(self._storage)
            self._storage.clear()
        return count

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._storage

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)


__all__ = ["CacheKey", "SeriesCache"]
