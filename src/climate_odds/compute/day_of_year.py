"""Date-key parsing and day-of-year alignment."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

import numpy as np
import pandas as pd

DATE_KEY_FORMAT = "%Y%m%d"


def day_of_year(d: date) -> int:
    """Proleptic Gregorian ordinal of ``d`` within its year (1-366)."""
    return d.timetuple().tm_yday


def is_date_key(key: object) -> bool:
    return isinstance(key, str) and len(key) == 8 and key.isascii() and key.isdigit()


def parse_date_key(key: str) -> date | None:
    """Parse an 8-digit ``YYYYMMDD`` key. Returns None if it is not a real date."""
    if not is_date_key(key):
        return None
    try:
        return datetime.strptime(key, DATE_KEY_FORMAT).date()
    except ValueError:
        return None


def date_key_days_of_year(keys: Iterable[str]) -> pd.Series:
    """Day-of-year for each date-key, indexed by key.

    Uses the same validity rule as ``parse_date_key``: keys that are not valid
    ``YYYYMMDD`` dates (wrong shape, or e.g. Feb 30) map to NaN.
    """
    index = pd.Index(list(keys), dtype=object)
    if index.empty:
        return pd.Series(dtype=float, index=index)
    return pd.Series(np.asarray(index.map(_key_day_of_year), dtype=float), index=index)


def _key_day_of_year(key: str) -> float:
    parsed = parse_date_key(key)
    return float(day_of_year(parsed)) if parsed is not None else np.nan
