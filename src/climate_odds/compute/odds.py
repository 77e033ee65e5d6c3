"""Exceedance odds for a single day of year.

Every historical year whose max-temperature date-key falls on the target
day-of-year contributes one record. Each active threshold is then scored as
the share of those records crossing it:

    Hot:   max_temp        >  threshold
    Cold:  min_temp        <  threshold
    Rain:  precipitation   >= threshold
    Wind:  wind_speed_kmh  >= threshold

Only the max-temperature mapping drives which date-keys are considered; a key
present only in another mapping contributes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import math
import operator
from typing import Callable, Mapping

import numpy as np
import pandas as pd

from climate_odds.compute.day_of_year import date_key_days_of_year, day_of_year
from climate_odds.config import MS_TO_KMH
from climate_odds.models import (
    ConditionKind,
    OddsResult,
    RawSeries,
    Threshold,
    Thresholds,
    WeatherSummary,
)

RECORD_COLUMNS = ["max_temp", "min_temp", "precipitation", "wind_speed_kmh"]


@dataclass(frozen=True)
class _Rule:
    column: str
    compare: Callable[[pd.Series, float], pd.Series]
    label: str
    note: str


_RULES: dict[ConditionKind, _Rule] = {
    ConditionKind.HOT: _Rule(
        "max_temp", operator.gt, "Too hot > {} °C",
        "Historical odds of hotter-than-threshold.",
    ),
    ConditionKind.COLD: _Rule(
        "min_temp", operator.lt, "Too cold < {} °C",
        "Historical odds of colder-than-threshold.",
    ),
    ConditionKind.RAIN: _Rule(
        "precipitation", operator.ge, "Rain ≥ {} mm",
        "Daily precipitation exceedance odds.",
    ),
    ConditionKind.WIND: _Rule(
        "wind_speed_kmh", operator.ge, "Wind ≥ {} km/h",
        "Daily wind exceedance odds.",
    ),
}


def compute_odds(
    raw_series: RawSeries,
    target_date: date,
    thresholds: Thresholds,
) -> tuple[list[OddsResult], WeatherSummary | None]:
    """Score every active threshold against the target day's history.

    Returns the odds in hot, cold, rain, wind order (active thresholds only)
    and the averaged summary, which is None when no year matched. Never
    raises: with zero matching years every active threshold scores 0%.
    """
    records = match_day_records(raw_series, day_of_year(target_date))
    return score_records(records, thresholds), summarize(records)


def score_records(records: pd.DataFrame, thresholds: Thresholds) -> list[OddsResult]:
    """One OddsResult per active threshold; the denominator is max(1, len(records))."""
    n = max(1, len(records))
    return [_score(threshold, records, n) for threshold in thresholds.active()]


def match_day_records(raw_series: RawSeries, target_doy: int) -> pd.DataFrame:
    """Build one record per max-temperature date-key on ``target_doy``.

    Missing min temperature falls back to that day's max temperature;
    missing precipitation and wind fall back to 0. Wind is converted to km/h.
    Rows are indexed by date-key in ascending order.
    """
    max_temp = _as_series(raw_series.max_temp)
    if max_temp.empty:
        return _empty_records()

    doy = date_key_days_of_year(max_temp.index)
    mask = (doy.to_numpy() == target_doy) & np.isfinite(max_temp.to_numpy())
    max_temp = max_temp[mask]
    if max_temp.empty:
        return _empty_records()

    keys = max_temp.index
    min_temp = _as_series(raw_series.min_temp).reindex(keys).fillna(max_temp)
    precipitation = _as_series(raw_series.precipitation).reindex(keys).fillna(0.0)
    wind = _as_series(raw_series.wind_speed).reindex(keys).fillna(0.0) * MS_TO_KMH

    records = pd.DataFrame({
        "max_temp": max_temp,
        "min_temp": min_temp,
        "precipitation": precipitation,
        "wind_speed_kmh": wind,
    }, index=keys)
    return records.sort_index()


def summarize(records: pd.DataFrame) -> WeatherSummary | None:
    """Unweighted mean of each record field, or None for no records."""
    if records.empty:
        return None
    means = records[RECORD_COLUMNS].mean()
    return WeatherSummary(
        avg_high=float(means["max_temp"]),
        avg_low=float(means["min_temp"]),
        avg_precip=float(means["precipitation"]),
        avg_wind=float(means["wind_speed_kmh"]),
    )


def _score(threshold: Threshold, records: pd.DataFrame, n: int) -> OddsResult:
    rule = _RULES[threshold.kind]
    if records.empty:
        count = 0
    else:
        count = int(rule.compare(records[rule.column], threshold.value).sum())
    return OddsResult(
        id=threshold.kind.value,
        label=rule.label.format(_whole(threshold.value)),
        percentage=100.0 * count / n,
        note=rule.note,
        condition_kind=threshold.kind,
    )


def _whole(value: float) -> int | float:
    # Truncates toward zero; NaN/inf are shown as-is
    return int(value) if math.isfinite(value) else value


def _as_series(values: Mapping[str, float]) -> pd.Series:
    return pd.Series(dict(values), dtype=float)


def _empty_records() -> pd.DataFrame:
    return pd.DataFrame(columns=RECORD_COLUMNS, dtype=float)
