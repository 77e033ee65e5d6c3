"""Value types shared by the fetcher, the odds calculator and the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class ConditionKind(str, Enum):
    """Threshold kinds, declared in output order."""

    HOT = "hot"
    COLD = "cold"
    RAIN = "rain"
    WIND = "wind"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


def _freeze(values: Mapping[str, float] | None) -> Mapping[str, float]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class RawSeries:
    """Daily values keyed by ``YYYYMMDD`` date-key, one mapping per parameter.

    Mappings are independent: a key present in one need not appear in another.
    Wind speed is kept in the provider's unit (m/s).
    """

    max_temp: Mapping[str, float] = field(default_factory=dict)
    min_temp: Mapping[str, float] = field(default_factory=dict)
    precipitation: Mapping[str, float] = field(default_factory=dict)
    wind_speed: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("max_temp", "min_temp", "precipitation", "wind_speed"):
            object.__setattr__(self, name, _freeze(getattr(self, name)))

    def is_empty(self) -> bool:
        return not (self.max_temp or self.min_temp or self.precipitation or self.wind_speed)


@dataclass(frozen=True)
class Threshold:
    """An active threshold: a kind with a concrete value."""

    kind: ConditionKind
    value: float


@dataclass(frozen=True)
class Thresholds:
    """Up to four comfort thresholds. ``None`` leaves that kind inactive."""

    hot: float | None = None
    cold: float | None = None
    rain: float | None = None
    wind: float | None = None

    def active(self) -> Iterator[Threshold]:
        """Yield the active thresholds in output order (hot, cold, rain, wind)."""
        for kind in ConditionKind:
            value = getattr(self, kind.value)
            if value is not None:
                yield Threshold(kind, float(value))


@dataclass(frozen=True)
class OddsResult:
    id: str
    label: str
    percentage: float
    note: str
    condition_kind: ConditionKind


@dataclass(frozen=True)
class WeatherSummary:
    avg_high: float
    avg_low: float
    avg_precip: float
    avg_wind: float


@dataclass(frozen=True)
class OddsReport:
    coordinate: Coordinate
    target_date: date
    day_of_year: int
    matched_years: int
    odds: list[OddsResult]
    summary: WeatherSummary | None = None
