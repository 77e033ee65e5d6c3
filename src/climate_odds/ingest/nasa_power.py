"""NASA POWER daily point fetcher.

Pulls the full 1981-2020 daily history for one coordinate: max/min 2 m
temperature, corrected precipitation and 10 m wind speed. Free API, no key
required.
"""

from __future__ import annotations

import logging
import math

import requests

from climate_odds.config import (
    HISTORY_END_YEAR,
    HISTORY_START_YEAR,
    PARAM_MAX_TEMP,
    PARAM_MIN_TEMP,
    PARAM_PRECIPITATION,
    PARAM_WIND_SPEED,
    POWER_BASE_URL,
    POWER_COMMUNITY,
    POWER_FILL_VALUE,
    POWER_FORMAT,
    POWER_PARAMETERS,
    REQUEST_TIMEOUT_S,
)
from climate_odds.models import RawSeries

logger = logging.getLogger(__name__)


class RemoteFetchError(Exception):
    """The provider could not be reached or returned an unusable payload."""


def fetch_power_daily(lat: float, lon: float) -> RawSeries:
    """Fetch the daily history for one coordinate from NASA POWER.

    Args:
        lat: Latitude in degrees.
        lon: Longitude in degrees.

    Returns:
        RawSeries with one date-key -> value mapping per parameter. Parameters
        missing from the payload come back as empty mappings.

    Raises:
        RemoteFetchError: on transport failure, a non-2xx status, a non-JSON
            body, or a payload without a usable ``properties.parameter`` block.
    """
    params = {
        "parameters": ",".join(POWER_PARAMETERS),
        "community": POWER_COMMUNITY,
        "longitude": lon,
        "latitude": lat,
        "start": f"{HISTORY_START_YEAR}0101",
        "end": f"{HISTORY_END_YEAR}1231",
        "format": POWER_FORMAT,
    }

    logger.info(
        "Fetching NASA POWER: lat=%.4f lon=%.4f %d to %d",
        lat, lon, HISTORY_START_YEAR, HISTORY_END_YEAR,
    )

    try:
        resp = requests.get(POWER_BASE_URL, params=params, timeout=REQUEST_TIMEOUT_S)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as exc:
        logger.exception("Failed to fetch NASA POWER data")
        raise RemoteFetchError(f"NASA POWER request failed: {exc}") from exc
    except ValueError as exc:
        logger.warning("NASA POWER returned a non-JSON body")
        raise RemoteFetchError("NASA POWER returned a non-JSON body") from exc

    series = parse_power_payload(data)
    logger.info(
        "Fetched %d NASA POWER days (lat=%.4f lon=%.4f)",
        len(series.max_temp), lat, lon,
    )
    return series


def parse_power_payload(data: object) -> RawSeries:
    """Convert a decoded POWER JSON payload into a RawSeries.

    Values equal to the payload's fill value, and nulls, are dropped so they
    read as missing days downstream.
    """
    if not isinstance(data, dict):
        raise RemoteFetchError("NASA POWER payload is not a JSON object")

    properties = data.get("properties")
    block = properties.get("parameter") if isinstance(properties, dict) else None
    if not isinstance(block, dict):
        raise RemoteFetchError("NASA POWER payload has no parameter block")

    header = data.get("header")
    fill_value = POWER_FILL_VALUE
    if isinstance(header, dict) and header.get("fill_value") is not None:
        try:
            fill_value = float(header["fill_value"])
        except (TypeError, ValueError):
            logger.warning("Ignoring unparseable fill_value %r", header["fill_value"])

    return RawSeries(
        max_temp=_parameter_values(block, PARAM_MAX_TEMP, fill_value),
        min_temp=_parameter_values(block, PARAM_MIN_TEMP, fill_value),
        precipitation=_parameter_values(block, PARAM_PRECIPITATION, fill_value),
        wind_speed=_parameter_values(block, PARAM_WIND_SPEED, fill_value),
    )


def _parameter_values(block: dict, code: str, fill_value: float) -> dict[str, float]:
    values = block.get(code)
    if values is None:
        return {}
    if not isinstance(values, dict):
        raise RemoteFetchError(f"NASA POWER parameter {code} is not an object")

    result: dict[str, float] = {}
    for date_key, raw in values.items():
        if raw is None:
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise RemoteFetchError(
                f"NASA POWER parameter {code} has non-numeric value {raw!r} for {date_key}"
            ) from exc
        if value == fill_value or math.isnan(value):
            continue
        result[str(date_key)] = value
    return result
