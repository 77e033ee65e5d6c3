"""Tests for the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from climate_odds.cli import main
from climate_odds.ingest.fetcher import HistoricalDataFetcher
from climate_odds.ingest.nasa_power import RemoteFetchError
from climate_odds.service import OddsService


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1


def test_odds_prints_report(capsys, counting_fetch):
    service = OddsService(HistoricalDataFetcher(fetch_func=counting_fetch))
    with patch("climate_odds.service.OddsService", return_value=service):
        main(["odds", "--lat", "40.78", "--lon", "-73.97", "--date", "2019-07-15", "--hot", "35"])

    data = json.loads(capsys.readouterr().out)
    assert data["matched_years"] == 3
    assert data["odds"][0]["label"] == "Too hot > 35 °C"


def test_odds_fetch_failure_exits(capsys, make_fetch):
    failing = make_fetch(error=RemoteFetchError("down"))
    service = OddsService(HistoricalDataFetcher(fetch_func=failing))
    with patch("climate_odds.service.OddsService", return_value=service):
        with pytest.raises(SystemExit) as excinfo:
            main(["odds", "--lat", "1", "--lon", "2", "--date", "2019-07-15"])

    assert excinfo.value.code == 1
    assert "Failed to fetch historical data" in capsys.readouterr().err
