"""API endpoint tests using TestClient with a stubbed history provider."""

import pytest
from fastapi.testclient import TestClient

from climate_odds.api.app import create_app
from climate_odds.ingest.cache import SeriesCache
from climate_odds.ingest.fetcher import HistoricalDataFetcher
from climate_odds.ingest.nasa_power import RemoteFetchError
from climate_odds.service import OddsService


def _client(fetch_func) -> TestClient:
    app = create_app()
    # Override the lifespan-created service with one that never touches the network
    app.state.service = OddsService(HistoricalDataFetcher(cache=SeriesCache(), fetch_func=fetch_func))
    return TestClient(app, raise_server_exceptions=True)


@pytest.fixture
def client(counting_fetch):
    return _client(counting_fetch)


class TestHealthEndpoint:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestOddsEndpoint:
    def test_all_thresholds(self, client):
        resp = client.get("/odds", params={
            "lat": 40.78,
            "lon": -73.97,
            "date": "2019-07-15",
            "hot": 35,
            "cold": 20,
            "rain": 5,
            "wind": 25,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["target_date"] == "2019-07-15"
        assert data["day_of_year"] == 196
        assert data["matched_years"] == 3
        assert [o["id"] for o in data["odds"]] == ["hot", "cold", "rain", "wind"]
        assert [o["condition_kind"] for o in data["odds"]] == ["hot", "cold", "rain", "wind"]
        assert data["odds"][0]["label"] == "Too hot > 35 °C"
        assert data["odds"][0]["percentage"] == pytest.approx(200 / 3)
        assert data["summary"]["avg_high"] == pytest.approx(107 / 3)

    def test_only_requested_thresholds(self, client):
        resp = client.get("/odds", params={"lat": 40.78, "lon": -73.97, "date": "2019-07-15", "rain": 5})
        assert resp.status_code == 200
        odds = resp.json()["odds"]
        assert len(odds) == 1
        assert odds[0]["id"] == "rain"

    def test_no_matching_years(self, client):
        resp = client.get("/odds", params={"lat": 40.78, "lon": -73.97, "date": "2019-01-01", "hot": 30})
        assert resp.status_code == 200
        data = resp.json()
        assert data["matched_years"] == 0
        assert data["odds"][0]["percentage"] == 0.0
        assert data["summary"] is None

    def test_repeat_requests_share_cache(self, client, counting_fetch):
        for day in ("2019-07-15", "2019-07-16"):
            resp = client.get("/odds", params={"lat": 40.78, "lon": -73.97, "date": day})
            assert resp.status_code == 200
        assert len(counting_fetch.calls) == 1

    def test_negative_rain_and_wind_thresholds(self, client):
        resp = client.get("/odds", params={
            "lat": 40.78, "lon": -73.97, "date": "2019-07-15", "rain": -1, "wind": -5,
        })
        assert resp.status_code == 200
        assert [o["percentage"] for o in resp.json()["odds"]] == [100.0, 100.0]

    def test_latitude_out_of_range(self, client):
        resp = client.get("/odds", params={"lat": 91, "lon": 0, "date": "2019-07-15"})
        assert resp.status_code == 422

    def test_missing_date(self, client):
        resp = client.get("/odds", params={"lat": 40.78, "lon": -73.97})
        assert resp.status_code == 422

    def test_upstream_failure(self, make_fetch):
        client = _client(make_fetch(error=RemoteFetchError("timeout")))
        resp = client.get("/odds", params={"lat": 40.78, "lon": -73.97, "date": "2019-07-15", "hot": 30})
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Failed to fetch historical data"


class TestCacheEndpoint:
    def test_clear(self, client, counting_fetch):
        client.get("/odds", params={"lat": 40.78, "lon": -73.97, "date": "2019-07-15"})

        resp = client.delete("/odds/cache")
        assert resp.status_code == 200
        assert resp.json() == {"cleared": 1}

        client.get("/odds", params={"lat": 40.78, "lon": -73.97, "date": "2019-07-15"})
        assert len(counting_fetch.calls) == 2
