"""
API integration tests.
Uses TestClient to avoid starting a server.
Requires: pip install httpx (for TestClient)
"""
from __future__ import annotations

import sqlite3
import sys
from pathlib import Path

import pytest

try:
    from fastapi.testclient import TestClient
    HAS_HTTPX = True
except (ImportError, RuntimeError):
    HAS_HTTPX = False

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

pytestmark = pytest.mark.skipif(not HAS_HTTPX, reason="httpx required for TestClient")

from league_sim import api
from league_sim.config import TEAM_NAMES, TOTAL_WEEKS
from league_sim.errors import StorageUnavailableError
from league_sim.services import SeasonService
from league_sim.simulation import SeededRNG


@pytest.fixture(autouse=True)
def isolated_db(tmp_path, monkeypatch):
    """Use a temporary DB and a seeded service for each test."""
    db_path = tmp_path / "test.db"
    monkeypatch.setenv("LEAGUE_DB_PATH", str(db_path))
    monkeypatch.setattr(api, "_service", SeasonService(rng=SeededRNG(11)))
    yield db_path


@pytest.fixture
def client():
    with TestClient(api.app) as c:
        yield c


def test_startup_seeds_teams(client):
    resp = client.get("/teams/strengths")
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == set(TEAM_NAMES)
    assert all(1 <= v <= 4 for v in data.values())


def test_simulate_first_week(client):
    resp = client.post("/weeks/1/simulate")
    assert resp.status_code == 200
    data = resp.json()
    assert data["week"] == 1
    assert len(data["results"]) == 2
    assert "predictions" not in data
    assert data["season_complete"] is False
    assert len(data["standings"]) == 4
    r = data["results"][0]
    assert set(r) == {"home", "home_score", "away_score", "away"}
    assert len(data["matches"]) == 2
    assert all(m["week"] == 1 and m["id"] is not None for m in data["matches"])

    resp = client.get("/weeks/1/results")
    assert resp.status_code == 200
    assert resp.json()["results"] == data["results"]


def test_predictions_from_week_four(client):
    for week in range(1, 4):
        assert "predictions" not in client.post(f"/weeks/{week}/simulate").json()
    data = client.post("/weeks/4/simulate").json()
    preds = data["predictions"]
    assert len(preds) == 4
    assert sum(p["probability"] for p in preds) == pytest.approx(100.0, abs=1e-6)


def test_final_week_restarts_season(client):
    for week in range(1, TOTAL_WEEKS):
        assert client.post(f"/weeks/{week}/simulate").status_code == 200
    data = client.post(f"/weeks/{TOTAL_WEEKS}/simulate").json()
    assert data["season_complete"] is True
    assert all(t["played"] == TOTAL_WEEKS for t in data["standings"])
    season = client.get("/season").json()
    assert season["current_week"] == 0
    assert season["total_weeks"] == TOTAL_WEEKS


def test_out_of_order_week_is_bad_request(client):
    resp = client.post("/weeks/3/simulate")
    assert resp.status_code == 400
    assert "sequential" in resp.json()["detail"]


def test_week_out_of_range_is_bad_request(client):
    assert client.post("/weeks/9/simulate").status_code == 400
    assert client.get("/weeks/0/results").status_code == 400


def test_non_integer_week_is_validation_error(client):
    assert client.post("/weeks/abc/simulate").status_code == 422


def test_play_all(client):
    client.post("/weeks/1/simulate")
    resp = client.post("/season/play-all")
    assert resp.status_code == 200
    weeks = resp.json()["weeks"]
    assert [w["week"] for w in weeks] == [2, 3, 4, 5]
    assert client.get("/season").json()["current_week"] == 0


def test_standings_and_predictions(client):
    client.post("/weeks/1/simulate")
    standings = client.get("/standings").json()["standings"]
    assert len(standings) == 4
    points = [(t["points"], t["goal_difference"]) for t in standings]
    assert points == sorted(points, reverse=True)
    preds = client.get("/predictions").json()["predictions"]
    probs = [p["probability"] for p in preds]
    assert probs == sorted(probs, reverse=True)


def test_change_strengths(client):
    resp = client.put("/teams/strengths", json={"Chelsea": 4, "Arsenal": 1})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["strengths"]["Chelsea"] == 4
    assert client.get("/teams/strengths").json()["Arsenal"] == 1


def test_change_strengths_invalid(client):
    before = client.get("/teams/strengths").json()
    resp = client.put("/teams/strengths", json={"Chelsea": 7})
    assert resp.status_code == 400
    resp = client.put("/teams/strengths", json={"Nobody": 2})
    assert resp.status_code == 400
    assert client.get("/teams/strengths").json() == before


def test_restart(client):
    client.post("/weeks/1/simulate")
    resp = client.post("/season/restart")
    assert resp.status_code == 200
    assert resp.json()["current_week"] == 0
    assert all(t["played"] == 0 for t in client.get("/standings").json()["standings"])


def test_wrapped_strengths_body_is_rejected(client):
    resp = client.put("/teams/strengths", json={"strengths": {"Chelsea": 4}})
    assert resp.status_code == 422


def test_storage_failure_is_service_unavailable(client, monkeypatch):
    assert client.post("/weeks/1/simulate").status_code == 200
    before = client.get("/standings").json()

    def broken_update(conn, team):
        raise sqlite3.OperationalError("disk I/O error")

    with monkeypatch.context() as m:
        m.setattr(api._service._team_repo, "update_stats", broken_update)
        resp = client.post("/weeks/2/simulate")
    assert resp.status_code == 503

    assert client.get("/season").json()["current_week"] == 1
    assert client.get("/standings").json() == before
    assert client.get("/weeks/2/results").json()["results"] == []


def test_reseed_failure_after_final_week_keeps_report(client, monkeypatch):
    for week in range(1, TOTAL_WEEKS):
        assert client.post(f"/weeks/{week}/simulate").status_code == 200

    def broken_seed(conn):
        raise StorageUnavailableError("database is locked")

    with monkeypatch.context() as m:
        m.setattr(api._service, "seed_season", broken_seed)
        resp = client.post(f"/weeks/{TOTAL_WEEKS}/simulate")
        assert resp.status_code == 200
        assert resp.json()["season_complete"] is True
        assert client.get("/season").json()["current_week"] == TOTAL_WEEKS

    # The finished season is reseeded before week 1 is played again
    resp = client.post("/weeks/1/simulate")
    assert resp.status_code == 200
    assert all(t["played"] <= 1 for t in resp.json()["standings"])
    assert client.get("/season").json()["current_week"] == 1
