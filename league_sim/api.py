"""
REST API for the league simulator.
Thin wrappers around the season service; JSON only.
"""
from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncGenerator, Generator

from fastapi import Body, FastAPI, HTTPException, Path
from pydantic import BaseModel

from league_sim.config import MAX_STRENGTH, MIN_STRENGTH, TOTAL_WEEKS
from league_sim.errors import InvalidInputError, StorageUnavailableError
from league_sim.logging_config import configure_logging
from league_sim.persistence import get_connection, init_db
from league_sim.services import SeasonService

logger = logging.getLogger(__name__)

# One season per process; every season operation runs under this lock
_season_lock = threading.Lock()
_service = SeasonService()


def get_service() -> SeasonService:
    return _service


@contextmanager
def season_conn() -> Generator:
    """Hold the season lock and a DB connection; map domain errors to HTTP errors."""
    with _season_lock:
        try:
            conn = get_connection()
        except StorageUnavailableError as e:
            raise HTTPException(status_code=503, detail=str(e))
        try:
            yield conn
        except InvalidInputError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except StorageUnavailableError as e:
            raise HTTPException(status_code=503, detail=str(e))
        finally:
            conn.close()


# ---------- Lifespan ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging()
    init_db()
    conn = get_connection()
    try:
        get_service().ensure_seeded(conn)
    finally:
        conn.close()
    yield


app = FastAPI(
    title="Football League Simulator API",
    description="Four-team league: weekly simulation, table and championship predictions",
    version="0.1.0",
    lifespan=lifespan,
)


# ---------- Season ----------


def _start_new_season_if_complete(svc: SeasonService, conn) -> None:
    """A finished season is reseeded before the next week is played."""
    if svc.is_complete(conn):
        svc.seed_season(conn)


def _reseed_after_final_week(svc: SeasonService, conn) -> None:
    """
    Reseed once the final week is stored. A failure here must not lose the
    committed week's report; the next simulate call retries the reseed.
    """
    try:
        svc.seed_season(conn)
    except StorageUnavailableError:
        logger.exception("Reseed after the final week failed; deferred to the next request")


@app.post("/weeks/{week}/simulate")
def simulate_week(week: int = Path(..., description="Week to play (1-based)")) -> dict[str, Any]:
    """Play one week. After the final week the season is reseeded."""
    svc = get_service()
    with season_conn() as conn:
        _start_new_season_if_complete(svc, conn)
        report = svc.play_week(conn, week)
        if report.season_complete:
            _reseed_after_final_week(svc, conn)
        return report.to_dict()


@app.post("/season/play-all")
def play_all() -> dict[str, Any]:
    """Play every remaining week, then reseed for a new season."""
    svc = get_service()
    with season_conn() as conn:
        _start_new_season_if_complete(svc, conn)
        reports = svc.play_remaining(conn)
        _reseed_after_final_week(svc, conn)
        return {"weeks": [r.to_dict() for r in reports]}


@app.post("/season/restart")
def restart_season() -> dict[str, Any]:
    svc = get_service()
    with season_conn() as conn:
        teams = svc.seed_season(conn)
        return {"teams": [t.to_dict() for t in teams], "current_week": 0}


@app.get("/season")
def get_season() -> dict[str, Any]:
    svc = get_service()
    with season_conn() as conn:
        return {"current_week": svc.current_week(conn), "total_weeks": TOTAL_WEEKS}


# ---------- Reads ----------


@app.get("/weeks/{week}/results")
def get_week_results(week: int) -> dict[str, Any]:
    svc = get_service()
    with season_conn() as conn:
        results = svc.week_results(conn, week)
        return {"week": week, "results": [r.to_dict() for r in results]}


@app.get("/standings")
def get_standings() -> dict[str, Any]:
    svc = get_service()
    with season_conn() as conn:
        return {"standings": [t.to_dict() for t in svc.standings(conn)]}


@app.get("/predictions")
def get_predictions() -> dict[str, Any]:
    svc = get_service()
    with season_conn() as conn:
        return {"predictions": [p.to_dict() for p in svc.predictions(conn)]}


# ---------- Strengths ----------


class StrengthsUpdateResponse(BaseModel):
    success: bool
    strengths: dict[str, int]


@app.get("/teams/strengths")
def get_team_strengths() -> dict[str, int]:
    svc = get_service()
    with season_conn() as conn:
        return svc.team_strengths(conn)


@app.put("/teams/strengths", response_model=StrengthsUpdateResponse)
def change_strengths(
    strengths: dict[str, int] = Body(
        ..., description=f"Team name -> strength ({MIN_STRENGTH}-{MAX_STRENGTH})"
    ),
) -> dict[str, Any]:
    """Body is a bare {name: strength} map."""
    svc = get_service()
    with season_conn() as conn:
        return {"success": True, "strengths": svc.update_strengths(conn, strengths)}
