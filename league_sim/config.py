"""
Season constants and environment-driven settings.
Settings are read at call time so tests can override them with monkeypatch.
"""
from __future__ import annotations

import os
from pathlib import Path

TEAM_NAMES: tuple[str, ...] = ("Chelsea", "Arsenal", "Manchester City", "Liverpool")
TOTAL_WEEKS = 5
PREDICTION_FROM_WEEK = 4

MIN_STRENGTH = 1
MAX_STRENGTH = 4

# Reshuffles before pairing gives up and accepts a repeat fixture
MAX_PAIRING_ATTEMPTS = 100


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def get_db_path() -> Path:
    """LEAGUE_DB_PATH, or data/league.db under the project root."""
    raw = os.environ.get("LEAGUE_DB_PATH", "").strip()
    if raw:
        return Path(raw)
    return _project_root() / "data" / "league.db"


def get_seed() -> int | None:
    """LEAGUE_SEED as int; None (random season) when unset or blank."""
    raw = os.environ.get("LEAGUE_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"LEAGUE_SEED must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    return os.environ.get("LEAGUE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
