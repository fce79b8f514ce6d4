"""
Database connection and initialization.
"""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from league_sim.config import get_db_path
from league_sim.errors import StorageUnavailableError

from .schema import all_schema_sql

logger = logging.getLogger(__name__)


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """
    Return a new SQLite connection.
    Use as context manager or ensure close() is called.
    """
    path = Path(db_path) if db_path else get_db_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(path))
    except (OSError, sqlite3.Error) as e:
        logger.exception("Cannot open league database at %s", path)
        raise StorageUnavailableError(f"Cannot open database {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str | Path | None = None) -> None:
    """Create or ensure all tables exist."""
    conn = get_connection(db_path)
    try:
        conn.executescript(all_schema_sql())
        conn.commit()
    except sqlite3.Error as e:
        logger.exception("Schema creation failed")
        raise StorageUnavailableError(f"Cannot initialize database: {e}") from e
    finally:
        conn.close()
