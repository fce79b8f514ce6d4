"""
SQLite schema for the league store.
Migration-friendly: each table created with IF NOT EXISTS.
"""
from __future__ import annotations


def teams_schema() -> str:
    """One row per participant; statistics are cumulative for the current season."""
    return """
    CREATE TABLE IF NOT EXISTS teams (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE,
        points INTEGER NOT NULL DEFAULT 0,
        played INTEGER NOT NULL DEFAULT 0,
        won INTEGER NOT NULL DEFAULT 0,
        drawn INTEGER NOT NULL DEFAULT 0,
        lost INTEGER NOT NULL DEFAULT 0,
        gf INTEGER NOT NULL DEFAULT 0,
        ga INTEGER NOT NULL DEFAULT 0,
        gd INTEGER NOT NULL DEFAULT 0,
        strength INTEGER NOT NULL DEFAULT 1 CHECK (strength BETWEEN 1 AND 4)
    );
    """


def matches_schema() -> str:
    """Write-once match log. week is 1-based."""
    return """
    CREATE TABLE IF NOT EXISTS matches (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        home_team_id INTEGER NOT NULL,
        away_team_id INTEGER NOT NULL,
        home_score INTEGER NOT NULL,
        away_score INTEGER NOT NULL,
        week INTEGER NOT NULL,
        FOREIGN KEY (home_team_id) REFERENCES teams(id),
        FOREIGN KEY (away_team_id) REFERENCES teams(id)
    );
    CREATE INDEX IF NOT EXISTS ix_matches_week ON matches(week);
    """


def all_schema_sql() -> str:
    """Combine all schema DDL for a single execution. Order: teams, matches."""
    return "\n".join([
        teams_schema(),
        matches_schema(),
    ])
