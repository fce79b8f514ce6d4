"""
Repository interfaces for league data.
No business logic; only read/write operations.

Writes do not commit: the season service owns the transaction so a week is
recorded entirely or not at all.
"""
from __future__ import annotations

import sqlite3

from league_sim.models import Match, Team

_TEAM_COLS = "id, name, points, played, won, drawn, lost, gf, ga, gd, strength"


def _row_to_team(r: sqlite3.Row) -> Team:
    return Team(
        id=r["id"],
        name=r["name"],
        strength=r["strength"],
        points=r["points"],
        played=r["played"],
        won=r["won"],
        drawn=r["drawn"],
        lost=r["lost"],
        goals_for=r["gf"],
        goals_against=r["ga"],
        goal_difference=r["gd"],
    )


def _row_to_match(r: sqlite3.Row) -> Match:
    return Match(
        id=r["id"],
        home_team_id=r["home_team_id"],
        away_team_id=r["away_team_id"],
        home_score=r["home_score"],
        away_score=r["away_score"],
        week=r["week"],
    )


# ---------- TeamRepository ----------


class TeamRepository:
    """CRUD for teams. The single owner of Team records."""

    def create(self, conn: sqlite3.Connection, name: str, strength: int) -> Team:
        cur = conn.execute(
            "INSERT INTO teams (name, points, played, won, drawn, lost, gf, ga, gd, strength) "
            "VALUES (?, 0, 0, 0, 0, 0, 0, 0, 0, ?)",
            (name, strength),
        )
        return Team(id=cur.lastrowid, name=name, strength=strength)

    def list_all(self, conn: sqlite3.Connection) -> list[Team]:
        rows = conn.execute(f"SELECT {_TEAM_COLS} FROM teams ORDER BY id").fetchall()
        return [_row_to_team(r) for r in rows]

    def update_stats(self, conn: sqlite3.Connection, team: Team) -> None:
        conn.execute(
            "UPDATE teams SET points = ?, played = ?, won = ?, drawn = ?, lost = ?, gf = ?, ga = ?, gd = ? "
            "WHERE id = ?",
            (
                team.points, team.played, team.won, team.drawn, team.lost,
                team.goals_for, team.goals_against, team.goal_difference, team.id,
            ),
        )

    def update_strength(self, conn: sqlite3.Connection, team_id: int, strength: int) -> None:
        conn.execute("UPDATE teams SET strength = ? WHERE id = ?", (strength, team_id))

    def delete_all(self, conn: sqlite3.Connection) -> None:
        conn.execute("DELETE FROM teams")


# ---------- MatchRepository ----------


class MatchRepository:
    """Insert and read matches. Matches are never updated."""

    def create(self, conn: sqlite3.Connection, match: Match) -> Match:
        cur = conn.execute(
            "INSERT INTO matches (home_team_id, away_team_id, home_score, away_score, week) "
            "VALUES (?, ?, ?, ?, ?)",
            (match.home_team_id, match.away_team_id, match.home_score, match.away_score, match.week),
        )
        return Match(
            id=cur.lastrowid,
            home_team_id=match.home_team_id,
            away_team_id=match.away_team_id,
            home_score=match.home_score,
            away_score=match.away_score,
            week=match.week,
        )

    def list_by_week(self, conn: sqlite3.Connection, week: int) -> list[Match]:
        rows = conn.execute(
            "SELECT id, home_team_id, away_team_id, home_score, away_score, week "
            "FROM matches WHERE week = ? ORDER BY id",
            (week,),
        ).fetchall()
        return [_row_to_match(r) for r in rows]

    def list_all(self, conn: sqlite3.Connection) -> list[Match]:
        rows = conn.execute(
            "SELECT id, home_team_id, away_team_id, home_score, away_score, week "
            "FROM matches ORDER BY week, id"
        ).fetchall()
        return [_row_to_match(r) for r in rows]

    def last_week(self, conn: sqlite3.Connection) -> int:
        """Highest week with a recorded match; 0 when nothing has been played."""
        row = conn.execute("SELECT MAX(week) FROM matches").fetchone()
        return row[0] or 0

    def delete_all(self, conn: sqlite3.Connection) -> None:
        conn.execute("DELETE FROM matches")
