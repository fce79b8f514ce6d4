"""
Season service: seeding, week sequencing and the week pipeline.

A week runs pair -> simulate -> update table -> persist inside one
transaction, so a storage failure leaves neither match nor team change behind.
The season is the database handle passed to each call plus the RNG owned by
the service; nothing is kept between calls.
"""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Mapping, Sequence

from league_sim.config import (
    MAX_STRENGTH,
    MIN_STRENGTH,
    PREDICTION_FROM_WEEK,
    TEAM_NAMES,
    TOTAL_WEEKS,
    get_seed,
)
from league_sim.errors import InvalidInputError, StorageUnavailableError, WeekSequenceError
from league_sim.models import Match, MatchResult, Prediction, Team, WeekReport
from league_sim.persistence.repositories import MatchRepository, TeamRepository
from league_sim.simulation import (
    SeededRNG,
    apply_match,
    generate_pairings,
    predict_standings,
    simulate_score,
    sort_standings,
    validate_strength,
)

logger = logging.getLogger(__name__)


@contextmanager
def _storage(action: str, conn: sqlite3.Connection | None = None) -> Iterator[None]:
    """
    Translate sqlite3 errors into StorageUnavailableError.
    With a connection, the block also runs as one transaction (commit or rollback).
    """
    try:
        if conn is None:
            yield
        else:
            with conn:
                yield
    except sqlite3.Error as e:
        logger.exception("Storage failure while %s", action)
        raise StorageUnavailableError(f"Storage failure while {action}: {e}") from e


def validate_week(week: int) -> int:
    if isinstance(week, bool) or not isinstance(week, int):
        raise InvalidInputError(f"Week must be an integer, got {week!r}")
    if not 1 <= week <= TOTAL_WEEKS:
        raise InvalidInputError(f"Week must be between 1 and {TOTAL_WEEKS}, got {week}")
    return week


class SeasonService:
    """
    Domain logic for one season: seeding, weekly simulation, table and predictions.
    Persistence is delegated to repositories.
    """

    def __init__(self, rng: SeededRNG | None = None, team_names: Sequence[str] = TEAM_NAMES) -> None:
        self._rng = rng if rng is not None else SeededRNG(get_seed())
        self._team_names = tuple(team_names)
        self._team_repo = TeamRepository()
        self._match_repo = MatchRepository()

    # ---------- Seeding ----------

    def seed_season(self, conn: sqlite3.Connection) -> list[Team]:
        """Drop all matches and teams, then insert the fixed teams with random strengths."""
        with _storage("seeding season", conn):
            self._match_repo.delete_all(conn)
            self._team_repo.delete_all(conn)
            teams = [
                self._team_repo.create(conn, name, self._rng.randint(MIN_STRENGTH, MAX_STRENGTH))
                for name in self._team_names
            ]
        logger.info(
            "Seeded new season: %s",
            ", ".join(f"{t.name}={t.strength}" for t in teams),
        )
        return teams

    def ensure_seeded(self, conn: sqlite3.Connection) -> list[Team]:
        """Seed only when the store holds no teams yet."""
        with _storage("reading teams"):
            teams = self._team_repo.list_all(conn)
        if teams:
            return teams
        return self.seed_season(conn)

    # ---------- Week sequencing ----------

    def current_week(self, conn: sqlite3.Connection) -> int:
        """Last played week; 0 before the first match."""
        with _storage("reading matches"):
            return self._match_repo.last_week(conn)

    def is_complete(self, conn: sqlite3.Connection) -> bool:
        return self.current_week(conn) >= TOTAL_WEEKS

    def play_week(self, conn: sqlite3.Connection, week: int) -> WeekReport:
        """
        Simulate every fixture of `week` and fold the results into the table.
        Weeks must be played in order; each is played at most once.
        """
        validate_week(week)
        with _storage(f"playing week {week}", conn):
            last = self._match_repo.last_week(conn)
            if week != last + 1:
                raise WeekSequenceError(
                    f"Cannot play week {week}: last played week is {last}; weeks must be sequential"
                )
            teams = self._team_repo.list_all(conn)
            if len(teams) < 2:
                raise InvalidInputError("Season has no teams; seed the season first")
            previous = self._match_repo.list_by_week(conn, week - 1)
            played: list[Match] = []
            for home, away in generate_pairings(teams, previous, self._rng):
                home_score, away_score = simulate_score(home.strength, away.strength, self._rng)
                match = self._match_repo.create(
                    conn,
                    Match(
                        home_team_id=home.id,
                        away_team_id=away.id,
                        home_score=home_score,
                        away_score=away_score,
                        week=week,
                    ),
                )
                apply_match(home, away, match)
                self._team_repo.update_stats(conn, home)
                self._team_repo.update_stats(conn, away)
                played.append(match)
                logger.debug("Week %d: %s %d - %d %s", week, home.name, home_score, away_score, away.name)

        logger.info("Week %d played: %d matches", week, len(played))
        by_id = {t.id: t for t in teams}
        return WeekReport(
            week=week,
            results=[self._to_result(m, by_id) for m in played],
            standings=sort_standings(teams),
            predictions=predict_standings(teams) if week >= PREDICTION_FROM_WEEK else None,
            season_complete=week >= TOTAL_WEEKS,
            matches=played,
        )

    def play_remaining(self, conn: sqlite3.Connection) -> list[WeekReport]:
        """Play every week after the current one through the final week."""
        start = self.current_week(conn) + 1
        return [self.play_week(conn, week) for week in range(start, TOTAL_WEEKS + 1)]

    # ---------- Reads ----------

    def standings(self, conn: sqlite3.Connection) -> list[Team]:
        """Full table, points then goal difference descending."""
        with _storage("reading teams"):
            return sort_standings(self._team_repo.list_all(conn))

    def week_results(self, conn: sqlite3.Connection, week: int) -> list[MatchResult]:
        validate_week(week)
        with _storage(f"reading week {week}"):
            by_id = {t.id: t for t in self._team_repo.list_all(conn)}
            matches = self._match_repo.list_by_week(conn, week)
        return [self._to_result(m, by_id) for m in matches]

    def predictions(self, conn: sqlite3.Connection) -> list[Prediction]:
        """Championship probabilities from the current table, highest first."""
        with _storage("reading teams"):
            teams = self._team_repo.list_all(conn)
        return predict_standings(teams)

    # ---------- Strengths ----------

    def team_strengths(self, conn: sqlite3.Connection) -> dict[str, int]:
        with _storage("reading teams"):
            return {t.name: t.strength for t in self._team_repo.list_all(conn)}

    def update_strengths(self, conn: sqlite3.Connection, strengths: Mapping[str, int]) -> dict[str, int]:
        """
        Set strengths by team name. The whole request is validated first;
        an unknown team or out-of-range value changes nothing.
        """
        for strength in strengths.values():
            validate_strength(strength)
        with _storage("updating strengths", conn):
            by_name = {t.name: t for t in self._team_repo.list_all(conn)}
            unknown = sorted(set(strengths) - set(by_name))
            if unknown:
                raise InvalidInputError(f"Unknown team(s): {', '.join(unknown)}")
            for name, strength in strengths.items():
                self._team_repo.update_strength(conn, by_name[name].id, strength)
        logger.info("Updated strengths: %s", dict(strengths))
        return self.team_strengths(conn)

    @staticmethod
    def _to_result(match: Match, by_id: Mapping[int, Team]) -> MatchResult:
        return MatchResult(
            home_name=by_id[match.home_team_id].name,
            home_score=match.home_score,
            away_score=match.away_score,
            away_name=by_id[match.away_team_id].name,
        )
