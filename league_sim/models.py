"""
Data models for the league simulator.
Domain objects only: no persistence or API logic.

A season is four teams playing two matches a week for five weeks.
Teams carry cumulative statistics; matches are a write-once log.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------- Team ----------
@dataclass
class Team:
    """
    A league participant with season statistics and a fixed strength (1-4).
    Invariants: goal_difference = goals_for - goals_against;
    played = won + drawn + lost; points = 3 * won + drawn.
    """
    id: int
    name: str
    strength: int
    points: int = 0
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "points": self.points,
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "strength": self.strength,
        }


# ---------- Match ----------
@dataclass(frozen=True)
class Match:
    """
    A played fixture. Immutable after creation.
    id is None until the match has been inserted.
    """
    home_team_id: int
    away_team_id: int
    home_score: int
    away_score: int
    week: int  # 1-based
    id: int | None = None

    def involves(self, team_a_id: int, team_b_id: int) -> bool:
        """True if this match was between the two teams, in either orientation."""
        return {self.home_team_id, self.away_team_id} == {team_a_id, team_b_id}

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "week": self.week,
        }


# ---------- Presentation rows ----------
@dataclass(frozen=True)
class MatchResult:
    """One line of a week's results: home name, score, away name."""
    home_name: str
    home_score: int
    away_score: int
    away_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "home": self.home_name,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "away": self.away_name,
        }


@dataclass(frozen=True)
class Prediction:
    """Championship probability (0-100) for one team. Derived, never stored."""
    name: str
    probability: float

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "probability": self.probability}


@dataclass
class WeekReport:
    """Everything produced by playing one week."""
    week: int
    results: list[MatchResult]
    standings: list[Team]
    predictions: list[Prediction] | None = None  # None before predictions start
    season_complete: bool = False
    matches: list[Match] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "week": self.week,
            "results": [r.to_dict() for r in self.results],
            "standings": [t.to_dict() for t in self.standings],
            "season_complete": self.season_complete,
            "matches": [m.to_dict() for m in self.matches],
        }
        if self.predictions is not None:
            d["predictions"] = [p.to_dict() for p in self.predictions]
        return d
