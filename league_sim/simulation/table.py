"""
League table arithmetic: 3 points for a win, 1 for a draw, 0 for a loss.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from league_sim.models import Match, Team

WIN_POINTS = 3
DRAW_POINTS = 1


def record_result(team: Team, goals_for: int, goals_against: int) -> None:
    """Fold one result into a team's statistics, in place."""
    team.played += 1
    team.goals_for += goals_for
    team.goals_against += goals_against
    team.goal_difference = team.goals_for - team.goals_against
    if goals_for > goals_against:
        team.won += 1
        team.points += WIN_POINTS
    elif goals_for == goals_against:
        team.drawn += 1
        team.points += DRAW_POINTS
    else:
        team.lost += 1


def apply_match(home: Team, away: Team, match: Match) -> None:
    """
    Apply a completed match to both teams.
    Not idempotent: applying the same match twice counts it twice.
    """
    if home.id != match.home_team_id or away.id != match.away_team_id:
        raise ValueError(
            f"Match {match.home_team_id} v {match.away_team_id} does not belong to teams {home.id} v {away.id}"
        )
    record_result(home, match.home_score, match.away_score)
    record_result(away, match.away_score, match.home_score)


def rebuild_table(teams: Iterable[Team], matches: Sequence[Match]) -> dict[int, Team]:
    """
    Recompute every team's statistics from the raw match log.
    Returns fresh Team copies keyed by id; the inputs are left untouched.
    """
    by_id: dict[int, Team] = {}
    for t in teams:
        fresh = Team(id=t.id, name=t.name, strength=t.strength)
        by_id[t.id] = fresh
    for m in matches:
        apply_match(by_id[m.home_team_id], by_id[m.away_team_id], m)
    return by_id


def sort_standings(teams: Iterable[Team]) -> list[Team]:
    """Points descending, then goal difference descending."""
    return sorted(teams, key=lambda t: (-t.points, -t.goal_difference))
