"""
Championship probability estimate from points and goal difference.

Each team's goal difference is rescaled by the share of the positive (or
negative) goal-difference pool, added to its points, and taken as a
fraction of all points. The raw values are then normalized to sum to 100.
Values are not clamped at zero.
"""
from __future__ import annotations

from typing import Iterable

from league_sim.models import Prediction, Team

from .table import sort_standings


def adjusted_goal_difference(goal_difference: int, total_positive: int, total_negative: int) -> int:
    """Goal difference weighted by its side of the pool. 0 when every team is level."""
    pool = total_positive + total_negative
    if pool == 0:
        return 0
    if goal_difference >= 0:
        numerator = goal_difference * total_positive
    else:
        numerator = -goal_difference * total_negative
    # Truncate toward zero
    quotient = abs(numerator) // pool
    return quotient if numerator >= 0 else -quotient


def _equal_shares(teams: list[Team]) -> list[Prediction]:
    share = 100.0 / len(teams)
    return [Prediction(name=t.name, probability=share) for t in teams]


def predict_standings(teams: Iterable[Team]) -> list[Prediction]:
    """
    Return one Prediction per team summing to 100, sorted by probability
    descending (ties keep table order).
    """
    ordered = sort_standings(teams)
    if not ordered:
        return []

    total_points = sum(t.points for t in ordered)
    total_positive = sum(t.goal_difference for t in ordered if t.goal_difference >= 0)
    total_negative = sum(-t.goal_difference for t in ordered if t.goal_difference < 0)

    if total_points == 0:
        return _equal_shares(ordered)

    raw: list[Prediction] = []
    for t in ordered:
        adj = adjusted_goal_difference(t.goal_difference, total_positive, total_negative)
        raw.append(Prediction(name=t.name, probability=(t.points + adj) / total_points * 100))

    normalize_factor = sum(p.probability for p in raw)
    if normalize_factor == 0:
        return _equal_shares(ordered)
    predictions = [
        Prediction(name=p.name, probability=p.probability * 100 / normalize_factor) for p in raw
    ]
    return sorted(predictions, key=lambda p: -p.probability)
