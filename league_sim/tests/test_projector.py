"""
Tests for the championship projection: adjusted goal difference,
normalization to 100 and divide-by-zero guards.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from league_sim.models import Team
from league_sim.simulation import SeededRNG, adjusted_goal_difference, predict_standings, simulate_score
from league_sim.simulation.table import record_result


def _team(name: str, points: int, gd: int) -> Team:
    return Team(id=ord(name[0]), name=name, strength=2, points=points, goal_difference=gd)


class TestAdjustedGoalDifference:
    def test_positive_side(self):
        assert adjusted_goal_difference(5, 7, 7) == 2

    def test_negative_side_uses_negative_pool(self):
        assert adjusted_goal_difference(-3, 7, 7) == 1
        assert adjusted_goal_difference(-4, 7, 7) == 2

    def test_truncates(self):
        assert adjusted_goal_difference(1, 1, 2) == 0

    def test_empty_pool(self):
        assert adjusted_goal_difference(0, 0, 0) == 0


def test_known_table():
    teams = [
        _team("C", 3, -3),
        _team("A", 9, 5),
        _team("D", 0, -4),
        _team("B", 6, 2),
    ]
    preds = predict_standings(teams)
    assert [p.name for p in preds] == ["A", "B", "C", "D"]
    expected = {"A": 11 / 24 * 100, "B": 7 / 24 * 100, "C": 4 / 24 * 100, "D": 2 / 24 * 100}
    for p in preds:
        assert p.probability == pytest.approx(expected[p.name])
    assert sum(p.probability for p in preds) == pytest.approx(100.0, abs=1e-6)


def test_all_level_goal_difference():
    teams = [_team(n, 1, 0) for n in ("A", "B", "C", "D")]
    preds = predict_standings(teams)
    for p in preds:
        assert p.probability == pytest.approx(25.0)


def test_no_points_gives_equal_shares():
    teams = [_team(n, 0, 0) for n in ("A", "B", "C", "D")]
    preds = predict_standings(teams)
    assert len(preds) == 4
    assert sum(p.probability for p in preds) == pytest.approx(100.0)
    assert all(p.probability == pytest.approx(25.0) for p in preds)


def test_empty_input():
    assert predict_standings([]) == []


@pytest.mark.parametrize("seed", range(20))
def test_simulated_tables_sum_to_100(seed):
    rng = SeededRNG(seed)
    teams = [Team(id=i, name=f"T{i}", strength=rng.randint(1, 4)) for i in range(4)]
    for _ in range(5):
        for home, away in ((teams[0], teams[1]), (teams[2], teams[3])):
            h, a = simulate_score(home.strength, away.strength, rng)
            record_result(home, h, a)
            record_result(away, a, h)
        rng.shuffle(teams)
    preds = predict_standings(teams)
    assert sum(p.probability for p in preds) == pytest.approx(100.0, abs=1e-6)
    probs = [p.probability for p in preds]
    assert probs == sorted(probs, reverse=True)
