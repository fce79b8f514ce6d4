"""
Plain-text rendering of a week: table, results and predictions.
Used by the terminal script; the HTTP API returns JSON instead.
"""
from __future__ import annotations

from typing import Sequence

from league_sim.models import MatchResult, Prediction, Team, WeekReport


def ordinal_suffix(n: int) -> str:
    """1 -> 'st', 2 -> 'nd', 3 -> 'rd', 11/12/13 -> 'th'."""
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def format_table(standings: Sequence[Team]) -> str:
    lines = [f"{'Team':<20} {'PTS':>3} {'P':>2} {'W':>2} {'D':>2} {'L':>2} {'GD':>3} {'Str':>3}"]
    for t in standings:
        lines.append(
            f"{t.name:<20} {t.points:>3} {t.played:>2} {t.won:>2} {t.drawn:>2} "
            f"{t.lost:>2} {t.goal_difference:>3} {t.strength:>3}"
        )
    return "\n".join(lines)


def format_results(results: Sequence[MatchResult]) -> str:
    return "\n".join(
        f"{r.home_name:<20} {r.home_score} - {r.away_score:<10} {r.away_name:<20}".rstrip()
        for r in results
    )


def format_predictions(predictions: Sequence[Prediction]) -> str:
    return "\n".join(
        f"{i}. {p.name:<20} {p.probability:.2f}" for i, p in enumerate(predictions, start=1)
    )


def format_week(report: WeekReport) -> str:
    week = f"{report.week}{ordinal_suffix(report.week)} Week"
    parts = [
        f"== {week} ==",
        "League Table",
        format_table(report.standings),
        "",
        f"{week} Match Result",
        format_results(report.results),
    ]
    if report.predictions is not None:
        parts += ["", f"{week} Predictions for Championship", format_predictions(report.predictions)]
    return "\n".join(parts)
