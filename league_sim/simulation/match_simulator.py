"""
Score model: relative strength biases the score without fixing it.

Unequal strengths: the stronger side draws 0-4 and the weaker side 0-3, and
the two values are swapped if the weaker draw came out higher. The stronger
side therefore never loses, but a draw is still possible.
Equal strengths: both sides draw 0-4 independently.
A 0-0 is never returned: the stronger side (both sides when level) is
redrawn from 1-4.
"""
from __future__ import annotations

from league_sim.config import MAX_STRENGTH, MIN_STRENGTH
from league_sim.errors import InvalidInputError

from .rng import SeededRNG

STRONGER_MAX_GOALS = 4
WEAKER_MAX_GOALS = 3


def validate_strength(strength: int) -> int:
    if isinstance(strength, bool) or not isinstance(strength, int):
        raise InvalidInputError(f"Strength must be an integer, got {strength!r}")
    if not MIN_STRENGTH <= strength <= MAX_STRENGTH:
        raise InvalidInputError(
            f"Strength must be between {MIN_STRENGTH} and {MAX_STRENGTH}, got {strength}"
        )
    return strength


def simulate_score(home_strength: int, away_strength: int, rng: SeededRNG) -> tuple[int, int]:
    """Return (home_score, away_score) for one match."""
    validate_strength(home_strength)
    validate_strength(away_strength)

    if home_strength > away_strength:
        home = rng.randint(0, STRONGER_MAX_GOALS)
        away = rng.randint(0, WEAKER_MAX_GOALS)
        if away > home:
            home, away = away, home
    elif away_strength > home_strength:
        home = rng.randint(0, WEAKER_MAX_GOALS)
        away = rng.randint(0, STRONGER_MAX_GOALS)
        if home > away:
            home, away = away, home
    else:
        home = rng.randint(0, STRONGER_MAX_GOALS)
        away = rng.randint(0, STRONGER_MAX_GOALS)

    if home == 0 and away == 0:
        if home_strength > away_strength:
            home = rng.randint(1, STRONGER_MAX_GOALS)
        elif away_strength > home_strength:
            away = rng.randint(1, STRONGER_MAX_GOALS)
        else:
            home = rng.randint(1, STRONGER_MAX_GOALS)
            away = rng.randint(1, STRONGER_MAX_GOALS)
    return home, away
