"""
Weekly pairing: split the teams into disjoint (home, away) pairs,
never repeating a pairing from the previous week in either orientation.

The whole list is reshuffled until no pair repeats. Attempts are capped at
MAX_PAIRING_ATTEMPTS; after that the last shuffle is accepted as-is.
With an odd number of teams the last team after shuffling sits the week out.
"""
from __future__ import annotations

import logging
from typing import Sequence

from league_sim.config import MAX_PAIRING_ATTEMPTS
from league_sim.models import Match, Team

from .rng import SeededRNG

logger = logging.getLogger(__name__)


def is_repeat_pairing(previous_week: Sequence[Match], team_a_id: int, team_b_id: int) -> bool:
    return any(m.involves(team_a_id, team_b_id) for m in previous_week)


def _pairs_in_order(teams: Sequence[Team]) -> list[tuple[Team, Team]]:
    return [(teams[i], teams[i + 1]) for i in range(0, len(teams) - 1, 2)]


def generate_pairings(
    teams: Sequence[Team],
    previous_week: Sequence[Match],
    rng: SeededRNG,
    max_attempts: int = MAX_PAIRING_ATTEMPTS,
) -> list[tuple[Team, Team]]:
    """
    Return this week's (home, away) pairs. Does not mutate `teams`.
    """
    order = list(teams)
    pairs: list[tuple[Team, Team]] = []
    attempts = max(1, max_attempts)
    for _ in range(attempts):
        rng.shuffle(order)
        pairs = _pairs_in_order(order)
        if not any(is_repeat_pairing(previous_week, h.id, a.id) for h, a in pairs):
            return pairs
    logger.warning(
        "Pairing exhausted after %d attempts; accepting a repeat of last week's fixtures",
        attempts,
    )
    return pairs
