"""
League simulation engine: pairing, score model, table arithmetic and
championship projection. Pure functions over models; no persistence.
"""
from .rng import SeededRNG
from .pairing import generate_pairings, is_repeat_pairing
from .match_simulator import simulate_score, validate_strength
from .table import apply_match, rebuild_table, record_result, sort_standings
from .projector import adjusted_goal_difference, predict_standings

__all__ = [
    "SeededRNG",
    "generate_pairings",
    "is_repeat_pairing",
    "simulate_score",
    "validate_strength",
    "apply_match",
    "rebuild_table",
    "record_result",
    "sort_standings",
    "adjusted_goal_difference",
    "predict_standings",
]
