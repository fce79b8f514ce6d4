"""
Service layer: season orchestration over the simulation engine.
The simulation package stays pure; season_service owns persistence and transactions.
"""
from .season_service import SeasonService, validate_week

__all__ = [
    "SeasonService",
    "validate_week",
]
