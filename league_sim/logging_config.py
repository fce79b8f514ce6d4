"""
Root logger setup: one stdout handler, level from LEAGUE_LOG_LEVEL unless given.
Called once by the API lifespan and by scripts/play_season.py.
"""
from __future__ import annotations

import logging
import sys

from league_sim.config import get_log_level


def configure_logging(level: str | None = None) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root = logging.getLogger()
    root.setLevel(level or get_log_level())
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
