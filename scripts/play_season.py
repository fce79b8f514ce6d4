#!/usr/bin/env python3
"""
Play a full season against a throwaway database and print every week.
Run from project root: python3 scripts/play_season.py --seed 7
"""
from __future__ import annotations

import argparse
import sys
import tempfile
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from league_sim.errors import InvalidInputError
from league_sim.logging_config import configure_logging
from league_sim.persistence import get_connection, init_db
from league_sim.report import format_week
from league_sim.services import SeasonService
from league_sim.simulation import SeededRNG


def _parse_strengths(pairs: list[str]) -> dict[str, int]:
    strengths: dict[str, int] = {}
    for item in pairs:
        name, sep, value = item.partition("=")
        if not sep:
            raise SystemExit(f"Expected NAME=STRENGTH, got {item!r}")
        try:
            strengths[name] = int(value)
        except ValueError:
            raise SystemExit(f"Strength for {name!r} must be an integer, got {value!r}") from None
    return strengths


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate a four-team football season")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible season")
    parser.add_argument(
        "--strength",
        action="append",
        default=[],
        metavar="NAME=STRENGTH",
        help="Override a team's strength (1-4); repeatable",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default LEAGUE_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    with tempfile.TemporaryDirectory() as tmp:
        db_path = Path(tmp) / "season.db"
        init_db(db_path)
        conn = get_connection(db_path)
        try:
            svc = SeasonService(rng=SeededRNG(args.seed))
            svc.seed_season(conn)
            if args.strength:
                try:
                    svc.update_strengths(conn, _parse_strengths(args.strength))
                except InvalidInputError as e:
                    raise SystemExit(str(e)) from None
            for report in svc.play_remaining(conn):
                print(format_week(report))
                print()
        finally:
            conn.close()


if __name__ == "__main__":
    main()
