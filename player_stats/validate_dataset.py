from __future__ import annotations

import argparse
import logging
from pathlib import Path

import duckdb

from player_stats.config import load_config
from player_stats.data_loader import build_player_stats
from player_stats.estimator import DEFAULT_HAT_TRICK_TARGET, has_consistent_split
from player_stats.models import ALL_TEAMS, Totals
from player_stats.stats import PlayerStats


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate the player season table and its derived hat-tricks/braces.")
    p.add_argument("--config", type=Path, default=None, help="Path to player YAML (defaults to config/player.yaml).")
    p.add_argument("--target", type=int, default=None, help="Override the hat-trick target.")
    p.add_argument("--no-estimator", action="store_true", help="Validate authored hat_tricks/braces as-is.")
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args()


def one(con: duckdb.DuckDBPyConnection, sql: str) -> int:
    return int(con.execute(sql).fetchone()[0])


def invariant_violations(con: duckdb.DuckDBPyConnection) -> dict[str, int]:
    """Count seasons breaking each per-season rule.

    Expects a registered ``seasons`` relation with a boolean ``feasible``
    column; infeasible seasons must carry (0, 0).
    """
    checks = {
        "hat_tricks within 0..braces": "hat_tricks < 0 OR hat_tricks > braces",
        "braces within matches": "braces > matches",
        "hat_tricks within goals/3": "hat_tricks > floor(goals / 3.0)",
        "braces is the minimal consistent count": (
            "CASE WHEN NOT feasible THEN (hat_tricks <> 0 OR braces <> 0) "
            "ELSE braces <> CASE WHEN goals > matches "
            "THEN GREATEST(hat_tricks, goals - matches - hat_tricks) ELSE 0 END END"
        ),
    }
    return {name: one(con, f"SELECT COUNT(*) FROM seasons WHERE {cond}") for name, cond in checks.items()}


def partition_mismatch(stats: PlayerStats) -> Totals | None:
    """Return the TOTAL aggregate when it differs from the sum over team filters, else None."""
    overall = stats.aggregate(stats.filter(ALL_TEAMS))
    summed = Totals()
    for team in stats.team_filters:
        if team.key == ALL_TEAMS:
            continue
        summed = summed + stats.aggregate(stats.filter(team.key))
    return None if summed == overall else overall


def validate(stats: PlayerStats, target: int | None) -> bool:
    con = duckdb.connect()
    frame = stats.to_frame()
    frame["feasible"] = [
        has_consistent_split(int(goals), int(matches)) for goals, matches in zip(frame["goals"], frame["matches"])
    ]
    frame["feasible"] = frame["feasible"].astype(bool)
    con.register("seasons", frame)
    failed = False

    print(f"[INFO] Seasons loaded: {len(frame)}")
    for name, count in invariant_violations(con).items():
        if count > 0:
            print(f"[FAIL] {name}: {count} season(s) out of range")
            failed = True
        else:
            print(f"[PASS] {name}.")

    if target is not None:
        total = one(con, "SELECT COALESCE(SUM(hat_tricks), 0) FROM seasons")
        if total == target:
            print(f"[PASS] hat-trick total matches target ({target}).")
        else:
            print(f"[WARN] hat-trick total {total} differs from target {target}.")

    dup = one(
        con,
        """
        SELECT COALESCE(SUM(n - 1), 0)
        FROM (SELECT season_short, club_key, COUNT(*) AS n FROM seasons GROUP BY 1, 2 HAVING COUNT(*) > 1)
        """,
    )
    if dup > 0:
        print(f"[FAIL] duplicate (season_short, club_key) rows: {dup}")
        failed = True
    else:
        print("[PASS] (season_short, club_key) is unique.")

    if partition_mismatch(stats) is not None:
        print("[FAIL] TOTAL aggregate differs from the sum of per-team aggregates.")
        failed = True
    else:
        print("[PASS] per-team aggregates add up to TOTAL.")

    return not failed


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_config(args.config)
        stats = build_player_stats(cfg, use_estimator=False if args.no_estimator else None, target=args.target)
    except (FileNotFoundError, ValueError) as exc:
        print(f"[FAIL] {exc}")
        return 1

    estimator_cfg = cfg.get("estimator") or {}
    estimator_on = not args.no_estimator and estimator_cfg.get("enabled", True) is True
    target = None
    if estimator_on:
        target = args.target if args.target is not None else int(
            estimator_cfg.get("hat_trick_target", DEFAULT_HAT_TRICK_TARGET)
        )

    ok = validate(stats, target)
    print("Validation passed." if ok else "Validation failed.")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
