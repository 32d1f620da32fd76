from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from player_stats.config import load_config
from player_stats.estimator import DEFAULT_HAT_TRICK_TARGET, StatsEstimator
from player_stats.models import PlayerInfo, RawSeason, SeasonRecord
from player_stats.stats import PlayerStats

logger = logging.getLogger(__name__)

REQUIRED_SEASON_KEYS = ("season", "season_short", "club", "league", "matches", "goals")
INT_SEASON_KEYS = ("matches", "goals", "assists", "minutes", "yellow_cards", "red_cards", "titles")
DERIVED_KEYS = ("hat_tricks", "braces")


def _to_int(value: Any, key: str, idx: int) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"season {idx}: {key} must be a whole number, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"season {idx}: {key} must be an integer, got {value!r}") from None
    if number < 0:
        raise ValueError(f"season {idx}: {key} must be non-negative, got {number}")
    return number


def parse_season(row: dict[str, Any], idx: int) -> RawSeason:
    missing = [k for k in REQUIRED_SEASON_KEYS if row.get(k) in (None, "")]
    if missing:
        raise ValueError(f"season {idx}: missing required keys {missing}")
    numbers = {k: _to_int(row.get(k), k, idx) for k in INT_SEASON_KEYS}
    return RawSeason(
        season=str(row["season"]),
        season_short=str(row["season_short"]),
        club=str(row["club"]),
        club_key=str(row.get("club_key") or row["club"]),
        league=str(row["league"]),
        **numbers,
    )


def parse_player(data: dict[str, Any]) -> PlayerInfo:
    if not data or not data.get("name"):
        raise ValueError("player section must define at least a name")
    known = set(PlayerInfo.__dataclass_fields__)
    values = {k: v for k, v in data.items() if k in known}
    values["number"] = int(values.get("number", 0))
    for key, value in list(values.items()):
        if key not in ("number", "contact_links") and value is not None:
            values[key] = str(value)
    values["contact_links"] = {str(k): str(v) for k, v in (data.get("contact_links") or {}).items()}
    return PlayerInfo(**values)


def _prebaked_records(rows: list[dict[str, Any]], raw_seasons: list[RawSeason]) -> list[SeasonRecord]:
    records: list[SeasonRecord] = []
    for idx, (row, raw) in enumerate(zip(rows, raw_seasons)):
        missing = [k for k in DERIVED_KEYS if row.get(k) in (None, "")]
        if missing:
            raise ValueError(f"season {idx}: estimator disabled but {missing} not provided")
        records.append(
            SeasonRecord.from_raw(
                raw,
                hat_tricks=_to_int(row["hat_tricks"], "hat_tricks", idx),
                braces=_to_int(row["braces"], "braces", idx),
            )
        )
    return records


def build_player_stats(
    cfg: dict[str, Any],
    use_estimator: bool | None = None,
    target: int | None = None,
) -> PlayerStats:
    """Turn a loaded config mapping into an enriched, read-only PlayerStats."""
    rows = cfg.get("seasons") or []
    if not isinstance(rows, list):
        raise ValueError("seasons must be a list of mappings")
    raw_seasons = [parse_season(row, idx) for idx, row in enumerate(rows)]
    player = parse_player(cfg.get("player") or {})

    estimator_cfg = cfg.get("estimator") or {}
    enabled = estimator_cfg.get("enabled", True) if use_estimator is None else use_estimator
    if not isinstance(enabled, bool):
        raise ValueError(f"estimator.enabled must be true or false, got {enabled!r}")
    if target is None:
        target = int(estimator_cfg.get("hat_trick_target", DEFAULT_HAT_TRICK_TARGET))

    if enabled:
        result = StatsEstimator(target=target).compute(raw_seasons)
        logger.info(
            "Derived hat-tricks for %s seasons: %s of target %s",
            len(result.records),
            result.hat_trick_total,
            result.target,
        )
        records = list(result.records)
    else:
        records = _prebaked_records(rows, raw_seasons)
        logger.info("Using authored hat-tricks and braces for %s seasons", len(records))

    return PlayerStats(player=player, records=records)


def load_player_stats(
    config_path: str | Path | None = None,
    use_estimator: bool | None = None,
    target: int | None = None,
) -> PlayerStats:
    return build_player_stats(load_config(config_path), use_estimator=use_estimator, target=target)
