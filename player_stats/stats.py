from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Sequence

import pandas as pd

from player_stats.models import ALL_TEAMS, TOTAL_FIELDS, PlayerInfo, SeasonRecord, TeamFilter, Totals

TABLE_COLUMNS = [
    "season",
    "season_short",
    "club",
    "club_key",
    "league",
    "matches",
    "goals",
    "assists",
    "minutes",
    "yellow_cards",
    "red_cards",
    "hat_tricks",
    "braces",
    "titles",
]


def filter_stats(
    records: Iterable[SeasonRecord],
    team_key: str = ALL_TEAMS,
    season_short: str | None = None,
) -> list[SeasonRecord]:
    """Return the records matching both the team and the season filter, in original order."""
    out = list(records)
    if team_key != ALL_TEAMS:
        out = [r for r in out if r.club_key == team_key]
    if season_short:
        out = [r for r in out if r.season_short == season_short]
    return out


def aggregate(records: Iterable[SeasonRecord]) -> Totals:
    sums = {name: 0 for name in TOTAL_FIELDS}
    for record in records:
        for name in TOTAL_FIELDS:
            sums[name] += getattr(record, name)
    return Totals(**sums)


def team_filters(records: Iterable[SeasonRecord]) -> list[TeamFilter]:
    filters = [TeamFilter(key=ALL_TEAMS, label=ALL_TEAMS)]
    seen: set[str] = set()
    for record in records:
        if record.club_key in seen:
            continue
        seen.add(record.club_key)
        filters.append(TeamFilter(key=record.club_key, label=record.club_key))
    return filters


def seasons_short(records: Iterable[SeasonRecord]) -> list[str]:
    """Distinct short season codes, newest first."""
    return sorted({r.season_short for r in records}, reverse=True)


@dataclass(frozen=True)
class ClubSummary:
    club: str
    league: str
    totals: Totals


def club_summaries(records: Sequence[SeasonRecord]) -> list[ClubSummary]:
    """One summary per display club, in the order clubs first appear."""
    clubs = list(dict.fromkeys(r.club for r in records))
    summaries: list[ClubSummary] = []
    for club in clubs:
        club_records = [r for r in records if r.club == club]
        summaries.append(ClubSummary(club=club, league=club_records[0].league, totals=aggregate(club_records)))
    return summaries


def to_frame(records: Iterable[SeasonRecord]) -> pd.DataFrame:
    rows = [r.to_dict() for r in records]
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


class PlayerStats:
    """Read-only season table for one player, with the queries the site needs."""

    def __init__(self, player: PlayerInfo, records: Sequence[SeasonRecord]) -> None:
        self.player = player
        self.records: tuple[SeasonRecord, ...] = tuple(records)

    def filter(self, team_key: str = ALL_TEAMS, season_short: str | None = None) -> list[SeasonRecord]:
        return filter_stats(self.records, team_key=team_key, season_short=season_short)

    @staticmethod
    def aggregate(records: Iterable[SeasonRecord]) -> Totals:
        return aggregate(records)

    @cached_property
    def career_totals(self) -> Totals:
        return aggregate(self.records)

    @cached_property
    def team_filters(self) -> list[TeamFilter]:
        return team_filters(self.records)

    @cached_property
    def seasons_short(self) -> list[str]:
        return seasons_short(self.records)

    @cached_property
    def clubs(self) -> list[ClubSummary]:
        return club_summaries(self.records)

    def to_frame(self, records: Iterable[SeasonRecord] | None = None) -> pd.DataFrame:
        return to_frame(self.records if records is None else records)
