from __future__ import annotations

from dataclasses import asdict, dataclass, field

ALL_TEAMS = "TOTAL"

TOTAL_FIELDS = ("matches", "goals", "assists", "minutes", "hat_tricks", "braces", "titles")


@dataclass(frozen=True)
class RawSeason:
    """One authored season row, before hat-tricks and braces are attached."""

    season: str
    season_short: str
    club: str
    club_key: str
    league: str
    matches: int
    goals: int
    assists: int = 0
    minutes: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    titles: int = 0


@dataclass(frozen=True)
class SeasonRecord:
    season: str
    season_short: str
    club: str
    club_key: str
    league: str
    matches: int
    goals: int
    assists: int
    minutes: int
    yellow_cards: int
    red_cards: int
    titles: int
    hat_tricks: int
    braces: int

    @classmethod
    def from_raw(cls, raw: RawSeason, hat_tricks: int, braces: int) -> "SeasonRecord":
        return cls(**asdict(raw), hat_tricks=hat_tricks, braces=braces)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class Totals:
    matches: int = 0
    goals: int = 0
    assists: int = 0
    minutes: int = 0
    hat_tricks: int = 0
    braces: int = 0
    titles: int = 0

    @property
    def goals_per_match(self) -> float:
        return self.goals / self.matches if self.matches > 0 else 0.0

    @property
    def assists_per_match(self) -> float:
        return self.assists / self.matches if self.matches > 0 else 0.0

    def __add__(self, other: "Totals") -> "Totals":
        return Totals(**{name: getattr(self, name) + getattr(other, name) for name in TOTAL_FIELDS})

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class PlayerInfo:
    name: str
    number: int
    position: str = "-"
    birth_date: str = "-"
    birth_place: str = "-"
    height: str = "-"
    nationality: str = "-"
    current_club: str = "-"
    current_league: str = "-"
    contract_until: str = "-"
    photo: str | None = None
    cover: str | None = None
    contact_links: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TeamFilter:
    key: str
    label: str
