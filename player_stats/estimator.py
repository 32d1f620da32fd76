from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from player_stats.models import RawSeason, SeasonRecord

logger = logging.getLogger(__name__)

DEFAULT_HAT_TRICK_TARGET = 60


def _check_non_negative(goals: int, matches: int) -> None:
    if goals < 0 or matches < 0:
        raise ValueError(f"goals and matches must be non-negative (goals={goals}, matches={matches})")


def feasible_range(goals: int, matches: int) -> tuple[int, int]:
    """Return the (min, max) hat-trick count a season can carry.

    A brace game scores at least 2 and a hat-trick game at least 3, with
    every hat-trick game also counted as a brace. Seasons averaging one goal
    per match or less cannot hold any multi-goal game.
    """
    _check_non_negative(goals, matches)
    if goals - matches <= 0:
        return 0, 0

    max_h = min(matches, goals // 3)
    for h in range(max_h + 1):
        if is_consistent(goals, matches, h):
            return h, max_h

    logger.debug("No consistent hat-trick count for goals=%s matches=%s; using (0, 0)", goals, matches)
    return 0, 0


def is_consistent(goals: int, matches: int, hat_tricks: int) -> bool:
    excess = goals - matches
    if excess <= 0:
        return hat_tricks == 0
    min_braces = max(hat_tricks, excess - hat_tricks)
    max_braces = min(matches, (goals - hat_tricks) // 2)
    return min_braces <= max_braces


def braces_for(goals: int, matches: int, hat_tricks: int) -> int:
    """Minimal brace count consistent with the season's goal excess."""
    excess = goals - matches
    if excess <= 0:
        return 0
    return max(hat_tricks, excess - hat_tricks)


def has_consistent_split(goals: int, matches: int) -> bool:
    """False when no hat-trick count explains the season; such seasons degrade to (0, 0)."""
    return is_consistent(goals, matches, feasible_range(goals, matches)[0])


def _round_half_up(numerator: int, denominator: int) -> int:
    return (2 * numerator + denominator) // (2 * denominator)


def allocate(seasons: Sequence[tuple[int, int]], target: int, ranges: Sequence[tuple[int, int]]) -> list[int]:
    """Spread ``target`` across seasons in proportion to goals, clamped per season.

    Each share is ``goals * target / total_goals`` rounded half up in exact
    integer arithmetic. A floating-point ``round(goals / total * target)`` can
    land on the other side of an exact ``.5`` and shift the first-fit output,
    so the integer form is the reference behaviour.
    """
    total_goals = sum(goals for goals, _ in seasons)
    allocation: list[int] = []
    for (goals, _), (min_h, max_h) in zip(seasons, ranges):
        proportional = _round_half_up(goals * target, total_goals) if total_goals > 0 else 0
        allocation.append(max(min_h, min(max_h, proportional)))
    return allocation


def reconcile(allocation: Sequence[int], ranges: Sequence[tuple[int, int]], target: int) -> list[int]:
    """Nudge the allocation one unit at a time until it sums to ``target``.

    The first season (in list order) with room to move is always adjusted
    first. Stops early when no season can move further.
    """
    adjusted = list(allocation)
    total = sum(adjusted)

    while total < target:
        idx = next((i for i, (h, (_, max_h)) in enumerate(zip(adjusted, ranges)) if h < max_h), None)
        if idx is None:
            break
        adjusted[idx] += 1
        total += 1

    while total > target:
        idx = next((i for i, (h, (min_h, _)) in enumerate(zip(adjusted, ranges)) if h > min_h), None)
        if idx is None:
            break
        adjusted[idx] -= 1
        total -= 1

    return adjusted


@dataclass(frozen=True)
class EstimateResult:
    records: tuple[SeasonRecord, ...]
    target: int
    hat_trick_total: int

    @property
    def reached_target(self) -> bool:
        return self.hat_trick_total == self.target

    @property
    def shortfall(self) -> int:
        """Positive when the target could not be reached, negative when it was overshot."""
        return self.target - self.hat_trick_total


class StatsEstimator:
    """Derive per-season hat-tricks and braces from goals and matches."""

    def __init__(self, target: int = DEFAULT_HAT_TRICK_TARGET) -> None:
        if target < 0:
            raise ValueError(f"hat-trick target must be non-negative, got {target}")
        self.target = target

    def estimate(self, seasons: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
        """Return one (hat_tricks, braces) pair per (goals, matches) pair, in order."""
        ranges = [feasible_range(goals, matches) for goals, matches in seasons]
        allocation = allocate(seasons, self.target, ranges)
        allocation = reconcile(allocation, ranges, self.target)

        pairs: list[tuple[int, int]] = []
        for (goals, matches), h in zip(seasons, allocation):
            if not is_consistent(goals, matches, h):
                pairs.append((0, 0))
                continue
            pairs.append((h, braces_for(goals, matches, h)))

        reached = sum(h for h, _ in pairs)
        if reached != self.target:
            logger.warning(
                "Hat-trick target %s not reachable across %s seasons; settled at %s (feasible range %s-%s)",
                self.target,
                len(seasons),
                reached,
                sum(lo for lo, _ in ranges),
                sum(hi for _, hi in ranges),
            )
        return pairs

    def compute(self, raw_seasons: Sequence[RawSeason]) -> EstimateResult:
        pairs = self.estimate([(s.goals, s.matches) for s in raw_seasons])
        records = tuple(
            SeasonRecord.from_raw(raw, hat_tricks=h, braces=d) for raw, (h, d) in zip(raw_seasons, pairs)
        )
        return EstimateResult(
            records=records,
            target=self.target,
            hat_trick_total=sum(r.hat_tricks for r in records),
        )
