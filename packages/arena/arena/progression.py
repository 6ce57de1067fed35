"""Level, tier and influence curves. Pure functions over the Fibonacci table."""
from __future__ import annotations

from dataclasses import dataclass

from arena.pricing import fib


@dataclass(frozen=True)
class Tier:
    index: int
    name: str
    min_level: int


TIERS: tuple[Tier, ...] = (
    Tier(0, "EMBER", 1),
    Tier(1, "SPARK", 10),
    Tier(2, "FLAME", 20),
    Tier(3, "BLAZE", 35),
    Tier(4, "INFERNO", 50),
)

TIER_NAMES: tuple[str, ...] = tuple(t.name for t in TIERS)

STAT_NAMES: tuple[str, ...] = ("dev", "com", "mkt", "str", "cha", "lck")


@dataclass(frozen=True)
class ReputationRank:
    tier: int
    name: str
    threshold: int


REPUTATION_RANKS: tuple[ReputationRank, ...] = (
    ReputationRank(0, "Unknown", 0),
    ReputationRank(1, "Newcomer", fib(7) * 10),
    ReputationRank(2, "Contributor", fib(10) * 10),
    ReputationRank(3, "Builder", fib(13) * 10),
    ReputationRank(4, "Core Team", fib(16) * 10),
    ReputationRank(5, "Legend", fib(19) * 10),
)


def tier_for_level(level: int) -> Tier:
    current = TIERS[0]
    for tier in TIERS:
        if level >= tier.min_level:
            current = tier
    return current


def tier_by_name(name: str) -> Tier:
    """Look up a tier by name. Raises KeyError if unknown."""
    for tier in TIERS:
        if tier.name == name.upper():
            return tier
    raise KeyError(name)


def tier_at_least(current: Tier | str, required: Tier | str) -> bool:
    """Ordered comparison along TIER_NAMES."""
    if isinstance(current, str):
        current = tier_by_name(current)
    if isinstance(required, str):
        required = tier_by_name(required)
    return current.index >= required.index


def xp_for_level(level: int) -> int:
    """XP needed to go from *level* to level + 1."""
    return fib(level + 4) * 100


def tier_xp_multiplier(tier: Tier) -> float:
    return 1 + fib(tier.index + 2) / 100


def max_influence(level: int) -> int:
    tier = tier_for_level(level)
    return fib(10) + tier.index * fib(8) + fib(min(level, 20) + 2)


def reputation_rank(reputation: int) -> ReputationRank:
    for rank in reversed(REPUTATION_RANKS):
        if reputation >= rank.threshold:
            return rank
    return REPUTATION_RANKS[0]


def influence_regen_interval(tier: Tier, base: float = 21.0, floor: float = 8.0) -> float:
    """Seconds per regenerated influence point."""
    return max(base - fib(tier.index), floor)


def stat_points_for_level(level: int) -> int:
    """Stat points granted on reaching *level*."""
    return 3 + (2 if level % 5 == 0 else 0)
