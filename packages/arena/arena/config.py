"""Tunable coefficients for the economy, events, mini-games and progression."""
from __future__ import annotations

from dataclasses import dataclass, field


def _default_cooldowns() -> dict[str, float]:
    return {"buy": 1.3, "sell": 1.3, "craft": 1.3, "use": 0.3, "minigame": 0.5}


def _default_burst_limits() -> dict[str, int]:
    return {"buy": 20, "sell": 20, "craft": 20, "use": 100, "minigame": 30}


@dataclass(frozen=True)
class EconomyConfig:
    """Shop, inventory and rate-limiter settings.

    Attributes:
        max_item_id_length: Longest accepted item/recipe id.
        min_quantity: Smallest accepted buy/sell quantity.
        max_quantity: Largest accepted buy/sell quantity.
        action_cooldowns: Seconds between two recorded actions of a kind.
        burst_limits: Max recorded actions of a kind per burst window.
        default_cooldown: Cooldown for kinds missing from action_cooldowns.
        default_burst_limit: Burst limit for kinds missing from burst_limits.
        burst_window: Length of the burst counting window in seconds.
        legendary_min_tier: Tier name required to buy legendary items.
        legendary_category_level: Level that unlocks the legendary shop category.
        default_max_stack: maxStack used for stackables that define none.
    """

    max_item_id_length: int = 100
    min_quantity: int = 1
    max_quantity: int = 999
    action_cooldowns: dict[str, float] = field(default_factory=_default_cooldowns)
    burst_limits: dict[str, int] = field(default_factory=_default_burst_limits)
    default_cooldown: float = 1.0
    default_burst_limit: int = 30
    burst_window: float = 60.0
    legendary_min_tier: str = "BLAZE"
    legendary_category_level: int = 25
    default_max_stack: int = 99


@dataclass(frozen=True)
class EventConfig:
    """Random event coefficients. None of these are balance contracts."""

    global_cooldown: float = 120.0
    event_cooldown: float = 3600.0
    base_trigger_chance: float = 0.15
    luck_trigger_coefficient: float = 0.01
    stat_bonus_scale: float = 0.01
    luck_success_coefficient: float = 0.005
    success_cap: float = 0.95
    history_length: int = 50
    default_stat: int = 5
    stat_boost_duration: float = 3600.0


@dataclass(frozen=True)
class MinigameConfig:
    stat_coefficient: float = 0.02
    default_stat: int = 5


@dataclass(frozen=True)
class ProgressionConfig:
    """Influence regeneration timings, in seconds per point."""

    regen_base_seconds: float = 21.0
    regen_floor_seconds: float = 8.0


@dataclass(frozen=True)
class ArenaConfig:
    economy: EconomyConfig = field(default_factory=EconomyConfig)
    events: EventConfig = field(default_factory=EventConfig)
    minigames: MinigameConfig = field(default_factory=MinigameConfig)
    progression: ProgressionConfig = field(default_factory=ProgressionConfig)
