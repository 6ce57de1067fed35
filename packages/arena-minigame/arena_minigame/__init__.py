"""arena-minigame - Converts mini-game scores into XP and token rewards."""
from __future__ import annotations

from arena_minigame.catalog import DEFAULT_MINIGAMES
from arena_minigame.rewards import MinigameAdapter, compute_rewards
from arena_minigame.types import ActiveGame, MinigameDef, RewardBundle

__all__ = [
    "ActiveGame",
    "DEFAULT_MINIGAMES",
    "MinigameAdapter",
    "MinigameDef",
    "RewardBundle",
    "compute_rewards",
]
