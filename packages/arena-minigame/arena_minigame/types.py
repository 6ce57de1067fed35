"""Core data types for mini-games."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RewardBundle:
    xp: int
    tokens: int


@dataclass(frozen=True)
class MinigameDef:
    """Definition of a mini-game. How the score is produced is the host's concern.

    Attributes:
        id: Unique identifier.
        name: Display name.
        stat: Stat whose value scales the rewards.
        influence_cost: Influence spent to start a round.
        base: Rewards for a normal finish at 100% score.
        perfect: Rewards for a perfect finish at 100% score.
    """

    id: str
    name: str
    stat: str
    influence_cost: int
    base: RewardBundle
    perfect: RewardBundle
    description: str = ""

    def __post_init__(self) -> None:
        if self.influence_cost < 0:
            raise ValueError(f"influence_cost must be >= 0, got {self.influence_cost}")


@dataclass(frozen=True)
class ActiveGame:
    game_id: str
    started_at: float
