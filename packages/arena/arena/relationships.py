"""Affinity between the player and named collaborators."""
from __future__ import annotations

import math
from typing import Iterable

from arena.pricing import fib
from arena.state import PlayerState, Relationship

AFFINITY_MIN = -100
AFFINITY_MAX = 100

# Highest threshold first.
STAGES: tuple[tuple[str, int], ...] = (
    ("partner", fib(10)),
    ("ally", fib(9)),
    ("friend", fib(8)),
    ("acquaintance", fib(6)),
)

DEFAULT_COLLABORATORS: tuple[str, ...] = (
    "marcus", "sarah", "alex", "mika", "jordan", "nova", "dmitri", "elena", "oracle", "whale",
)


def stage_for(affinity: int) -> str:
    for stage, threshold in STAGES:
        if affinity >= threshold:
            return stage
    return "stranger"


class RelationshipBook:
    """Applies affinity deltas to the relationships stored on PlayerState."""

    def __init__(self, collaborators: Iterable[str] = DEFAULT_COLLABORATORS) -> None:
        self._collaborators: list[str] = list(collaborators)
        if not self._collaborators:
            raise ValueError("RelationshipBook needs at least one collaborator")

    def collaborators(self) -> list[str]:
        return list(self._collaborators)

    def get(self, state: PlayerState, collaborator: str) -> Relationship:
        rel = state.relationships.get(collaborator)
        if rel is None:
            rel = Relationship()
            state.relationships[collaborator] = rel
        return rel

    def change(self, state: PlayerState, collaborator: str, amount: int) -> int:
        """Apply a delta scaled by the tier bonus. Returns the applied delta."""
        if collaborator not in self._collaborators:
            raise KeyError(collaborator)
        rel = self.get(state, collaborator)
        scaled = math.floor(amount * (1 + fib(state.tier_index) / 100))
        before = rel.affinity
        rel.affinity = max(AFFINITY_MIN, min(AFFINITY_MAX, before + scaled))
        rel.stage = stage_for(rel.affinity)
        return rel.affinity - before
