"""Core data types for random events."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EventType(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    SPECIAL = "special"


@dataclass(frozen=True)
class Outcome:
    """One branch of a choice.

    ``chance`` is the base success probability and only matters on the
    success branch. ``affinity`` keys are collaborator ids or ``"random"``.
    ``stat_boost`` becomes temporary buffs lasting ``boost_duration``
    seconds (None uses the configured default). ``special`` and ``path``
    are passed through to the host untouched.
    """

    chance: float = 1.0
    xp: int = 0
    tokens: int = 0
    reputation: int = 0
    influence: int = 0
    affinity: dict[str, int] = field(default_factory=dict)
    stat_boost: dict[str, int] = field(default_factory=dict)
    boost_duration: float | None = None
    special: str | None = None
    path: str | None = None
    message: str = ""

    @property
    def has_penalty(self) -> bool:
        return self.reputation < 0 or self.tokens < 0 or self.influence < 0


@dataclass(frozen=True)
class Choice:
    id: str
    text: str
    success: Outcome
    fail: Outcome | None = None
    hint: str = ""
    stat_bonus: dict[str, float] = field(default_factory=dict)
    stat_required: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class EventDef:
    """Definition of a random event. Not serialized.

    Attributes:
        id: Unique identifier, also the per-event cooldown key.
        name: Display name.
        type: Positive, negative, neutral or special.
        rarity: Base sampling weight.
        choices: Offered choices; the last one is the timeout fallback.
        min_level: Lowest player level that can see the event.
        min_reputation: Lowest reputation that can see the event.
        archetype_bonus: Archetype -> weight added when the player matches.
        time_limit: Seconds before the fallback choice resolves it, or None.
        conditions: Names of registered guards that must all pass.
    """

    id: str
    name: str
    type: EventType
    rarity: float
    choices: tuple[Choice, ...]
    description: str = ""
    min_level: int = 0
    min_reputation: int | None = None
    archetype_bonus: dict[str, float] = field(default_factory=dict)
    time_limit: float | None = None
    conditions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.choices:
            raise ValueError(f"event {self.id!r} needs at least one choice")
        ids = [c.id for c in self.choices]
        if len(ids) != len(set(ids)):
            raise ValueError(f"event {self.id!r} has duplicate choice ids")
        if self.rarity < 0:
            raise ValueError(f"rarity must be >= 0, got {self.rarity}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be > 0, got {self.time_limit}")

    def choice(self, choice_id: str) -> Choice | None:
        for c in self.choices:
            if c.id == choice_id:
                return c
        return None

    @property
    def fallback(self) -> Choice:
        return self.choices[-1]

    def weight_for(self, archetype: str | None) -> float:
        if archetype is None:
            return self.rarity
        return self.rarity + self.archetype_bonus.get(archetype, 0.0)


@dataclass(frozen=True)
class ActiveEvent:
    """Read-only view of the pending event."""

    definition: EventDef
    started_at: float
    expires_at: float | None = None

    @property
    def id(self) -> str:
        return self.definition.id
