"""PlayerState: the single mutable record every engine component works on."""
from __future__ import annotations

import copy
import dataclasses
from dataclasses import dataclass, field
from typing import Any

from arena.progression import STAT_NAMES, max_influence
from arena.types import SnapshotError

BUCKETS: tuple[str, ...] = ("tools", "consumables", "collectibles", "materials")


def _default_stats() -> dict[str, int]:
    return {name: 5 for name in STAT_NAMES}


def _default_statistics() -> dict[str, int]:
    return {
        "items_crafted": 0,
        "items_bought": 0,
        "items_sold": 0,
        "items_used": 0,
        "events_handled": 0,
        "minigames_played": 0,
        "minigames_won": 0,
    }


@dataclass
class InventoryEntry:
    item_id: str
    quantity: int
    acquired_at: float


@dataclass
class Inventory:
    """Four category buckets, each a list of entries."""

    tools: list[InventoryEntry] = field(default_factory=list)
    consumables: list[InventoryEntry] = field(default_factory=list)
    collectibles: list[InventoryEntry] = field(default_factory=list)
    materials: list[InventoryEntry] = field(default_factory=list)

    def bucket(self, name: str) -> list[InventoryEntry]:
        if name not in BUCKETS:
            raise KeyError(name)
        return getattr(self, name)

    def entries(self) -> list[InventoryEntry]:
        return [e for name in BUCKETS for e in getattr(self, name)]


@dataclass
class Buff:
    """Temporary stat boost. ``type`` is a stat name or ``"all"``."""

    type: str
    bonus: int
    expiry: float
    source: str = ""


@dataclass
class Relationship:
    affinity: int = 0
    stage: str = "stranger"


@dataclass
class ActiveEventRecord:
    event_id: str
    started_at: float
    expires_at: float | None = None


@dataclass
class EventHistoryEntry:
    event_id: str
    choice_id: str
    success: bool
    timestamp: float
    timed_out: bool = False


@dataclass
class EventLedger:
    """Event bookkeeping kept on the player record so it persists with it."""

    active: ActiveEventRecord | None = None
    history: list[EventHistoryEntry] = field(default_factory=list)
    last_event_time: float | None = None


@dataclass
class PlayerState:
    name: str = ""
    archetype: str | None = None
    xp_multiplier: float = 1.0

    level: int = 1
    xp: int = 0
    skill_points: int = 1
    stat_points: int = 5
    tier_index: int = 0

    tokens: int = 0
    influence: int = 55
    reputation: int = 0
    last_influence_regen: float | None = None

    stats: dict[str, int] = field(default_factory=_default_stats)
    inventory: Inventory = field(default_factory=Inventory)
    buffs: list[Buff] = field(default_factory=list)
    shields: int = 0
    cooldowns: dict[str, float] = field(default_factory=dict)
    relationships: dict[str, Relationship] = field(default_factory=dict)
    statistics: dict[str, int] = field(default_factory=_default_statistics)
    events: EventLedger = field(default_factory=EventLedger)

    @property
    def max_influence(self) -> int:
        return max_influence(self.level)

    def stat(self, name: str, default: int = 0) -> int:
        return self.stats.get(name, default)

    def bump(self, counter: str, amount: int = 1) -> None:
        self.statistics[counter] = self.statistics.get(counter, 0) + amount

    # --- Copy / rollback ---

    def copy(self) -> PlayerState:
        return copy.deepcopy(self)

    def overwrite_from(self, other: PlayerState) -> None:
        """Replace every field in place so outstanding references stay valid."""
        for f in dataclasses.fields(self):
            setattr(self, f.name, copy.deepcopy(getattr(other, f.name)))

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> PlayerState:
        try:
            fields = dict(data)
            inv = fields.pop("inventory", {}) or {}
            inventory = Inventory(**{
                name: [InventoryEntry(**e) for e in inv.get(name, [])]
                for name in BUCKETS
            })
            buffs = [Buff(**b) for b in fields.pop("buffs", [])]
            relationships = {
                k: Relationship(**v) for k, v in fields.pop("relationships", {}).items()
            }
            ledger_data = fields.pop("events", {}) or {}
            active = ledger_data.get("active")
            ledger = EventLedger(
                active=ActiveEventRecord(**active) if active else None,
                history=[EventHistoryEntry(**h) for h in ledger_data.get("history", [])],
                last_event_time=ledger_data.get("last_event_time"),
            )
            stats = _default_stats()
            stats.update(fields.pop("stats", {}))
            statistics = _default_statistics()
            statistics.update(fields.pop("statistics", {}))
            return cls(
                inventory=inventory,
                buffs=buffs,
                relationships=relationships,
                events=ledger,
                stats=stats,
                statistics=statistics,
                **fields,
            )
        except TypeError as exc:
            raise SnapshotError(f"Malformed player record: {exc}") from exc
