"""arena - Economy engine core: state, session, clock, prices and progression."""

from arena.clock import Clock, ManualClock, SystemClock
from arena.config import (
    ArenaConfig,
    EconomyConfig,
    EventConfig,
    MinigameConfig,
    ProgressionConfig,
)
from arena.engine import Engine
from arena.pricing import Rarity, discounted_price, fib, price_for_rarity
from arena.ratelimit import ActionRateLimiter, RateCheck
from arena.relationships import RelationshipBook
from arena.session import GameSession, XPGain
from arena.state import (
    Buff,
    EventHistoryEntry,
    Inventory,
    InventoryEntry,
    PlayerState,
)
from arena.storage import JsonFileStorage, MemoryStorage, Storage
from arena.systems import make_buff_expiry_system, make_influence_regen_system
from arena.types import (
    ActionResult,
    ArenaError,
    InsufficientResourceError,
    NotFoundError,
    PreconditionError,
    RateLimitedError,
    SnapshotError,
    StorageError,
    TickContext,
    ValidationError,
)

__all__ = [
    "ActionRateLimiter",
    "ActionResult",
    "ArenaConfig",
    "ArenaError",
    "Buff",
    "Clock",
    "EconomyConfig",
    "Engine",
    "EventConfig",
    "EventHistoryEntry",
    "GameSession",
    "InsufficientResourceError",
    "Inventory",
    "InventoryEntry",
    "JsonFileStorage",
    "ManualClock",
    "MemoryStorage",
    "MinigameConfig",
    "NotFoundError",
    "PlayerState",
    "PreconditionError",
    "ProgressionConfig",
    "RateCheck",
    "RateLimitedError",
    "Rarity",
    "RelationshipBook",
    "SnapshotError",
    "Storage",
    "StorageError",
    "SystemClock",
    "TickContext",
    "ValidationError",
    "XPGain",
    "discounted_price",
    "fib",
    "make_buff_expiry_system",
    "make_influence_regen_system",
    "price_for_rarity",
]
