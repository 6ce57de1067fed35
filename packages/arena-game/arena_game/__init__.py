"""arena-game - Pump Arena: every engine package wired to one player session."""
from __future__ import annotations

from arena_game.game import PumpArena

# Re-export the pieces hosts touch directly
from arena import (
    ActionResult,
    ArenaConfig,
    GameSession,
    JsonFileStorage,
    ManualClock,
    MemoryStorage,
    PlayerState,
    SystemClock,
)
from arena_signal import SignalBus, signals

__all__ = [
    "ActionResult",
    "ArenaConfig",
    "GameSession",
    "JsonFileStorage",
    "ManualClock",
    "MemoryStorage",
    "PlayerState",
    "PumpArena",
    "SignalBus",
    "SystemClock",
    "signals",
]
