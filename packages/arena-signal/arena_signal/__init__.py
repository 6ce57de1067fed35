"""arena-signal - Notification bus between the arena engine and its host."""
from __future__ import annotations

from arena_signal import signals
from arena_signal.bus import SignalBus
from arena_signal.systems import make_signal_system

__all__ = ["SignalBus", "make_signal_system", "signals"]
