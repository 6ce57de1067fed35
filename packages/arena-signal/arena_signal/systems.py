"""System factory for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arena_signal.bus import SignalBus

if TYPE_CHECKING:
    from arena import GameSession, TickContext


def make_signal_system(bus: SignalBus) -> Callable[[GameSession, TickContext], None]:
    def signal_system(session: GameSession, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
