"""System factory for random event upkeep."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arena import ActionResult

from arena_event.scheduler import EventEngine

if TYPE_CHECKING:
    from arena import GameSession, TickContext


def make_event_system(
    engine: EventEngine,
    auto_trigger: bool = True,
    on_trigger: Callable[[GameSession, TickContext, ActionResult], None] | None = None,
    on_timeout: Callable[[GameSession, TickContext, ActionResult], None] | None = None,
) -> Callable[[GameSession, TickContext], None]:
    """Return a system that drives the event state machine each tick.

    Tick execution order:
    1. Auto-resolve an expired active event with its fallback choice (on_timeout)
    2. If idle and auto_trigger is set, roll for a random event and trigger it (on_trigger)
    """

    def event_system(session: GameSession, ctx: TickContext) -> None:
        expired = engine.expire_active_event()
        if expired is not None and on_timeout is not None:
            on_timeout(session, ctx, expired)

        if not auto_trigger or not engine.is_idle():
            return
        event = engine.check_for_random_event()
        if event is None:
            return
        result = engine.trigger_event(event.id)
        if result.success and on_trigger is not None:
            on_trigger(session, ctx, result)

    return event_system
