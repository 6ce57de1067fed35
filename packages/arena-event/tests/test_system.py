"""Tests for arena_event.systems — make_event_system."""
from __future__ import annotations

from arena import ActionResult, ArenaConfig, Engine, EventConfig, GameSession, ManualClock
from arena_event import Choice, EventDef, EventEngine, EventType, Outcome, make_event_system

PING = EventDef(
    "ping", "Ping", EventType.NEUTRAL, 1.0, time_limit=5,
    choices=(Choice("answer", "Answer", Outcome(xp=1)), Choice("ignore", "Ignore", Outcome())),
)


def _setup(trigger_chance: float = 1.0) -> tuple[GameSession, ManualClock, EventEngine]:
    clock = ManualClock(0.0)
    config = ArenaConfig(events=EventConfig(base_trigger_chance=trigger_chance))
    session = GameSession(clock=clock, seed=3, config=config)
    return session, clock, EventEngine(session, (PING,))


class TestEventSystem:
    def test_triggers_when_idle(self) -> None:
        session, _, events = _setup()
        triggered: list[ActionResult] = []
        engine = Engine(session)
        engine.add_system(make_event_system(
            events, on_trigger=lambda s, ctx, result: triggered.append(result)
        ))
        engine.step()
        assert triggered[0]["event_id"] == "ping"
        assert events.get_active_event() is not None
        engine.step()
        assert len(triggered) == 1

    def test_auto_trigger_off(self) -> None:
        session, _, events = _setup()
        engine = Engine(session)
        engine.add_system(make_event_system(events, auto_trigger=False))
        engine.step()
        assert events.is_idle()

    def test_times_out_then_waits_for_global_cooldown(self) -> None:
        session, clock, events = _setup()
        timeouts: list[ActionResult] = []
        engine = Engine(session)
        engine.add_system(make_event_system(
            events, on_timeout=lambda s, ctx, result: timeouts.append(result)
        ))
        engine.step()
        clock.advance(5)
        engine.step()
        assert len(timeouts) == 1
        assert timeouts[0]["choice_id"] == "ignore"
        assert timeouts[0]["timed_out"] is True
        assert events.is_idle()

        clock.advance(114)
        engine.step()
        assert events.is_idle()
        clock.advance(1)
        engine.step()
        assert events.is_idle()  # ping is still on its own cooldown

    def test_no_trigger_when_roll_fails(self) -> None:
        session, _, events = _setup(trigger_chance=-1.0)
        engine = Engine(session)
        engine.add_system(make_event_system(events))
        engine.run(5)
        assert events.is_idle()
