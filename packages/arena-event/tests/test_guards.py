"""Tests for arena_event.guards — EventGuards."""
from __future__ import annotations

import pytest

from arena import GameSession, ManualClock
from arena_event import EventEngine, EventGuards


class TestEventGuards:
    def test_register_and_check(self) -> None:
        guards = EventGuards()
        guards.register("rich", lambda session, engine: session.state.tokens >= 100)
        session = GameSession(clock=ManualClock(), seed=0)
        engine = EventEngine(session, (), guards)
        assert guards.has("rich")
        assert not guards.check("rich", session, engine)
        session.state.tokens = 100
        assert guards.check("rich", session, engine)

    def test_unregistered_raises(self) -> None:
        session = GameSession(clock=ManualClock(), seed=0)
        with pytest.raises(KeyError):
            EventGuards().check("nope", session, EventEngine(session, ()))

    def test_overwrite_and_names(self) -> None:
        guards = EventGuards()
        guards.register("a", lambda s, e: True)
        guards.register("b", lambda s, e: True)
        guards.register("a", lambda s, e: False)
        assert guards.names() == ["a", "b"]
