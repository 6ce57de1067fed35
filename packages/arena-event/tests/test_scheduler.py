"""Tests for arena_event.scheduler — EventEngine."""
from __future__ import annotations

import random
from collections import Counter
from typing import Iterable

import pytest
from hypothesis import given, settings, strategies as st

from arena import ArenaConfig, EventConfig, GameSession, ManualClock, PlayerState
from arena.relationships import DEFAULT_COLLABORATORS
from arena_event import (
    Choice,
    EventDef,
    EventEngine,
    EventGuards,
    EventType,
    Outcome,
    weighted_choice,
)
from arena_signal import signals

WINDFALL = EventDef(
    "windfall", "Windfall", EventType.POSITIVE, 1.0, time_limit=30,
    choices=(
        Choice("take", "Take it", Outcome(1.0, tokens=100, xp=50, message="Rich!")),
        Choice("leave", "Leave it", Outcome(1.0, message="You walk away.")),
    ),
)

HACK = EventDef(
    "hack", "Hack", EventType.NEGATIVE, 1.0,
    choices=(
        Choice(
            "fight", "Fight back", Outcome(0.0, xp=10),
            Outcome(reputation=-40, tokens=-500, message="Drained."),
        ),
        Choice("hide", "Hide", Outcome(1.0)),
    ),
)

GATED = EventDef(
    "gated", "Gated", EventType.NEUTRAL, 1.0, time_limit=10,
    choices=(
        Choice("hack", "Hack it", Outcome(1.0, xp=1), stat_required={"dev": 10}),
        Choice("wait", "Wait", Outcome(1.0), stat_required={"dev": 99}),
    ),
)


def _no_luck(**kwargs) -> PlayerState:
    state = PlayerState(**kwargs)
    state.stats["lck"] = 0
    return state


def _engine(
    events: Iterable[EventDef] = (WINDFALL, HACK, GATED),
    state: PlayerState | None = None,
    guards: EventGuards | None = None,
    bonus_chance=None,
    **config,
) -> tuple[GameSession, ManualClock, EventEngine]:
    config.setdefault("success_cap", 1.0)
    clock = ManualClock(1000.0)
    session = GameSession(
        state if state is not None else _no_luck(),
        clock=clock, seed=11, config=ArenaConfig(events=EventConfig(**config)),
    )
    return session, clock, EventEngine(session, events, guards, bonus_chance)


class TestWeightedChoice:
    def test_frequencies_track_weights(self) -> None:
        rng = random.Random(1234)
        items = ["a", "b", "c", "d"]
        weights = [0.15, 0.1, 0.05, 0.7]
        trials = 100_000
        counts = Counter(weighted_choice(items, weights, rng) for _ in range(trials))
        for item, weight in zip(items, weights):
            assert abs(counts[item] / trials - weight) < 0.02

    def test_zero_total_returns_first(self) -> None:
        assert weighted_choice(["x", "y"], [0, 0], random.Random(0)) == "x"

    def test_mismatched_lengths(self) -> None:
        with pytest.raises(ValueError):
            weighted_choice(["x"], [1, 2], random.Random(0))

    def test_zero_weight_never_chosen(self) -> None:
        rng = random.Random(5)
        picks = {weighted_choice(["x", "y"], [0.0, 1.0], rng) for _ in range(1000)}
        assert picks == {"y"}


class TestSuccessChance:
    def test_stat_and_luck_contributions(self) -> None:
        session, _, engine = _engine(state=PlayerState(), success_cap=0.95)
        choice = Choice("c", "C", Outcome(0.5), stat_bonus={"str": 5})
        assert engine.success_chance(choice) == pytest.approx(0.775)

    def test_buffs_count(self) -> None:
        session, _, engine = _engine(success_cap=0.95)
        choice = Choice("c", "C", Outcome(0.5), stat_bonus={"str": 1})
        base = engine.success_chance(choice)
        session.add_buff("str", 10, 60)
        assert engine.success_chance(choice) == pytest.approx(base + 0.1)

    @settings(deadline=None, max_examples=200)
    @given(
        base=st.floats(min_value=0.0, max_value=1.0),
        stat=st.integers(min_value=0, max_value=10_000),
        luck=st.integers(min_value=0, max_value=10_000),
        bonus=st.floats(min_value=0.0, max_value=20.0),
    )
    def test_capped(self, base: float, stat: int, luck: int, bonus: float) -> None:
        state = PlayerState()
        state.stats.update({"str": stat, "lck": luck})
        _, _, engine = _engine(state=state, success_cap=0.95)
        choice = Choice("c", "C", Outcome(base), stat_bonus={"str": bonus})
        assert 0.0 <= engine.success_chance(choice) <= 0.95


class TestTrigger:
    def test_trigger_activates(self) -> None:
        session, _, engine = _engine()
        result = engine.trigger_event("windfall")
        assert result.success
        active = engine.get_active_event()
        assert active is not None and active.id == "windfall"
        assert active.expires_at == 1030.0
        assert session.state.events.last_event_time == 1000.0
        [(name, data)] = session.bus.pending(signals.EVENT_TRIGGERED)
        assert data["choices"] == ["take", "leave"]

    def test_single_active_event(self) -> None:
        _, _, engine = _engine()
        engine.trigger_event("windfall")
        result = engine.trigger_event("hack")
        assert result.error == "precondition"
        assert result.message == "Another event is already active"
        assert engine.get_active_event().id == "windfall"  # type: ignore[union-attr]

    def test_unknown_event(self) -> None:
        _, _, engine = _engine()
        result = engine.trigger_event("meteor")
        assert result.error == "not_found"
        assert engine.is_idle()

    def test_global_cooldown(self) -> None:
        _, clock, engine = _engine()
        engine.trigger_event("windfall")
        engine.handle_choice("take")
        clock.advance(60)
        result = engine.trigger_event("hack")
        assert not result.success
        assert result.message == "Next event possible in 60s"
        clock.advance(60)
        assert engine.trigger_event("hack").success

    def test_per_event_cooldown(self) -> None:
        _, clock, engine = _engine()
        engine.trigger_event("windfall")
        engine.handle_choice("take")
        clock.advance(200)
        result = engine.trigger_event("windfall")
        assert result.message.startswith("Windfall is on cooldown")
        clock.advance(3400)
        assert engine.trigger_event("windfall").success


class TestHandleChoice:
    def test_success_applies_outcome(self) -> None:
        session, _, engine = _engine()
        engine.trigger_event("windfall")
        result = engine.handle_choice("take")
        assert result.success
        assert result.message == "Rich!"
        assert result["is_success"] is True
        assert result["result"] == {"xp": 50, "tokens": 100}
        assert session.state.tokens == 100
        assert session.state.xp == 50
        assert engine.is_idle()
        assert session.state.statistics["events_handled"] == 1
        [entry] = engine.history()
        assert (entry.event_id, entry.choice_id, entry.success) == ("windfall", "take", True)
        assert session.bus.pending(signals.EVENT_RESOLVED)[0][1]["success"] is True

    def test_failure_branch(self) -> None:
        session, _, engine = _engine(state=_no_luck(tokens=800, reputation=100))
        engine.trigger_event("hack")
        result = engine.handle_choice("fight")
        assert result.success
        assert result["is_success"] is False
        assert result.message == "Drained."
        assert session.state.tokens == 300
        assert session.state.reputation == 60

    def test_token_penalty_stops_at_zero(self) -> None:
        session, _, engine = _engine(state=_no_luck(tokens=120))
        engine.trigger_event("hack")
        result = engine.handle_choice("fight")
        assert result["result"]["tokens"] == -120
        assert session.state.tokens == 0

    def test_no_active_event(self) -> None:
        _, _, engine = _engine()
        result = engine.handle_choice("take")
        assert result.error == "precondition"
        assert result.message == "No active event"

    def test_invalid_choice_keeps_event(self) -> None:
        _, _, engine = _engine()
        engine.trigger_event("windfall")
        result = engine.handle_choice("steal")
        assert result.error == "not_found"
        assert result.message == "Invalid choice"
        assert not engine.is_idle()

    def test_stat_required(self) -> None:
        session, _, engine = _engine()
        engine.trigger_event("gated")
        result = engine.handle_choice("hack")
        assert result.message == "Requires DEV 10"
        assert not engine.is_idle()
        session.add_buff("dev", 5, 60)
        assert engine.handle_choice("hack").success

    def test_history_bounded_newest_first(self) -> None:
        session, clock, engine = _engine(history_length=2)
        session.add_buff("dev", 5, 10_000)
        for event_id, choice_id in (("windfall", "take"), ("hack", "hide"), ("gated", "hack")):
            engine.trigger_event(event_id)
            assert engine.handle_choice(choice_id).success
            clock.advance(121)
        assert [h.event_id for h in engine.history()] == ["gated", "hack"]


class TestTimeout:
    def test_time_remaining(self) -> None:
        _, clock, engine = _engine()
        assert engine.get_time_remaining() is None
        engine.trigger_event("windfall")
        clock.advance(10)
        assert engine.get_time_remaining() == 20.0
        clock.advance(100)
        assert engine.get_time_remaining() == 0.0

    def test_untimed_event(self) -> None:
        _, clock, engine = _engine()
        engine.trigger_event("hack")
        clock.advance(10_000)
        assert engine.get_time_remaining() is None
        assert engine.expire_active_event() is None
        assert not engine.is_idle()

    def test_choice_after_expiry_resolves_fallback_once(self) -> None:
        session, clock, engine = _engine()
        engine.trigger_event("windfall")
        clock.advance(30)
        result = engine.handle_choice("take")
        assert not result.success
        assert result.message == "Time ran out"
        assert result["choice_id"] == "leave"
        assert result["timed_out"] is True
        assert session.state.tokens == 0
        assert engine.is_idle()

        assert engine.expire_active_event() is None
        assert engine.handle_choice("take").message == "No active event"
        [entry] = engine.history()
        assert entry.timed_out
        assert len(session.bus.pending(signals.EVENT_RESOLVED)) == 1

    def test_fallback_ignores_stat_requirement(self) -> None:
        _, clock, engine = _engine()
        engine.trigger_event("gated")
        clock.advance(10)
        result = engine.expire_active_event()
        assert result is not None and result.success
        assert result["choice_id"] == "wait"

    def test_not_yet_expired(self) -> None:
        _, clock, engine = _engine()
        engine.trigger_event("windfall")
        clock.advance(29)
        assert engine.expire_active_event() is None
        assert engine.handle_choice("take")["choice_id"] == "take"


class TestShield:
    def test_shield_absorbs_penalty(self) -> None:
        session, _, engine = _engine(state=_no_luck(tokens=800, reputation=100, shields=1))
        engine.trigger_event("hack")
        result = engine.handle_choice("fight")
        assert result["shielded"] is True
        assert session.state.shields == 0
        assert session.state.tokens == 800
        assert session.state.reputation == 100

    def test_positive_events_do_not_use_shields(self) -> None:
        event = EventDef(
            "gamble", "Gamble", EventType.POSITIVE, 1.0,
            choices=(Choice("bet", "Bet", Outcome(0.0), Outcome(reputation=-5)),),
        )
        session, _, engine = _engine((event,), state=_no_luck(shields=1))
        engine.trigger_event("gamble")
        engine.handle_choice("bet")
        assert session.state.shields == 1
        assert session.state.reputation == -5


class TestOutcomeEffects:
    def _resolve(self, outcome: Outcome, state: PlayerState | None = None):
        event = EventDef(
            "e", "E", EventType.NEUTRAL, 1.0, choices=(Choice("c", "C", outcome),)
        )
        session, _, engine = _engine((event,), state=state)
        engine.trigger_event("e")
        return session, engine.handle_choice("c")

    def test_random_affinity_target(self) -> None:
        session, result = self._resolve(Outcome(1.0, affinity={"random": 30}))
        [(target, delta)] = result["result"]["affinity"].items()
        assert target in DEFAULT_COLLABORATORS
        assert delta == 30
        assert session.state.relationships[target].stage == "friend"

    def test_stat_boost_is_temporary(self) -> None:
        session, result = self._resolve(Outcome(1.0, stat_boost={"str": 2}))
        assert session.effective_stat("str") == 7
        session.clock.advance(3600)  # type: ignore[attr-defined]
        assert session.effective_stat("str") == 5

    def test_boost_duration_override(self) -> None:
        session, _ = self._resolve(Outcome(1.0, stat_boost={"cha": 1}, boost_duration=60))
        assert session.state.buffs[0].expiry == 1060.0

    def test_influence_clamped(self) -> None:
        session, result = self._resolve(Outcome(1.0, influence=30))
        assert result["result"]["influence"] == 2
        assert session.state.influence == 57

    def test_special_and_path_pass_through(self) -> None:
        _, result = self._resolve(Outcome(1.0, special="oracle_blessing", path="defi"))
        assert result["result"] == {"special": "oracle_blessing", "path": "defi"}

    def test_default_messages(self) -> None:
        _, result = self._resolve(Outcome(1.0))
        assert result.message == "Success!"


class TestRandomEvents:
    def test_trigger_chance(self) -> None:
        _, _, engine = _engine(state=PlayerState(), bonus_chance=lambda: 0.1)
        assert engine.trigger_chance() == pytest.approx(0.3)

    def test_eligibility_filters(self) -> None:
        picky = EventDef(
            "picky", "Picky", EventType.NEUTRAL, 1.0, choices=(Choice("c", "C", Outcome()),),
            min_level=5, min_reputation=100,
        )
        guarded = EventDef(
            "guarded", "Guarded", EventType.NEUTRAL, 1.0,
            choices=(Choice("c", "C", Outcome()),), conditions=("has_tokens",),
        )
        guards = EventGuards()
        guards.register("has_tokens", lambda s, e: s.state.tokens > 0)
        session, _, engine = _engine((WINDFALL, picky, guarded), guards=guards)
        assert [e.id for e in engine.eligible_events()] == ["windfall"]

        session.state.level = 5
        session.state.reputation = 100
        session.state.tokens = 1
        assert [e.id for e in engine.eligible_events()] == ["windfall", "picky", "guarded"]

        session.set_cooldown("windfall", 60)
        assert "windfall" not in [e.id for e in engine.eligible_events()]

    def test_check_selects_when_roll_passes(self) -> None:
        _, _, engine = _engine((WINDFALL,), base_trigger_chance=1.0)
        event = engine.check_for_random_event()
        assert event is WINDFALL
        assert engine.is_idle()

    def test_check_skips_when_roll_fails(self) -> None:
        _, _, engine = _engine((WINDFALL,), base_trigger_chance=-1.0)
        assert engine.check_for_random_event() is None

    def test_check_respects_active_and_cooldown(self) -> None:
        _, clock, engine = _engine((WINDFALL, HACK), base_trigger_chance=1.0)
        engine.trigger_event("hack")
        assert engine.check_for_random_event() is None
        engine.handle_choice("hide")
        assert engine.check_for_random_event() is None
        clock.advance(120)
        assert engine.check_for_random_event() is WINDFALL

    def test_archetype_weighting(self) -> None:
        common = EventDef(
            "common", "C", EventType.NEUTRAL, 0.5, choices=(Choice("c", "C", Outcome()),)
        )
        niche = EventDef(
            "niche", "N", EventType.NEUTRAL, 0.0, choices=(Choice("c", "C", Outcome()),),
            archetype_bonus={"creator": 100.0},
        )
        state = _no_luck(archetype="creator")
        _, _, engine = _engine((common, niche), state=state, base_trigger_chance=1.0)
        picks: Counter[str] = Counter()
        for _ in range(200):
            event = engine.check_for_random_event()
            assert event is not None
            picks[event.id] += 1
        assert picks["niche"] > 190


class TestPersistence:
    def test_active_event_survives_restore(self) -> None:
        session, clock, engine = _engine()
        engine.trigger_event("windfall")
        record = session.snapshot()

        restored = GameSession(clock=clock, config=session.config)
        restored.restore(record)
        other = EventEngine(restored, (WINDFALL, HACK, GATED))
        assert other.get_active_event().id == "windfall"  # type: ignore[union-attr]
        assert other.get_time_remaining() == 30.0
