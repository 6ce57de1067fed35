"""EventEngine: trigger, weighted selection, choice resolution and timeout."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import Any, Callable, Iterable, Sequence, TypeVar

from arena import ActionResult, GameSession
from arena.state import ActiveEventRecord, EventHistoryEntry
from arena.types import NotFoundError, PreconditionError
from arena.validation import validate_id
from arena_signal import signals

from arena_event.catalog import DEFAULT_EVENTS
from arena_event.guards import EventGuards
from arena_event.types import ActiveEvent, Choice, EventDef, EventType, Outcome

logger = logging.getLogger(__name__)

T = TypeVar("T")


def weighted_choice(
    items: Sequence[T], weights: Sequence[float], rng: _random_mod.Random
) -> T:
    """Cumulative-weight selection over a single ``random() * total`` draw."""
    if not items or len(items) != len(weights):
        raise ValueError("items and weights must be non-empty and the same length")
    total = sum(weights)
    if total <= 0:
        return items[0]
    draw = rng.random() * total
    for item, weight in zip(items, weights):
        draw -= weight
        if draw <= 0:
            return item
    return items[-1]


class EventEngine:
    """Two-state machine: Idle, or one Active event awaiting a choice.

    The active event, history, last trigger time and per-event cooldowns
    live on ``session.state`` so they persist with the player record.
    ``bonus_chance`` returns an extra trigger probability, typically the
    summed ``event_bonus_chance`` of owned tools.
    """

    def __init__(
        self,
        session: GameSession,
        events: Iterable[EventDef] = DEFAULT_EVENTS,
        guards: EventGuards | None = None,
        bonus_chance: Callable[[], float] | None = None,
    ) -> None:
        self._session = session
        self._definitions: dict[str, EventDef] = {}
        self._guards = guards if guards is not None else EventGuards()
        self._bonus_chance = bonus_chance
        for event in events:
            self.define(event)

    # --- Registration ---

    def define(self, event: EventDef) -> None:
        """Register an event definition. Insertion order preserved."""
        self._definitions[event.id] = event

    def definition(self, event_id: str) -> EventDef | None:
        return self._definitions.get(event_id)

    def events(self) -> list[EventDef]:
        return list(self._definitions.values())

    @property
    def guards(self) -> EventGuards:
        return self._guards

    # --- Queries ---

    def get_active_event(self) -> ActiveEvent | None:
        record = self._session.state.events.active
        if record is None:
            return None
        defn = self._definitions.get(record.event_id)
        if defn is None:
            return None
        return ActiveEvent(defn, record.started_at, record.expires_at)

    def is_idle(self) -> bool:
        return self._session.state.events.active is None

    def get_time_remaining(self) -> float | None:
        """Seconds until the active event times out; None if untimed or idle."""
        record = self._session.state.events.active
        if record is None or record.expires_at is None:
            return None
        return max(0.0, record.expires_at - self._session.now())

    def history(self) -> list[EventHistoryEntry]:
        return list(self._session.state.events.history)

    def global_cooldown_remaining(self) -> float:
        last = self._session.state.events.last_event_time
        if last is None:
            return 0.0
        window = self._session.config.events.global_cooldown
        return max(0.0, window - (self._session.now() - last))

    def trigger_chance(self) -> float:
        cfg = self._session.config.events
        luck = self._session.effective_stat("lck", cfg.default_stat)
        chance = cfg.base_trigger_chance + luck * cfg.luck_trigger_coefficient
        if self._bonus_chance is not None:
            chance += self._bonus_chance()
        return chance

    def is_eligible(self, event: EventDef) -> bool:
        st = self._session.state
        if st.level < event.min_level:
            return False
        if event.min_reputation is not None and st.reputation < event.min_reputation:
            return False
        if self._session.is_cooling_down(event.id):
            return False
        return all(
            self._guards.check(name, self._session, self) for name in event.conditions
        )

    def eligible_events(self) -> list[EventDef]:
        return [e for e in self._definitions.values() if self.is_eligible(e)]

    def success_chance(self, choice: Choice) -> float:
        """Base chance plus stat and luck contributions, capped."""
        cfg = self._session.config.events
        chance = choice.success.chance
        for stat, bonus in choice.stat_bonus.items():
            value = self._session.effective_stat(stat, cfg.default_stat)
            chance += value * cfg.stat_bonus_scale * bonus
        luck = self._session.effective_stat("lck", cfg.default_stat)
        chance += luck * cfg.luck_success_coefficient
        return max(0.0, min(chance, cfg.success_cap))

    # --- Trigger ---

    def check_for_random_event(self) -> EventDef | None:
        """Roll for a random event. Returns the selected definition or None."""
        if not self.is_idle() or self.global_cooldown_remaining() > 0:
            return None
        rng = self._session.random
        chance = self.trigger_chance()
        roll = rng.random()
        logger.debug("event trigger roll %.3f vs %.3f", roll, chance)
        if roll > chance:
            return None
        candidates = self.eligible_events()
        if not candidates:
            return None
        archetype = self._session.state.archetype
        weights = [e.weight_for(archetype) for e in candidates]
        return weighted_choice(candidates, weights, rng)

    def trigger_event(self, event_id: str) -> ActionResult:
        session = self._session

        def body() -> ActionResult:
            validate_id(event_id, session.config.economy.max_item_id_length, "event ID")
            event = self._definitions.get(event_id)
            if event is None:
                raise NotFoundError("Event not found", event_id=event_id)
            if not self.is_idle():
                raise PreconditionError(
                    "Another event is already active",
                    active_event=session.state.events.active.event_id,
                )
            wait = self.global_cooldown_remaining()
            if wait > 0:
                raise PreconditionError(
                    f"Next event possible in {wait:.0f}s", wait=wait
                )
            if session.is_cooling_down(event.id):
                wait = session.cooldown_until(event.id) - session.now()
                raise PreconditionError(
                    f"{event.name} is on cooldown ({wait:.0f}s left)",
                    event_id=event.id, wait=wait,
                )

            now = session.now()
            expires_at = now + event.time_limit if event.time_limit is not None else None
            ledger = session.state.events
            ledger.active = ActiveEventRecord(event.id, now, expires_at)
            ledger.last_event_time = now
            session.bus.publish(
                signals.EVENT_TRIGGERED,
                event_id=event.id, name=event.name, type=event.type.value,
                started_at=now, expires_at=expires_at,
                choices=[c.id for c in event.choices],
            )
            logger.info("event triggered: %s", event.id)
            return ActionResult.ok(
                event.name, event_id=event.id, started_at=now, expires_at=expires_at
            )

        return session.execute(body)

    # --- Resolution ---

    def handle_choice(self, choice_id: str) -> ActionResult:
        session = self._session
        expired = self.expire_active_event()
        if expired is not None:
            return ActionResult(
                success=False, message="Time ran out", error=PreconditionError.kind,
                details=dict(expired.details),
            )

        def body() -> ActionResult:
            validate_id(choice_id, session.config.economy.max_item_id_length, "choice ID")
            active = self.get_active_event()
            if active is None:
                raise PreconditionError("No active event")
            choice = active.definition.choice(choice_id)
            if choice is None:
                raise NotFoundError("Invalid choice", choice_id=choice_id)
            for stat, minimum in choice.stat_required.items():
                if session.effective_stat(stat) < minimum:
                    raise PreconditionError(
                        f"Requires {stat.upper()} {minimum}", stat=stat, required=minimum,
                    )
            return self._resolve(active.definition, choice, timed_out=False)

        return session.execute(body)

    def expire_active_event(self) -> ActionResult | None:
        """Auto-resolve a timed-out event with its last choice. None if nothing expired."""
        record = self._session.state.events.active
        if record is None or record.expires_at is None:
            return None
        if self._session.now() < record.expires_at:
            return None
        event = self._definitions.get(record.event_id)
        if event is None:
            logger.warning("dropping unknown active event %s", record.event_id)
            self._session.state.events.active = None
            self._session.commit()
            return None
        logger.info("event %s timed out, falling back to %s", event.id, event.fallback.id)
        return self._session.execute(
            lambda: self._resolve(event, event.fallback, timed_out=True)
        )

    def _resolve(self, event: EventDef, choice: Choice, timed_out: bool) -> ActionResult:
        session = self._session
        chance = self.success_chance(choice)
        roll = session.random.random()
        success = roll < chance
        logger.debug("event %s/%s roll %.3f vs %.3f", event.id, choice.id, roll, chance)

        outcome = choice.success if success else choice.fail
        result, shielded = self._apply_outcome(event, outcome)

        ledger = session.state.events
        ledger.history.insert(0, EventHistoryEntry(
            event_id=event.id, choice_id=choice.id, success=success,
            timestamp=session.now(), timed_out=timed_out,
        ))
        del ledger.history[session.config.events.history_length:]
        session.set_cooldown(event.id, session.config.events.event_cooldown)
        ledger.active = None
        session.state.bump("events_handled")

        message = (outcome.message if outcome is not None else "") or (
            "Success!" if success else "Failed..."
        )
        session.bus.publish(
            signals.EVENT_RESOLVED,
            event_id=event.id, choice_id=choice.id, success=success,
            timed_out=timed_out, shielded=shielded, result=dict(result),
            message=message, special=result.get("special"),
        )
        logger.info("event resolved: %s/%s success=%s", event.id, choice.id, success)
        return ActionResult.ok(
            message, event_id=event.id, choice_id=choice.id, is_success=success,
            chance=chance, timed_out=timed_out, shielded=shielded, result=result,
        )

    def _apply_outcome(
        self, event: EventDef, outcome: Outcome | None
    ) -> tuple[dict[str, Any], bool]:
        if outcome is None:
            return {}, False
        session = self._session
        st = session.state
        reputation, tokens, influence = outcome.reputation, outcome.tokens, outcome.influence

        shielded = False
        if event.type is EventType.NEGATIVE and outcome.has_penalty and st.shields > 0:
            st.shields -= 1
            reputation, tokens, influence = (max(0, v) for v in (reputation, tokens, influence))
            shielded = True
            logger.warning("shield absorbed penalty from %s", event.id)

        result: dict[str, Any] = {}
        if outcome.xp:
            result["xp"] = session.add_xp(outcome.xp).amount
        if tokens:
            # Penalties stop at zero.
            applied = max(tokens, -st.tokens)
            session.add_tokens(applied)
            result["tokens"] = applied
        if reputation:
            session.add_reputation(reputation)
            result["reputation"] = reputation
        if influence:
            result["influence"] = session.restore_influence(influence)
        if outcome.affinity:
            collaborators = session.relationships.collaborators()
            applied_affinity: dict[str, int] = {}
            for target, change in outcome.affinity.items():
                if target == "random":
                    target = session.random.choice(collaborators)
                delta = session.relationships.change(st, target, change)
                applied_affinity[target] = applied_affinity.get(target, 0) + delta
            result["affinity"] = applied_affinity
        if outcome.stat_boost:
            duration = outcome.boost_duration
            if duration is None:
                duration = session.config.events.stat_boost_duration
            for stat, bonus in outcome.stat_boost.items():
                session.add_buff(stat, bonus, duration, source=event.id)
            result["stat_boost"] = dict(outcome.stat_boost)
        if outcome.special is not None:
            result["special"] = outcome.special
        if outcome.path is not None:
            result["path"] = outcome.path
        return result, shielded
