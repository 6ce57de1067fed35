"""GameSession: owns the player state and every collaborator that touches it."""
from __future__ import annotations

import logging
import math
import os
import random
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from arena_signal import SignalBus, signals

from arena.clock import Clock, SystemClock
from arena.config import ArenaConfig
from arena.pricing import tier_discount
from arena.progression import (
    TIER_NAMES,
    Tier,
    influence_regen_interval,
    stat_points_for_level,
    tier_for_level,
    tier_xp_multiplier,
    xp_for_level,
)
from arena.ratelimit import ActionRateLimiter
from arena.relationships import RelationshipBook
from arena.state import Buff, PlayerState
from arena.storage import Storage
from arena.types import (
    ActionResult,
    ArenaError,
    InsufficientResourceError,
    RateLimitedError,
    SnapshotError,
    StorageError,
)

logger = logging.getLogger(__name__)

_RECORD_VERSION = 1


@dataclass(frozen=True)
class XPGain:
    amount: int
    leveled_up: bool = False
    levels: int = 0


class GameSession:
    """Single source of truth for one player.

    Engine components receive the session and mutate ``session.state``
    through it. Multi-step mutations run inside ``transaction()``, which
    restores the pre-transaction state on any exception and writes the
    record through to storage on success.
    """

    def __init__(
        self,
        state: PlayerState | None = None,
        *,
        clock: Clock | None = None,
        seed: int | None = None,
        config: ArenaConfig | None = None,
        storage: Storage | None = None,
        bus: SignalBus | None = None,
        relationships: RelationshipBook | None = None,
    ) -> None:
        self.state = state if state is not None else PlayerState()
        self.clock: Clock = clock if clock is not None else SystemClock()
        self.config = config if config is not None else ArenaConfig()
        self.storage = storage
        self.bus = bus if bus is not None else SignalBus()
        self.relationships = relationships if relationships is not None else RelationshipBook()
        self.rate_limiter = ActionRateLimiter(self.clock, self.config.economy)

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self.random = random.Random(seed)
        self._depth = 0

    @property
    def seed(self) -> int:
        return self._seed

    def now(self) -> float:
        return self.clock.now()

    # --- Derived queries ---

    @property
    def tier(self) -> Tier:
        return tier_for_level(self.state.level)

    @property
    def discount(self) -> float:
        return tier_discount(self.tier.index)

    def effective_stat(self, name: str, default: int = 0) -> int:
        """Base stat plus every unexpired buff for that stat or ``all``."""
        now = self.now()
        base = self.state.stats.get(name, default)
        bonus = sum(
            b.bonus for b in self.state.buffs
            if b.expiry > now and (b.type == name or b.type == "all")
        )
        return base + bonus

    # --- Resource primitives ---

    def add_xp(self, amount: int) -> XPGain:
        """Grant XP with tier and character multipliers, looping level-ups."""
        if amount <= 0:
            return XPGain(0)
        st = self.state
        final = math.floor(amount * tier_xp_multiplier(self.tier) * st.xp_multiplier)
        st.xp += final

        levels = 0
        while st.xp >= xp_for_level(st.level):
            st.xp -= xp_for_level(st.level)
            st.level += 1
            st.skill_points += 1
            st.stat_points += stat_points_for_level(st.level)
            levels += 1

            tier = tier_for_level(st.level)
            if tier.index > st.tier_index:
                previous = TIER_NAMES[st.tier_index]
                st.tier_index = tier.index
                self.bus.publish(signals.TIER_UP, tier=tier.name, previous_tier=previous)
                logger.info("tier up: %s -> %s", previous, tier.name)
            self.bus.publish(
                signals.LEVEL_UP, level=st.level, skill_points=st.skill_points,
                max_influence=st.max_influence, tier=tier.name,
            )
            logger.info("level up: %d", st.level)
        return XPGain(final, leveled_up=levels > 0, levels=levels)

    def add_tokens(self, amount: int) -> bool:
        """Add (or subtract) tokens. Refuses, unchanged, if the balance would go negative."""
        if self.state.tokens + amount < 0:
            return False
        self.state.tokens += amount
        return True

    def spend_tokens(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        if self.state.tokens < amount:
            raise InsufficientResourceError(
                f"Not enough tokens (need {amount - self.state.tokens} more)",
                required=amount, available=self.state.tokens,
            )
        self.state.tokens -= amount

    def add_reputation(self, amount: int) -> None:
        self.state.reputation += amount

    def spend_influence(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        if self.state.influence < amount:
            raise InsufficientResourceError(
                f"Need {amount} Influence ({amount - self.state.influence} more)",
                required=amount, available=self.state.influence,
            )
        self.state.influence -= amount

    def restore_influence(self, amount: int | None = None) -> int:
        """Add influence clamped to max; None fills it. Returns the gain."""
        st = self.state
        before = st.influence
        if amount is None:
            st.influence = max(before, st.max_influence)
        else:
            st.influence = max(0, min(before + amount, st.max_influence))
        return st.influence - before

    def add_buff(self, type: str, bonus: int, duration: float, source: str = "") -> Buff:
        buff = Buff(type=type, bonus=bonus, expiry=self.now() + duration, source=source)
        self.state.buffs.append(buff)
        return buff

    def prune_buffs(self) -> list[Buff]:
        now = self.now()
        expired = [b for b in self.state.buffs if b.expiry <= now]
        if expired:
            self.state.buffs = [b for b in self.state.buffs if b.expiry > now]
        return expired

    def regenerate_influence(self) -> int:
        st = self.state
        now = self.now()
        if st.last_influence_regen is None or st.influence >= st.max_influence:
            st.last_influence_regen = now
            return 0
        prog = self.config.progression
        interval = influence_regen_interval(
            self.tier, prog.regen_base_seconds, prog.regen_floor_seconds
        )
        points = int((now - st.last_influence_regen) // interval)
        if points <= 0:
            return 0
        gained = self.restore_influence(points)
        st.last_influence_regen += points * interval
        return gained

    def cooldown_until(self, key: str) -> float | None:
        return self.state.cooldowns.get(key)

    def is_cooling_down(self, key: str) -> bool:
        until = self.state.cooldowns.get(key)
        return until is not None and self.now() < until

    def set_cooldown(self, key: str, seconds: float) -> float:
        """Cooldowns never move backwards once set."""
        until = self.now() + seconds
        current = self.state.cooldowns.get(key)
        if current is None or until > current:
            self.state.cooldowns[key] = until
        return self.state.cooldowns[key]

    def check_rate(self, kind: str) -> None:
        """Raise RateLimitedError if ``kind`` is inside its cooldown or burst window."""
        check = self.rate_limiter.check_action(kind)
        if not check.allowed:
            raise RateLimitedError(check.message, action=kind, wait=check.wait)

    # --- Transactions ---

    @contextmanager
    def transaction(self) -> Iterator[PlayerState]:
        """Group mutations: all of them apply, or none of them do.

        Re-entrant; only the outermost block snapshots and commits.
        """
        if self._depth > 0:
            self._depth += 1
            try:
                yield self.state
            finally:
                self._depth -= 1
            return

        before = self.state.copy()
        limiter_before = self.rate_limiter.snapshot()
        mark = self.bus.mark()
        self._depth = 1
        try:
            yield self.state
        except BaseException:
            self.state.overwrite_from(before)
            self.rate_limiter.restore(limiter_before)
            self.bus.discard_after(mark)
            raise
        finally:
            self._depth = 0
        self.commit()

    def execute(self, fn: Callable[[], ActionResult]) -> ActionResult:
        """Run a command body in a transaction; rejections become results."""
        try:
            with self.transaction():
                return fn()
        except ArenaError as exc:
            logger.debug("rejected (%s): %s", exc.kind, exc.message)
            return ActionResult.fail(exc)

    # --- Persistence ---

    def commit(self) -> bool:
        """Write the record through to storage. Failures are logged, not raised."""
        if self.storage is None:
            return False
        try:
            self.storage.save(self.snapshot())
        except (StorageError, OSError) as exc:
            logger.warning("failed to persist session: %s", exc)
            return False
        return True

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _RECORD_VERSION,
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self.random.getstate()),
            "player": self.state.snapshot(),
            "rate_limiter": self.rate_limiter.snapshot(),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _RECORD_VERSION:
            raise SnapshotError(
                f"Unsupported record version {version!r}, expected {_RECORD_VERSION}"
            )
        if "player" not in data:
            raise SnapshotError("Record has no player state")
        self.state.overwrite_from(PlayerState.from_snapshot(data["player"]))
        self._seed = data.get("seed", self._seed)
        if data.get("rng_state") is not None:
            self.random.setstate(_deserialize_rng_state(data["rng_state"]))
        else:
            self.random.seed(self._seed)
        self.rate_limiter.restore(data.get("rate_limiter", {}))

    @classmethod
    def load(cls, storage: Storage, **kwargs: Any) -> GameSession:
        """Open a session from storage, or a fresh one if storage is empty."""
        session = cls(storage=storage, **kwargs)
        record = storage.load()
        if record is not None:
            session.restore(record)
        return session


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
