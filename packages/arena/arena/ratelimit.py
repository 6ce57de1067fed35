"""Per-action cooldown and burst limiting with an injectable clock."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from arena.clock import Clock
from arena.config import EconomyConfig


@dataclass(frozen=True)
class RateCheck:
    allowed: bool
    wait: float = 0.0
    message: str = ""


class ActionRateLimiter:
    """Tracks when each action kind last succeeded and how often.

    ``check_action`` is read-only; callers ``record_action`` only after
    the action actually went through.
    """

    def __init__(self, clock: Clock, config: EconomyConfig | None = None) -> None:
        self._clock = clock
        self._config = config if config is not None else EconomyConfig()
        self._last: dict[str, float] = {}
        self._counts: dict[str, int] = {}
        self._window_start: dict[str, float] = {}

    def _cooldown(self, kind: str) -> float:
        return self._config.action_cooldowns.get(kind, self._config.default_cooldown)

    def _burst_limit(self, kind: str) -> int:
        return self._config.burst_limits.get(kind, self._config.default_burst_limit)

    def check_action(self, kind: str) -> RateCheck:
        now = self._clock.now()
        last = self._last.get(kind)
        if last is not None:
            wait = self._cooldown(kind) - (now - last)
            if wait > 0:
                return RateCheck(
                    allowed=False, wait=wait,
                    message=f"Please wait {math.ceil(wait * 10) / 10}s",
                )

        start = self._window_start.get(kind)
        window = self._config.burst_window
        if start is not None and now - start <= window:
            if self._counts.get(kind, 0) >= self._burst_limit(kind):
                remaining = window - (now - start)
                return RateCheck(
                    allowed=False, wait=remaining,
                    message=f"Rate limit exceeded. Wait {math.ceil(remaining)}s",
                )
        return RateCheck(allowed=True)

    def record_action(self, kind: str) -> None:
        now = self._clock.now()
        self._last[kind] = now
        start = self._window_start.get(kind)
        if start is None or now - start > self._config.burst_window:
            self._window_start[kind] = now
            self._counts[kind] = 0
        self._counts[kind] = self._counts.get(kind, 0) + 1

    def remaining_cooldown(self, kind: str) -> float:
        last = self._last.get(kind)
        if last is None:
            return 0.0
        return max(0.0, self._cooldown(kind) - (self._clock.now() - last))

    def reset(self) -> None:
        self._last.clear()
        self._counts.clear()
        self._window_start.clear()

    def snapshot(self) -> dict[str, Any]:
        return {
            "last": dict(self._last),
            "counts": dict(self._counts),
            "window_start": dict(self._window_start),
        }

    def restore(self, data: dict[str, Any]) -> None:
        self._last = dict(data.get("last", {}))
        self._counts = dict(data.get("counts", {}))
        self._window_start = dict(data.get("window_start", {}))
