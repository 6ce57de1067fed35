"""Injectable time sources. All timestamps are seconds as floats."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can tell the engine what time it is."""

    def now(self) -> float:
        ...


class SystemClock:
    def now(self) -> float:
        return time.time()


class ManualClock:
    """Clock that only moves when told to. Used by tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        self._now += seconds
        return self._now

    def set(self, timestamp: float) -> None:
        if timestamp < self._now:
            raise ValueError("ManualClock cannot move backwards")
        self._now = float(timestamp)
