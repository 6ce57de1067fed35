"""Engine - host-driven tick loop over a GameSession."""

import time
from typing import Callable

from arena.session import GameSession
from arena.types import System, TickContext


class Engine:
    """Runs registered systems in order, once per tick.

    The engine never sleeps on its own except in ``run_forever``; hosts
    that already have a frame loop call ``step()`` from it.
    """

    def __init__(self, session: GameSession, interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._session = session
        self._interval = interval
        self._tick_number = 0
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[GameSession, TickContext], None]] = []
        self._stop_hooks: list[Callable[[GameSession, TickContext], None]] = []
        self._stop_requested = False

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[GameSession, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[GameSession, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            now=self._session.now(),
            random=self._session.random,
        )

    def _tick(self) -> None:
        self._tick_number += 1
        ctx = self._context()
        for system in self._systems:
            system(self._session, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._session, self._context())

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self._session, self._context())

    def run_forever(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._session, self._context())

        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            sleep_time = self._interval - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        for hook in self._stop_hooks:
            hook(self._session, self._context())
