"""EventGuards registry for extra event eligibility conditions."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from arena import GameSession

    from arena_event.scheduler import EventEngine


class EventGuards:
    """Maps guard name strings to callable predicates."""

    def __init__(self) -> None:
        self._guards: dict[str, Callable[[GameSession, EventEngine], bool]] = {}

    def register(
        self, name: str, fn: Callable[[GameSession, EventEngine], bool]
    ) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, session: GameSession, engine: EventEngine) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](session, engine)

    def has(self, name: str) -> bool:
        """Check if guard name is registered."""
        return name in self._guards

    def names(self) -> list[str]:
        """List all registered guard names."""
        return list(self._guards)
