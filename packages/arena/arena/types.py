"""Shared types, result objects and the error taxonomy for the arena engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    now: float
    random: _random.Random


class ArenaError(Exception):
    """Base class for rejections raised inside engine operations.

    Commands catch these at their boundary and turn them into a failed
    ActionResult; they never escape to the host.
    """

    kind = "error"

    def __init__(self, message: str, **details: Any) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(ArenaError):
    """Malformed id or quantity. Raised before any state is read."""

    kind = "validation"


class InsufficientResourceError(ArenaError):
    """Tokens, influence, materials or owned quantity below requirement."""

    kind = "insufficient"


class RateLimitedError(ArenaError):
    """Action attempted inside its cooldown window."""

    kind = "rate_limited"


class NotFoundError(ArenaError):
    """Unknown item, recipe, event, choice or mini-game id."""

    kind = "not_found"


class PreconditionError(ArenaError):
    """Level, tier, stat or state gate not met."""

    kind = "precondition"


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, malformed record)."""


class StorageError(Exception):
    """Raised by storage backends when the durable store is unavailable."""


@dataclass
class ActionResult:
    """Outcome of a public command.

    ``error`` is the ``kind`` tag of the ArenaError that rejected the
    command, or None on success.
    """

    success: bool
    message: str
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **details: Any) -> ActionResult:
        return cls(success=True, message=message, details=details)

    @classmethod
    def fail(cls, exc: ArenaError) -> ActionResult:
        return cls(
            success=False, message=exc.message, error=exc.kind,
            details=dict(exc.details),
        )

    def __getitem__(self, key: str) -> Any:
        return self.details[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.details.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.error is not None:
            data["error"] = self.error
        data.update(self.details)
        return data


if TYPE_CHECKING:
    from arena.session import GameSession

System = Callable[["GameSession", TickContext], None]
