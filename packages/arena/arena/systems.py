"""System factories for time-driven player upkeep."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arena.state import Buff

if TYPE_CHECKING:
    from arena.session import GameSession
    from arena.types import TickContext


def make_buff_expiry_system(
    on_expired: Callable[[GameSession, TickContext, Buff], None] | None = None,
) -> Callable[[GameSession, TickContext], None]:
    """Return a system that drops expired temporary buffs each tick.

    ``on_expired(session, ctx, buff)`` fires once per dropped buff.
    """

    def buff_expiry_system(session: GameSession, ctx: TickContext) -> None:
        expired = session.prune_buffs()
        if not expired:
            return
        session.commit()
        if on_expired is not None:
            for buff in expired:
                on_expired(session, ctx, buff)

    return buff_expiry_system


def make_influence_regen_system() -> Callable[[GameSession, TickContext], None]:
    """Return a system that regenerates influence on elapsed time."""

    def influence_regen_system(session: GameSession, ctx: TickContext) -> None:
        if session.regenerate_influence() > 0:
            session.commit()

    return influence_regen_system
