"""Consumable use: apply an item's effect, then remove one unit."""
from __future__ import annotations

import logging
from typing import Any

from arena import ActionResult, GameSession
from arena.types import InsufficientResourceError, PreconditionError
from arena.validation import validate_id

from arena_resource.inventory import InventoryStore
from arena_resource.types import ConsumableEffect, ItemKind

logger = logging.getLogger(__name__)


def apply_consumable_effect(session: GameSession, effect: ConsumableEffect,
                            source: str = "") -> dict[str, Any]:
    """Apply ``effect`` to the session's player. Returns the granted rewards."""
    rewards: dict[str, Any] = {}
    if effect.influence_restore_full:
        rewards["influence"] = session.restore_influence(None)
    elif effect.influence_restore:
        rewards["influence"] = session.restore_influence(effect.influence_restore)
    if effect.grant_xp:
        gain = session.add_xp(effect.grant_xp)
        rewards["xp"] = gain.amount
    if effect.grant_reputation:
        session.add_reputation(effect.grant_reputation)
        rewards["reputation"] = effect.grant_reputation
    if effect.temp_boost is not None:
        boost = effect.temp_boost
        for stat, bonus in boost.stats.items():
            session.add_buff(stat, bonus, boost.duration, source=source)
        rewards["temp_boost"] = {"stats": dict(boost.stats), "duration": boost.duration}
    if effect.negative_event_shield:
        session.state.shields += effect.negative_event_shield
        rewards["shield"] = effect.negative_event_shield
    return rewards


def use_item(session: GameSession, store: InventoryStore, item_id: str) -> ActionResult:
    """Consume one unit of an owned consumable."""

    def body() -> ActionResult:
        validate_id(item_id, session.config.economy.max_item_id_length)
        session.check_rate("use")
        item = store.require_item(item_id)
        effect = item.consumable_effect
        if item.kind is not ItemKind.CONSUMABLE:
            raise PreconditionError("Item is not consumable", item_id=item_id)
        if not store.has(item_id):
            raise InsufficientResourceError(
                f"Need 1 more {item.name}", item_id=item_id, required=1, available=0
            )

        store.remove(item_id, 1)
        rewards = apply_consumable_effect(session, effect, source=item.id) if effect else {}
        session.state.bump("items_used")
        session.rate_limiter.record_action("use")
        logger.info("used %s: %s", item.id, rewards)
        return ActionResult.ok(f"Used: {item.name}", item_id=item.id, rewards=rewards)

    return session.execute(body)
