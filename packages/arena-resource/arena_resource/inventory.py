"""InventoryStore: add/remove/query over the player's four inventory buckets."""
from __future__ import annotations

import copy
import logging

from arena import GameSession, Inventory, InventoryEntry
from arena.progression import STAT_NAMES
from arena.types import InsufficientResourceError, NotFoundError, PreconditionError
from arena_signal import signals

from arena_resource.registry import ItemRegistry
from arena_resource.types import PASSIVE_BONUSES, ItemDef, ItemKind, ToolEffect

logger = logging.getLogger(__name__)


class InventoryStore:
    """Item operations on ``session.state.inventory``.

    Mutations raise ArenaError subclasses; commands built on top run them
    inside a session transaction.
    """

    def __init__(self, session: GameSession, items: ItemRegistry) -> None:
        self._session = session
        self._items = items

    @property
    def items(self) -> ItemRegistry:
        return self._items

    # --- Queries ---

    def get_item(self, item_id: str) -> ItemDef | None:
        return self._items.find(item_id)

    def require_item(self, item_id: str) -> ItemDef:
        item = self._items.find(item_id)
        if item is None:
            raise NotFoundError("Item not found", item_id=item_id)
        return item

    def get_inventory(self) -> Inventory:
        """A copy of the four buckets; mutating it has no effect."""
        return copy.deepcopy(self._session.state.inventory)

    def count(self, item_id: str) -> int:
        item = self._items.find(item_id)
        if item is None:
            return 0
        return sum(e.quantity for e in self._entries(item))

    def has(self, item_id: str) -> bool:
        return self.count(item_id) > 0

    def max_stack(self, item: ItemDef) -> int:
        if item.max_stack is not None:
            return item.max_stack
        return self._session.config.economy.default_max_stack

    def stack_room(self, item_id: str) -> int | None:
        """Units that can still be added before the stack caps. None if unbounded."""
        item = self.require_item(item_id)
        if not item.stackable:
            return None
        return max(0, self.max_stack(item) - self.count(item_id))

    def tool_bonuses(self) -> dict[str, float]:
        """Passive bonuses summed over every owned tool."""
        totals = {name: 0.0 for name in PASSIVE_BONUSES}
        seen: set[str] = set()
        for entry in self._session.state.inventory.tools:
            if entry.item_id in seen:
                continue
            seen.add(entry.item_id)
            item = self._items.find(entry.item_id)
            effect = item.tool_effect if item is not None else None
            if effect is None:
                continue
            for name, value in effect.passive.items():
                totals[name] += value
        return totals

    # --- Mutations ---

    def add(self, item_id: str, quantity: int = 1) -> int:
        """Add units, dropping whatever exceeds the stack cap. Returns units added."""
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        item = self.require_item(item_id)
        st = self._session.state
        bucket = st.inventory.bucket(item.kind.bucket)
        owned_before = self.count(item_id)

        if item.stackable:
            added = min(quantity, max(0, self.max_stack(item) - owned_before))
            if added > 0:
                existing = next((e for e in bucket if e.item_id == item_id), None)
                if existing is None:
                    bucket.append(InventoryEntry(item_id, added, self._session.now()))
                else:
                    existing.quantity += added
        else:
            added = quantity
            bucket.append(InventoryEntry(item_id, quantity, self._session.now()))

        if added < quantity:
            logger.debug("%s stack full, dropped %d", item_id, quantity - added)

        if added > 0 and owned_before == 0 and item.tool_effect is not None:
            self._apply_tool_effect(item.tool_effect, 1)
        info = item.collectible
        if added > 0 and info is not None and info.achievement:
            # Published on every acquisition, not only the first.
            self._session.bus.publish(
                signals.COLLECTIBLE_FOUND,
                item_id=item.id, name=item.name, rarity=item.rarity.value,
                lore=info.lore, achievement=info.achievement,
                quantity=added, first_find=owned_before == 0,
            )
            logger.info("collectible found: %s", item.id)
        return added

    def remove(self, item_id: str, quantity: int = 1) -> int:
        """Remove exactly ``quantity`` units, oldest entries first."""
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        item = self.require_item(item_id)
        if item.kind is ItemKind.COLLECTIBLE:
            raise PreconditionError(f"{item.name} cannot be removed", item_id=item_id)
        owned = self.count(item_id)
        if owned < quantity:
            raise InsufficientResourceError(
                f"Need {quantity - owned} more {item.name}",
                item_id=item_id, required=quantity, available=owned,
            )

        bucket = self._session.state.inventory.bucket(item.kind.bucket)
        remaining = quantity
        for entry in [e for e in bucket if e.item_id == item_id]:
            take = min(entry.quantity, remaining)
            entry.quantity -= take
            remaining -= take
            if entry.quantity == 0:
                bucket.remove(entry)
            if remaining == 0:
                break

        if owned == quantity:
            effect = item.tool_effect
            if effect is not None:
                self._apply_tool_effect(effect, -1)
        return quantity

    # --- Internals ---

    def _entries(self, item: ItemDef) -> list[InventoryEntry]:
        bucket = self._session.state.inventory.bucket(item.kind.bucket)
        return [e for e in bucket if e.item_id == item.id]

    def _apply_tool_effect(self, effect: ToolEffect, sign: int) -> None:
        stats = self._session.state.stats
        deltas: dict[str, int] = dict.fromkeys(STAT_NAMES, 0)
        for name, bonus in effect.stat_bonuses.items():
            deltas[name] = deltas.get(name, 0) + bonus
        if effect.all_stats_bonus:
            for name in deltas:
                deltas[name] += effect.all_stats_bonus
        for name, delta in deltas.items():
            if delta:
                stats[name] = max(0, stats.get(name, 0) + sign * delta)
