"""ShopEngine: buy and sell flows with discounts, rate limits and gates."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from arena import ActionResult, GameSession
from arena.pricing import Rarity, discounted_price
from arena.progression import tier_at_least, tier_by_name
from arena.types import InsufficientResourceError, PreconditionError
from arena.validation import validate_id, validate_quantity

from arena_resource.catalog import SHOP_CATEGORIES
from arena_resource.inventory import InventoryStore
from arena_resource.types import ItemKind, ShopCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShopListingItem:
    item_id: str
    name: str
    rarity: str
    price: int
    base_price: int
    owned: int


@dataclass(frozen=True)
class ShopListingCategory:
    id: str
    name: str
    locked: bool
    requires_level: int | None
    items: tuple[ShopListingItem, ...]


class ShopEngine:
    """Token-for-item exchange.

    ``discount`` pins the discount instead of deriving it from the
    player's tier; None (the default) uses the tier discount.
    """

    def __init__(
        self,
        session: GameSession,
        store: InventoryStore,
        categories: Iterable[ShopCategory] = SHOP_CATEGORIES,
        discount: float | None = None,
    ) -> None:
        self._session = session
        self._store = store
        self._categories = tuple(categories)
        self._discount = discount

    @property
    def discount(self) -> float:
        return self._session.discount if self._discount is None else self._discount

    def quote(self, item_id: str, quantity: int = 1) -> int:
        """Discounted total for ``quantity`` units. Raises if not for sale."""
        item = self._store.require_item(item_id)
        if item.buy_price is None:
            raise PreconditionError("Item not for sale", item_id=item_id)
        return discounted_price(item.buy_price * quantity, self.discount)

    def buy(self, item_id: str, quantity: int = 1) -> ActionResult:
        session = self._session
        economy = session.config.economy

        def body() -> ActionResult:
            validate_id(item_id, economy.max_item_id_length)
            qty = validate_quantity(quantity, economy.min_quantity, economy.max_quantity)
            session.check_rate("buy")

            item = self._store.require_item(item_id)
            if item.buy_price is None:
                raise PreconditionError("Item not for sale", item_id=item_id)
            base = item.buy_price * qty
            cost = discounted_price(base, self.discount)
            if session.state.tokens < cost:
                raise InsufficientResourceError(
                    f"Not enough tokens (need {cost - session.state.tokens} more)",
                    item_id=item_id, required=cost, available=session.state.tokens,
                )
            if item.rarity is Rarity.LEGENDARY and not tier_at_least(
                session.tier, economy.legendary_min_tier
            ):
                required = tier_by_name(economy.legendary_min_tier)
                raise PreconditionError(
                    f"Requires {required.name} tier (level {required.min_level})",
                    item_id=item_id, required_tier=required.name,
                )
            room = self._store.stack_room(item_id)
            if room is not None and room < qty:
                raise PreconditionError(
                    f"No room for {qty} more {item.name} (room for {room})",
                    item_id=item_id, room=room,
                )

            session.spend_tokens(cost)
            self._store.add(item_id, qty)
            session.state.bump("items_bought", qty)
            session.rate_limiter.record_action("buy")

            savings = base - cost
            logger.info("bought %dx %s for %d (saved %d)", qty, item.id, cost, savings)
            if savings > 0:
                message = (
                    f"Purchased: {item.name} (saved {savings} tokens with tier discount!)"
                )
            else:
                message = f"Purchased: {item.name}"
            return ActionResult.ok(
                message, item_id=item.id, quantity=qty, cost=cost, savings=savings,
            )

        return session.execute(body)

    def sell(self, item_id: str, quantity: int = 1) -> ActionResult:
        session = self._session
        economy = session.config.economy

        def body() -> ActionResult:
            validate_id(item_id, economy.max_item_id_length)
            qty = validate_quantity(quantity, economy.min_quantity, economy.max_quantity)
            session.check_rate("sell")

            item = self._store.require_item(item_id)
            if item.kind is ItemKind.COLLECTIBLE:
                raise PreconditionError("Collectibles cannot be sold", item_id=item_id)
            if item.unit_sell_price is None:
                raise PreconditionError("Item cannot be sold", item_id=item_id)
            owned = self._store.count(item_id)
            if owned < qty:
                raise InsufficientResourceError(
                    f"Not enough {item.name} (need {qty - owned} more)",
                    item_id=item_id, required=qty, available=owned,
                )

            self._store.remove(item_id, qty)
            earned = item.unit_sell_price * qty
            session.add_tokens(earned)
            session.state.bump("items_sold", qty)
            session.rate_limiter.record_action("sell")

            logger.info("sold %dx %s for %d", qty, item.id, earned)
            return ActionResult.ok(
                f"Sold {qty}x {item.name} for {earned} tokens",
                item_id=item.id, quantity=qty, earned=earned,
            )

        return session.execute(body)

    def shop_listing(self) -> list[ShopListingCategory]:
        level = self._session.state.level
        listing: list[ShopListingCategory] = []
        for category in self._categories:
            locked = category.requires_level is not None and level < category.requires_level
            entries = []
            for item_id in category.items:
                item = self._store.get_item(item_id)
                if item is None or item.buy_price is None:
                    continue
                entries.append(ShopListingItem(
                    item_id=item.id,
                    name=item.name,
                    rarity=item.rarity.value,
                    price=discounted_price(item.buy_price, self.discount),
                    base_price=item.buy_price,
                    owned=self._store.count(item.id),
                ))
            listing.append(ShopListingCategory(
                id=category.id,
                name=category.name,
                locked=locked,
                requires_level=category.requires_level,
                items=tuple(entries),
            ))
        return listing
