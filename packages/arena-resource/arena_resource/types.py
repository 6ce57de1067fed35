"""Core data types for items: kinds, effect payloads and definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from arena.pricing import Rarity, price_for_rarity

PASSIVE_BONUSES: tuple[str, ...] = (
    "xp_bonus",
    "task_speed_bonus",
    "influence_regen_bonus",
    "event_bonus_chance",
)


class ItemKind(Enum):
    TOOL = "tool"
    CONSUMABLE = "consumable"
    COLLECTIBLE = "collectible"
    MATERIAL = "material"

    @property
    def bucket(self) -> str:
        """Name of the PlayerState inventory bucket holding this kind."""
        return _BUCKETS[self]


_BUCKETS = {
    ItemKind.TOOL: "tools",
    ItemKind.CONSUMABLE: "consumables",
    ItemKind.COLLECTIBLE: "collectibles",
    ItemKind.MATERIAL: "materials",
}


@dataclass(frozen=True)
class ToolEffect:
    """Equip-on-acquire stat bonuses plus passive percentage bonuses.

    Attributes:
        stat_bonuses: stat name -> flat bonus.
        all_stats_bonus: Flat bonus added to every stat.
        passive: One of PASSIVE_BONUSES -> fractional bonus.
    """

    stat_bonuses: dict[str, int] = field(default_factory=dict)
    all_stats_bonus: int = 0
    passive: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.passive) - set(PASSIVE_BONUSES)
        if unknown:
            raise ValueError(f"unknown passive bonuses: {sorted(unknown)}")


@dataclass(frozen=True)
class TempBoost:
    """``stats`` maps a stat name (or ``"all"``) to a bonus for ``duration`` seconds."""

    stats: dict[str, int]
    duration: float = 300.0


@dataclass(frozen=True)
class ConsumableEffect:
    influence_restore: int = 0
    influence_restore_full: bool = False
    grant_xp: int = 0
    grant_reputation: int = 0
    temp_boost: TempBoost | None = None
    negative_event_shield: int = 0


@dataclass(frozen=True)
class CollectibleInfo:
    lore: str = ""
    achievement: str | None = None


ItemPayload = ToolEffect | ConsumableEffect | CollectibleInfo | None

_PAYLOAD_FOR_KIND = {
    ItemKind.TOOL: ToolEffect,
    ItemKind.CONSUMABLE: ConsumableEffect,
    ItemKind.COLLECTIBLE: CollectibleInfo,
}


@dataclass(frozen=True)
class ItemDef:
    """Immutable item definition.

    Attributes:
        id: Unique identifier.
        name: Display name.
        kind: Category; decides the inventory bucket and the payload type.
        rarity: Rarity tier; prices items that carry no explicit price.
        payload: ToolEffect, ConsumableEffect or CollectibleInfo matching kind.
        price: Explicit buy price (legacy override of the rarity price).
        sell_price: Explicit sell price (legacy override).
        tradeable: False keeps the item out of the shop entirely.
        stackable: Aggregate into one entry capped at max_stack.
        max_stack: Stack cap; None falls back to the economy default.
    """

    id: str
    name: str
    kind: ItemKind
    rarity: Rarity = Rarity.COMMON
    description: str = ""
    payload: ItemPayload = None
    price: int | None = None
    sell_price: int | None = None
    tradeable: bool = True
    stackable: bool = False
    max_stack: int | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ItemDef id must be non-empty")
        if self.max_stack is not None and self.max_stack < 1:
            raise ValueError(f"max_stack must be >= 1, got {self.max_stack}")
        if self.payload is not None:
            expected = _PAYLOAD_FOR_KIND.get(self.kind)
            if expected is None or not isinstance(self.payload, expected):
                raise ValueError(
                    f"{type(self.payload).__name__} payload does not fit a {self.kind.value}"
                )
        for label, value in (("price", self.price), ("sell_price", self.sell_price)):
            if value is not None and value < 0:
                raise ValueError(f"{label} must be >= 0, got {value}")

    @property
    def buy_price(self) -> int | None:
        """Unit price before discount, or None if the shop does not sell it."""
        if not self.tradeable or self.kind is ItemKind.COLLECTIBLE:
            return None
        if self.price is not None:
            return self.price
        return price_for_rarity(self.rarity).buy

    @property
    def unit_sell_price(self) -> int | None:
        if not self.tradeable or self.kind is ItemKind.COLLECTIBLE:
            return None
        if self.sell_price is not None:
            return self.sell_price
        return price_for_rarity(self.rarity).sell

    @property
    def tool_effect(self) -> ToolEffect | None:
        return self.payload if isinstance(self.payload, ToolEffect) else None

    @property
    def consumable_effect(self) -> ConsumableEffect | None:
        return self.payload if isinstance(self.payload, ConsumableEffect) else None

    @property
    def collectible(self) -> CollectibleInfo | None:
        return self.payload if isinstance(self.payload, CollectibleInfo) else None


@dataclass(frozen=True)
class ShopCategory:
    id: str
    name: str
    items: tuple[str, ...]
    requires_level: int | None = None


@dataclass(frozen=True)
class MaterialCost:
    item_id: str
    quantity: int


@dataclass(frozen=True)
class Recipe:
    """Immutable crafting recipe.

    Attributes:
        id: Unique identifier.
        name: Display name.
        materials: Consumed inputs, checked in order.
        output: Produced item and quantity.
        influence_cost: Influence spent per craft.
        xp_reward: XP granted per craft.
        unlock_level: Minimum player level.
        requires_tier: Minimum tier name, or None.
        category: Grouping for display (material, consumable, upgrade, legendary).
    """

    id: str
    name: str
    materials: tuple[MaterialCost, ...]
    output: MaterialCost
    influence_cost: int = 0
    xp_reward: int = 0
    unlock_level: int = 1
    requires_tier: str | None = None
    category: str = "material"
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Recipe id must be non-empty")
        if self.output.quantity < 1:
            raise ValueError(f"output quantity must be >= 1, got {self.output.quantity}")
        for cost in self.materials:
            if cost.quantity < 1:
                raise ValueError(
                    f"material {cost.item_id!r} quantity must be >= 1, got {cost.quantity}"
                )
