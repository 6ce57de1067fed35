"""arena-resource - Items, inventory, shop and crafting for the arena engine."""
from __future__ import annotations

from arena_resource.catalog import RECIPES, SHOP_CATEGORIES, default_items
from arena_resource.consumables import apply_consumable_effect, use_item
from arena_resource.inventory import InventoryStore
from arena_resource.recipe import AvailableRecipe, CraftCheck, CraftingEngine, RecipeBook
from arena_resource.registry import ItemRegistry
from arena_resource.shop import ShopEngine, ShopListingCategory, ShopListingItem
from arena_resource.types import (
    CollectibleInfo,
    ConsumableEffect,
    ItemDef,
    ItemKind,
    MaterialCost,
    Recipe,
    ShopCategory,
    TempBoost,
    ToolEffect,
)

__all__ = [
    "AvailableRecipe",
    "CollectibleInfo",
    "ConsumableEffect",
    "CraftCheck",
    "CraftingEngine",
    "InventoryStore",
    "ItemDef",
    "ItemKind",
    "ItemRegistry",
    "MaterialCost",
    "RECIPES",
    "Recipe",
    "RecipeBook",
    "SHOP_CATEGORIES",
    "ShopCategory",
    "ShopEngine",
    "ShopListingCategory",
    "ShopListingItem",
    "TempBoost",
    "ToolEffect",
    "apply_consumable_effect",
    "default_items",
    "use_item",
]
