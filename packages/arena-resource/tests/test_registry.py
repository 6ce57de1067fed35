"""Tests for ItemRegistry and the built-in catalog."""
from __future__ import annotations

import pytest

from arena_resource import (
    RECIPES,
    SHOP_CATEGORIES,
    ItemDef,
    ItemKind,
    ItemRegistry,
    default_items,
)


class TestItemRegistry:
    def test_define_and_get(self) -> None:
        reg = ItemRegistry()
        item = ItemDef("coin", "Coin", ItemKind.MATERIAL)
        reg.define(item)
        assert reg.get("coin") is item
        assert reg.has("coin")
        assert "coin" in reg
        assert len(reg) == 1

    def test_get_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            ItemRegistry().get("nope")

    def test_find_missing(self) -> None:
        assert ItemRegistry().find("nope") is None

    def test_redefine_overwrites(self) -> None:
        reg = ItemRegistry([ItemDef("a", "A", ItemKind.MATERIAL)])
        reg.define(ItemDef("a", "A2", ItemKind.MATERIAL))
        assert reg.get("a").name == "A2"
        assert len(reg) == 1

    def test_items_by_kind(self) -> None:
        reg = ItemRegistry([
            ItemDef("a", "A", ItemKind.MATERIAL),
            ItemDef("b", "B", ItemKind.TOOL),
            ItemDef("c", "C", ItemKind.MATERIAL),
        ])
        assert [i.id for i in reg.items()] == ["a", "b", "c"]
        assert [i.id for i in reg.items(ItemKind.MATERIAL)] == ["a", "c"]


class TestCatalog:
    def test_counts(self) -> None:
        reg = default_items()
        assert len(reg.items(ItemKind.TOOL)) == 11
        assert len(reg.items(ItemKind.COLLECTIBLE)) == 8

    def test_recipes_reference_known_items(self) -> None:
        reg = default_items()
        for recipe in RECIPES:
            assert reg.has(recipe.output.item_id), recipe.id
            for cost in recipe.materials:
                assert reg.has(cost.item_id), (recipe.id, cost.item_id)

    def test_shop_items_are_for_sale(self) -> None:
        reg = default_items()
        for category in SHOP_CATEGORIES:
            for item_id in category.items:
                assert reg.get(item_id).buy_price is not None, item_id

    def test_crafted_potion_not_sold(self) -> None:
        assert default_items().get("xp_boost_potion").buy_price is None

    def test_crafting_materials_untradeable(self) -> None:
        reg = default_items()
        assert reg.get("raw_silicon").buy_price is None
        assert reg.get("audit_report").buy_price == 150
