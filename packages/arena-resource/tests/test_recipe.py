"""Tests for RecipeBook and CraftingEngine."""
from __future__ import annotations

import pytest

from arena import GameSession, ManualClock, PlayerState
from arena_resource import (
    CraftingEngine,
    InventoryStore,
    MaterialCost,
    Recipe,
    RecipeBook,
    default_items,
)


def _crafting(
    book: RecipeBook | None = None, **state_kwargs
) -> tuple[GameSession, InventoryStore, CraftingEngine]:
    session = GameSession(PlayerState(**state_kwargs), clock=ManualClock(0.0), seed=1)
    store = InventoryStore(session, default_items())
    return session, store, CraftingEngine(session, store, book)


class TestRecipeBook:
    def test_defaults(self) -> None:
        book = RecipeBook()
        assert book.has("satoshi_forge")
        assert len(book.recipes()) == 7

    def test_get_missing(self) -> None:
        with pytest.raises(KeyError):
            RecipeBook().get("nope")

    def test_define(self) -> None:
        book = RecipeBook(())
        book.define(Recipe("r", "R", (), MaterialCost("coffee", 1)))
        assert [r.id for r in book.recipes()] == ["r"]


class TestCraft:
    def test_success_consumes_exactly(self) -> None:
        session, store, crafting = _crafting(level=3, influence=10)
        store.add("raw_silicon", 10)
        store.add("copper_wire", 5)

        result = crafting.craft("circuit_board_refined")
        assert result.success
        assert result.message == "Crafted Circuit Board! +13 XP"
        assert result["quantity"] == 3
        assert store.count("raw_silicon") == 2
        assert store.count("copper_wire") == 0
        assert store.count("circuit_board") == 3
        assert session.state.influence == 7
        assert session.state.xp == 13
        assert session.state.statistics["items_crafted"] == 1

    def test_tool_upgrade_swaps_bonuses(self) -> None:
        session, store, crafting = _crafting(level=8, influence=20)
        store.add("laptop_basic")
        store.add("code_fragment", 5)
        store.add("circuit_board", 3)
        assert session.state.stats["dev"] == 7

        assert crafting.craft("laptop_pro_upgrade").success
        assert not store.has("laptop_basic")
        assert store.has("laptop_pro")
        assert session.state.stats["dev"] == 10

    def test_failure_leaves_state_untouched(self) -> None:
        session, store, crafting = _crafting(level=3, influence=10)
        store.add("raw_silicon", 5)
        store.add("copper_wire", 5)
        before = session.state.snapshot()
        result = crafting.craft("circuit_board_refined")
        assert not result.success
        assert result.error == "insufficient"
        assert result.message == "Need 3 more Raw Silicon"
        assert session.state.snapshot() == before
        assert session.rate_limiter.check_action("craft").allowed

    def test_full_output_stack_keeps_materials(self) -> None:
        session, store, crafting = _crafting(level=10, influence=20)
        store.add("energy_drink", 5)
        store.add("caffeine_essence", 3)
        store.add("pure_water", 2)
        before = session.state.snapshot()

        result = crafting.craft("energy_drink_pack")
        assert not result.success
        assert result.error == "precondition"
        assert result.message == "No room for 5 more Energy Drink"
        assert result["available"] == 0
        assert session.state.snapshot() == before
        assert store.count("caffeine_essence") == 3
        assert session.state.influence == 20

    def test_partial_output_room_rejected(self) -> None:
        _, store, crafting = _crafting(level=10, influence=20)
        store.add("energy_drink", 1)
        store.add("caffeine_essence", 3)
        store.add("pure_water", 2)
        check = crafting.can_craft("energy_drink_pack")
        assert not check.can_craft
        assert check.reason == "No room for 5 more Energy Drink"

    def test_unknown_recipe(self) -> None:
        _, _, crafting = _crafting()
        result = crafting.craft("perpetual_motion")
        assert result.error == "not_found"
        assert result.message == "Recipe not found"

    def test_invalid_id(self) -> None:
        _, _, crafting = _crafting()
        assert crafting.craft("").message == "Invalid recipe ID"

    def test_rate_limited(self) -> None:
        session, store, crafting = _crafting(level=3, influence=20)
        store.add("raw_silicon", 16)
        store.add("copper_wire", 10)
        assert crafting.craft("circuit_board_refined").success
        second = crafting.craft("circuit_board_refined")
        assert second.error == "rate_limited"
        assert store.count("raw_silicon") == 8
        session.clock.advance(2)  # type: ignore[attr-defined]
        assert crafting.craft("circuit_board_refined").success


class TestRequirementOrder:
    def test_level_first(self) -> None:
        _, _, crafting = _crafting(level=1, influence=0)
        check = crafting.can_craft("circuit_board_refined")
        assert not check.can_craft
        assert check.reason == "Requires Level 3"
        assert check.error == "precondition"

    def test_tier(self) -> None:
        book = RecipeBook([
            Recipe("forge", "Forge", (), MaterialCost("coffee", 1), requires_tier="BLAZE"),
        ])
        _, _, crafting = _crafting(book, level=20)
        assert crafting.can_craft("forge").reason == "Requires BLAZE Tier"

    def test_influence_before_materials(self) -> None:
        _, _, crafting = _crafting(level=3, influence=2)
        check = crafting.can_craft("circuit_board_refined")
        assert check.reason == "Need 3 Influence (1 more)"
        assert check.error == "insufficient"

    def test_materials_before_output_room(self) -> None:
        _, store, crafting = _crafting(level=10, influence=20)
        store.add("energy_drink", 5)
        check = crafting.can_craft("energy_drink_pack")
        assert check.reason == "Need 3 more Caffeine Essence"
        assert check.error == "insufficient"

    def test_ready(self) -> None:
        _, store, crafting = _crafting(level=3)
        store.add("raw_silicon", 8)
        store.add("copper_wire", 5)
        check = crafting.can_craft("circuit_board_refined")
        assert check.can_craft
        assert check.reason == "Ready to craft"


class TestAvailableRecipes:
    def test_filters_by_level(self) -> None:
        _, store, crafting = _crafting(level=5)
        store.add("raw_silicon", 8)
        store.add("copper_wire", 5)
        available = crafting.get_available_recipes()
        assert [a.recipe.id for a in available] == [
            "energy_drink_pack", "circuit_board_refined", "code_fragment_synthesis",
        ]
        assert [a.can_craft for a in available] == [False, True, False]
