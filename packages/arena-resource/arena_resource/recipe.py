"""RecipeBook and CraftingEngine."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from arena import ActionResult, GameSession
from arena.progression import tier_at_least
from arena.types import (
    ArenaError,
    InsufficientResourceError,
    NotFoundError,
    PreconditionError,
)
from arena.validation import validate_id

from arena_resource.catalog import RECIPES
from arena_resource.inventory import InventoryStore
from arena_resource.types import Recipe

logger = logging.getLogger(__name__)


class RecipeBook:
    """Stores recipes, keyed by id."""

    def __init__(self, recipes: Iterable[Recipe] = RECIPES) -> None:
        self._recipes: dict[str, Recipe] = {}
        for recipe in recipes:
            self.define(recipe)

    def define(self, recipe: Recipe) -> None:
        """Register a recipe. Overwrites if the id exists."""
        self._recipes[recipe.id] = recipe

    def get(self, recipe_id: str) -> Recipe:
        """Look up a recipe. Raises KeyError if not defined."""
        if recipe_id not in self._recipes:
            raise KeyError(recipe_id)
        return self._recipes[recipe_id]

    def has(self, recipe_id: str) -> bool:
        return recipe_id in self._recipes

    def recipes(self) -> list[Recipe]:
        return list(self._recipes.values())


@dataclass(frozen=True)
class CraftCheck:
    can_craft: bool
    reason: str
    error: str | None = None


@dataclass(frozen=True)
class AvailableRecipe:
    recipe: Recipe
    can_craft: bool
    reason: str


class CraftingEngine:
    """Turns materials and influence into items plus XP."""

    def __init__(
        self, session: GameSession, store: InventoryStore, book: RecipeBook | None = None
    ) -> None:
        self._session = session
        self._store = store
        self._book = book if book is not None else RecipeBook()

    @property
    def book(self) -> RecipeBook:
        return self._book

    def check(self, recipe_id: str) -> Recipe:
        """Raise the first unmet requirement; return the recipe if all are met.

        Order: existence, level, tier, influence, each material, then output room.
        """
        if not self._book.has(recipe_id):
            raise NotFoundError("Recipe not found", recipe_id=recipe_id)
        recipe = self._book.get(recipe_id)
        st = self._session.state

        if st.level < recipe.unlock_level:
            raise PreconditionError(
                f"Requires Level {recipe.unlock_level}", required_level=recipe.unlock_level
            )
        if recipe.requires_tier is not None and not tier_at_least(
            self._session.tier, recipe.requires_tier
        ):
            raise PreconditionError(
                f"Requires {recipe.requires_tier} Tier", required_tier=recipe.requires_tier
            )
        if st.influence < recipe.influence_cost:
            raise InsufficientResourceError(
                f"Need {recipe.influence_cost} Influence "
                f"({recipe.influence_cost - st.influence} more)",
                required=recipe.influence_cost, available=st.influence,
            )
        for cost in recipe.materials:
            owned = self._store.count(cost.item_id)
            if owned < cost.quantity:
                item = self._store.get_item(cost.item_id)
                name = item.name if item is not None else cost.item_id
                raise InsufficientResourceError(
                    f"Need {cost.quantity - owned} more {name}",
                    item_id=cost.item_id, required=cost.quantity, available=owned,
                )
        room = self._store.stack_room(recipe.output.item_id)
        if room is not None and room < recipe.output.quantity:
            output = self._store.require_item(recipe.output.item_id)
            raise PreconditionError(
                f"No room for {recipe.output.quantity} more {output.name}",
                item_id=output.id, required=recipe.output.quantity, available=room,
            )
        return recipe

    def can_craft(self, recipe_id: str) -> CraftCheck:
        try:
            self.check(recipe_id)
        except ArenaError as exc:
            return CraftCheck(False, exc.message, exc.kind)
        return CraftCheck(True, "Ready to craft")

    def craft(self, recipe_id: str) -> ActionResult:
        session = self._session

        def body() -> ActionResult:
            validate_id(recipe_id, session.config.economy.max_item_id_length, "recipe ID")
            session.check_rate("craft")
            recipe = self.check(recipe_id)

            session.spend_influence(recipe.influence_cost)
            for cost in recipe.materials:
                self._store.remove(cost.item_id, cost.quantity)
            added = self._store.add(recipe.output.item_id, recipe.output.quantity)
            gain = session.add_xp(recipe.xp_reward)
            session.state.bump("items_crafted")
            session.rate_limiter.record_action("craft")

            output = self._store.require_item(recipe.output.item_id)
            logger.info("crafted %s -> %dx %s", recipe.id, added, output.id)
            return ActionResult.ok(
                f"Crafted {output.name}! +{recipe.xp_reward} XP",
                recipe_id=recipe.id, item_id=output.id, quantity=added,
                xp=gain.amount, leveled_up=gain.leveled_up,
            )

        return session.execute(body)

    def get_available_recipes(self) -> list[AvailableRecipe]:
        """Level-unlocked recipes with their current craftability."""
        level = self._session.state.level
        available = []
        for recipe in self._book.recipes():
            if level < recipe.unlock_level:
                continue
            check = self.can_craft(recipe.id)
            available.append(AvailableRecipe(recipe, check.can_craft, check.reason))
        return available
