"""PumpArena: the host-facing adapter wiring every engine component to one session."""
from __future__ import annotations

from typing import Any

from arena import (
    ActionResult,
    ArenaConfig,
    Clock,
    Engine,
    GameSession,
    Inventory,
    PlayerState,
    Storage,
    make_buff_expiry_system,
    make_influence_regen_system,
)
from arena_event import ActiveEvent, EventEngine, make_event_system
from arena_minigame import MinigameAdapter
from arena_resource import (
    AvailableRecipe,
    CraftCheck,
    CraftingEngine,
    InventoryStore,
    ItemDef,
    RecipeBook,
    ShopEngine,
    ShopListingCategory,
    default_items,
    use_item,
)
from arena_signal import SignalBus, make_signal_system


class PumpArena:
    """One player's game: queries return plain data, commands return ActionResult.

    The host subscribes to ``bus`` for collectible-found, event-triggered
    and event-resolved notifications and drives time through ``engine``.
    """

    def __init__(
        self,
        state: PlayerState | None = None,
        *,
        clock: Clock | None = None,
        seed: int | None = None,
        config: ArenaConfig | None = None,
        storage: Storage | None = None,
        session: GameSession | None = None,
    ) -> None:
        if session is None:
            session = GameSession(
                state, clock=clock, seed=seed, config=config, storage=storage
            )
        self.session = session
        self.inventory = InventoryStore(session, default_items())
        self.shop = ShopEngine(session, self.inventory)
        self.crafting = CraftingEngine(session, self.inventory, RecipeBook())
        self.events = EventEngine(
            session,
            bonus_chance=lambda: self.inventory.tool_bonuses()["event_bonus_chance"],
        )
        self.minigames = MinigameAdapter(session)

    @classmethod
    def load(cls, storage: Storage, **kwargs: Any) -> PumpArena:
        """Open a game from storage, or a fresh one if storage is empty."""
        return cls(session=GameSession.load(storage, **kwargs))

    @property
    def bus(self) -> SignalBus:
        return self.session.bus

    @property
    def state(self) -> PlayerState:
        return self.session.state

    def make_engine(self, interval: float = 1.0, auto_events: bool = True) -> Engine:
        """A tick engine running events, buff expiry, regen and signal delivery."""
        engine = Engine(self.session, interval=interval)
        engine.add_system(make_event_system(self.events, auto_trigger=auto_events))
        engine.add_system(make_buff_expiry_system())
        engine.add_system(make_influence_regen_system())
        engine.add_system(make_signal_system(self.bus))
        return engine

    # --- Queries ---

    def snapshot(self) -> dict[str, Any]:
        return self.session.snapshot()

    def get_item(self, item_id: str) -> ItemDef | None:
        return self.inventory.get_item(item_id)

    def get_inventory(self) -> Inventory:
        return self.inventory.get_inventory()

    def has_item(self, item_id: str) -> bool:
        return self.inventory.has(item_id)

    def get_item_count(self, item_id: str) -> int:
        return self.inventory.count(item_id)

    def shop_listing(self) -> list[ShopListingCategory]:
        return self.shop.shop_listing()

    def can_craft(self, recipe_id: str) -> CraftCheck:
        return self.crafting.can_craft(recipe_id)

    def get_available_recipes(self) -> list[AvailableRecipe]:
        return self.crafting.get_available_recipes()

    def get_active_event(self) -> ActiveEvent | None:
        return self.events.get_active_event()

    def get_time_remaining(self) -> float | None:
        return self.events.get_time_remaining()

    # --- Commands ---

    def buy_item(self, item_id: str, quantity: int = 1) -> ActionResult:
        return self.shop.buy(item_id, quantity)

    def sell_item(self, item_id: str, quantity: int = 1) -> ActionResult:
        return self.shop.sell(item_id, quantity)

    def use_item(self, item_id: str) -> ActionResult:
        return use_item(self.session, self.inventory, item_id)

    def craft(self, recipe_id: str) -> ActionResult:
        return self.crafting.craft(recipe_id)

    def trigger_event(self, event_id: str) -> ActionResult:
        return self.events.trigger_event(event_id)

    def handle_choice(self, choice_id: str) -> ActionResult:
        return self.events.handle_choice(choice_id)

    def start_minigame(self, game_id: str) -> ActionResult:
        return self.minigames.start(game_id)

    def complete_minigame(self, score: float, perfect: bool = False) -> ActionResult:
        return self.minigames.complete(score, perfect)
