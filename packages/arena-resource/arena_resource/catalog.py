"""Default item, recipe and shop data for Pump Arena."""
from __future__ import annotations

from arena.pricing import Rarity

from arena_resource.registry import ItemRegistry
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

C, U, R, E, L = Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE, Rarity.EPIC, Rarity.LEGENDARY


def _tool(id, name, rarity, price, sell, description="", **effect) -> ItemDef:
    return ItemDef(
        id=id, name=name, kind=ItemKind.TOOL, rarity=rarity, description=description,
        payload=ToolEffect(**effect), price=price, sell_price=sell,
    )


def _consumable(id, name, rarity, price, sell, max_stack, description="", **effect) -> ItemDef:
    return ItemDef(
        id=id, name=name, kind=ItemKind.CONSUMABLE, rarity=rarity, description=description,
        payload=ConsumableEffect(**effect), price=price, sell_price=sell,
        stackable=True, max_stack=max_stack,
    )


def _collectible(id, name, rarity, lore, achievement, description="") -> ItemDef:
    return ItemDef(
        id=id, name=name, kind=ItemKind.COLLECTIBLE, rarity=rarity, description=description,
        payload=CollectibleInfo(lore=lore, achievement=achievement),
    )


def _material(id, name, rarity, max_stack, price=None, sell=None, description="") -> ItemDef:
    return ItemDef(
        id=id, name=name, kind=ItemKind.MATERIAL, rarity=rarity, description=description,
        price=price, sell_price=sell, tradeable=price is not None,
        stackable=True, max_stack=max_stack,
    )


TOOLS: tuple[ItemDef, ...] = (
    _tool("laptop_basic", "Basic Laptop", C, 100, 25,
          "A reliable machine for everyday coding.", stat_bonuses={"dev": 2}),
    _tool("laptop_pro", "Pro Workstation", R, 500, 125,
          "High-performance machine for serious developers.",
          stat_bonuses={"dev": 5}, passive={"xp_bonus": 0.05}),
    _tool("mechanical_keyboard", "Mechanical Keyboard", U, 200, 50,
          "The satisfying click of productivity.",
          stat_bonuses={"dev": 3}, passive={"task_speed_bonus": 0.1}),
    _tool("microphone", "Streaming Mic", U, 250, 60,
          "Crystal clear communication with your community.",
          stat_bonuses={"com": 3, "cha": 2}),
    _tool("ring_light", "Ring Light", C, 100, 25,
          "Look good on camera, feel confident.", stat_bonuses={"cha": 3}),
    _tool("analytics_suite", "Analytics Suite", R, 400, 100,
          "Data-driven insights for growth hacking.",
          stat_bonuses={"mkt": 4, "str": 3}),
    _tool("social_scheduler", "Social Scheduler", U, 200, 50,
          "Never miss the perfect posting time.",
          stat_bonuses={"mkt": 3}, passive={"influence_regen_bonus": 0.1}),
    _tool("whiteboard", "Digital Whiteboard", C, 100, 25,
          "Visualize your grand plans.", stat_bonuses={"str": 2}),
    _tool("market_terminal", "Market Terminal", E, 1000, 250,
          "Real-time data from every exchange.",
          stat_bonuses={"str": 6, "lck": 3}, passive={"event_bonus_chance": 0.1}),
    _tool("satoshi_notebook", "Satoshi's Notebook", L, 5000, 1250,
          "Rumored to contain the original Bitcoin notes.",
          all_stats_bonus=3, passive={"xp_bonus": 0.15}),
    _tool("vitalik_hoodie", "Vitalik's Hoodie", L, 5000, 1250,
          "The iconic grey hoodie. Imbued with Ethereum energy.",
          stat_bonuses={"dev": 10, "str": 5}),
)

CONSUMABLES: tuple[ItemDef, ...] = (
    _consumable("coffee", "Coffee", C, 20, 5, 10, "A quick energy boost.",
                influence_restore=15),
    _consumable("energy_drink", "Energy Drink", U, 50, 12, 5,
                "Serious energy for serious builders.", influence_restore=35),
    _consumable("power_smoothie", "Power Smoothie", R, 150, 40, 3,
                "The ultimate productivity fuel.", influence_restore=60,
                temp_boost=TempBoost({"all": 2}, duration=300)),
    _consumable("vacation_ticket", "Vacation Ticket", E, 500, 125, 2,
                "Full mental reset. Come back refreshed.",
                influence_restore_full=True, grant_xp=100),
    _consumable("xp_scroll_small", "XP Scroll (Small)", C, 30, 8, 10,
                "Grants a small amount of experience.", grant_xp=50),
    _consumable("xp_scroll_medium", "XP Scroll (Medium)", U, 80, 20, 5,
                "Grants a moderate amount of experience.", grant_xp=150),
    _consumable("xp_scroll_large", "XP Scroll (Large)", R, 200, 50, 3,
                "Grants a large amount of experience.", grant_xp=400),
    _consumable("reputation_badge", "Reputation Badge", U, 100, 25, 5,
                "Instant street cred.", grant_reputation=50),
    _consumable("viral_moment", "Viral Moment", R, 300, 75, 2,
                "Capture lightning in a bottle.", grant_reputation=150, grant_xp=100),
    _consumable("lucky_charm", "Lucky Charm", R, 200, 50, 3,
                "Temporary boost to luck for better event outcomes.",
                temp_boost=TempBoost({"lck": 10}, duration=600)),
    _consumable("fud_shield_potion", "FUD Shield Potion", R, 250, 60, 3,
                "Protects against the next negative event.", negative_event_shield=1),
    # Crafted only.
    ItemDef(
        id="xp_boost_potion", name="XP Boost Elixir", kind=ItemKind.CONSUMABLE,
        rarity=R, description="Powerful potion for enhanced XP gain.",
        payload=ConsumableEffect(grant_xp=233, temp_boost=TempBoost({"all": 1}, 600)),
        tradeable=False, stackable=True, max_stack=5,
    ),
)

COLLECTIBLES: tuple[ItemDef, ...] = (
    _collectible("genesis_block", "Genesis Block Shard", L,
                 'January 3, 2009. "Chancellor on brink of second bailout for banks."',
                 "genesis_collector", "A fragment from the very first Bitcoin block."),
    _collectible("eth_merge_coin", "Merge Commemorative Coin", E,
                 "September 15, 2022. The day Ethereum went green.",
                 "eth_historian", "Celebrating the historic Ethereum merge."),
    _collectible("doge_plushie", "Doge Plushie", R,
                 "A reminder that memes can move markets.",
                 "meme_lord", "Much wow. Very collect. So rare."),
    _collectible("nft_frame", "First NFT Frame", E,
                 "Digital ownership, eternally on-chain.",
                 "art_collector", "Display your most prized digital art."),
    _collectible("rug_pull_survivor", "Rug Pull Survivor Badge", R,
                 "Battle scars are the best teachers.",
                 "survivor", "You lived to tell the tale."),
    _collectible("diamond_hands", "Diamond Hands Trophy", E,
                 "Through crashes and FUD, you held strong.",
                 "diamond_hands", "Proof that you never sold."),
    _collectible("whale_tooth", "Whale Tooth", L,
                 "They said the whales would never notice us...",
                 "whale_friend", "A gift from a crypto whale."),
    _collectible("golden_key", "Golden Private Key", L,
                 "The ultimate symbol of self-custody.",
                 "master_builder", "Not your keys, not your crypto. This one is yours."),
)

MATERIALS: tuple[ItemDef, ...] = (
    _material("smart_contract_template", "Smart Contract Template", U, 20, 50, 12,
              "A reusable contract foundation."),
    _material("audit_report", "Audit Report", R, 10, 150, 40,
              "Professional security documentation."),
    _material("raw_silicon", "Raw Silicon", C, 99,
              description="Basic building block of circuits."),
    _material("copper_wire", "Copper Wire", C, 99,
              description="Conductive wiring for electronics."),
    _material("digital_dust", "Digital Dust", C, 99,
              description="Residue from blockchain operations."),
    _material("logic_core", "Logic Core", U, 55,
              description="Processing unit for advanced crafting."),
    _material("circuit_board", "Circuit Board", U, 55,
              description="Essential component for tech upgrades."),
    _material("code_fragment", "Code Fragment", U, 55,
              description="Piece of optimized smart contract code."),
    _material("data_crystal", "Data Crystal", R, 34,
              description="Crystallized blockchain data."),
    _material("xp_shard", "XP Shard", R, 34,
              description="Concentrated experience essence."),
    _material("rare_essence", "Rare Essence", R, 21,
              description="Refined power for potion crafting."),
    _material("golden_flask", "Golden Flask", R, 13,
              description="Container for magical elixirs."),
    _material("caffeine_essence", "Caffeine Essence", C, 99,
              description="Pure productivity in liquid form."),
    _material("pure_water", "Pure Water", C, 99,
              description="Crystal clear hydration."),
    _material("ancient_code", "Ancient Code", L, 8,
              description="Code from the genesis era. Extremely rare."),
    _material("genesis_block_shard", "Genesis Block Shard", L, 5,
              description="Fragment from the first block ever mined."),
    _material("legendary_essence", "Legendary Essence", L, 3,
              description="Distilled power of ancient protocols."),
)


def _m(item_id: str, quantity: int) -> MaterialCost:
    return MaterialCost(item_id, quantity)


RECIPES: tuple[Recipe, ...] = (
    Recipe(
        "laptop_pro_upgrade", "Upgrade to Pro Workstation",
        (_m("laptop_basic", 1), _m("code_fragment", 5), _m("circuit_board", 3)),
        _m("laptop_pro", 1), influence_cost=13, xp_reward=55, unlock_level=8,
        category="upgrade",
    ),
    Recipe(
        "analytics_bundle", "Analytics Suite Bundle",
        (_m("whiteboard", 1), _m("social_scheduler", 1), _m("data_crystal", 8)),
        _m("analytics_suite", 1), influence_cost=21, xp_reward=89, unlock_level=13,
        category="upgrade",
    ),
    Recipe(
        "energy_drink_pack", "Energy Drink Pack",
        (_m("caffeine_essence", 3), _m("pure_water", 2)),
        _m("energy_drink", 5), influence_cost=5, xp_reward=21, unlock_level=5,
        category="consumable",
    ),
    Recipe(
        "boost_elixir", "XP Boost Elixir",
        (_m("xp_shard", 5), _m("rare_essence", 2), _m("golden_flask", 1)),
        _m("xp_boost_potion", 1), influence_cost=13, xp_reward=34, unlock_level=13,
        category="consumable",
    ),
    Recipe(
        "circuit_board_refined", "Refined Circuit Board",
        (_m("raw_silicon", 8), _m("copper_wire", 5)),
        _m("circuit_board", 3), influence_cost=3, xp_reward=13, unlock_level=3,
    ),
    Recipe(
        "code_fragment_synthesis", "Code Fragment Synthesis",
        (_m("digital_dust", 13), _m("logic_core", 2)),
        _m("code_fragment", 5), influence_cost=5, xp_reward=21, unlock_level=5,
    ),
    Recipe(
        "satoshi_forge", "Satoshi's Notebook Forge",
        (
            _m("ancient_code", 13), _m("genesis_block_shard", 5),
            _m("legendary_essence", 3), _m("market_terminal", 1),
        ),
        _m("satoshi_notebook", 1), influence_cost=89, xp_reward=233, unlock_level=34,
        requires_tier="FLAME", category="legendary",
    ),
)

SHOP_CATEGORIES: tuple[ShopCategory, ...] = (
    ShopCategory("tools", "Tools", (
        "laptop_basic", "laptop_pro", "mechanical_keyboard", "microphone", "ring_light",
        "analytics_suite", "social_scheduler", "whiteboard", "market_terminal",
    )),
    ShopCategory("consumables", "Consumables", (
        "coffee", "energy_drink", "power_smoothie", "vacation_ticket",
        "xp_scroll_small", "xp_scroll_medium", "xp_scroll_large",
        "reputation_badge", "viral_moment", "lucky_charm", "fud_shield_potion",
    )),
    ShopCategory("legendary", "Legendary", ("satoshi_notebook", "vitalik_hoodie"),
                 requires_level=25),
)


def default_items() -> ItemRegistry:
    """A fresh registry holding every built-in item."""
    return ItemRegistry(TOOLS + CONSUMABLES + COLLECTIBLES + MATERIALS)
