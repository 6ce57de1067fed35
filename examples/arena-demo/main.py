"""Pump Arena — headless bot run.

A scripted player buys supplies, plays mini-games, crafts and answers
random events for a number of simulated minutes on a ManualClock, then
prints what happened. Pass --save to persist the record to a JSON file
and resume it on the next run.

Run:
    uv run python main.py --ticks 600 --save arena.json
"""
from __future__ import annotations

import argparse
import logging

from arena import ArenaConfig, EventConfig, JsonFileStorage, ManualClock, PlayerState
from arena_game import PumpArena
from arena_signal import signals

SHOPPING_LIST = ("coffee", "laptop_basic", "xp_scroll_small", "lucky_charm")
MINIGAMES = ("shill_quiz", "code_sprint", "chart_analysis")


# ---------------------------------------------------------------------------
# Bot
# ---------------------------------------------------------------------------

class Bot:
    """Picks one command per tick from a fixed routine."""

    def __init__(self, game: PumpArena) -> None:
        self.game = game
        self.log: list[str] = []
        self._turn = 0

    def act(self) -> None:
        game = self.game
        self._turn += 1

        active = game.get_active_event()
        if active is not None:
            # Bold first choice; the engine rejects it if stats fall short.
            result = game.handle_choice(active.definition.choices[0].id)
            if not result.success and result.error == "precondition":
                result = game.handle_choice(active.definition.fallback.id)
            self._record(f"event {active.id}", result)
            return

        step = self._turn % 4
        if step == 0:
            item_id = SHOPPING_LIST[(self._turn // 4) % len(SHOPPING_LIST)]
            self._record(f"buy {item_id}", game.buy_item(item_id))
        elif step == 1:
            game_id = MINIGAMES[(self._turn // 4) % len(MINIGAMES)]
            if game.start_minigame(game_id).success:
                score = game.session.random.uniform(40, 100)
                self._record(f"play {game_id}", game.complete_minigame(score, score > 95))
        elif step == 2:
            for item_id in ("coffee", "xp_scroll_small", "lucky_charm"):
                if game.has_item(item_id):
                    self._record(f"use {item_id}", game.use_item(item_id))
                    break
        else:
            for entry in game.get_available_recipes():
                if entry.can_craft:
                    self._record(f"craft {entry.recipe.id}", game.craft(entry.recipe.id))
                    break

    def _record(self, label: str, result) -> None:
        mark = "ok " if result.success else "-- "
        self.log.append(f"{mark}{label}: {result.message}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    parser = argparse.ArgumentParser(description="Pump Arena headless bot run")
    parser.add_argument("--ticks", type=int, default=300,
                        help="Simulated seconds to run (default: 300)")
    parser.add_argument("--seed", type=int, default=7, help="RNG seed (default: 7)")
    parser.add_argument("--tokens", type=int, default=1000,
                        help="Starting tokens for a new player (default: 1000)")
    parser.add_argument("--event-chance", type=float, default=0.15,
                        help="Base random event chance per tick (default: 0.15)")
    parser.add_argument("--save", default=None, help="JSON file to load from and save to")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    clock = ManualClock(0.0)
    config = ArenaConfig(events=EventConfig(base_trigger_chance=args.event_chance))
    if args.save:
        storage = JsonFileStorage(args.save)
        fresh = storage.load() is None
        game = PumpArena.load(storage, clock=clock, seed=args.seed, config=config)
        if fresh:
            game.state.tokens = args.tokens
    else:
        game = PumpArena(
            PlayerState(name="bot", tokens=args.tokens),
            clock=clock, seed=args.seed, config=config,
        )

    notices: list[str] = []
    game.bus.subscribe(signals.LEVEL_UP, lambda _, d: notices.append(f"level {d['level']}"))
    game.bus.subscribe(signals.TIER_UP, lambda _, d: notices.append(f"tier {d['tier']}"))
    game.bus.subscribe(
        signals.COLLECTIBLE_FOUND, lambda _, d: notices.append(f"found {d['name']}")
    )
    game.bus.subscribe(
        signals.EVENT_TRIGGERED, lambda _, d: notices.append(f"event {d['name']}")
    )

    engine = game.make_engine()
    bot = Bot(game)
    for _ in range(args.ticks):
        clock.advance(1.0)
        engine.step()
        bot.act()

    st = game.state
    print("=" * 60)
    print(f"  PUMP ARENA: {args.ticks} simulated seconds, seed {args.seed}")
    print("=" * 60)
    print(f"  level {st.level} ({game.session.tier.name})  xp {st.xp}")
    print(f"  tokens {st.tokens}  influence {st.influence}/{st.max_influence}"
          f"  reputation {st.reputation}")
    print(f"  statistics: {st.statistics}")
    print(f"  inventory: {[(e.item_id, e.quantity) for e in st.inventory.entries()]}")
    print(f"\n  Notices ({len(notices)}):")
    for notice in notices:
        print(f"    {notice}")
    print(f"\n  Last commands ({len(bot.log)} total):")
    for line in bot.log[-20:]:
        print(f"    {line}")


if __name__ == "__main__":
    main()
