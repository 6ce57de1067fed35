"""Built-in mini-games."""
from __future__ import annotations

from arena_minigame.types import MinigameDef, RewardBundle

DEFAULT_MINIGAMES: tuple[MinigameDef, ...] = (
    MinigameDef(
        "code_sprint", "Code Sprint", "dev", 10,
        RewardBundle(xp=50, tokens=20), RewardBundle(xp=150, tokens=60),
        "Type code snippets as fast as possible!",
    ),
    MinigameDef(
        "chart_analysis", "Chart Analysis", "str", 10,
        RewardBundle(xp=50, tokens=25), RewardBundle(xp=150, tokens=75),
        "Identify the pattern before time runs out!",
    ),
    MinigameDef(
        "shill_quiz", "Crypto Quiz", "str", 5,
        RewardBundle(xp=30, tokens=15), RewardBundle(xp=100, tokens=50),
        "Test your crypto knowledge!",
    ),
    MinigameDef(
        "raid_simulator", "Raid Simulator", "com", 15,
        RewardBundle(xp=60, tokens=30), RewardBundle(xp=180, tokens=100),
        "Hit the targets at the perfect moment!",
    ),
)
