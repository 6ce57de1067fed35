"""Signal names published by the engine. Payloads are plain keyword data."""
from __future__ import annotations

# item_id, name, rarity, achievement, lore, quantity, first_find
COLLECTIBLE_FOUND = "collectible_found"
EVENT_TRIGGERED = "event_triggered"  # event_id, name, type, choices, started_at, expires_at
EVENT_RESOLVED = "event_resolved"  # event_id, choice_id, success, timed_out, result
LEVEL_UP = "level_up"  # level, skill_points, max_influence, tier
TIER_UP = "tier_up"  # tier, previous_tier

ALL = (COLLECTIBLE_FOUND, EVENT_TRIGGERED, EVENT_RESOLVED, LEVEL_UP, TIER_UP)
