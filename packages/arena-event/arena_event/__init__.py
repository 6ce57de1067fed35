"""arena-event - Random events with weighted selection and timed choices."""
from __future__ import annotations

from arena_event.catalog import DEFAULT_EVENTS
from arena_event.guards import EventGuards
from arena_event.scheduler import EventEngine, weighted_choice
from arena_event.systems import make_event_system
from arena_event.types import ActiveEvent, Choice, EventDef, EventType, Outcome

__all__ = [
    "ActiveEvent",
    "Choice",
    "DEFAULT_EVENTS",
    "EventDef",
    "EventEngine",
    "EventGuards",
    "EventType",
    "Outcome",
    "make_event_system",
    "weighted_choice",
]
