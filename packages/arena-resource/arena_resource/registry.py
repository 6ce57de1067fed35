"""ItemRegistry class."""
from __future__ import annotations

from typing import Iterable

from arena_resource.types import ItemDef, ItemKind


class ItemRegistry:
    """Stores item definitions, keyed by id."""

    def __init__(self, items: Iterable[ItemDef] = ()) -> None:
        self._definitions: dict[str, ItemDef] = {}
        for item in items:
            self.define(item)

    def define(self, item: ItemDef) -> None:
        """Register an item. Overwrites if the id exists."""
        self._definitions[item.id] = item

    def get(self, item_id: str) -> ItemDef:
        """Look up definition. Raises KeyError if not defined."""
        if item_id not in self._definitions:
            raise KeyError(item_id)
        return self._definitions[item_id]

    def find(self, item_id: str) -> ItemDef | None:
        return self._definitions.get(item_id)

    def has(self, item_id: str) -> bool:
        return item_id in self._definitions

    def items(self, kind: ItemKind | None = None) -> list[ItemDef]:
        """All definitions in registration order, optionally of one kind."""
        return [
            d for d in self._definitions.values() if kind is None or d.kind is kind
        ]

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._definitions
