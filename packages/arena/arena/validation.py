"""Input checks run before any state is read."""
from __future__ import annotations

import numbers
from typing import Any

from arena.types import ValidationError


def validate_id(value: Any, max_length: int = 100, label: str = "item ID") -> str:
    if not isinstance(value, str) or not value or len(value) > max_length:
        raise ValidationError(f"Invalid {label}", field=label)
    return value


def validate_quantity(value: Any, low: int = 1, high: int = 999) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError("Quantity must be a whole number", field="quantity")
    if not low <= value <= high:
        raise ValidationError(
            f"Quantity must be between {low} and {high}", field="quantity"
        )
    return int(value)
