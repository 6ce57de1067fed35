"""Tests for arena.validation."""
from __future__ import annotations

import pytest

from arena import ValidationError
from arena.validation import validate_id, validate_quantity


class TestValidateId:
    def test_accepts(self) -> None:
        validate_id("energy_drink")

    @pytest.mark.parametrize("value", ["", None, 42, "x" * 101])
    def test_rejects(self, value: object) -> None:
        with pytest.raises(ValidationError, match="Invalid item ID"):
            validate_id(value)  # type: ignore[arg-type]

    def test_label(self) -> None:
        with pytest.raises(ValidationError, match="Invalid recipe ID"):
            validate_id("", label="recipe ID")


class TestValidateQuantity:
    @pytest.mark.parametrize("value", [1, 50, 999])
    def test_accepts(self, value: int) -> None:
        validate_quantity(value)

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_rejects_non_integers(self, value: object) -> None:
        with pytest.raises(ValidationError, match="whole number"):
            validate_quantity(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -1, 1000])
    def test_rejects_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError, match="between 1 and 999"):
            validate_quantity(value)
