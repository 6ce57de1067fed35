"""Fibonacci price and reward model.

Every monetary figure in the engine comes from here. Item records may
carry an explicit ``price``/``sell_price`` as a legacy override; content
without one is priced from its rarity.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

FIB: tuple[int, ...] = (
    0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610, 987, 1597, 2584, 4181,
)

PRICE_UNIT = 10

# Fallback pair for rarities the table does not know.
UNKNOWN_PRICE = (100, 25)


def fib(n: int) -> int:
    """n-th term of the precomputed sequence, clamped at both ends."""
    if n < 0:
        return 0
    if n >= len(FIB):
        return FIB[-1]
    return FIB[n]


class Rarity(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def fib_index(self) -> int:
        return _RARITY_FIB_INDEX[self]

    @classmethod
    def parse(cls, value: str | Rarity) -> Rarity:
        if isinstance(value, Rarity):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"unknown rarity {value!r}") from None


_RARITY_FIB_INDEX = {
    Rarity.COMMON: 7,
    Rarity.UNCOMMON: 9,
    Rarity.RARE: 11,
    Rarity.EPIC: 13,
    Rarity.LEGENDARY: 15,
}


@dataclass(frozen=True)
class PricePair:
    buy: int
    sell: int


def price_for_rarity(rarity: Rarity | str) -> PricePair:
    """buy = fib(idx) * 10, sell = fib(idx - 2) * 10."""
    try:
        idx = Rarity.parse(rarity).fib_index
    except ValueError:
        return PricePair(*UNKNOWN_PRICE)
    return PricePair(buy=fib(idx) * PRICE_UNIT, sell=fib(idx - 2) * PRICE_UNIT)


def tier_discount(tier_index: int) -> float:
    """fib(tier) percent: 0%, 1%, 1%, 2%, 3% for EMBER..INFERNO."""
    return fib(max(0, tier_index)) / 100


def discounted_price(base: int, discount: float) -> int:
    if base < 0:
        raise ValueError(f"base must be >= 0, got {base}")
    if not 0.0 <= discount < 1.0:
        raise ValueError(f"discount must be in [0, 1), got {discount}")
    # round() first: 0.29 * 100 is 28.999999999999996 in binary floats
    return math.floor(round(base * (1 - discount), 9))
