"""Hand and bid value objects."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from . import encoding

__all__ = ["Bid", "Category", "Hand", "MalformedHand"]


class MalformedHand(ValueError):
    """Raised when a hand code or bid cannot be accepted."""


class Category(IntEnum):
    """Structural tier of a hand, weakest first."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class Hand:
    """Exactly five alphabet symbols in dealt order."""

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise MalformedHand(f"hand code must be a string, got {type(self.code).__name__}")
        if len(self.code) != encoding.HAND_SIZE:
            raise MalformedHand(
                f"hand '{self.code}' has {len(self.code)} symbols, expected {encoding.HAND_SIZE}"
            )
        bad = encoding.invalid_symbols(self.code)
        if bad:
            raise MalformedHand(f"hand '{self.code}' contains unknown symbol(s): {''.join(bad)}")

    @classmethod
    def from_code(cls, code: str) -> "Hand":
        return cls(code.strip())

    def __iter__(self) -> Iterator[str]:
        return iter(self.code)

    def __len__(self) -> int:
        return len(self.code)

    def __str__(self) -> str:
        return self.code

    def counts(self) -> Counter[str]:
        """Return the multiset of symbols in the hand."""

        return Counter(self.code)


@dataclass(frozen=True, slots=True)
class Bid:
    """A hand paired with its weight."""

    hand: Hand
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("bid amount must be non-negative")

    @classmethod
    def of(cls, code: str, amount: int) -> "Bid":
        return cls(Hand.from_code(code), amount)
