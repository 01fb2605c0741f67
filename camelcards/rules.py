"""Classification and ordering rules for Camel Cards hands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from . import encoding
from .encoding import StrengthTable
from .hands import Category, Hand

__all__ = [
    "HandKey",
    "Ruleset",
    "STANDARD_RULES",
    "WILDCARD_RULES",
    "classify",
    "compare",
    "hand_key",
]

HandKey = tuple[int, ...]

_CATEGORY_BY_GROUP: Final[dict[int, Category]] = {
    5: Category.FIVE_OF_A_KIND,
    4: Category.FOUR_OF_A_KIND,
}


@dataclass(frozen=True, slots=True)
class Ruleset:
    """Wildcard symbol and strength table used for a ranking run."""

    name: str
    wildcard: str | None
    table: StrengthTable

    def __post_init__(self) -> None:
        if self.wildcard is None:
            return
        if not encoding.is_symbol(self.wildcard):
            raise ValueError(f"wildcard '{self.wildcard}' is not an alphabet symbol")
        if self.table.weakest != self.wildcard:
            raise ValueError(
                f"strength table '{self.table.name}' must rank wildcard '{self.wildcard}' weakest"
            )

    @property
    def uses_wildcard(self) -> bool:
        return self.wildcard is not None

    @classmethod
    def named(cls, name: str) -> "Ruleset":
        """Return the preset registered under ``name``."""

        try:
            return PRESETS[name.lower()]
        except KeyError:
            choices = ", ".join(sorted(PRESETS))
            raise ValueError(f"unknown ruleset '{name}' (choose from {choices})") from None


STANDARD_RULES: Final[Ruleset] = Ruleset(
    name="standard", wildcard=None, table=encoding.STANDARD_TABLE
)
WILDCARD_RULES: Final[Ruleset] = Ruleset(
    name="wildcard", wildcard=encoding.WILDCARD_SYMBOL, table=encoding.WILDCARD_WEAK_TABLE
)
PRESETS: Final[dict[str, Ruleset]] = {
    STANDARD_RULES.name: STANDARD_RULES,
    WILDCARD_RULES.name: WILDCARD_RULES,
}


def classify(hand: Hand, wildcard: str | None = None) -> Category:
    """Return the category of ``hand``.

    Wildcards always join the largest group of real symbols, capped at the
    hand size. Secondary pairs are only ever formed by real symbols, so a
    wildcard never completes a second group.
    """

    counts = hand.counts()
    jokers = counts.pop(wildcard, 0) if wildcard is not None else 0

    best_symbol: str | None = None
    best_group = 0
    for symbol, count in counts.items():
        if count > best_group:
            best_symbol, best_group = symbol, count

    boosted = min(best_group + jokers, encoding.HAND_SIZE)
    if boosted in _CATEGORY_BY_GROUP:
        return _CATEGORY_BY_GROUP[boosted]

    if boosted == 3:
        has_pair = any(
            count == 2 for symbol, count in counts.items() if symbol != best_symbol
        )
        return Category.FULL_HOUSE if has_pair else Category.THREE_OF_A_KIND

    if boosted == 2:
        pairs = sum(1 for count in counts.values() if count == 2)
        return Category.TWO_PAIR if pairs == 2 else Category.ONE_PAIR

    return Category.HIGH_CARD


def hand_key(hand: Hand, rules: Ruleset = STANDARD_RULES) -> HandKey:
    """Return the composite sort key ``(category, s0, ..., s4)`` for ``hand``."""

    category = classify(hand, rules.wildcard)
    return (int(category), *rules.table.strengths(hand))


def compare(a: Hand, b: Hand, rules: Ruleset = STANDARD_RULES) -> int:
    """Return -1, 0 or 1 as ``a`` is weaker than, equal to or stronger than ``b``."""

    key_a = hand_key(a, rules)
    key_b = hand_key(b, rules)
    if key_a == key_b:
        return 0
    return 1 if key_a > key_b else -1
