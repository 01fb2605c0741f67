"""Vectorised classification helpers for large hand collections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from . import encoding
from .encoding import StrengthTable
from .hands import Category, Hand
from .rules import STANDARD_RULES, Ruleset

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

__all__ = ["category_histogram", "classify_many", "encode_hands"]

_SYMBOL_INDEX = {symbol: idx for idx, symbol in enumerate(encoding.SYMBOLS)}


def _symbol_indices(hands: Sequence[Hand]) -> "NDArray[np.uint8]":
    indices = np.zeros((len(hands), encoding.HAND_SIZE), dtype=np.uint8)
    for row, hand in enumerate(hands):
        indices[row] = [_SYMBOL_INDEX[symbol] for symbol in hand]
    return indices


def encode_hands(hands: Sequence[Hand], table: StrengthTable) -> "NDArray[np.uint8]":
    """Return an ``(N, 5)`` array of per-position strengths under ``table``."""

    encoded = np.zeros((len(hands), encoding.HAND_SIZE), dtype=np.uint8)
    for row, hand in enumerate(hands):
        encoded[row] = table.strengths(hand)
    return encoded


def classify_many(hands: Sequence[Hand], rules: Ruleset = STANDARD_RULES) -> "NDArray[np.uint8]":
    """Return the category of every hand, matching :func:`rules.classify`."""

    if not hands:
        return np.zeros(0, dtype=np.uint8)

    indices = _symbol_indices(hands)
    one_hot = indices[:, :, None] == np.arange(len(encoding.SYMBOLS), dtype=np.uint8)
    counts = one_hot.sum(axis=1, dtype=np.int16)

    if rules.wildcard is not None:
        wild_column = _SYMBOL_INDEX[rules.wildcard]
        jokers = counts[:, wild_column].copy()
        counts[:, wild_column] = 0
    else:
        jokers = np.zeros(len(hands), dtype=np.int16)

    best_group = counts.max(axis=1)
    boosted = np.minimum(best_group + jokers, encoding.HAND_SIZE)
    pairs = (counts == 2).sum(axis=1)
    # Pairs other than the group the wildcards were added to.
    side_pairs = pairs - (best_group == 2)

    categories = np.select(
        [
            boosted == 5,
            boosted == 4,
            (boosted == 3) & (side_pairs >= 1),
            boosted == 3,
            (boosted == 2) & (pairs == 2),
            boosted == 2,
        ],
        [
            int(Category.FIVE_OF_A_KIND),
            int(Category.FOUR_OF_A_KIND),
            int(Category.FULL_HOUSE),
            int(Category.THREE_OF_A_KIND),
            int(Category.TWO_PAIR),
            int(Category.ONE_PAIR),
        ],
        default=int(Category.HIGH_CARD),
    )
    return categories.astype(np.uint8)


def category_histogram(hands: Sequence[Hand], rules: Ruleset = STANDARD_RULES) -> dict[Category, int]:
    """Return how many hands fall into each category, weakest first."""

    counts = np.bincount(classify_many(hands, rules), minlength=len(Category) + 1)
    return {category: int(counts[category]) for category in Category}
