"""Symbol alphabet and strength tables for Camel Cards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Iterable, Mapping

HAND_SIZE: Final[int] = 5
SYMBOLS: Final[str] = "23456789TJQKA"
WILDCARD_SYMBOL: Final[str] = "J"
SYMBOL_NAMES: Final[dict[str, str]] = {
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
    "8": "Eight",
    "9": "Nine",
    "T": "Ten",
    "J": "Jack",
    "Q": "Queen",
    "K": "King",
    "A": "Ace",
}


@dataclass(frozen=True, slots=True)
class StrengthTable:
    """Immutable mapping from symbol to positional strength."""

    name: str
    order: str
    _strengths: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if sorted(self.order) != sorted(SYMBOLS):
            raise ValueError(f"strength order '{self.order}' is not a permutation of {SYMBOLS}")
        strengths = {symbol: idx + 1 for idx, symbol in enumerate(self.order)}
        object.__setattr__(self, "_strengths", strengths)

    def strength(self, symbol: str) -> int:
        """Return the strength of ``symbol``; weakest is 1."""

        return self._strengths[symbol]

    def strengths(self, symbols: Iterable[str]) -> tuple[int, ...]:
        """Return the per-position strengths of ``symbols``."""

        return tuple(self._strengths[symbol] for symbol in symbols)

    @property
    def weakest(self) -> str:
        return self.order[0]

    @property
    def strongest(self) -> str:
        return self.order[-1]


def _wildcard_weak_order(wildcard: str) -> str:
    return wildcard + SYMBOLS.replace(wildcard, "")


STANDARD_TABLE: Final[StrengthTable] = StrengthTable(name="standard", order=SYMBOLS)
WILDCARD_WEAK_TABLE: Final[StrengthTable] = StrengthTable(
    name="wildcard-weak", order=_wildcard_weak_order(WILDCARD_SYMBOL)
)


def is_symbol(symbol: str) -> bool:
    """Return ``True`` when ``symbol`` belongs to the fixed alphabet."""

    return len(symbol) == 1 and symbol in SYMBOLS


def invalid_symbols(code: str) -> list[str]:
    """Return the characters of ``code`` that are not alphabet symbols."""

    return [symbol for symbol in code if not is_symbol(symbol)]
