"""Ranking of a full set of bids and the winnings it produces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, overload

from .hands import Bid, Category, Hand
from .rules import STANDARD_RULES, Ruleset, hand_key

__all__ = [
    "AmbiguousWeightLookup",
    "RankedEntry",
    "Ranking",
    "rank_all",
    "total_winnings",
]


class AmbiguousWeightLookup(LookupError):
    """Raised when a hand code matches more than one ranked entry."""


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """A bid together with its 1-based position in the sorted collection."""

    rank: int
    bid: Bid
    category: Category

    @property
    def hand(self) -> Hand:
        return self.bid.hand

    @property
    def amount(self) -> int:
        return self.bid.amount

    @property
    def winnings(self) -> int:
        return self.rank * self.bid.amount


@dataclass(frozen=True, slots=True)
class Ranking(Sequence[RankedEntry]):
    """Ordered, immutable result of ranking a collection, weakest first."""

    rules: Ruleset
    entries: tuple[RankedEntry, ...]

    @overload
    def __getitem__(self, index: int) -> RankedEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[RankedEntry, ...]: ...

    def __getitem__(self, index: int | slice) -> RankedEntry | tuple[RankedEntry, ...]:
        return self.entries[index]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(self.entries)

    def winnings(self) -> int:
        """Return the total winnings of the ranked collection."""

        return total_winnings(self.entries)

    def entry_for(self, code: str) -> RankedEntry:
        """Return the single entry whose hand reads ``code``.

        Raises ``KeyError`` when no entry matches and
        ``AmbiguousWeightLookup`` when several do.
        """

        matches = [entry for entry in self.entries if entry.hand.code == code]
        if not matches:
            raise KeyError(code)
        if len(matches) > 1:
            ranks = ", ".join(str(entry.rank) for entry in matches)
            raise AmbiguousWeightLookup(f"hand '{code}' appears at ranks {ranks}")
        return matches[0]


def rank_all(bids: Iterable[Bid], rules: Ruleset = STANDARD_RULES) -> Ranking:
    """Sort ``bids`` weakest first and assign dense 1-based ranks.

    ``sorted`` is stable, so symbol-identical hands keep their input order.
    """

    keyed = sorted(
        ((hand_key(bid.hand, rules), bid) for bid in bids), key=lambda item: item[0]
    )
    entries = tuple(
        RankedEntry(rank=position, bid=bid, category=Category(key[0]))
        for position, (key, bid) in enumerate(keyed, start=1)
    )
    return Ranking(rules=rules, entries=entries)


def total_winnings(entries: Iterable[RankedEntry]) -> int:
    """Return the sum of ``rank * amount`` over ``entries``."""

    return sum(entry.winnings for entry in entries)
