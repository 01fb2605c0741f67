from __future__ import annotations

import pytest

from camelcards.hands import Bid, Category, Hand, MalformedHand


@pytest.mark.parametrize("code", ["", "AAAA", "AAAAAA", "AAAA1", "aaaaa", "AA AA"])
def test_hand_rejects_malformed_codes(code: str) -> None:
    with pytest.raises(MalformedHand):
        Hand(code)


def test_malformed_hand_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Hand("ZZZZZ")


def test_hand_is_immutable_and_hashable() -> None:
    hand = Hand("KK677")

    with pytest.raises(AttributeError):
        hand.code = "KK678"  # type: ignore[misc]
    assert {hand, Hand("KK677")} == {hand}
    assert list(hand) == ["K", "K", "6", "7", "7"]
    assert hand.counts() == {"K": 2, "6": 1, "7": 2}


def test_from_code_strips_whitespace() -> None:
    assert Hand.from_code("  T55J5\n") == Hand("T55J5")


def test_bid_rejects_negative_amount() -> None:
    with pytest.raises(ValueError):
        Bid.of("32T3K", -1)


def test_category_ordering_and_labels() -> None:
    assert Category.FIVE_OF_A_KIND > Category.FULL_HOUSE > Category.HIGH_CARD
    assert Category.TWO_PAIR.label == "Two Pair"
    assert [int(category) for category in Category] == list(range(1, 8))


@pytest.mark.parametrize("code", [("A",) * 5, ["K", "K", "6", "7", "7"], 12345])
def test_hand_rejects_non_string_codes(code: object) -> None:
    with pytest.raises(MalformedHand, match="must be a string"):
        Hand(code)  # type: ignore[arg-type]
