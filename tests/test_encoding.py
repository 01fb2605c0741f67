from __future__ import annotations

import pytest

from camelcards import encoding


def test_standard_table_orders_ace_highest() -> None:
    table = encoding.STANDARD_TABLE

    assert table.weakest == "2"
    assert table.strongest == "A"
    assert table.strength("T") < table.strength("J") < table.strength("Q")


def test_wildcard_weak_table_puts_wildcard_below_two() -> None:
    table = encoding.WILDCARD_WEAK_TABLE

    assert table.weakest == encoding.WILDCARD_SYMBOL
    assert table.strength("J") < table.strength("2")
    assert table.strength("T") + 1 == table.strength("Q")
    assert table.strongest == "A"


def test_tables_are_bijections_over_the_alphabet() -> None:
    for table in (encoding.STANDARD_TABLE, encoding.WILDCARD_WEAK_TABLE):
        strengths = table.strengths(encoding.SYMBOLS)
        assert sorted(strengths) == list(range(1, len(encoding.SYMBOLS) + 1))


def test_strength_table_rejects_partial_orders() -> None:
    with pytest.raises(ValueError):
        encoding.StrengthTable(name="broken", order="23456789TJQK")


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("32T3K", []),
        ("32t3K", ["t"]),
        ("1X345", ["1", "X"]),
    ],
)
def test_invalid_symbols(code: str, expected: list[str]) -> None:
    assert encoding.invalid_symbols(code) == expected
