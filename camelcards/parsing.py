"""Line-oriented reader for ``CODE BID`` puzzle input."""

from __future__ import annotations

from pathlib import Path

from .hands import Bid, Hand, MalformedHand

__all__ = ["parse_hands", "parse_line", "read_hands"]


def _where(line_number: int | None) -> str:
    return f"line {line_number}: " if line_number is not None else ""


def parse_line(line: str, line_number: int | None = None) -> Bid:
    """Parse a single ``CODE BID`` line into a :class:`Bid`."""

    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedHand(f"{_where(line_number)}expected 'CODE BID', got {line.strip()!r}")
    code, amount_text = tokens
    try:
        hand = Hand(code)
    except MalformedHand as exc:
        raise MalformedHand(f"{_where(line_number)}{exc}") from exc
    if not (amount_text.isascii() and amount_text.isdigit()):
        raise MalformedHand(
            f"{_where(line_number)}bid {amount_text!r} is not a non-negative integer"
        )
    return Bid(hand, int(amount_text))


def parse_hands(text: str) -> list[Bid]:
    """Parse every non-blank line of ``text`` in order."""

    bids: list[Bid] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        bids.append(parse_line(line, line_number))
    return bids


def read_hands(path: Path | str) -> list[Bid]:
    """Read and parse the bids stored in ``path``."""

    return parse_hands(Path(path).read_text(encoding="utf-8"))
