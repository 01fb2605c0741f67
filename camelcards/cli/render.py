"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Mapping

from rich.console import RenderableType
from rich.panel import Panel

from .. import encoding
from ..hands import Category, Hand
from ..ranking import Ranking
from .views import HistogramView, RankingView

_FACE_SYMBOLS = frozenset("TJQKA")


def format_hand(hand: Hand, wildcard: str | None = None) -> str:
    """Return a Rich-rendered label for ``hand``."""

    parts: list[str] = []
    for symbol in hand:
        if symbol == wildcard:
            parts.append(f"[magenta]{symbol}[/magenta]")
        elif symbol in _FACE_SYMBOLS:
            parts.append(f"[yellow]{symbol}[/yellow]")
        else:
            parts.append(symbol)
    return "".join(parts)


def render_ranking(
    ranking: Ranking,
    *,
    limit: int | None = None,
    strongest_first: bool = False,
    title: str = "Camel Cards",
) -> RenderableType:
    """Return a Rich panel listing ``ranking``."""

    wildcard = ranking.rules.wildcard
    view = RankingView(
        ranking=ranking,
        hand_formatter=lambda hand: format_hand(hand, wildcard),
        limit=limit,
        strongest_first=strongest_first,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")


def render_histogram(histogram: Mapping[Category, int], *, title: str = "Categories") -> RenderableType:
    """Return a Rich panel with a bar per category."""

    return Panel(HistogramView(histogram=histogram).render(), title=title, border_style="green")


def describe_rules(wildcard: str | None) -> str:
    if wildcard is None:
        return "standard rules"
    return f"{encoding.SYMBOL_NAMES[wildcard]}s ({wildcard}) are wild"
