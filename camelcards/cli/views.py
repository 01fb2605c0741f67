"""Composable view primitives for the Camel Cards CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..hands import Category, Hand
from ..ranking import Ranking


@dataclass(slots=True)
class RankingView:
    """Renderable table of ranked bids."""

    ranking: Ranking
    hand_formatter: Callable[[Hand], str]
    limit: int | None = None
    strongest_first: bool = False

    def _summary_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Rules[/cyan]: {self.ranking.rules.name}")
        grid.add_row(f"[cyan]Hands[/cyan]: {len(self.ranking)}")
        grid.add_row(f"[cyan]Winnings[/cyan]: [bold]{self.ranking.winnings()}[/bold]")
        return Panel(grid, title="Summary", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Rank", justify="right", style="bold")
        table.add_column("Hand", justify="left")
        table.add_column("Category", justify="left")
        table.add_column("Bid", justify="right")
        table.add_column("Rank × Bid", justify="right")

        entries = list(self.ranking)
        if self.strongest_first:
            entries.reverse()
        if self.limit is not None:
            entries = entries[: self.limit]

        for entry in entries:
            table.add_row(
                str(entry.rank),
                self.hand_formatter(entry.hand),
                entry.category.label,
                str(entry.amount),
                str(entry.winnings),
            )

        return Group(table, self._summary_panel())


@dataclass(slots=True)
class HistogramView:
    """Renderable bar chart of hands per category."""

    histogram: Mapping[Category, int]
    width: int = 40

    def render(self) -> RenderableType:
        table = Table(box=box.SIMPLE_HEAVY, expand=False)
        table.add_column("Category", justify="left", style="bold")
        table.add_column("Hands", justify="right")
        table.add_column("", justify="left")

        peak = max(self.histogram.values(), default=0)
        for category in sorted(self.histogram, reverse=True):
            count = self.histogram[category]
            bar_length = round(self.width * count / peak) if peak else 0
            table.add_row(category.label, str(count), f"[green]{'█' * bar_length}[/green]")
        return table
