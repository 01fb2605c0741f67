"""Typer entry-point wiring for the Camel Cards CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import batch, parsing
from ..hands import Bid, MalformedHand
from ..ranking import Ranking, rank_all
from ..rules import PRESETS, Ruleset
from .render import describe_rules, render_histogram, render_ranking

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("camelcards")

_RULES_HELP = f"Ruleset to apply ({', '.join(sorted(PRESETS))})."
_INPUT_HELP = "File with one 'CODE BID' pair per line."


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _resolve_rules(name: str) -> Ruleset:
    try:
        return Ruleset.named(name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--rules") from exc


def _load_bids(path: Path) -> list[Bid]:
    try:
        bids = parsing.read_hands(path)
    except MalformedHand as exc:
        logger.debug("rejected %s: %s", path, exc)
        err_console.print(f"[red]Malformed input in {path}[/red]: {exc}")
        raise typer.Exit(code=1) from exc
    logger.debug("read %d hand(s) from %s", len(bids), path)
    return bids


def _rank_file(path: Path, rules_name: str, verbose: bool) -> Ranking:
    _configure_logging(verbose)
    rules = _resolve_rules(rules_name)
    bids = _load_bids(path)
    logger.debug("ranking with %s", describe_rules(rules.wildcard))
    return rank_all(bids, rules)


@app.command()
def winnings(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help=_INPUT_HELP),
    rules: str = typer.Option("standard", "--rules", "-r", help=_RULES_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Print the total winnings of every hand in PATH."""

    ranking = _rank_file(path, rules, verbose)
    console.print(ranking.winnings(), highlight=False)


@app.command()
def rank(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help=_INPUT_HELP),
    rules: str = typer.Option("standard", "--rules", "-r", help=_RULES_HELP),
    limit: int | None = typer.Option(None, min=1, help="Show at most this many rows."),
    reverse: bool = typer.Option(False, "--reverse", help="List the strongest hand first."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Show every hand with its rank, category and contribution."""

    ranking = _rank_file(path, rules, verbose)
    console.print(render_ranking(ranking, limit=limit, strongest_first=reverse))


@app.command()
def stats(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help=_INPUT_HELP),
    rules: str = typer.Option("standard", "--rules", "-r", help=_RULES_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Show how many hands fall into each category."""

    _configure_logging(verbose)
    ruleset = _resolve_rules(rules)
    bids = _load_bids(path)
    histogram = batch.category_histogram([bid.hand for bid in bids], ruleset)
    console.print(render_histogram(histogram, title=f"Categories ({describe_rules(ruleset.wildcard)})"))


def main() -> None:
    """Entry-point for ``python -m camelcards.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
