"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich import box
from rich.table import Table

from ..benchmark import RoundResult
from ..cards import Card
from ..encoding import format_card
from ..evaluation import HandScore
from ..laydown import Laydown, laydown_cost

_SUIT_COLORS = {
    "H": "red",
    "D": "magenta",
    "C": "green",
    "S": "cyan",
}


def styled_card(value: Card) -> str:
    """Return a Rich-markup label for ``value``."""

    code = format_card(value)
    if value.is_joker:
        return f"[bold yellow]{code}[/bold yellow]"
    color = _SUIT_COLORS.get(value.suit.value, "white")
    return f"[{color}]{code}[/{color}]"


def styled_cards(cards: Iterable[Card]) -> str:
    return " ".join(styled_card(value) for value in cards)


def styled_laydown(laydown: Laydown) -> str:
    return " | ".join(styled_cards(run) for run in laydown)


def score_table(hand: Sequence[Card], result: HandScore, label: str) -> Table:
    """Return a Rich table summarising a :class:`HandScore`."""

    table = Table(title=f"Hand Score ({label})", box=box.SIMPLE_HEAVY, show_header=False)
    table.add_column("Field", justify="left", style="bold")
    table.add_column("Value", justify="left")

    table.add_row("Hand", styled_cards(hand))
    if result.score < 0:
        table.add_row("Score", "[red]-1 (too few cards)[/red]")
        return table

    table.add_row("Score", f"{result.score:.6g}")
    table.add_row("Laydowns", str(result.laydown_count))
    table.add_row("Jokers added", str(result.jokers_added))
    if result.best_laydown is not None:
        table.add_row("Best laydown", styled_laydown(result.best_laydown))
        table.add_row("Cards laid", str(result.best_size))
        table.add_row("Cost", str(result.best_cost))
    return table


def laydown_table(laydowns: Sequence[Laydown], label: str, *, limit: int | None = None) -> Table:
    """Return a table of laydowns ordered by cost."""

    table = Table(title=f"Laydowns ({label})", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Cost", justify="right")
    table.add_column("Runs", justify="left")

    shown = laydowns if limit is None else laydowns[:limit]
    for idx, laydown in enumerate(shown, start=1):
        table.add_row(str(idx), f"{laydown_cost(laydown):04d}", styled_laydown(laydown))
    return table


def benchmark_table(results: Sequence[RoundResult], num_decks: int) -> Table:
    table = Table(title=f"Instant Laydown Odds ({num_decks} deck(s))", box=box.SIMPLE_HEAVY)
    table.add_column("Round", justify="center")
    table.add_column("Cards", justify="right")
    table.add_column("Hits", justify="right")
    table.add_column("Simulations", justify="right")
    table.add_column("Instant %", justify="right")
    table.add_column("± SE %", justify="right")

    for result in results:
        table.add_row(
            result.round.label,
            str(result.round.hand_size),
            str(result.hits),
            str(result.simulations),
            f"{result.percent:.3f}",
            f"{100.0 * result.standard_error:.3f}",
        )
    return table
