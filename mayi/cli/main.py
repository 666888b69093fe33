"""Typer entry-point wiring for the May I CLI."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import benchmark, encoding, evaluation, laydown
from ..cards import Card, InvalidCard, random_hand
from ..rules import InvalidRequirement, Requirement
from .render import benchmark_table, laydown_table, score_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

_LOG_FORMAT = "%(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _parse_hand(tokens: Sequence[str]) -> list[Card]:
    try:
        return encoding.hand_from(tokens, strict=True)
    except (encoding.InvalidCardCode, InvalidCard) as exc:
        raise typer.BadParameter(str(exc), param_hint="CARDS") from exc


def _requirement(foursies: int, threesies: int) -> Requirement:
    try:
        return Requirement(foursies, threesies)
    except InvalidRequirement as exc:
        raise typer.BadParameter(str(exc)) from exc


def _laydown_sort_key(entry: laydown.Laydown) -> tuple[int, str]:
    text = " | ".join(encoding.format_hand(run) for run in entry)
    return laydown.laydown_cost(entry), text


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log search details to stderr."),
) -> None:
    """Evaluate May I hands against meld requirements."""

    _configure_logging(verbose)


@app.command()
def score(
    cards: List[str] = typer.Argument(..., help="Cards in RRS notation, e.g. 05D 11S JJJ."),
    foursies: int = typer.Option(1, "--foursies", "-f", min=0, help="Required foursies."),
    threesies: int = typer.Option(1, "--threesies", "-t", min=0, help="Required threesies."),
) -> None:
    """Score a hand against the required melds."""

    hand = _parse_hand(cards)
    requirement = _requirement(foursies, threesies)
    result = evaluation.evaluate_hand(hand, requirement.num_foursies, requirement.num_threesies)
    console.print(score_table(hand, result, requirement.label))


@app.command("laydowns")
def laydowns_cli(
    cards: List[str] = typer.Argument(..., help="Cards in RRS notation, e.g. 05D 11S JJJ."),
    foursies: int = typer.Option(1, "--foursies", "-f", min=0, help="Required foursies."),
    threesies: int = typer.Option(1, "--threesies", "-t", min=0, help="Required threesies."),
    limit: int = typer.Option(20, min=1, help="Maximum number of laydowns to list."),
) -> None:
    """List every laydown the hand can make, cheapest first."""

    hand = _parse_hand(cards)
    requirement = _requirement(foursies, threesies)
    found = laydown.enumerate_laydowns(requirement.num_foursies, requirement.num_threesies, hand)
    if not found:
        console.print(f"[yellow]No laydown for {requirement.label}.[/yellow]")
        return
    ordered = sorted(found, key=_laydown_sort_key)
    console.print(laydown_table(ordered, requirement.label, limit=limit))
    console.print(f"[cyan]{len(found)} laydown(s) found.[/cyan]")


@app.command()
def deal(
    cards: int = typer.Option(10, "--cards", "-n", min=0, help="Number of cards to deal."),
    decks: int = typer.Option(2, min=1, help="Number of decks shuffled together."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
) -> None:
    """Deal a random hand and print it in RRS notation."""

    try:
        hand = random_hand(cards, decks, random.Random(seed))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--cards") from exc
    typer.echo(encoding.format_hand(hand))


@app.command()
def odds(
    simulations: int = typer.Option(10_000, min=1, help="Hands dealt per round."),
    decks: int = typer.Option(2, min=1, help="Number of decks shuffled together."),
    workers: int = typer.Option(1, min=1, help="Worker processes sharing the simulations."),
    seed: int | None = typer.Option(None, help="Random seed for the benchmark."),
) -> None:
    """Estimate how often a dealt hand can lay down immediately in each round."""

    config = benchmark.BenchmarkConfig(
        simulations=simulations,
        num_decks=decks,
        workers=workers,
        seed=seed,
    )
    results = benchmark.run_instant_laydown_benchmark(config)
    console.print(benchmark_table(results, decks))


def main() -> None:
    """Entry-point for ``python -m mayi.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
