"""Run extraction over hands containing wildcards.

A run is built card by card from a starting card. Each step accepts any
candidate the adjacency rule allows; a Joker is accepted as-is but the rule
keeps checking against the card the Joker stands in for. Identical cards are
only tried once per step so that duplicate physical copies do not produce
repeated runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from .cards import Card
from .rules import FOURSY_MIN_LENGTH, THREESY_MIN_LENGTH

__all__ = [
    "Run",
    "RunConstraints",
    "extract_runs",
    "foursy_constraints",
    "threesy_constraints",
    "extract_foursies",
    "extract_threesies",
    "is_valid_run",
]

Run = tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class RunConstraints:
    """Adjacency policy parameterising :func:`extract_runs`."""

    can_start: Callable[[Card], bool]
    is_next: Callable[[Card, Card], bool]
    replace_joker: Callable[[Card], Card]
    lower_bound: int = 0


def _distinct(cards: Iterable[Card]) -> list[Card]:
    return sorted(set(cards))


def _without(cards: Sequence[Card], value: Card) -> tuple[Card, ...]:
    index = cards.index(value)
    return (*cards[:index], *cards[index + 1 :])


def _continuations(
    hand: tuple[Card, ...],
    last: Card,
    constraints: RunConstraints,
) -> list[Run]:
    continuations: list[Run] = [()]
    for candidate in _distinct(hand):
        if not constraints.is_next(last, candidate):
            continue
        anchor = constraints.replace_joker(last) if candidate.is_joker else candidate
        remaining = _without(hand, candidate)
        for tail in _continuations(remaining, anchor, constraints):
            continuations.append((candidate, *tail))
    return continuations


def extract_runs(
    hand: Iterable[Card],
    min_length: int,
    constraints: RunConstraints,
) -> list[Run]:
    """Return every distinct run of at least ``min_length`` cards in ``hand``."""

    cards = tuple(hand)
    runs: list[Run] = []
    for start in _distinct(cards):
        if not constraints.can_start(start):
            continue
        remaining = _without(cards, start)
        for tail in _continuations(remaining, start, constraints):
            run = (start, *tail)
            if len(run) >= min_length:
                runs.append(run)
    return runs


def foursy_constraints(min_suit_rank: int = 0) -> RunConstraints:
    """Same-suit consecutive ranks; starts restricted to suits ≥ ``min_suit_rank``."""

    return RunConstraints(
        can_start=lambda c: not c.is_joker and c.suit_rank >= min_suit_rank,
        is_next=lambda last, c: c.is_joker or c == last.successor,
        replace_joker=lambda last: last.successor,
        lower_bound=min_suit_rank,
    )


def threesy_constraints(min_rank: int = 0) -> RunConstraints:
    """Same rank with non-decreasing suits; starts restricted to ranks ≥ ``min_rank``."""

    return RunConstraints(
        can_start=lambda c: not c.is_joker and c.face_rank >= min_rank,
        is_next=lambda last, c: (
            c.is_joker or (c.face_rank == last.face_rank and c.suit_rank >= last.suit_rank)
        ),
        replace_joker=lambda last: last,
        lower_bound=min_rank,
    )


def extract_foursies(hand: Iterable[Card], min_suit_rank: int = 0) -> list[Run]:
    return extract_runs(hand, FOURSY_MIN_LENGTH, foursy_constraints(min_suit_rank))


def extract_threesies(hand: Iterable[Card], min_rank: int = 0) -> list[Run]:
    return extract_runs(hand, THREESY_MIN_LENGTH, threesy_constraints(min_rank))


def is_valid_run(run: Sequence[Card], min_length: int, constraints: RunConstraints) -> bool:
    """Check ``run`` card by card against ``constraints``."""

    if len(run) < min_length or not run or not constraints.can_start(run[0]):
        return False
    last = run[0]
    for candidate in run[1:]:
        if not constraints.is_next(last, candidate):
            return False
        last = constraints.replace_joker(last) if candidate.is_joker else candidate
    return True
