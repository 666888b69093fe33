"""Enumeration of complete laydowns for a meld requirement."""

from __future__ import annotations

from typing import Iterable, Sequence

from .cards import Card
from .melds import Run, extract_foursies, extract_threesies
from .rules import Requirement

__all__ = [
    "Laydown",
    "enumerate_laydowns",
    "has_laydown",
    "remove_cards",
    "laydown_size",
    "laydown_cost",
]

Laydown = tuple[Run, ...]


def remove_cards(hand: Sequence[Card], cards: Iterable[Card]) -> tuple[Card, ...]:
    """Return ``hand`` with one copy of each card in ``cards`` removed."""

    remaining = list(hand)
    for value in cards:
        try:
            remaining.remove(value)
        except ValueError as exc:
            raise ValueError(f"{value!r} not present in hand") from exc
    return tuple(remaining)


def laydown_size(laydown: Laydown) -> int:
    return sum(len(run) for run in laydown)


def laydown_cost(laydown: Laydown) -> int:
    """Return the summed face value of every card in ``laydown``."""

    return sum(value.face_value for run in laydown for value in run)


def _enumerate(
    num_foursies: int,
    num_threesies: int,
    hand: tuple[Card, ...],
    min_suit_rank: int,
    min_rank: int,
) -> list[Laydown]:
    if num_foursies == 0 and num_threesies == 0:
        return [()]

    # Foursies are always placed before any threesy.
    if num_foursies > 0:
        runs = extract_foursies(hand, min_suit_rank)
    else:
        runs = extract_threesies(hand, min_rank)

    laydowns: list[Laydown] = []
    for run in runs:
        remaining = remove_cards(hand, run)
        if num_foursies > 0:
            tails = _enumerate(num_foursies - 1, num_threesies, remaining, run[0].suit_rank, min_rank)
        else:
            tails = _enumerate(num_foursies, num_threesies - 1, remaining, min_suit_rank, run[0].face_rank)
        laydowns.extend((run, *tail) for tail in tails)
    return laydowns


def enumerate_laydowns(num_foursies: int, num_threesies: int, hand: Iterable[Card]) -> list[Laydown]:
    """Return every way to lay down the required foursies and threesies.

    Runs of the same type appear in non-decreasing order of their defining
    suit (foursies) or rank (threesies), which keeps the same pair of runs
    from being reported in both orders. An empty list means the hand cannot
    meet the requirement.
    """

    requirement = Requirement(num_foursies, num_threesies)
    return _enumerate(requirement.num_foursies, requirement.num_threesies, tuple(hand), 0, 0)


def has_laydown(num_foursies: int, num_threesies: int, hand: Iterable[Card]) -> bool:
    return bool(enumerate_laydowns(num_foursies, num_threesies, hand))
