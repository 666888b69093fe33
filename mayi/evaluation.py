"""Heuristic scoring of a hand against a meld requirement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Final, Iterable

from .cards import Card, joker
from .laydown import Laydown, enumerate_laydowns, laydown_cost, laydown_size
from .rules import Requirement

__all__ = ["TOO_FEW_CARDS", "HandScore", "evaluate_hand", "score_hand"]

logger = logging.getLogger(__name__)

TOO_FEW_CARDS: Final[float] = -1.0
SIZE_WEIGHT: Final[float] = 10.0
BREADTH_DIVISOR: Final[float] = 5.0
COST_DIVISOR: Final[float] = 50.0
JOKER_PENALTY: Final[float] = 10.0


@dataclass(frozen=True, slots=True)
class HandScore:
    """Score of a hand together with the laydown that produced it."""

    score: float
    laydown_count: int = 0
    best_laydown: Laydown | None = None
    best_size: int = 0
    best_cost: int = 0
    jokers_added: int = 0

    @property
    def can_lay_down(self) -> bool:
        """Return ``True`` when the hand meets the requirement as dealt."""

        return self.laydown_count > 0 and self.jokers_added == 0


def _score_laydowns(laydowns: list[Laydown]) -> HandScore:
    best: Laydown = laydowns[0]
    best_size = 0
    for laydown in laydowns:
        size = laydown_size(laydown)
        if size > best_size:
            best, best_size = laydown, size
    best_cost = laydown_cost(best)
    score = SIZE_WEIGHT * best_size + len(laydowns) / BREADTH_DIVISOR + best_cost / COST_DIVISOR
    return HandScore(
        score=score,
        laydown_count=len(laydowns),
        best_laydown=best,
        best_size=best_size,
        best_cost=best_cost,
    )


def _evaluate(hand: tuple[Card, ...], requirement: Requirement, jokers_left: int) -> HandScore:
    laydowns = enumerate_laydowns(requirement.num_foursies, requirement.num_threesies, hand)
    if laydowns:
        return _score_laydowns(laydowns)
    if jokers_left == 0:
        logger.debug("joker budget exhausted for %s without a laydown", requirement.label)
        return HandScore(score=0.0)

    inner = _evaluate((*hand, joker()), requirement, jokers_left - 1)
    return replace(inner, score=inner.score / JOKER_PENALTY, jokers_added=inner.jokers_added + 1)


def evaluate_hand(hand: Iterable[Card], num_foursies: int, num_threesies: int) -> HandScore:
    """Score ``hand`` and report the laydown behind the score.

    Hands with fewer cards than required runs score ``-1``. Hands that cannot
    meet the requirement are retried with one extra Joker at a time, each
    Joker dividing the resulting score by ten. At most
    :attr:`Requirement.joker_budget` Jokers are added; a hand that still has
    no laydown after that scores ``0``.
    """

    cards = tuple(hand)
    requirement = Requirement(num_foursies, num_threesies)
    if len(cards) < requirement.total_runs:
        return HandScore(score=TOO_FEW_CARDS)
    result = _evaluate(cards, requirement, requirement.joker_budget)
    if result.jokers_added:
        logger.debug("hand needed %d extra joker(s) for %s", result.jokers_added, requirement.label)
    return result


def score_hand(hand: Iterable[Card], num_foursies: int, num_threesies: int) -> float:
    return evaluate_hand(hand, num_foursies, num_threesies).score
