"""Card abstractions and deck helpers for May I."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final

__all__ = [
    "Suit",
    "Card",
    "InvalidCard",
    "MAX_RANK",
    "JOKER_FACE_RANK",
    "DECK_RANKS",
    "card",
    "joker",
    "standard_deck",
    "random_hand",
]

MAX_RANK: Final[int] = 12
JOKER_FACE_RANK: Final[int] = 13
JOKER_SUIT_RANK: Final[int] = 4
# Dealt decks stop one rank short of MAX_RANK.
DECK_RANKS: Final[int] = 12
JOKERS_PER_DECK: Final[int] = 2


class InvalidCard(ValueError):
    """Raised when a card is built from an out-of-range rank or unknown suit."""


class Suit(str, Enum):
    """The four suits, declared in ordering priority."""

    HEART = "H"
    DIAMOND = "D"
    CLUB = "C"
    SPADE = "S"

    @property
    def rank(self) -> int:
        return _SUIT_RANKS[self]


_SUIT_RANKS: Final[dict[Suit, int]] = {suit: idx for idx, suit in enumerate(Suit)}
_DECK_SUIT_ORDER: Final[tuple[Suit, ...]] = (Suit.HEART, Suit.DIAMOND, Suit.SPADE, Suit.CLUB)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object for a suited card or the Joker.

    Two cards compare equal whenever they have the same rank and suit, so
    physical copies from different decks are interchangeable.
    """

    rank: int | None
    suit: Suit | None

    def __post_init__(self) -> None:
        if self.suit is None:
            if self.rank is not None:
                raise InvalidCard("a Joker carries no rank")
            return
        if not isinstance(self.suit, Suit):
            raise InvalidCard(f"unknown suit {self.suit!r}")
        if self.rank is None or not 0 <= self.rank <= MAX_RANK:
            raise InvalidCard(f"rank {self.rank!r} out of range 0-{MAX_RANK}")

    @property
    def is_joker(self) -> bool:
        return self.suit is None

    @property
    def suit_rank(self) -> int:
        if self.suit is None:
            return JOKER_SUIT_RANK
        return self.suit.rank

    @property
    def face_rank(self) -> int:
        if self.rank is None:
            return JOKER_FACE_RANK
        return self.rank

    @property
    def successor(self) -> "Card":
        """Return the next card of the same suit, wrapping from 12 to 0."""

        if self.is_joker:
            return self
        return Card((self.face_rank + 1) % (MAX_RANK + 1), self.suit)

    @property
    def face_value(self) -> int:
        """Return the scoring weight of the card."""

        face_rank = self.face_rank
        if face_rank == 0:
            return 15
        if face_rank == JOKER_FACE_RANK:
            return 20
        if face_rank >= 9:
            return 10
        return face_rank + 1

    @property
    def order_key(self) -> int:
        return 5 * self.face_rank + self.suit_rank

    def compare(self, other: "Card") -> int:
        """Return a negative, zero, or positive value like a classic ``cmp``."""

        return self.order_key - other.order_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.order_key < other.order_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.order_key <= other.order_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.order_key > other.order_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.order_key >= other.order_key

    def __repr__(self) -> str:
        if self.is_joker:
            return "Card(JJJ)"
        return f"Card({self.face_rank:02d}{self.suit.value})"


JOKER: Final[Card] = Card(None, None)


def joker() -> Card:
    return JOKER


def card(rank: int, suit_code: str) -> Card:
    """Build a card from a rank in 0-12 and one of the codes ``H D C S J``."""

    if rank > MAX_RANK or rank < 0:
        raise InvalidCard(f"rank {rank} out of range 0-{MAX_RANK}")
    code = suit_code.upper() if isinstance(suit_code, str) else suit_code
    if code == "J":
        return JOKER
    try:
        suit = Suit(code)
    except ValueError as exc:
        raise InvalidCard(f"unknown suit code {suit_code!r}") from exc
    return Card(rank, suit)


def standard_deck(num_decks: int = 1) -> list[Card]:
    """Return ``num_decks`` copies of a 48-card deck plus two Jokers each."""

    if num_decks < 0:
        raise ValueError("num_decks must be non-negative")
    deck: list[Card] = []
    for _ in range(num_decks):
        for suit in _DECK_SUIT_ORDER:
            for rank in range(DECK_RANKS):
                deck.append(Card(rank, suit))
        deck.extend(JOKER for _ in range(JOKERS_PER_DECK))
    return deck


def random_hand(
    num_cards: int,
    num_decks: int = 1,
    rng: random.Random | None = None,
) -> list[Card]:
    """Deal ``num_cards`` cards uniformly without replacement."""

    deck = standard_deck(num_decks)
    if num_cards < 0 or num_cards > len(deck):
        raise ValueError(f"cannot deal {num_cards} cards from a {len(deck)}-card deck")
    rng = rng or random.Random()
    return rng.sample(deck, num_cards)
