"""Text notation for cards and hands.

Cards are written as a two-digit rank followed by a suit letter, so the ace
of hearts is ``00H`` and the rank-11 spade is ``11S``. The Joker is ``JJJ``.
"""

from __future__ import annotations

import logging
from typing import Final, Iterable

from .cards import Card, card, joker

__all__ = [
    "JOKER_CODE",
    "InvalidCardCode",
    "format_card",
    "format_hand",
    "parse_card",
    "hand_from",
]

logger = logging.getLogger(__name__)

JOKER_CODE: Final[str] = "JJJ"
CODE_LENGTH: Final[int] = 3


class InvalidCardCode(ValueError):
    """Raised when a token is not written in ``RRS`` notation."""


def format_card(value: Card) -> str:
    """Return the ``RRS`` code for ``value``."""

    if value.is_joker:
        return JOKER_CODE
    return f"{value.face_rank:02d}{value.suit.value}"


def format_hand(cards: Iterable[Card]) -> str:
    return " ".join(format_card(value) for value in cards)


def parse_card(token: str) -> Card:
    """Parse a single ``RRS`` token.

    Tokens with the wrong shape raise :class:`InvalidCardCode`. Well-formed
    tokens naming a card that cannot exist (``13H``, ``05X``) raise
    :class:`~mayi.cards.InvalidCard` from the card constructor.
    """

    if token == JOKER_CODE:
        return joker()
    if len(token) != CODE_LENGTH:
        raise InvalidCardCode(f"invalid card code '{token}'")
    rank_part, suit_part = token[:2], token[2]
    if not (rank_part.isascii() and rank_part.isdigit()) or not suit_part.isalpha():
        raise InvalidCardCode(f"invalid card code '{token}'")
    return card(int(rank_part), suit_part)


def hand_from(tokens: Iterable[str], *, strict: bool = False) -> list[Card]:
    """Build a hand from ``RRS`` tokens such as ``["05D", "JJJ"]``.

    Malformed tokens are skipped unless ``strict`` is set.
    """

    hand: list[Card] = []
    for token in tokens:
        try:
            hand.append(parse_card(token))
        except InvalidCardCode:
            if strict:
                raise
            logger.debug("skipping malformed card token %r", token)
    return hand
