"""Top-level package for the May I laydown evaluator."""

from . import cards, encoding, evaluation, laydown, melds, rules
from .cards import Card, InvalidCard, card, joker, random_hand, standard_deck
from .encoding import hand_from
from .evaluation import HandScore, evaluate_hand, score_hand
from .laydown import enumerate_laydowns
from .melds import extract_foursies, extract_threesies, extract_runs
from .rules import Requirement

__all__ = [
    "cards",
    "encoding",
    "evaluation",
    "laydown",
    "melds",
    "rules",
    "Card",
    "HandScore",
    "InvalidCard",
    "Requirement",
    "card",
    "joker",
    "hand_from",
    "random_hand",
    "standard_deck",
    "extract_runs",
    "extract_foursies",
    "extract_threesies",
    "enumerate_laydowns",
    "evaluate_hand",
    "score_hand",
]
