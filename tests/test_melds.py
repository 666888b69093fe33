from __future__ import annotations

import random
from collections import Counter

import pytest

from mayi.cards import Card, random_hand
from mayi.encoding import hand_from
from mayi.melds import (
    extract_foursies,
    extract_runs,
    extract_threesies,
    foursy_constraints,
    is_valid_run,
    threesy_constraints,
)


def _hand(*codes: str) -> list[Card]:
    return hand_from(codes, strict=True)


def _run(*codes: str) -> tuple[Card, ...]:
    return tuple(_hand(*codes))


def test_foursy_wraps_past_highest_rank() -> None:
    hand = _hand("03D", "12D", "00D", "JJJ", "01D", "11D", "07H", "10H", "08H", "03S", "03D")

    foursies = extract_foursies(hand, 0)

    assert _run("11D", "12D", "00D", "01D") in foursies
    assert _run("11D", "12D", "JJJ", "01D") in foursies
    assert _run("07H", "08H", "JJJ", "10H") in foursies
    assert _run("00D", "01D", "JJJ", "03D") in foursies


def test_foursy_requires_four_cards() -> None:
    hand = _hand("00H", "01H", "02H", "03H")

    assert extract_foursies(hand) == [_run("00H", "01H", "02H", "03H")]
    assert extract_foursies(hand[:3]) == []


def test_foursy_respects_min_suit_rank() -> None:
    clubs = _hand("04C", "05C", "06C", "07C")

    assert extract_foursies(clubs, min_suit_rank=2) == [_run("04C", "05C", "06C", "07C")]
    assert extract_foursies(clubs, min_suit_rank=3) == []


def test_joker_continues_from_the_card_it_replaces() -> None:
    hand = _hand("05S", "06S", "JJJ", "08S")

    foursies = extract_foursies(hand)

    assert foursies == [_run("05S", "06S", "JJJ", "08S")]


def test_jokers_never_start_runs() -> None:
    jokers = _hand("JJJ", "JJJ", "JJJ", "JJJ")

    assert extract_foursies(jokers) == []
    assert extract_threesies(jokers) == []


def test_threesies_deduplicate_repeated_cards() -> None:
    hand = _hand("03S", "03D", "03H", "03S", "03D")

    threesies = extract_threesies(hand, 0)

    assert len(threesies) == 9
    assert len(set(threesies)) == len(threesies)
    assert {len(run) for run in threesies} == {3, 4, 5}
    assert _run("03H", "03D", "03D", "03S", "03S") in threesies
    for run in threesies:
        assert all(value.face_rank == 3 for value in run)
        suit_ranks = [value.suit_rank for value in run]
        assert suit_ranks == sorted(suit_ranks)


def test_threesy_respects_min_rank() -> None:
    hand = _hand("03H", "03D", "03S", "05H", "05D", "05C")

    assert extract_threesies(hand, min_rank=4) == [_run("05H", "05D", "05C")]


def test_threesy_joker_keeps_rank_anchor() -> None:
    hand = _hand("07H", "07S", "JJJ")

    assert set(extract_threesies(hand)) == {
        _run("07H", "07S", "JJJ"),
        _run("07H", "JJJ", "07S"),
    }


def test_extract_runs_accepts_custom_constraints() -> None:
    hand = _hand("02H", "02D", "09S")
    constraints = threesy_constraints(0)

    assert extract_runs(hand, 2, constraints) == [_run("02H", "02D")]
    assert extract_runs(hand, 1, constraints) == [
        _run("02H"),
        _run("02H", "02D"),
        _run("02D"),
        _run("09S"),
    ]


def test_extract_runs_does_not_mutate_hand() -> None:
    hand = _hand("00H", "01H", "02H", "03H", "JJJ")
    snapshot = list(hand)

    extract_foursies(hand)

    assert hand == snapshot


@pytest.mark.parametrize("seed", range(6))
def test_extracted_runs_are_valid_and_drawn_from_hand(seed: int) -> None:
    hand = random_hand(12, 2, random.Random(seed))
    hand_counts = Counter(hand)

    for extractor, min_length, constraints in (
        (extract_foursies, 4, foursy_constraints(0)),
        (extract_threesies, 3, threesy_constraints(0)),
    ):
        runs = extractor(hand)
        assert len(set(runs)) == len(runs)
        for run in runs:
            assert is_valid_run(run, min_length, constraints)
            for value, count in Counter(run).items():
                assert count <= hand_counts[value]
