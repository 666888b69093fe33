from __future__ import annotations

import pytest

from mayi.benchmark import (
    BenchmarkConfig,
    instant_laydown_rate,
    run_instant_laydown_benchmark,
    split_simulations,
)
from mayi.rules import STANDARD_ROUNDS, Requirement, RoundSpec


def test_split_simulations_spreads_remainder() -> None:
    assert split_simulations(10, 3) == [4, 3, 3]
    assert split_simulations(2, 4) == [1, 1, 0, 0]
    assert sum(split_simulations(1001, 7)) == 1001


@pytest.mark.parametrize("field", ["simulations", "num_decks", "workers"])
def test_config_rejects_non_positive_values(field: str) -> None:
    with pytest.raises(ValueError):
        BenchmarkConfig(**{field: 0})


def test_seeded_rate_is_reproducible() -> None:
    config = BenchmarkConfig(simulations=40, num_decks=2, seed=11)

    first = instant_laydown_rate(STANDARD_ROUNDS[0], config)
    second = instant_laydown_rate(STANDARD_ROUNDS[0], config)

    assert first == second
    assert 0 <= first.hits <= 40
    assert first.rate == first.hits / 40
    assert first.percent == pytest.approx(100 * first.rate)


def test_trivial_round_always_lays_down() -> None:
    trivial = RoundSpec(Requirement(0, 0), 5)

    result = instant_laydown_rate(trivial, BenchmarkConfig(simulations=25, seed=3))

    assert result.hits == 25
    assert result.rate == 1.0
    assert result.standard_error == 0.0


def test_multiple_workers_share_the_simulations() -> None:
    trivial = RoundSpec(Requirement(0, 0), 5)

    result = instant_laydown_rate(trivial, BenchmarkConfig(simulations=9, workers=2, seed=5))

    assert result.simulations == 9
    assert result.hits == 9


def test_benchmark_reports_each_round() -> None:
    config = BenchmarkConfig(simulations=10, seed=1)

    results = run_instant_laydown_benchmark(config, STANDARD_ROUNDS[:3])

    assert [result.round for result in results] == list(STANDARD_ROUNDS[:3])
    assert all(result.simulations == 10 for result in results)
