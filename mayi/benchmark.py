"""Monte-Carlo harness estimating how often a dealt hand can lay down at once."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .cards import random_hand
from .laydown import has_laydown
from .rules import STANDARD_ROUNDS, RoundSpec

__all__ = [
    "BenchmarkConfig",
    "RoundResult",
    "split_simulations",
    "instant_laydown_rate",
    "run_instant_laydown_benchmark",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Configuration values for an instant-laydown benchmark."""

    simulations: int = 10_000
    num_decks: int = 2
    workers: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.simulations <= 0:
            raise ValueError("simulations must be positive")
        if self.num_decks <= 0:
            raise ValueError("num_decks must be positive")
        if self.workers <= 0:
            raise ValueError("workers must be positive")


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of the simulations for a single round."""

    round: RoundSpec
    simulations: int
    hits: int
    rate: float
    standard_error: float

    @property
    def percent(self) -> float:
        return 100.0 * self.rate


def split_simulations(simulations: int, workers: int) -> list[int]:
    """Divide ``simulations`` across ``workers``; earlier workers take the remainder."""

    base, extra = divmod(simulations, workers)
    return [base + (1 if idx < extra else 0) for idx in range(workers)]


def _count_instant_laydowns(
    num_foursies: int,
    num_threesies: int,
    hand_size: int,
    num_decks: int,
    simulations: int,
    seed: int | None,
) -> int:
    rng = random.Random(seed)
    hits = 0
    for _ in range(simulations):
        hand = random_hand(hand_size, num_decks, rng)
        if has_laydown(num_foursies, num_threesies, hand):
            hits += 1
    return hits


def _worker_seeds(config: BenchmarkConfig, round_index: int) -> list[int | None]:
    if config.seed is None:
        return [None] * config.workers
    base_seed = (config.seed << 16) ^ (round_index << 8)
    return [base_seed + offset for offset in range(config.workers)]


def instant_laydown_rate(
    round_spec: RoundSpec,
    config: BenchmarkConfig,
    *,
    round_index: int = 0,
) -> RoundResult:
    """Estimate the chance that a freshly dealt hand meets ``round_spec`` outright."""

    shares = split_simulations(config.simulations, config.workers)
    seeds = _worker_seeds(config, round_index)
    requirement = round_spec.requirement
    job = (requirement.num_foursies, requirement.num_threesies, round_spec.hand_size, config.num_decks)

    if config.workers == 1:
        counts = [_count_instant_laydowns(*job, shares[0], seeds[0])]
    else:
        with ProcessPoolExecutor(max_workers=config.workers) as pool:
            futures = [
                pool.submit(_count_instant_laydowns, *job, share, seed)
                for share, seed in zip(shares, seeds)
                if share > 0
            ]
            counts = [future.result() for future in futures]

    hits_per_worker = np.asarray(counts, dtype=np.int64)
    hits = int(hits_per_worker.sum())
    rate = hits / config.simulations
    standard_error = float(np.sqrt(rate * (1.0 - rate) / config.simulations))
    logger.info(
        "round %s: %d/%d instant laydowns (%.3f%%)",
        round_spec.label,
        hits,
        config.simulations,
        100.0 * rate,
    )
    return RoundResult(
        round=round_spec,
        simulations=config.simulations,
        hits=hits,
        rate=rate,
        standard_error=standard_error,
    )


def run_instant_laydown_benchmark(
    config: BenchmarkConfig,
    rounds: Sequence[RoundSpec] = STANDARD_ROUNDS,
) -> list[RoundResult]:
    """Run :func:`instant_laydown_rate` for every round in order."""

    return [
        instant_laydown_rate(round_spec, config, round_index=idx)
        for idx, round_spec in enumerate(rounds)
    ]
