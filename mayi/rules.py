"""Meld requirements and round definitions for May I."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

__all__ = [
    "FOURSY_MIN_LENGTH",
    "THREESY_MIN_LENGTH",
    "InvalidRequirement",
    "Requirement",
    "RoundSpec",
    "STANDARD_ROUNDS",
]

FOURSY_MIN_LENGTH: Final[int] = 4
THREESY_MIN_LENGTH: Final[int] = 3


class InvalidRequirement(ValueError):
    """Raised when a meld requirement asks for a negative number of runs."""


@dataclass(frozen=True, slots=True)
class Requirement:
    """Number of foursies and threesies a laydown must contain."""

    num_foursies: int
    num_threesies: int

    def __post_init__(self) -> None:
        if self.num_foursies < 0 or self.num_threesies < 0:
            raise InvalidRequirement(
                f"meld counts must be non-negative, got ({self.num_foursies}, {self.num_threesies})"
            )

    @property
    def total_runs(self) -> int:
        return self.num_foursies + self.num_threesies

    @property
    def joker_budget(self) -> int:
        """Upper bound on wildcards the evaluator may inject for this requirement."""

        return FOURSY_MIN_LENGTH * self.num_foursies + THREESY_MIN_LENGTH * self.num_threesies

    @property
    def label(self) -> str:
        """Return the run lengths in table order, threesies first (``"3, 4"``)."""

        parts = ["3"] * self.num_threesies + ["4"] * self.num_foursies
        return ", ".join(parts) or "-"


@dataclass(frozen=True, slots=True)
class RoundSpec:
    """A round of play: the requirement and the number of cards dealt."""

    requirement: Requirement
    hand_size: int

    @property
    def label(self) -> str:
        return self.requirement.label


STANDARD_ROUNDS: Final[tuple[RoundSpec, ...]] = (
    RoundSpec(Requirement(1, 1), 10),
    RoundSpec(Requirement(2, 0), 10),
    RoundSpec(Requirement(0, 3), 10),
    RoundSpec(Requirement(1, 2), 14),
    RoundSpec(Requirement(2, 1), 14),
    RoundSpec(Requirement(3, 0), 14),
)
