"""
Random number module for the simulator.

Every random draw the engine makes (target picks, status rolls, multi-hit
chances) goes through a RandomSource so a battle can be replayed from a seed
or scripted draw by draw in tests.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The random draws the engine needs."""

    def roll(self) -> float:
        """Returns a float in [0, 1)."""
        ...

    def chance(self, probability: float) -> bool:
        """Returns True with the given probability."""
        ...

    def choice_index(self, size: int) -> int:
        """Returns a uniform index in [0, size)."""
        ...


@dataclass
class BattleRandom:
    """Seedable RandomSource backed by random.Random."""

    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def roll(self) -> float:
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        # Certain outcomes do not consume a draw.
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self.roll() < probability

    def choice_index(self, size: int) -> int:
        if size <= 0:
            raise ValueError(f"Cannot choose from an empty pool (size={size}).")
        return self._rng.randrange(size)


def pick(rng: RandomSource, items: Sequence[T]) -> T:
    """
    Picks one item uniformly at random.

    Args:
        rng (RandomSource): The random source to draw from.
        items (Sequence[T]): The candidates, must not be empty.

    Returns:
        T: The chosen item.

    """
    return items[rng.choice_index(len(items))]
