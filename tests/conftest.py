"""
Shared fixtures for the simulator tests.
"""

from collections.abc import Iterable

import pytest
from core.constants import Side
from core.content import ContentRepository
from core.error_handling import ERROR_HANDLER
from units.aura import Aura
from units.main import Unit
from units.skills import Skill, SkillSet
from units.unit_stats import BaseStats


class ScriptedRandom:
    """
    RandomSource whose draws are scripted by the test.

    Rolls and choices are consumed in order; once exhausted, rolls default to
    0.99 (every status roll fails) and choices to 0 (first candidate).
    """

    def __init__(self, rolls: Iterable[float] = (), choices: Iterable[int] = ()) -> None:
        self.rolls = list(rolls)
        self.choices = list(choices)
        self.choice_sizes: list[int] = []

    def roll(self) -> float:
        return self.rolls.pop(0) if self.rolls else 0.99

    def chance(self, probability: float) -> bool:
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self.roll() < probability

    def choice_index(self, size: int) -> int:
        if size <= 0:
            raise ValueError(f"Cannot choose from an empty pool (size={size}).")
        self.choice_sizes.append(size)
        return self.choices.pop(0) if self.choices else 0


@pytest.fixture
def scripted_rng():
    """Factory building a ScriptedRandom from rolls and choices."""

    def _make(rolls: Iterable[float] = (), choices: Iterable[int] = ()) -> ScriptedRandom:
        return ScriptedRandom(rolls, choices)

    return _make


@pytest.fixture
def make_unit():
    """Factory building a unit with explicit stats and skills."""
    counter = {"ally": 0, "enemy": 0}

    def _make(
        name: str | None = None,
        side: Side = Side.ALLY,
        attack: int = 50,
        vitality: int = 100,
        speed: int = 40,
        basic: Skill | None = None,
        advanced: Skill | None = None,
        ultimate: Skill | None = None,
        aura: Aura | None = None,
        uid: str | None = None,
    ) -> Unit:
        counter[side.value] += 1
        index = counter[side.value]
        return Unit(
            uid=uid or f"{side.value}-{index}",
            name=name or f"{side.value.capitalize()} {index}",
            side=side,
            stats=BaseStats(attack=attack, vitality=vitality, speed=speed),
            skills=SkillSet(basic=basic or Skill(), advanced=advanced, ultimate=ultimate),
            aura=aura,
        )

    return _make


@pytest.fixture(autouse=True)
def fresh_state():
    ContentRepository.reset()
    ERROR_HANDLER.clear()
    yield
    ContentRepository.reset()
    ERROR_HANDLER.clear()
