"""
Unit stats module for the simulator.

Handles the stat block of a Unit: base attack, vitality and speed, the aura
bonuses on top of them, hit points, and the effective attack and speed
that also account for active debuffs. Also defines the cumulative combat
record kept for end-of-battle statistics.
"""

from typing import Any

from core.constants import (
    DEFAULT_ATTACK,
    DEFAULT_SPEED,
    DEFAULT_VITALITY,
    HP_PER_VITALITY,
    MIN_VITALITY,
)
from core.utils import percent_of
from effects.effect_manager import StatusEffectEngine
from effects.modifier_effect import apply_stat_modifiers
from pydantic import BaseModel, Field

from .aura import Aura


class BaseStats(BaseModel):
    """The three base stats of a unit."""

    attack: int = Field(DEFAULT_ATTACK, ge=0, description="Base attack.")
    vitality: int = Field(DEFAULT_VITALITY, ge=0, description="Base vitality.")
    speed: int = Field(DEFAULT_SPEED, ge=0, description="Base speed.")

    def model_post_init(self, _: Any) -> None:
        self.vitality = max(MIN_VITALITY, self.vitality)


class CombatRecord(BaseModel):
    """
    Cumulative statistics of a unit over a battle.

    Effect counters are keyed by effect family (burn, poison, debuff, slow,
    weaken, meter_drain, cleanse). Attempts count every roll made, successes
    only the rolls that landed.
    """

    damage_dealt: int = 0
    damage_received: int = 0
    healing_done: int = 0
    healing_received: int = 0
    effect_attempts: dict[str, int] = Field(default_factory=dict)
    effect_successes: dict[str, int] = Field(default_factory=dict)

    def record_attempt(self, effect: str, success: bool) -> None:
        """
        Records one status roll.

        Args:
            effect (str):
                The effect family rolled for.
            success (bool):
                Whether the roll landed.

        """
        self.effect_attempts[effect] = self.effect_attempts.get(effect, 0) + 1
        if success:
            self.effect_successes[effect] = self.effect_successes.get(effect, 0) + 1

    def reset(self) -> None:
        self.damage_dealt = 0
        self.damage_received = 0
        self.healing_done = 0
        self.healing_received = 0
        self.effect_attempts.clear()
        self.effect_successes.clear()


def compute_max_hp(vitality: int, aura_vitality_pct: float = 0.0) -> int:
    """
    Computes max HP from vitality.

    Args:
        vitality (int): The base vitality.
        aura_vitality_pct (float): The aura vitality bonus in percent.

    Returns:
        int: floor(vitality with aura) * 8, never below 1.

    """
    return max(1, percent_of(vitality, aura_vitality_pct) * HP_PER_VITALITY)


class UnitStats:
    """
    Handles the stat block and hit points of a Unit.

    Attributes:
        owner (Any):
            The Unit instance that owns these stats.
        base (BaseStats):
            The current base stats, rescaled between stages for enemies.
        hp_max (int):
            The current maximum hit points.
        hp (int):
            The current hit points, always within [0, hp_max].

    """

    def __init__(self, owner: Any, base: BaseStats) -> None:
        self.owner: Any = owner
        self.base: BaseStats = base.model_copy()
        self.hp_max: int = compute_max_hp(self.base.vitality, self._aura.vitality)
        self.hp: int = self.hp_max

    @property
    def _aura(self) -> Aura:
        return self.owner.aura or Aura()

    @property
    def ATTACK(self) -> int:
        """Returns the attack after aura bonuses, before debuffs."""
        return percent_of(self.base.attack, self._aura.attack)

    @property
    def VITALITY(self) -> int:
        """Returns the vitality after aura bonuses."""
        return percent_of(self.base.vitality, self._aura.vitality)

    @property
    def SPEED(self) -> int:
        """Returns the speed after aura bonuses, before debuffs."""
        return percent_of(self.base.speed, self._aura.speed)

    @property
    def HP_MAX(self) -> int:
        return self.hp_max

    def adjust_hp(self, delta: int) -> int:
        """
        Changes hit points, clamped to [0, HP_MAX].

        Args:
            delta (int): The change to apply, negative for damage.

        Returns:
            int: The change actually applied.

        """
        previous = self.hp
        self.hp = max(0, min(self.hp_max, self.hp + delta))
        return self.hp - previous


def effective_attack(unit: Any) -> int:
    """
    Returns the unit's attack after aura bonuses and active attack debuffs.

    Args:
        unit (Unit): The unit to evaluate.

    Returns:
        int: The effective attack.

    """
    aura = unit.aura or Aura()
    modifiers = StatusEffectEngine.modifiers(unit)
    return apply_stat_modifiers(unit.stats.base.attack, aura.attack, modifiers.attack)


def effective_speed(unit: Any) -> int:
    """Returns the unit's speed after aura bonuses and active speed debuffs."""
    aura = unit.aura or Aura()
    modifiers = StatusEffectEngine.modifiers(unit)
    return apply_stat_modifiers(unit.stats.base.speed, aura.speed, modifiers.speed)
