"""
Unit management module for the simulator.

Defines the Unit class, a combatant on either side of a battle, with its
stats, skills, aura, action gauge, active statuses and combat record.
"""

from fractions import Fraction
from typing import Any

from core.constants import Side
from core.utils import round_half_up
from effects.base_effect import StatusEffect

from .aura import Aura
from .skills import Skill, SkillSet
from .unit_stats import BaseStats, CombatRecord, UnitStats


class Unit:
    """
    Represents a combatant in a battle.

    Attributes:
        uid (str):
            Unique identifier of the unit within its battle.
        name (str):
            The display name of the unit.
        side (Side):
            The side the unit fights on.
        skills (SkillSet):
            The unit's basic, advanced and ultimate skills.
        aura (Aura | None):
            The equipped aura, if any.
        action_counter (int):
            Number of actions taken so far; only ever increases.
        gauge (float):
            The action gauge in [0, 100).
        effects (list[StatusEffect]):
            Active statuses in activation order, at most one per kind.
        record (CombatRecord):
            Cumulative damage, healing and status roll statistics.
        template (BaseStats):
            The stage-1 base stats that stage scaling is computed from.
        template_hp_max (int):
            The stage-1 max HP that stage scaling is computed from.

    """

    # === Static properties ===

    uid: str
    name: str
    side: Side
    skills: SkillSet
    aura: Aura | None

    # === Battle state ===

    action_counter: int
    gauge: float
    effects: list[StatusEffect]
    record: CombatRecord

    # === Management Modules ===

    stats: UnitStats

    def __init__(
        self,
        uid: str,
        name: str,
        side: Side,
        stats: BaseStats | None = None,
        skills: SkillSet | None = None,
        aura: Aura | None = None,
    ) -> None:
        self.uid = uid
        self.name = name
        self.side = side
        self.skills = skills or SkillSet(basic=Skill())
        self.aura = aura

        self.action_counter = 0
        self.gauge = 0.0
        self.effects = []
        self.record = CombatRecord()

        self.stats = UnitStats(owner=self, base=stats or BaseStats())
        self.template = self.stats.base.model_copy()
        self.template_hp_max = self.stats.hp_max

    # ============================================================================
    # DELEGATED STAT PROPERTIES
    # ============================================================================

    @property
    def colored_name(self) -> str:
        """Returns the unit's name colored by side."""
        return self.side.colorize(self.name)

    @property
    def hp(self) -> int:
        return self.stats.hp

    @property
    def HP_MAX(self) -> int:
        return self.stats.HP_MAX

    @property
    def ATTACK(self) -> int:
        return self.stats.ATTACK

    @property
    def SPEED(self) -> int:
        return self.stats.SPEED

    @property
    def hp_ratio(self) -> float:
        """Returns current HP over max HP, with max HP floored to 1."""
        return self.stats.hp / max(1, self.stats.hp_max)

    def is_alive(self) -> bool:
        return self.stats.hp > 0

    def is_dead(self) -> bool:
        return self.stats.hp <= 0

    # ============================================================================
    # STATE CHANGES
    # ============================================================================

    def take_damage(self, amount: int) -> int:
        """
        Removes hit points, never below zero.

        Args:
            amount (int): The damage to take.

        Returns:
            int: The hit points actually lost.

        """
        return -self.stats.adjust_hp(-max(0, amount))

    def heal(self, amount: int) -> int:
        """
        Restores hit points, never above max HP.

        Args:
            amount (int): The healing to receive.

        Returns:
            int: The hit points actually restored.

        """
        return self.stats.adjust_hp(max(0, amount))

    def drain_gauge(self, amount: float) -> float:
        """Lowers the action gauge, never below zero, and returns the drained amount."""
        previous = self.gauge
        self.gauge = max(0.0, self.gauge - amount)
        return previous - self.gauge

    def rescale(self, stat_factor: float | Fraction, speed_factor: float | Fraction) -> None:
        """
        Scales the unit from its stage-1 template and restores it to full HP.

        Args:
            stat_factor (float | Fraction):
                Factor applied to max HP, attack and vitality.
            speed_factor (float | Fraction):
                Factor applied to speed.

        """
        base = self.stats.base
        base.attack = round_half_up(self.template.attack * stat_factor)
        base.vitality = round_half_up(self.template.vitality * stat_factor)
        base.speed = round_half_up(self.template.speed * speed_factor)
        self.stats.hp_max = max(1, round_half_up(self.template_hp_max * stat_factor))
        self.stats.hp = self.stats.hp_max

    def reset_battle_state(self) -> None:
        """Clears gauge, statuses and combat record for a fresh encounter."""
        self.gauge = 0.0
        self.effects.clear()
        self.record.reset()

    def snapshot(self) -> dict[str, Any]:
        """Returns a plain dictionary view of the unit's current state."""
        return {
            "uid": self.uid,
            "name": self.name,
            "side": self.side.value,
            "hp": self.hp,
            "max_hp": self.HP_MAX,
            "attack": self.stats.base.attack,
            "vitality": self.stats.base.vitality,
            "speed": self.stats.base.speed,
            "gauge": self.gauge,
            "action_counter": self.action_counter,
            "effects": [effect.model_dump(mode="json") for effect in self.effects],
            "record": self.record.model_dump(),
        }

    def __repr__(self) -> str:
        return f"Unit({self.uid!r}, {self.name!r}, {self.side}, hp={self.hp}/{self.HP_MAX})"
