"""
Targeting module for the simulator.

Chooses the units a skill strikes: a uniform pick among living opponents by
default, living allies carrying statuses for cleanse skills, and further
opponents excluding those already struck for multi-target skills.
"""

from collections.abc import Iterable

from core.constants import SkillBehavior
from core.error_handling import TargetPoolEmpty
from core.rng import RandomSource, pick
from units.main import Unit
from units.skills import Skill

from combat.roster import Roster


class TargetSelector:
    """Selects targets with the injected random source."""

    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    def primary(self, actor: Unit, skill: Skill, roster: Roster) -> Unit:
        """
        Chooses the primary target of a skill.

        Args:
            actor (Unit):
                The unit firing the skill.
            skill (Skill):
                The skill being fired.
            roster (Roster):
                The battle roster.

        Returns:
            Unit:
                A living ally carrying statuses for cleanse skills when one
                exists, otherwise a living opponent.

        Raises:
            TargetPoolEmpty:
                If no living opponent is left.

        """
        if skill.behavior == SkillBehavior.CLEANSE:
            carriers = [unit for unit in roster.allies_of(actor) if unit.effects]
            if carriers:
                return pick(self.rng, carriers)
        opponents = roster.opponents_of(actor)
        if not opponents:
            raise TargetPoolEmpty(f"No living opponent left for {actor.name}")
        return pick(self.rng, opponents)

    def additional(self, actor: Unit, roster: Roster, exclude: Iterable[Unit]) -> Unit | None:
        """
        Chooses a further opponent, excluding the units already struck.

        Returns:
            Unit | None:
                The opponent, or None when every living opponent is excluded.

        """
        excluded = [id(unit) for unit in exclude]
        pool = [unit for unit in roster.opponents_of(actor) if id(unit) not in excluded]
        if not pool:
            return None
        return pick(self.rng, pool)

    @staticmethod
    def lowest_hp_ally(actor: Unit, roster: Roster) -> Unit | None:
        """Returns the living ally with the lowest HP percentage, first in roster order on ties."""
        allies = roster.allies_of(actor)
        if not allies:
            return None
        return min(allies, key=lambda unit: unit.hp_ratio)
