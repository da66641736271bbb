"""
Skill resolution module for the simulator.

Resolves one unit's action: picks the skill that fires, computes and deals
its damage, performs the skill's fixed behaviour (healing, extra hits,
cleanse, named status rolls) or the generic status roll, and reports the
outcome to the battle log.
"""

import math
from dataclasses import dataclass, field

from core.constants import (
    CLEANSE_CHANCE,
    GAUGE_DRAIN_AMOUNT,
    GAUGE_DRAIN_CHANCE,
    GENERIC_ATTACK_DEBUFF_PCT,
    GENERIC_DEBUFF_DURATION,
    GENERIC_EFFECT_CHANCE,
    GENERIC_SPEED_DEBUFF_PCT,
    HEAL_MAX_HP_RATIO,
    MULTI_HIT_THIRD_TARGET_CHANCE,
    SLOW_CHANCE,
    SLOW_DURATION,
    SLOW_PCT,
    WEAKEN_CHANCE,
    WEAKEN_DURATION,
    WEAKEN_PCT,
    EffectFamily,
    SkillBehavior,
    SkillTier,
)
from core.error_handling import TargetPoolEmpty, report_skip
from core.logging import log_debug
from core.rng import RandomSource
from effects.base_effect import StatusEffect
from effects.damage_over_time_effect import make_burn, make_poison
from effects.effect_manager import StatusEffectEngine
from effects.event_system import ActionEvent, BattleLog
from effects.modifier_effect import make_attack_debuff, make_speed_debuff
from units.main import Unit
from units.skills import Skill
from units.unit_stats import effective_attack

from combat.roster import Roster
from combat.targeting import TargetSelector


@dataclass
class ActionOutcome:
    """Everything an action did, gathered before it is reported."""

    targets: list[Unit]
    damage: int = 0
    heal_target: Unit | None = None
    heal_amount: int = 0
    notes: list[str] = field(default_factory=list)
    statuses: list[tuple[Unit, StatusEffect]] = field(default_factory=list)
    drained: list[Unit] = field(default_factory=list)
    cleansed: list[Unit] = field(default_factory=list)


def compute_damage(attacker: Unit, skill: Skill) -> int:
    """
    Computes the damage of a skill.

    Args:
        attacker (Unit): The unit firing the skill.
        skill (Skill): The fired skill.

    Returns:
        int: floor(effective attack * multiplier), never negative.

    """
    return max(0, math.floor(effective_attack(attacker) * skill.damage_multiplier))


class SkillResolver:
    """
    Resolves actions against a roster.

    All random draws go through the injected random source, in a fixed
    order: target picks, then extra-target picks, then status rolls.
    """

    def __init__(
        self,
        rng: RandomSource,
        selector: TargetSelector,
        effects: StatusEffectEngine,
        log: BattleLog,
    ) -> None:
        self.rng = rng
        self.selector = selector
        self.effects = effects
        self.log = log

    def resolve(self, actor: Unit, roster: Roster, tick: int = 0) -> ActionEvent:
        """
        Resolves one action of the actor.

        The action counter is incremented first and decides which skill
        fires. Damage, healing and counters are applied before the action
        event is logged; statuses are applied right after it.

        Args:
            actor (Unit):
                The unit whose gauge fired.
            roster (Roster):
                The battle roster.
            tick (int):
                The current tick.

        Returns:
            ActionEvent:
                The logged action, marked as skipped if no target was left.

        """
        actor.action_counter += 1
        tier, skill = actor.skills.select(actor.action_counter)

        try:
            primary = self.selector.primary(actor, skill, roster)
        except TargetPoolEmpty as e:
            report_skip(str(e), {"actor": actor.name, "skill": skill.name, "tick": tick})
            return self.log.append(
                ActionEvent(
                    tick=tick,
                    actor_id=actor.uid,
                    actor_name=actor.name,
                    side=actor.side,
                    skill_name=skill.name,
                    tier=tier,
                    skipped=True,
                    reason=str(e),
                )
            )

        outcome = ActionOutcome(targets=[primary])
        if primary.side == actor.side:
            self._cleanse(actor, primary, outcome)
        else:
            outcome.damage = compute_damage(actor, skill)
            self._strike(actor, primary, outcome.damage)
            self._apply_behavior(actor, tier, skill, roster, outcome)

        event = self.log.append(
            ActionEvent(
                tick=tick,
                actor_id=actor.uid,
                actor_name=actor.name,
                side=actor.side,
                skill_name=skill.name,
                tier=tier,
                target_names=tuple(target.name for target in outcome.targets),
                damage=outcome.damage,
                heal_target_name=outcome.heal_target.name if outcome.heal_target else None,
                heal_amount=outcome.heal_amount,
                annotations=tuple(outcome.notes),
            )
        )
        log_debug(
            f"{actor.name} used {skill.name}",
            {
                "tier": tier,
                "targets": ", ".join(target.name for target in outcome.targets),
                "damage": outcome.damage,
            },
        )
        self._apply_pending(outcome, tick)
        return event

    # ============================================================================
    # DAMAGE AND HEALING
    # ============================================================================

    @staticmethod
    def _strike(actor: Unit, target: Unit, damage: int) -> None:
        target.take_damage(damage)
        # Totals use the computed damage, including overkill.
        actor.record.damage_dealt += damage
        target.record.damage_received += damage

    def _extra_hits(
        self,
        actor: Unit,
        roster: Roster,
        outcome: ActionOutcome,
        chain_chance: float | None,
    ) -> None:
        second = self.selector.additional(actor, roster, outcome.targets)
        if second is None:
            return
        self._strike(actor, second, outcome.damage)
        outcome.targets.append(second)
        if chain_chance is None or not self.rng.chance(chain_chance):
            return
        third = self.selector.additional(actor, roster, outcome.targets)
        if third is not None:
            self._strike(actor, third, outcome.damage)
            outcome.targets.append(third)

    def _heal_lowest_ally(self, actor: Unit, roster: Roster, outcome: ActionOutcome) -> None:
        target = self.selector.lowest_hp_ally(actor, roster)
        if target is None:
            return
        healed = target.heal(math.floor(actor.HP_MAX * HEAL_MAX_HP_RATIO))
        actor.record.healing_done += healed
        target.record.healing_received += healed
        outcome.heal_target = target
        outcome.heal_amount = healed

    # ============================================================================
    # STATUS ROLLS
    # ============================================================================

    def _apply_behavior(
        self,
        actor: Unit,
        tier: SkillTier,
        skill: Skill,
        roster: Roster,
        outcome: ActionOutcome,
    ) -> None:
        primary = outcome.targets[0]
        behavior = skill.behavior
        if behavior == SkillBehavior.HEAL_LOWEST_ALLY:
            self._heal_lowest_ally(actor, roster, outcome)
        elif behavior == SkillBehavior.MULTI_HIT:
            self._extra_hits(actor, roster, outcome, MULTI_HIT_THIRD_TARGET_CHANCE)
        elif behavior == SkillBehavior.DUAL_HIT:
            self._extra_hits(actor, roster, outcome, None)
        elif behavior == SkillBehavior.MINOR_SLOW:
            self._roll_status(
                actor,
                primary,
                "slow",
                SLOW_CHANCE,
                make_speed_debuff(SLOW_PCT, SLOW_DURATION, actor.uid, name="Minor Slow"),
                outcome,
            )
        elif behavior == SkillBehavior.WEAKEN:
            self._roll_status(
                actor,
                primary,
                "weaken",
                WEAKEN_CHANCE,
                make_attack_debuff(WEAKEN_PCT, WEAKEN_DURATION, actor.uid, name="Minor Weakness"),
                outcome,
            )
        elif behavior == SkillBehavior.GAUGE_DRAIN:
            success = self.rng.chance(GAUGE_DRAIN_CHANCE)
            actor.record.record_attempt("meter_drain", success)
            if success:
                outcome.drained.append(primary)
                outcome.notes.append(f"drained {primary.name}'s gauge")
        elif behavior == SkillBehavior.GENERIC and tier != SkillTier.BASIC:
            self._generic_roll(actor, skill, primary, outcome)

    def _roll_status(
        self,
        actor: Unit,
        target: Unit,
        counter: str,
        chance: float,
        effect: StatusEffect,
        outcome: ActionOutcome,
    ) -> bool:
        success = self.rng.chance(chance)
        actor.record.record_attempt(counter, success)
        if success:
            outcome.statuses.append((target, effect))
            outcome.notes.append(f"{effect.name} on {target.name}")
        return success

    def _generic_roll(self, actor: Unit, skill: Skill, target: Unit, outcome: ActionOutcome) -> None:
        family = skill.effect_family
        if family == EffectFamily.FIRE:
            self._roll_status(
                actor,
                target,
                "burn",
                GENERIC_EFFECT_CHANCE,
                make_burn(target.HP_MAX, skill.effect_duration, actor.uid),
                outcome,
            )
        elif family == EffectFamily.POISON:
            self._roll_status(
                actor,
                target,
                "poison",
                GENERIC_EFFECT_CHANCE,
                make_poison(target.HP_MAX, actor.uid),
                outcome,
            )
        else:
            success = self.rng.chance(GENERIC_EFFECT_CHANCE)
            actor.record.record_attempt("debuff", success)
            if not success:
                return
            if self.rng.choice_index(2) == 0:
                effect = make_attack_debuff(GENERIC_ATTACK_DEBUFF_PCT, GENERIC_DEBUFF_DURATION, actor.uid)
            else:
                effect = make_speed_debuff(GENERIC_SPEED_DEBUFF_PCT, GENERIC_DEBUFF_DURATION, actor.uid)
            outcome.statuses.append((target, effect))
            outcome.notes.append(f"{effect.name} on {target.name}")

    def _cleanse(self, actor: Unit, target: Unit, outcome: ActionOutcome) -> None:
        success = self.rng.chance(CLEANSE_CHANCE)
        actor.record.record_attempt("cleanse", success)
        if success:
            outcome.cleansed.append(target)
            outcome.notes.append(f"cleansed {target.name}")

    def _apply_pending(self, outcome: ActionOutcome, tick: int) -> None:
        # Rolls still count when the hit was lethal, but corpses take no statuses.
        for target, effect in outcome.statuses:
            if target.is_alive():
                self.effects.apply(target, effect, tick)
        for target in outcome.drained:
            if target.is_alive():
                self.effects.drain_gauge(target, GAUGE_DRAIN_AMOUNT, tick)
        for target in outcome.cleansed:
            self.effects.remove_random(target, self.rng, tick)
