"""
Effect manager module for the simulator.

Owns the lifecycle of the timed statuses attached to units: application with
per-kind de-duplication, per-turn ticking and expiry, and the removal paths
used by cleanse and stage transitions.
"""

from typing import Any

from core.constants import StatusChange, StatusKind
from core.logging import log_debug
from core.rng import RandomSource
from pydantic import BaseModel, Field

from .base_effect import StatusEffect
from .event_system import BattleLog, StatusEvent
from .modifier_effect import debuff_percentages


class StatModifiers(BaseModel):
    """Debuff percentages active on a unit, in activation order."""

    attack: list[int] = Field(default_factory=list)
    speed: list[int] = Field(default_factory=list)


class StatusEffectEngine:
    """
    Applies, ticks and removes status effects, reporting every change to the
    battle log.

    Attributes:
        log (BattleLog):
            The log receiving a StatusEvent for every change.

    """

    def __init__(self, log: BattleLog) -> None:
        self.log = log

    def _emit(
        self,
        tick: int,
        unit: Any,
        effect: StatusEffect,
        change: StatusChange,
        amount: int = 0,
    ) -> None:
        self.log.append(
            StatusEvent(
                tick=tick,
                unit_id=unit.uid,
                unit_name=unit.name,
                effect_name=effect.name,
                kind=effect.kind,
                change=change,
                duration=max(0, effect.duration),
                amount=amount,
            )
        )
        log_debug(
            f"{effect.name} {change.value} on {unit.name}",
            {"duration": effect.duration, "amount": amount},
        )

    def tick(self, unit: Any, is_units_turn: bool, tick: int = 0) -> int:
        """
        Advances the unit's statuses by one of its own turns.

        Damage-over-time statuses deal their magnitude first, then every
        status loses one turn and those reaching zero are removed. Nothing
        happens when it is not the unit's turn.

        Args:
            unit (Unit):
                The unit whose statuses progress.
            is_units_turn (bool):
                Whether the unit's gauge fired this tick.
            tick (int):
                The current tick, for the emitted events.

        Returns:
            int:
                Total damage-over-time damage dealt to the unit.

        """
        if not is_units_turn:
            return 0
        total = 0
        for effect in list(unit.effects):
            if effect.is_damage_over_time:
                unit.take_damage(effect.magnitude)
                unit.record.damage_received += effect.magnitude
                total += effect.magnitude
                self._emit(tick, unit, effect, StatusChange.TICKED, effect.magnitude)
            effect.duration -= 1
            if effect.is_expired:
                unit.effects.remove(effect)
                self._emit(tick, unit, effect, StatusChange.EXPIRED)
        return total

    def apply(self, target: Any, new_effect: StatusEffect, tick: int = 0) -> StatusEffect:
        """
        Attaches a status, or extends the one of the same kind already present.

        Args:
            target (Unit):
                The unit receiving the status.
            new_effect (StatusEffect):
                The status to attach.
            tick (int):
                The current tick, for the emitted event.

        Returns:
            StatusEffect:
                The status now active on the target for that kind.

        """
        existing = self.get(target, new_effect.kind)
        if existing is not None:
            existing.duration = max(existing.duration, new_effect.duration)
            self._emit(tick, target, existing, StatusChange.EXTENDED)
            return existing
        effect = new_effect.model_copy()
        target.effects.append(effect)
        self._emit(tick, target, effect, StatusChange.APPLIED)
        return effect

    @staticmethod
    def get(unit: Any, kind: StatusKind) -> StatusEffect | None:
        """Returns the unit's active status of the given kind, if any."""
        return next((effect for effect in unit.effects if effect.kind == kind), None)

    @staticmethod
    def modifiers(unit: Any) -> StatModifiers:
        """Returns the attack and speed debuff percentages active on the unit."""
        return StatModifiers(
            attack=debuff_percentages(unit.effects, StatusKind.ATTACK_DEBUFF),
            speed=debuff_percentages(unit.effects, StatusKind.SPEED_DEBUFF),
        )

    def remove_random(self, unit: Any, rng: RandomSource, tick: int = 0) -> StatusEffect | None:
        """Removes one uniformly chosen status from the unit."""
        if not unit.effects:
            return None
        effect = unit.effects.pop(rng.choice_index(len(unit.effects)))
        self._emit(tick, unit, effect, StatusChange.REMOVED)
        return effect

    def drain_gauge(self, unit: Any, amount: float, tick: int = 0) -> float:
        """
        Subtracts action gauge from the unit instead of attaching a timed status.

        Args:
            unit (Unit):
                The unit losing gauge.
            amount (float):
                The gauge to subtract; the gauge never drops below zero.
            tick (int):
                The current tick, for the emitted event.

        Returns:
            float:
                The gauge actually drained.

        """
        drained = unit.drain_gauge(amount)
        self.log.append(
            StatusEvent(
                tick=tick,
                unit_id=unit.uid,
                unit_name=unit.name,
                effect_name="Meter Drain",
                kind=StatusKind.METER_DRAIN,
                change=StatusChange.DRAINED,
                amount=round(drained),
            )
        )
        log_debug(f"Meter drain on {unit.name}", {"drained": drained, "gauge": unit.gauge})
        return drained

    def strip_harmful(self, unit: Any, tick: int = 0) -> list[StatusEffect]:
        """Removes every harmful status, keeping the beneficial ones."""
        stripped = [effect for effect in unit.effects if effect.is_harmful]
        unit.effects[:] = [effect for effect in unit.effects if not effect.is_harmful]
        for effect in stripped:
            self._emit(tick, unit, effect, StatusChange.STRIPPED)
        return stripped

    @staticmethod
    def clear(unit: Any) -> None:
        """Drops every status without reporting, used for regenerated enemies."""
        unit.effects.clear()
