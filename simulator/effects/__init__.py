"""
Effects system module for the gauge battle simulator.

This module contains the timed status effects (burn, poison, attack and speed
debuffs), the engine that applies and ticks them, and the battle event log
through which every resolved happening is reported.
"""

from .base_effect import StatusEffect
from .damage_over_time_effect import dot_damage, make_burn, make_poison
from .effect_manager import StatModifiers, StatusEffectEngine
from .event_system import (
    ActionEvent,
    BattleEndEvent,
    BattleEvent,
    BattleLog,
    InitEvent,
    RoundEvent,
    StageEvent,
    StatusEvent,
    describe_event,
)
from .modifier_effect import (
    apply_stat_modifiers,
    make_attack_debuff,
    make_speed_debuff,
)

__all__ = [
    "StatusEffect",
    "dot_damage",
    "make_burn",
    "make_poison",
    "StatModifiers",
    "StatusEffectEngine",
    "ActionEvent",
    "BattleEndEvent",
    "BattleEvent",
    "BattleLog",
    "InitEvent",
    "RoundEvent",
    "StageEvent",
    "StatusEvent",
    "describe_event",
    "apply_stat_modifiers",
    "make_attack_debuff",
    "make_speed_debuff",
]
