"""
Damage over time effects module for the simulator.

Builds the burn and poison statuses dealt by fire-themed and
poison-themed skills.
"""

import math

from core.constants import (
    DEFAULT_BURN_DURATION,
    DOT_MAX_HP_RATIO,
    MAX_BURN_DURATION,
    MIN_BURN_DURATION,
    POISON_DURATION,
    StatusKind,
)

from .base_effect import StatusEffect


def dot_damage(max_hp: int) -> int:
    """
    Returns the per-turn damage of a DoT for a target with the given max HP.

    Args:
        max_hp (int): The target's maximum hit points.

    Returns:
        int: floor(5% of max HP), with max HP floored to at least 1.

    """
    return math.floor(max(1, max_hp) * DOT_MAX_HP_RATIO)


def clamp_burn_duration(duration: int | None) -> int:
    """Clamps a skill's burn duration into the allowed 1-3 turns."""
    if duration is None:
        return DEFAULT_BURN_DURATION
    return max(MIN_BURN_DURATION, min(MAX_BURN_DURATION, duration))


def make_burn(target_max_hp: int, duration: int | None = None, source_id: str | None = None) -> StatusEffect:
    """
    Creates a burn effect.

    Args:
        target_max_hp (int):
            Max HP of the unit receiving the burn.
        duration (int | None):
            Burn duration of the skill, clamped to 1-3 turns.
        source_id (str | None):
            Identifier of the unit applying the burn.

    Returns:
        StatusEffect:
            The burn status.

    """
    return StatusEffect(
        name="Burn",
        kind=StatusKind.BURN,
        magnitude=dot_damage(target_max_hp),
        duration=clamp_burn_duration(duration),
        source_id=source_id,
    )


def make_poison(target_max_hp: int, source_id: str | None = None) -> StatusEffect:
    """Creates a 3-turn poison effect for a target with the given max HP."""
    return StatusEffect(
        name="Poison",
        kind=StatusKind.POISON,
        magnitude=dot_damage(target_max_hp),
        duration=POISON_DURATION,
        source_id=source_id,
    )
