"""
Modifier effects module for the simulator.

Builds the attack and speed debuffs and applies them, together with aura
bonuses, to a base stat in the fixed order the stat model requires.
"""

from collections.abc import Iterable

from core.constants import StatusKind
from core.utils import percent_of

from .base_effect import StatusEffect


def make_attack_debuff(
    pct: int,
    duration: int,
    source_id: str | None = None,
    name: str = "Weakened",
) -> StatusEffect:
    """
    Creates an attack debuff.

    Args:
        pct (int):
            Percentage taken off the attack stat.
        duration (int):
            Duration in the owner's turns.
        source_id (str | None):
            Identifier of the unit applying the debuff.
        name (str):
            Display name of the effect.

    Returns:
        StatusEffect:
            The attack debuff.

    """
    return StatusEffect(
        name=name,
        kind=StatusKind.ATTACK_DEBUFF,
        magnitude=pct,
        duration=duration,
        source_id=source_id,
    )


def make_speed_debuff(
    pct: int,
    duration: int,
    source_id: str | None = None,
    name: str = "Slowed",
) -> StatusEffect:
    """Creates a speed debuff, see make_attack_debuff."""
    return StatusEffect(
        name=name,
        kind=StatusKind.SPEED_DEBUFF,
        magnitude=pct,
        duration=duration,
        source_id=source_id,
    )


def debuff_percentages(effects: Iterable[StatusEffect], kind: StatusKind) -> list[int]:
    """
    Collects the percentages of the active debuffs of one kind.

    Args:
        effects (Iterable[StatusEffect]):
            The unit's active effects, in activation order.
        kind (StatusKind):
            Either ATTACK_DEBUFF or SPEED_DEBUFF.

    Returns:
        list[int]:
            The debuff percentages in activation order.

    """
    return [effect.magnitude for effect in effects if effect.kind == kind]


def apply_stat_modifiers(base: int, aura_pct: float, debuffs: Iterable[int]) -> int:
    """
    Resolves an effective stat.

    The aura bonus is applied first, then each debuff in activation order,
    flooring to an integer after every step, so 21 with two 10% debuffs
    resolves to floor(floor(21 * 0.9) * 0.9) = 16 and not floor(21 * 0.81) = 17.

    Args:
        base (int):
            The base stat.
        aura_pct (float):
            The aura percentage bonus for the stat.
        debuffs (Iterable[int]):
            Debuff percentages in activation order.

    Returns:
        int:
            The effective stat, never negative.

    """
    value = percent_of(base, aura_pct)
    for pct in debuffs:
        value = percent_of(value, -pct)
    return max(0, value)
