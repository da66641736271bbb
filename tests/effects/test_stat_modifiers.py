"""
Tests for the effective stat pipeline: aura bonus first, then debuffs in
activation order, flooring after every step.
"""

from fractions import Fraction

from core.constants import StatusKind
from core.utils import percent_of, round_half_up
from effects.modifier_effect import (
    apply_stat_modifiers,
    debuff_percentages,
    make_attack_debuff,
    make_speed_debuff,
)


def test_percent_of_floors():
    assert percent_of(21, -10) == 18
    assert percent_of(50, 10) == 55
    assert percent_of(55, -20) == 44
    assert percent_of(100, 15) == 115


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(56.00000000000001) == 56
    assert round_half_up(Fraction(115, 2)) == 58


def test_no_modifiers():
    assert apply_stat_modifiers(50, 0, []) == 50


def test_aura_then_debuff():
    assert apply_stat_modifiers(50, 10, [20]) == 44


def test_successive_flooring():
    # floor(floor(21 * 0.9) * 0.9) = 16, while floor(21 * 0.81) = 17.
    assert apply_stat_modifiers(21, 0, [10, 10]) == 16


def test_never_negative():
    assert apply_stat_modifiers(10, -100, [50]) == 0


def test_debuff_percentages_in_activation_order():
    effects = [
        make_speed_debuff(20, 1),
        make_attack_debuff(10, 2),
        make_speed_debuff(15, 2),
    ]
    assert debuff_percentages(effects, StatusKind.SPEED_DEBUFF) == [20, 15]
    assert debuff_percentages(effects, StatusKind.ATTACK_DEBUFF) == [10]


def test_debuff_factories():
    weaken = make_attack_debuff(10, 2, "ally-1", name="Minor Weakness")
    assert weaken.kind == StatusKind.ATTACK_DEBUFF
    assert weaken.magnitude == 10
    assert weaken.duration == 2
    assert weaken.name == "Minor Weakness"
    assert make_speed_debuff(15, 2).name == "Slowed"
