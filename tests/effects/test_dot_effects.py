"""
Tests for burn and poison statuses.
"""

import pytest
from core.constants import StatusKind
from effects.base_effect import StatusEffect
from effects.damage_over_time_effect import (
    clamp_burn_duration,
    dot_damage,
    make_burn,
    make_poison,
)


@pytest.mark.parametrize(
    "max_hp, expected",
    [(800, 40), (20, 1), (19, 0), (0, 0), (1000, 50)],
)
def test_dot_damage_is_five_percent_floored(max_hp, expected):
    assert dot_damage(max_hp) == expected


def test_burn_duration_clamped():
    assert clamp_burn_duration(None) == 3
    assert clamp_burn_duration(0) == 1
    assert clamp_burn_duration(2) == 2
    assert clamp_burn_duration(9) == 3


def test_make_burn():
    burn = make_burn(800, duration=2, source_id="ally-1")
    assert burn.kind == StatusKind.BURN
    assert burn.magnitude == 40
    assert burn.duration == 2
    assert burn.source_id == "ally-1"
    assert burn.is_damage_over_time
    assert burn.is_harmful


def test_make_poison_lasts_three_turns():
    poison = make_poison(1000)
    assert poison.kind == StatusKind.POISON
    assert poison.magnitude == 50
    assert poison.duration == 3


def test_status_requires_positive_duration():
    with pytest.raises(ValueError):
        StatusEffect(name="Burn", kind=StatusKind.BURN, magnitude=10, duration=0)


def test_instantaneous_kinds_cannot_be_attached():
    with pytest.raises(ValueError):
        StatusEffect(name="Meter Drain", kind=StatusKind.METER_DRAIN, magnitude=10, duration=1)
    with pytest.raises(ValueError):
        StatusEffect(name="Cleanse", kind=StatusKind.CLEANSE_MARKER, magnitude=0, duration=1)


def test_negative_magnitude_rejected():
    with pytest.raises(ValueError):
        StatusEffect(name="Burn", kind=StatusKind.BURN, magnitude=-1, duration=2)
