"""
Tests for action gauge scheduling.
"""

import pytest
from combat.gauge import ActionGaugeScheduler
from effects.modifier_effect import make_speed_debuff


@pytest.fixture
def scheduler():
    return ActionGaugeScheduler()


def test_gain_is_proportional_to_speed(scheduler, make_unit):
    assert scheduler.gain(make_unit(speed=40)) == pytest.approx(1.0)
    assert scheduler.gain(make_unit(speed=80), speed_multiplier=2.0) == pytest.approx(4.0)


def test_slow_reduces_gain(scheduler, make_unit):
    unit = make_unit(speed=40)
    unit.effects.append(make_speed_debuff(20, 1))
    assert scheduler.gain(unit) == pytest.approx(0.8)


def test_firing_resets_gauge_and_discards_overflow(scheduler, make_unit):
    unit = make_unit(speed=80)
    unit.gauge = 99.0
    assert scheduler.advance([unit]) == [unit]
    assert unit.gauge == 0.0


def test_below_threshold_keeps_filling(scheduler, make_unit):
    unit = make_unit(speed=40)
    unit.gauge = 98.5
    assert scheduler.advance([unit]) == []
    assert unit.gauge == pytest.approx(99.5)


def test_dead_units_do_not_fill(scheduler, make_unit):
    unit = make_unit()
    unit.take_damage(unit.HP_MAX)
    unit.gauge = 99.9
    assert scheduler.advance([unit]) == []
    assert unit.gauge == pytest.approx(99.9)


def test_ready_units_in_roster_order(scheduler, make_unit):
    first, second, third = make_unit(), make_unit(), make_unit()
    first.gauge = 99.5
    third.gauge = 99.5
    assert scheduler.advance([first, second, third]) == [first, third]


def test_speed_forty_fires_every_hundred_ticks(scheduler, make_unit):
    unit = make_unit(speed=40)
    fired = [tick for tick in range(1, 301) if scheduler.advance([unit])]
    assert fired == [100, 200, 300]


def test_gauge_stays_in_range(scheduler, make_unit):
    units = [make_unit(speed=speed) for speed in (17, 40, 63, 150)]
    for _ in range(500):
        scheduler.advance(units)
        assert all(0 <= unit.gauge < 100 for unit in units)
