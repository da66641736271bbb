"""
Tests for the fixed-period playback driver.
"""

import pytest
from combat.battle_simulator import BattleSimulator
from combat.playback import PlaybackDriver
from core.config import BattleConfig
from core.constants import RunOutcome, Side
from core.rng import BattleRandom


@pytest.fixture
def simulator(make_unit):
    rhea = make_unit(name="Rhea", attack=100)
    boss = make_unit(name="Boss", side=Side.ENEMY, vitality=10)
    return BattleSimulator([rhea], [boss], BattleConfig(total_stages=1, tick_period=0.5), BattleRandom(0))


def test_defaults_come_from_config(simulator):
    driver = PlaybackDriver(simulator)
    assert driver.tick_period == 0.5
    assert driver.speed_multiplier == 1.0
    assert not driver.paused


def test_speed_must_be_positive(simulator):
    driver = PlaybackDriver(simulator)
    with pytest.raises(ValueError):
        driver.set_speed(0)
    with pytest.raises(ValueError):
        PlaybackDriver(simulator, speed_multiplier=-1)


def test_paused_driver_delivers_nothing(simulator):
    driver = PlaybackDriver(simulator)
    driver.pause()
    assert driver.step() == []
    assert simulator.tick_count == 0
    driver.resume()
    assert driver.step()
    assert simulator.tick_count == 1


def test_step_passes_the_speed_multiplier(simulator, mocker):
    tick = mocker.spy(simulator, "tick")
    driver = PlaybackDriver(simulator, speed_multiplier=2.0)
    driver.step()
    tick.assert_called_once_with(2.0)


def test_double_speed_halves_the_ticks(simulator):
    driver = PlaybackDriver(simulator, speed_multiplier=2.0)
    result = driver.play(sleep=lambda seconds: None)
    assert result.outcome == RunOutcome.VICTORY
    assert result.ticks == 50


def test_play_sleeps_between_steps(simulator, mocker):
    sleep = mocker.Mock()
    on_events = mocker.Mock()
    driver = PlaybackDriver(simulator)
    result = driver.play(sleep=sleep, max_steps=5, on_events=on_events)
    assert simulator.tick_count == 5
    assert sleep.call_count == 5
    sleep.assert_called_with(0.5)
    assert on_events.call_count == 1
    assert result.outcome == RunOutcome.IN_PROGRESS


def test_play_until_the_run_ends(simulator, mocker):
    on_events = mocker.Mock()
    result = PlaybackDriver(simulator).play(sleep=lambda seconds: None, on_events=on_events)
    assert result.outcome == RunOutcome.VICTORY
    assert result.ticks == 100
    assert simulator.is_finished
    assert PlaybackDriver(simulator).step() == []


def test_paused_play_does_not_tick(simulator):
    driver = PlaybackDriver(simulator)
    driver.pause()
    driver.play(sleep=lambda seconds: None, max_steps=3)
    assert simulator.tick_count == 0
