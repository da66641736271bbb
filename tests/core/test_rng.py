"""
Tests for the injectable random source.
"""

import pytest
from core.rng import BattleRandom, pick


def test_same_seed_same_sequence():
    first = BattleRandom(42)
    second = BattleRandom(42)
    assert [first.roll() for _ in range(5)] == [second.roll() for _ in range(5)]
    assert [first.choice_index(7) for _ in range(5)] == [second.choice_index(7) for _ in range(5)]


def test_certain_chances_do_not_consume_draws():
    rng = BattleRandom(7)
    assert rng.chance(0) is False
    assert rng.chance(1.0) is True
    assert rng.roll() == BattleRandom(7).roll()


def test_chance_compares_against_roll(mocker):
    rng = BattleRandom(1)
    mocker.patch.object(rng, "roll", return_value=0.25)
    assert rng.chance(0.3) is True
    assert rng.chance(0.25) is False


def test_choice_index_range():
    rng = BattleRandom(3)
    assert all(0 <= rng.choice_index(4) < 4 for _ in range(50))


def test_choice_index_rejects_empty_pool():
    with pytest.raises(ValueError):
        BattleRandom(3).choice_index(0)


def test_pick_uses_choice_index(scripted_rng):
    rng = scripted_rng(choices=[2])
    assert pick(rng, ["a", "b", "c"]) == "c"
    assert rng.choice_sizes == [3]
