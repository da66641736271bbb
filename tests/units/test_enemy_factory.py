"""
Tests for the level-based enemy generation.
"""

import pytest
from core.constants import Side
from units.enemy_factory import enemy_count, generate_enemies


@pytest.mark.parametrize("level, expected", [(0, 1), (1, 1), (2, 2), (3, 2), (4, 3), (10, 3)])
def test_enemy_count(level, expected):
    assert enemy_count(level) == expected


def test_level_one_is_a_lone_boss():
    enemies = generate_enemies(1)
    assert len(enemies) == 1
    boss = enemies[0]
    assert boss.name == "Boss"
    assert boss.uid == "enemy-1"
    assert boss.side == Side.ENEMY
    assert boss.stats.base.attack == 45
    assert boss.stats.base.vitality == 220
    assert boss.stats.base.speed == 37
    assert boss.HP_MAX == 1760
    assert boss.skills.advanced.name == "Boss Strike"
    assert boss.skills.advanced.damage_multiplier == 1.8
    assert boss.skills.ultimate.cooldown == 5


def test_minions_come_before_the_boss():
    enemies = generate_enemies(4)
    assert [enemy.name for enemy in enemies] == ["Minion 1", "Minion 2", "Boss"]
    assert [enemy.uid for enemy in enemies] == ["enemy-1", "enemy-2", "enemy-3"]
    minion = enemies[0]
    assert minion.stats.base.attack == 60
    assert minion.stats.base.vitality == 120
    assert minion.stats.base.speed == 57
    assert minion.skills.advanced is None


def test_explicit_count():
    enemies = generate_enemies(2, count=3)
    assert len(enemies) == 3
    assert enemies[-1].name == "Boss"
    assert all(enemy.side == Side.ENEMY for enemy in enemies)
