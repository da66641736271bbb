"""
Tests for end-of-battle evaluation.
"""

from combat.battle_end import BattleEndEvaluator, BattleStatus
from combat.roster import Roster
from core.constants import Side


def test_ongoing(make_unit):
    roster = Roster([make_unit()], [make_unit(side=Side.ENEMY)])
    assert BattleEndEvaluator.evaluate(roster) == BattleStatus.ONGOING


def test_enemies_defeated(make_unit):
    enemies = [make_unit(side=Side.ENEMY), make_unit(side=Side.ENEMY)]
    for enemy in enemies:
        enemy.take_damage(enemy.HP_MAX)
    roster = Roster([make_unit()], enemies)
    assert BattleEndEvaluator.evaluate(roster) == BattleStatus.ENEMIES_DEFEATED


def test_one_survivor_keeps_the_battle_going(make_unit):
    enemies = [make_unit(side=Side.ENEMY), make_unit(side=Side.ENEMY)]
    enemies[0].take_damage(enemies[0].HP_MAX)
    roster = Roster([make_unit()], enemies)
    assert BattleEndEvaluator.evaluate(roster) == BattleStatus.ONGOING


def test_simultaneous_wipe_is_an_ally_defeat(make_unit):
    ally = make_unit()
    enemy = make_unit(side=Side.ENEMY)
    ally.take_damage(ally.HP_MAX)
    enemy.take_damage(enemy.HP_MAX)
    assert BattleEndEvaluator.evaluate(Roster([ally], [enemy])) == BattleStatus.ALLIES_DEFEATED
