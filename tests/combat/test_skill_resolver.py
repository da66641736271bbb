"""
Tests for action resolution: damage, bespoke skill behaviours and status rolls.
"""

import pytest
from combat.roster import Roster
from combat.skill_resolver import SkillResolver, compute_damage
from combat.targeting import TargetSelector
from core.constants import Side, SkillTier, StatusChange, StatusKind
from core.error_handling import ERROR_HANDLER, ErrorSeverity
from effects.damage_over_time_effect import make_burn
from effects.effect_manager import StatusEffectEngine
from effects.event_system import ActionEvent, BattleLog, StatusEvent
from effects.modifier_effect import make_attack_debuff
from units.skills import Skill


@pytest.fixture
def build(scripted_rng):
    """Builds a resolver around a scripted random source."""

    def _build(rolls=(), choices=()):
        rng = scripted_rng(rolls, choices)
        log = BattleLog()
        effects = StatusEffectEngine(log)
        resolver = SkillResolver(rng, TargetSelector(rng), effects, log)
        return resolver, log

    return _build


def test_basic_attack(build, make_unit):
    resolver, log = build()
    actor = make_unit(name="Rhea", attack=50)
    enemy = make_unit(name="Boss", side=Side.ENEMY)
    event = resolver.resolve(actor, Roster([actor], [enemy]), tick=7)

    assert actor.action_counter == 1
    assert enemy.hp == 750
    assert actor.record.damage_dealt == 50
    assert enemy.record.damage_received == 50
    assert event.tick == 7
    assert event.tier == SkillTier.BASIC
    assert event.target_names == ("Boss",)
    assert event.damage == 50
    assert list(log) == [event]


def test_compute_damage_floors(make_unit):
    actor = make_unit(attack=33)
    assert compute_damage(actor, Skill(damage=1.5)) == 49
    assert compute_damage(actor, Skill(damage=0)) == 0


def test_debuffed_attacker_deals_less(build, make_unit):
    resolver, _ = build()
    actor = make_unit(attack=50)
    actor.effects.append(make_attack_debuff(10, 2))
    enemy = make_unit(side=Side.ENEMY)
    assert resolver.resolve(actor, Roster([actor], [enemy])).damage == 45


def test_overkill_counts_computed_damage(build, make_unit):
    resolver, _ = build()
    actor = make_unit(attack=100)
    enemy = make_unit(side=Side.ENEMY, vitality=10)
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert enemy.hp == 0
    assert actor.record.damage_dealt == 100
    assert enemy.record.damage_received == 100


def test_fire_skill_burns_after_the_action_event(build, make_unit):
    resolver, log = build(rolls=[0.1])
    actor = make_unit(basic=Skill(name="Slash"), advanced=Skill(name="Flame Lance", damage=1.5, cooldown=1))
    enemy = make_unit(name="Boss", side=Side.ENEMY)
    event = resolver.resolve(actor, Roster([actor], [enemy]))

    assert event.tier == SkillTier.ADVANCED
    assert event.damage == 75
    assert event.annotations == ("Burn on Boss",)
    burn = enemy.effects[0]
    assert burn.kind == StatusKind.BURN
    assert burn.magnitude == 40
    assert burn.duration == 3
    assert [type(e) for e in log] == [ActionEvent, StatusEvent]
    assert actor.record.effect_attempts == {"burn": 1}
    assert actor.record.effect_successes == {"burn": 1}


def test_failed_roll_is_still_counted(build, make_unit):
    resolver, _ = build()
    actor = make_unit(basic=Skill(name="Slash"), advanced=Skill(name="Venom Fang", cooldown=1))
    enemy = make_unit(side=Side.ENEMY)
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert enemy.effects == []
    assert actor.record.effect_attempts == {"poison": 1}
    assert actor.record.effect_successes == {}


def test_basic_skills_never_roll_generic_effects(build, make_unit):
    resolver, _ = build(rolls=[0.0])
    actor = make_unit(basic=Skill(name="Fire Bolt"))
    enemy = make_unit(side=Side.ENEMY)
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert enemy.effects == []
    assert actor.record.effect_attempts == {}


def test_reapplied_burn_is_extended(build, make_unit):
    resolver, log = build(rolls=[0.1])
    actor = make_unit(basic=Skill(name="Slash"), advanced=Skill(name="Flame Lance", cooldown=1))
    enemy = make_unit(side=Side.ENEMY)
    enemy.effects.append(make_burn(enemy.HP_MAX, 1))
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert len(enemy.effects) == 1
    assert enemy.effects[0].duration == 3
    assert log[-1].change == StatusChange.EXTENDED


def test_generic_family_picks_a_debuff(build, make_unit):
    resolver, _ = build(rolls=[0.1], choices=[0, 1])
    actor = make_unit(basic=Skill(name="Slash"), ultimate=Skill(name="Shadow Bind", cooldown=1))
    enemy = make_unit(side=Side.ENEMY)
    event = resolver.resolve(actor, Roster([actor], [enemy]))
    assert event.tier == SkillTier.ULTIMATE
    debuff = enemy.effects[0]
    assert debuff.kind == StatusKind.SPEED_DEBUFF
    assert debuff.magnitude == 15
    assert debuff.duration == 2
    assert actor.record.effect_successes == {"debuff": 1}


def test_heal_lowest_ally(build, make_unit):
    resolver, _ = build()
    rhea = make_unit(name="Rhea")
    maren = make_unit(name="Maren", basic=Skill(name="Soothing Current"))
    enemy = make_unit(side=Side.ENEMY)
    rhea.take_damage(400)
    event = resolver.resolve(maren, Roster([rhea, maren], [enemy]))

    assert rhea.hp == 440
    assert event.heal_target_name == "Rhea"
    assert event.heal_amount == 40
    assert event.damage == 50
    assert maren.record.healing_done == 40
    assert rhea.record.healing_received == 40


def test_heal_never_exceeds_max_hp(build, make_unit):
    resolver, _ = build()
    rhea = make_unit(name="Rhea")
    maren = make_unit(name="Maren", basic=Skill(name="Soothing Current"))
    rhea.take_damage(10)
    event = resolver.resolve(maren, Roster([rhea, maren], [make_unit(side=Side.ENEMY)]))
    assert rhea.hp == rhea.HP_MAX
    assert event.heal_amount == 10
    assert maren.record.healing_done == 10


def test_multi_hit_chains_to_a_third_target(build, make_unit):
    resolver, _ = build(rolls=[0.1])
    actor = make_unit(basic=Skill(name="Wildfire"))
    enemies = [make_unit(name=f"Minion {i}", side=Side.ENEMY) for i in (1, 2, 3)]
    event = resolver.resolve(actor, Roster([actor], enemies))
    assert event.target_names == ("Minion 1", "Minion 2", "Minion 3")
    assert all(enemy.hp == 750 for enemy in enemies)
    assert actor.record.damage_dealt == 150


def test_multi_hit_without_chain(build, make_unit):
    resolver, _ = build()
    actor = make_unit(basic=Skill(name="Wildfire"))
    enemies = [make_unit(name=f"Minion {i}", side=Side.ENEMY) for i in (1, 2, 3)]
    event = resolver.resolve(actor, Roster([actor], enemies))
    assert event.target_names == ("Minion 1", "Minion 2")
    assert enemies[2].hp == enemies[2].HP_MAX


def test_dual_hit_with_a_single_opponent(build, make_unit):
    resolver, _ = build()
    actor = make_unit(basic=Skill(name="Dust Spikes"))
    enemy = make_unit(name="Boss", side=Side.ENEMY)
    event = resolver.resolve(actor, Roster([actor], [enemy]))
    assert event.target_names == ("Boss",)
    assert enemy.hp == 750


def test_cleanse_removes_an_effect_from_an_ally(build, make_unit):
    resolver, log = build(rolls=[0.05])
    caster = make_unit(name="Maren", basic=Skill(name="Cleansing Tide"))
    rhea = make_unit(name="Rhea")
    rhea.effects.append(make_burn(rhea.HP_MAX, 2))
    enemy = make_unit(side=Side.ENEMY)
    event = resolver.resolve(caster, Roster([caster, rhea], [enemy]))

    assert event.target_names == ("Rhea",)
    assert event.damage == 0
    assert enemy.hp == enemy.HP_MAX
    assert rhea.effects == []
    assert caster.record.effect_successes == {"cleanse": 1}
    assert log[-1].change == StatusChange.REMOVED


def test_failed_cleanse_keeps_effects(build, make_unit):
    resolver, _ = build()
    caster = make_unit(basic=Skill(name="Cleansing Tide"))
    rhea = make_unit()
    rhea.effects.append(make_burn(rhea.HP_MAX, 2))
    resolver.resolve(caster, Roster([caster, rhea], [make_unit(side=Side.ENEMY)]))
    assert len(rhea.effects) == 1
    assert caster.record.effect_attempts == {"cleanse": 1}


def test_cleanse_without_carriers_strikes_an_opponent(build, make_unit):
    resolver, _ = build(rolls=[0.0])
    caster = make_unit(basic=Skill(name="Cleansing Tide"))
    enemy = make_unit(side=Side.ENEMY)
    event = resolver.resolve(caster, Roster([caster], [enemy]))
    assert event.damage == 50
    assert enemy.hp == 750
    assert caster.record.effect_attempts == {}


@pytest.mark.parametrize(
    "skill_name, roll, kind, magnitude, duration, counter",
    [
        ("Gust", 0.05, StatusKind.SPEED_DEBUFF, 20, 1, "slow"),
        ("Stone Slam", 0.15, StatusKind.ATTACK_DEBUFF, 10, 2, "weaken"),
    ],
)
def test_named_debuffs(build, make_unit, skill_name, roll, kind, magnitude, duration, counter):
    resolver, _ = build(rolls=[roll])
    actor = make_unit(basic=Skill(name=skill_name))
    enemy = make_unit(side=Side.ENEMY)
    resolver.resolve(actor, Roster([actor], [enemy]))
    effect = enemy.effects[0]
    assert effect.kind == kind
    assert effect.magnitude == magnitude
    assert effect.duration == duration
    assert actor.record.effect_successes == {counter: 1}


def test_gauge_drain(build, make_unit):
    resolver, log = build(rolls=[0.05])
    actor = make_unit(basic=Skill(name="Breeze"))
    enemy = make_unit(side=Side.ENEMY)
    enemy.gauge = 30.0
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert enemy.gauge == pytest.approx(20.0)
    assert enemy.effects == []
    drain = log[-1]
    assert drain.change == StatusChange.DRAINED
    assert drain.amount == 10
    assert actor.record.effect_successes == {"meter_drain": 1}


def test_statuses_are_applied_after_the_action_is_logged(build, make_unit, mocker):
    resolver, log = build(rolls=[0.05])
    logged_before_apply = []
    mocker.patch.object(
        resolver.effects,
        "apply",
        side_effect=lambda *args, **kwargs: logged_before_apply.append(len(log.of_type(ActionEvent))),
    )
    actor = make_unit(basic=Skill(name="Gust"))
    enemy = make_unit(side=Side.ENEMY)
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert logged_before_apply == [1]


def test_no_opponent_skips_the_action(build, make_unit):
    resolver, log = build()
    actor = make_unit(name="Rhea")
    enemy = make_unit(side=Side.ENEMY)
    enemy.take_damage(enemy.HP_MAX)
    event = resolver.resolve(actor, Roster([actor], [enemy]))
    assert event.skipped
    assert event.reason == "No living opponent left for Rhea"
    assert actor.action_counter == 1
    assert list(log) == [event]
    assert len(ERROR_HANDLER.errors_of(ErrorSeverity.MEDIUM)) == 1


def test_lethal_hit_leaves_no_status_on_the_corpse(build, make_unit):
    resolver, log = build(rolls=[0.0])
    actor = make_unit(attack=1000, basic=Skill(name="Stone Slam"))
    enemy = make_unit(side=Side.ENEMY, vitality=10)
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert enemy.is_dead()
    assert enemy.effects == []
    assert log.of_type(StatusEvent) == []
    assert actor.record.effect_successes == {"weaken": 1}


def test_lethal_hit_does_not_drain_the_gauge(build, make_unit):
    resolver, log = build(rolls=[0.0])
    actor = make_unit(attack=1000, basic=Skill(name="Breeze"))
    enemy = make_unit(side=Side.ENEMY, vitality=10)
    enemy.gauge = 30.0
    resolver.resolve(actor, Roster([actor], [enemy]))
    assert enemy.gauge == 30.0
    assert log.of_type(StatusEvent) == []
    assert actor.record.effect_attempts == {"meter_drain": 1}
