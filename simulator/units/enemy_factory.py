"""
Enemy factory module for the simulator.

Generates the stage-1 enemy templates of a dungeon from its level: a few
minions followed by a boss, with stats growing linearly with the level.
"""

from core.constants import Side
from core.logging import log_debug

from .main import Unit
from .skills import Skill, SkillSet
from .unit_stats import BaseStats

MAX_ENEMIES = 3


def enemy_count(level: int) -> int:
    """Returns how many enemies a dungeon of the given level spawns."""
    return min(MAX_ENEMIES, max(1, level) // 2 + 1)


def make_minion(level: int, index: int) -> Unit:
    """
    Creates a minion template.

    Args:
        level (int): The dungeon level.
        index (int): Position in the enemy roster, starting at 0.

    Returns:
        Unit: The minion.

    """
    return Unit(
        uid=f"enemy-{index + 1}",
        name=f"Minion {index + 1}",
        side=Side.ENEMY,
        stats=BaseStats(
            attack=40 + level * 5,
            vitality=80 + level * 10,
            speed=45 + level * 3,
        ),
        skills=SkillSet(basic=Skill(name="Enemy Attack", damage_multiplier=1.0)),
    )


def make_boss(level: int, index: int) -> Unit:
    """Creates a boss template, slower but far sturdier than a minion."""
    return Unit(
        uid=f"enemy-{index + 1}",
        name="Boss",
        side=Side.ENEMY,
        stats=BaseStats(
            attack=40 + level * 5,
            vitality=200 + level * 20,
            speed=35 + level * 2,
        ),
        skills=SkillSet(
            basic=Skill(name="Enemy Attack", damage_multiplier=1.0),
            advanced=Skill(name="Boss Strike", damage_multiplier=1.8, cooldown=3),
            ultimate=Skill(name="Boss Ultimate", damage_multiplier=2.5, cooldown=5),
        ),
    )


def generate_enemies(level: int, count: int | None = None) -> list[Unit]:
    """
    Generates the enemy roster of a dungeon.

    Args:
        level (int):
            The dungeon level, at least 1.
        count (int | None):
            Number of enemies; derived from the level when None.

    Returns:
        list[Unit]:
            Minions followed by one boss in the last slot.

    """
    level = max(1, level)
    count = enemy_count(level) if count is None else max(1, count)
    enemies = [make_minion(level, index) for index in range(count - 1)]
    enemies.append(make_boss(level, count - 1))
    log_debug("Generated enemies", {"level": level, "count": count})
    return enemies
