"""
Unit system module for the gauge battle simulator.

This module handles the combatants of a battle: their stats and auras,
their skill sets, roster loading with default substitution, and enemy
generation for dungeon stages.
"""

from .aura import Aura
from .enemy_factory import generate_enemies
from .main import Unit
from .skills import Skill, SkillSet, classify_behavior, classify_family
from .unit_serialization import load_roster, unit_from_dict, units_from_list
from .unit_stats import (
    BaseStats,
    CombatRecord,
    UnitStats,
    compute_max_hp,
    effective_attack,
    effective_speed,
)

__all__ = [
    # Import from aura.py
    "Aura",
    # Import from enemy_factory.py
    "generate_enemies",
    # Import from main.py
    "Unit",
    # Import from skills.py
    "Skill",
    "SkillSet",
    "classify_behavior",
    "classify_family",
    # Import from unit_serialization.py
    "load_roster",
    "unit_from_dict",
    "units_from_list",
    # Import from unit_stats.py
    "BaseStats",
    "CombatRecord",
    "UnitStats",
    "compute_max_hp",
    "effective_attack",
    "effective_speed",
]
