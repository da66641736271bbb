"""
Combat system module for the gauge battle simulator.

This module handles the battle engine itself: action gauge scheduling,
target selection, skill resolution, end-of-battle evaluation, multi-stage
dungeon progression, and the tick-driven simulator tying them together.
"""

from .battle_end import BattleEndEvaluator, BattleStatus
from .battle_simulator import BattleSimulator
from .gauge import ActionGaugeScheduler
from .playback import PlaybackDriver
from .result import BattleResult, UnitReport
from .roster import Roster
from .skill_resolver import SkillResolver, compute_damage
from .stage_progression import DungeonRun, StageProgressionController
from .targeting import TargetSelector

__all__ = [
    # Import from battle_end.py
    "BattleEndEvaluator",
    "BattleStatus",
    # Import from battle_simulator.py
    "BattleSimulator",
    # Import from gauge.py
    "ActionGaugeScheduler",
    # Import from playback.py
    "PlaybackDriver",
    # Import from result.py
    "BattleResult",
    "UnitReport",
    # Import from roster.py
    "Roster",
    # Import from skill_resolver.py
    "SkillResolver",
    "compute_damage",
    # Import from stage_progression.py
    "DungeonRun",
    "StageProgressionController",
    # Import from targeting.py
    "TargetSelector",
]
