"""
Core system module for the gauge battle simulator.

This module contains the fundamental components that power the simulator,
including game constants, configuration, error handling, random draws,
data validation and display utilities.
"""

from .config import BattleConfig, load_battle_config
from .constants import (
    EffectFamily,
    RunOutcome,
    Side,
    SkillBehavior,
    SkillTier,
    StagePhase,
    StatusChange,
    StatusKind,
)
from .error_handling import (
    ERROR_HANDLER,
    ErrorSeverity,
    GameError,
    GameException,
    RosterValidationError,
    RunFinishedError,
    TargetPoolEmpty,
)
from .rng import BattleRandom, RandomSource, pick
from .utils import (
    Singleton,
    cprint,
    crule,
    make_bar,
    percent_of,
    round_half_up,
)
from .validation import (
    DataValidator,
    FieldValidator,
    ValidationResult,
    validate_skill_data,
    validate_unit_data,
)

__all__ = [
    # Import from config.py
    "BattleConfig",
    "load_battle_config",
    # Import from constants.py
    "EffectFamily",
    "RunOutcome",
    "Side",
    "SkillBehavior",
    "SkillTier",
    "StagePhase",
    "StatusChange",
    "StatusKind",
    # Import from error_handling.py
    "ERROR_HANDLER",
    "ErrorSeverity",
    "GameError",
    "GameException",
    "RosterValidationError",
    "RunFinishedError",
    "TargetPoolEmpty",
    # Import from rng.py
    "BattleRandom",
    "RandomSource",
    "pick",
    # Import from utils.py
    "Singleton",
    "cprint",
    "crule",
    "make_bar",
    "percent_of",
    "round_half_up",
    # Import from validation.py
    "DataValidator",
    "FieldValidator",
    "ValidationResult",
    "validate_skill_data",
    "validate_unit_data",
]
