"""
Unit serialization module for the simulator.

Turns roster JSON data into Unit objects, substituting the documented
default for every missing stat and skill field and rejecting data that
cannot describe a unit (no name, or a skills block without a basic skill).
"""

import json
import math
from pathlib import Path
from typing import Any

from core.constants import (
    BASIC_SKILL_NAME,
    DEFAULT_ADVANCED_COOLDOWN,
    DEFAULT_ADVANCED_MULTIPLIER,
    DEFAULT_ATTACK,
    DEFAULT_BASIC_MULTIPLIER,
    DEFAULT_SPEED,
    DEFAULT_ULTIMATE_COOLDOWN,
    DEFAULT_ULTIMATE_MULTIPLIER,
    DEFAULT_VITALITY,
    Side,
    SkillTier,
)
from core.error_handling import RosterValidationError, report_invalid_input
from core.logging import log_debug, log_warning
from core.validation import validate_unit_data
from pydantic import ValidationError

from .aura import Aura
from .main import Unit
from .skills import Skill, SkillSet
from .unit_stats import BaseStats

# Name, multiplier and cooldown used for a skill slot when the data omits them.
TIER_DEFAULTS: dict[SkillTier, tuple[str, float, int]] = {
    SkillTier.BASIC: (BASIC_SKILL_NAME, DEFAULT_BASIC_MULTIPLIER, 1),
    SkillTier.ADVANCED: ("Advanced Skill", DEFAULT_ADVANCED_MULTIPLIER, DEFAULT_ADVANCED_COOLDOWN),
    SkillTier.ULTIMATE: ("Ultimate Skill", DEFAULT_ULTIMATE_MULTIPLIER, DEFAULT_ULTIMATE_COOLDOWN),
}

STAT_DEFAULTS: dict[str, int] = {
    "attack": DEFAULT_ATTACK,
    "vitality": DEFAULT_VITALITY,
    "speed": DEFAULT_SPEED,
}


def with_tier_defaults(skill: Skill, tier: SkillTier) -> Skill:
    """
    Fills the fields a skill's data left unset with the defaults of its slot.

    Args:
        skill (Skill):
            The skill as loaded.
        tier (SkillTier):
            The slot the skill is equipped in.

    Returns:
        Skill:
            The skill with slot defaults for name, multiplier and cooldown.

    """
    name, multiplier, cooldown = TIER_DEFAULTS[tier]
    update: dict[str, Any] = {}
    if "name" not in skill.model_fields_set:
        update["name"] = name
    if "damage_multiplier" not in skill.model_fields_set:
        update["damage_multiplier"] = multiplier
    if "cooldown" not in skill.model_fields_set:
        update["cooldown"] = cooldown
    if not update:
        return skill
    return skill.model_copy(update=update)


def _load_stats(data: dict[str, Any], unit_name: str) -> BaseStats:
    stats_data = data["stats"] if isinstance(data.get("stats"), dict) else data
    values: dict[str, int] = {}
    for stat, default in STAT_DEFAULTS.items():
        value = stats_data.get(stat)
        if value is None:
            log_warning(
                f"Unit '{unit_name}' has no {stat}, using the default.",
                {"stat": stat, "default": default},
            )
            value = default
        values[stat] = math.floor(value)
    return BaseStats(**values)


def _load_aura(entry: Any, repository: Any | None) -> Aura | None:
    if entry is None:
        return None
    if isinstance(entry, str):
        if repository is None:
            raise RosterValidationError(f"Aura '{entry}' referenced by name without content")
        aura = repository.get_aura(entry)
        if aura is None:
            raise RosterValidationError(f"Unknown aura '{entry}'")
        return aura
    return Aura(**entry)


def _load_skill(entry: Any, tier: SkillTier, unit_name: str, repository: Any | None) -> Skill | None:
    if entry is None:
        return None
    if isinstance(entry, str):
        skill = repository.get_skill(entry) if repository is not None else None
        if skill is None:
            if tier == SkillTier.BASIC:
                raise RosterValidationError(f"Unit '{unit_name}' has an unknown basic skill '{entry}'")
            log_warning(
                f"Unit '{unit_name}' references unknown skill '{entry}', leaving the slot empty.",
                {"tier": tier},
            )
            return None
        return with_tier_defaults(skill, tier)
    return with_tier_defaults(Skill(**entry), tier)


def _load_skill_set(entry: dict[str, Any] | None, unit_name: str, repository: Any | None) -> SkillSet:
    if entry is None:
        log_warning(f"Unit '{unit_name}' has no skills, using the default basic attack.")
        return SkillSet(basic=with_tier_defaults(Skill(), SkillTier.BASIC))
    skills = {
        tier.value: _load_skill(entry.get(tier.value), tier, unit_name, repository)
        for tier in SkillTier
    }
    return SkillSet(**skills)


def unit_from_dict(
    data: dict[str, Any],
    side: Side,
    index: int = 0,
    repository: Any | None = None,
) -> Unit:
    """
    Creates a Unit from its roster data.

    Args:
        data (dict[str, Any]):
            The unit data: name, optional id, stats (nested or inline),
            skills and aura. Skills and auras may be objects or names of
            entries in the content repository.
        side (Side):
            The side the unit fights on.
        index (int):
            Position in its roster, used to derive a missing id.
        repository (ContentRepository | None):
            Content used to resolve skill and aura names.

    Returns:
        Unit:
            The created unit at full HP.

    Raises:
        RosterValidationError:
            If the data cannot describe a unit.

    """
    result = validate_unit_data(data)
    name = data.get("name") if isinstance(data, dict) else None
    if not result.is_valid:
        report_invalid_input("Rejected unit data", {"name": name, "side": side})
        raise RosterValidationError(f"Invalid unit '{name}'", result.errors)

    try:
        unit = Unit(
            uid=data.get("id") or f"{side.value}-{index + 1}",
            name=name,
            side=side,
            stats=_load_stats(data, name),
            skills=_load_skill_set(data.get("skills"), name, repository),
            aura=_load_aura(data.get("aura"), repository),
        )
    except ValidationError as e:
        report_invalid_input("Rejected unit data", {"name": name, "side": side}, e)
        raise RosterValidationError(f"Invalid unit '{name}'", [str(e)]) from e

    log_debug(f"Loaded unit {unit.name}", {"uid": unit.uid, "hp": unit.HP_MAX})
    return unit


def units_from_list(data: list[Any], side: Side, repository: Any | None = None) -> list[Unit]:
    """
    Creates one side's roster.

    Raises:
        RosterValidationError:
            If the roster is empty, a unit is invalid or two units share an id.

    """
    if not data:
        raise RosterValidationError(f"The {side.value} roster is empty")
    units = [unit_from_dict(entry, side, index, repository) for index, entry in enumerate(data)]
    seen: set[str] = set()
    for unit in units:
        if unit.uid in seen:
            raise RosterValidationError(f"Duplicate unit id '{unit.uid}' in the {side.value} roster")
        seen.add(unit.uid)
    return units


def load_roster(filepath: Path, side: Side, repository: Any | None = None) -> list[Unit]:
    """
    Loads one side's roster from a JSON list file.

    Args:
        filepath (Path):
            The JSON file to read.
        side (Side):
            The side the units fight on.
        repository (ContentRepository | None):
            Content used to resolve skill and aura names.

    Returns:
        list[Unit]:
            The roster in file order.

    Raises:
        RosterValidationError:
            If the file cannot be read or holds invalid units.

    """
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RosterValidationError(f"Cannot read roster {filepath}: {e}") from e
    if not isinstance(data, list):
        raise RosterValidationError(f"Expected list in {filepath}, got {type(data).__name__}")
    return units_from_list(data, side, repository)
