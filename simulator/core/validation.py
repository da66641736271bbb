"""
Input validation system for roster and content JSON data.
"""

from dataclasses import dataclass
from typing import Any

from core.constants import EffectFamily, SkillBehavior


class ValidationResult:
    def __init__(self, is_valid: bool = True, errors: list[str] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str) -> None:
        self.is_valid = False
        self.errors.append(error)

    def merge(self, other: "ValidationResult", prefix: str = "") -> None:
        if not other.is_valid:
            self.is_valid = False
            self.errors.extend(f"{prefix}{error}" for error in other.errors)


@dataclass
class FieldValidator:
    """Defines validation rules for a field."""

    required: bool = False
    field_type: type | tuple[type, ...] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    allowed_values: list[Any] | None = None


def _type_name(field_type: type | tuple[type, ...]) -> str:
    if isinstance(field_type, tuple):
        return " or ".join(t.__name__ for t in field_type)
    return field_type.__name__


class DataValidator:
    """Validates data structures against defined schemas."""

    def __init__(self, schema: dict[str, FieldValidator]):
        self.schema = schema

    def validate(self, data: Any) -> ValidationResult:
        """Validate data against the schema."""
        result = ValidationResult()
        if not isinstance(data, dict):
            result.add_error(f"Expected an object, got {type(data).__name__}")
            return result

        for field_name, validator in self.schema.items():
            if field_name not in data or data[field_name] is None:
                if validator.required:
                    result.add_error(f"Required field '{field_name}' is missing")
                continue
            result.merge(self._validate_field(field_name, data[field_name], validator))

        return result

    def _validate_field(self, field_name: str, value: Any, validator: FieldValidator) -> ValidationResult:
        """Validate a single field."""
        result = ValidationResult()

        # Booleans are ints in Python but never valid numbers here.
        if validator.field_type and (
            not isinstance(value, validator.field_type) or isinstance(value, bool)
        ):
            result.add_error(f"Field '{field_name}' must be of type {_type_name(validator.field_type)}")
            return result

        if isinstance(value, (int, float)):
            if validator.min_value is not None and value < validator.min_value:
                result.add_error(f"Field '{field_name}' must be >= {validator.min_value}")
            if validator.max_value is not None and value > validator.max_value:
                result.add_error(f"Field '{field_name}' must be <= {validator.max_value}")

        if isinstance(value, str):
            if validator.min_length is not None and len(value.strip()) < validator.min_length:
                result.add_error(f"Field '{field_name}' must be at least {validator.min_length} characters")
            if validator.max_length is not None and len(value) > validator.max_length:
                result.add_error(f"Field '{field_name}' must be at most {validator.max_length} characters")

        if validator.allowed_values and value not in validator.allowed_values:
            result.add_error(f"Field '{field_name}' must be one of: {validator.allowed_values}")

        return result


_NUMBER = (int, float)

# Common validation schemas
UNIT_SCHEMA = DataValidator({
    "id": FieldValidator(required=False, field_type=str, min_length=1),
    "name": FieldValidator(required=True, field_type=str, min_length=1, max_length=50),
    "stats": FieldValidator(required=False, field_type=dict),
    "skills": FieldValidator(required=False, field_type=dict),
    "aura": FieldValidator(required=False, field_type=(dict, str)),
})

STATS_SCHEMA = DataValidator({
    "attack": FieldValidator(required=False, field_type=_NUMBER, min_value=0),
    "vitality": FieldValidator(required=False, field_type=_NUMBER, min_value=0),
    "speed": FieldValidator(required=False, field_type=_NUMBER, min_value=0),
})

SKILL_SCHEMA = DataValidator({
    "name": FieldValidator(required=False, field_type=str, min_length=1, max_length=50),
    "damage": FieldValidator(required=False, field_type=_NUMBER, min_value=0),
    "damage_multiplier": FieldValidator(required=False, field_type=_NUMBER, min_value=0),
    "cooldown": FieldValidator(required=False, field_type=int, min_value=1),
    "behavior": FieldValidator(
        required=False, field_type=str, allowed_values=[b.value for b in SkillBehavior]
    ),
    "effect_family": FieldValidator(
        required=False, field_type=str, allowed_values=[f.value for f in EffectFamily]
    ),
    "effect_duration": FieldValidator(required=False, field_type=int, min_value=1, max_value=3),
})

AURA_SCHEMA = DataValidator({
    "name": FieldValidator(required=False, field_type=str),
    "attack": FieldValidator(required=False, field_type=_NUMBER, min_value=-100),
    "vitality": FieldValidator(required=False, field_type=_NUMBER, min_value=-100),
    "speed": FieldValidator(required=False, field_type=_NUMBER, min_value=-100),
})


def validate_skill_data(data: Any) -> ValidationResult:
    """Validate skill data given inline as an object."""
    return SKILL_SCHEMA.validate(data)


def validate_unit_data(data: Any) -> ValidationResult:
    """
    Validate unit data.

    Skills may be given inline as objects or as names of content skills, so
    only inline skills are checked here. A skills block without a basic skill
    is an error; a missing skills block is defaulted by the caller.
    """
    result = UNIT_SCHEMA.validate(data)
    if not result.is_valid:
        return result

    # Stats may be nested under "stats" or given on the unit itself.
    stats = data["stats"] if isinstance(data.get("stats"), dict) else data
    result.merge(STATS_SCHEMA.validate(stats), prefix="stats: ")

    skills = data.get("skills")
    if skills is not None:
        if skills.get("basic") is None:
            result.add_error("Required skill 'basic' is missing")
        for tier in ("basic", "advanced", "ultimate"):
            skill = skills.get(tier)
            if isinstance(skill, dict):
                result.merge(validate_skill_data(skill), prefix=f"skills.{tier}: ")
            elif skill is not None and not isinstance(skill, str):
                result.add_error(f"Skill '{tier}' must be an object or a skill name")

    if isinstance(data.get("aura"), dict):
        result.merge(AURA_SCHEMA.validate(data["aura"]), prefix="aura: ")

    return result
