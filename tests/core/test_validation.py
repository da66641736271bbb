"""
Tests for the roster and skill data validation.
"""

from core.validation import validate_skill_data, validate_unit_data


def test_valid_unit_nested_stats():
    data = {
        "id": "ally-1",
        "name": "Rhea",
        "stats": {"attack": 60, "vitality": 100, "speed": 45},
        "skills": {"basic": {"name": "Slash", "damage": 1.0}, "advanced": "Flame Lance"},
        "aura": {"name": "Ember", "attack": 10},
    }
    result = validate_unit_data(data)
    assert result.is_valid, result.errors


def test_valid_unit_inline_stats():
    assert validate_unit_data({"name": "Sylph", "attack": 58, "speed": 55}).is_valid


def test_missing_name():
    result = validate_unit_data({"stats": {"attack": 10}})
    assert not result.is_valid
    assert "Required field 'name' is missing" in result.errors


def test_non_object_unit():
    result = validate_unit_data(["name", "Rhea"])
    assert not result.is_valid
    assert result.errors == ["Expected an object, got list"]


def test_skills_without_basic():
    result = validate_unit_data({"name": "Maren", "skills": {"advanced": "Soothing Current"}})
    assert not result.is_valid
    assert "Required skill 'basic' is missing" in result.errors


def test_negative_stat():
    result = validate_unit_data({"name": "Garrick", "stats": {"attack": -5}})
    assert not result.is_valid
    assert "stats: Field 'attack' must be >= 0" in result.errors


def test_boolean_is_not_a_number():
    result = validate_unit_data({"name": "Garrick", "stats": {"speed": True}})
    assert not result.is_valid


def test_invalid_inline_skill_is_prefixed():
    data = {"name": "Rhea", "skills": {"basic": "Slash", "advanced": {"effect_duration": 5}}}
    result = validate_unit_data(data)
    assert not result.is_valid
    assert "skills.advanced: Field 'effect_duration' must be <= 3" in result.errors


def test_skill_entry_of_wrong_type():
    result = validate_unit_data({"name": "Rhea", "skills": {"basic": 12}})
    assert not result.is_valid
    assert "Skill 'basic' must be an object or a skill name" in result.errors


def test_skill_with_unknown_behavior():
    result = validate_skill_data({"name": "Odd", "behavior": "teleport"})
    assert not result.is_valid


def test_skill_with_known_behavior_and_family():
    assert validate_skill_data({"name": "Odd", "behavior": "weaken", "effect_family": "poison"}).is_valid


def test_aura_errors_are_prefixed():
    result = validate_unit_data({"name": "Rhea", "aura": {"attack": "lots"}})
    assert not result.is_valid
    assert result.errors[0].startswith("aura: ")
