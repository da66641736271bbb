"""
Content repository module for the simulator.

Loads the named skills and auras that rosters reference. Missing lookups
are reported as warnings through core.logging.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from units.aura import Aura
from units.skills import Skill

from core.logging import log_debug, log_warning
from core.utils import Singleton
from core.validation import AURA_SCHEMA, validate_skill_data


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for the skills and auras referenced by name in rosters.
    """

    skills: dict[str, Skill]
    auras: dict[str, Aura]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing data files to load.

        """
        if data_dir:
            self.reload(data_dir)
            self.loaded = True
        elif not hasattr(self, "loaded"):
            raise ValueError(
                "ContentRepository must be initialized with a valid data_dir on first use."
            )

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing data files to load.
        """
        self.skills = _load_json_file(
            root / "skills.json",
            self._load_skills,
            "skills",
        )
        self.auras = _load_json_file(
            root / "auras.json",
            self._load_auras,
            "auras",
        )

    def _get_from_collection(self, collection_name: str, item_name: str) -> Any | None:
        """
        Generic helper to get an item from a collection by name.

        Args:
            collection_name (str):
                Name of the collection attribute (e.g., 'skills', 'auras')
            item_name (str):
                Name of the item to retrieve

        Returns:
            Any | None:
                The item if found, None otherwise

        """
        collection = getattr(self, collection_name, None) or {}
        entry = collection.get(item_name)
        if entry is None:
            log_warning(
                f"Item '{item_name}' not found in collection '{collection_name}'.",
                {"collection_name": collection_name, "item_name": item_name},
            )
        return entry

    def get_skill(self, name: str) -> Skill | None:
        """Get a skill by name, or None if not found."""
        return self._get_from_collection("skills", name)

    def get_aura(self, name: str) -> Aura | None:
        """Get an aura by name, or None if not found."""
        return self._get_from_collection("auras", name)

    @staticmethod
    def _load_skills(data: list[dict]) -> dict[str, Skill]:
        """
        Load skills from JSON data.

        Args:
            data (list[dict]): List of skill data dictionaries.

        Returns:
            dict[str, Skill]: Dictionary mapping skill names to Skill objects.

        Raises:
            ValueError: If a skill is invalid or a name is duplicated.

        """
        skills: dict[str, Skill] = {}
        for skill_data in data:
            result = validate_skill_data(skill_data)
            if not result.is_valid or "name" not in skill_data:
                errors = result.errors or ["Required field 'name' is missing"]
                raise ValueError(f"Invalid skill data {skill_data}: {'; '.join(errors)}")
            skill = Skill(**skill_data)
            if skill.name in skills:
                raise ValueError(f"Duplicate skill name: {skill.name}")
            skills[skill.name] = skill
        return skills

    @staticmethod
    def _load_auras(data: list[dict]) -> dict[str, Aura]:
        """
        Load auras from JSON data.

        Args:
            data (list[dict]): List of aura data dictionaries.

        Returns:
            dict[str, Aura]: Dictionary mapping aura names to Aura objects.

        Raises:
            ValueError: If an aura is invalid or a name is duplicated.

        """
        auras: dict[str, Aura] = {}
        for aura_data in data:
            result = AURA_SCHEMA.validate(aura_data)
            if not result.is_valid or not aura_data.get("name"):
                errors = result.errors or ["Required field 'name' is missing"]
                raise ValueError(f"Invalid aura data {aura_data}: {'; '.join(errors)}")
            aura = Aura(**aura_data)
            if aura.name in auras:
                raise ValueError(f"Duplicate aura name: {aura.name}")
            auras[aura.name] = aura
        return auras


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(f"Loading {description} using {loader_func.__name__}", {"file": filepath})
        # Validate file path
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        # Load and validate JSON
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
