"""
Configuration module for the simulator.

Defines the BattleConfig model holding the dungeon and gauge constants a
dungeon-orchestration caller may override, and the loader reading it from a
JSON file.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from core.constants import (
    CARRYOVER_GAUGE_CAP,
    DEFAULT_MAX_TICKS,
    GAUGE_MAX,
    SPEED_REFERENCE,
    STAGE_SPEED_GROWTH,
    STAGE_STAT_GROWTH,
    TOTAL_STAGES,
)
from core.logging import log_debug


class BattleConfig(BaseModel):
    """
    Stage and gauge configuration for one dungeon run.

    The playback fields are only defaults for an external driver; the
    per-tick logic never reads the tick period.
    """

    model_config = ConfigDict(extra="forbid")

    total_stages: int = Field(
        TOTAL_STAGES,
        ge=1,
        description="Number of encounters in the dungeon run.",
    )
    stage_stat_growth: float = Field(
        STAGE_STAT_GROWTH,
        ge=0,
        description="Per-stage growth of enemy max HP, attack and vitality.",
    )
    stage_speed_growth: float = Field(
        STAGE_SPEED_GROWTH,
        ge=0,
        description="Per-stage growth of enemy speed.",
    )
    carryover_gauge_cap: float = Field(
        CARRYOVER_GAUGE_CAP,
        ge=0,
        le=GAUGE_MAX,
        description="Highest gauge an ally keeps when a new stage begins.",
    )
    gauge_max: float = Field(
        GAUGE_MAX,
        gt=0,
        description="Gauge value at which a unit acts.",
    )
    speed_reference: float = Field(
        SPEED_REFERENCE,
        gt=0,
        description="Effective speed that fills one gauge point per tick.",
    )
    max_ticks: int = Field(
        DEFAULT_MAX_TICKS,
        ge=1,
        description="Safety limit on ticks before a run is abandoned as a defeat.",
    )
    tick_period: float = Field(
        0.3,
        gt=0,
        description="Seconds between ticks for a real-time playback driver.",
    )
    speed_multiplier: float = Field(
        1.0,
        gt=0,
        description="Default playback speed multiplier.",
    )


def load_battle_config(filepath: Path) -> BattleConfig:
    """
    Loads a BattleConfig from a JSON object file.

    Args:
        filepath (Path):
            The JSON file to read.

    Returns:
        BattleConfig:
            The validated configuration.

    Raises:
        ValueError:
            If the file is missing, is not a JSON object or holds invalid values.

    """
    try:
        if not filepath.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object in {filepath}, got {type(data).__name__}")
        config = BattleConfig(**data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError, TypeError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
    log_debug("Loaded battle configuration", {"file": filepath.name, **config.model_dump()})
    return config
