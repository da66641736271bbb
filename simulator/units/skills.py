"""
Skills module for the simulator.

Defines the Skill and SkillSet models. A skill's behaviour and effect family
are explicit data resolved once when the skill is loaded; legacy content that
only carries a display name is classified from that name at load time.
"""

from typing import Any

from core.constants import (
    BASIC_SKILL_NAME,
    DEFAULT_BASIC_MULTIPLIER,
    DEFAULT_BURN_DURATION,
    MAX_BURN_DURATION,
    MIN_BURN_DURATION,
    EffectFamily,
    SkillBehavior,
    SkillTier,
)
from core.logging import log_debug
from pydantic import AliasChoices, BaseModel, Field

# Legacy content names with a fixed behaviour.
LEGACY_SKILL_BEHAVIORS: dict[str, SkillBehavior] = {
    "soothing current": SkillBehavior.HEAL_LOWEST_ALLY,
    "wildfire": SkillBehavior.MULTI_HIT,
    "dust spikes": SkillBehavior.DUAL_HIT,
    "cleansing tide": SkillBehavior.CLEANSE,
    "gust": SkillBehavior.MINOR_SLOW,
    "stone slam": SkillBehavior.WEAKEN,
    "breeze": SkillBehavior.GAUGE_DRAIN,
}

FIRE_KEYWORDS = ("fire", "flame", "ember", "burn", "blaze", "inferno")
POISON_KEYWORDS = ("poison", "venom", "toxic")


def classify_behavior(name: str) -> SkillBehavior:
    """Returns the fixed behaviour of a legacy skill name, GENERIC otherwise."""
    return LEGACY_SKILL_BEHAVIORS.get(name.strip().lower(), SkillBehavior.GENERIC)


def classify_family(name: str) -> EffectFamily:
    """Returns the effect family suggested by a legacy skill name."""
    lowered = name.lower()
    if any(keyword in lowered for keyword in FIRE_KEYWORDS):
        return EffectFamily.FIRE
    if any(keyword in lowered for keyword in POISON_KEYWORDS):
        return EffectFamily.POISON
    return EffectFamily.GENERIC


class Skill(BaseModel):
    """
    A skill a unit can fire.

    Leaving behavior or effect_family unset asks for them to be derived from
    the display name when the skill is built; they never change afterwards.
    """

    name: str = Field(
        BASIC_SKILL_NAME,
        min_length=1,
        description="The display name of the skill.",
    )
    damage_multiplier: float = Field(
        DEFAULT_BASIC_MULTIPLIER,
        ge=0,
        validation_alias=AliasChoices("damage_multiplier", "damage"),
        description="Multiplier applied to the caster's effective attack.",
    )
    cooldown: int = Field(
        1,
        ge=1,
        description="The skill fires every Nth action of its caster.",
    )
    behavior: SkillBehavior | None = Field(
        None,
        description="Fixed behaviour performed in addition to the damage.",
    )
    effect_family: EffectFamily | None = Field(
        None,
        description="Status family rolled by generic non-basic skills.",
    )
    effect_duration: int = Field(
        DEFAULT_BURN_DURATION,
        description="Burn duration in turns, clamped to 1-3.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.behavior is None:
            self.behavior = classify_behavior(self.name)
        if self.effect_family is None:
            self.effect_family = classify_family(self.name)
        self.effect_duration = max(MIN_BURN_DURATION, min(MAX_BURN_DURATION, self.effect_duration))
        log_debug(
            f"Resolved skill {self.name}",
            {"behavior": self.behavior, "family": self.effect_family},
        )

    def __str__(self) -> str:
        return f"{self.name} (x{self.damage_multiplier:g}, every {self.cooldown})"


class SkillSet(BaseModel):
    """The basic, advanced and ultimate skills of a unit."""

    basic: Skill = Field(
        description="The skill used when nothing else fires.",
    )
    advanced: Skill | None = Field(
        None,
        description="Optional skill firing every `cooldown`th action.",
    )
    ultimate: Skill | None = Field(
        None,
        description="Optional skill firing every `cooldown`th action, before advanced.",
    )

    def select(self, action_counter: int) -> tuple[SkillTier, Skill]:
        """
        Selects the skill fired on the given action.

        Args:
            action_counter (int):
                The caster's action counter, already incremented for this action.

        Returns:
            tuple[SkillTier, Skill]:
                The slot and the skill that fires.

        """
        if self.ultimate is not None and action_counter % self.ultimate.cooldown == 0:
            return SkillTier.ULTIMATE, self.ultimate
        if self.advanced is not None and action_counter % self.advanced.cooldown == 0:
            return SkillTier.ADVANCED, self.advanced
        return SkillTier.BASIC, self.basic

    def tiers(self) -> list[tuple[SkillTier, Skill]]:
        """Returns the defined skills with their slots."""
        slots = [
            (SkillTier.BASIC, self.basic),
            (SkillTier.ADVANCED, self.advanced),
            (SkillTier.ULTIMATE, self.ultimate),
        ]
        return [(tier, skill) for tier, skill in slots if skill is not None]
