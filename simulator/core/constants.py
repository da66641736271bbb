"""
Constants and enumerations for the simulator.

Defines the game-rule constants of the gauge battle engine (unit defaults,
skill defaults, status chances and magnitudes, dungeon scaling) together with
the enumerations for sides, skill tiers, status kinds, skill behaviours and
run outcomes used throughout the simulator.
"""

from enum import Enum

# === Unit Defaults ===

# Hit points granted per point of (aura-adjusted) vitality.
HP_PER_VITALITY = 8
MIN_VITALITY = 10
DEFAULT_ATTACK = 50
DEFAULT_VITALITY = 100
DEFAULT_SPEED = 40

# === Action Gauge ===

GAUGE_MAX = 100
# A unit with this effective speed gains exactly one gauge point per tick.
SPEED_REFERENCE = 40

# === Skill Defaults ===

BASIC_SKILL_NAME = "Basic Attack"
DEFAULT_BASIC_MULTIPLIER = 1.0
DEFAULT_ADVANCED_MULTIPLIER = 1.5
DEFAULT_ADVANCED_COOLDOWN = 3
DEFAULT_ULTIMATE_MULTIPLIER = 2.0
DEFAULT_ULTIMATE_COOLDOWN = 5

# === Status Effects ===

GENERIC_EFFECT_CHANCE = 0.30
DOT_MAX_HP_RATIO = 0.05
DEFAULT_BURN_DURATION = 3
MIN_BURN_DURATION = 1
MAX_BURN_DURATION = 3
POISON_DURATION = 3
GENERIC_ATTACK_DEBUFF_PCT = 10
GENERIC_SPEED_DEBUFF_PCT = 15
GENERIC_DEBUFF_DURATION = 2

# === Named Skill Behaviours ===

HEAL_MAX_HP_RATIO = 0.05
MULTI_HIT_THIRD_TARGET_CHANCE = 0.25
CLEANSE_CHANCE = 0.10
SLOW_CHANCE = 0.10
SLOW_PCT = 20
SLOW_DURATION = 1
WEAKEN_CHANCE = 0.20
WEAKEN_PCT = 10
WEAKEN_DURATION = 2
GAUGE_DRAIN_CHANCE = 0.10
GAUGE_DRAIN_AMOUNT = 10

# === Dungeon ===

TOTAL_STAGES = 8
STAGE_STAT_GROWTH = 0.12
STAGE_SPEED_GROWTH = 0.05
CARRYOVER_GAUGE_CAP = 95
DEFAULT_MAX_TICKS = 200_000


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Side(NiceEnum):
    """Defines which side of the battle a unit fights on."""

    ALLY = "ally"
    ENEMY = "enemy"

    @property
    def opponent(self) -> "Side":
        """Returns the opposing side."""
        return Side.ENEMY if self == Side.ALLY else Side.ALLY

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this side."""
        return {
            Side.ALLY: "🛡️",
            Side.ENEMY: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this side."""
        return {
            Side.ALLY: "bold green",
            Side.ENEMY: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies side color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class SkillTier(NiceEnum):
    """Defines the slot a skill occupies in a unit's skill set."""

    BASIC = "basic"
    ADVANCED = "advanced"
    ULTIMATE = "ultimate"


class SkillBehavior(NiceEnum):
    """Defines the fixed behaviour a skill performs in addition to its damage."""

    GENERIC = "generic"
    HEAL_LOWEST_ALLY = "heal_lowest_ally"
    MULTI_HIT = "multi_hit"
    DUAL_HIT = "dual_hit"
    CLEANSE = "cleanse"
    MINOR_SLOW = "minor_slow"
    WEAKEN = "weaken"
    GAUGE_DRAIN = "gauge_drain"


class EffectFamily(NiceEnum):
    """Defines which status a generic skill rolls for."""

    GENERIC = "generic"
    FIRE = "fire"
    POISON = "poison"


class StatusKind(NiceEnum):
    """Defines the kind of a timed status effect."""

    BURN = "burn"
    POISON = "poison"
    ATTACK_DEBUFF = "attack_debuff"
    SPEED_DEBUFF = "speed_debuff"
    METER_DRAIN = "meter_drain"
    CLEANSE_MARKER = "cleanse_marker"

    @property
    def is_damage_over_time(self) -> bool:
        return self in (StatusKind.BURN, StatusKind.POISON)

    @property
    def is_harmful(self) -> bool:
        """Returns True for kinds stripped from allies between stages."""
        return self != StatusKind.CLEANSE_MARKER

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status kind."""
        return {
            StatusKind.BURN: "🔥",
            StatusKind.POISON: "🧪",
            StatusKind.ATTACK_DEBUFF: "🗡️",
            StatusKind.SPEED_DEBUFF: "🐌",
            StatusKind.METER_DRAIN: "💨",
            StatusKind.CLEANSE_MARKER: "💧",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status kind."""
        return {
            StatusKind.BURN: "bold red",
            StatusKind.POISON: "bold green",
            StatusKind.ATTACK_DEBUFF: "bold magenta",
            StatusKind.SPEED_DEBUFF: "bold blue",
            StatusKind.METER_DRAIN: "bold cyan",
            StatusKind.CLEANSE_MARKER: "bold white",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies status color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class StatusChange(NiceEnum):
    """Defines what happened to a status effect in a StatusEvent."""

    APPLIED = "applied"
    EXTENDED = "extended"
    TICKED = "ticked"
    EXPIRED = "expired"
    REMOVED = "removed"
    STRIPPED = "stripped"
    DRAINED = "drained"


class StagePhase(NiceEnum):
    """Defines the stage transition reported by a StageEvent."""

    BEGAN = "began"
    CLEARED = "cleared"


class RunOutcome(NiceEnum):
    """Defines the state of a dungeon run."""

    IN_PROGRESS = "in_progress"
    STAGE_CLEARED = "stage_cleared"
    VICTORY = "victory"
    DEFEAT = "defeat"

    @property
    def is_terminal(self) -> bool:
        return self in (RunOutcome.VICTORY, RunOutcome.DEFEAT)

    @property
    def color(self) -> str:
        return {
            RunOutcome.VICTORY: "bold green",
            RunOutcome.DEFEAT: "bold red",
        }.get(self, "bold yellow")

    def colorize(self, message: str) -> str:
        return f"[{self.color}]{message}[/]"
