"""
Base effect module for the simulator.

Defines the StatusEffect model: a timed modifier attached to a unit, keyed
by its kind, with a magnitude and a remaining duration in whole turns.
"""

from core.constants import StatusKind
from pydantic import BaseModel, Field


class StatusEffect(BaseModel):
    """
    A timed status attached to a unit.

    For damage-over-time kinds the magnitude is the damage dealt on each of
    the owner's turns; for debuff kinds it is the percentage taken off the
    stat. At most one effect of each kind is active on a unit.
    """

    name: str = Field(
        description="The display name of the effect.",
    )
    kind: StatusKind = Field(
        description="The kind of the effect, unique per unit.",
    )
    magnitude: int = Field(
        ge=0,
        description="Damage per turn (DoT) or stat percentage (debuff).",
    )
    duration: int = Field(
        description="Remaining duration in the owner's turns.",
    )
    source_id: str | None = Field(
        default=None,
        description="Identifier of the unit that applied the effect.",
    )

    @property
    def is_harmful(self) -> bool:
        return self.kind.is_harmful

    @property
    def is_damage_over_time(self) -> bool:
        return self.kind.is_damage_over_time

    @property
    def is_expired(self) -> bool:
        return self.duration <= 0

    @property
    def color(self) -> str:
        return self.kind.color

    @property
    def emoji(self) -> str:
        return self.kind.emoji

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return self.colorize(self.name)

    def colorize(self, message: str) -> str:
        """Applies effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    def model_post_init(self, _) -> None:
        if self.kind in (StatusKind.METER_DRAIN, StatusKind.CLEANSE_MARKER):
            raise ValueError(f"{self.kind} is instantaneous and cannot be attached.")
        if self.duration <= 0:
            raise ValueError(
                f"Duration must be a positive integer for {self.name}, got {self.duration}."
            )

    def __str__(self) -> str:
        return f"{self.emoji} {self.name} ({self.magnitude}, {self.duration}t)"
