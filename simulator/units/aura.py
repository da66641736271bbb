"""
Aura module for the simulator.

Defines the Aura model, the percentage-based modifier item a unit may equip.
"""

from pydantic import BaseModel, Field


class Aura(BaseModel):
    """
    A modifier item granting percentage bonuses to a unit's stats.

    Only attack, vitality and speed feed the battle formulas; the remaining
    fields are carried so rosters round-trip without losing data.
    """

    name: str = Field(
        "",
        description="The display name of the aura.",
    )
    attack: float = Field(
        0.0,
        description="Percentage added to base attack.",
    )
    vitality: float = Field(
        0.0,
        description="Percentage added to base vitality.",
    )
    speed: float = Field(
        0.0,
        description="Percentage added to base speed.",
    )
    focus: float = Field(0.0, description="Percentage bonus to focus.")
    accuracy: float = Field(0.0, description="Percentage bonus to accuracy.")
    defense: float = Field(0.0, description="Percentage bonus to defense.")
    resilience: float = Field(0.0, description="Percentage bonus to resilience.")
    element: str | None = Field(None, description="Elemental affinity, if any.")

    def __str__(self) -> str:
        return (
            f"{self.name or 'Aura'} "
            f"(ATK {self.attack:+g}%, VIT {self.vitality:+g}%, SPD {self.speed:+g}%)"
        )
