"""
Battle result module for the simulator.

Defines the terminal result handed to reporting collaborators: the outcome,
the number of stages cleared and per-unit cumulative statistics.
"""

from core.constants import RunOutcome, Side
from pydantic import BaseModel, Field
from units.main import Unit
from units.unit_stats import CombatRecord


class UnitReport(BaseModel):
    """Final state and statistics of one unit."""

    uid: str
    name: str
    side: Side
    hp: int = Field(ge=0)
    max_hp: int = Field(ge=1)
    alive: bool
    actions: int = Field(0, ge=0, description="Number of actions the unit took.")
    record: CombatRecord

    @classmethod
    def from_unit(cls, unit: Unit) -> "UnitReport":
        return cls(
            uid=unit.uid,
            name=unit.name,
            side=unit.side,
            hp=unit.hp,
            max_hp=unit.HP_MAX,
            alive=unit.is_alive(),
            actions=unit.action_counter,
            record=unit.record.model_copy(deep=True),
        )


class BattleResult(BaseModel):
    """The result of a dungeon run, final once the run has ended."""

    outcome: RunOutcome
    stages_cleared: int = Field(ge=0)
    total_stages: int = Field(ge=1)
    final_stage: int = Field(ge=1)
    ticks: int = Field(ge=0)
    timed_out: bool = False
    units: list[UnitReport] = Field(default_factory=list)

    @property
    def is_victory(self) -> bool:
        return self.outcome == RunOutcome.VICTORY

    def unit(self, uid: str) -> UnitReport | None:
        """Returns the report of the unit with the given id, if any."""
        return next((report for report in self.units if report.uid == uid), None)

    def side(self, side: Side) -> list[UnitReport]:
        return [report for report in self.units if report.side == side]
